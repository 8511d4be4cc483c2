"""
vulnsieve - Vulnerability result enrichment and filtering

Enriches detected vulnerability findings with database metadata, resolves
their authoritative severity, and filters them for reporting.
"""

__version__ = "0.3.0"

from core.models import (
    CVSS,
    Finding,
    VulnerabilityMetadata,
    VulnerabilityRecord,
)

__all__ = [
    "CVSS",
    "Finding",
    "VulnerabilityMetadata",
    "VulnerabilityRecord",
]
