"""Core enrichment and filtering logic for vulnerability findings."""

from core.models import (
    CVSS,
    Finding,
    VulnerabilityMetadata,
    VulnerabilityRecord,
)
from core.severity import Severity
from core.enricher import Enricher
from core.filters import filter_findings
from core.pipeline import ResultClient, enrich_and_filter

__all__ = [
    "CVSS",
    "Finding",
    "VulnerabilityMetadata",
    "VulnerabilityRecord",
    "Severity",
    "Enricher",
    "filter_findings",
    "ResultClient",
    "enrich_and_filter",
]
