"""
Finding enrichment from the vulnerability database.

Fills in metadata, the authoritative severity and the primary URL of each
detected finding.
"""

import logging
from typing import Optional, Sequence

from core.interfaces import VulnerabilityLookup
from core.models import Finding, VulnerabilityRecord
from core.primary_url import get_primary_url
from core.severity import Severity, parse_or_unknown, vendor_priority

logger = logging.getLogger(__name__)


def resolve_severity(record: VulnerabilityRecord, report_type: Optional[str]) -> tuple[Severity, str]:
    """
    Resolve the authoritative severity of a database record.

    A top-level severity is used as-is when the record carries no vendor
    ratings. Otherwise the report type's vendor priority list is walked and
    the first vendor with a rating wins. When no listed vendor rated the
    vulnerability, the top-level severity (or UNKNOWN) is used.

    Args:
        record: Database record
        report_type: Ecosystem the finding was detected in

    Returns:
        Tuple of (severity, source_family); source_family is "" when the
        top-level severity was used
    """
    top_level = parse_or_unknown(record.severity)

    if top_level != Severity.UNKNOWN and not record.vendor_severity:
        return top_level, ""

    for source in vendor_priority(report_type):
        if source in record.vendor_severity:
            return record.vendor_severity[source], source

    return top_level, ""


class Enricher:
    """
    Enriches findings in place with vulnerability database details.

    Each finding costs exactly one database lookup. A failed lookup leaves
    that finding untouched and never interrupts the batch.
    """

    def __init__(self, db: VulnerabilityLookup):
        """
        Initialize enricher.

        Args:
            db: Vulnerability database to query
        """
        self.db = db

    def enrich(self, findings: Sequence[Finding], report_type: Optional[str]) -> None:
        """
        Enrich findings in place.

        Args:
            findings: Detected findings to enrich
            report_type: Ecosystem the findings were detected in (e.g. "alpine", "npm")
        """
        enriched = 0
        for finding in findings:
            record = self._lookup(finding.identifier)
            if record is None:
                continue
            self._apply(finding, record, report_type)
            enriched += 1

        logger.debug(f"Enriched {enriched}/{len(findings)} findings ({report_type or 'no report type'})")

    def _lookup(self, identifier: str) -> Optional[VulnerabilityRecord]:
        # TODO: return skipped identifiers so callers can report lookup failures
        try:
            record = self.db.get_vulnerability(identifier)
        except Exception as e:
            logger.debug(f"Skipping enrichment of {identifier}: {e}")
            return None

        if record is None:
            logger.debug(f"{identifier} not found in vulnerability database")
        return record

    def _apply(self, finding: Finding, record: VulnerabilityRecord, report_type: Optional[str]) -> None:
        severity, source = resolve_severity(record, report_type)
        primary_url = get_primary_url(finding.identifier, record.references, source)

        metadata = finding.metadata
        metadata.title = record.title
        metadata.description = record.description
        metadata.references = list(record.references)
        metadata.cwe_ids = list(record.cwe_ids)
        metadata.cvss = dict(record.cvss)
        metadata.published_date = record.published_date
        metadata.last_modified_date = record.last_modified_date
        metadata.severity = severity.name

        finding.severity_source = source
        finding.primary_url = primary_url


__all__ = [
    "Enricher",
    "resolve_severity",
]
