"""
Enrichment and filtering entry point.

Composes the Enricher and the filter pipeline into the single call the
scanner uses after detection.
"""

import logging
from pathlib import Path
from typing import Collection, Optional, Sequence

from core.enricher import Enricher
from core.filters import filter_findings
from core.interfaces import PolicyEvaluator, VulnerabilityLookup
from core.models import Finding
from core.severity import Severity

logger = logging.getLogger(__name__)


class ResultClient:
    """
    Enriches and filters detected findings.

    The database handle and policy are owned by the caller; the client never
    closes or modifies them.
    """

    def __init__(self, db: VulnerabilityLookup):
        """
        Initialize result client.

        Args:
            db: Vulnerability database to enrich from
        """
        self.enricher = Enricher(db)

    def fill_info(self, findings: Sequence[Finding], report_type: Optional[str]) -> None:
        """Enrich findings in place (see Enricher.enrich)."""
        self.enricher.enrich(findings, report_type)

    def filter(
        self,
        findings: Sequence[Finding],
        severities: Collection[Severity],
        ignore_unfixed: bool = False,
        ignore_ids: Optional[Collection[str]] = None,
        policy: Optional[PolicyEvaluator] = None,
    ) -> list[Finding]:
        """Filter and sort findings (see filters.filter_findings)."""
        return filter_findings(findings, severities, ignore_unfixed, ignore_ids, policy)

    def filter_with_files(
        self,
        findings: Sequence[Finding],
        severities: Collection[Severity],
        ignore_unfixed: bool = False,
        ignore_file: Optional[Path] = None,
        policy_file: Optional[Path] = None,
    ) -> list[Finding]:
        """
        Filter findings using an ignore file and a policy file.

        Args:
            findings: Enriched findings
            severities: Severities to keep
            ignore_unfixed: Drop findings without an available fix
            ignore_file: Ignore file path (missing file ignores nothing)
            policy_file: Python policy module path

        Returns:
            Surviving findings in reporting order

        Raises:
            ConfigurationException: If the ignore file cannot be read
            PolicyEvaluationException: If the policy cannot be loaded or fails
        """
        from integrations.ignore_file import load_ignore_file
        from integrations.policy import PythonPolicyModule

        ignore_ids = load_ignore_file(ignore_file) if ignore_file else set()
        policy = PythonPolicyModule.load_from_file(policy_file) if policy_file else None
        return self.filter(findings, severities, ignore_unfixed, ignore_ids, policy)

    def enrich_and_filter(
        self,
        findings: Sequence[Finding],
        report_type: Optional[str],
        severities: Collection[Severity],
        ignore_unfixed: bool = False,
        ignore_ids: Optional[Collection[str]] = None,
        policy: Optional[PolicyEvaluator] = None,
    ) -> list[Finding]:
        """
        Enrich findings, then filter and sort them.

        Args:
            findings: Detected findings (enriched in place)
            report_type: Ecosystem the findings were detected in
            severities: Severities to keep
            ignore_unfixed: Drop findings without an available fix
            ignore_ids: Vulnerability identifiers to drop
            policy: Optional policy evaluator

        Returns:
            Surviving findings in reporting order

        Raises:
            PolicyEvaluationException: If the policy fails
        """
        self.fill_info(findings, report_type)
        survivors = self.filter(findings, severities, ignore_unfixed, ignore_ids, policy)
        logger.info(f"{len(survivors)} of {len(findings)} findings reported")
        return survivors


def enrich_and_filter(
    db: VulnerabilityLookup,
    findings: Sequence[Finding],
    report_type: Optional[str],
    severities: Collection[Severity],
    ignore_unfixed: bool = False,
    ignore_ids: Optional[Collection[str]] = None,
    policy: Optional[PolicyEvaluator] = None,
) -> list[Finding]:
    """Enrich then filter findings with a one-off ResultClient."""
    return ResultClient(db).enrich_and_filter(
        findings, report_type, severities, ignore_unfixed, ignore_ids, policy
    )


__all__ = [
    "ResultClient",
    "enrich_and_filter",
]
