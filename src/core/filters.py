"""
Filter pipeline for enriched findings.

Stages run in a fixed order: severity set, unfixed, ignore list, policy.
Survivors are sorted by package name, then severity (most severe first),
then identifier. Filters never modify the findings they are given.
"""

import logging
from typing import Collection, Iterable, Optional

from core.exceptions import PolicyEvaluationException
from core.interfaces import PolicyEvaluator
from core.models import Finding
from core.severity import Severity, parse_or_unknown

logger = logging.getLogger(__name__)


def filter_by_severity(findings: Iterable[Finding], severities: Collection[Severity]) -> list[Finding]:
    """Keep findings whose severity is one of the allowed severities."""
    allowed = set(severities)
    return [f for f in findings if parse_or_unknown(f.severity) in allowed]


def filter_unfixed(findings: Iterable[Finding]) -> list[Finding]:
    """Drop findings without an available fix."""
    return [f for f in findings if f.is_fixed]


def filter_ignored(findings: Iterable[Finding], ignore_ids: Collection[str]) -> list[Finding]:
    """Drop findings whose identifier is in the ignore list."""
    return [f for f in findings if f.identifier not in ignore_ids]


def filter_by_policy(findings: Iterable[Finding], policy: PolicyEvaluator) -> list[Finding]:
    """
    Drop findings the policy ignores.

    Args:
        findings: Findings to evaluate
        policy: Policy evaluator

    Returns:
        Findings the policy keeps

    Raises:
        PolicyEvaluationException: If the policy fails on any finding
    """
    kept = []
    for finding in findings:
        try:
            ignored = policy.should_ignore(finding)
        except PolicyEvaluationException:
            raise
        except Exception as e:
            raise PolicyEvaluationException(str(e), finding.identifier) from e

        if ignored:
            logger.debug(f"Policy ignored {finding.identifier} in {finding.pkg_name}")
        else:
            kept.append(finding)
    return kept


def sort_key(finding: Finding) -> tuple[str, int, str]:
    """Sort key: package ascending, severity descending, identifier ascending."""
    return (finding.pkg_name, -parse_or_unknown(finding.severity), finding.identifier)


def sort_findings(findings: Iterable[Finding]) -> list[Finding]:
    """Return findings in reporting order."""
    return sorted(findings, key=sort_key)


def filter_findings(
    findings: Iterable[Finding],
    severities: Collection[Severity],
    ignore_unfixed: bool = False,
    ignore_ids: Optional[Collection[str]] = None,
    policy: Optional[PolicyEvaluator] = None,
) -> list[Finding]:
    """
    Apply all filters and sort the survivors.

    Args:
        findings: Enriched findings
        severities: Severities to keep (absent or unrecognized severities count as UNKNOWN)
        ignore_unfixed: Drop findings without an available fix
        ignore_ids: Vulnerability identifiers to drop
        policy: Optional policy evaluator

    Returns:
        Surviving findings in reporting order (empty list if none survive)

    Raises:
        PolicyEvaluationException: If the policy fails; no findings are returned
    """
    result = filter_by_severity(findings, severities)
    if ignore_unfixed:
        result = filter_unfixed(result)
    if ignore_ids:
        result = filter_ignored(result, ignore_ids)
    if policy is not None and result:
        result = filter_by_policy(result, policy)
    return sort_findings(result)


__all__ = [
    "filter_findings",
    "filter_by_severity",
    "filter_unfixed",
    "filter_ignored",
    "filter_by_policy",
    "sort_findings",
    "sort_key",
]
