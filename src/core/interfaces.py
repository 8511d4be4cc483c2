"""
Collaborator interfaces for enrichment and filtering.

Defines the contracts for the vulnerability database and the policy
evaluator, so production implementations and test fakes can be swapped
freely.
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from core.models import Finding, VulnerabilityRecord


class VulnerabilityLookup(ABC):
    """
    Abstract base class for vulnerability databases.

    Lookups are synchronous key-value reads by vulnerability identifier.
    """

    @abstractmethod
    def get_vulnerability(self, identifier: str) -> Optional[VulnerabilityRecord]:
        """
        Look up a vulnerability by identifier.

        Args:
            identifier: Vulnerability identifier (e.g. "CVE-2019-0001")

        Returns:
            VulnerabilityRecord if found, None otherwise

        Raises:
            LookupException: If the backend fails
        """
        pass


class PolicyEvaluator(ABC):
    """
    Abstract base class for ignore policies.

    A policy decides, per finding, whether the finding should be dropped
    from the results.
    """

    @abstractmethod
    def should_ignore(self, finding: Finding) -> bool:
        """
        Decide whether a finding is ignored.

        Args:
            finding: Enriched finding

        Returns:
            True if the finding should be excluded

        Raises:
            PolicyEvaluationException: If the policy fails to evaluate
        """
        pass

    def evaluate(self, findings: Sequence[Finding]) -> set[str]:
        """
        Evaluate the policy against a batch of findings.

        Args:
            findings: Enriched findings

        Returns:
            Identifiers of the findings the policy excludes

        Raises:
            PolicyEvaluationException: If the policy fails on any finding
        """
        return {f.identifier for f in findings if self.should_ignore(f)}


__all__ = [
    "VulnerabilityLookup",
    "PolicyEvaluator",
]
