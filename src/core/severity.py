"""
Severity scale and per-ecosystem vendor priority tables.

Severity levels are totally ordered (UNKNOWN < LOW < MEDIUM < HIGH < CRITICAL)
and round-trip through their canonical upper-case names. The priority tables
decide which vendor's rating wins when a database record carries several.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import Optional

from core import sources
from core.exceptions import InvalidSeverityException


class Severity(IntEnum):
    """Vulnerability severity levels, ordered from least to most severe."""

    UNKNOWN = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def __str__(self) -> str:
        return self.name

    @classmethod
    def parse(cls, text: str) -> "Severity":
        """
        Parse a canonical severity name.

        Args:
            text: Severity name, case-sensitive (e.g. "HIGH")

        Returns:
            Matching Severity

        Raises:
            InvalidSeverityException: If text is not a canonical name
        """
        if isinstance(text, str) and text in cls.__members__:
            return cls.__members__[text]
        raise InvalidSeverityException(text)


def compare(a: Severity, b: Severity) -> int:
    """Return -1, 0 or 1 as a is less than, equal to, or greater than b."""
    return (a > b) - (a < b)


def parse_or_unknown(text: Optional[str]) -> Severity:
    """Parse severity text, treating absent or unrecognized text as UNKNOWN."""
    if not text:
        return Severity.UNKNOWN
    try:
        return Severity.parse(text)
    except InvalidSeverityException:
        return Severity.UNKNOWN


DEFAULT_VENDOR_PRIORITY = (sources.NVD,)
"""Used for report types without vendor ratings of their own."""


def _build_priority_table() -> MappingProxyType:
    table = {os_type: (os_type, sources.NVD) for os_type in sources.OS_REPORT_TYPES}
    table.update({
        sources.CENTOS: (sources.REDHAT, sources.NVD),
        sources.NPM: (sources.NODEJS_SECURITY_WG, sources.GHSA_NPM, sources.NVD),
        sources.YARN: (sources.NODEJS_SECURITY_WG, sources.GHSA_NPM, sources.NVD),
        sources.NUGET: (sources.GHSA_NUGET, sources.NVD),
        sources.PIP: (sources.PYTHON_SAFETY_DB, sources.GHSA_PIP, sources.NVD),
        sources.PIPENV: (sources.PYTHON_SAFETY_DB, sources.GHSA_PIP, sources.NVD),
        sources.POETRY: (sources.PYTHON_SAFETY_DB, sources.GHSA_PIP, sources.NVD),
        sources.BUNDLER: (sources.RUBY_ADVISORY_DB, sources.GHSA_RUBYGEMS, sources.NVD),
        sources.CARGO: (sources.RUST_ADVISORY_DB, sources.NVD),
        sources.COMPOSER: (sources.PHP_SECURITY_ADVISORIES, sources.GHSA_COMPOSER, sources.NVD),
        sources.JAR: (sources.GHSA_MAVEN, sources.NVD),
    })
    return MappingProxyType(table)


VENDOR_PRIORITY = _build_priority_table()
"""Report type -> source families, highest priority first."""


def vendor_priority(report_type: Optional[str]) -> tuple[str, ...]:
    """
    Get the vendor priority list for a report type.

    Args:
        report_type: Ecosystem the finding was detected in (e.g. "ubuntu", "npm")

    Returns:
        Source families in priority order; (nvd,) for unmapped report types
    """
    return VENDOR_PRIORITY.get(report_type or "", DEFAULT_VENDOR_PRIORITY)


__all__ = [
    "Severity",
    "compare",
    "parse_or_unknown",
    "vendor_priority",
    "VENDOR_PRIORITY",
    "DEFAULT_VENDOR_PRIORITY",
]
