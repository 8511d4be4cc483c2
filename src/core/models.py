"""
Domain models for vulnerability findings.

VulnerabilityRecord is what the vulnerability database returns and is
immutable. Finding is created by the detection stage, enriched in place by the
Enricher, and read (never modified) by the filters.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from core.severity import Severity


def _parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def _format_timestamp(value: datetime) -> str:
    text = value.isoformat()
    if text.endswith("+00:00"):
        text = text[:-6] + "Z"
    return text


def _parse_vendor_severity(value: Any) -> Severity:
    """Vendor ratings are stored as integers, but names are accepted too."""
    if isinstance(value, Severity):
        return value
    if isinstance(value, int):
        return Severity(value)
    return Severity.parse(value)


@dataclass(frozen=True)
class CVSS:
    """
    CVSS vectors and scores published by one source family.

    Attributes:
        v2_vector: CVSS v2 vector string
        v2_score: CVSS v2 base score
        v3_vector: CVSS v3.x vector string
        v3_score: CVSS v3.x base score
    """

    v2_vector: str = ""
    v2_score: float = 0.0
    v3_vector: str = ""
    v3_score: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization, omitting empty fields."""
        data = {}
        if self.v2_vector:
            data["V2Vector"] = self.v2_vector
        if self.v3_vector:
            data["V3Vector"] = self.v3_vector
        if self.v2_score:
            data["V2Score"] = self.v2_score
        if self.v3_score:
            data["V3Score"] = self.v3_score
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CVSS":
        """Create from dictionary."""
        return cls(
            v2_vector=data.get("V2Vector", ""),
            v2_score=float(data.get("V2Score", 0.0)),
            v3_vector=data.get("V3Vector", ""),
            v3_score=float(data.get("V3Score", 0.0)),
        )


def _cvss_from_dict(data: Optional[dict]) -> dict[str, CVSS]:
    return {source: CVSS.from_dict(entry) for source, entry in (data or {}).items()}


@dataclass(frozen=True)
class VulnerabilityRecord:
    """
    Vulnerability details as stored in the vulnerability database.

    Attributes:
        title: Short title
        description: Long description
        severity: Top-level severity name, if the database carries one
        vendor_severity: Severity rating per source family
        cvss: CVSS data per source family
        references: Reference URLs
        cwe_ids: CWE identifiers (e.g. "CWE-79")
        published_date: When the advisory was published
        last_modified_date: When the advisory was last modified
    """

    title: str = ""
    description: str = ""
    severity: Optional[str] = None
    vendor_severity: dict[str, Severity] = field(default_factory=dict)
    cvss: dict[str, CVSS] = field(default_factory=dict)
    references: list[str] = field(default_factory=list)
    cwe_ids: list[str] = field(default_factory=list)
    published_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VulnerabilityRecord":
        """
        Create from a database JSON document.

        Raises:
            InvalidSeverityException: If a vendor severity name is not canonical
            ValueError: If a vendor severity number or a date is invalid
        """
        return cls(
            title=data.get("Title", ""),
            description=data.get("Description", ""),
            severity=data.get("Severity") or None,
            vendor_severity={
                source: _parse_vendor_severity(value)
                for source, value in (data.get("VendorSeverity") or {}).items()
            },
            cvss=_cvss_from_dict(data.get("CVSS")),
            references=list(data.get("References") or []),
            cwe_ids=list(data.get("CweIDs") or []),
            published_date=_parse_timestamp(data.get("PublishedDate")),
            last_modified_date=_parse_timestamp(data.get("LastModifiedDate")),
        )


@dataclass
class VulnerabilityMetadata:
    """Descriptive metadata copied onto a finding during enrichment."""

    title: str = ""
    description: str = ""
    severity: str = ""
    references: list[str] = field(default_factory=list)
    cwe_ids: list[str] = field(default_factory=list)
    cvss: dict[str, CVSS] = field(default_factory=dict)
    published_date: Optional[datetime] = None
    last_modified_date: Optional[datetime] = None


@dataclass
class Finding:
    """
    One detected (package, version, vulnerability) match.

    Attributes:
        identifier: Vulnerability identifier (e.g. "CVE-2019-0001")
        pkg_name: Affected package name
        installed_version: Installed package version
        fixed_version: First fixed version, "" when no fix is available
        metadata: Vulnerability metadata, filled in by the Enricher
        severity_source: Source family whose rating was used, "" if none
        primary_url: Canonical advisory URL, "" until enriched
    """

    identifier: str
    pkg_name: str = ""
    installed_version: str = ""
    fixed_version: str = ""
    metadata: VulnerabilityMetadata = field(default_factory=VulnerabilityMetadata)
    severity_source: str = ""
    primary_url: str = ""

    @property
    def severity(self) -> str:
        """Resolved severity name ("" before enrichment)."""
        return self.metadata.severity

    @property
    def is_fixed(self) -> bool:
        """Whether a fixed version is available."""
        return self.fixed_version != ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization and policy input, omitting empty fields."""
        data: dict[str, Any] = {"VulnerabilityID": self.identifier}
        optional = {
            "PkgName": self.pkg_name,
            "InstalledVersion": self.installed_version,
            "FixedVersion": self.fixed_version,
            "SeveritySource": self.severity_source,
            "PrimaryURL": self.primary_url,
            "Title": self.metadata.title,
            "Description": self.metadata.description,
            "Severity": self.metadata.severity,
            "CweIDs": list(self.metadata.cwe_ids),
            "CVSS": {source: cvss.to_dict() for source, cvss in self.metadata.cvss.items()},
            "References": list(self.metadata.references),
        }
        data.update({key: value for key, value in optional.items() if value})
        if self.metadata.published_date:
            data["PublishedDate"] = _format_timestamp(self.metadata.published_date)
        if self.metadata.last_modified_date:
            data["LastModifiedDate"] = _format_timestamp(self.metadata.last_modified_date)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Finding":
        """Create from dictionary (detected or previously enriched findings)."""
        return cls(
            identifier=data["VulnerabilityID"],
            pkg_name=data.get("PkgName", ""),
            installed_version=data.get("InstalledVersion", ""),
            fixed_version=data.get("FixedVersion", ""),
            metadata=VulnerabilityMetadata(
                title=data.get("Title", ""),
                description=data.get("Description", ""),
                severity=data.get("Severity", ""),
                references=list(data.get("References") or []),
                cwe_ids=list(data.get("CweIDs") or []),
                cvss=_cvss_from_dict(data.get("CVSS")),
                published_date=_parse_timestamp(data.get("PublishedDate")),
                last_modified_date=_parse_timestamp(data.get("LastModifiedDate")),
            ),
            severity_source=data.get("SeveritySource", ""),
            primary_url=data.get("PrimaryURL", ""),
        )


__all__ = [
    "CVSS",
    "VulnerabilityRecord",
    "VulnerabilityMetadata",
    "Finding",
]
