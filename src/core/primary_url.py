"""
Primary URL resolution.

Picks one canonical advisory URL for a finding from its identifier, the
source family its severity came from, and the database reference list.
"""

import re
from typing import Optional, Sequence
from urllib.parse import urlparse

from constants import (
    DEBIAN_TRACKER_URL_TEMPLATE,
    GITHUB_ADVISORY_URL_TEMPLATE,
    NPM_ADVISORY_HOST,
    NVD_URL_TEMPLATE,
    RUSTSEC_URL_TEMPLATE,
)
from core import sources

CVE_PATTERN = re.compile(r"^CVE-\d{4}-\d{4,}$", re.IGNORECASE)


def is_cve_id(identifier: str) -> bool:
    """Check whether an identifier has the shape CVE-YYYY-NNNN..."""
    return bool(CVE_PATTERN.match(identifier or ""))


def _first_reference(references: Sequence[str]) -> str:
    return references[0] if references else ""


def _first_reference_on_host(references: Sequence[str], host: str) -> Optional[str]:
    for ref in references:
        try:
            hostname = urlparse(ref).hostname
        except ValueError:
            continue
        if hostname == host:
            return ref
    return None


def get_primary_url(
    identifier: str,
    references: Optional[Sequence[str]],
    source: Optional[str],
) -> str:
    """
    Resolve the canonical URL for a vulnerability.

    CVE identifiers always resolve to the NVD advisory page. Otherwise the
    source family decides: RustSec, GitHub advisory and Debian feeds have
    fixed advisory pages, npm prefers an npmjs.com reference, and every other
    family uses the first reference.

    Args:
        identifier: Vulnerability identifier
        references: Reference URLs from the database (may be empty)
        source: Source family, "" or None when unknown

    Returns:
        Primary URL, or "" if nothing suitable exists

    Examples:
        >>> get_primary_url("CVE-2014-8484", [], "oracle-oval")
        'https://avd.aquasec.com/nvd/cve-2014-8484'
        >>> get_primary_url("RUSTSEC-2018-0017", [], "rust-advisory-db")
        'https://rustsec.org/advisories/RUSTSEC-2018-0017'
    """
    references = references or []

    if is_cve_id(identifier):
        return NVD_URL_TEMPLATE.format(id=identifier.lower())

    if source == sources.RUST_ADVISORY_DB:
        return RUSTSEC_URL_TEMPLATE.format(id=identifier)
    if source in sources.GITHUB_ADVISORY_FAMILIES:
        return GITHUB_ADVISORY_URL_TEMPLATE.format(id=identifier)
    if source in sources.DEBIAN_FAMILIES:
        return DEBIAN_TRACKER_URL_TEMPLATE.format(id=identifier)
    if source == sources.NODEJS_SECURITY_WG:
        return _first_reference_on_host(references, NPM_ADVISORY_HOST) or ""

    # SUSE and everything without a dedicated advisory page
    return _first_reference(references)


__all__ = [
    "get_primary_url",
    "is_cve_id",
]
