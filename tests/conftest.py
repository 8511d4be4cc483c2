"""
Pytest fixtures and configuration for vulnsieve tests.

Provides shared fixtures and test utilities across the test suite.
"""

import pytest
from datetime import datetime, timezone

from core.exceptions import LookupException
from core.interfaces import VulnerabilityLookup
from core.models import CVSS, Finding, VulnerabilityMetadata, VulnerabilityRecord
from core.severity import Severity


class FakeVulnerabilityDB(VulnerabilityLookup):
    """In-memory database that records every lookup."""

    def __init__(self, records=None, errors=None):
        self.records = records or {}
        self.errors = errors or {}
        self.calls = []

    def get_vulnerability(self, identifier):
        self.calls.append(identifier)
        if identifier in self.errors:
            raise self.errors[identifier]
        return self.records.get(identifier)


def make_finding(identifier, pkg_name="foo", severity="", fixed_version="1.2.4"):
    """Build a finding as the filters see it after enrichment."""
    return Finding(
        identifier=identifier,
        pkg_name=pkg_name,
        installed_version="1.2.3",
        fixed_version=fixed_version,
        metadata=VulnerabilityMetadata(severity=severity),
    )


@pytest.fixture
def sample_record():
    """Sample database record with vendor ratings and CVSS data."""
    return VulnerabilityRecord(
        title="dos",
        description="dos vulnerability",
        severity="MEDIUM",
        vendor_severity={"redhat": Severity.LOW},
        cvss={
            "nvd": CVSS(
                v2_vector="AV:N/AC:L/Au:N/C:P/I:P/A:P",
                v2_score=4.5,
                v3_vector="CVSS:3.0/PR:N/UI:N/S:U/C:H/I:H/A:H",
                v3_score=5.6,
            ),
        },
        references=["http://example.com"],
        cwe_ids=["CWE-311"],
        published_date=datetime(2001, 1, 1, 1, 1, tzinfo=timezone.utc),
        last_modified_date=datetime(2020, 1, 1, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def fake_db():
    """Empty fake database; tests add records as needed."""
    return FakeVulnerabilityDB()


@pytest.fixture
def failing_db():
    """Fake database whose only record lookup fails."""
    return FakeVulnerabilityDB(errors={"CVE-2019-0004": LookupException("CVE-2019-0004", "failed")})


@pytest.fixture
def mixed_findings():
    """Findings covering every filter stage."""
    return [
        make_finding("CVE-2019-0001", "foo", "LOW"),
        make_finding("CVE-2019-0002", "bar", "CRITICAL"),
        make_finding("CVE-2018-0001", "baz", "HIGH", fixed_version=""),
        make_finding("CVE-2018-0001", "bar", "CRITICAL", fixed_version=""),
        make_finding("CVE-2018-0002", "bar", "", fixed_version=""),
    ]


@pytest.fixture
def policy_file(tmp_path):
    """Policy module ignoring CVE-2019-0002 and CVE-2019-0003 in foo."""
    path = tmp_path / "policy.py"
    path.write_text(
        "IGNORED = {'CVE-2019-0002', 'CVE-2019-0003'}\n"
        "\n"
        "def ignore(input):\n"
        "    return input['PkgName'] == 'foo' and input['VulnerabilityID'] in IGNORED\n"
    )
    return path


@pytest.fixture
def ignore_file(tmp_path):
    """Ignore file with comments and blank lines."""
    path = tmp_path / ".vulnignore"
    path.write_text(
        "# Accept the risk for these\n"
        "CVE-2019-0001\n"
        "\n"
        "  CVE-2019-0002  \n"
    )
    return path
