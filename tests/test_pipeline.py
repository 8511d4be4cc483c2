"""Tests for the enrich-and-filter entry point."""

import pytest

from core import sources
from core.exceptions import PolicyEvaluationException
from core.models import Finding, VulnerabilityRecord
from core.pipeline import ResultClient, enrich_and_filter
from core.severity import Severity
from integrations.policy import CallablePolicy

from conftest import FakeVulnerabilityDB


@pytest.fixture
def db():
    """Database with one record per severity of interest."""
    return FakeVulnerabilityDB(records={
        "CVE-2019-0001": VulnerabilityRecord(severity="LOW"),
        "CVE-2019-0002": VulnerabilityRecord(vendor_severity={sources.ALPINE: Severity.CRITICAL}),
        "CVE-2019-0003": VulnerabilityRecord(severity="HIGH", vendor_severity={sources.NVD: Severity.MEDIUM}),
    })


@pytest.fixture
def detected():
    """Freshly detected findings, not yet enriched."""
    return [
        Finding(identifier="CVE-2019-0001", pkg_name="musl", installed_version="1.1.24", fixed_version="1.1.24-r1"),
        Finding(identifier="CVE-2019-0002", pkg_name="busybox", installed_version="1.31.1", fixed_version=""),
        Finding(identifier="CVE-2019-0003", pkg_name="busybox", installed_version="1.31.1", fixed_version="1.31.1-r9"),
        Finding(identifier="CVE-2019-0004", pkg_name="zlib", installed_version="1.2.11", fixed_version="1.2.12"),
    ]


class TestEnrichAndFilter:
    """Tests for enrich_and_filter()."""

    def test_enriches_then_filters(self, db, detected):
        result = enrich_and_filter(db, detected, sources.ALPINE, list(Severity))

        assert [(f.pkg_name, f.identifier, f.severity) for f in result] == [
            ("busybox", "CVE-2019-0002", "CRITICAL"),
            ("busybox", "CVE-2019-0003", "MEDIUM"),
            ("musl", "CVE-2019-0001", "LOW"),
            ("zlib", "CVE-2019-0004", ""),
        ]
        assert result[0].severity_source == sources.ALPINE
        assert result[1].severity_source == sources.NVD

    def test_unenriched_finding_is_unknown_severity(self, db, detected):
        """Test a finding missing from the database is filtered as UNKNOWN."""
        result = enrich_and_filter(db, detected, sources.ALPINE, [Severity.UNKNOWN])

        assert [f.identifier for f in result] == ["CVE-2019-0004"]

    def test_all_filters(self, db, detected):
        policy = CallablePolicy(lambda data: data["PkgName"] == "musl")

        result = enrich_and_filter(
            db,
            detected,
            sources.ALPINE,
            [Severity.LOW, Severity.MEDIUM, Severity.CRITICAL],
            ignore_unfixed=True,
            ignore_ids={"CVE-2019-0004"},
            policy=policy,
        )

        assert [f.identifier for f in result] == ["CVE-2019-0003"]

    def test_policy_failure_propagates(self, db, detected):
        def broken(data):
            raise ZeroDivisionError("division by zero")

        with pytest.raises(PolicyEvaluationException):
            enrich_and_filter(db, detected, sources.ALPINE, list(Severity), policy=CallablePolicy(broken))


class TestResultClient:
    """Tests for ResultClient."""

    def test_fill_info_in_place(self, db, detected):
        ResultClient(db).fill_info(detected, sources.ALPINE)

        assert detected[0].severity == "LOW"
        assert detected[0].primary_url == "https://avd.aquasec.com/nvd/cve-2019-0001"

    def test_filter_with_files(self, db, detected, ignore_file, tmp_path):
        policy_path = tmp_path / "drop_busybox.py"
        policy_path.write_text("def ignore(input):\n    return input.get('PkgName') == 'busybox'\n")
        client = ResultClient(db)
        client.fill_info(detected, sources.ALPINE)

        result = client.filter_with_files(
            detected,
            list(Severity),
            ignore_file=ignore_file,
            policy_file=policy_path,
        )

        assert [f.identifier for f in result] == ["CVE-2019-0004"]

    def test_filter_with_missing_ignore_file(self, db, detected, tmp_path):
        client = ResultClient(db)

        result = client.filter_with_files(detected, list(Severity), ignore_file=tmp_path / "absent")

        assert len(result) == 4
