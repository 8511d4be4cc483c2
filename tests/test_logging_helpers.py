"""Tests for CLI error reporting helpers."""

import logging

from core.exceptions import LookupException, PolicyEvaluationException, ValidationException
from utils.logging_helpers import describe_error, log_error_section


class TestDescribeError:
    """Tests for describe_error()."""

    def test_plain_exception(self):
        assert describe_error(RuntimeError("boom")) == ["RuntimeError: boom"]

    def test_identifier_is_listed(self):
        lines = describe_error(LookupException("CVE-2019-0001", "timed out"))

        assert lines == [
            "LookupException: Failed to look up CVE-2019-0001: timed out",
            "Vulnerability: CVE-2019-0001",
        ]

    def test_policy_error_without_identifier(self):
        lines = describe_error(PolicyEvaluationException("Policy file not found: p.py"))

        assert lines == ["PolicyEvaluationException: Policy evaluation failed: Policy file not found: p.py"]

    def test_field_and_cause(self):
        try:
            try:
                raise ValueError("Expecting value")
            except ValueError as e:
                raise ValidationException("Invalid JSON", "input") from e
        except ValidationException as e:
            lines = describe_error(e)

        assert lines == [
            "ValidationException: Validation failed for input: Invalid JSON",
            "Field: input",
            "Caused by: ValueError: Expecting value",
        ]

    def test_os_error_filename(self):
        error = PermissionError(13, "Permission denied", "/out/results.json")

        assert "File: /out/results.json" in describe_error(error)


class TestLogErrorSection:
    """Tests for log_error_section()."""

    def test_logs_framed_section(self, caplog):
        logger = logging.getLogger("vulnsieve.test")
        with caplog.at_level(logging.ERROR, logger="vulnsieve.test"):
            log_error_section("vulnsieve failed.", PolicyEvaluationException("boom", "CVE-2019-0001"), logger=logger, width=10)

        assert [r.getMessage() for r in caplog.records] == [
            "=" * 10,
            "vulnsieve failed.",
            "PolicyEvaluationException: Policy evaluation failed for CVE-2019-0001: boom",
            "Vulnerability: CVE-2019-0001",
            "=" * 10,
        ]
