"""
Logging helper utilities for the vulnsieve CLI.

Formats a failure, its structured fields and its cause as one error section.
"""

import logging
from typing import List, Optional


def describe_error(error: BaseException) -> List[str]:
    """
    Describe an exception as a list of log lines.

    The first line is the exception type and message. Structured fields set
    by the vulnsieve exceptions (identifier, field) and OSError filenames
    follow, then the chained cause if there is one.
    """
    lines = [f"{type(error).__name__}: {error}"]

    identifier = getattr(error, "identifier", None)
    if identifier:
        lines.append(f"Vulnerability: {identifier}")

    field = getattr(error, "field", None)
    if field:
        lines.append(f"Field: {field}")

    if isinstance(error, OSError) and error.filename:
        lines.append(f"File: {error.filename}")

    cause = error.__cause__
    if cause is not None:
        lines.append(f"Caused by: {type(cause).__name__}: {cause}")

    return lines


def log_error_section(
    title: str,
    error: BaseException,
    logger: Optional[logging.Logger] = None,
    width: int = 60
) -> None:
    """
    Log an error section with separator lines around a described exception.

    Args:
        title: Title message for the error section
        error: Exception that ended the run
        logger: Logger instance (defaults to root logger if not provided)
        width: Width of separator line in characters

    Examples:
        >>> log_error_section("vulnsieve failed.", PolicyEvaluationException("boom", "CVE-2019-0001"))
        ============================================================
        vulnsieve failed.
        PolicyEvaluationException: Policy evaluation failed for CVE-2019-0001: boom
        Vulnerability: CVE-2019-0001
        ============================================================
    """
    if logger is None:
        logger = logging.getLogger()

    logger.error("=" * width)
    logger.error(title)
    for line in describe_error(error):
        logger.error(line)
    logger.error("=" * width)
