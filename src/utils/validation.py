"""
Input validation utilities for vulnsieve.

Provides validation functions for file paths and severity selections
coming from the command line or config files.
"""

from pathlib import Path
from typing import Iterable, Union

from core.exceptions import InvalidSeverityException, ValidationException
from core.severity import Severity


def validate_file_path(path: Path, must_exist: bool = True) -> Path:
    """
    Validate file path.

    Args:
        path: Path to validate
        must_exist: Whether file must already exist

    Returns:
        Validated Path object

    Raises:
        ValidationException: If path is invalid
    """
    if not path:
        raise ValidationException("File path cannot be empty", "path")

    if must_exist and not path.exists():
        raise ValidationException(f"File not found: {path}", "path")

    return path


def validate_severities(
    severities: Union[str, Iterable[Union[str, Severity]]],
    field_name: str = "severity",
) -> list[Severity]:
    """
    Validate and normalize a severity selection.

    Args:
        severities: Comma-separated names (e.g. "HIGH,CRITICAL") or a list of
            names or Severity values
        field_name: Field name for error messages

    Returns:
        Severity values in the order given, without duplicates

    Raises:
        ValidationException: If the selection is empty or contains an unknown name

    Examples:
        >>> validate_severities("HIGH,CRITICAL")
        [<Severity.HIGH: 3>, <Severity.CRITICAL: 4>]
        >>> validate_severities(["low"])
        ValidationException: ...
    """
    if isinstance(severities, str):
        severities = [s.strip() for s in severities.split(",") if s.strip()]

    result: list[Severity] = []
    for item in severities or []:
        if isinstance(item, Severity):
            level = item
        else:
            try:
                level = Severity.parse(str(item).strip())
            except InvalidSeverityException as e:
                raise ValidationException(str(e), field_name) from e
        if level not in result:
            result.append(level)

    if not result:
        raise ValidationException("At least one severity is required", field_name)

    return result


__all__ = [
    "validate_file_path",
    "validate_severities",
]
