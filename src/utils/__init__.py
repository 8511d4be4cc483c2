"""Utility modules for validation and logging."""

from utils.logging_helpers import describe_error, log_error_section
from utils.validation import validate_file_path, validate_severities

__all__ = [
    "describe_error",
    "log_error_section",
    "validate_file_path",
    "validate_severities",
]
