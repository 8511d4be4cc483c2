"""
Exception hierarchy for vulnsieve.

Provides a standardized exception hierarchy for consistent error handling
across the application. All exceptions inherit from SieveException.
"""


class SieveException(Exception):
    """Base exception for all vulnsieve errors."""
    pass


class InvalidSeverityException(SieveException):
    """Severity text is not one of the canonical severity names."""

    def __init__(self, text: str):
        """
        Initialize invalid severity exception.

        Args:
            text: The text that failed to parse
        """
        self.text = text
        super().__init__(f"Invalid severity: {text!r}")


class LookupException(SieveException):
    """Vulnerability database lookup failed."""

    def __init__(self, identifier: str, reason: str):
        """
        Initialize lookup exception.

        Args:
            identifier: Vulnerability identifier that was looked up
            reason: Reason for failure
        """
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Failed to look up {identifier}: {reason}")


class PolicyEvaluationException(SieveException):
    """Policy could not be loaded or failed during evaluation."""

    def __init__(self, reason: str, identifier: str = None):
        """
        Initialize policy evaluation exception.

        Args:
            reason: Reason for failure
            identifier: Vulnerability being evaluated when it failed (optional)
        """
        self.reason = reason
        self.identifier = identifier
        if identifier:
            super().__init__(f"Policy evaluation failed for {identifier}: {reason}")
        else:
            super().__init__(f"Policy evaluation failed: {reason}")


class ValidationException(SieveException):
    """Input validation failed."""

    def __init__(self, message: str, field: str = None):
        """
        Initialize validation exception.

        Args:
            message: Validation error message
            field: Field that failed validation (optional)
        """
        self.field = field
        if field:
            super().__init__(f"Validation failed for {field}: {message}")
        else:
            super().__init__(f"Validation failed: {message}")


class ConfigurationException(SieveException):
    """Configuration is invalid or missing."""
    pass


__all__ = [
    "SieveException",
    "InvalidSeverityException",
    "LookupException",
    "PolicyEvaluationException",
    "ValidationException",
    "ConfigurationException",
]
