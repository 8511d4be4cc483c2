"""
Filter configuration.

Provides a strongly-typed configuration object for the filter pipeline,
loadable from a YAML file and overridable from the command line.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from constants import DEFAULT_IGNORE_FILE, DEFAULT_SEVERITIES
from core.exceptions import ConfigurationException, ValidationException

logger = logging.getLogger(__name__)


@dataclass
class FilterConfig:
    """
    Configuration for enrichment and filtering.

    Attributes:
        severities: Severities to report
        ignore_unfixed: Drop findings without an available fix
        ignore_file: File of vulnerability identifiers to ignore
        policy_file: Python policy module deciding what to ignore
        report_type: Ecosystem the findings were detected in
    """

    severities: list = field(default_factory=lambda: list(DEFAULT_SEVERITIES))
    ignore_unfixed: bool = False
    ignore_file: Optional[Path] = Path(DEFAULT_IGNORE_FILE)
    policy_file: Optional[Path] = None
    report_type: str = ""

    def validate(self) -> None:
        """
        Validate configuration values, normalizing severities to Severity.

        Raises:
            ValidationException: If configuration is invalid
        """
        from utils.validation import validate_file_path, validate_severities

        self.severities = validate_severities(self.severities)

        if self.policy_file:
            self.policy_file = validate_file_path(Path(self.policy_file), must_exist=True)

        if self.ignore_file:
            self.ignore_file = Path(self.ignore_file)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "FilterConfig":
        """
        Load filter configuration from a YAML file.

        Recognized keys: severity, ignore-unfixed, ignorefile, ignore-policy,
        report-type. Missing keys keep their defaults.

        Args:
            config_path: Path to YAML config file

        Returns:
            Validated FilterConfig

        Raises:
            ConfigurationException: If the file is missing or invalid
        """
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise ConfigurationException(f"Config file not found: {config_path}")
        except yaml.YAMLError as e:
            raise ConfigurationException(f"Failed to parse config file {config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationException(f"Invalid config file format: {config_path}")

        config = cls()
        if "severity" in data:
            config.severities = data["severity"]
        if "ignore-unfixed" in data:
            if not isinstance(data["ignore-unfixed"], bool):
                raise ConfigurationException(
                    f"Invalid config file {config_path}: ignore-unfixed must be true or false"
                )
            config.ignore_unfixed = data["ignore-unfixed"]
        if "ignorefile" in data:
            config.ignore_file = Path(data["ignorefile"]) if data["ignorefile"] else None
        if "ignore-policy" in data:
            config.policy_file = Path(data["ignore-policy"]) if data["ignore-policy"] else None
        if "report-type" in data:
            config.report_type = str(data["report-type"] or "")

        try:
            config.validate()
        except ValidationException as e:
            raise ConfigurationException(f"Invalid config file {config_path}: {e}") from e

        logger.debug(f"Loaded filter config from {config_path}")
        return config


__all__ = [
    "FilterConfig",
]
