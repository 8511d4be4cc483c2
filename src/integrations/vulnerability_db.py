"""
File-backed vulnerability database.

Each advisory is stored as a separate JSON document, keyed by vulnerability
identifier. This keeps lookups cheap and lets entries be inspected or patched
by hand.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from core.exceptions import LookupException
from core.interfaces import VulnerabilityLookup
from core.models import VulnerabilityRecord

logger = logging.getLogger(__name__)


class JSONVulnerabilityDB(VulnerabilityLookup):
    """
    Vulnerability database backed by a directory of JSON files.

    The record for "CVE-2019-0001" lives in <db_dir>/CVE-2019-0001.json.
    """

    def __init__(self, db_dir: Path):
        """
        Initialize file-backed database.

        Args:
            db_dir: Directory holding one JSON document per vulnerability
        """
        self.db_dir = Path(db_dir)
        if not self.db_dir.is_dir():
            logger.warning(f"Vulnerability database directory not found: {self.db_dir}")

    def _get_record_path(self, identifier: str) -> Path:
        """
        Get file path for a vulnerability record.

        Args:
            identifier: Vulnerability identifier

        Returns:
            Path to record file
        """
        # Sanitize identifier for filesystem (e.g. "openSUSE-SU-2019:2596-1")
        safe_key = identifier.replace("/", "_").replace(":", "_").replace("#", "_")
        return self.db_dir / f"{safe_key}.json"

    def get_vulnerability(self, identifier: str) -> Optional[VulnerabilityRecord]:
        """
        Look up a vulnerability record.

        Args:
            identifier: Vulnerability identifier

        Returns:
            VulnerabilityRecord if found, None otherwise

        Raises:
            LookupException: If the record exists but cannot be read or parsed
        """
        record_path = self._get_record_path(identifier)
        if not record_path.exists():
            return None

        try:
            with open(record_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise LookupException(identifier, f"Failed to read {record_path}: {e}") from e

        if not isinstance(data, dict):
            raise LookupException(identifier, f"Invalid record format in {record_path}")

        try:
            return VulnerabilityRecord.from_dict(data)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise LookupException(identifier, f"Invalid record in {record_path}: {e}") from e


__all__ = ["JSONVulnerabilityDB"]
