"""
HTTP vulnerability database client.

Fetches vulnerability records from a database server exposing
GET <base_url>/vulnerabilities/<identifier>.
"""

import logging
from typing import Optional
from urllib.parse import quote

import requests

from constants import DB_REQUEST_TIMEOUT
from core.exceptions import LookupException
from core.interfaces import VulnerabilityLookup
from core.models import VulnerabilityRecord

logger = logging.getLogger(__name__)


class RemoteVulnerabilityDB(VulnerabilityLookup):
    """
    Client for a remote vulnerability database.

    A 404 response means the vulnerability is unknown; any other failure is
    reported as a LookupException.
    """

    def __init__(self, base_url: str, timeout: int = DB_REQUEST_TIMEOUT, token: Optional[str] = None):
        """
        Initialize remote database client.

        Args:
            base_url: Server base URL (e.g. "https://vulndb.example.com/api")
            timeout: Request timeout in seconds
            token: Optional bearer token
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.headers = {"Accept": "application/json"}
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    def get_vulnerability(self, identifier: str) -> Optional[VulnerabilityRecord]:
        """
        Fetch a vulnerability record.

        Args:
            identifier: Vulnerability identifier

        Returns:
            VulnerabilityRecord if found, None otherwise

        Raises:
            LookupException: On network, HTTP or parse errors
        """
        url = f"{self.base_url}/vulnerabilities/{quote(identifier, safe='')}"
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
            if response.status_code == 404:
                return None
            response.raise_for_status()
            data = response.json()
        except requests.Timeout:
            raise LookupException(identifier, f"Request to {url} timed out")
        except requests.JSONDecodeError as e:
            raise LookupException(identifier, f"Invalid JSON from {url}: {e}") from e
        except requests.RequestException as e:
            raise LookupException(identifier, f"Request to {url} failed: {e}") from e
        except ValueError as e:
            raise LookupException(identifier, f"Invalid JSON from {url}: {e}") from e

        if not isinstance(data, dict):
            raise LookupException(identifier, "Invalid record format")

        try:
            return VulnerabilityRecord.from_dict(data)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise LookupException(identifier, f"Invalid record: {e}") from e


__all__ = ["RemoteVulnerabilityDB"]
