"""Tests for the remote vulnerability database client."""

import pytest
import requests
from unittest.mock import MagicMock, patch

from core.exceptions import LookupException
from core.severity import Severity
from integrations.remote_db import RemoteVulnerabilityDB


def make_response(status_code=200, payload=None):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(response=response)
    return response


class TestRemoteVulnerabilityDB:
    """Tests for RemoteVulnerabilityDB."""

    @patch("requests.get")
    def test_found(self, mock_get):
        mock_get.return_value = make_response(payload={
            "Title": "dos",
            "VendorSeverity": {"ubuntu": "HIGH"},
        })
        db = RemoteVulnerabilityDB("https://vulndb.example.com/api/", timeout=5, token="secret")

        record = db.get_vulnerability("CVE-2019-0001")

        assert record.title == "dos"
        assert record.vendor_severity == {"ubuntu": Severity.HIGH}
        args, kwargs = mock_get.call_args
        assert args[0] == "https://vulndb.example.com/api/vulnerabilities/CVE-2019-0001"
        assert kwargs["timeout"] == 5
        assert kwargs["headers"]["Authorization"] == "Bearer secret"

    @patch("requests.get")
    def test_identifier_is_quoted(self, mock_get):
        mock_get.return_value = make_response(payload={})
        RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("openSUSE-SU-2019:2596-1")

        assert mock_get.call_args[0][0].endswith("/vulnerabilities/openSUSE-SU-2019%3A2596-1")

    @patch("requests.get")
    def test_not_found(self, mock_get):
        mock_get.return_value = make_response(status_code=404)

        assert RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("CVE-2019-9999") is None

    @patch("requests.get")
    def test_server_error(self, mock_get):
        mock_get.return_value = make_response(status_code=500)

        with pytest.raises(LookupException) as exc:
            RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("CVE-2019-0001")
        assert exc.value.identifier == "CVE-2019-0001"

    @patch("requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.Timeout()

        with pytest.raises(LookupException, match="timed out"):
            RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("CVE-2019-0001")

    @patch("requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("Network error")

        with pytest.raises(LookupException, match="Network error"):
            RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("CVE-2019-0001")

    @patch("requests.get")
    def test_invalid_json(self, mock_get):
        response = make_response()
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response

        with pytest.raises(LookupException, match="Invalid JSON"):
            RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("CVE-2019-0001")

    @patch("requests.get")
    def test_invalid_json_from_requests(self, mock_get):
        """Test requests' own JSON decode error is reported as bad JSON, not a failed request."""
        response = make_response()
        response.json.side_effect = requests.JSONDecodeError("Expecting value", "<html>", 0)
        mock_get.return_value = response

        with pytest.raises(LookupException, match="Invalid JSON"):
            RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("CVE-2019-0001")

    @patch("requests.get")
    def test_non_object_payload(self, mock_get):
        mock_get.return_value = make_response(payload=["CVE-2019-0001"])

        with pytest.raises(LookupException, match="Invalid record format"):
            RemoteVulnerabilityDB("https://vulndb.example.com").get_vulnerability("CVE-2019-0001")
