"""Production implementations of the database and policy collaborators."""

from integrations.ignore_file import load_ignore_file
from integrations.policy import CallablePolicy, PythonPolicyModule
from integrations.remote_db import RemoteVulnerabilityDB
from integrations.vulnerability_db import JSONVulnerabilityDB

__all__ = [
    "load_ignore_file",
    "CallablePolicy",
    "PythonPolicyModule",
    "RemoteVulnerabilityDB",
    "JSONVulnerabilityDB",
]
