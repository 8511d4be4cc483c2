"""
Ignore policy implementations.

A policy module is a Python source file defining:

    def ignore(input):
        return input["PkgName"] == "openssl" and input["VulnerabilityID"] == "CVE-2019-0001"

``input`` is the finding's serialized form (see Finding.to_dict); the function
must return a bool.
"""

import importlib.util
import logging
from pathlib import Path
from typing import Any, Callable

from core.exceptions import PolicyEvaluationException
from core.interfaces import PolicyEvaluator
from core.models import Finding

logger = logging.getLogger(__name__)

POLICY_ENTRYPOINT = "ignore"


class CallablePolicy(PolicyEvaluator):
    """Policy backed by a function of the finding's serialized form."""

    def __init__(self, func: Callable[[dict[str, Any]], bool], name: str = "policy"):
        """
        Initialize callable policy.

        Args:
            func: Function returning True for findings to ignore
            name: Policy name for error messages
        """
        self.func = func
        self.name = name

    def should_ignore(self, finding: Finding) -> bool:
        """Evaluate the policy for one finding."""
        try:
            result = self.func(finding.to_dict())
        except Exception as e:
            raise PolicyEvaluationException(f"{self.name}: {e}", finding.identifier) from e

        if not isinstance(result, bool):
            raise PolicyEvaluationException(
                f"{self.name}: {POLICY_ENTRYPOINT}() returned {type(result).__name__}, expected bool",
                finding.identifier,
            )
        return result


class PythonPolicyModule(CallablePolicy):
    """Policy loaded from a Python source file."""

    @classmethod
    def load_from_file(cls, policy_path: Path) -> "PythonPolicyModule":
        """
        Load a policy module.

        Args:
            policy_path: Path to the Python policy file

        Returns:
            PythonPolicyModule instance

        Raises:
            PolicyEvaluationException: If the file is missing, fails to import,
                or does not define a callable ignore()
        """
        policy_path = Path(policy_path)
        if not policy_path.is_file():
            raise PolicyEvaluationException(f"Policy file not found: {policy_path}")

        spec = importlib.util.spec_from_file_location(f"vulnsieve_policy_{policy_path.stem}", policy_path)
        if spec is None or spec.loader is None:
            raise PolicyEvaluationException(f"Cannot load policy file: {policy_path}")

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise PolicyEvaluationException(f"Failed to load policy {policy_path}: {e}") from e

        func = getattr(module, POLICY_ENTRYPOINT, None)
        if not callable(func):
            raise PolicyEvaluationException(
                f"Policy {policy_path} does not define {POLICY_ENTRYPOINT}(input)"
            )

        logger.info(f"Loaded ignore policy from {policy_path}")
        return cls(func, name=str(policy_path))


__all__ = [
    "CallablePolicy",
    "PythonPolicyModule",
]
