"""
Ignore file loading.

An ignore file lists one vulnerability identifier per line. Blank lines and
lines starting with '#' are skipped.
"""

import logging
from pathlib import Path

from core.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


def parse_ignore_list(text: str) -> set[str]:
    """
    Parse ignore file contents.

    Args:
        text: File contents

    Returns:
        Set of vulnerability identifiers

    Examples:
        >>> sorted(parse_ignore_list("# accepted risk\\nCVE-2019-0001\\n\\nCVE-2019-0002\\n"))
        ['CVE-2019-0001', 'CVE-2019-0002']
    """
    ids = set()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        ids.add(line)
    return ids


def load_ignore_file(path: Path) -> set[str]:
    """
    Load vulnerability identifiers to ignore.

    Args:
        path: Ignore file path; a missing file means nothing is ignored

    Returns:
        Set of vulnerability identifiers

    Raises:
        ConfigurationException: If the file exists but cannot be read
    """
    path = Path(path)
    if not path.exists():
        logger.debug(f"No ignore file at {path}")
        return set()

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationException(f"Failed to read ignore file {path}: {e}") from e

    ids = parse_ignore_list(text)
    logger.info(f"Loaded {len(ids)} ignored vulnerabilities from {path}")
    return ids


__all__ = [
    "load_ignore_file",
    "parse_ignore_list",
]
