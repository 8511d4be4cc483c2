"""
Command-line interface for vulnsieve.

Reads detected findings from JSON, enriches them from a vulnerability
database, filters them, and writes the surviving findings back out as JSON.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from constants import DB_REQUEST_TIMEOUT, DEFAULT_IGNORE_FILE
from core.config import FilterConfig
from core.exceptions import SieveException, ValidationException
from core.interfaces import VulnerabilityLookup
from core.models import Finding
from core.pipeline import ResultClient
from utils.logging_helpers import log_error_section

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False):
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def parse_args(args: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="vulnsieve",
        description="vulnsieve - Enrich and filter vulnerability findings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    io_group = parser.add_argument_group("input/output")
    db_group = parser.add_argument_group("vulnerability database")
    filter_group = parser.add_argument_group("filtering options")

    # Input/Output arguments
    io_group.add_argument("-i", "--input", type=Path, required=True, help="Findings JSON file.")
    io_group.add_argument("-o", "--output", type=Path, default=None, help="Output JSON file (default: stdout).")
    io_group.add_argument("--config", type=Path, default=None, help="YAML filter config file.")

    # Database options
    db_source = db_group.add_mutually_exclusive_group(required=True)
    db_source.add_argument("--db-dir", type=Path, help="Directory of vulnerability JSON records.")
    db_source.add_argument("--db-url", type=str, help="Remote vulnerability database URL.")
    db_group.add_argument("--db-timeout", type=int, default=DB_REQUEST_TIMEOUT, help="Remote database timeout in seconds.")

    # Filtering options
    filter_group.add_argument("--report-type", type=str, default=None, help="Ecosystem of the findings (e.g. alpine, npm).")
    filter_group.add_argument("-s", "--severity", type=str, default=None, help="Severities to report (comma-separated).")
    filter_group.add_argument("--ignore-unfixed", action="store_true", default=None, help="Only report fixable vulnerabilities.")
    filter_group.add_argument("--ignorefile", type=Path, default=None, help=f"Ignore file (default: {DEFAULT_IGNORE_FILE}).")
    filter_group.add_argument("--ignore-policy", type=Path, default=None, help="Python ignore policy module.")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")

    return parser.parse_args(args)


def build_config(args: argparse.Namespace) -> FilterConfig:
    """
    Build the filter config from the config file and command-line overrides.

    Raises:
        ConfigurationException: If the config file is invalid
        ValidationException: If an override is invalid
    """
    config = FilterConfig.load_from_file(args.config) if args.config else FilterConfig()

    if args.severity is not None:
        config.severities = args.severity
    if args.ignore_unfixed is not None:
        config.ignore_unfixed = args.ignore_unfixed
    if args.ignorefile is not None:
        config.ignore_file = args.ignorefile
    if args.ignore_policy is not None:
        config.policy_file = args.ignore_policy
    if args.report_type is not None:
        config.report_type = args.report_type

    config.validate()
    return config


def build_database(args: argparse.Namespace) -> VulnerabilityLookup:
    """Create the vulnerability database selected on the command line."""
    if args.db_url:
        from integrations.remote_db import RemoteVulnerabilityDB

        return RemoteVulnerabilityDB(args.db_url, timeout=args.db_timeout)

    from integrations.vulnerability_db import JSONVulnerabilityDB

    return JSONVulnerabilityDB(args.db_dir)


def load_findings(input_file: Path) -> list[Finding]:
    """
    Load detected findings from JSON.

    Accepts either a list of findings or an object with a "Vulnerabilities" list.

    Raises:
        ValidationException: If the file is missing or malformed
    """
    try:
        with open(input_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ValidationException(f"File not found: {input_file}", "input")
    except json.JSONDecodeError as e:
        raise ValidationException(f"Invalid JSON in {input_file}: {e}", "input") from e

    if isinstance(data, dict):
        data = data.get("Vulnerabilities") or []
    if not isinstance(data, list):
        raise ValidationException("Expected a list of findings", "input")

    try:
        return [Finding.from_dict(entry) for entry in data]
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ValidationException(f"Malformed finding: {e}", "input") from e


def write_findings(findings: list[Finding], output_file: Optional[Path]) -> None:
    """Write findings as JSON to a file or stdout."""
    payload = json.dumps([f.to_dict() for f in findings], indent=2)
    if output_file:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(findings)} findings to {output_file}")
    else:
        sys.stdout.write(payload + "\n")


def run(args: argparse.Namespace) -> int:
    """Run enrichment and filtering; return the process exit code."""
    try:
        config = build_config(args)
        findings = load_findings(args.input)
        client = ResultClient(build_database(args))

        client.fill_info(findings, config.report_type)
        survivors = client.filter_with_files(
            findings,
            config.severities,
            ignore_unfixed=config.ignore_unfixed,
            ignore_file=config.ignore_file,
            policy_file=config.policy_file,
        )
        logger.info(f"{len(survivors)} of {len(findings)} findings reported")
        write_findings(survivors, args.output)
    except (SieveException, OSError) as e:
        log_error_section("vulnsieve failed.", e, logger=logger)
        return 1

    return 0


def main():
    """Main entry point."""
    args = parse_args()
    setup_logging(args.verbose)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
