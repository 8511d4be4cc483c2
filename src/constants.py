"""
Centralized configuration constants for vulnsieve.

This module provides a single source of truth for configuration values
that are used across multiple modules, making them easier to update
and maintain.
"""

# ============================================================================
# Primary URL Templates
# ============================================================================

NVD_URL_TEMPLATE = "https://avd.aquasec.com/nvd/{id}"
"""Canonical advisory page for CVE identifiers (identifier is lower-cased)."""

RUSTSEC_URL_TEMPLATE = "https://rustsec.org/advisories/{id}"
"""Advisory page for RustSec identifiers."""

GITHUB_ADVISORY_URL_TEMPLATE = "https://github.com/advisories/{id}"
"""Advisory page for GitHub Security Advisories (GHSA)."""

DEBIAN_TRACKER_URL_TEMPLATE = "https://security-tracker.debian.org/tracker/{id}"
"""Debian security tracker page (covers TEMP-* identifiers)."""

NPM_ADVISORY_HOST = "www.npmjs.com"
"""Host of npm advisory references."""

# ============================================================================
# Filtering Defaults
# ============================================================================

DEFAULT_SEVERITIES = ["UNKNOWN", "LOW", "MEDIUM", "HIGH", "CRITICAL"]
"""Severities reported when none are requested explicitly."""

DEFAULT_IGNORE_FILE = ".vulnignore"
"""Ignore file picked up from the working directory when present."""

# ============================================================================
# Timeouts (in seconds)
# ============================================================================

DB_REQUEST_TIMEOUT = 30
"""Timeout for remote vulnerability database lookups (30 seconds)."""
