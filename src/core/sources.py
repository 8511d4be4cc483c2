"""
Advisory source families and report types.

Source families name the feed a severity rating or CVSS score came from.
Report types name the ecosystem a finding was detected in; OS report types
share their name with the distribution's own source family.
"""

# ============================================================================
# Source Families
# ============================================================================

NVD = "nvd"

# OS vendors
ALPINE = "alpine"
AMAZON = "amazon"
DEBIAN = "debian"
DEBIAN_OVAL = "debian-oval"
FEDORA = "fedora"
ORACLE_OVAL = "oracle-oval"
PHOTON = "photon"
REDHAT = "redhat"
REDHAT_OVAL = "redhat-oval"
SUSE_CVRF = "suse-cvrf"
OPENSUSE_CVRF = "opensuse-cvrf"
UBUNTU = "ubuntu"

# Language ecosystems
NODEJS_SECURITY_WG = "nodejs-security-wg"
PHP_SECURITY_ADVISORIES = "php-security-advisories"
PYTHON_SAFETY_DB = "python-safety-db"
RUBY_ADVISORY_DB = "ruby-advisory-db"
RUST_ADVISORY_DB = "rust-advisory-db"

# GitHub Security Advisories, one feed per ecosystem
GHSA_COMPOSER = "ghsa-composer"
GHSA_MAVEN = "ghsa-maven"
GHSA_NPM = "ghsa-npm"
GHSA_NUGET = "ghsa-nuget"
GHSA_PIP = "ghsa-pip"
GHSA_RUBYGEMS = "ghsa-rubygems"

GITHUB_ADVISORY_FAMILIES = frozenset({
    PHP_SECURITY_ADVISORIES,
    GHSA_COMPOSER,
    GHSA_MAVEN,
    GHSA_NPM,
    GHSA_NUGET,
    GHSA_PIP,
    GHSA_RUBYGEMS,
})

DEBIAN_FAMILIES = frozenset({DEBIAN, DEBIAN_OVAL})

# ============================================================================
# Report Types
# ============================================================================

# CentOS publishes no severities of its own
CENTOS = "centos"

OS_REPORT_TYPES = frozenset({
    ALPINE,
    AMAZON,
    DEBIAN,
    DEBIAN_OVAL,
    FEDORA,
    ORACLE_OVAL,
    PHOTON,
    REDHAT,
    REDHAT_OVAL,
    SUSE_CVRF,
    OPENSUSE_CVRF,
    UBUNTU,
})

NPM = "npm"
YARN = "yarn"
NUGET = "nuget"
PIP = "pip"
PIPENV = "pipenv"
POETRY = "poetry"
BUNDLER = "bundler"
CARGO = "cargo"
COMPOSER = "composer"
JAR = "jar"
