"""lockfile-guard core package.

This package provides the lockfile checks used by the command-line wrapper.
``check_document`` is the pure entrypoint: parsed lockfile and configuration
in, ``CheckResult`` out.
"""

from .config import CheckConfig, ConfigError, load_config
from .core import check_document, check_lockfile, scan_repository
from .models import CheckResult, Finding, FindingKind, PackageEntry, Severity
from .parsers.package_lock import LockfileReadError, MalformedLockfile, extract
from .report import aggregate

__all__ = [
    "CheckConfig",
    "CheckResult",
    "ConfigError",
    "Finding",
    "FindingKind",
    "LockfileReadError",
    "MalformedLockfile",
    "PackageEntry",
    "Severity",
    "aggregate",
    "check_document",
    "check_lockfile",
    "extract",
    "load_config",
    "scan_repository",
]
