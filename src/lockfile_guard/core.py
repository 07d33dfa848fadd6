"""Core checking entrypoints.

``check_document`` is pure: it takes an already-parsed lockfile and an
explicit configuration and performs no I/O. The path-based helpers below it
are thin wrappers used by the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .checks import check_duplicates, check_integrity, check_registries
from .config import CheckConfig
from .discovery import discover_lockfiles
from .models import CheckResult, Finding
from .parsers.package_lock import MalformedLockfile, extract, load
from .report import aggregate

logger = logging.getLogger(__name__)


def check_document(document: Any, config: CheckConfig | None = None) -> CheckResult:
    """Run every check pass over a parsed lockfile.

    Raises:
        MalformedLockfile: If the document is not an npm lockfile.
    """
    config = config or CheckConfig()
    entries = extract(document)

    findings: list[Finding] = []
    findings.extend(check_registries(entries, config.allowed_registries))
    findings.extend(check_integrity(entries))
    findings.extend(check_duplicates(entries))
    logger.debug("%d findings across %d entries", len(findings), len(entries))

    return aggregate(findings, strict=config.strict)


def check_lockfile(path: Path, config: CheckConfig | None = None) -> CheckResult:
    """Load ``path`` and check it.

    Raises:
        LockfileReadError: If the file cannot be read or is not JSON.
        MalformedLockfile: If the JSON is not an npm lockfile.
    """
    document = load(path)
    try:
        return check_document(document, config)
    except MalformedLockfile as exc:
        raise MalformedLockfile(f"{path}: {exc}") from exc


def scan_repository(root: Path, config: CheckConfig | None = None) -> dict[Path, CheckResult]:
    """Check every lockfile found under ``root``, keyed by absolute path."""
    root = root.resolve()
    results: dict[Path, CheckResult] = {}
    for path in discover_lockfiles(root):
        logger.info("Checking %s", path.relative_to(root))
        results[path] = check_lockfile(path, config)
    return results
