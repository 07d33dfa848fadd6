"""Extract resolved package records from npm package-lock.json documents."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from ..models import PackageEntry

logger = logging.getLogger(__name__)

_NODE_MODULES = "node_modules/"


class MalformedLockfile(ValueError):
    """Raised when a document does not have the shape of an npm lockfile."""


class LockfileReadError(RuntimeError):
    """Raised when a lockfile cannot be read from disk or decoded as JSON."""


def load(path: Path) -> Any:
    """Read and decode a lockfile without interpreting its structure."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LockfileReadError(f"Failed to read {path}: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise LockfileReadError(f"Invalid JSON in {path}: {exc}") from exc


def extract(document: Any) -> list[PackageEntry]:
    """Return package entries in document order.

    Supports npm v2+ (``packages`` map, preferred when present) and the v1
    ``dependencies`` tree. Individual records that cannot be interpreted are
    skipped; only a document without either container is rejected.
    """
    if not isinstance(document, dict):
        raise MalformedLockfile("Lockfile must be a JSON object")

    packages = document.get("packages")
    if packages is not None:
        if not isinstance(packages, dict):
            raise MalformedLockfile("'packages' must be an object")
        entries = list(_iter_packages(packages))
    else:
        deps = document.get("dependencies")
        if deps is None:
            raise MalformedLockfile("Lockfile has no 'packages' or 'dependencies' container")
        if not isinstance(deps, dict):
            raise MalformedLockfile("'dependencies' must be an object")
        entries = list(_iter_dependencies(deps))

    logger.debug("Extracted %d package entries", len(entries))
    return entries


def _package_name(key: str, meta: Mapping[str, Any]) -> str:
    # "node_modules/a/node_modules/@scope/b" -> "@scope/b"
    if _NODE_MODULES in key:
        return key.rsplit(_NODE_MODULES, 1)[1]
    name = meta.get("name")
    if isinstance(name, str) and name:
        return name
    return key


def _iter_packages(packages: Mapping[str, Any]) -> Iterator[PackageEntry]:
    for key, meta in packages.items():
        if not key:
            continue
        if not isinstance(meta, dict):
            logger.debug("Skipping %r: record is not an object", key)
            continue
        entry = _make_entry(_package_name(key, meta), meta)
        if entry is None:
            logger.debug("Skipping %r: malformed record", key)
            continue
        yield entry


def _iter_dependencies(deps: Mapping[str, Any]) -> Iterator[PackageEntry]:
    for name, meta in deps.items():
        if not isinstance(meta, dict):
            logger.debug("Skipping %r: record is not an object", name)
            continue
        entry = _make_entry(name, meta)
        if entry is None:
            logger.debug("Skipping %r: malformed record", name)
        else:
            yield entry

        nested = meta.get("dependencies")
        if isinstance(nested, dict):
            yield from _iter_dependencies(nested)


def _make_entry(name: Any, meta: Mapping[str, Any]) -> PackageEntry | None:
    version = meta.get("version")
    resolved = meta.get("resolved")
    integrity = meta.get("integrity")

    if not isinstance(name, str) or not name:
        return None
    if not isinstance(version, str) or not version:
        return None
    if resolved is not None and not isinstance(resolved, str):
        return None
    if integrity is not None and not isinstance(integrity, str):
        return None

    return PackageEntry(
        name=name,
        version=version,
        resolved=resolved,
        integrity=integrity,
        dev=meta.get("dev") is True,
    )
