from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from tests.lockfile_helpers import EVIL_URL, NPM, lockfile, npm_record


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "LOCKFILE_GUARD_CONFIG",
        "LOCKFILE_GUARD_STRICT",
        "GITHUB_STEP_SUMMARY",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def mixed_lockfile() -> dict[str, Any]:
    """Two lodash versions, one package from an unknown host, one without integrity."""
    return lockfile(
        {
            "node_modules/lodash": npm_record("lodash", "4.17.20"),
            "node_modules/evil-package": {
                "version": "1.0.0",
                "resolved": EVIL_URL,
                "integrity": "sha512-evil",
            },
            "node_modules/left-pad": {
                "version": "1.3.0",
                "resolved": f"{NPM}/left-pad/-/left-pad-1.3.0.tgz",
            },
            "node_modules/webpack/node_modules/lodash": npm_record("lodash", "4.17.21"),
        }
    )


@pytest.fixture
def write_lockfile(tmp_path: Path):
    def _write(document: Any, relative: str = "package-lock.json") -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write
