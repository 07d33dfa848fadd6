"""Check configuration and its loader.

``CheckConfig`` is the explicit configuration record handed to the core. The
loader reads it from a JSON or YAML file, or from an ``http(s)://`` URL so a
single registry policy can be shared across repositories. Recognised keys are
``strict`` (boolean) and ``allowedRegistries`` (list of URL prefixes); other
keys are ignored.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from collections.abc import Iterable
from typing import Any

import requests
import yaml
from requests import Response
from tenacity import retry, stop_after_attempt, wait_fixed

from .checks.registry import DEFAULT_ALLOWED_REGISTRIES

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV_VAR = "LOCKFILE_GUARD_CONFIG"
STRICT_ENV_VAR = "LOCKFILE_GUARD_STRICT"
_TRUTHY = {"1", "true", "yes", "y"}


class ConfigError(RuntimeError):
    """Raised when the configuration cannot be loaded or is invalid."""


@dataclass(frozen=True)
class CheckConfig:
    """Options recognised by the core checks."""

    strict: bool = False
    allowed_registries: tuple[str, ...] = DEFAULT_ALLOWED_REGISTRIES

    def __post_init__(self) -> None:
        if isinstance(self.allowed_registries, str):
            raise ConfigError("Allowed registries must be a list of URL prefixes, not a string")
        registries = tuple(self.allowed_registries)
        if not registries:
            raise ConfigError("At least one allowed registry must be configured")
        if any(not isinstance(prefix, str) or not prefix for prefix in registries):
            raise ConfigError("Allowed registries must be non-empty strings")
        object.__setattr__(self, "allowed_registries", registries)

    def with_overrides(
        self,
        *,
        strict: bool | None = None,
        allowed_registries: Iterable[str] | None = None,
    ) -> CheckConfig:
        """Return a copy with the given options replaced; ``None`` keeps the current value."""
        changes: dict[str, Any] = {}
        if strict is not None:
            changes["strict"] = strict
        if allowed_registries is not None:
            changes["allowed_registries"] = _dedupe(allowed_registries)
        return replace(self, **changes) if changes else self

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckConfig:
        """Create a CheckConfig from a mapping, validating recognised keys."""
        strict = data.get("strict", False)
        if not isinstance(strict, bool):
            raise ConfigError("'strict' must be a boolean")

        registries = data.get("allowedRegistries")
        if registries is None:
            return cls(strict=strict)
        if not isinstance(registries, list) or not registries:
            raise ConfigError("'allowedRegistries' must be a non-empty array")
        for index, prefix in enumerate(registries):
            if not isinstance(prefix, str) or not prefix:
                raise ConfigError(
                    f"Registry at index {index} must be a non-empty string"
                )

        return cls(strict=strict, allowed_registries=_dedupe(registries))


def _dedupe(prefixes: Iterable[str]) -> tuple[str, ...]:
    return tuple(dict.fromkeys(prefixes))


@retry(reraise=True, stop=stop_after_attempt(3), wait=wait_fixed(2))
def _http_get(url: str) -> Response:
    return requests.get(url, timeout=10)


def _fetch_remote(url: str) -> str:
    try:
        response = _http_get(url)
    except requests.RequestException as exc:
        raise ConfigError(f"Failed to fetch configuration from {url}: {exc}") from exc

    if response.status_code != 200:
        raise ConfigError(
            f"Unexpected status code {response.status_code} fetching configuration from {url}"
        )
    return response.text


def _parse(content: str, source: str) -> Any:
    if source.endswith((".yaml", ".yml")):
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in configuration {source}: {exc}") from exc
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration {source}: {exc}") from exc


def _resolve_source(source: str | Path | None) -> str | None:
    """Resolve the configuration source.

    Priority:
    1. Explicit argument
    2. LOCKFILE_GUARD_CONFIG environment variable
    3. None (built-in defaults)
    """
    if source is not None:
        return str(source)
    return os.environ.get(CONFIG_PATH_ENV_VAR) or None


def load_config(source: str | Path | None = None) -> CheckConfig:
    """Load a CheckConfig from a path or URL, or return defaults when none is set.

    Raises:
        ConfigError: If the source cannot be read or contains invalid data.
    """
    resolved = _resolve_source(source)
    if resolved is None:
        return CheckConfig()

    if resolved.startswith(("http://", "https://")):
        content = _fetch_remote(resolved)
    else:
        path = Path(resolved)
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    data = _parse(content, resolved)
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be an object")

    config = CheckConfig.from_dict(data)
    logger.debug(
        "Loaded configuration from %s (strict=%s, registries=%s)",
        resolved,
        config.strict,
        ", ".join(config.allowed_registries),
    )
    return config


def strict_from_env() -> bool:
    """Return True when LOCKFILE_GUARD_STRICT requests strict mode."""
    return os.getenv(STRICT_ENV_VAR, "").strip().lower() in _TRUTHY
