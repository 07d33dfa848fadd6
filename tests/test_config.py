from __future__ import annotations

import json

import pytest
import requests

from lockfile_guard import config as config_mod
from lockfile_guard.checks import DEFAULT_ALLOWED_REGISTRIES
from lockfile_guard.config import CheckConfig, ConfigError, load_config, strict_from_env


class FakeResponse:
    def __init__(self, status_code: int, text: str = "") -> None:
        self.status_code = status_code
        self.text = text


def test_defaults_without_source():
    assert load_config() == CheckConfig(strict=False, allowed_registries=DEFAULT_ALLOWED_REGISTRIES)


def test_load_json_file(tmp_path):
    path = tmp_path / "guard.json"
    path.write_text(
        json.dumps(
            {
                "strict": True,
                "allowedRegistries": [
                    "https://npm.internal.example",
                    "https://registry.npmjs.org",
                    "https://npm.internal.example",
                ],
                "unrelated": 1,
            }
        ),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.strict is True
    assert config.allowed_registries == (
        "https://npm.internal.example",
        "https://registry.npmjs.org",
    )


def test_load_yaml_file_from_env(tmp_path, monkeypatch):
    path = tmp_path / "guard.yml"
    path.write_text(
        "allowedRegistries:\n  - https://npm.internal.example\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("LOCKFILE_GUARD_CONFIG", str(path))

    config = load_config()

    assert config.strict is False
    assert config.allowed_registries == ("https://npm.internal.example",)


@pytest.mark.parametrize(
    "content",
    [
        "[]",
        '{"strict": "yes"}',
        '{"allowedRegistries": []}',
        '{"allowedRegistries": "https://registry.npmjs.org"}',
        '{"allowedRegistries": ["https://registry.npmjs.org", ""]}',
        "{broken",
    ],
)
def test_invalid_configuration(tmp_path, content):
    path = tmp_path / "guard.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_yaml(tmp_path):
    path = tmp_path / "guard.yaml"
    path.write_text("strict: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "absent.json")


def test_load_remote_configuration(monkeypatch):
    calls = []

    def fake_get(url):
        calls.append(url)
        return FakeResponse(200, '{"strict": true}')

    monkeypatch.setattr(config_mod, "_http_get", fake_get)

    config = load_config("https://policy.example/guard.json")

    assert calls == ["https://policy.example/guard.json"]
    assert config.strict is True


def test_remote_configuration_errors(monkeypatch):
    monkeypatch.setattr(config_mod, "_http_get", lambda url: FakeResponse(404))
    with pytest.raises(ConfigError, match="404"):
        load_config("https://policy.example/guard.json")

    def boom(url):
        raise requests.ConnectionError("unreachable")

    monkeypatch.setattr(config_mod, "_http_get", boom)
    with pytest.raises(ConfigError, match="unreachable"):
        load_config("https://policy.example/guard.json")


def test_with_overrides():
    base = CheckConfig()

    assert base.with_overrides() is base
    updated = base.with_overrides(strict=True, allowed_registries=["https://a", "https://a"])
    assert updated == CheckConfig(strict=True, allowed_registries=("https://a",))
    with pytest.raises(ConfigError):
        base.with_overrides(allowed_registries=[])


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("Yes", True), ("0", False), ("", False)])
def test_strict_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("LOCKFILE_GUARD_STRICT", value)
    assert strict_from_env() is expected


@pytest.mark.parametrize(
    "registries",
    ["https://registry.npmjs.org", ["https://registry.npmjs.org", 7], [None]],
)
def test_check_config_rejects_invalid_registries(registries):
    with pytest.raises(ConfigError):
        CheckConfig(allowed_registries=registries)


def test_check_config_normalises_registries_to_tuple():
    config = CheckConfig(allowed_registries=["https://npm.internal.example"])

    assert config.allowed_registries == ("https://npm.internal.example",)
    assert hash(config) == hash(CheckConfig(allowed_registries=("https://npm.internal.example",)))
