"""Tests for pydantic-settings-backed configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from packages.error_contract.config import load_settings


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of settings resolution."""
    for name in (
        "ERROR_CONTRACT_LOGGING__LEVEL",
        "ERROR_CONTRACT_LOGGING__JSON_OUTPUT",
        "ERROR_CONTRACT_CLIENT__BASE_URL",
        "ERROR_CONTRACT_CLIENT__TIMEOUT_SECONDS",
    ):
        monkeypatch.delenv(name, raising=False)


def test_load_settings_applies_precedence_cascade(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Init params should override env, env should override YAML, then defaults."""
    config_file = tmp_path / "error-contract.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  service: node-client",
                "client:",
                "  base_url: http://yaml.example.test",
                "  timeout_seconds: 3",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("ERROR_CONTRACT_LOGGING__LEVEL", "ERROR")
    monkeypatch.setenv("ERROR_CONTRACT_CLIENT__TIMEOUT_SECONDS", "7.5")

    settings = load_settings(
        cli_params={"logging": {"level": "DEBUG"}},
        config_path=config_file,
    )

    assert settings.logging.level == "DEBUG"
    assert settings.logging.service == "node-client"
    assert settings.client.base_url == "http://yaml.example.test"
    assert settings.client.timeout_seconds == 7.5


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "missing.yaml")

    assert settings.logging.level == "INFO"
    assert settings.logging.json_output is True
    assert settings.client.base_url == "http://127.0.0.1:3000"
    assert settings.client.timeout_seconds == 10.0


def test_load_settings_rejects_invalid_values(tmp_path: Path) -> None:
    """Out-of-range values should fail validation."""
    with pytest.raises(ValidationError):
        load_settings(
            cli_params={"client": {"timeout_seconds": 0}},
            config_path=tmp_path / "missing.yaml",
        )
