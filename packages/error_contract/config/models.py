"""Typed configuration models for error-contract runtime settings."""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "error-contract" / "error-contract.yaml"

# YAML path consulted by the settings source; ``load_settings`` scopes overrides.
CONFIG_PATH: ContextVar[Path] = ContextVar(
    "error_contract_config_path", default=DEFAULT_CONFIG_PATH
)


class LoggingSettings(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "error-contract"
    environment: str = "dev"


class ClientSettings(BaseModel):
    """Defaults for clients that consume error responses over HTTP."""

    base_url: str = "http://127.0.0.1:3000"
    timeout_seconds: float = Field(default=10.0, gt=0)


class ErrorContractSettings(BaseSettings):
    """Root runtime settings resolved from init/env/yaml/defaults sources."""

    model_config = SettingsConfigDict(
        env_prefix="ERROR_CONTRACT_",
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=CONFIG_PATH.get(),
                yaml_file_encoding="utf-8",
            ),
        )
