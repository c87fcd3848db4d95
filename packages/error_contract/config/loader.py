"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI/init params
2) Environment variables (``ERROR_CONTRACT_`` prefix, ``__`` for nesting)
3) YAML config file
4) Model defaults

Example: ``ERROR_CONTRACT_LOGGING__LEVEL=DEBUG`` sets ``logging.level``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from ..logging import configure_logging
from .models import CONFIG_PATH, ErrorContractSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ErrorContractSettings:
    """Resolve settings from all sources."""
    token = CONFIG_PATH.set(Path(config_path)) if config_path is not None else None
    try:
        return ErrorContractSettings(**dict(cli_params or {}))
    finally:
        if token is not None:
            CONFIG_PATH.reset(token)


def configure_logging_from_settings(settings: ErrorContractSettings) -> None:
    """Apply the ``logging`` subtree to the root logger."""
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )
