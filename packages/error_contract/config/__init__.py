"""Public API for error-contract configuration."""

from .loader import configure_logging_from_settings, load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ClientSettings,
    ErrorContractSettings,
    LoggingSettings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ClientSettings",
    "ErrorContractSettings",
    "LoggingSettings",
    "configure_logging_from_settings",
    "load_settings",
]
