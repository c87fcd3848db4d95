"""Logging API for error-contract components.

Wraps Python's ``logging`` module with stdout defaults and structured context
propagation.
"""

from . import fields
from .config import JsonFormatter, PlainFormatter, configure_logging, get_logger
from .context import bind_context, get_context, log_context, reset_context

__all__ = [
    "bind_context",
    "configure_logging",
    "fields",
    "get_context",
    "get_logger",
    "JsonFormatter",
    "log_context",
    "PlainFormatter",
    "reset_context",
]
