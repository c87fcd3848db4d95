"""Per-call structured logging fields.

Fields bound here are copied onto every record by ``ContextFilter``, so an
operation label set once around a client call shows up on each log line the
call emits without repeating ``extra=``.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from types import MappingProxyType
from typing import Iterator, Mapping

_EMPTY: Mapping[str, str] = MappingProxyType({})
_BOUND_FIELDS: ContextVar[Mapping[str, str]] = ContextVar(
    "error_contract_bound_fields", default=_EMPTY
)


def _with_values(values: Mapping[str, object]) -> Mapping[str, str]:
    """Return the current fields overlaid with stringified ``values``.

    ``None`` and empty-string values are skipped.
    """
    merged = dict(_BOUND_FIELDS.get())
    for key, value in values.items():
        if value is None or value == "":
            continue
        merged[str(key)] = str(value)
    return MappingProxyType(merged)


def get_context() -> dict[str, str]:
    """Return a copy of the fields bound in the current context."""
    return dict(_BOUND_FIELDS.get())


def bind_context(**values: object) -> None:
    """Bind fields for the rest of the current context."""
    if values:
        _BOUND_FIELDS.set(_with_values(values))


def reset_context() -> None:
    """Drop every bound field."""
    _BOUND_FIELDS.set(_EMPTY)


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Bind fields for the duration of a block only."""
    token = _BOUND_FIELDS.set(_with_values(values))
    try:
        yield
    finally:
        _BOUND_FIELDS.reset(token)
