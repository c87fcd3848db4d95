"""Typed errors raised by the error-contract codec."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ErrorContractError(Exception):
    """Base error type for error-contract failures."""

    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(eq=False)
class DecodeFailure(ErrorContractError):
    """Input bytes are not a structurally valid error response."""

    payload_size: int = 0
    cause: Exception | None = None
