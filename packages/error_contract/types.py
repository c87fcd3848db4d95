"""Value types for the error contract."""

from __future__ import annotations

from dataclasses import dataclass

from .codes import ErrorCode


@dataclass(frozen=True, slots=True)
class ErrorResponse:
    """Payload returned whenever a request does not succeed.

    ``message`` is for humans and logs only. Callers branch on ``error_code``.
    """

    message: str = ""
    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR
