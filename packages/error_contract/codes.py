"""Classification codes carried by every error response.

Identities 0-4 are permanent. Later revisions may append new identities but
never reuse these; decoders built against this table read any identity they
do not know as ``UNKNOWN_ERROR``.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping


class ErrorCode(IntEnum):
    """Coarse-grained failure classification for error responses."""

    # Never sent deliberately; also the fallback for unrecognized identities.
    UNKNOWN_ERROR = 0
    # Missing or invalid argument, undecodable body, or contract violation.
    INVALID_REQUEST_ERROR = 1
    # Authentication failure or unauthorized request.
    AUTH_ERROR = 2
    # Failure while performing a Lightning operation.
    LIGHTNING_ERROR = 3
    # Server-side fault; the caller is probably not at fault.
    INTERNAL_SERVER_ERROR = 4

    @classmethod
    def from_wire(cls, value: int) -> ErrorCode:
        """Map a wire identity to a member, degrading unknown ones."""
        return KNOWN_CODES.get(value, cls.UNKNOWN_ERROR)

    @classmethod
    def from_name(cls, name: str) -> ErrorCode:
        """Map a symbolic name to a member, degrading unknown ones."""
        return _CODES_BY_NAME.get(name, cls.UNKNOWN_ERROR)

    @classmethod
    def is_known(cls, value: int) -> bool:
        """Return whether ``value`` is an identity in this revision."""
        return value in KNOWN_CODES


KNOWN_CODES: Mapping[int, ErrorCode] = MappingProxyType(
    {int(code): code for code in ErrorCode}
)
_CODES_BY_NAME: Mapping[str, ErrorCode] = MappingProxyType(
    {code.name: code for code in ErrorCode}
)
