"""Server-side helpers for emitting error responses over HTTP.

The HTTP status is always chosen by the calling service; it is never derived
from the classification code.
"""

from __future__ import annotations

from fastapi import Response

from .codec import JSON_MEDIA_TYPE, PROTOBUF_MEDIA_TYPE, encode, encode_json
from .codes import ErrorCode


def error_http_response(
    message: str,
    code: ErrorCode,
    *,
    status_code: int,
    media_type: str = PROTOBUF_MEDIA_TYPE,
) -> Response:
    """Build one non-success HTTP response carrying an encoded error payload."""
    if status_code < 400:
        raise ValueError(f"Error responses need an error status, got {status_code}")

    if media_type == JSON_MEDIA_TYPE:
        content: bytes | str = encode_json(message, code)
    elif media_type == PROTOBUF_MEDIA_TYPE:
        content = encode(message, code)
    else:
        raise ValueError(f"Unsupported error response media type: {media_type}")

    return Response(content=content, status_code=status_code, media_type=media_type)
