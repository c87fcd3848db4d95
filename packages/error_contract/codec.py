"""Encode and decode error responses.

Binary framing is proto3 (field 1 ``message``, field 2 ``error_code``).
Default-valued fields are omitted on encode and read back as defaults, so an
``UNKNOWN_ERROR`` payload with an empty message encodes to ``b""``.

Decoding is forward compatible: a well-formed payload whose ``error_code`` is
outside this revision's identity table decodes to ``UNKNOWN_ERROR`` with the
message intact. Only structurally invalid input raises :class:`DecodeFailure`.
"""

from __future__ import annotations

from google.protobuf.message import DecodeError
from pydantic import ValidationError

from .codes import ErrorCode
from .errors import DecodeFailure
from .logging import fields, get_logger
from .schema import ErrorResponseJson, ErrorResponseMessage
from .types import ErrorResponse

PROTOBUF_MEDIA_TYPE = "application/octet-stream"
JSON_MEDIA_TYPE = "application/json"

_LOGGER = get_logger(__name__)


def encode(message: str, code: ErrorCode | int = ErrorCode.UNKNOWN_ERROR) -> bytes:
    """Serialize one ``(message, code)`` pair into protobuf bytes.

    Raises:
        ValueError: ``code`` is not a known identity, or ``message`` holds
            lone surrogates and so has no UTF-8 form.
    """
    wire = ErrorResponseMessage(
        message=_encodable_message(message),
        error_code=int(_known_code(code)),
    )
    return wire.SerializeToString(deterministic=True)


def encode_response(response: ErrorResponse) -> bytes:
    """Serialize one :class:`ErrorResponse` into protobuf bytes."""
    return encode(response.message, response.error_code)


def decode(data: bytes) -> ErrorResponse:
    """Parse protobuf bytes into an :class:`ErrorResponse`.

    Raises:
        DecodeFailure: framing is truncated or invalid.
    """
    payload = bytes(data)
    wire = ErrorResponseMessage()
    try:
        wire.ParseFromString(payload)
    except DecodeError as exc:
        _LOGGER.debug(
            "error_response_decode_failed",
            extra={fields.PAYLOAD_SIZE: len(payload)},
        )
        raise DecodeFailure(
            message=f"Malformed error response payload ({len(payload)} bytes)",
            payload_size=len(payload),
            cause=exc,
        ) from exc

    return ErrorResponse(
        message=wire.message,
        error_code=_fallback_code(wire.error_code),
    )


def encode_json(message: str, code: ErrorCode | int = ErrorCode.UNKNOWN_ERROR) -> str:
    """Render one ``(message, code)`` pair as JSON with a symbolic code name."""
    rendered = ErrorResponseJson(
        message=_encodable_message(message),
        error_code=_known_code(code).name,
    )
    return rendered.model_dump_json()


def decode_json(text: str | bytes) -> ErrorResponse:
    """Parse the JSON rendering into an :class:`ErrorResponse`.

    ``error_code`` may be a symbolic name or an integer identity; unknown
    values of either kind read as ``UNKNOWN_ERROR``.

    Raises:
        DecodeFailure: text is not a JSON object of the expected shape.
    """
    try:
        parsed = ErrorResponseJson.model_validate_json(text)
    except ValidationError as exc:
        size = len(text.encode("utf-8") if isinstance(text, str) else text)
        _LOGGER.debug(
            "error_response_decode_failed",
            extra={fields.PAYLOAD_SIZE: size},
        )
        raise DecodeFailure(
            message=f"Malformed JSON error response ({size} bytes)",
            payload_size=size,
            cause=exc,
        ) from exc

    raw_code = parsed.error_code
    if raw_code is None:
        code = ErrorCode.UNKNOWN_ERROR
    elif isinstance(raw_code, str):
        code = _fallback_name(raw_code)
    else:
        code = _fallback_code(raw_code)
    return ErrorResponse(message=parsed.message or "", error_code=code)


def decode_body(body: bytes, content_type: str | None = None) -> ErrorResponse:
    """Decode a response body, choosing JSON or protobuf by media type."""
    if content_type is not None and _is_json_media_type(content_type):
        return decode_json(body)
    return decode(body)


def _known_code(code: ErrorCode | int) -> ErrorCode:
    """Return the member for ``code`` or reject identities this revision lacks."""
    if isinstance(code, ErrorCode):
        return code
    if isinstance(code, bool) or not ErrorCode.is_known(code):
        raise ValueError(f"Unknown error code identity: {code!r}")
    return ErrorCode(code)


def _encodable_message(message: str) -> str:
    """Reject text without a UTF-8 form, such as lone surrogates."""
    try:
        message.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError("Error message is not encodable as UTF-8") from exc
    return message


def _fallback_code(value: int) -> ErrorCode:
    """Apply the unknown-identity fallback and note when it kicks in."""
    code = ErrorCode.from_wire(value)
    if code is ErrorCode.UNKNOWN_ERROR and value != ErrorCode.UNKNOWN_ERROR:
        _LOGGER.debug(
            "error_code_unrecognized",
            extra={fields.WIRE_VALUE: value},
        )
    return code


def _fallback_name(name: str) -> ErrorCode:
    """Apply the unknown-name fallback and note when it kicks in."""
    code = ErrorCode.from_name(name)
    if code is ErrorCode.UNKNOWN_ERROR and name != ErrorCode.UNKNOWN_ERROR.name:
        _LOGGER.debug(
            "error_code_unrecognized",
            extra={fields.WIRE_VALUE: name},
        )
    return code


def _is_json_media_type(content_type: str) -> bool:
    """Return whether a Content-Type header names a JSON body."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE or media_type.endswith("+json")
