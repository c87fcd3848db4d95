"""Cross-service error contract: payload, classification codes, and codec."""

from .codec import (
    JSON_MEDIA_TYPE,
    PROTOBUF_MEDIA_TYPE,
    decode,
    decode_body,
    decode_json,
    encode,
    encode_json,
    encode_response,
)
from .codes import KNOWN_CODES, ErrorCode
from .errors import DecodeFailure, ErrorContractError
from .types import ErrorResponse

__all__ = [
    "DecodeFailure",
    "ErrorCode",
    "ErrorContractError",
    "ErrorResponse",
    "JSON_MEDIA_TYPE",
    "KNOWN_CODES",
    "PROTOBUF_MEDIA_TYPE",
    "decode",
    "decode_body",
    "decode_json",
    "encode",
    "encode_json",
    "encode_response",
]
