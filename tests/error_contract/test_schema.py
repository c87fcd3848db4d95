"""Tests for the runtime-built protobuf schema."""

from __future__ import annotations

from packages.error_contract import ErrorCode
from packages.error_contract.schema import (
    ERROR_CODE_DESCRIPTOR,
    ERROR_RESPONSE_DESCRIPTOR,
    ErrorResponseMessage,
)


def test_enum_descriptor_mirrors_identity_table() -> None:
    """The protobuf enum should list exactly the known identities."""
    assert {value.name: value.number for value in ERROR_CODE_DESCRIPTOR.values} == {
        code.name: int(code) for code in ErrorCode
    }


def test_message_descriptor_uses_stable_field_numbers() -> None:
    """message and error_code should keep field numbers 1 and 2."""
    by_name = ERROR_RESPONSE_DESCRIPTOR.fields_by_name

    assert ERROR_RESPONSE_DESCRIPTOR.full_name == "error.ErrorResponse"
    assert by_name["message"].number == 1
    assert by_name["error_code"].number == 2
    assert by_name["error_code"].enum_type.full_name == "error.ErrorCode"


def test_message_class_keeps_unknown_enum_values() -> None:
    """Open proto3 enums should surface unknown identities as raw integers."""
    wire = ErrorResponseMessage()
    wire.ParseFromString(b"\x10\x63")

    assert wire.error_code == 99
