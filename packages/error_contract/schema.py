"""Wire schemas for ``error.ErrorResponse``.

The protobuf descriptor is assembled from :class:`ErrorCode` at import time
into a private descriptor pool, so the binary layout always tracks the
identity table and no generated ``_pb2`` module is needed:

    message ErrorResponse {
      string message = 1;
      ErrorCode error_code = 2;
    }

The JSON shape is a pydantic model that renders ``error_code`` by symbolic
name and tolerates integer identities on input.
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, StrictStr

from .codes import ErrorCode

PROTO_PACKAGE = "error"
PROTO_FILE_NAME = "error.proto"
MESSAGE_FIELD_NUMBER = 1
ERROR_CODE_FIELD_NUMBER = 2

_FieldProto = descriptor_pb2.FieldDescriptorProto


def build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Return the proto3 file descriptor for the error contract."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE_NAME,
        package=PROTO_PACKAGE,
        syntax="proto3",
    )

    enum_proto = file_proto.enum_type.add(name="ErrorCode")
    for code in ErrorCode:
        enum_proto.value.add(name=code.name, number=int(code))

    message_proto = file_proto.message_type.add(name="ErrorResponse")
    message_proto.field.add(
        name="message",
        json_name="message",
        number=MESSAGE_FIELD_NUMBER,
        label=_FieldProto.LABEL_OPTIONAL,
        type=_FieldProto.TYPE_STRING,
    )
    message_proto.field.add(
        name="error_code",
        json_name="errorCode",
        number=ERROR_CODE_FIELD_NUMBER,
        label=_FieldProto.LABEL_OPTIONAL,
        type=_FieldProto.TYPE_ENUM,
        type_name=f".{PROTO_PACKAGE}.ErrorCode",
    )
    return file_proto


_POOL = descriptor_pool.DescriptorPool()
_POOL.AddSerializedFile(build_file_descriptor().SerializeToString())

ERROR_RESPONSE_DESCRIPTOR = _POOL.FindMessageTypeByName(
    f"{PROTO_PACKAGE}.ErrorResponse"
)
ERROR_CODE_DESCRIPTOR = _POOL.FindEnumTypeByName(f"{PROTO_PACKAGE}.ErrorCode")

# Protobuf message class; instances are mutable, so keep them call-local.
ErrorResponseMessage = message_factory.GetMessageClass(ERROR_RESPONSE_DESCRIPTOR)


class ErrorResponseJson(BaseModel):
    """JSON rendering of one error response."""

    model_config = ConfigDict(extra="ignore")

    message: StrictStr | None = None
    error_code: StrictStr | StrictInt | None = Field(
        default=None,
        validation_alias=AliasChoices("error_code", "errorCode"),
    )
