"""Canonical logging field names for error-contract components."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"

# Codec fields.
PAYLOAD_SIZE = "payload_size"
WIRE_VALUE = "wire_value"

# Client/server response fields.
OPERATION = "operation"
STATUS_CODE = "status_code"
ERROR_CODE = "error_code"
METHOD = "method"
URL = "url"
RETRYABLE = "retryable"

# Record attributes copied into structured output when passed via ``extra``.
EXTRA_FIELDS = (
    PAYLOAD_SIZE,
    WIRE_VALUE,
    OPERATION,
    STATUS_CODE,
    ERROR_CODE,
    METHOD,
    URL,
    RETRYABLE,
)
