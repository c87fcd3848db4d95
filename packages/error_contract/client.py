"""Client-side handling of error responses over HTTP.

Non-success responses carry an encoded :class:`ErrorResponse`. This module
decodes that body and raises one typed exception per classification, so
callers branch on exception type (or ``error_code``) rather than on text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

import httpx

from .codec import PROTOBUF_MEDIA_TYPE, decode_body
from .codes import ErrorCode
from .config import ClientSettings, load_settings
from .errors import DecodeFailure
from .logging import fields, get_logger, log_context
from .types import ErrorResponse

_LOGGER = get_logger(__name__)


@dataclass(eq=False)
class ClientError(Exception):
    """Base error type for calls to a service speaking the error contract."""

    message: str
    operation: str = ""

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message


@dataclass(eq=False)
class TransportError(ClientError):
    """The request never produced an HTTP response."""

    method: str = ""
    url: str = ""
    retryable: bool = True
    cause: Exception | None = None


@dataclass(eq=False)
class ServiceError(ClientError):
    """The service answered with a non-success status and an error payload."""

    status_code: int = 0
    response: ErrorResponse = field(default_factory=ErrorResponse)

    @property
    def error_code(self) -> ErrorCode:
        """Classification reported by the service."""
        return self.response.error_code


@dataclass(eq=False)
class UnknownServiceError(ServiceError):
    """Unclassified failure, including codes newer than this client."""


@dataclass(eq=False)
class InvalidRequestError(ServiceError):
    """The service rejected the request input."""


@dataclass(eq=False)
class AuthError(ServiceError):
    """Authentication failed or the request was unauthorized."""


@dataclass(eq=False)
class LightningError(ServiceError):
    """A Lightning operation failed on the service."""


@dataclass(eq=False)
class InternalServerError(ServiceError):
    """The service hit an internal fault."""


@dataclass(eq=False)
class MalformedErrorResponse(ServiceError):
    """Non-success response whose body is not a decodable error payload."""

    cause: Exception | None = None


_ERROR_TYPES: Mapping[ErrorCode, type[ServiceError]] = MappingProxyType(
    {
        ErrorCode.UNKNOWN_ERROR: UnknownServiceError,
        ErrorCode.INVALID_REQUEST_ERROR: InvalidRequestError,
        ErrorCode.AUTH_ERROR: AuthError,
        ErrorCode.LIGHTNING_ERROR: LightningError,
        ErrorCode.INTERNAL_SERVER_ERROR: InternalServerError,
    }
)


def error_for_response(
    response: ErrorResponse,
    *,
    status_code: int,
    operation: str = "",
) -> ServiceError:
    """Build the typed error for one decoded error payload."""
    error_type = _ERROR_TYPES.get(response.error_code, UnknownServiceError)
    label = operation or "request"
    return error_type(
        message=(
            f"{label} failed ({status_code} {response.error_code.name}): "
            f"{response.message}"
        ),
        operation=operation,
        status_code=status_code,
        response=response,
    )


def raise_for_error_response(response: httpx.Response, *, operation: str = "") -> None:
    """Raise the typed error for a non-success response; no-op on success."""
    if response.is_success:
        return

    status_code = response.status_code
    with log_context({fields.OPERATION: operation}):
        try:
            decoded = decode_body(
                response.content, response.headers.get("content-type")
            )
        except DecodeFailure as exc:
            _LOGGER.warning(
                "error_response_undecodable",
                extra={
                    fields.STATUS_CODE: status_code,
                    fields.PAYLOAD_SIZE: exc.payload_size,
                },
            )
            raise MalformedErrorResponse(
                message=f"{operation or 'request'} failed ({status_code}): {exc.message}",
                operation=operation,
                status_code=status_code,
                cause=exc,
            ) from exc

        error = error_for_response(
            decoded, status_code=status_code, operation=operation
        )
        log = _LOGGER.warning if status_code >= 500 else _LOGGER.info
        log(
            "service_error_response",
            extra={
                fields.STATUS_CODE: status_code,
                fields.ERROR_CODE: decoded.error_code.name,
            },
        )
        raise error


def _transport_error(
    exc: httpx.RequestError, *, operation: str, url: str
) -> TransportError:
    """Map one httpx transport failure into a typed error."""
    request = exc.request if _has_request(exc) else None
    request_url = str(request.url) if request is not None else url
    request_method = request.method if request is not None else "POST"
    _LOGGER.warning(
        "service_request_failed",
        extra={
            fields.METHOD: request_method,
            fields.URL: request_url,
            fields.RETRYABLE: True,
        },
    )
    return TransportError(
        message=f"{operation} transport failure for {request_method} {request_url}",
        operation=operation,
        method=request_method,
        url=request_url,
        cause=exc,
    )


def _has_request(exc: httpx.RequestError) -> bool:
    """Return whether an httpx error has its request bound."""
    try:
        exc.request
    except RuntimeError:
        return False
    return True


def _operation_for(path: str) -> str:
    """Derive the operation label from an endpoint path."""
    return path.strip("/")


def _resolve_client_settings(settings: ClientSettings | None) -> ClientSettings:
    return settings if settings is not None else load_settings().client


class ErrorContractClient:
    """Synchronous client posting protobuf bodies to an error-contract service."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        headers: Mapping[str, str] | None = None,
        transport: httpx.BaseTransport | None = None,
        client: httpx.Client | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        """Create a client; unset options fall back to ``ClientSettings``."""
        self._owns_client = client is None
        if client is None:
            resolved = _resolve_client_settings(settings)
            client = httpx.Client(
                base_url=base_url if base_url is not None else resolved.base_url,
                timeout=(
                    timeout_seconds
                    if timeout_seconds is not None
                    else resolved.timeout_seconds
                ),
                headers=dict(headers or {}),
                transport=transport,
            )
        self._client = client

    def close(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> ErrorContractClient:
        """Enter context manager scope."""
        return self

    def __exit__(self, *_: object) -> None:
        """Exit context manager scope and close client."""
        self.close()

    def post(self, path: str, body: bytes, *, operation: str | None = None) -> bytes:
        """POST one encoded request and return the success body.

        Raises:
            TransportError: no response was received.
            ServiceError: the service answered with an error payload.
        """
        label = operation if operation is not None else _operation_for(path)
        with log_context({fields.OPERATION: label}):
            try:
                response = self._client.post(
                    path,
                    content=body,
                    headers={"Content-Type": PROTOBUF_MEDIA_TYPE},
                )
            except httpx.RequestError as exc:
                raise _transport_error(exc, operation=label, url=path) from exc

            raise_for_error_response(response, operation=label)
            return response.content


class AsyncErrorContractClient:
    """Asynchronous client posting protobuf bodies to an error-contract service."""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        headers: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        """Create a client; unset options fall back to ``ClientSettings``."""
        self._owns_client = client is None
        if client is None:
            resolved = _resolve_client_settings(settings)
            client = httpx.AsyncClient(
                base_url=base_url if base_url is not None else resolved.base_url,
                timeout=(
                    timeout_seconds
                    if timeout_seconds is not None
                    else resolved.timeout_seconds
                ),
                headers=dict(headers or {}),
                transport=transport,
            )
        self._client = client

    async def aclose(self) -> None:
        """Close underlying transport resources when owned."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> AsyncErrorContractClient:
        """Enter async context manager scope."""
        return self

    async def __aexit__(self, *_: object) -> None:
        """Exit async context manager scope and close client."""
        await self.aclose()

    async def post(
        self, path: str, body: bytes, *, operation: str | None = None
    ) -> bytes:
        """POST one encoded request and return the success body."""
        label = operation if operation is not None else _operation_for(path)
        with log_context({fields.OPERATION: label}):
            try:
                response = await self._client.post(
                    path,
                    content=body,
                    headers={"Content-Type": PROTOBUF_MEDIA_TYPE},
                )
            except httpx.RequestError as exc:
                raise _transport_error(exc, operation=label, url=path) from exc

            raise_for_error_response(response, operation=label)
            return response.content
