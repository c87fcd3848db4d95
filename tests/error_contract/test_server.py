"""Tests for the server-side error response builder."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from packages.error_contract import ErrorCode, ErrorResponse, decode, decode_json
from packages.error_contract.server import error_http_response


def test_error_http_response_carries_encoded_payload() -> None:
    """The body should be the protobuf payload with the caller's status."""
    response = error_http_response(
        "invoice expired", ErrorCode.LIGHTNING_ERROR, status_code=500
    )

    assert response.status_code == 500
    assert response.media_type == "application/octet-stream"
    assert decode(response.body) == ErrorResponse(
        message="invoice expired", error_code=ErrorCode.LIGHTNING_ERROR
    )


def test_error_http_response_status_is_not_derived_from_code() -> None:
    """The same code should be emitted under whatever status the caller picks."""
    first = error_http_response("x", ErrorCode.AUTH_ERROR, status_code=401)
    second = error_http_response("x", ErrorCode.AUTH_ERROR, status_code=403)

    assert (first.status_code, second.status_code) == (401, 403)
    assert first.body == second.body


def test_error_http_response_renders_json() -> None:
    """JSON media type should render the symbolic JSON form."""
    response = error_http_response(
        "bad",
        ErrorCode.INVALID_REQUEST_ERROR,
        status_code=400,
        media_type="application/json",
    )

    assert decode_json(response.body).error_code is ErrorCode.INVALID_REQUEST_ERROR


@pytest.mark.parametrize("status_code", [200, 204, 302])
def test_error_http_response_rejects_success_status(status_code: int) -> None:
    """Non-error statuses should be refused."""
    with pytest.raises(ValueError):
        error_http_response("x", ErrorCode.UNKNOWN_ERROR, status_code=status_code)


def test_error_http_response_rejects_unknown_media_type() -> None:
    """Only protobuf and JSON renderings are supported."""
    with pytest.raises(ValueError):
        error_http_response(
            "x", ErrorCode.UNKNOWN_ERROR, status_code=500, media_type="text/plain"
        )


def test_error_http_response_served_through_fastapi() -> None:
    """A route returning the helper's response should deliver the payload."""
    app = FastAPI()

    @app.post("/OpenChannel")
    def open_channel() -> Response:
        return error_http_response(
            "peer offline", ErrorCode.LIGHTNING_ERROR, status_code=500
        )

    with TestClient(app) as client:
        response = client.post("/OpenChannel")

    assert response.status_code == 500
    assert response.headers["content-type"] == "application/octet-stream"
    assert decode(response.content).error_code is ErrorCode.LIGHTNING_ERROR
