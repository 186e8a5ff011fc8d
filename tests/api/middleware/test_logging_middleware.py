"""Tests for request logging middleware."""

import pytest
import structlog
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from pets_api.api.middleware.logging import (
    MAX_REQUEST_ID_LENGTH,
    REQUEST_ID_HEADER,
    LoggingMiddleware,
)


@pytest.fixture
def echo_app() -> FastAPI:
    """App that reports the request id seen by the route and the log context."""
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)

    @app.get("/echo")
    async def echo():
        return {"bound": structlog.contextvars.get_contextvars().get("request_id")}

    return app


async def _get(app: FastAPI, headers=None):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.get("/echo", headers=headers or {})


class TestLoggingMiddleware:
    async def test_mints_request_id(self, echo_app: FastAPI):
        response = await _get(echo_app)

        request_id = response.headers[REQUEST_ID_HEADER]
        assert len(request_id) == 36
        assert response.json()["bound"] == request_id

    async def test_reuses_caller_request_id(self, echo_app: FastAPI):
        response = await _get(echo_app, {REQUEST_ID_HEADER: "trace-abc-123"})

        assert response.headers[REQUEST_ID_HEADER] == "trace-abc-123"
        assert response.json()["bound"] == "trace-abc-123"

    async def test_replaces_oversized_request_id(self, echo_app: FastAPI):
        oversized = "x" * (MAX_REQUEST_ID_LENGTH + 1)

        response = await _get(echo_app, {REQUEST_ID_HEADER: oversized})

        assert response.headers[REQUEST_ID_HEADER] != oversized
        assert len(response.headers[REQUEST_ID_HEADER]) == 36

    async def test_context_is_cleared_after_request(self, echo_app: FastAPI):
        await _get(echo_app)

        assert "request_id" not in structlog.contextvars.get_contextvars()


async def test_error_envelope_carries_caller_request_id(client: AsyncClient):
    response = await client.get(
        "/api/v1/users/999", headers={REQUEST_ID_HEADER: "trace-404"}
    )

    assert response.status_code == 404
    assert response.json()["request_id"] == "trace-404"
    assert response.headers[REQUEST_ID_HEADER] == "trace-404"
