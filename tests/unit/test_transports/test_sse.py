"""Unit tests for the HTTP/SSE transport routes."""

import uuid

import httpx
import pytest
from starlette.routing import Mount, Route

from hubitat_mcp.transports.sse import SseTransport

JSON_HEADERS = {"Content-Type": "application/json"}


def _client(transport):
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=transport.create_app()),
        base_url="http://testserver",
    )


class TestSseTransport:
    """Test the Starlette application."""

    def test_routes(self, mcp_server):
        """Test that the SSE, message and health routes are mounted."""
        app = SseTransport(mcp_server, port=0).create_app()

        paths = {route.path: type(route) for route in app.routes}
        assert paths["/sse"] is Route
        assert paths["/health"] is Route
        assert paths["/messages"] is Mount

    @pytest.mark.asyncio
    async def test_health(self, mcp_server):
        """Test the health endpoint."""
        async with _client(SseTransport(mcp_server, port=0)) as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "server": "hubitat-mcp",
            "version": "1.0.0",
        }

    @pytest.mark.asyncio
    async def test_message_requires_session_id(self, mcp_server):
        """Test that a message without a session is rejected."""
        async with _client(SseTransport(mcp_server, port=0)) as client:
            response = await client.post(
                "/messages/", content="{}", headers=JSON_HEADERS
            )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_message_unknown_session(self, mcp_server):
        """Test that a message for a session that was never opened is rejected."""
        async with _client(SseTransport(mcp_server, port=0)) as client:
            response = await client.post(
                f"/messages/?session_id={uuid.uuid4().hex}",
                content="{}",
                headers=JSON_HEADERS,
            )

        assert response.status_code == 404
