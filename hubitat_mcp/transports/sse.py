"""HTTP/SSE transport for the Hubitat MCP server.

This module exposes the MCP server over HTTP using the MCP SDK's
SseServerTransport mounted in a Starlette application served by uvicorn:

    GET  /sse                           event stream; first event names the message endpoint
    POST /messages/?session_id={id}     JSON-RPC message; the response arrives on the stream
    GET  /health                        liveness check

Each connected client gets its own SDK session, so concurrent clients never
wait on each other's hub calls.
"""

from __future__ import annotations

import logging

import uvicorn
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Mount, Route

from ..const import DEFAULT_HOST, HEALTH_PATH, MESSAGE_PATH, SSE_PATH
from ..server import McpServer

_LOGGER = logging.getLogger(__name__)


class SseTransport:
    """Serves any number of MCP clients over HTTP and server-sent events.

    Example:
        transport = SseTransport(server, host="0.0.0.0", port=5006)
        await transport.serve()
    """

    def __init__(
        self,
        server: McpServer,
        *,
        host: str = DEFAULT_HOST,
        port: int,
    ) -> None:
        """Initialize the transport.

        Args:
            server: MCP server shared with the other transports
            host: Interface to bind
            port: TCP port to listen on
        """
        self.server = server
        self.host = host
        self.port = port
        self._sse = SseServerTransport(MESSAGE_PATH)

    def create_app(self) -> Starlette:
        """Build the ASGI application."""
        return Starlette(
            routes=[
                Route(SSE_PATH, endpoint=self.handle_sse, methods=["GET"]),
                Mount(MESSAGE_PATH, app=self._sse.handle_post_message),
                Route(HEALTH_PATH, endpoint=self.handle_health, methods=["GET"]),
            ]
        )

    async def serve(self) -> None:
        """Run the HTTP listener until shut down."""
        config = uvicorn.Config(
            self.create_app(),
            host=self.host,
            port=self.port,
            log_level="warning",
            access_log=False,
        )
        _LOGGER.info("Serving MCP over HTTP/SSE on %s:%d", self.host, self.port)
        await uvicorn.Server(config).serve()
        _LOGGER.info("HTTP/SSE transport stopped")

    async def handle_health(self, request: Request) -> JSONResponse:
        """Report liveness."""
        return JSONResponse(
            {
                "status": "ok",
                "server": self.server.name,
                "version": self.server.version,
            }
        )

    async def handle_sse(self, request: Request) -> Response:
        """Open an event stream and run one MCP session on it."""
        _LOGGER.info("SSE session opened from %s", request.client)
        async with self._sse.connect_sse(
            request.scope, request.receive, request._send  # pylint: disable=protected-access
        ) as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream)
        _LOGGER.info("SSE session from %s closed", request.client)
        return Response()
