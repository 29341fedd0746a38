"""Stdio transport for the Hubitat MCP server.

Framing (newline-delimited JSON-RPC on stdin/stdout) is handled by the MCP
SDK's ``stdio_server``; this module only binds it to the McpServer.
"""

from __future__ import annotations

import logging

from mcp.server.stdio import stdio_server

from ..server import McpServer

_LOGGER = logging.getLogger(__name__)


class StdioTransport:
    """Serves one MCP client over stdin/stdout.

    Example:
        transport = StdioTransport(server)
        await transport.serve()
    """

    def __init__(self, server: McpServer) -> None:
        """Initialize the transport.

        Args:
            server: MCP server shared with the other transports
        """
        self.server = server

    async def serve(self) -> None:
        """Serve until stdin is closed."""
        _LOGGER.info("Serving MCP over stdio")
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(read_stream, write_stream)
        _LOGGER.info("Stdin closed, stdio transport stopped")
