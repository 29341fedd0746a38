"""MCP server for the Hubitat tool catalog.

This module provides the McpServer class which registers the tool catalog
with the MCP SDK's low-level Server. The SDK owns the JSON-RPC protocol
(initialize, ping, tools/list, tools/call, error codes); this module only
maps tools/list to the registry and tools/call to the dispatcher. Both
transports run the same McpServer, so a tool call produces the same result
whichever transport carried it.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.server.lowlevel import NotificationOptions, Server

from .const import SERVER_NAME, VERSION
from .dispatcher import ToolDispatcher
from .tools.registry import ToolRegistry

_LOGGER = logging.getLogger(__name__)


class ToolCallError(Exception):
    """Raised to hand a failed ToolResult to the SDK as an isError result."""


class McpServer:
    """Exposes the tool registry through an MCP SDK Server.

    Example:
        mcp_server = McpServer(registry, ToolDispatcher(registry))
        async with stdio_server() as (read_stream, write_stream):
            await mcp_server.run(read_stream, write_stream)
    """

    def __init__(
        self,
        registry: ToolRegistry,
        dispatcher: ToolDispatcher,
        *,
        name: str = SERVER_NAME,
        version: str = VERSION,
    ) -> None:
        """Initialize the server.

        Args:
            registry: Tool catalog advertised through tools/list
            dispatcher: Dispatcher executing tools/call
            name: Server name reported by initialize
            version: Server version reported by initialize
        """
        self.registry = registry
        self.dispatcher = dispatcher
        self.name = name
        self.version = version
        self.server: Server = Server(name, version=version)

        self.server.list_tools()(self.list_tools)
        # Argument checking is done by the dispatcher so error texts stay ours
        self.server.call_tool(validate_input=False)(self.call_tool)

    async def list_tools(self) -> list[types.Tool]:
        """Return the catalog as MCP tool descriptors, in catalog order."""
        return [types.Tool(**entry) for entry in self.registry.get_tools_for_mcp()]

    async def call_tool(
        self, name: str, arguments: dict[str, Any] | None
    ) -> list[types.TextContent]:
        """Run one tool through the dispatcher.

        Raises:
            ToolCallError: If the tool failed; the SDK turns it into a
                CallToolResult with isError set and the message as text
        """
        result = await self.dispatcher.invoke(name, arguments)
        if result.is_error:
            raise ToolCallError(result.error)
        return result.to_content()

    def initialization_options(self):
        """Return the options sent in the initialize response."""
        return self.server.create_initialization_options(
            notification_options=NotificationOptions(tools_changed=True)
        )

    async def run(self, read_stream, write_stream) -> None:
        """Serve one client session over a pair of SDK message streams."""
        _LOGGER.debug("MCP session started")
        await self.server.run(
            read_stream,
            write_stream,
            self.initialization_options(),
        )
        _LOGGER.debug("MCP session ended")
