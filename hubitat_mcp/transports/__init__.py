"""Transports carrying MCP messages to and from the server."""

from __future__ import annotations

from .sse import SseTransport
from .stdio import StdioTransport

__all__ = ["SseTransport", "StdioTransport"]
