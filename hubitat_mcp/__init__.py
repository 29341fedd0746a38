"""Hubitat MCP server.

Exposes a Hubitat hub's Maker API as a fixed catalog of MCP tools over stdio
or HTTP/SSE.
"""

from __future__ import annotations

from .const import VERSION

__version__ = VERSION
