"""Mock utilities for Hubitat MCP tests.

This package provides reusable stand-ins for the Hubitat hub:
- StubHubClient: call-counting replacement for HubitatClient
- FakeHub: aiohttp application implementing the Maker API endpoints
- connected_session: in-memory MCP client session against an McpServer

Mocks test:
- Argument validation and dispatch
- Request construction (paths, token handling)
- Error classification and result envelopes

Mocks do NOT test:
- Real hub firmware behavior
- Network reliability
"""

from .hub_mocks import (
    FAKE_TOKEN,
    SAMPLE_DEVICE_PAYLOADS,
    FakeHub,
    StubHubClient,
    sample_device_payloads,
)
from .mcp_session import connected_session

__all__ = [
    "FAKE_TOKEN",
    "SAMPLE_DEVICE_PAYLOADS",
    "FakeHub",
    "StubHubClient",
    "connected_session",
    "sample_device_payloads",
]
