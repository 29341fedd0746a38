"""Integration test fixtures for the Hubitat MCP server.

These fixtures run a fake Maker API on a local aiohttp test server, so the
real HubitatClient, tools, dispatcher and transports can be exercised over
actual HTTP without a hub on the network.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from aiohttp.test_utils import TestServer

from hubitat_mcp.config import HubitatConfig
from hubitat_mcp.hub_client import HubitatClient
from tests.mocks import FAKE_TOKEN, FakeHub


@pytest.fixture
def fake_hub() -> FakeHub:
    """Create an in-memory hub serving the sample devices."""
    return FakeHub()


@pytest_asyncio.fixture
async def hub_server(fake_hub: FakeHub) -> AsyncGenerator[TestServer, None]:
    """Serve the fake hub on a free local port."""
    server = TestServer(fake_hub.create_app())
    await server.start_server()
    yield server
    await server.close()


@pytest.fixture
def live_config(hub_server: TestServer) -> HubitatConfig:
    """Create a configuration pointing at the running fake hub."""
    return HubitatConfig(
        base_url=str(hub_server.make_url("/apps/api/7/devices")),
        token=FAKE_TOKEN,
        request_timeout=5.0,
    )


@pytest_asyncio.fixture
async def live_client(live_config: HubitatConfig) -> AsyncGenerator[HubitatClient, None]:
    """Create a real client talking to the fake hub."""
    async with HubitatClient(live_config) as client:
        yield client
