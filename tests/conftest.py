"""Shared test fixtures for the Hubitat MCP server."""

import pytest

from hubitat_mcp.config import HubitatConfig
from hubitat_mcp.dispatcher import ToolDispatcher
from hubitat_mcp.models import Device
from hubitat_mcp.server import McpServer
from hubitat_mcp.tools import create_default_registry
from tests.mocks import FAKE_TOKEN, StubHubClient, sample_device_payloads


@pytest.fixture
def hub_config():
    """Create a configuration pointing at a test hub."""
    return HubitatConfig(
        base_url="http://hub.local/apps/api/7/devices",
        token=FAKE_TOKEN,
        port=5006,
        request_timeout=5.0,
    )


@pytest.fixture
def sample_devices():
    """Create the two sample devices (ids "1" and "2")."""
    return [Device.from_dict(payload) for payload in sample_device_payloads()]


@pytest.fixture
def stub_client(sample_devices):
    """Create a call-counting hub client serving the sample devices."""
    return StubHubClient(devices=sample_devices)


@pytest.fixture
def registry(stub_client):
    """Create the default tool registry backed by the stub client."""
    return create_default_registry(stub_client)


@pytest.fixture
def dispatcher(registry):
    """Create a dispatcher over the default registry."""
    return ToolDispatcher(registry)


@pytest.fixture
def mcp_server(registry, dispatcher):
    """Create an MCP server over the default registry."""
    return McpServer(registry, dispatcher)
