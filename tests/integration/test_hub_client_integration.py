"""Integration tests for HubitatClient against a fake Maker API."""

import json
import socket

import pytest

from hubitat_mcp.config import HubitatConfig
from hubitat_mcp.dispatcher import ToolDispatcher
from hubitat_mcp.exceptions import DecodeError, HubError, NetworkError
from hubitat_mcp.hub_client import HubitatClient
from hubitat_mcp.tools import create_default_registry
from tests.mocks import FAKE_TOKEN


def _unused_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_list_devices(live_client, fake_hub):
    """Test fetching and decoding the device listing."""
    devices = await live_client.list_devices()

    assert [device.label for device in devices] == ["Kitchen Light", "Front Door"]
    assert devices[0].commands[2].command == "setLevel"
    assert devices[1].attributes["battery"] == 88
    assert fake_hub.requests == [
        ("GET", "/apps/api/7/devices/all", {"access_token": FAKE_TOKEN})
    ]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_send_commands(live_client, fake_hub):
    """Test the bare and valued command paths."""
    await live_client.send_command("1", "on")
    await live_client.send_command_with_value("1", "setLevel", "40")

    assert [request[:2] for request in fake_hub.requests] == [
        ("POST", "/apps/api/7/devices/1/on"),
        ("POST", "/apps/api/7/devices/1/setLevel/40"),
    ]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_unknown_device_is_hub_error(live_client):
    """Test that a 404 from the hub raises HubError."""
    with pytest.raises(HubError) as exc_info:
        await live_client.send_command("999", "on")

    assert exc_info.value.status == 404
    assert exc_info.value.body == "Device not found"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_bad_token(hub_server):
    """Test that an invalid token surfaces as a 401 without leaking it."""
    config = HubitatConfig(
        base_url=str(hub_server.make_url("/apps/api/7/devices")),
        token="wrong-token",
        request_timeout=5.0,
    )

    async with HubitatClient(config) as client:
        with pytest.raises(HubError) as exc_info:
            await client.list_devices()

    assert exc_info.value.status == 401
    assert "wrong-token" not in str(exc_info.value)


@pytest.mark.integration
@pytest.mark.asyncio
async def test_server_error(live_client, fake_hub):
    """Test that a 5xx status raises HubError with the body."""
    fake_hub.fail_status = 503
    fake_hub.fail_body = "hub is rebooting"

    with pytest.raises(HubError, match="503: hub is rebooting"):
        await live_client.list_devices()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_malformed_listing(live_client, fake_hub):
    """Test that a non-array body raises DecodeError."""
    fake_hub.raw_body = json.dumps({"devices": []})

    with pytest.raises(DecodeError):
        await live_client.list_devices()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_unreachable_hub():
    """Test that a closed port raises NetworkError."""
    config = HubitatConfig(
        base_url=f"http://127.0.0.1:{_unused_port()}/apps/api/7/devices",
        token=FAKE_TOKEN,
        request_timeout=5.0,
    )

    async with HubitatClient(config) as client:
        with pytest.raises(NetworkError, match="^failed to fetch devices: "):
            await client.list_devices()


@pytest.mark.integration
@pytest.mark.asyncio
async def test_dispatcher_end_to_end(live_client, fake_hub):
    """Test the full tool path from dispatcher to hub."""
    dispatcher = ToolDispatcher(create_default_registry(live_client))

    level = await dispatcher.invoke("set_level", {"device_id": "1", "level": 62.5})
    missing = await dispatcher.invoke("turn_on", {"device_id": "999"})
    detail = await dispatcher.invoke("get_device", {"device_id": "2"})

    assert level.text == "Successfully set device 1 to level 62"
    assert missing.is_error
    assert "404" in missing.error
    assert json.loads(detail.text)["attributes"]["lock"] == "locked"
    assert ("POST", "/apps/api/7/devices/1/setLevel/62") in [
        request[:2] for request in fake_hub.requests
    ]


@pytest.mark.integration
@pytest.mark.asyncio
async def test_dispatcher_with_invalid_utf8_bodies(live_client, fake_hub):
    """Test that bodies which are not valid UTF-8 keep their meaning."""
    dispatcher = ToolDispatcher(create_default_registry(live_client))

    fake_hub.command_body = b"ok \xe9"
    success = await dispatcher.invoke("turn_on", {"device_id": "1"})

    fake_hub.raw_body = b"\xe9"
    undecodable = await dispatcher.invoke("list_devices", {})

    fake_hub.fail_status = 503
    fake_hub.fail_body = b"offline \xe9"
    failure = await dispatcher.invoke("turn_off", {"device_id": "1"})

    assert success.text == "Successfully turned on device 1"
    assert undecodable.is_error
    assert undecodable.error.startswith("failed to decode devices")
    assert "503" in failure.error
    assert "offline" in failure.error
