"""Device query tools for the Hubitat MCP server.

This module provides ListDevicesTool and GetDeviceTool, which read device
snapshots from the Maker API ``/all`` endpoint and render them as text.
"""

from __future__ import annotations

import logging
from typing import Any

from ..const import PARAM_DEVICE_ID, TOOL_GET_DEVICE, TOOL_LIST_DEVICES
from ..exceptions import DeviceNotFoundError
from ..helpers import format_device_detail, format_device_list
from .registry import BaseTool, ParameterKind, ParameterSpec

_LOGGER = logging.getLogger(__name__)


class ListDevicesTool(BaseTool):
    """Tool listing every device with its capabilities.

    Output is one line per device:
        ID: 12 | Label: Kitchen Light | Type: Generic Z-Wave Dimmer | Capabilities: Switch, SwitchLevel

    A hub without devices yields an empty string, not an error.
    """

    @property
    def name(self) -> str:
        """Return the tool name."""
        return TOOL_LIST_DEVICES

    @property
    def description(self) -> str:
        """Return the tool description."""
        return "List all Hubitat devices with their capabilities and current states"

    async def execute(self, **kwargs: Any) -> str:
        """Fetch and render the device list."""
        devices = await self.client.list_devices()
        _LOGGER.debug("Listing %d devices", len(devices))
        return format_device_list(devices)


class GetDeviceTool(BaseTool):
    """Tool returning the full details of one device.

    The device is found by scanning the full ``/all`` listing for an exact,
    case-sensitive id match; the first match wins.
    """

    @property
    def name(self) -> str:
        """Return the tool name."""
        return TOOL_GET_DEVICE

    @property
    def description(self) -> str:
        """Return the tool description."""
        return "Get detailed information about a specific Hubitat device"

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        """Return the tool parameter specs."""
        return (
            ParameterSpec(
                PARAM_DEVICE_ID,
                ParameterKind.STRING,
                "The ID of the device to query",
            ),
        )

    async def execute(self, **kwargs: Any) -> str:
        """Look up the device and render it as indented JSON.

        Raises:
            DeviceNotFoundError: If no device has the requested id
        """
        device_id: str = kwargs[PARAM_DEVICE_ID]
        devices = await self.client.list_devices()

        for device in devices:
            if device.id == device_id:
                return format_device_detail(device)

        raise DeviceNotFoundError(device_id)
