"""Device control tools for the Hubitat MCP server.

This module provides the tools that send commands to devices through the
Maker API: turn_on, turn_off, set_level and the generic send_command.

Example tool calls:
    # Turn on a switch
    {"device_id": "12"}

    # Dim a light to 40%
    {"device_id": "12", "level": 40}

    # Send a command with an argument
    {"device_id": "31", "command": "setHeatingSetpoint", "value": "68"}
"""

from __future__ import annotations

import logging
from typing import Any

from ..const import (
    COMMAND_OFF,
    COMMAND_ON,
    COMMAND_SET_LEVEL,
    LEVEL_MAX,
    LEVEL_MIN,
    PARAM_COMMAND,
    PARAM_DEVICE_ID,
    PARAM_LEVEL,
    PARAM_VALUE,
    TOOL_SEND_COMMAND,
    TOOL_SET_LEVEL,
    TOOL_TURN_OFF,
    TOOL_TURN_ON,
)
from ..helpers import format_level
from .registry import BaseTool, ParameterKind, ParameterSpec

_LOGGER = logging.getLogger(__name__)


class _SwitchTool(BaseTool):
    """Shared implementation of the on/off tools."""

    tool_name: str
    command: str

    @property
    def name(self) -> str:
        """Return the tool name."""
        return self.tool_name

    @property
    def description(self) -> str:
        """Return the tool description."""
        return f"Turn {self.command} a Hubitat device (switches, lights, etc.)"

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        """Return the tool parameter specs."""
        return (
            ParameterSpec(
                PARAM_DEVICE_ID,
                ParameterKind.STRING,
                f"The ID of the device to turn {self.command}",
            ),
        )

    async def execute(self, **kwargs: Any) -> str:
        """Send the on/off command."""
        device_id: str = kwargs[PARAM_DEVICE_ID]
        await self.client.send_command(device_id, self.command)
        return f"Successfully turned {self.command} device {device_id}"


class TurnOnTool(_SwitchTool):
    """Tool turning a device on."""

    tool_name = TOOL_TURN_ON
    command = COMMAND_ON


class TurnOffTool(_SwitchTool):
    """Tool turning a device off."""

    tool_name = TOOL_TURN_OFF
    command = COMMAND_OFF


class SetLevelTool(BaseTool):
    """Tool setting the level of a dimmable device.

    The level range (0-100, inclusive) is declared on the parameter spec and
    enforced by the dispatcher before this tool runs. Fractional levels are
    truncated toward zero: 57.9 is sent as "57".
    """

    @property
    def name(self) -> str:
        """Return the tool name."""
        return TOOL_SET_LEVEL

    @property
    def description(self) -> str:
        """Return the tool description."""
        return "Set the level of a dimmable device (0-100)"

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        """Return the tool parameter specs."""
        return (
            ParameterSpec(
                PARAM_DEVICE_ID,
                ParameterKind.STRING,
                "The ID of the device",
            ),
            ParameterSpec(
                PARAM_LEVEL,
                ParameterKind.NUMBER,
                "The level to set (0-100)",
                minimum=LEVEL_MIN,
                maximum=LEVEL_MAX,
            ),
        )

    async def execute(self, **kwargs: Any) -> str:
        """Send setLevel with the truncated level."""
        device_id: str = kwargs[PARAM_DEVICE_ID]
        level = format_level(kwargs[PARAM_LEVEL])

        await self.client.send_command_with_value(device_id, COMMAND_SET_LEVEL, level)
        return f"Successfully set device {device_id} to level {level}"


class SendCommandTool(BaseTool):
    """Tool sending an arbitrary Maker API command.

    An empty ``value`` is treated as absent: the command is sent without a
    value segment.
    """

    @property
    def name(self) -> str:
        """Return the tool name."""
        return TOOL_SEND_COMMAND

    @property
    def description(self) -> str:
        """Return the tool description."""
        return "Send a custom command to a Hubitat device"

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        """Return the tool parameter specs."""
        return (
            ParameterSpec(
                PARAM_DEVICE_ID,
                ParameterKind.STRING,
                "The ID of the device",
            ),
            ParameterSpec(
                PARAM_COMMAND,
                ParameterKind.STRING,
                "The command to send (e.g., 'refresh', 'configure')",
            ),
            ParameterSpec(
                PARAM_VALUE,
                ParameterKind.STRING,
                "Optional value parameter for the command",
                required=False,
            ),
        )

    async def execute(self, **kwargs: Any) -> str:
        """Send the command, with its value segment when one is given."""
        device_id: str = kwargs[PARAM_DEVICE_ID]
        command: str = kwargs[PARAM_COMMAND]
        value: str | None = kwargs.get(PARAM_VALUE)

        if value:
            await self.client.send_command_with_value(device_id, command, value)
        else:
            await self.client.send_command(device_id, command)

        _LOGGER.debug("Command '%s' accepted for device %s", command, device_id)
        return f"Successfully sent command '{command}' to device {device_id}"
