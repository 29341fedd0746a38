"""Tools for the Hubitat MCP server.

This module provides the fixed tool catalog exposed to MCP clients and the
factory that builds it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .device_control import SendCommandTool, SetLevelTool, TurnOffTool, TurnOnTool
from .device_query import GetDeviceTool, ListDevicesTool
from .registry import BaseTool, ParameterKind, ParameterSpec, ToolRegistry

if TYPE_CHECKING:
    from ..hub_client import HubitatClient

TOOL_CLASSES: tuple[type[BaseTool], ...] = (
    ListDevicesTool,
    GetDeviceTool,
    TurnOnTool,
    TurnOffTool,
    SetLevelTool,
    SendCommandTool,
)


def create_default_registry(client: HubitatClient) -> ToolRegistry:
    """Build the registry holding the six Hubitat tools in catalog order."""
    registry = ToolRegistry()
    for tool_class in TOOL_CLASSES:
        registry.register(tool_class(client))
    return registry


__all__ = [
    "BaseTool",
    "GetDeviceTool",
    "ListDevicesTool",
    "ParameterKind",
    "ParameterSpec",
    "SendCommandTool",
    "SetLevelTool",
    "ToolRegistry",
    "TurnOffTool",
    "TurnOnTool",
    "create_default_registry",
]
