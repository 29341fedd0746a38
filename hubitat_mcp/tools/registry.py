"""Tool registry for the Hubitat MCP server.

This module provides the declarative parameter schema (ParameterSpec), the
BaseTool class every tool derives from, and the ToolRegistry that maps tool
names to tool instances and formats them for MCP clients.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..exceptions import ValidationError

if TYPE_CHECKING:
    from ..hub_client import HubitatClient


class ParameterKind(str, Enum):
    """JSON types a tool parameter may declare."""

    STRING = "string"
    NUMBER = "number"


@dataclass(frozen=True)
class ParameterSpec:
    """Declarative description of one tool parameter.

    Attributes:
        name: Argument name as sent by the client
        kind: Expected JSON type
        description: Human readable description shown to clients
        required: Whether the argument must be present
        minimum: Inclusive lower bound for numbers
        maximum: Inclusive upper bound for numbers
    """

    name: str
    kind: ParameterKind
    description: str
    required: bool = True
    minimum: float | None = None
    maximum: float | None = None

    def to_json_schema(self) -> dict[str, Any]:
        """Return the JSON Schema fragment for this parameter."""
        schema: dict[str, Any] = {
            "type": self.kind.value,
            "description": self.description,
        }
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        return schema


class BaseTool(ABC):
    """Base class for all Hubitat tools.

    Tools declare their name, description and parameter specs; the
    dispatcher validates arguments against the specs before calling
    execute(), so execute() receives typed keyword arguments only.
    """

    def __init__(self, client: HubitatClient) -> None:
        """Initialize the tool.

        Args:
            client: Hub client used to reach the Maker API
        """
        self.client = client

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the tool name (snake_case, unique in the catalog)."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Return the tool description shown to MCP clients."""

    @property
    def parameters(self) -> tuple[ParameterSpec, ...]:
        """Return the ordered parameter specs. Tools without arguments keep the default."""
        return ()

    @abstractmethod
    async def execute(self, **kwargs: Any) -> str:
        """Execute the tool with validated arguments.

        Returns:
            Text payload for the success result

        Raises:
            ValidationError: If arguments are semantically invalid
            ToolExecutionError: If the tool cannot complete
            HubitatAPIError: If the hub call fails
        """

    def input_schema(self) -> dict[str, Any]:
        """Return the JSON Schema object describing the tool arguments."""
        return {
            "type": "object",
            "properties": {
                spec.name: spec.to_json_schema() for spec in self.parameters
            },
            "required": [spec.name for spec in self.parameters if spec.required],
        }

    def to_mcp_format(self) -> dict[str, Any]:
        """Convert the tool to an MCP ``tools/list`` entry.

        Returns:
            Dict in MCP tool format:
            {
                "name": "tool_name",
                "description": "Tool description",
                "inputSchema": {...}
            }
        """
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema(),
        }


class ToolRegistry:
    """Registry mapping tool names to tool instances.

    The registry is filled once at startup and only read afterwards, so it
    can be shared by every concurrent invocation.

    Example:
        registry = create_default_registry(client)
        tools = registry.get_tools_for_mcp()
        tool = registry.get_tool("turn_on")
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool in the registry.

        Args:
            tool: Tool instance to register

        Raises:
            ValidationError: If a tool with the same name is already registered
        """
        if tool.name in self._tools:
            raise ValidationError(
                f"Tool '{tool.name}' is already registered. "
                f"Each tool must have a unique name."
            )

        self._tools[tool.name] = tool

    def get_tool(self, tool_name: str) -> BaseTool | None:
        """Get a tool by name, or None if it is not registered."""
        return self._tools.get(tool_name)

    def get_all_tools(self) -> dict[str, BaseTool]:
        """Get a copy of the name to tool mapping."""
        return self._tools.copy()

    def get_tools_for_mcp(self) -> list[dict[str, Any]]:
        """Format registered tools for an MCP ``tools/list`` response, in catalog order."""
        return [tool.to_mcp_format() for tool in self._tools.values()]

    def list_tool_names(self) -> list[str]:
        """Get a list of all registered tool names."""
        return list(self._tools.keys())

    def count(self) -> int:
        """Get the number of registered tools."""
        return len(self._tools)
