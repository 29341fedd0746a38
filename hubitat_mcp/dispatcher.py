"""Tool dispatcher for the Hubitat MCP server.

This module provides the ToolDispatcher class which validates an incoming
tool invocation against the catalog, runs the matching tool and normalizes
the outcome into a ToolResult. It is the boundary past which no exception
travels: transports always receive a result object.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from mcp import types

from .const import MAX_LOGGED_ARGUMENTS_LENGTH
from .exceptions import HubitatMCPError, UnknownToolError, ValidationError
from .helpers import truncate_text
from .tools.registry import BaseTool, ParameterKind, ParameterSpec, ToolRegistry

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolResult:
    """Uniform success-or-error envelope for one invocation.

    Exactly one of ``text`` and ``error`` is set.
    """

    text: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, text: str) -> ToolResult:
        """Create a success result."""
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> ToolResult:
        """Create an error result."""
        return cls(error=message)

    @property
    def is_error(self) -> bool:
        """Return True if this is an error result."""
        return self.error is not None

    def to_content(self) -> list[types.TextContent]:
        """Render the payload (or error message) as MCP text content."""
        text = self.error if self.is_error else self.text
        return [types.TextContent(type="text", text=text or "")]


def _matches_kind(value: Any, kind: ParameterKind) -> bool:
    if kind is ParameterKind.STRING:
        return isinstance(value, str)
    # bool is an int subclass but never a valid number argument
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_bound(bound: float) -> str:
    return f"{bound:g}"


def validate_arguments(
    specs: tuple[ParameterSpec, ...], arguments: Mapping[str, Any]
) -> dict[str, Any]:
    """Check arguments against parameter specs, stopping at the first problem.

    Args:
        specs: Ordered parameter specs of the tool
        arguments: Untyped arguments supplied by the client

    Returns:
        Dict of validated arguments. Optional arguments of the wrong type are
        left out.

    Raises:
        ValidationError: For the first missing, mistyped or out-of-range argument
    """
    validated: dict[str, Any] = {}

    for spec in specs:
        value = arguments.get(spec.name)

        if not _matches_kind(value, spec.kind):
            if spec.required:
                raise ValidationError(f"{spec.name} must be a {spec.kind.value}")
            continue

        if spec.kind is ParameterKind.NUMBER and (
            spec.minimum is not None or spec.maximum is not None
        ):
            low = -math.inf if spec.minimum is None else spec.minimum
            high = math.inf if spec.maximum is None else spec.maximum
            non_finite = isinstance(value, float) and not math.isfinite(value)
            if non_finite or not low <= value <= high:
                raise ValidationError(
                    f"{spec.name} must be between "
                    f"{_format_bound(low)} and {_format_bound(high)}"
                )

        validated[spec.name] = value

    return validated


class ToolDispatcher:
    """Validates and executes tool invocations.

    The dispatcher only reads the registry, so a single instance can serve
    any number of concurrent invocations from either transport.

    Example:
        dispatcher = ToolDispatcher(create_default_registry(client))
        result = await dispatcher.invoke("set_level", {"device_id": "12", "level": 40})
        if result.is_error:
            print(result.error)
    """

    def __init__(self, registry: ToolRegistry) -> None:
        """Initialize the dispatcher.

        Args:
            registry: Catalog of available tools
        """
        self.registry = registry

    def _resolve(self, tool_name: Any) -> BaseTool:
        tool = self.registry.get_tool(tool_name) if isinstance(tool_name, str) else None
        if tool is None:
            raise UnknownToolError(str(tool_name))
        return tool

    async def invoke(self, tool_name: str, arguments: Mapping[str, Any] | None) -> ToolResult:
        """Run one tool invocation.

        Args:
            tool_name: Name of the tool to execute
            arguments: Untyped argument mapping from the transport

        Returns:
            ToolResult with either the tool's text payload or an error message.
            This method never raises.
        """
        start_time = time.monotonic()

        try:
            tool = self._resolve(tool_name)

            if arguments is None:
                arguments = {}
            if not isinstance(arguments, Mapping):
                raise ValidationError("arguments must be an object")

            _LOGGER.debug(
                "Invoking tool '%s' with arguments: %s",
                tool_name,
                truncate_text(str(dict(arguments)), MAX_LOGGED_ARGUMENTS_LENGTH),
            )

            validated = validate_arguments(tool.parameters, arguments)
            payload = await tool.execute(**validated)

        except HubitatMCPError as error:
            _LOGGER.warning(
                "Tool '%s' failed after %.2fms: %s",
                tool_name,
                (time.monotonic() - start_time) * 1000,
                error,
            )
            return ToolResult.failure(str(error))

        except Exception as error:
            _LOGGER.error(
                "Unexpected error executing tool '%s': %s",
                tool_name,
                error,
                exc_info=True,
            )
            return ToolResult.failure(
                f"Unexpected error executing tool '{tool_name}': {error}"
            )

        _LOGGER.info(
            "Tool '%s' executed successfully in %.2fms",
            tool_name,
            (time.monotonic() - start_time) * 1000,
        )
        return ToolResult.success(payload)
