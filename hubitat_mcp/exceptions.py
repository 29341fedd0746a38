"""Custom exceptions for the Hubitat MCP server.

This module defines all custom exceptions used throughout the server for
error handling and flow control. Every exception raised while serving a tool
call derives from HubitatMCPError so the dispatcher can turn it into an
error result instead of letting it reach the transport.
"""

from __future__ import annotations


class HubitatMCPError(Exception):
    """Base exception for all Hubitat MCP errors.

    Example:
        try:
            await client.list_devices()
        except HubitatMCPError as error:
            _LOGGER.error("Hubitat MCP error: %s", error)
    """


class ConfigurationError(HubitatMCPError):
    """Exception raised when startup configuration is missing or invalid.

    This is the only error the server does not recover from: without a hub
    URL and token there is nothing safe to serve.

    Common causes:
        - HUBITAT_BASE_URL or HUBITAT_TOKEN not set
        - PORT is not an integer in 1-65535
        - HUBITAT_BASE_URL is not an http(s) URL

    Example:
        raise ConfigurationError("HUBITAT_TOKEN is required")
    """


class ValidationError(HubitatMCPError):
    """Exception raised when tool argument validation fails.

    Raised before any request is sent to the hub, so a validation failure
    never has a network side effect.

    Common causes:
        - Missing required argument
        - Argument of the wrong type (e.g. a number for device_id)
        - Numeric argument out of range (e.g. level 101)

    Example:
        raise ValidationError("device_id must be a string")
    """


class UnknownToolError(ValidationError):
    """Exception raised when a tool name is not in the catalog."""

    def __init__(self, tool_name: str) -> None:
        """Initialize the error.

        Args:
            tool_name: The requested tool name
        """
        super().__init__(f"unknown tool: {tool_name}")
        self.tool_name = tool_name


class ToolExecutionError(HubitatMCPError):
    """Exception raised when a tool runs but cannot complete its work."""


class DeviceNotFoundError(ToolExecutionError):
    """Exception raised when a device id is not present on the hub."""

    def __init__(self, device_id: str) -> None:
        """Initialize the error.

        Args:
            device_id: The device id that was looked up
        """
        super().__init__(f"Device with ID {device_id} not found")
        self.device_id = device_id


class HubitatAPIError(HubitatMCPError):
    """Base exception for failures talking to the Hubitat Maker API."""


class NetworkError(HubitatAPIError):
    """Exception raised when the hub cannot be reached.

    Common causes:
        - DNS resolution failure
        - Connection refused
        - Request timeout

    Example:
        raise NetworkError("failed to send command: Connection refused")
    """


class HubError(HubitatAPIError):
    """Exception raised when the hub answers with a non-success status.

    Attributes:
        status: HTTP status code returned by the hub
        body: Raw response body text
    """

    def __init__(self, status: int, body: str) -> None:
        """Initialize the error.

        Args:
            status: HTTP status code returned by the hub
            body: Raw response body text (already redacted and truncated)
        """
        super().__init__(f"hubitat API returned status {status}: {body}")
        self.status = status
        self.body = body


class DecodeError(HubitatAPIError):
    """Exception raised when a hub response does not have the expected shape."""
