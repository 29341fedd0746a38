"""Helper utilities for the Hubitat MCP server.

This module provides formatting and security helpers shared by the hub
client, the tools and the dispatcher.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from .const import REDACTED_PLACEHOLDER

if TYPE_CHECKING:
    from .models import Device


def redact_sensitive_data(text: str, sensitive_values: list[str]) -> str:
    """Redact sensitive information from text for logging.

    Replaces sensitive values (like access tokens) with a redacted
    placeholder to prevent them from appearing in logs or error messages.

    Args:
        text: Text that may contain sensitive information
        sensitive_values: List of sensitive strings to redact

    Returns:
        Text with sensitive values replaced with "***REDACTED***"

    Example:
        >>> token = "a1b2c3d4"
        >>> redact_sensitive_data(f"GET /all?access_token={token}", [token])
        "GET /all?access_token=***REDACTED***"
    """
    if not text or not sensitive_values:
        return text

    redacted = text
    for value in sensitive_values:
        if value and isinstance(value, str) and value in redacted:
            redacted = redacted.replace(value, REDACTED_PLACEHOLDER)

    return redacted


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate text to maximum length.

    Args:
        text: Text to potentially truncate
        max_length: Maximum allowed length (including suffix)
        suffix: String to append when truncating (default: "...")

    Returns:
        Original text if within max_length, otherwise truncated text with suffix

    Example:
        >>> truncate_text("This is a very long message", 15)
        "This is a ve..."
    """
    if not text or len(text) <= max_length:
        return text

    if max_length <= len(suffix):
        return suffix[:max_length]

    truncate_at = max_length - len(suffix)
    return text[:truncate_at] + suffix


def format_device_summary(device: Device) -> str:
    """Render a device as a single catalog line.

    Example:
        >>> format_device_summary(device)
        "ID: 12 | Label: Kitchen Light | Type: Generic Z-Wave Dimmer | Capabilities: Switch, SwitchLevel"
    """
    capabilities = ", ".join(device.capabilities)
    return (
        f"ID: {device.id} | Label: {device.label} | "
        f"Type: {device.type} | Capabilities: {capabilities}"
    )


def format_device_list(devices: list[Device]) -> str:
    """Render devices one per line; an empty list renders as an empty string."""
    return "\n".join(format_device_summary(device) for device in devices)


def format_device_detail(device: Device) -> str:
    """Render the full device as indented JSON in a fixed field order."""
    return json.dumps(device.to_dict(), indent=2, ensure_ascii=False)


def format_level(level: float) -> str:
    """Format a numeric level the way the Maker API expects it.

    The value is truncated toward zero, never rounded.

    Example:
        >>> format_level(57.9)
        "57"
    """
    return str(int(level))
