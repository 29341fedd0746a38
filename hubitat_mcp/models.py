"""Data model for devices reported by the Hubitat Maker API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DeviceCommand:
    """A command supported by a device, with an optional argument type hint."""

    command: str
    type: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> DeviceCommand:
        """Decode a command entry.

        The hub reports commands either as bare strings or as objects with a
        ``command`` (or ``name``) key and an optional ``type``.

        Raises:
            ValueError: If the entry has neither shape
        """
        if isinstance(value, str):
            return cls(command=value)

        if isinstance(value, dict):
            name = value.get("command", value.get("name"))
            if isinstance(name, str):
                hint = value.get("type")
                return cls(command=name, type=None if hint is None else str(hint))

        raise ValueError(f"unsupported command entry: {value!r}")

    def to_dict(self) -> dict[str, str]:
        """Return the command as a JSON-ready dict."""
        if self.type is None:
            return {"command": self.command}
        return {"command": self.command, "type": self.type}


@dataclass(frozen=True)
class Device:
    """Read-only snapshot of one hub device.

    Devices are decoded on demand from the ``/all`` endpoint and never
    cached or mutated.
    """

    id: str
    label: str = ""
    name: str = ""
    type: str = ""
    capabilities: list[str] = field(default_factory=list)
    commands: list[DeviceCommand] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Device:
        """Decode one element of the hub's device array.

        Args:
            data: A decoded JSON value

        Returns:
            Device instance

        Raises:
            ValueError: If the element is not a device object
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a device object, got {type(data).__name__}")

        device_id = data.get("id")
        if isinstance(device_id, bool) or not isinstance(device_id, (str, int)):
            raise ValueError("device object is missing a string id")

        capabilities = data.get("capabilities") or []
        commands = data.get("commands") or []
        attributes = data.get("attributes") or {}

        if not isinstance(capabilities, list):
            raise ValueError(f"capabilities of device {device_id} must be a list")
        if not isinstance(commands, list):
            raise ValueError(f"commands of device {device_id} must be a list")
        if not isinstance(attributes, dict):
            raise ValueError(f"attributes of device {device_id} must be an object")

        return cls(
            id=str(device_id),
            label=_text(data.get("label")),
            name=_text(data.get("name")),
            type=_text(data.get("type")),
            # Capability entries that are not plain names (attribute blocks) are skipped
            capabilities=[cap for cap in capabilities if isinstance(cap, str)],
            commands=[DeviceCommand.from_value(command) for command in commands],
            attributes=dict(attributes),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the device with fields in display order."""
        return {
            "id": self.id,
            "label": self.label,
            "name": self.name,
            "type": self.type,
            "capabilities": list(self.capabilities),
            "commands": [command.to_dict() for command in self.commands],
            "attributes": dict(self.attributes),
        }


def _text(value: Any) -> str:
    return "" if value is None else str(value)
