"""Startup configuration for the Hubitat MCP server.

Configuration is read once from the environment (optionally seeded from a
``.env`` file) into an immutable HubitatConfig that is passed to the hub
client and the transports.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from urllib.parse import urlparse

import voluptuous as vol
from dotenv import load_dotenv

from .const import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PORT,
    DEFAULT_REQUEST_TIMEOUT,
    ENV_BASE_URL,
    ENV_LOG_LEVEL,
    ENV_PORT,
    ENV_REQUEST_TIMEOUT,
    ENV_TOKEN,
    ENV_TRANSPORT,
    TRANSPORT_STDIO,
    TRANSPORTS,
)
from .exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)

REQUIRED_KEYS = (ENV_BASE_URL, ENV_TOKEN)
CONFIG_KEYS = (
    ENV_BASE_URL,
    ENV_TOKEN,
    ENV_PORT,
    ENV_REQUEST_TIMEOUT,
    ENV_TRANSPORT,
    ENV_LOG_LEVEL,
)


def http_url(value: str) -> str:
    """Validate an http(s) base URL and strip the trailing slash."""
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise vol.Invalid("expected an http:// or https:// URL")
    return value.rstrip("/")


PORT_SCHEMA = vol.All(vol.Coerce(int), vol.Range(min=1, max=65535))

CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(ENV_BASE_URL): vol.All(str, http_url),
        vol.Required(ENV_TOKEN): str,
        vol.Optional(ENV_PORT, default=DEFAULT_PORT): PORT_SCHEMA,
        vol.Optional(ENV_REQUEST_TIMEOUT, default=DEFAULT_REQUEST_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
        vol.Optional(ENV_TRANSPORT, default=TRANSPORT_STDIO): vol.All(
            vol.Lower, vol.In(TRANSPORTS)
        ),
        vol.Optional(ENV_LOG_LEVEL, default=DEFAULT_LOG_LEVEL): vol.All(
            vol.Upper, vol.In(("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"))
        ),
    }
)


@dataclass(frozen=True)
class HubitatConfig:
    """Immutable server configuration.

    Attributes:
        base_url: Maker API base URL, e.g. http://192.168.1.10/apps/api/42/devices
        token: Maker API access token (never included in repr)
        port: Port for the HTTP/SSE transport
        request_timeout: Total timeout in seconds for one hub request
        transport: Default transport mode ("stdio" or "sse")
        log_level: Logging level name
    """

    base_url: str
    token: str = field(repr=False)
    port: int = DEFAULT_PORT
    request_timeout: float = float(DEFAULT_REQUEST_TIMEOUT)
    transport: str = TRANSPORT_STDIO
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    dotenv_path: str | None = None,
) -> HubitatConfig:
    """Build the configuration from environment variables.

    Args:
        environ: Mapping to read instead of the process environment. When
            omitted, a .env file is loaded first (existing variables win).
        dotenv_path: Explicit .env file location

    Returns:
        HubitatConfig instance

    Raises:
        ConfigurationError: If a required key is missing or a value is invalid
    """
    if environ is None:
        load_dotenv(dotenv_path)
        environ = os.environ

    raw: dict[str, str] = {}
    for key in CONFIG_KEYS:
        value = environ.get(key)
        if value is not None and value.strip():
            raw[key] = value.strip()

    for key in REQUIRED_KEYS:
        if key not in raw:
            raise ConfigurationError(f"{key} is required")

    try:
        validated = CONFIG_SCHEMA(raw)
    except vol.Invalid as err:
        raise ConfigurationError(f"Invalid configuration: {err}") from err

    config = HubitatConfig(
        base_url=validated[ENV_BASE_URL],
        token=validated[ENV_TOKEN],
        port=validated[ENV_PORT],
        request_timeout=validated[ENV_REQUEST_TIMEOUT],
        transport=validated[ENV_TRANSPORT],
        log_level=validated[ENV_LOG_LEVEL],
    )
    _LOGGER.debug("Loaded configuration: %s", config)
    return config


def validate_port(value: int | str) -> int:
    """Validate a listening port given outside the environment (e.g. --port).

    Raises:
        ConfigurationError: If the value is not a port number in 1-65535
    """
    try:
        return PORT_SCHEMA(value)
    except vol.Invalid as err:
        raise ConfigurationError(f"Invalid configuration: port {value}: {err}") from err
