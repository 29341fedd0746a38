"""Constants for the Hubitat MCP server."""

from typing import Final

# Server identity
SERVER_NAME: Final = "hubitat-mcp"
VERSION: Final = "1.0.0"

# Environment keys
ENV_BASE_URL: Final = "HUBITAT_BASE_URL"
ENV_TOKEN: Final = "HUBITAT_TOKEN"
ENV_PORT: Final = "PORT"
ENV_REQUEST_TIMEOUT: Final = "HUBITAT_REQUEST_TIMEOUT"
ENV_TRANSPORT: Final = "MCP_TRANSPORT"
ENV_LOG_LEVEL: Final = "LOG_LEVEL"

# Defaults
DEFAULT_PORT: Final = 5006
DEFAULT_HOST: Final = "0.0.0.0"
DEFAULT_REQUEST_TIMEOUT: Final = 30
DEFAULT_LOG_LEVEL: Final = "INFO"

# Transports
TRANSPORT_STDIO: Final = "stdio"
TRANSPORT_SSE: Final = "sse"
TRANSPORTS: Final = (TRANSPORT_STDIO, TRANSPORT_SSE)

# Maker API
ACCESS_TOKEN_PARAM: Final = "access_token"
PATH_ALL_DEVICES: Final = "all"
COMMAND_ON: Final = "on"
COMMAND_OFF: Final = "off"
COMMAND_SET_LEVEL: Final = "setLevel"

# Tool names
TOOL_LIST_DEVICES: Final = "list_devices"
TOOL_GET_DEVICE: Final = "get_device"
TOOL_TURN_ON: Final = "turn_on"
TOOL_TURN_OFF: Final = "turn_off"
TOOL_SET_LEVEL: Final = "set_level"
TOOL_SEND_COMMAND: Final = "send_command"

# Tool parameters
PARAM_DEVICE_ID: Final = "device_id"
PARAM_LEVEL: Final = "level"
PARAM_COMMAND: Final = "command"
PARAM_VALUE: Final = "value"

LEVEL_MIN: Final = 0
LEVEL_MAX: Final = 100

# HTTP/SSE routes
SSE_PATH: Final = "/sse"
MESSAGE_PATH: Final = "/messages/"
HEALTH_PATH: Final = "/health"

# Redaction / display
REDACTED_PLACEHOLDER: Final = "***REDACTED***"
MAX_ERROR_BODY_LENGTH: Final = 1000
MAX_LOGGED_ARGUMENTS_LENGTH: Final = 200
