"""Command line entry point for the Hubitat MCP server.

Usage:
    hubitat-mcp                       # stdio transport (default)
    hubitat-mcp --transport sse       # HTTP/SSE listener on PORT (default 5006)
    hubitat-mcp --transport sse --port 8080
"""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import logging
import sys

from .config import HubitatConfig, load_config, validate_port
from .const import DEFAULT_HOST, SERVER_NAME, TRANSPORT_SSE, TRANSPORTS, VERSION
from .dispatcher import ToolDispatcher
from .exceptions import ConfigurationError
from .hub_client import HubitatClient
from .server import McpServer
from .tools import create_default_registry
from .transports import SseTransport, StdioTransport

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str) -> logging.Logger:
    """Send package logs to stderr; stdout carries the stdio protocol."""
    logger = logging.getLogger("hubitat_mcp")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers = [handler]
    logger.propagate = False
    return logger


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog=SERVER_NAME,
        description="MCP server bridging tool calls to the Hubitat Maker API",
    )
    parser.add_argument(
        "--transport",
        choices=TRANSPORTS,
        default=None,
        help="Transport to serve (default: MCP_TRANSPORT or stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port for the sse transport (default: PORT or 5006)",
    )
    parser.add_argument(
        "--host",
        default=DEFAULT_HOST,
        help=f"Interface for the sse transport (default: {DEFAULT_HOST})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file (default: search from the working directory)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


async def run_server(config: HubitatConfig, *, host: str = DEFAULT_HOST) -> None:
    """Wire the hub client, catalog and dispatcher to the configured transport."""
    async with HubitatClient(config) as client:
        registry = create_default_registry(client)
        server = McpServer(registry, ToolDispatcher(registry))

        if config.transport == TRANSPORT_SSE:
            await SseTransport(server, host=host, port=config.port).serve()
        else:
            await StdioTransport(server).serve()


def main(argv: list[str] | None = None) -> int:
    """Run the server.

    Returns:
        Process exit code: 0 on clean shutdown, 1 on configuration error
    """
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or "INFO")

    overrides = {}
    try:
        config = load_config(dotenv_path=args.env_file)
        if args.port is not None:
            overrides["port"] = validate_port(args.port)
    except ConfigurationError as err:
        _LOGGER.critical("Configuration error: %s", err)
        return 1

    if args.transport:
        overrides["transport"] = args.transport
    if overrides:
        config = dataclasses.replace(config, **overrides)

    setup_logging(args.log_level or config.log_level)

    _LOGGER.info("Starting Hubitat MCP Server v%s", VERSION)
    _LOGGER.info("Hubitat API: %s", config.base_url)
    if config.transport == TRANSPORT_SSE:
        _LOGGER.info("Listening on port: %d", config.port)

    try:
        asyncio.run(run_server(config, host=args.host))
    except KeyboardInterrupt:
        _LOGGER.info("Interrupted, shutting down")

    return 0
