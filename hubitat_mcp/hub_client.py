"""Client for the Hubitat Maker API.

This module provides the HubitatClient class that performs the three hub
operations the tools need: listing devices, sending a bare command and
sending a command with one value parameter. Every call is a single HTTP
attempt; failures are reported through the NetworkError / HubError /
DecodeError taxonomy with the access token redacted.
"""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any
from urllib.parse import quote

import aiohttp

from .config import HubitatConfig
from .const import ACCESS_TOKEN_PARAM, MAX_ERROR_BODY_LENGTH, PATH_ALL_DEVICES
from .exceptions import DecodeError, HubError, NetworkError
from .helpers import redact_sensitive_data, truncate_text
from .models import Device

_LOGGER = logging.getLogger(__name__)


class HubitatClient:
    """Stateless async client for the Maker API.

    The client holds the immutable configuration and an aiohttp session
    (connection pool) that is safe to share between concurrent calls. No
    per-call state is kept between requests.

    Example:
        async with HubitatClient(config) as client:
            devices = await client.list_devices()
            await client.send_command("12", "on")
            await client.send_command_with_value("12", "setLevel", "40")
    """

    def __init__(
        self,
        config: HubitatConfig,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Server configuration with base URL and token
            session: Optional shared session. A session created by the client
                itself is closed by close(); an injected one is left open.
        """
        self._config = config
        self._session = session
        self._owns_session = session is None
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    @property
    def base_url(self) -> str:
        """Return the Maker API base URL."""
        return self._config.base_url

    async def __aenter__(self) -> HubitatClient:
        await self._ensure_session()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure an HTTP session exists.

        Returns:
            Active aiohttp ClientSession
        """
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def list_devices(self) -> list[Device]:
        """Fetch every device exposed by the Maker API app.

        Returns:
            List of Device snapshots, in hub order

        Raises:
            NetworkError: If the hub cannot be reached
            HubError: If the hub returns a non-2xx status
            DecodeError: If the body is not a JSON array of devices
        """
        body = await self._request("GET", [PATH_ALL_DEVICES], action="fetch devices")

        try:
            payload = json.loads(body)
            if not isinstance(payload, list):
                raise ValueError(
                    f"expected a JSON array, got {type(payload).__name__}"
                )
            devices = [Device.from_dict(item) for item in payload]
        except ValueError as err:
            raise DecodeError(
                f"failed to decode devices: {self._redact(str(err))}"
            ) from err

        _LOGGER.debug("Fetched %d devices from hub", len(devices))
        return devices

    async def send_command(self, device_id: str, command: str) -> None:
        """Send a command without arguments to a device.

        Raises:
            NetworkError: If the hub cannot be reached
            HubError: If the hub returns a non-2xx status
        """
        await self._request("POST", [device_id, command], action="send command")
        _LOGGER.debug("Sent command '%s' to device %s", command, device_id)

    async def send_command_with_value(
        self, device_id: str, command: str, value: str
    ) -> None:
        """Send a command with a single, already formatted value.

        Raises:
            NetworkError: If the hub cannot be reached
            HubError: If the hub returns a non-2xx status
        """
        await self._request(
            "POST", [device_id, command, value], action="send command"
        )
        _LOGGER.debug(
            "Sent command '%s' with value '%s' to device %s",
            command,
            value,
            device_id,
        )

    def _build_url(self, segments: list[str]) -> str:
        """Append percent-encoded path segments to the base URL."""
        path = "/".join(quote(str(segment), safe="") for segment in segments)
        return f"{self._config.base_url}/{path}"

    def _redact(self, text: str) -> str:
        return redact_sensitive_data(text, [self._config.token])

    async def _request(self, method: str, segments: list[str], *, action: str) -> str:
        """Make one HTTP request to the Maker API.

        Args:
            method: HTTP method
            segments: Path segments appended to the base URL
            action: Short description used in network error messages

        Returns:
            Response body text for 2xx responses

        Raises:
            NetworkError: If the request could not be completed
            HubError: If the hub returned a non-2xx status
        """
        session = await self._ensure_session()
        url = self._build_url(segments)

        _LOGGER.debug("Making %s request to %s", method, url)

        try:
            async with session.request(
                method,
                url,
                params={ACCESS_TOKEN_PARAM: self._config.token},
                timeout=self._timeout,
            ) as response:
                status = response.status
                # Hub bodies are not guaranteed to be valid UTF-8
                body = (await response.read()).decode("utf-8", errors="replace")
        except asyncio.TimeoutError as err:
            _LOGGER.warning("Hub request %s %s timed out", method, url)
            raise NetworkError(
                f"failed to {action}: request timed out after "
                f"{self._config.request_timeout:g} seconds"
            ) from err
        except aiohttp.ClientError as err:
            message = self._redact(str(err) or type(err).__name__)
            _LOGGER.warning("Hub request %s %s failed: %s", method, url, message)
            raise NetworkError(f"failed to {action}: {message}") from err

        if not 200 <= status < 300:
            body = truncate_text(self._redact(body), MAX_ERROR_BODY_LENGTH)
            _LOGGER.warning(
                "Hub returned status %d for %s %s", status, method, url
            )
            raise HubError(status, body)

        return body
