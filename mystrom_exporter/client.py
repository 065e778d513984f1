"""HTTP client for a single myStrom switch."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from .const import REQUEST_TIMEOUT, USER_AGENT
from .exceptions import MystromConnectionError, MystromReadError, MystromTimeoutError

_LOGGER = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept-Encoding": "identity",
}


class MystromClient:
    """Fetches raw payloads from a myStrom switch."""

    def __init__(
        self,
        target: str,
        websession: aiohttp.ClientSession | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            target: Hostname or IP address of the switch, optionally with a port
            websession: Optional aiohttp ClientSession. If not provided, one will be created.
            timeout: Total timeout in seconds for each request
        """
        self.target = target
        self.base_url = f"http://{target}"
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._websession = websession
        self._own_session = websession is None

    async def close_connection(self) -> None:
        """Close the session if this client created it."""
        if self._own_session and self._websession:
            await self._websession.close()
            self._websession = None

    async def _ensure_session(self) -> None:
        """Ensure a websession exists."""
        if self._websession is None:
            self._websession = aiohttp.ClientSession(auto_decompress=False)
            self._own_session = True

    async def __aenter__(self) -> MystromClient:
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close_connection()

    async def fetch(self, path: str) -> bytes:
        """Get the raw body the switch serves under ``path``.

        A single attempt is made. The status code is not checked, an error
        page surfaces later as a decoding failure.
        """
        await self._ensure_session()
        assert self._websession is not None
        url = f"{self.base_url}{path}"
        try:
            response = await self._websession.get(
                url, headers=HEADERS, timeout=self._timeout
            )
        except asyncio.TimeoutError as err:
            raise MystromTimeoutError(f"request to {url} timed out") from err
        except aiohttp.ClientError as err:
            raise MystromConnectionError(f"unable to connect to target: {err}") from err

        async with response:
            try:
                body = await response.read()
            except asyncio.TimeoutError as err:
                raise MystromTimeoutError(f"reading {url} timed out") from err
            except aiohttp.ClientError as err:
                raise MystromReadError(f"unable to read body: {err}") from err

        _LOGGER.debug("GET %s returned %s (%d bytes)", url, response.status, len(body))
        return body
