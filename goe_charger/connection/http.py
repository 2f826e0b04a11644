# goe_charger/connection/http.py
from __future__ import annotations

import logging
from typing import Any

import aiohttp
from aiohttp import ClientSession, ClientTimeout

from ..const import (
    HTTP_CONNECT_TIMEOUT,
    HTTP_STATUS_PATH,
    HTTP_TOTAL_TIMEOUT,
    HTTP_WRITE_METHOD,
    HTTP_WRITE_PATH,
)
from ..exceptions import TransportError
from . import ChargerConnection

_LOGGER = logging.getLogger(__name__)


class DirectHttpChargerConnection(ChargerConnection):
    """Talks to the charger's local HTTP API (v1) on `host`.

    Pass `session` to share an aiohttp ClientSession; otherwise one is created
    on first use and closed by `close()`.
    """

    def __init__(
        self,
        host: str,
        *,
        session: ClientSession | None = None,
        timeout: float = HTTP_TOTAL_TIMEOUT,
    ) -> None:
        self.host = host
        self._session: ClientSession | None = session
        self._owns_session = session is None
        self._timeout: ClientTimeout = ClientTimeout(
            connect=min(HTTP_CONNECT_TIMEOUT, timeout), total=timeout
        )

    @property
    def base_url(self) -> str:
        return f"http://{self.host}/"

    def _get_session(self) -> ClientSession:
        if self._session is None:
            self._session = ClientSession()
        return self._session

    async def _request(
        self, method: str, path: str, *, params: dict[str, str] | None = None
    ) -> dict[str, Any]:
        """Send one request and return the JSON object the charger answers with."""
        url = f"{self.base_url}{path}"
        session = self._get_session()
        try:
            async with session.request(
                method, url, params=params, timeout=self._timeout
            ) as resp:
                if resp.status != 200:
                    text = await resp.text()
                    raise TransportError(f"Request failed {resp.status} ({method} {url}): {text}")
                data = await resp.json(content_type=None)
        except (TimeoutError, aiohttp.ClientError, ValueError) as err:
            raise TransportError(f"{method} {url} failed: {err}") from err

        if not isinstance(data, dict):
            raise TransportError(f"{method} {url} returned {type(data).__name__}, expected object")
        return data

    async def fetch_status_payload(self) -> dict[str, Any]:
        payload = await self._request("GET", HTTP_STATUS_PATH)
        _LOGGER.debug("Fetched status from %s (%d keys)", self.host, len(payload))
        return payload

    async def write_key(self, key: str, value: str) -> None:
        _LOGGER.debug("Setting %s=%s on %s", key, value, self.host)
        # the answer is the full new status; receiving it is the acknowledgment
        await self._request(HTTP_WRITE_METHOD, HTTP_WRITE_PATH, params={"payload": f"{key}={value}"})

    async def close(self) -> None:
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
