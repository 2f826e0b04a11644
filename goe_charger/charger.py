# goe_charger/charger.py
from __future__ import annotations

import logging

from .connection import ChargerConnection
from .const import KEY_ACCESS_STATE, KEY_ALLOW_CHARGING, KEY_AMPERE, U8_MAX
from .data import AccessState, GoEStatus
from .diagnostics import redact_payload
from .exceptions import (
    ChargerConnectionError,
    ChargerStatusError,
    DecodeError,
    TransportError,
)
from .status import decode

_LOGGER = logging.getLogger(__name__)


class GoECharger:
    """Typed read/write access to one go-e charger over a ChargerConnection.

    Stateless apart from the connection: no status caching, no polling.
    Every call is one exchange with the charger.
    """

    def __init__(self, connection: ChargerConnection) -> None:
        self.connection = connection

    async def latest_status(self) -> GoEStatus:
        """Fetch and decode the current status.

        Raises ChargerConnectionError when the transport fails and
        ChargerStatusError when the payload cannot be decoded.
        """
        try:
            payload = await self.connection.fetch_status_payload()
        except TransportError as err:
            _LOGGER.warning("Fetching charger status failed: %s", err)
            raise ChargerConnectionError(err) from err

        try:
            return decode(payload)
        except DecodeError as err:
            _LOGGER.warning("Charger status could not be decoded: %s", err)
            if isinstance(payload, dict):
                _LOGGER.debug("Undecodable payload: %s", redact_payload(payload))
            raise ChargerStatusError(err) from err

    async def _write(self, key: str, value: str) -> None:
        try:
            await self.connection.write_key(key, value)
        except TransportError as err:
            _LOGGER.warning("Writing %s=%s failed: %s", key, value, err)
            raise ChargerConnectionError(err) from err
        _LOGGER.debug("Wrote %s=%s", key, value)

    async def set_current_limit(self, amps: int) -> None:
        """Set the charging current limit in A (`amp`)."""
        if isinstance(amps, bool) or not isinstance(amps, int):
            raise ValueError(f"current limit must be an int, got {amps!r}")
        if not 0 <= amps <= U8_MAX:
            raise ValueError(f"current limit {amps} outside 0..{U8_MAX}")
        await self._write(KEY_AMPERE, str(amps))

    async def set_access_state(self, state: AccessState) -> None:
        """Set the access control mode (`ast`)."""
        if not isinstance(state, AccessState):
            raise ValueError(f"expected AccessState, got {state!r}")
        await self._write(KEY_ACCESS_STATE, state.value)

    async def set_allow_charging(self, allow: bool) -> None:
        """Allow or forbid charging (`alw`)."""
        if not isinstance(allow, bool):
            raise ValueError(f"allow must be a bool, got {allow!r}")
        await self._write(KEY_ALLOW_CHARGING, "1" if allow else "0")

    async def close(self) -> None:
        await self.connection.close()

    async def __aenter__(self) -> GoECharger:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
