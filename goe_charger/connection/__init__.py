# goe_charger/connection/__init__.py
"""Transports that move raw status payloads and key writes to/from a charger."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ChargerConnection(ABC):
    """Capability a transport must provide: fetch the status, write one key.

    Implementations raise TransportError for any network or protocol failure
    and never decode the payload themselves.
    """

    @abstractmethod
    async def fetch_status_payload(self) -> dict[str, Any]:
        """Return the raw status object as sent by the charger."""

    @abstractmethod
    async def write_key(self, key: str, value: str) -> None:
        """Set `key` to `value`; return once the charger acknowledged it."""

    async def close(self) -> None:
        """Release transport resources. Default: nothing to release."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()


__all__ = ["ChargerConnection"]
