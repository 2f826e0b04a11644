# goe_charger/exceptions.py
from __future__ import annotations

from typing import Any


class GoEError(Exception):
    """Base class for everything raised by goe_charger."""


class TransportError(GoEError):
    """The connection could not fetch the status or deliver a write."""


class DecodeError(GoEError):
    """A status field could not be turned into its domain value."""

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(f"{field}: {message} ({value!r})")
        self.field = field
        self.value = value


class ParseError(DecodeError):
    """Wire value is not a well-formed number of the expected width."""


class InvalidValue(DecodeError):
    """Wire value is well-formed but outside the recognized domain."""


class ChargerError(GoEError):
    """Raised by GoECharger; `error` holds the wrapped transport/decode error."""

    def __init__(self, error: GoEError) -> None:
        super().__init__(str(error))
        self.error = error


class ChargerConnectionError(ChargerError):
    """Could not talk to the charger."""


class ChargerStatusError(ChargerError):
    """The charger returned data that could not be decoded."""


__all__ = [
    "GoEError",
    "TransportError",
    "DecodeError",
    "ParseError",
    "InvalidValue",
    "ChargerError",
    "ChargerConnectionError",
    "ChargerStatusError",
]
