# goe_charger/codecs.py
"""Per-field decoders for the go-e status payload.

Each decoder takes the field name and its raw wire value and returns the
typed value, or raises ParseError (not a well-formed number of the expected
width) / InvalidValue (well-formed but outside the known domain).
"""

from __future__ import annotations

import re
from typing import Any, TypeVar

from .const import CABLE_MAX_AMPERE, CABLE_MIN_AMPERE, I32_MAX, I32_MIN, U8_MAX, U32_MAX
from .data import (
    AccessState,
    Ampere,
    AwattarPriceZone,
    CableCoding,
    CarStatus,
    EnergySensorReading,
    NoCable,
    PhaseStatus,
    StopState,
)
from .exceptions import InvalidValue, ParseError

_E = TypeVar("_E", CarStatus, AccessState, StopState, AwattarPriceZone)

# unsigned decimal, optional leading "+"
_UINT_RE = re.compile(r"\+?[0-9]+")


def parse_uint(field: str, raw: Any, maximum: int) -> int:
    """Parse a decimal string into an unsigned int no larger than `maximum`."""
    if not isinstance(raw, str) or not _UINT_RE.fullmatch(raw):
        raise ParseError(field, raw, "not an unsigned integer")
    value = int(raw)
    if value > maximum:
        raise ParseError(field, raw, f"does not fit into 0..{maximum}")
    return value


def parse_u8(field: str, raw: Any) -> int:
    return parse_uint(field, raw, U8_MAX)


def parse_u32(field: str, raw: Any) -> int:
    return parse_uint(field, raw, U32_MAX)


def _lookup(enum_cls: type[_E], field: str, raw: Any) -> _E:
    for member in enum_cls:
        if member.value == raw:
            return member
    raise InvalidValue(field, raw, f"unknown {enum_cls.__name__} code")


def car_status(field: str, raw: Any) -> CarStatus:
    return _lookup(CarStatus, field, raw)


def access_state(field: str, raw: Any) -> AccessState:
    return _lookup(AccessState, field, raw)


def stop_state(field: str, raw: Any) -> StopState:
    return _lookup(StopState, field, raw)


def awattar_price_zone(field: str, raw: Any) -> AwattarPriceZone:
    return _lookup(AwattarPriceZone, field, raw)


def allow_charging(field: str, raw: Any) -> bool:
    """Only 1 means allowed; any other u8 means not allowed."""
    return parse_u8(field, raw) == 1


def cable_coding(field: str, raw: Any) -> CableCoding:
    num = parse_u8(field, raw)
    if num == 0:
        return NoCable()
    if CABLE_MIN_AMPERE <= num <= CABLE_MAX_AMPERE:
        return Ampere(num)
    raise InvalidValue(field, raw, "cable coding out of range")


def phase_status(field: str, raw: Any) -> PhaseStatus:
    return PhaseStatus.from_byte(parse_u8(field, raw))


def energy_sensor(field: str, raw: Any) -> EnergySensorReading:
    if not isinstance(raw, list | tuple):
        raise ParseError(field, raw, "not an array")
    for item in raw:
        # bool is an int subclass; the charger never sends one here
        if isinstance(item, bool) or not isinstance(item, int):
            raise ParseError(field, raw, "array holds a non-integer")
        if not I32_MIN <= item <= I32_MAX:
            raise ParseError(field, raw, f"value {item} does not fit into a signed 32-bit int")
    return EnergySensorReading.from_array(raw)


def text(field: str, raw: Any) -> str:
    """Pass-through for opaque strings such as the serial number."""
    if not isinstance(raw, str):
        raise ParseError(field, raw, "not a string")
    return raw


__all__ = [
    "parse_uint",
    "parse_u8",
    "parse_u32",
    "car_status",
    "access_state",
    "stop_state",
    "awattar_price_zone",
    "allow_charging",
    "cable_coding",
    "phase_status",
    "energy_sensor",
    "text",
]
