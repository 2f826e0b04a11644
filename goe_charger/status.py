# goe_charger/status.py
"""Status decoder: raw go-e status payload -> GoEStatus.

The charger answers `/status` with a flat JSON object of roughly 95 keys
(API v1). Only the keys listed in `_DECODERS` are decoded; any other key,
present or absent, is ignored so newer firmware with extra keys still works.

Decoding is fail-fast: fields are decoded in table order and the first
failure is raised unchanged. A GoEStatus is only ever built from a payload
in which every decoded field succeeded.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any, Final

from . import codecs
from .const import (
    KEY_ACCESS_STATE,
    KEY_ALLOW_CHARGING,
    KEY_AMPERE,
    KEY_AWATTAR_ZONE,
    KEY_CABLE_CODING,
    KEY_CAR,
    KEY_CHARGED,
    KEY_ENERGY_SENSOR,
    KEY_PHASES,
    KEY_SERIAL,
    KEY_STOP_ENERGY,
    KEY_STOP_STATE,
    KEY_TEMPERATURE,
    KEY_TOTAL_ENERGY,
)
from .data import GoEStatus
from .exceptions import InvalidValue

_LOGGER = logging.getLogger(__name__)

# Documented key set of the API v1 status object, in firmware order.
STATUS_KEYS: Final[tuple[str, ...]] = (
    "version", "tme", "rbc", "rbt", "car", "amp", "err", "ast", "alw", "stp",
    "cbl", "pha", "tmp", "dws", "dwo", "adi", "uby", "eto", "wst", "txi",
    "nrg", "fwv", "sse", "wss", "wke", "wen", "cdi", "tof", "tds", "lbr",
    "aho", "afi", "azo", "ama", "al1", "al2", "al3", "al4", "al5", "cid",
    "cch", "cfi", "lse", "ust", "wak", "r1x", "dto", "nmo", "sch", "sdp",
    "eca", "ecr", "ecd", "ec4", "ec5", "ec6", "ec7", "ec8", "ec9", "ec1",
    "rca", "rcr", "rcd", "rc4", "rc5", "rc6", "rc7", "rc8", "rc9", "rc1",
    "rna", "rnm", "rne", "rn4", "rn5", "rn6", "rn7", "rn8", "rn9", "rn1",
    "loe", "lot", "lom", "lop", "log", "lon", "lof", "loa", "lch", "mce",
    "mcs", "mcp", "mcu", "mck", "mcc",
)  # fmt: skip

# (GoEStatus attribute, wire key, decoder) in decode order
_DECODERS: Final[tuple[tuple[str, str, Callable[[str, Any], Any]], ...]] = (
    ("car_status", KEY_CAR, codecs.car_status),
    ("ampere", KEY_AMPERE, codecs.parse_u8),
    ("access_state", KEY_ACCESS_STATE, codecs.access_state),
    ("allow_charging", KEY_ALLOW_CHARGING, codecs.allow_charging),
    ("stop_state", KEY_STOP_STATE, codecs.stop_state),
    ("cable_coding", KEY_CABLE_CODING, codecs.cable_coding),
    ("phase_status", KEY_PHASES, codecs.phase_status),
    ("temperature", KEY_TEMPERATURE, codecs.parse_u8),
    ("charged", KEY_CHARGED, codecs.parse_u32),
    ("stop_energy", KEY_STOP_ENERGY, codecs.parse_u32),
    ("total_energy", KEY_TOTAL_ENERGY, codecs.parse_u32),
    ("energy_sensor", KEY_ENERGY_SENSOR, codecs.energy_sensor),
    ("serial_number", KEY_SERIAL, codecs.text),
    ("awattar_price_zone", KEY_AWATTAR_ZONE, codecs.awattar_price_zone),
)

DECODED_KEYS: Final[tuple[str, ...]] = tuple(key for _, key, _ in _DECODERS)


def decode(payload: Mapping[str, Any]) -> GoEStatus:
    """Decode a raw status payload, raising the first DecodeError hit."""
    if not isinstance(payload, Mapping):
        raise InvalidValue("<payload>", payload, "status payload is not an object")

    values: dict[str, Any] = {}
    for attr, key, decoder in _DECODERS:
        if key not in payload:
            raise InvalidValue(key, None, "missing from status payload")
        values[attr] = decoder(key, payload[key])

    status = GoEStatus(**values)
    _LOGGER.debug(
        "Decoded status (car=%s, amp=%s, alw=%s)",
        status.car_status.name,
        status.ampere,
        status.allow_charging,
    )
    return status


__all__ = ["STATUS_KEYS", "DECODED_KEYS", "decode"]
