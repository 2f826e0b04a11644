"""Redaction of sensitive status keys before a payload ends up in a log."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

REDACTED = "**REDACTED**"

REDACT_KEYS: Final = frozenset({
    "sse",  # serial number
    "wss",  # Wi-Fi SSID
    "wke",  # Wi-Fi key
    "mcs",  # MQTT server
    "mcu",  # MQTT username
    "mck",  # MQTT key
    # RFID card ids
    "rca", "rcr", "rcd", "rc4", "rc5", "rc6", "rc7", "rc8", "rc9", "rc1",
    # RFID card names
    "rna", "rnm", "rne", "rn4", "rn5", "rn6", "rn7", "rn8", "rn9", "rn1",
})  # fmt: skip


def redact_payload(
    payload: Mapping[str, Any], keys: frozenset[str] = REDACT_KEYS
) -> dict[str, Any]:
    """Return a copy of `payload` with the values of `keys` masked."""
    return {k: (REDACTED if k in keys else v) for k, v in payload.items()}


__all__ = ["REDACTED", "REDACT_KEYS", "redact_payload"]
