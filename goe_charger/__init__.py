"""Client for the go-e charger local status/control API (v1).

Fetches the charger's flat status object over a pluggable connection
(local HTTP or MQTT), decodes it into a typed `GoEStatus`, and writes the
few control keys (current limit, access mode, charging allowed).
"""

from .charger import GoECharger
from .connection import ChargerConnection
from .connection.http import DirectHttpChargerConnection
from .connection.mqtt import MqttChargerConnection
from .config import connection_from_config
from .data import (
    AccessState,
    Ampere,
    AwattarPriceZone,
    CableCoding,
    CarStatus,
    EnergySensorReading,
    GoEStatus,
    NoCable,
    PhaseStatus,
    StopState,
)
from .exceptions import (
    ChargerConnectionError,
    ChargerError,
    ChargerStatusError,
    DecodeError,
    GoEError,
    InvalidValue,
    ParseError,
    TransportError,
)
from .status import decode

__all__ = [
    "GoECharger",
    "ChargerConnection",
    "DirectHttpChargerConnection",
    "MqttChargerConnection",
    "connection_from_config",
    "AccessState",
    "Ampere",
    "AwattarPriceZone",
    "CableCoding",
    "CarStatus",
    "EnergySensorReading",
    "GoEStatus",
    "NoCable",
    "PhaseStatus",
    "StopState",
    "ChargerConnectionError",
    "ChargerError",
    "ChargerStatusError",
    "DecodeError",
    "GoEError",
    "InvalidValue",
    "ParseError",
    "TransportError",
    "decode",
]
__version__ = "0.1.0"
