# goe_charger/const.py
from typing import Final

# Status keys decoded into GoEStatus (go-e API v1)
KEY_CAR: Final = "car"
KEY_AMPERE: Final = "amp"
KEY_ACCESS_STATE: Final = "ast"
KEY_ALLOW_CHARGING: Final = "alw"
KEY_STOP_STATE: Final = "stp"
KEY_CABLE_CODING: Final = "cbl"
KEY_PHASES: Final = "pha"
KEY_TEMPERATURE: Final = "tmp"
KEY_CHARGED: Final = "dws"
KEY_STOP_ENERGY: Final = "dwo"
KEY_TOTAL_ENERGY: Final = "eto"
KEY_ENERGY_SENSOR: Final = "nrg"
KEY_SERIAL: Final = "sse"
KEY_AWATTAR_ZONE: Final = "azo"

# nrg array length
ENERGY_SENSOR_VALUES: Final = 16

# Unsigned widths used by the numeric fields
U8_MAX: Final = 0xFF
U32_MAX: Final = 0xFFFFFFFF

# nrg values are signed 32-bit
I32_MIN: Final = -(2**31)
I32_MAX: Final = 2**31 - 1

# Cable coding range (A) reported by the resistor-coded pin
CABLE_MIN_AMPERE: Final = 13
CABLE_MAX_AMPERE: Final = 32

# Unit conversions
DEKA_WS_PER_KWH: Final = 360_000  # dws
DECI_KWH_PER_KWH: Final = 10  # dwo, eto

# HTTP (local API v1)
HTTP_STATUS_PATH: Final = "status"
HTTP_WRITE_PATH: Final = "mqtt"
HTTP_WRITE_METHOD: Final = "SET"
HTTP_CONNECT_TIMEOUT: Final = 5
HTTP_TOTAL_TIMEOUT: Final = 10

# MQTT (API v1)
MQTT_PORT_DEFAULT: Final = 1883
MQTT_STATUS_TOPIC: Final = "go-eCharger/{serial}/status"
MQTT_COMMAND_TOPIC: Final = "go-eCharger/{serial}/cmd/req"
MQTT_TIMEOUT_DEFAULT: Final = 10
MQTT_QOS_AT_LEAST_ONCE: Final = 1

# Config keys
CONF_TRANSPORT: str = "transport"
CONF_HOST: str = "host"
CONF_PORT: str = "port"
CONF_SERIAL: str = "serial"
CONF_USERNAME: str = "username"
CONF_PASSWORD: str = "password"  # noqa: S105 - config field name, not a secret
CONF_TIMEOUT: str = "timeout"

TRANSPORT_HTTP: Final = "http"
TRANSPORT_MQTT: Final = "mqtt"
