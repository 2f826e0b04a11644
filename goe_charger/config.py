# goe_charger/config.py
"""Build a ChargerConnection from a plain mapping (e.g. loaded from YAML/JSON)."""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

import voluptuous as vol

from .connection import ChargerConnection
from .connection.http import DirectHttpChargerConnection
from .connection.mqtt import MqttChargerConnection
from .const import (
    CONF_HOST,
    CONF_PASSWORD,
    CONF_PORT,
    CONF_SERIAL,
    CONF_TIMEOUT,
    CONF_TRANSPORT,
    CONF_USERNAME,
    HTTP_TOTAL_TIMEOUT,
    MQTT_PORT_DEFAULT,
    MQTT_TIMEOUT_DEFAULT,
    TRANSPORT_HTTP,
    TRANSPORT_MQTT,
)

_LOGGER = logging.getLogger(__name__)

_TIMEOUT = vol.All(vol.Coerce(float), vol.Range(min=1, max=120))

HTTP_SCHEMA = vol.Schema({
    vol.Required(CONF_TRANSPORT): TRANSPORT_HTTP,
    vol.Required(CONF_HOST): vol.All(str, vol.Length(min=1)),
    vol.Optional(CONF_TIMEOUT, default=HTTP_TOTAL_TIMEOUT): _TIMEOUT,
})

MQTT_SCHEMA = vol.Schema({
    vol.Required(CONF_TRANSPORT): TRANSPORT_MQTT,
    vol.Required(CONF_HOST): vol.All(str, vol.Length(min=1)),
    vol.Required(CONF_SERIAL): vol.All(str, vol.Length(min=1)),
    vol.Optional(CONF_PORT, default=MQTT_PORT_DEFAULT): vol.All(
        vol.Coerce(int), vol.Range(min=1, max=65535)
    ),
    vol.Optional(CONF_USERNAME): str,
    vol.Optional(CONF_PASSWORD): str,
    vol.Optional(CONF_TIMEOUT, default=MQTT_TIMEOUT_DEFAULT): _TIMEOUT,
})


def connection_from_config(config: Mapping[str, Any]) -> ChargerConnection:
    """Validate `config` and return the matching connection.

    Raises voluptuous.Invalid when the mapping matches neither transport.
    """
    if not isinstance(config, Mapping):
        raise vol.Invalid("connection config must be a mapping")
    transport = config.get(CONF_TRANSPORT)
    if transport == TRANSPORT_HTTP:
        conf = HTTP_SCHEMA(dict(config))
        _LOGGER.debug("HTTP connection to %s", conf[CONF_HOST])
        return DirectHttpChargerConnection(conf[CONF_HOST], timeout=conf[CONF_TIMEOUT])
    if transport == TRANSPORT_MQTT:
        conf = MQTT_SCHEMA(dict(config))
        _LOGGER.debug("MQTT connection to %s:%s", conf[CONF_HOST], conf[CONF_PORT])
        return MqttChargerConnection(
            conf[CONF_HOST],
            conf[CONF_SERIAL],
            port=conf[CONF_PORT],
            username=conf.get(CONF_USERNAME),
            password=conf.get(CONF_PASSWORD),
            timeout=conf[CONF_TIMEOUT],
        )
    raise vol.Invalid(f"unknown transport {transport!r}", path=[CONF_TRANSPORT])
