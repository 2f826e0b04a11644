# goe_charger/connection/mqtt.py
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, cast

from aiomqtt import Client, MqttError

from ..const import (
    MQTT_COMMAND_TOPIC,
    MQTT_PORT_DEFAULT,
    MQTT_QOS_AT_LEAST_ONCE,
    MQTT_STATUS_TOPIC,
    MQTT_TIMEOUT_DEFAULT,
)
from ..exceptions import TransportError
from . import ChargerConnection

_LOGGER = logging.getLogger(__name__)


class MqttChargerConnection(ChargerConnection):
    """Reaches a charger through an MQTT broker (API v1 topics).

    The charger publishes its status object on `go-eCharger/<serial>/status`
    and accepts `key=value` commands on `go-eCharger/<serial>/cmd/req`,
    answering each with a fresh status publish.
    """

    def __init__(
        self,
        hostname: str,
        serial: str,
        *,
        port: int = MQTT_PORT_DEFAULT,
        username: str | None = None,
        password: str | None = None,
        timeout: float = MQTT_TIMEOUT_DEFAULT,
    ) -> None:
        self.hostname = hostname
        self.serial = serial
        self.port = port
        self._username = username
        self._password = password
        self._timeout = timeout
        self.status_topic = MQTT_STATUS_TOPIC.format(serial=serial)
        self.command_topic = MQTT_COMMAND_TOPIC.format(serial=serial)

    def _client(self) -> Client:
        return Client(
            hostname=self.hostname,
            port=self.port,
            username=self._username,
            password=self._password,
        )

    @staticmethod
    def _to_text(raw: object) -> str:
        if isinstance(raw, bytes | bytearray):
            return raw.decode("utf-8", "ignore")
        if isinstance(raw, str):
            return raw
        return str(raw)

    async def _next_status(self, client: Client, *, fresh_only: bool = False) -> dict[str, Any]:
        """Return the next status object; with `fresh_only`, retained replays are skipped."""
        async for msg in client.messages:
            topic_str = msg.topic.value if hasattr(msg.topic, "value") else str(msg.topic)
            if topic_str != self.status_topic:
                continue
            if fresh_only and getattr(msg, "retain", False):
                _LOGGER.debug("MQTT RX %s: skipping retained status", topic_str)
                continue
            payload_raw = self._to_text(msg.payload)
            _LOGGER.debug("MQTT RX %s (%d bytes)", topic_str, len(payload_raw))
            try:
                payload = json.loads(payload_raw)
            except json.JSONDecodeError as err:
                raise TransportError(f"Non-JSON status on {topic_str}: {err}") from err
            if not isinstance(payload, dict):
                raise TransportError(
                    f"Status on {topic_str} is {type(payload).__name__}, expected object"
                )
            return cast(dict[str, Any], payload)
        raise TransportError(f"MQTT message stream ended before a status on {self.status_topic}")

    async def _exchange(self, command: str | None) -> dict[str, Any]:
        """Subscribe to the status topic, optionally publish a command, await one status."""
        try:
            async with self._client() as client:
                _LOGGER.info("MQTT connected to %s:%s", self.hostname, self.port)
                await client.subscribe(self.status_topic, qos=MQTT_QOS_AT_LEAST_ONCE)
                if command is not None:
                    await client.publish(
                        self.command_topic, command, qos=MQTT_QOS_AT_LEAST_ONCE
                    )
                    _LOGGER.debug("MQTT TX %s: %s", self.command_topic, command)
                return await asyncio.wait_for(
                    self._next_status(client, fresh_only=command is not None),
                    timeout=self._timeout,
                )
        except TimeoutError as err:
            raise TransportError(
                f"No status on {self.status_topic} within {self._timeout}s"
            ) from err
        except (MqttError, OSError) as err:
            raise TransportError(f"MQTT error ({self.hostname}:{self.port}): {err}") from err

    async def fetch_status_payload(self) -> dict[str, Any]:
        return await self._exchange(None)

    async def write_key(self, key: str, value: str) -> None:
        await self._exchange(f"{key}={value}")
