"""Shared fixtures: the captured status payload and an in-memory connection."""

import copy
import json
from pathlib import Path

import pytest

from goe_charger.connection import ChargerConnection

FIXTURES = Path(__file__).parent / "fixtures"


class FakeConnection(ChargerConnection):
    """Records writes and serves a fixed payload (or raises `error`)."""

    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.writes = []
        self.closed = False

    async def fetch_status_payload(self):
        if self.error is not None:
            raise self.error
        return self.payload

    async def write_key(self, key, value):
        if self.error is not None:
            raise self.error
        self.writes.append((key, value))

    async def close(self):
        self.closed = True


@pytest.fixture(scope="session")
def _captured_status():
    return json.loads((FIXTURES / "status.json").read_text())


@pytest.fixture
def status_payload(_captured_status):
    """Fresh copy of the captured status so tests may mutate it."""
    return copy.deepcopy(_captured_status)


@pytest.fixture
def fake_connection(status_payload):
    return FakeConnection(payload=status_payload)
