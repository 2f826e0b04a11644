# goe_charger/data.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from enum import Enum

from .const import (
    DECI_KWH_PER_KWH,
    DEKA_WS_PER_KWH,
    ENERGY_SENSOR_VALUES,
    KEY_ENERGY_SENSOR,
)
from .exceptions import InvalidValue


class CarStatus(Enum):
    """Vehicle state as reported by `car`. Values are the wire codes."""

    READY_NO_VEHICLE = "1"
    CHARGING = "2"
    WAITING_FOR_VEHICLE = "3"
    CHARGING_FINISHED = "4"


class AccessState(Enum):
    """Access control mode (`ast`)."""

    OPEN = "0"
    RFID = "1"
    ELECTRICITY_PRICES = "2"


class StopState(Enum):
    """Automatic stop mode (`stp`). Code "1" is not documented and stays unmapped."""

    DEACTIVATED = "0"
    SWITCH_OFF_AFTER_KWH = "2"


class AwattarPriceZone(Enum):
    """aWATTar price zone (`azo`)."""

    AUSTRIA = "0"
    GERMANY = "1"


@dataclass(frozen=True)
class NoCable:
    """No cable plugged in."""

    @property
    def ampere(self) -> int | None:
        return None


@dataclass(frozen=True)
class Ampere:
    """Plugged-in cable rated for `ampere` A."""

    ampere: int


CableCoding = NoCable | Ampere


@dataclass(frozen=True)
class PhaseStatus:
    """Voltage presence per phase, before and after the contactor."""

    l1_before_contactor: bool
    l1_after_contactor: bool
    l2_before_contactor: bool
    l2_after_contactor: bool
    l3_before_contactor: bool
    l3_after_contactor: bool

    @classmethod
    def from_byte(cls, value: int) -> PhaseStatus:
        """Decode the `pha` bit field. Bits 6 and 7 are ignored."""
        return cls(
            l1_before_contactor=bool(value & (1 << 3)),
            l1_after_contactor=bool(value & (1 << 0)),
            l2_before_contactor=bool(value & (1 << 4)),
            l2_after_contactor=bool(value & (1 << 1)),
            l3_before_contactor=bool(value & (1 << 5)),
            l3_after_contactor=bool(value & (1 << 2)),
        )


@dataclass(frozen=True)
class EnergySensorReading:
    """The sixteen `nrg` values, positionally.

    Units as sent by the charger: voltage in V, current in 0.1 A, power in
    0.1 kW (neutral in 0.1 kW as well), power factor in %.
    """

    voltage_l1: int
    voltage_l2: int
    voltage_l3: int
    voltage_n: int

    current_l1: int
    current_l2: int
    current_l3: int

    power_l1: int
    power_l2: int
    power_l3: int
    power_n: int
    power_total: int

    powerfactor_l1: int
    powerfactor_l2: int
    powerfactor_l3: int
    powerfactor_n: int

    @classmethod
    def from_array(cls, nrg: Sequence[int]) -> EnergySensorReading:
        """Assign the array positions to fields; values are not range-checked."""
        if len(nrg) != ENERGY_SENSOR_VALUES:
            raise InvalidValue(
                KEY_ENERGY_SENSOR,
                list(nrg),
                f"expected {ENERGY_SENSOR_VALUES} values, got {len(nrg)}",
            )
        # field declaration order is the array order
        return cls(*nrg)

    def as_list(self) -> list[int]:
        return [getattr(self, f.name) for f in fields(self)]


@dataclass(frozen=True)
class GoEStatus:
    """One fully decoded status snapshot."""

    car_status: CarStatus
    ampere: int
    access_state: AccessState
    allow_charging: bool
    stop_state: StopState
    cable_coding: CableCoding
    phase_status: PhaseStatus
    temperature: int
    charged: int  # deka-watt-seconds
    stop_energy: int  # 0.1 kWh
    total_energy: int  # 0.1 kWh
    energy_sensor: EnergySensorReading
    serial_number: str
    awattar_price_zone: AwattarPriceZone

    @property
    def charged_kwh(self) -> float:
        return self.charged / DEKA_WS_PER_KWH

    @property
    def stop_energy_kwh(self) -> float:
        return self.stop_energy / DECI_KWH_PER_KWH

    @property
    def total_energy_kwh(self) -> float:
        return self.total_energy / DECI_KWH_PER_KWH
