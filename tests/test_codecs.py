"""Unit tests for the per-field status decoders."""

import pytest

from goe_charger import codecs
from goe_charger.data import (
    AccessState,
    Ampere,
    AwattarPriceZone,
    CarStatus,
    EnergySensorReading,
    NoCable,
    PhaseStatus,
    StopState,
)
from goe_charger.exceptions import InvalidValue, ParseError


class TestCarStatus:
    """Test `car` decoding."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("1", CarStatus.READY_NO_VEHICLE),
            ("2", CarStatus.CHARGING),
            ("3", CarStatus.WAITING_FOR_VEHICLE),
            ("4", CarStatus.CHARGING_FINISHED),
        ],
    )
    def test_known_codes(self, raw, expected):
        assert codecs.car_status("car", raw) is expected

    @pytest.mark.parametrize("raw", ["0", "5", "", "abc", " 1", "01", 1, None])
    def test_other_values_are_invalid(self, raw):
        with pytest.raises(InvalidValue) as exc:
            codecs.car_status("car", raw)
        assert exc.value.field == "car"
        assert exc.value.value == raw


class TestAccessState:
    """Test `ast` decoding."""

    def test_known_codes(self):
        assert codecs.access_state("ast", "0") is AccessState.OPEN
        assert codecs.access_state("ast", "1") is AccessState.RFID
        assert codecs.access_state("ast", "2") is AccessState.ELECTRICITY_PRICES

    def test_unknown_code(self):
        with pytest.raises(InvalidValue, match="ast"):
            codecs.access_state("ast", "9")


class TestStopState:
    """Test `stp` decoding, including the unmapped code 1."""

    def test_known_codes(self):
        assert codecs.stop_state("stp", "0") is StopState.DEACTIVATED
        assert codecs.stop_state("stp", "2") is StopState.SWITCH_OFF_AFTER_KWH

    @pytest.mark.parametrize("raw", ["1", "3", "x"])
    def test_unmapped_codes_are_invalid(self, raw):
        with pytest.raises(InvalidValue):
            codecs.stop_state("stp", raw)


class TestAwattarPriceZone:
    """Test `azo` decoding."""

    def test_known_codes(self):
        assert codecs.awattar_price_zone("azo", "0") is AwattarPriceZone.AUSTRIA
        assert codecs.awattar_price_zone("azo", "1") is AwattarPriceZone.GERMANY

    def test_unknown_code(self):
        with pytest.raises(InvalidValue):
            codecs.awattar_price_zone("azo", "2")


class TestUnsignedParsing:
    """Test the width-checked integer parsers."""

    def test_u8_bounds(self):
        assert codecs.parse_u8("amp", "0") == 0
        assert codecs.parse_u8("amp", "255") == 255
        assert codecs.parse_u8("amp", "+16") == 16

    @pytest.mark.parametrize("raw", ["256", "-1", "", "1.5", "abc", " 16", "1_0", 16, None])
    def test_u8_rejects(self, raw):
        with pytest.raises(ParseError) as exc:
            codecs.parse_u8("amp", raw)
        assert exc.value.field == "amp"

    def test_u32_bounds(self):
        assert codecs.parse_u32("eto", "4294967295") == 4294967295
        with pytest.raises(ParseError):
            codecs.parse_u32("eto", "4294967296")


class TestAllowCharging:
    """Test `alw` decoding."""

    def test_one_is_true(self):
        assert codecs.allow_charging("alw", "1") is True

    @pytest.mark.parametrize("raw", ["0", "2", "255"])
    def test_other_numbers_are_false(self, raw):
        assert codecs.allow_charging("alw", raw) is False

    def test_non_numeric(self):
        with pytest.raises(ParseError):
            codecs.allow_charging("alw", "true")


class TestCableCoding:
    """Test `cbl` decoding."""

    def test_no_cable(self):
        assert codecs.cable_coding("cbl", "0") == NoCable()
        assert NoCable().ampere is None

    @pytest.mark.parametrize("amps", range(13, 33))
    def test_rated_cables(self, amps):
        assert codecs.cable_coding("cbl", str(amps)) == Ampere(amps)

    @pytest.mark.parametrize("raw", ["1", "12", "33", "255"])
    def test_out_of_range(self, raw):
        with pytest.raises(InvalidValue):
            codecs.cable_coding("cbl", raw)

    @pytest.mark.parametrize("raw", ["a", "256", ""])
    def test_not_a_u8(self, raw):
        with pytest.raises(ParseError):
            codecs.cable_coding("cbl", raw)


class TestPhaseStatus:
    """Test the `pha` bit field."""

    def test_zero(self):
        assert PhaseStatus.from_byte(0) == PhaseStatus(False, False, False, False, False, False)

    def test_before_contactor_only(self):
        assert PhaseStatus.from_byte(0b00111000) == PhaseStatus(
            l1_before_contactor=True,
            l1_after_contactor=False,
            l2_before_contactor=True,
            l2_after_contactor=False,
            l3_before_contactor=True,
            l3_after_contactor=False,
        )

    def test_after_contactor_only(self):
        assert PhaseStatus.from_byte(0b00000111) == PhaseStatus(
            l1_before_contactor=False,
            l1_after_contactor=True,
            l2_before_contactor=False,
            l2_after_contactor=True,
            l3_before_contactor=False,
            l3_after_contactor=True,
        )

    def test_mixed(self):
        assert PhaseStatus.from_byte(0b00010101) == PhaseStatus(
            l1_before_contactor=False,
            l1_after_contactor=True,
            l2_before_contactor=True,
            l2_after_contactor=False,
            l3_before_contactor=False,
            l3_after_contactor=True,
        )

    def test_total_and_ignores_high_bits(self):
        for value in range(256):
            assert PhaseStatus.from_byte(value) == PhaseStatus.from_byte(value & 0b00111111)

    def test_codec_parses_string(self):
        assert codecs.phase_status("pha", "56") == PhaseStatus.from_byte(56)
        with pytest.raises(ParseError):
            codecs.phase_status("pha", "300")


class TestEnergySensor:
    """Test `nrg` positional decoding."""

    def test_positions_are_distinct(self):
        sentinels = [1000 + i for i in range(16)]
        reading = EnergySensorReading.from_array(sentinels)

        assert reading.voltage_l1 == 1000
        assert reading.voltage_n == 1003
        assert reading.current_l1 == 1004
        assert reading.current_l3 == 1006
        assert reading.power_l1 == 1007
        assert reading.power_n == 1010
        assert reading.power_total == 1011
        assert reading.powerfactor_l1 == 1012
        assert reading.powerfactor_n == 1015
        assert reading.as_list() == sentinels

    def test_negative_values_pass_through(self):
        reading = codecs.energy_sensor("nrg", [-5] * 16)
        assert reading.power_total == -5

    def test_i32_bounds_accepted(self):
        reading = codecs.energy_sensor("nrg", [2**31 - 1] + [-(2**31)] * 15)
        assert reading.voltage_l1 == 2**31 - 1
        assert reading.powerfactor_n == -(2**31)

    @pytest.mark.parametrize("value", [2**31, -(2**31) - 1, 2**40])
    def test_outside_i32(self, value):
        with pytest.raises(ParseError) as exc:
            codecs.energy_sensor("nrg", [0] * 15 + [value])
        assert exc.value.field == "nrg"

    @pytest.mark.parametrize("length", [0, 15, 17])
    def test_wrong_length(self, length):
        with pytest.raises(InvalidValue) as exc:
            codecs.energy_sensor("nrg", [0] * length)
        assert exc.value.field == "nrg"

    @pytest.mark.parametrize("raw", ["0,0", None, [0] * 15 + ["1"], [0] * 15 + [True]])
    def test_not_an_int_array(self, raw):
        with pytest.raises(ParseError):
            codecs.energy_sensor("nrg", raw)


class TestText:
    """Test the serial number pass-through."""

    def test_verbatim(self):
        assert codecs.text("sse", " 00-12 ") == " 00-12 "

    def test_not_a_string(self):
        with pytest.raises(ParseError):
            codecs.text("sse", 12345)
