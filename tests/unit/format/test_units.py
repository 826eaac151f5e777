"""Unit tests for unit-bearing parameter values."""

import dataclasses
import math

import pytest

from babylon_preset.format.errors import NumericFormat, UnitMismatch
from babylon_preset.format.units import (
    Angle,
    Frequency,
    Gain,
    Percent,
    Ratio,
    Time,
    decode,
    encode,
    format_number,
)


class TestQuantity:
    """Tests for Quantity construction, equality and arithmetic."""

    def test_default_unit_is_base_unit(self) -> None:
        assert Frequency(440).unit == "Hz"
        assert Time(1).unit == "s"
        assert Ratio(0.5).unit == ""

    def test_rejects_unit_of_other_dimension(self) -> None:
        with pytest.raises(ValueError, match="not a frequency unit"):
            Frequency(1, "ms")

    def test_equality_converts_units(self) -> None:
        assert Time(2, "ms") == Time(0.002, "s")
        assert Frequency(0.5, "kHz") == Frequency(500)
        assert Angle(math.pi, "rad") == Angle(180)
        assert hash(Time(2, "ms")) == hash(Time(0.002, "s"))

    def test_close_values_hash_alike(self) -> None:
        a, b = Frequency(1.0), Frequency(1.0 + 5e-10)
        assert a == b
        assert hash(a) == hash(b)
        assert len({Time(0.1, "s"), Time(100, "ms"), Time(100.00000001, "ms")}) == 1

    def test_different_dimensions_never_equal(self) -> None:
        assert Frequency(1) != Time(1)
        assert Gain(0) != Ratio(0)
        assert Frequency(1) != 1.0

    def test_values_are_immutable(self) -> None:
        value = Frequency(440)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.magnitude = 880  # type: ignore[misc]

    def test_ordering_within_dimension(self) -> None:
        assert Time(999, "ms") < Time(1, "s")
        assert Frequency(2, "kHz") > Frequency(1500)
        assert Time(1000, "ms") <= Time(1, "s")
        assert max([Gain(-6), Gain(3), Gain(0)]) == Gain(3)

    def test_ordering_across_dimensions_raises(self) -> None:
        with pytest.raises(TypeError):
            _ = Frequency(1) < Time(1)

    def test_arithmetic_keeps_left_unit(self) -> None:
        total = Time(1, "s") + Time(500, "ms")
        assert total.unit == "s"
        assert total == Time(1.5)

        difference = Frequency(1, "kHz") - Frequency(250)
        assert difference.unit == "kHz"
        assert difference == Frequency(750)

        assert -Gain(3) == Gain(-3)

    def test_arithmetic_across_dimensions_raises(self) -> None:
        with pytest.raises(TypeError):
            Frequency(1) + Time(1)  # type: ignore[operator]
        with pytest.raises(TypeError):
            Frequency(1) + 1  # type: ignore[operator]

    def test_scaling_by_plain_numbers(self) -> None:
        assert Frequency(100) * 2 == Frequency(200)
        assert 2 * Frequency(100) == Frequency(200)
        assert Time(1) / 4 == Time(250, "ms")
        with pytest.raises(TypeError):
            Frequency(100) * Frequency(2)  # type: ignore[operator]

    def test_division_by_same_dimension_is_plain_number(self) -> None:
        assert Frequency(1000) / Frequency(1, "kHz") == pytest.approx(1.0)

    def test_to_and_convert(self) -> None:
        assert Time(250, "ms").to("s") == pytest.approx(0.25)
        converted = Time(250, "ms").convert("s")
        assert converted.unit == "s"
        assert converted == Time(250, "ms")
        with pytest.raises(ValueError):
            Time(1).to("Hz")

    def test_to_same_unit_returns_magnitude_unchanged(self) -> None:
        value = Time(0.1, "ms")
        assert value.to("ms") == 0.1

    def test_explicit_cross_dimension_conversions(self) -> None:
        assert Percent(50).to_ratio() == Ratio(0.5)
        assert Ratio(0.25).to_percent() == Percent(25)
        assert Gain(20).to_amplitude() == pytest.approx(10.0)
        assert Gain.from_amplitude(10.0) == Gain(20)
        assert Time(250, "ms").to_frequency() == Frequency(4)
        assert Frequency(4).to_period() == Time(250, "ms")

    def test_from_amplitude_rejects_non_positive(self) -> None:
        with pytest.raises(ValueError):
            Gain.from_amplitude(0.0)

    def test_str_uses_unit_suffix(self) -> None:
        assert str(Frequency(1200)) == "1200 Hz"
        assert str(Ratio(0.5)) == "0.5"
        assert str(Percent(100)) == "100 %"


class TestFormatNumber:
    """Tests for the positional number rendering."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0.0, "0"),
            (-0.0, "0"),
            (1200.0, "1200"),
            (0.5, "0.5"),
            (-6.0, "-6"),
            (0.1, "0.1"),
            (1e-7, "0.0000001"),
            (1e21, "1000000000000000000000"),
        ],
    )
    def test_format_number(self, value: float, expected: str) -> None:
        assert format_number(value) == expected

    def test_shortest_text_round_trips(self) -> None:
        for value in (0.1 + 0.2, 1 / 3, 123456.789, 2.5e-5):
            assert float(format_number(value)) == value


class TestDecode:
    """Tests for decoding unit-bearing literals."""

    def test_explicit_unit(self) -> None:
        value = decode("0.5 kHz", Frequency, "Hz")
        assert value.unit == "kHz"
        assert value.magnitude == 0.5
        assert value == Frequency(500)

    def test_suffix_without_space(self) -> None:
        assert decode("100%", Percent) == Percent(100)
        assert decode("150ms", Time) == Time(150, "ms")

    def test_missing_suffix_uses_on_file_unit(self) -> None:
        assert decode("150", Time, "ms") == Time(150, "ms")
        assert decode("150", Time) == Time(150, "s")
        assert decode("0.5", Ratio) == Ratio(0.5)

    def test_exponent_and_sign(self) -> None:
        assert decode("1.5e3 Hz", Frequency) == Frequency(1500)
        assert decode("-6 dB", Gain) == Gain(-6)
        assert decode("+.5", Ratio) == Ratio(0.5)

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert decode("  440 Hz ", Frequency) == Frequency(440)

    def test_remembers_source_text(self) -> None:
        assert decode("1200 Hz", Frequency).source == "1200 Hz"

    def test_source_is_not_part_of_equality(self) -> None:
        assert decode("1200 Hz", Frequency) == Frequency(1200)

    def test_unit_of_other_dimension(self) -> None:
        with pytest.raises(UnitMismatch) as exc_info:
            decode("5 ms", Frequency, "Hz")
        assert exc_info.value.unit == "ms"
        assert exc_info.value.expected == "Frequency"
        assert exc_info.value.actual == "Time"
        assert exc_info.value.text == "5 ms"
        assert "time unit" in str(exc_info.value)

    def test_unknown_unit(self) -> None:
        with pytest.raises(UnitMismatch) as exc_info:
            decode("3 furlongs", Time)
        assert exc_info.value.actual is None

    def test_ratio_rejects_any_suffix(self) -> None:
        with pytest.raises(UnitMismatch):
            decode("0.5 dB", Ratio)

    @pytest.mark.parametrize("text", ["", "abc", "1,5", "1.2.3", "Hz", "nan", "inf Hz", "1e Hz"])
    def test_malformed_numbers(self, text: str) -> None:
        with pytest.raises(NumericFormat) as exc_info:
            decode(text, Frequency)
        assert exc_info.value.text == text

    def test_overflow_is_not_finite(self) -> None:
        with pytest.raises(NumericFormat, match="out of range"):
            decode("1e999 Hz", Frequency)


class TestEncode:
    """Tests for encoding values in an on-file unit."""

    def test_renders_in_requested_unit(self) -> None:
        assert encode(Frequency(0.5, "kHz"), "Hz") == "500 Hz"
        assert encode(Time(250, "ms"), "s") == "0.25 s"
        assert encode(Time(0.5, "s"), "ms") == "500 ms"

    def test_defaults_to_base_unit(self) -> None:
        assert encode(Frequency(1, "kHz")) == "1000 Hz"

    def test_ratio_has_no_suffix(self) -> None:
        assert encode(Ratio(0.07), "") == "0.07"

    def test_negative_zero(self) -> None:
        assert encode(Gain(-0.0), "dB") == "0 dB"

    def test_unmodified_source_is_reused(self) -> None:
        assert encode(decode("1.5e3 Hz", Frequency), "Hz") == "1.5e3 Hz"
        assert encode(decode("1200.00 Hz", Frequency), "Hz") == "1200.00 Hz"

    def test_source_in_other_unit_is_kept(self) -> None:
        assert encode(decode("0.5 kHz", Frequency), "Hz") == "0.5 kHz"

    def test_re_rendered_when_not_verbatim(self) -> None:
        assert encode(decode("0.5 kHz", Frequency), "Hz", verbatim=False) == "500 Hz"
        assert encode(decode("1200.00 Hz", Frequency), "Hz", verbatim=False) == "1200 Hz"

    def test_bare_number_needs_its_own_unit(self) -> None:
        value = decode("45", Time, "ms")
        assert encode(value, "ms") == "45"
        assert encode(value, "s") == "0.045 s"

    def test_modified_value_is_re_rendered(self) -> None:
        value = dataclasses.replace(decode("0.5 kHz", Frequency), magnitude=2.0)
        assert value.source == "0.5 kHz"
        assert encode(value, "Hz") == "2000 Hz"

    def test_never_scientific(self) -> None:
        assert "e" not in encode(Frequency(1e-7), "Hz")
        assert "e" not in encode(Frequency(1e20), "Hz")
