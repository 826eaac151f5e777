"""Unit tests for enumerated preset parameters."""

import pytest

from babylon_preset.format.types import (
    DEFAULT_EFFECT_ORDER,
    EffectType,
    FilterMode,
    LfoShape,
    ModDestination,
    ModSource,
    PlayMode,
    Unrecognized,
    Waveform,
)


class TestFileEnum:
    """Tests for on-file string lookup."""

    @pytest.mark.parametrize(
        ("kind", "text", "expected"),
        [
            (Waveform, "Saw", Waveform.SAW),
            (Waveform, "Pulse 1", Waveform.PULSE_1),
            (Waveform, "Sine FM C 5", Waveform.SINE_FM_C_5),
            (Waveform, "Voice 30", Waveform.VOICE_30),
            (LfoShape, "Gate 3", LfoShape.GATE_3),
            (FilterMode, "LowPass", FilterMode.LOW_PASS),
            (ModSource, "ModEnv2", ModSource.MOD_ENVELOPE_2),
            (ModDestination, "FilterCutoff", ModDestination.FILTER_CUTOFF),
            (EffectType, "LoFi", EffectType.LOFI),
        ],
    )
    def test_known_values(self, kind: type, text: str, expected: object) -> None:
        assert kind.from_file(text) is expected

    def test_every_member_round_trips(self) -> None:
        for kind in (Waveform, FilterMode, ModSource, ModDestination, EffectType):
            for member in kind:
                assert kind.from_file(member.to_file()) is member

    def test_unknown_value_is_preserved(self) -> None:
        value = Waveform.from_file("PulseWidth7")
        assert value == Unrecognized("PulseWidth7")
        assert value.to_file() == "PulseWidth7"

    def test_lookup_is_case_sensitive(self) -> None:
        assert Waveform.from_file("saw") == Unrecognized("saw")
        assert FilterMode.from_file("lowpass") == Unrecognized("lowpass")

    def test_whitespace_is_significant(self) -> None:
        assert Waveform.from_file(" Saw") == Unrecognized(" Saw")

    def test_empty_string_is_unrecognized(self) -> None:
        assert ModSource.from_file("") == Unrecognized("")

    def test_str_is_on_file_string(self) -> None:
        assert str(Waveform.SINE_ROOT_1_5) == "Sine Root 1.5"
        assert str(Unrecognized("Wobble")) == "Wobble"

    def test_same_string_in_different_kinds(self) -> None:
        # "None" is both a source and a destination
        assert ModSource.from_file("None") is ModSource.NONE
        assert ModDestination.from_file("None") is ModDestination.NONE


class TestUnrecognized:
    def test_equality_and_hash(self) -> None:
        assert Unrecognized("x") == Unrecognized("x")
        assert Unrecognized("x") != Unrecognized("y")
        assert len({Unrecognized("x"), Unrecognized("x")}) == 1

    def test_never_equal_to_known_member(self) -> None:
        assert Unrecognized("Saw") != Waveform.SAW


class TestPlayMode:
    def test_display_names(self) -> None:
        assert PlayMode.NORMAL.display_name == "Normal"
        assert PlayMode.CHEAT_1.display_name == "Mute off-key notes"
        assert PlayMode.CHEAT_2.display_name == "Replace off-key notes"


class TestEffectType:
    def test_default_order_holds_every_effect_once(self) -> None:
        assert len(DEFAULT_EFFECT_ORDER) == len(EffectType)
        assert set(DEFAULT_EFFECT_ORDER) == set(EffectType)
        assert DEFAULT_EFFECT_ORDER[0] is EffectType.DISTORTION
        assert DEFAULT_EFFECT_ORDER[-1] is EffectType.REVERB


class TestWaveform:
    def test_full_wave_menu(self) -> None:
        assert len(Waveform) == 257
        assert list(Waveform)[0] is Waveform.SINE
        assert list(Waveform)[-1] is Waveform.DUCK_3

    @pytest.mark.parametrize(
        "text", ["Sine AM 4", "Sine FM D 15", "Synthetic Voice 29", "Organ 23", "Dirty 8 C"]
    )
    def test_menu_entries_are_known(self, text: str) -> None:
        assert isinstance(Waveform.from_file(text), Waveform)

    def test_lfo_shapes_share_the_wave_table(self) -> None:
        assert LfoShape is Waveform
        assert LfoShape.from_file("Duck 3") is Waveform.DUCK_3
        assert LfoShape.from_file("Sample & Hold") == Unrecognized("Sample & Hold")
