"""Unit tests for preset validation before writing."""

import pytest

from babylon_preset.format.model import Oscillator, Preset
from babylon_preset.format.types import EffectType, FilterMode, Unrecognized, Waveform
from babylon_preset.format.units import Frequency, Gain, Percent, Time
from babylon_preset.format.validation import (
    ValidationError,
    ValidationResult,
    quantity_fields,
    validate_preset,
)


class TestValidationResult:
    def test_success(self) -> None:
        result = ValidationResult.success(["careful"])
        assert result.valid
        assert result.errors == []
        assert result.warnings == ["careful"]

    def test_failure(self) -> None:
        result = ValidationResult.failure(["broken"])
        assert not result.valid
        assert result.warnings == []

    def test_error_field(self) -> None:
        error = ValidationError("bad cutoff", field="filter.cutoff")
        assert error.field == "filter.cutoff"
        assert str(error) == "bad cutoff"


class TestValidatePreset:
    """Tests for validate_preset."""

    @pytest.mark.parametrize("version", ["1.0", "2.0"])
    def test_init_preset_is_clean(self, version: str) -> None:
        result = validate_preset(Preset.init(schema_version=version))
        assert result.valid
        assert result.errors == []
        assert result.warnings == []

    def test_unsupported_version(self) -> None:
        result = validate_preset(Preset.init(), "3.0")
        assert not result.valid
        assert "Unsupported schema version '3.0'" in result.errors[0]

    def test_version_argument_overrides_preset(self) -> None:
        preset = Preset.init(schema_version="9.9")
        assert not validate_preset(preset).valid
        assert validate_preset(preset, "2.0").valid

    def test_wrong_dimension(self) -> None:
        preset = Preset.init()
        preset.oscillators[2].cutoff = Gain(0)  # type: ignore[assignment]

        result = validate_preset(preset)
        assert not result.valid
        assert result.errors == ["oscillators[2].cutoff: expected Frequency, got Gain"]

    def test_bare_number(self) -> None:
        preset = Preset.init()
        preset.delay.time = 0.5  # type: ignore[assignment]
        result = validate_preset(preset)
        assert result.errors == ["delay.time: expected Time, got float"]

    def test_non_finite(self) -> None:
        preset = Preset.init()
        preset.filter.cutoff = Frequency(float("nan"))
        result = validate_preset(preset)
        assert not result.valid
        assert "not finite" in result.errors[0]

    def test_wrong_enum_kind(self) -> None:
        preset = Preset.init()
        preset.oscillators[0].waveform = FilterMode.LOW_PASS  # type: ignore[assignment]
        result = validate_preset(preset)
        assert result.errors == ["oscillators[0].waveform: expected Waveform, got FilterMode"]

    def test_wrong_scalar_types(self) -> None:
        preset = Preset.init()
        preset.voice.polyphony = True
        preset.voice.limiter = 1  # type: ignore[assignment]
        result = validate_preset(preset)
        assert "voice.polyphony: expected int, got bool" in result.errors
        assert "voice.limiter: expected bool, got int" in result.errors

    def test_wrong_section_type(self) -> None:
        preset = Preset.init()
        preset.noise = None  # type: ignore[assignment]
        preset.lfos = [preset.oscillators[0]]  # type: ignore[list-item]
        result = validate_preset(preset)
        assert "noise must be Noise, got NoneType" in result.errors
        assert "lfos[0] must be Lfo, got Oscillator" in result.errors

    def test_repeated_section_must_be_list(self) -> None:
        preset = Preset.init()
        preset.oscillators = tuple(preset.oscillators)  # type: ignore[assignment]
        result = validate_preset(preset)
        assert "oscillators must be a list, got tuple" in result.errors

    def test_unrecognized_values_warn(self) -> None:
        preset = Preset.init()
        preset.oscillators[1].waveform = Unrecognized("PulseWidth7")
        preset.effect_chain.order.append(Unrecognized("Flanger"))

        result = validate_preset(preset)
        assert result.valid
        assert "oscillators[1].waveform: unrecognized value 'PulseWidth7'" in result.warnings
        assert "effect_chain.order: unrecognized value 'Flanger'" in result.warnings

    @pytest.mark.parametrize("raw", ["Delay,Reverb", ""])
    def test_unwritable_list_item(self, raw: str) -> None:
        preset = Preset.init()
        preset.effect_chain.order = [EffectType.DELAY, Unrecognized(raw)]
        result = validate_preset(preset)
        assert not result.valid
        assert "cannot be written as a list item" in result.errors[0]

    def test_unwritable_unrecognized_value(self) -> None:
        preset = Preset.init()
        preset.filter.mode = Unrecognized("Comb\x07")
        result = validate_preset(preset)
        assert not result.valid
        assert "U+0007" in result.errors[0]

    def test_unrecognized_known_value(self) -> None:
        preset = Preset.init()
        preset.filter.mode = Unrecognized("LowPass")
        result = validate_preset(preset)
        assert not result.valid
        assert "FilterMode.LOW_PASS" in result.errors[0]

    def test_unwritable_metadata(self) -> None:
        preset = Preset.init()
        preset.author = "Tab\x0bbed"
        result = validate_preset(preset)
        assert result.errors == ["author contains character U+000B, which XML cannot store"]

    def test_metadata_must_be_text(self) -> None:
        preset = Preset.init()
        preset.category = 42  # type: ignore[assignment]
        assert "category must be a string, got int" in validate_preset(preset).errors

    def test_empty_name_warns(self) -> None:
        result = validate_preset(Preset.init(name="  "))
        assert result.valid
        assert result.warnings == ["name is empty"]

    def test_extra_slots_warn(self) -> None:
        preset = Preset.init()
        preset.oscillators.append(preset.oscillators[0])
        result = validate_preset(preset)
        assert result.valid
        assert result.warnings == ["oscillators has 4 slots, Babylon uses only 3"]

    def test_placeholder_description_warns_for_old_format(self) -> None:
        preset = Preset.init(schema_version="1.0")
        preset.description = "Preset Info"
        assert len(validate_preset(preset).warnings) == 1
        assert validate_preset(preset, "2.0").warnings == []

    def test_fewer_slots_are_fine(self) -> None:
        preset = Preset.init()
        preset.oscillators = [preset.oscillators[0]]
        preset.mod_matrix = []
        assert validate_preset(preset).warnings == []


class TestQuantityFields:
    def test_lists_every_unit_value(self) -> None:
        fields = dict(quantity_fields(Preset.init()))
        assert fields["filter.cutoff"] == Frequency(20000)
        assert fields["oscillators[0].unison_spread"] == Percent(50)
        assert fields["amp_envelope.attack"] == Time(2, "ms")
        assert "oscillators[0].waveform" not in fields

    def test_paths_follow_slots(self) -> None:
        preset = Preset.init()
        preset.oscillators.append(
            Oscillator(**{**vars(preset.oscillators[0]), "waveform": Waveform.SAW})
        )
        paths = [path for path, _ in quantity_fields(preset)]
        assert "oscillators[3].cutoff" in paths
