"""Babylon preset format module.

This module provides functionality for reading and writing presets of the
Babylon virtual-analog synthesizer as typed, unit-aware `Preset` objects.

Format Overview
---------------
A preset (``.bab``) is an XML document. Every parameter is an attribute of
the element for its section, and unit-bearing values carry a unit suffix:

    +----------------------------------------------+
    | <?xml version="1.0" encoding="UTF-8"?>       |
    +----------------------------------------------+
    | Root element (<Preset> / <BabylonPreset>)    |
    |   - version (selects the schema)             |
    |   - name, author, category, description      |
    +----------------------------------------------+
    | Voice and tuning sections                    |
    +----------------------------------------------+
    | Oscillators (one element per slot)           |
    |   - wave="Saw" freq... cutoff="1200 Hz"      |
    +----------------------------------------------+
    | Noise, filter, envelopes, LFOs, vibrato      |
    +----------------------------------------------+
    | Modulation matrix (one element per slot)     |
    +----------------------------------------------+
    | Effect chain order and effect sections       |
    +----------------------------------------------+

Example Usage
-------------
>>> from babylon_preset.format import Frequency, Preset, load_preset, save_preset
>>> # Create and save a preset
>>> preset = Preset.init(name="Bright Lead")
>>> preset.filter.cutoff = Frequency(1.2, "kHz")
>>> save_preset("bright_lead.bab", preset)
>>> # Load a preset
>>> preset = load_preset("bright_lead.bab")
>>> print(preset.oscillators[0].waveform)
"""

from babylon_preset.format.codec import decode, encode
from babylon_preset.format.errors import (
    DecodeError,
    MissingField,
    MissingSection,
    NumericFormat,
    PresetError,
    StructuralError,
    UnitMismatch,
    UnsupportedVersion,
)
from babylon_preset.format.model import CURRENT_SCHEMA_VERSION, Preset
from babylon_preset.format.schema import SCHEMAS
from babylon_preset.format.standard.reader import load_preset, loads
from babylon_preset.format.standard.writer import dumps, save_preset
from babylon_preset.format.types import (
    EffectType,
    FilterDrive,
    FilterMode,
    LfoShape,
    ModDestination,
    ModSource,
    PlayMode,
    PortamentoMode,
    Unrecognized,
    Waveform,
)
from babylon_preset.format.units import Angle, Frequency, Gain, Percent, Ratio, Time
from babylon_preset.format.validation import (
    ValidationError,
    ValidationResult,
    validate_preset,
)

__all__ = [
    # Model
    "Preset",
    "CURRENT_SCHEMA_VERSION",
    "SCHEMAS",
    # Units
    "Frequency",
    "Time",
    "Gain",
    "Ratio",
    "Angle",
    "Percent",
    # Types
    "Waveform",
    "LfoShape",
    "FilterMode",
    "FilterDrive",
    "ModSource",
    "ModDestination",
    "PortamentoMode",
    "PlayMode",
    "EffectType",
    "Unrecognized",
    # Codec
    "decode",
    "encode",
    # Reader
    "loads",
    "load_preset",
    # Writer
    "dumps",
    "save_preset",
    # Validation
    "validate_preset",
    "ValidationResult",
    "ValidationError",
    # Errors
    "PresetError",
    "DecodeError",
    "UnsupportedVersion",
    "MissingSection",
    "MissingField",
    "UnitMismatch",
    "NumericFormat",
    "StructuralError",
]
