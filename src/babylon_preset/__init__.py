"""babylon_preset - Reader and writer for Babylon synthesizer presets.

This package exposes Babylon ``.bab`` preset files as typed, unit-aware
`Preset` objects and writes them back, in any supported schema version.

Preset Format
-------------
The format submodule provides the codec, the unit and enumeration types and
the file reader and writer.

Example Usage
-------------
>>> from babylon_preset import Gain, load_preset, save_preset
>>>
>>> # Load a preset
>>> preset = load_preset("Init.bab")
>>> print(f"Loaded: {preset.name}, {len(preset.oscillators)} oscillators")
>>>
>>> # Turn it down and write it in the older format
>>> preset.voice.master_volume = Gain(-3.0)
>>> save_preset("Init (1.0).bab", preset, version="1.0")
"""

# Re-export format module for convenience
from babylon_preset.format import (
    CURRENT_SCHEMA_VERSION,
    Angle,
    DecodeError,
    Frequency,
    Gain,
    Percent,
    Preset,
    PresetError,
    Ratio,
    Time,
    Unrecognized,
    ValidationError,
    dumps,
    load_preset,
    loads,
    save_preset,
    validate_preset,
)

__all__ = [
    # Model
    "Preset",
    "CURRENT_SCHEMA_VERSION",
    "Unrecognized",
    # Units
    "Frequency",
    "Time",
    "Gain",
    "Ratio",
    "Angle",
    "Percent",
    # Reader
    "loads",
    "load_preset",
    # Writer
    "dumps",
    "save_preset",
    # Validation
    "validate_preset",
    "ValidationError",
    # Errors
    "PresetError",
    "DecodeError",
]
