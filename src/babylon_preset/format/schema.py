"""Schema versions of the preset file format.

Everything that differs between file format revisions lives in the `SCHEMAS`
table: the root tag, element and attribute names, where repeated sections
are nested, and which unit each dimension is written in. The codec walks the
table and never branches on the version itself, so supporting a new
revision means adding one `Schema` entry.

Version 1.0 (Babylon 1.0.x)::

    <BabylonPreset version="1.0" name="..." info="Preset Info">
      <Voice ... />
      <Oscillator waveform="Saw" cutoff="1200 Hz" ... />   (one per slot)
      <Filter ... />
      ...
      <ModMatrix>
        <ModSlot source="Velocity" destination="Volume" amount="100 %" />
      </ModMatrix>
      <EffectChain order="Distortion,LoFi,Filter,..." />
      <Chorus ... />
    </BabylonPreset>

Version 2.0 groups repeated sections in containers, moves the effects into
an ``<Effects>`` element, renames several elements and attributes and
writes times in seconds rather than milliseconds.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Protocol

from babylon_preset.format.errors import NumericFormat, UnsupportedVersion
from babylon_preset.format.model import (
    Chorus,
    Delay,
    Distortion,
    EffectChain,
    EffectFilter,
    Envelope,
    Equalizer,
    Filter,
    Lfo,
    LoFi,
    ModEnvelope,
    ModMatrixSlot,
    Noise,
    Oscillator,
    Reverb,
    Tuning,
    Vibrato,
    Voice,
)
from babylon_preset.format.types import (
    EffectType,
    FileEnum,
    FilterDrive,
    FilterMode,
    ModDestination,
    ModSource,
    PlayMode,
    PortamentoMode,
    Unrecognized,
    Waveform,
)
from babylon_preset.format.units import (
    Angle,
    Frequency,
    Gain,
    Percent,
    Quantity,
    Ratio,
    Time,
    decode as decode_quantity,
    encode as encode_quantity,
)

VERSION_ATTRIBUTE = "version"
"""Root attribute holding the schema version in every revision."""

_INTEGER = re.compile(r"[+-]?\d+")

# Characters XML 1.0 cannot carry, even escaped
_XML_ILLEGAL = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def xml_problem(text: str) -> str | None:
    """Describe why `text` cannot be stored in an XML attribute, if it can't."""
    match = _XML_ILLEGAL.search(text)
    if match is None:
        return None
    return f"contains character U+{ord(match.group()):04X}, which XML cannot store"


def _decode_number(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise NumericFormat(text) from None
    if not math.isfinite(value):
        raise NumericFormat(text, "Number is not finite")
    return value


class FieldKind(Protocol):
    """How one attribute's text maps to a model value."""

    def decode(self, text: str, schema: "Schema") -> Any: ...

    def encode(self, value: Any, schema: "Schema", *, verbatim: bool = True) -> str:
        """Render `value`; `verbatim` allows reusing the text it was decoded from."""
        ...

    def check(self, value: Any) -> str | None:
        """Describe why `value` cannot be encoded, or return None."""
        ...


@dataclass(frozen=True)
class Unit:
    """A `Quantity` written in the schema's on-file unit for its dimension."""

    dimension: type[Quantity]

    def decode(self, text: str, schema: "Schema") -> Quantity:
        return decode_quantity(text, self.dimension, schema.units[self.dimension])

    def encode(self, value: Quantity, schema: "Schema", *, verbatim: bool = True) -> str:
        return encode_quantity(value, schema.units[self.dimension], verbatim=verbatim)

    def check(self, value: Any) -> str | None:
        if type(value) is not self.dimension:
            return f"expected {self.dimension.__name__}, got {type(value).__name__}"
        if not value.is_finite:
            return f"magnitude {value.magnitude} is not finite"
        return None


@dataclass(frozen=True)
class Choice:
    """One value of an enumeration, unknown strings preserved."""

    enum: type[FileEnum]

    def decode(self, text: str, schema: "Schema") -> FileEnum | Unrecognized:
        return self.enum.from_file(text)

    def encode(
        self, value: FileEnum | Unrecognized, schema: "Schema", *, verbatim: bool = True
    ) -> str:
        return value.to_file()

    def check(self, value: Any) -> str | None:
        if isinstance(value, Unrecognized):
            known = self.enum.from_file(value.raw)
            if not isinstance(known, Unrecognized):
                return f"{value.raw!r} is {self.enum.__name__}.{known.name}, not unrecognized"
            return xml_problem(value.raw)
        if not isinstance(value, self.enum):
            return f"expected {self.enum.__name__}, got {type(value).__name__}"
        return None


@dataclass(frozen=True)
class ChoiceList:
    """Comma-separated enumeration values; an empty string is an empty list."""

    enum: type[FileEnum]
    separator: str = ","

    def decode(self, text: str, schema: "Schema") -> list[FileEnum | Unrecognized]:
        if not text:
            return []
        return [self.enum.from_file(item) for item in text.split(self.separator)]

    def encode(
        self, value: list[FileEnum | Unrecognized], schema: "Schema", *, verbatim: bool = True
    ) -> str:
        return self.separator.join(item.to_file() for item in value)

    def check(self, value: Any) -> str | None:
        if not isinstance(value, list):
            return f"expected a list, got {type(value).__name__}"
        item_kind = Choice(self.enum)
        for item in value:
            if isinstance(item, Unrecognized) and (
                not item.raw or self.separator in item.raw
            ):
                return f"{item.raw!r} cannot be written as a list item"
            problem = item_kind.check(item)
            if problem is not None:
                return problem
        return None


@dataclass(frozen=True)
class Switch:
    """On/off switch. Babylon writes switches as the numbers 1 and 0."""

    def decode(self, text: str, schema: "Schema") -> bool:
        return abs(_decode_number(text) - 1.0) < 1e-7

    def encode(self, value: bool, schema: "Schema", *, verbatim: bool = True) -> str:
        return "1" if value else "0"

    def check(self, value: Any) -> str | None:
        if not isinstance(value, bool):
            return f"expected bool, got {type(value).__name__}"
        return None


@dataclass(frozen=True)
class Integer:
    """Whole number. Babylon may write these with a fraction, which is dropped."""

    def decode(self, text: str, schema: "Schema") -> int:
        if _INTEGER.fullmatch(text):
            try:
                return int(text)
            except ValueError:
                # Past the interpreter's digit limit
                raise NumericFormat(text, "Integer is too long") from None
        return int(_decode_number(text))

    def encode(self, value: int, schema: "Schema", *, verbatim: bool = True) -> str:
        return str(value)

    def check(self, value: Any) -> str | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return f"expected int, got {type(value).__name__}"
        return None


SWITCH = Switch()
INTEGER = Integer()

_ENVELOPE_KINDS: dict[str, FieldKind] = {
    "attack": Unit(Time),
    "attack_curve": Unit(Ratio),
    "decay": Unit(Time),
    "decay_curve": Unit(Ratio),
    "sustain": Unit(Percent),
    "release": Unit(Time),
    "release_curve": Unit(Ratio),
    "curve": Unit(Ratio),
}

GROUP_FIELDS: dict[type, dict[str, FieldKind]] = {
    Voice: {
        "master_volume": Unit(Gain),
        "polyphony": INTEGER,
        "portamento_mode": Choice(PortamentoMode),
        "play_mode": Choice(PlayMode),
        "glide": Unit(Time),
        "velocity_curve": Unit(Ratio),
        "key_track_curve": Unit(Ratio),
        "pitch_bend_range": INTEGER,
        "transpose": INTEGER,
        "limiter": SWITCH,
        "hard_sync": SWITCH,
    },
    Tuning: {
        "scale": INTEGER,
        "custom_scale": INTEGER,
        "root_key": INTEGER,
        **{f.name: Unit(Ratio) for f in fields(Tuning) if f.name.startswith("tune_")},
    },
    Oscillator: {
        "enabled": SWITCH,
        "waveform": Choice(Waveform),
        "invert": SWITCH,
        "reverse": SWITCH,
        "free_run": SWITCH,
        "octave": INTEGER,
        "semitone": INTEGER,
        "fine": INTEGER,
        "pitch": Unit(Ratio),
        "cutoff": Unit(Frequency),
        "phase": Unit(Angle),
        "pan": Unit(Ratio),
        "volume": Unit(Gain),
        "unison_voices": INTEGER,
        "unison_detune": Unit(Ratio),
        "unison_spread": Unit(Percent),
        "unison_mix": Unit(Percent),
        "am_enabled": SWITCH,
        "am_amount": Unit(Ratio),
        "fm_enabled": SWITCH,
        "fm_amount": Unit(Ratio),
        "rm_enabled": SWITCH,
        "rm_amount": Unit(Ratio),
    },
    Noise: {
        "enabled": SWITCH,
        "width": Unit(Percent),
        "pan": Unit(Ratio),
        "volume": Unit(Gain),
    },
    Filter: {
        "enabled": SWITCH,
        "mode": Choice(FilterMode),
        "cutoff": Unit(Frequency),
        "resonance": Unit(Ratio),
        "key_tracking": Unit(Percent),
        "envelope_amount": Unit(Percent),
        "drive_enabled": SWITCH,
        "drive_mode": Choice(FilterDrive),
        "drive": Unit(Ratio),
    },
    Envelope: _ENVELOPE_KINDS,
    ModEnvelope: {"enabled": SWITCH, **_ENVELOPE_KINDS},
    Lfo: {
        "enabled": SWITCH,
        "shape": Choice(Waveform),
        "rate": Unit(Frequency),
        "phase": Unit(Angle),
        "sync": SWITCH,
        "invert": SWITCH,
        "reverse": SWITCH,
        "mono": SWITCH,
        "free_run": SWITCH,
    },
    Vibrato: {
        "enabled": SWITCH,
        "rate": Unit(Frequency),
        "delay": Unit(Time),
        "attack": Unit(Time),
    },
    ModMatrixSlot: {
        "source": Choice(ModSource),
        "destination": Choice(ModDestination),
        "amount": Unit(Percent),
    },
    EffectChain: {"order": ChoiceList(EffectType)},
    Chorus: {
        "enabled": SWITCH,
        "depth": Unit(Ratio),
        "pre_delay": Unit(Time),
        "ratio": Unit(Ratio),
        "mix": Unit(Percent),
    },
    Delay: {
        "enabled": SWITCH,
        "ping_pong": SWITCH,
        "sync": SWITCH,
        "time": Unit(Time),
        "feedback": Unit(Percent),
        "filter": Unit(Ratio),
        "mix": Unit(Percent),
    },
    Distortion: {"enabled": SWITCH, "gain": Unit(Gain)},
    Equalizer: {
        "enabled": SWITCH,
        "low": Unit(Gain),
        "mid": Unit(Gain),
        "high": Unit(Gain),
    },
    EffectFilter: {
        "enabled": SWITCH,
        "mode": Choice(FilterMode),
        "cutoff": Unit(Frequency),
        "resonance": Unit(Ratio),
    },
    LoFi: {
        "enabled": SWITCH,
        "bit_depth": INTEGER,
        "sample_rate": Unit(Frequency),
        "mix": Unit(Percent),
    },
    Reverb: {
        "enabled": SWITCH,
        "room": Unit(Ratio),
        "damping": Unit(Ratio),
        "filter": Unit(Ratio),
        "width": Unit(Percent),
        "mix": Unit(Percent),
    },
}
"""The kind of every field of every section, in the order they are written."""


@dataclass(frozen=True)
class FieldRule:
    attribute: str
    kind: FieldKind


@dataclass(frozen=True)
class SectionRule:
    """Where a section lives in the document and how its fields are named."""

    element: str
    group: type
    fields: Mapping[str, FieldRule]
    repeated: bool = False
    container: str | None = None


@dataclass(frozen=True)
class Schema:
    """Everything the codec needs to know about one file format revision."""

    version: str
    root: str
    metadata: Mapping[str, str]
    """Preset metadata attribute -> root element attribute."""

    sections: Mapping[str, SectionRule]
    """Preset attribute -> section rule, in document order."""

    units: Mapping[type[Quantity], str]
    """On-file unit of each dimension."""

    blank_description: str | None = None
    """Description the synthesizer writes when the user left it empty."""


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _section(
    group: type,
    element: str,
    *,
    repeated: bool = False,
    container: str | None = None,
    rename: Mapping[str, str] | None = None,
) -> SectionRule:
    """Build a section rule; attributes are the camelCased field names unless renamed."""
    rename = rename or {}
    return SectionRule(
        element=element,
        group=group,
        fields={
            name: FieldRule(rename.get(name, _camel(name)), kind)
            for name, kind in GROUP_FIELDS[group].items()
        },
        repeated=repeated,
        container=container,
    )


_UNITS_1_0: dict[type[Quantity], str] = {
    Frequency: "Hz",
    Time: "ms",
    Gain: "dB",
    Ratio: "",
    Angle: "deg",
    Percent: "%",
}

SCHEMAS: dict[str, Schema] = {
    "1.0": Schema(
        version="1.0",
        root="BabylonPreset",
        metadata={
            "name": "name",
            "author": "author",
            "category": "category",
            "description": "info",
        },
        sections={
            "voice": _section(Voice, "Voice"),
            "tuning": _section(Tuning, "Tuning"),
            "oscillators": _section(Oscillator, "Oscillator", repeated=True),
            "noise": _section(Noise, "Noise"),
            "filter": _section(Filter, "Filter"),
            "amp_envelope": _section(Envelope, "AmpEnvelope"),
            "filter_envelope": _section(Envelope, "FilterEnvelope"),
            "mod_envelopes": _section(ModEnvelope, "ModEnvelope", repeated=True),
            "lfos": _section(Lfo, "LFO", repeated=True),
            "vibrato": _section(Vibrato, "Vibrato"),
            "mod_matrix": _section(ModMatrixSlot, "ModSlot", repeated=True, container="ModMatrix"),
            "effect_chain": _section(EffectChain, "EffectChain"),
            "chorus": _section(Chorus, "Chorus"),
            "delay": _section(Delay, "Delay"),
            "distortion": _section(Distortion, "Distortion"),
            "equalizer": _section(Equalizer, "Equalizer"),
            "effect_filter": _section(EffectFilter, "FXFilter"),
            "lofi": _section(LoFi, "LoFi"),
            "reverb": _section(Reverb, "Reverb"),
        },
        units=_UNITS_1_0,
        blank_description="Preset Info",
    ),
    "2.0": Schema(
        version="2.0",
        root="Preset",
        metadata={
            "name": "name",
            "author": "author",
            "category": "category",
            "description": "description",
        },
        sections={
            "voice": _section(Voice, "Global", rename={"master_volume": "volume"}),
            "tuning": _section(Tuning, "Tuning", rename={"root_key": "root"}),
            "oscillators": _section(
                Oscillator,
                "Osc",
                repeated=True,
                container="Oscillators",
                rename={
                    "waveform": "wave",
                    "unison_voices": "voices",
                    "unison_detune": "detune",
                    "unison_spread": "spread",
                    "unison_mix": "uniMix",
                },
            ),
            "noise": _section(Noise, "Noise"),
            "filter": _section(Filter, "VCF", rename={"cutoff": "freq", "resonance": "res"}),
            "amp_envelope": _section(Envelope, "AmpEnv"),
            "filter_envelope": _section(Envelope, "FilterEnv"),
            "mod_envelopes": _section(
                ModEnvelope, "ModEnv", repeated=True, container="ModEnvelopes"
            ),
            "lfos": _section(Lfo, "Lfo", repeated=True, container="Lfos", rename={"rate": "freq"}),
            "vibrato": _section(Vibrato, "Vibrato", rename={"rate": "freq"}),
            "mod_matrix": _section(
                ModMatrixSlot,
                "Route",
                repeated=True,
                container="Matrix",
                rename={"destination": "target"},
            ),
            "effect_chain": _section(EffectChain, "Chain", container="Effects"),
            "chorus": _section(Chorus, "Chorus", container="Effects"),
            "delay": _section(Delay, "Delay", container="Effects"),
            "distortion": _section(Distortion, "Distortion", container="Effects"),
            "equalizer": _section(Equalizer, "EQ", container="Effects"),
            "effect_filter": _section(
                EffectFilter, "Filter", container="Effects", rename={"cutoff": "freq"}
            ),
            "lofi": _section(LoFi, "LoFi", container="Effects"),
            "reverb": _section(Reverb, "Reverb", container="Effects"),
        },
        units={**_UNITS_1_0, Time: "s"},
    ),
}
"""Supported schema versions, oldest first."""


def resolve(version: str | None) -> Schema:
    """Look up the schema for a version.

    Raises:
        UnsupportedVersion: If the version is None or unknown.
    """
    if version is None or version not in SCHEMAS:
        raise UnsupportedVersion(version)
    return SCHEMAS[version]


def group_field_names(group: type) -> list[str]:
    """Names of the dataclass fields of a section type."""
    return [f.name for f in fields(group)]
