"""The Babylon preset document model.

A `Preset` is plain data: metadata plus one dataclass per synthesizer
section. Sections Babylon has several of (oscillators, LFOs, modulation
envelopes, modulation matrix slots) are lists whose order is the slot
index. Equality is structural.
"""

from collections.abc import Iterator
from dataclasses import dataclass, fields
from typing import TypeVar

from babylon_preset.format.types import (
    DEFAULT_EFFECT_ORDER,
    EffectType,
    FilterDrive,
    FilterMode,
    ModDestination,
    ModSource,
    PlayMode,
    PortamentoMode,
    Unrecognized,
    Waveform,
)
from babylon_preset.format.units import Angle, Frequency, Gain, Percent, Ratio, Time

E = TypeVar("E", bound="Envelope")

CURRENT_SCHEMA_VERSION = "2.0"
"""Schema version written when no other is requested."""

# Slot counts of the synthesizer itself
OSCILLATOR_SLOTS = 3
LFO_SLOTS = 2
MOD_ENVELOPE_SLOTS = 2
MOD_MATRIX_SLOTS = 8


@dataclass
class Voice:
    """Global voice settings."""

    master_volume: Gain
    polyphony: int
    portamento_mode: PortamentoMode | Unrecognized
    play_mode: PlayMode | Unrecognized
    glide: Time
    velocity_curve: Ratio
    key_track_curve: Ratio

    pitch_bend_range: int
    """Semitones."""

    transpose: int
    """Semitones."""

    limiter: bool
    """Limit the output to 0 dB using soft clipping."""

    hard_sync: bool
    """Oscillator 2 resets whenever oscillator 1 does."""


NOTE_NAMES = ("A", "A#", "B", "C", "C#", "D", "D#", "E", "F", "F#", "G", "G#")


@dataclass
class Tuning:
    """Scale selection and per-note microtuning.

    The twelve offsets detune each note of the octave, starting at A.
    """

    scale: int
    custom_scale: int

    root_key: int
    """Note the scale starts on, 0 being A."""

    tune_a: Ratio
    tune_a_sharp: Ratio
    tune_b: Ratio
    tune_c: Ratio
    tune_c_sharp: Ratio
    tune_d: Ratio
    tune_d_sharp: Ratio
    tune_e: Ratio
    tune_f: Ratio
    tune_f_sharp: Ratio
    tune_g: Ratio
    tune_g_sharp: Ratio

    def offsets(self) -> dict[str, Ratio]:
        """Offset of every note, keyed by note name."""
        values = [getattr(self, f.name) for f in fields(self) if f.name.startswith("tune_")]
        return dict(zip(NOTE_NAMES, values))


@dataclass
class Oscillator:
    """One oscillator slot.

    The third oscillator is the carrier the first two route into, so some
    of its modulation settings have no audible effect.
    """

    enabled: bool
    waveform: Waveform | Unrecognized
    invert: bool
    reverse: bool
    free_run: bool

    octave: int
    semitone: int

    fine: int
    """Cents."""

    pitch: Ratio

    cutoff: Frequency
    """Cutoff of the oscillator's tone filter."""

    phase: Angle

    pan: Ratio
    """0.0 is hard left, 0.5 center and 1.0 hard right."""

    volume: Gain

    unison_voices: int
    """Number of unison voices; the first voice is the original signal."""

    unison_detune: Ratio
    unison_spread: Percent
    unison_mix: Percent
    am_enabled: bool
    am_amount: Ratio
    fm_enabled: bool
    fm_amount: Ratio
    rm_enabled: bool
    rm_amount: Ratio


@dataclass
class Noise:
    """White noise generator."""

    enabled: bool
    width: Percent
    pan: Ratio
    volume: Gain


@dataclass
class Filter:
    enabled: bool
    mode: FilterMode | Unrecognized
    cutoff: Frequency
    resonance: Ratio
    key_tracking: Percent

    envelope_amount: Percent
    """How much the filter envelope moves the cutoff."""

    drive_enabled: bool
    drive_mode: FilterDrive | Unrecognized
    drive: Ratio


@dataclass
class Envelope:
    """ADSR envelope. Curves are Babylon's slope values, 0.0 being linear."""

    attack: Time
    attack_curve: Ratio
    decay: Time
    decay_curve: Ratio
    sustain: Percent
    release: Time
    release_curve: Ratio

    curve: Ratio
    """Overall shape of the envelope."""


@dataclass
class ModEnvelope(Envelope):
    """An envelope that is only a modulation source."""

    enabled: bool


@dataclass
class Lfo:
    enabled: bool
    shape: Waveform | Unrecognized
    rate: Frequency
    phase: Angle

    sync: bool
    """Lock the rate to the host tempo."""

    invert: bool
    reverse: bool

    mono: bool
    """One LFO shared by all voices instead of one per voice."""

    free_run: bool


@dataclass
class Vibrato:
    enabled: bool
    rate: Frequency
    delay: Time
    attack: Time


@dataclass
class ModMatrixSlot:
    """One routing in the modulation matrix."""

    source: ModSource | Unrecognized
    destination: ModDestination | Unrecognized
    amount: Percent


@dataclass
class EffectChain:
    order: list[EffectType | Unrecognized]
    """Processing order of the effects, first to last."""


@dataclass
class Chorus:
    enabled: bool
    depth: Ratio
    pre_delay: Time
    ratio: Ratio
    mix: Percent


@dataclass
class Delay:
    enabled: bool
    ping_pong: bool
    sync: bool
    time: Time
    feedback: Percent

    filter: Ratio
    """Low-pass amount applied to the repeats."""

    mix: Percent


@dataclass
class Distortion:
    enabled: bool
    gain: Gain


@dataclass
class Equalizer:
    enabled: bool
    low: Gain
    mid: Gain
    high: Gain


@dataclass
class EffectFilter:
    """The filter in the effect chain. It has no envelope or drive stage."""

    enabled: bool
    mode: FilterMode | Unrecognized
    cutoff: Frequency
    resonance: Ratio


@dataclass
class LoFi:
    enabled: bool
    bit_depth: int
    sample_rate: Frequency
    mix: Percent


@dataclass
class Reverb:
    enabled: bool
    room: Ratio
    damping: Ratio

    filter: Ratio
    """Low-pass amount applied to the reverb tail."""

    width: Percent
    mix: Percent


ParameterGroup = (
    Voice
    | Tuning
    | Oscillator
    | Noise
    | Filter
    | Envelope
    | ModEnvelope
    | Lfo
    | Vibrato
    | ModMatrixSlot
    | EffectChain
    | Chorus
    | Delay
    | Distortion
    | Equalizer
    | EffectFilter
    | LoFi
    | Reverb
)


@dataclass
class Preset:
    """A complete Babylon patch."""

    name: str
    voice: Voice
    tuning: Tuning
    oscillators: list[Oscillator]
    noise: Noise
    filter: Filter
    amp_envelope: Envelope
    filter_envelope: Envelope
    mod_envelopes: list[ModEnvelope]
    lfos: list[Lfo]
    vibrato: Vibrato
    mod_matrix: list[ModMatrixSlot]
    effect_chain: EffectChain
    chorus: Chorus
    delay: Delay
    distortion: Distortion
    equalizer: Equalizer
    effect_filter: EffectFilter
    lofi: LoFi
    reverb: Reverb

    author: str | None = None
    category: str | None = None

    description: str | None = None
    """Free-form preset info; None when the user never wrote any."""

    schema_version: str = CURRENT_SCHEMA_VERSION
    """File format revision the preset was read from or will be written as."""

    def groups(self) -> Iterator[tuple[str, int | None, ParameterGroup]]:
        """Iterate over ``(section, slot, group)`` in declaration order.

        ``slot`` is the zero-based slot index for repeated sections and None
        for single sections.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, list):
                for slot, group in enumerate(value):
                    yield f.name, slot, group
            elif value is not None and not isinstance(value, str):
                yield f.name, None, value

    def effect_position(self, effect_type: EffectType) -> int | None:
        """Where in the effect chain the effect type occurs."""
        try:
            return self.effect_chain.order.index(effect_type)
        except ValueError:
            return None

    @classmethod
    def init(cls, name: str = "init", schema_version: str = CURRENT_SCHEMA_VERSION) -> "Preset":
        """Create Babylon's factory "init" patch."""
        return cls(
            name=name,
            schema_version=schema_version,
            voice=Voice(
                master_volume=Gain(0.0),
                polyphony=8,
                portamento_mode=PortamentoMode.POLY,
                play_mode=PlayMode.NORMAL,
                glide=Time(30.0, "ms"),
                velocity_curve=Ratio(0.5),
                key_track_curve=Ratio(0.0),
                pitch_bend_range=2,
                transpose=0,
                limiter=False,
                hard_sync=False,
            ),
            tuning=Tuning(
                scale=0,
                custom_scale=0,
                root_key=0,
                **{f.name: Ratio(0.0) for f in fields(Tuning) if f.name.startswith("tune_")},
            ),
            oscillators=[_init_oscillator(enabled=(slot == 0)) for slot in range(OSCILLATOR_SLOTS)],
            noise=Noise(enabled=False, width=Percent(100.0), pan=Ratio(0.5), volume=Gain(-6.0)),
            filter=Filter(
                enabled=False,
                mode=FilterMode.LOW_PASS,
                cutoff=Frequency(20000.0),
                resonance=Ratio(0.0),
                key_tracking=Percent(0.0),
                envelope_amount=Percent(0.0),
                drive_enabled=False,
                drive_mode=FilterDrive.OFF,
                drive=Ratio(0.5),
            ),
            amp_envelope=_init_envelope(Envelope, sustain=90.0, release=4.0),
            filter_envelope=_init_envelope(Envelope, sustain=2.0, release=23.0),
            mod_envelopes=[
                _init_envelope(ModEnvelope, sustain=90.0, attack=1.0, release=1.0, enabled=False)
                for _ in range(MOD_ENVELOPE_SLOTS)
            ],
            lfos=[
                Lfo(
                    enabled=False,
                    shape=Waveform.SINE,
                    rate=Frequency(0.35),
                    phase=Angle(0.0),
                    sync=True,
                    invert=False,
                    reverse=False,
                    mono=False,
                    free_run=False,
                )
                for _ in range(LFO_SLOTS)
            ],
            vibrato=Vibrato(
                enabled=False,
                rate=Frequency(6.1),
                delay=Time(232.0, "ms"),
                attack=Time(232.0, "ms"),
            ),
            mod_matrix=[
                ModMatrixSlot(ModSource.VELOCITY, ModDestination.VOLUME, Percent(100.0))
                if slot == 0
                else ModMatrixSlot(ModSource.NONE, ModDestination.NONE, Percent(0.0))
                for slot in range(MOD_MATRIX_SLOTS)
            ],
            effect_chain=EffectChain(order=list(DEFAULT_EFFECT_ORDER)),
            chorus=Chorus(
                enabled=False,
                depth=Ratio(0.5),
                pre_delay=Time(5.0, "ms"),
                ratio=Ratio(0.5),
                mix=Percent(50.0),
            ),
            delay=Delay(
                enabled=False,
                ping_pong=False,
                sync=True,
                time=Time(170.0, "ms"),
                feedback=Percent(30.0),
                filter=Ratio(0.0),
                mix=Percent(20.0),
            ),
            distortion=Distortion(enabled=False, gain=Gain(2.0)),
            equalizer=Equalizer(enabled=False, low=Gain(0.0), mid=Gain(0.0), high=Gain(0.0)),
            effect_filter=EffectFilter(
                enabled=False,
                mode=FilterMode.LOW_PASS,
                cutoff=Frequency(20000.0),
                resonance=Ratio(0.0),
            ),
            lofi=LoFi(enabled=False, bit_depth=16, sample_rate=Frequency(44100.0), mix=Percent(100.0)),
            reverb=Reverb(
                enabled=False,
                room=Ratio(0.3),
                damping=Ratio(0.3),
                filter=Ratio(0.0),
                width=Percent(80.0),
                mix=Percent(20.0),
            ),
        )


def _init_oscillator(enabled: bool) -> Oscillator:
    return Oscillator(
        enabled=enabled,
        waveform=Waveform.SINE,
        invert=False,
        reverse=False,
        free_run=False,
        octave=0,
        semitone=0,
        fine=0,
        pitch=Ratio(0.0),
        cutoff=Frequency(20000.0),
        phase=Angle(0.0),
        pan=Ratio(0.5),
        volume=Gain(-6.0),
        unison_voices=1,
        unison_detune=Ratio(0.2),
        unison_spread=Percent(50.0),
        unison_mix=Percent(100.0),
        am_enabled=False,
        am_amount=Ratio(0.0),
        fm_enabled=False,
        fm_amount=Ratio(0.0),
        rm_enabled=False,
        rm_amount=Ratio(0.0),
    )


def _init_envelope(
    kind: type[E],
    *,
    sustain: float,
    release: float,
    attack: float = 2.0,
    **extra: bool,
) -> E:
    return kind(
        attack=Time(attack, "ms"),
        attack_curve=Ratio(0.07),
        decay=Time(150.0, "ms"),
        decay_curve=Ratio(0.07),
        sustain=Percent(sustain),
        release=Time(release, "ms"),
        release_curve=Ratio(0.07),
        curve=Ratio(0.14),
        **extra,
    )

