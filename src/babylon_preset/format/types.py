"""Enumerated preset parameters.

Each enumeration's values are the exact strings Babylon writes to preset
files. Readers must handle strings they do not know: newer versions of the
synthesizer add waveforms and routing targets, so `FileEnum.from_file`
returns an `Unrecognized` holding the original string instead of failing,
and writing it back reproduces that string exactly.
"""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Unrecognized:
    """An enumerated value this library does not know."""

    raw: str
    """The string exactly as it appeared in the file."""

    def to_file(self) -> str:
        return self.raw

    def __str__(self) -> str:
        return self.raw


class FileEnum(str, Enum):
    """Closed set of named values with canonical on-file strings."""

    @classmethod
    def from_file(cls, text: str) -> "FileEnum | Unrecognized":
        """Look up a value by its on-file string (case-sensitive)."""
        try:
            return cls(text)
        except ValueError:
            return Unrecognized(text)

    def to_file(self) -> str:
        """Convert to the on-file string."""
        return self.value

    def __str__(self) -> str:
        return self.value


class Waveform(FileEnum):
    """Oscillator and LFO waveforms, in the order of Babylon's wave menu."""

    SINE = "Sine"
    SINE_ROOT_1_5 = "Sine Root 1.5"
    SINE_ROOT_2 = "Sine Root 2"
    SINE_ROOT_3 = "Sine Root 3"
    SINE_ROOT_4 = "Sine Root 4"
    SINE_POWER_1_5 = "Sine Power 1.5"
    SINE_POWER_2 = "Sine Power 2"
    SINE_POWER_3 = "Sine Power 3"
    SINE_POWER_4 = "Sine Power 4"
    SINE_AM_1 = "Sine AM 1"
    SINE_AM_2 = "Sine AM 2"
    SINE_AM_3 = "Sine AM 3"
    SINE_AM_4 = "Sine AM 4"
    SINE_AM_5 = "Sine AM 5"
    SINE_FM_A_1 = "Sine FM A 1"
    SINE_FM_A_2 = "Sine FM A 2"
    SINE_FM_A_3 = "Sine FM A 3"
    SINE_FM_A_4 = "Sine FM A 4"
    SINE_FM_A_5 = "Sine FM A 5"
    SINE_FM_A_6 = "Sine FM A 6"
    SINE_FM_B_1 = "Sine FM B 1"
    SINE_FM_B_2 = "Sine FM B 2"
    SINE_FM_B_3 = "Sine FM B 3"
    SINE_FM_B_4 = "Sine FM B 4"
    SINE_FM_B_5 = "Sine FM B 5"
    SINE_FM_C_1 = "Sine FM C 1"
    SINE_FM_C_2 = "Sine FM C 2"
    SINE_FM_C_3 = "Sine FM C 3"
    SINE_FM_C_4 = "Sine FM C 4"
    SINE_FM_C_5 = "Sine FM C 5"
    SINE_FM_C_6 = "Sine FM C 6"
    SINE_FM_C_7 = "Sine FM C 7"
    SINE_FM_C_8 = "Sine FM C 8"
    SINE_FM_D_1 = "Sine FM D 1"
    SINE_FM_D_2 = "Sine FM D 2"
    SINE_FM_D_3 = "Sine FM D 3"
    SINE_FM_D_4 = "Sine FM D 4"
    SINE_FM_D_5 = "Sine FM D 5"
    SINE_FM_D_6 = "Sine FM D 6"
    SINE_FM_D_7 = "Sine FM D 7"
    SINE_FM_D_8 = "Sine FM D 8"
    SINE_FM_D_9 = "Sine FM D 9"
    SINE_FM_D_10 = "Sine FM D 10"
    SINE_FM_D_11 = "Sine FM D 11"
    SINE_FM_D_12 = "Sine FM D 12"
    SINE_FM_D_13 = "Sine FM D 13"
    SINE_FM_D_14 = "Sine FM D 14"
    SINE_FM_D_15 = "Sine FM D 15"
    SINE_FM_KICK_1 = "Sine FM Kick 1"
    SINE_FM_KICK_2 = "Sine FM Kick 2"
    SINE_FM_KICK_3 = "Sine FM Kick 3"
    SINE_FM_KICK_4 = "Sine FM Kick 4"
    SINE_FM_KICK_5 = "Sine FM Kick 5"
    SINE_FM_KICK_6 = "Sine FM Kick 6"
    SINE_FM_KICK_7 = "Sine FM Kick 7"
    SINE_FM_KICK_8 = "Sine FM Kick 8"
    SINE_FM_KICK_9 = "Sine FM Kick 9"
    SINE_FM_KICK_10 = "Sine FM Kick 10"
    SINE_FM_KICK_11 = "Sine FM Kick 11"
    SINE_FM_KICK_12 = "Sine FM Kick 12"

    TRIANGLE = "Triangle"
    TRIANGLE_ROOT_2 = "Triangle Root 2"
    TRIANGLE_ROOT_3 = "Triangle Root 3"
    TRIANGLE_ROOT_4 = "Triangle Root 4"
    TRIANGLE_ROOT_5 = "Triangle Root 5"

    SAW = "Saw"
    SAW_POWER_1 = "Saw Power 1"
    SAW_POWER_2 = "Saw Power 2"
    SAW_SINE_1 = "Saw Sine 1"
    SAW_SINE_2 = "Saw Sine 2"
    SAW_SINE_3 = "Saw Sine 3"
    SAW_2X = "Saw 2x"

    SQUARE = "Square"
    SQUARE_SMOOTH_1 = "Square Smooth 1"
    SQUARE_SMOOTH_2 = "Square Smooth 2"
    SQUARE_HALF_ROOT = "Square Half Root"
    SQUARE_HALF_ROOT_POWER = "Square Half Root Power"
    SQUARE_POWER = "Square Power"
    SQUARE_DOUBLE_POWER_1 = "Square Double Power 1"
    SQUARE_DOUBLE_POWER_2 = "Square Double Power 2"
    SQUARE_ATTACK_POWER = "Square Attack Power"
    SQUARE_TRISTATE_1 = "Square Tristate 1"
    SQUARE_TRISTATE_2 = "Square Tristate 2"
    SQUARE_TRISTATE_3 = "Square Tristate 3"
    SQUARE_TRISTATE_4 = "Square Tristate 4"
    SQUARE_TRISTATE_5 = "Square Tristate 5"
    SQUARE_TRISTATE_6 = "Square Tristate 6"
    SQUARE_FM_1 = "Square FM 1"
    SQUARE_FM_2 = "Square FM 2"
    SQUARE_FM_3 = "Square FM 3"
    SQUARE_FM_4 = "Square FM 4"
    SQUARE_FM_5 = "Square FM 5"
    SQUARE_FM_6 = "Square FM 6"
    SQUARE_FM_7 = "Square FM 7"
    SQUARE_FM_8 = "Square FM 8"

    PULSE_1 = "Pulse 1"
    PULSE_2 = "Pulse 2"
    PULSE_3 = "Pulse 3"
    PULSE_4 = "Pulse 4"
    PULSE_SQUARE = "Pulse Square"
    PULSE_SQUARE_SMOOTH = "Pulse Square Smooth"
    PULSE_SMOOTH_1 = "Pulse Smooth 1"
    PULSE_SMOOTH_2 = "Pulse Smooth 2"

    VOICE_1 = "Voice 1"
    VOICE_2 = "Voice 2"
    VOICE_3 = "Voice 3"
    VOICE_4 = "Voice 4"
    VOICE_5 = "Voice 5"
    VOICE_6 = "Voice 6"
    VOICE_7 = "Voice 7"
    VOICE_8 = "Voice 8"
    VOICE_9 = "Voice 9"
    VOICE_10 = "Voice 10"
    VOICE_11 = "Voice 11"
    VOICE_12 = "Voice 12"
    VOICE_13 = "Voice 13"
    VOICE_14 = "Voice 14"
    VOICE_15 = "Voice 15"
    VOICE_16 = "Voice 16"
    VOICE_17 = "Voice 17"
    VOICE_18 = "Voice 18"
    VOICE_19 = "Voice 19"
    VOICE_20 = "Voice 20"
    VOICE_21 = "Voice 21"
    VOICE_22 = "Voice 22"
    VOICE_23 = "Voice 23"
    VOICE_24 = "Voice 24"
    VOICE_25 = "Voice 25"
    VOICE_26 = "Voice 26"
    VOICE_27 = "Voice 27"
    VOICE_28 = "Voice 28"
    VOICE_29 = "Voice 29"
    VOICE_30 = "Voice 30"

    FORMANT_A_1 = "Formant A 1"
    FORMANT_A_2 = "Formant A 2"
    FORMANT_A_3 = "Formant A 3"
    FORMANT_A_4 = "Formant A 4"
    FORMANT_A_5 = "Formant A 5"
    FORMANT_A_6 = "Formant A 6"
    FORMANT_A_7 = "Formant A 7"
    FORMANT_A_8 = "Formant A 8"
    FORMANT_B_1 = "Formant B 1"
    FORMANT_B_2 = "Formant B 2"
    FORMANT_B_3 = "Formant B 3"
    FORMANT_B_4 = "Formant B 4"
    FORMANT_B_5 = "Formant B 5"
    FORMANT_B_6 = "Formant B 6"
    FORMANT_B_7 = "Formant B 7"
    FORMANT_B_8 = "Formant B 8"

    SYNTHETIC_VOICE_1 = "Synthetic Voice 1"
    SYNTHETIC_VOICE_2 = "Synthetic Voice 2"
    SYNTHETIC_VOICE_3 = "Synthetic Voice 3"
    SYNTHETIC_VOICE_4 = "Synthetic Voice 4"
    SYNTHETIC_VOICE_5 = "Synthetic Voice 5"
    SYNTHETIC_VOICE_6 = "Synthetic Voice 6"
    SYNTHETIC_VOICE_7 = "Synthetic Voice 7"
    SYNTHETIC_VOICE_8 = "Synthetic Voice 8"
    SYNTHETIC_VOICE_9 = "Synthetic Voice 9"
    SYNTHETIC_VOICE_10 = "Synthetic Voice 10"
    SYNTHETIC_VOICE_11 = "Synthetic Voice 11"
    SYNTHETIC_VOICE_12 = "Synthetic Voice 12"
    SYNTHETIC_VOICE_13 = "Synthetic Voice 13"
    SYNTHETIC_VOICE_14 = "Synthetic Voice 14"
    SYNTHETIC_VOICE_15 = "Synthetic Voice 15"
    SYNTHETIC_VOICE_16 = "Synthetic Voice 16"
    SYNTHETIC_VOICE_17 = "Synthetic Voice 17"
    SYNTHETIC_VOICE_18 = "Synthetic Voice 18"
    SYNTHETIC_VOICE_19 = "Synthetic Voice 19"
    SYNTHETIC_VOICE_20 = "Synthetic Voice 20"
    SYNTHETIC_VOICE_21 = "Synthetic Voice 21"
    SYNTHETIC_VOICE_22 = "Synthetic Voice 22"
    SYNTHETIC_VOICE_23 = "Synthetic Voice 23"
    SYNTHETIC_VOICE_24 = "Synthetic Voice 24"
    SYNTHETIC_VOICE_25 = "Synthetic Voice 25"
    SYNTHETIC_VOICE_26 = "Synthetic Voice 26"
    SYNTHETIC_VOICE_27 = "Synthetic Voice 27"
    SYNTHETIC_VOICE_28 = "Synthetic Voice 28"
    SYNTHETIC_VOICE_29 = "Synthetic Voice 29"

    ORGAN_1 = "Organ 1"
    ORGAN_2 = "Organ 2"
    ORGAN_3 = "Organ 3"
    ORGAN_4 = "Organ 4"
    ORGAN_5 = "Organ 5"
    ORGAN_6 = "Organ 6"
    ORGAN_7 = "Organ 7"
    ORGAN_8 = "Organ 8"
    ORGAN_9 = "Organ 9"
    ORGAN_10 = "Organ 10"
    ORGAN_11 = "Organ 11"
    ORGAN_12 = "Organ 12"
    ORGAN_13 = "Organ 13"
    ORGAN_14 = "Organ 14"
    ORGAN_15 = "Organ 15"
    ORGAN_16 = "Organ 16"
    ORGAN_17 = "Organ 17"
    ORGAN_18 = "Organ 18"
    ORGAN_19 = "Organ 19"
    ORGAN_20 = "Organ 20"
    ORGAN_21 = "Organ 21"
    ORGAN_22 = "Organ 22"
    ORGAN_23 = "Organ 23"

    E_PIANO_1 = "E Piano 1"
    E_PIANO_2 = "E Piano 2"
    E_PIANO_3 = "E Piano 3"
    E_PIANO_4 = "E Piano 4"

    KEY_1 = "Key 1"
    KEY_2 = "Key 2"
    KEY_3 = "Key 3"

    DIST_GUITAR_1 = "Dist Guitar 1"
    DIST_GUITAR_2 = "Dist Guitar 2"

    RHODE = "Rhode"

    BRASS_1 = "Brass 1"
    BRASS_2 = "Brass 2"

    CHIP_1 = "Chip 1"
    CHIP_2 = "Chip 2"
    CHIP_3 = "Chip 3"
    CHIP_4 = "Chip 4"
    CHIP_5 = "Chip 5"
    CHIP_6 = "Chip 6"
    CHIP_7 = "Chip 7"

    GRITTY_1 = "Gritty 1"
    GRITTY_2 = "Gritty 2"
    GRITTY_3 = "Gritty 3"
    GRITTY_4 = "Gritty 4"
    GRITTY_5 = "Gritty 5"
    GRITTY_6 = "Gritty 6"

    DIRTY_1_A = "Dirty 1 A"
    DIRTY_1_B = "Dirty 1 B"
    DIRTY_1_C = "Dirty 1 C"
    DIRTY_2_A = "Dirty 2 A"
    DIRTY_2_B = "Dirty 2 B"
    DIRTY_2_C = "Dirty 2 C"
    DIRTY_3_A = "Dirty 3 A"
    DIRTY_3_B = "Dirty 3 B"
    DIRTY_3_C = "Dirty 3 C"
    DIRTY_4_A = "Dirty 4 A"
    DIRTY_4_B = "Dirty 4 B"
    DIRTY_4_C = "Dirty 4 C"
    DIRTY_5_A = "Dirty 5 A"
    DIRTY_5_B = "Dirty 5 B"
    DIRTY_5_C = "Dirty 5 C"
    DIRTY_6_A = "Dirty 6 A"
    DIRTY_6_B = "Dirty 6 B"
    DIRTY_6_C = "Dirty 6 C"
    DIRTY_7_A = "Dirty 7 A"
    DIRTY_7_B = "Dirty 7 B"
    DIRTY_7_C = "Dirty 7 C"
    DIRTY_8_A = "Dirty 8 A"
    DIRTY_8_B = "Dirty 8 B"
    DIRTY_8_C = "Dirty 8 C"

    GATE_1 = "Gate 1"
    GATE_2 = "Gate 2"
    GATE_3 = "Gate 3"
    GATE_4 = "Gate 4"

    DUCK_1 = "Duck 1"
    DUCK_2 = "Duck 2"
    DUCK_3 = "Duck 3"


# LFOs pick their shape from the oscillator wave table
LfoShape = Waveform


class FilterMode(FileEnum):
    LOW_PASS = "LowPass"
    BAND_PASS = "BandPass"
    HIGH_PASS = "HighPass"
    NOTCH = "Notch"
    PEAK = "Peak"


class FilterDrive(FileEnum):
    """How the filter's drive stage colours the signal."""

    OFF = "Off"
    SATURATION = "Saturation"
    OVERDRIVE = "Overdrive"
    DISTORTION = "Distortion"
    BIT_RATE_REDUCTION = "BitRateReduction"
    SAMPLE_RATE_REDUCTION = "SampleRateReduction"


class ModSource(FileEnum):
    """Modulation matrix sources."""

    NONE = "None"
    LFO_1 = "LFO1"
    LFO_2 = "LFO2"
    MOD_ENVELOPE_1 = "ModEnv1"
    MOD_ENVELOPE_2 = "ModEnv2"
    AMP_ENVELOPE = "AmpEnv"
    FILTER_ENVELOPE = "FilterEnv"
    VELOCITY = "Velocity"
    KEY_TRACK = "KeyTrack"
    MOD_WHEEL = "ModWheel"
    PITCH_BEND = "PitchBend"
    AFTERTOUCH = "Aftertouch"
    VIBRATO = "Vibrato"


class ModDestination(FileEnum):
    """Modulation matrix destinations."""

    NONE = "None"
    VOLUME = "Volume"
    PAN = "Pan"
    PITCH = "Pitch"
    OSC_1_PITCH = "Osc1Pitch"
    OSC_2_PITCH = "Osc2Pitch"
    OSC_3_PITCH = "Osc3Pitch"
    OSC_1_VOLUME = "Osc1Volume"
    OSC_2_VOLUME = "Osc2Volume"
    OSC_3_VOLUME = "Osc3Volume"
    OSC_1_PHASE = "Osc1Phase"
    OSC_2_PHASE = "Osc2Phase"
    OSC_3_PHASE = "Osc3Phase"
    FM_AMOUNT = "FMAmount"
    NOISE_VOLUME = "NoiseVolume"
    FILTER_CUTOFF = "FilterCutoff"
    FILTER_RESONANCE = "FilterResonance"
    FILTER_DRIVE = "FilterDrive"
    LFO_1_RATE = "LFO1Rate"
    LFO_2_RATE = "LFO2Rate"
    VIBRATO_DEPTH = "VibratoDepth"


class PortamentoMode(FileEnum):
    POLY = "Poly"
    LEGATO = "Legato"
    LEGATO_NO_RETRIGGER = "LegatoNoRetrigger"
    PORTA = "Porta"
    PORTA_POLY = "PortaPoly"


class PlayMode(FileEnum):
    """How MIDI notes outside the tuning scale are played."""

    NORMAL = "Normal"
    CHEAT_1 = "Cheat1"
    CHEAT_2 = "Cheat2"

    @property
    def display_name(self) -> str:
        """Human-readable name for this mode."""
        names = {
            PlayMode.NORMAL: "Normal",
            PlayMode.CHEAT_1: "Mute off-key notes",
            PlayMode.CHEAT_2: "Replace off-key notes",
        }
        return names.get(self, "Unknown")


class EffectType(FileEnum):
    """Kinds of effects in the effect chain."""

    DISTORTION = "Distortion"
    LOFI = "LoFi"
    FILTER = "Filter"
    CHORUS = "Chorus"
    EQUALIZER = "Equalizer"
    DELAY = "Delay"
    REVERB = "Reverb"


DEFAULT_EFFECT_ORDER: tuple[EffectType, ...] = tuple(EffectType)
"""Babylon's effect order when the user has not rearranged it."""
