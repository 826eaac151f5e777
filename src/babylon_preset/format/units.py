"""Unit-bearing parameter values.

Babylon stores most parameters as plain numbers with an implied unit. The
preset format writes them with an explicit unit suffix (``"1200 Hz"``,
``"150 ms"``) and these types keep that unit attached to the magnitude, so
values of different physical dimensions can never be mixed by accident.

Each dimension is a `Quantity` subclass with a table of accepted units and
their factor to the dimension's base unit:

    +-----------+--------------------+------+
    | Dimension | Units              | Base |
    +-----------+--------------------+------+
    | Frequency | Hz, kHz            | Hz   |
    | Time      | ms, s              | s    |
    | Gain      | dB                 | dB   |
    | Ratio     | (no suffix)        |      |
    | Angle     | deg, rad           | deg  |
    | Percent   | %                  | %    |
    +-----------+--------------------+------+
"""

import functools
import math
import re
from dataclasses import dataclass, field
from typing import ClassVar, TypeGuard, TypeVar

import numpy as np

from babylon_preset.format.errors import NumericFormat, UnitMismatch

# Relative tolerance for equality after unit conversion
REL_TOLERANCE = 1e-9

# A locale-invariant literal with an optional unit suffix. Units start with a
# letter or are "%", so "1,5" and "1.2.3" never parse.
_LITERAL = re.compile(
    r"(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*(?P<unit>[^\W\d_]\w*|%)?"
)

Q = TypeVar("Q", bound="Quantity")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Quantity:
    """A magnitude tagged with a physical dimension.

    Values are immutable. Arithmetic and comparisons are only defined between
    values of the same dimension; mixing dimensions raises ``TypeError``.
    Equality converts both sides to the base unit, so ``Time(2, "ms")``
    equals ``Time(0.002, "s")``.
    """

    dimension: ClassVar[str] = ""
    base_unit: ClassVar[str] = ""
    units: ClassVar[dict[str, float]] = {}

    magnitude: float
    """The number as written, in `unit`."""

    unit: str = None  # type: ignore[assignment]
    """One of the dimension's units; defaults to the base unit."""

    source: str | None = field(default=None, repr=False, kw_only=True)
    """Text this value was decoded from, re-emitted verbatim when possible."""

    def __post_init__(self) -> None:
        unit = self.base_unit if self.unit is None else self.unit
        if unit not in self.units:
            raise ValueError(f"{unit!r} is not a {self.dimension.lower()} unit")
        object.__setattr__(self, "unit", unit)
        object.__setattr__(self, "magnitude", float(self.magnitude))

    @property
    def base(self) -> float:
        """The magnitude converted to the base unit."""
        return self.magnitude * self.units[self.unit]

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.magnitude)

    def to(self, unit: str) -> float:
        """Return the magnitude expressed in another unit of this dimension."""
        if unit == self.unit:
            return self.magnitude
        try:
            factor = self.units[unit]
        except KeyError:
            raise ValueError(f"{unit!r} is not a {self.dimension.lower()} unit") from None
        return self.base / factor

    def convert(self: Q, unit: str) -> Q:
        """Return an equal value expressed in another unit."""
        return type(self)(self.to(unit), unit)

    def _same_dimension(self, other: object) -> TypeGuard["Quantity"]:
        return isinstance(other, Quantity) and type(other) is type(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._same_dimension(other):
            return False
        return math.isclose(self.base, other.base, rel_tol=REL_TOLERANCE)

    def __hash__(self) -> int:
        # Equal values may differ in unit and in their last digits
        return hash(type(self))

    def __lt__(self, other: object) -> bool:
        if not self._same_dimension(other):
            return NotImplemented
        return self.base < other.base and self != other

    def __add__(self: Q, other: object) -> Q:
        if not self._same_dimension(other):
            return NotImplemented
        return type(self)(self.magnitude + other.to(self.unit), self.unit)

    def __sub__(self: Q, other: object) -> Q:
        if not self._same_dimension(other):
            return NotImplemented
        return type(self)(self.magnitude - other.to(self.unit), self.unit)

    def __neg__(self: Q) -> Q:
        return type(self)(-self.magnitude, self.unit)

    def __mul__(self: Q, factor: object) -> Q:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return type(self)(self.magnitude * factor, self.unit)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Quantity | float":
        if self._same_dimension(other):
            return self.base / other.base
        if isinstance(other, bool) or not isinstance(other, (int, float)):
            return NotImplemented
        return type(self)(self.magnitude / other, self.unit)

    def __str__(self) -> str:
        return f"{format_number(self.magnitude)} {self.unit}".rstrip()


class Frequency(Quantity):
    """A frequency such as a cutoff or LFO rate."""

    dimension = "Frequency"
    base_unit = "Hz"
    units = {"Hz": 1.0, "kHz": 1000.0}

    def to_period(self) -> "Time":
        """Length of one cycle."""
        return Time(1.0 / self.base, "s")


class Time(Quantity):
    """A duration such as an envelope stage or delay time."""

    dimension = "Time"
    base_unit = "s"
    units = {"ms": 0.001, "s": 1.0}

    def to_frequency(self) -> Frequency:
        """Rate of a cycle lasting this long."""
        return Frequency(1.0 / self.base, "Hz")


class Gain(Quantity):
    """A level in decibels."""

    dimension = "Gain"
    base_unit = "dB"
    units = {"dB": 1.0}

    def to_amplitude(self) -> float:
        """Linear amplitude factor (0 dB is 1.0)."""
        return 10.0 ** (self.base / 20.0)

    @classmethod
    def from_amplitude(cls, amplitude: float) -> "Gain":
        if amplitude <= 0.0:
            raise ValueError(f"Amplitude must be positive, got {amplitude}")
        return cls(20.0 * math.log10(amplitude), "dB")


class Ratio(Quantity):
    """A dimensionless amount, usually normalized to 0..1."""

    dimension = "Ratio"
    base_unit = ""
    units = {"": 1.0}

    def to_percent(self) -> "Percent":
        return Percent(self.base * 100.0, "%")


class Angle(Quantity):
    """A phase angle."""

    dimension = "Angle"
    base_unit = "deg"
    units = {"deg": 1.0, "rad": 180.0 / math.pi}


class Percent(Quantity):
    dimension = "Percent"
    base_unit = "%"
    units = {"%": 1.0}

    def to_ratio(self) -> Ratio:
        return Ratio(self.base / 100.0)


DIMENSIONS: tuple[type[Quantity], ...] = (Frequency, Time, Gain, Ratio, Angle, Percent)


def _dimension_of(unit: str) -> str | None:
    for kind in DIMENSIONS:
        if unit in kind.units:
            return kind.dimension
    return None


def format_number(value: float) -> str:
    """Render a float as the shortest exact positional decimal.

    Never uses scientific notation and never loses precision, so decoding
    the text gives back the identical float.
    """
    if value == 0.0:
        # Also folds -0.0
        return "0"
    return str(np.format_float_positional(value, unique=True, trim="-"))


def _split(text: str) -> tuple[str, str] | None:
    match = _LITERAL.fullmatch(text.strip())
    if match is None:
        return None
    return match["number"], match["unit"] or ""


def decode(text: str, kind: type[Q], unit: str | None = None) -> Q:
    """Decode a unit-bearing literal such as ``"0.5 kHz"``.

    Args:
        text: The literal as written in the document.
        kind: The dimension the field expects.
        unit: Unit assumed when the literal has no suffix. Defaults to the
            dimension's base unit.

    Returns:
        A value of type `kind` that remembers `text`.

    Raises:
        NumericFormat: If the number is malformed, infinite or NaN.
        UnitMismatch: If the suffix is not a unit of `kind`.
    """
    parts = _split(text)
    if parts is None:
        raise NumericFormat(text)
    number, suffix = parts

    magnitude = float(number)
    if not math.isfinite(magnitude):
        raise NumericFormat(text, "Number is out of range")

    if suffix:
        if suffix not in kind.units:
            raise UnitMismatch(text, suffix, kind.dimension, _dimension_of(suffix))
        unit = suffix
    elif unit is None:
        unit = kind.base_unit

    return kind(magnitude, unit, source=text)


def encode(value: Quantity, unit: str | None = None, *, verbatim: bool = True) -> str:
    """Encode a value in the given on-file unit.

    With `verbatim`, a value still holding what it was decoded from is written
    back as the original text. A literal without a suffix is only reused when
    `unit` is the unit it was read in.
    """
    if unit is None:
        unit = value.base_unit

    if verbatim and value.source is not None:
        parts = _split(value.source)
        if parts is not None:
            number, suffix = parts
            if (suffix or unit) == value.unit and float(number) == value.magnitude:
                return value.source

    return f"{format_number(value.to(unit))} {unit}".rstrip()
