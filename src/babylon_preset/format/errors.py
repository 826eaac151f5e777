"""Errors raised while decoding Babylon preset documents.

Every decode failure is a `DecodeError`. The codec annotates errors with the
section, slot and attribute being decoded when the error passes through it,
so the message can be shown to a user as-is.
"""


class PresetError(Exception):
    """Base class for all preset errors."""


class DecodeError(PresetError):
    """A preset document could not be decoded."""

    def __init__(
        self,
        message: str,
        *,
        section: str | None = None,
        slot: int | None = None,
        field: str | None = None,
        text: str | None = None,
    ) -> None:
        self.message = message
        self.section = section
        self.slot = slot
        self.field = field
        self.text = text
        super().__init__(message)

    def locate(
        self,
        section: str | None = None,
        slot: int | None = None,
        field: str | None = None,
    ) -> "DecodeError":
        """Record where the error happened, keeping what is already known."""
        if self.section is None:
            self.section = section
        if self.slot is None:
            self.slot = slot
        if self.field is None:
            self.field = field
        return self

    @property
    def location(self) -> str | None:
        """Human-readable location such as ``<Oscillator>[2] @waveform``."""
        parts = []
        if self.section is not None:
            parts.append(f"<{self.section}>")
            if self.slot is not None:
                parts[-1] += f"[{self.slot + 1}]"
        if self.field is not None:
            parts.append(f"@{self.field}")
        return " ".join(parts) or None

    def __str__(self) -> str:
        message = self.message
        location = self.location
        if location is not None:
            message = f"{location}: {message}"
        if self.text is not None:
            message = f"{message} (got {self.text!r})"
        return message


class UnsupportedVersion(DecodeError):
    """The schema version is absent or has no entry in the schema table."""

    def __init__(self, version: str | None) -> None:
        self.version = version
        if version is None:
            message = "Preset has no schema version"
        else:
            message = f"Unsupported schema version {version!r}"
        super().__init__(message)


class MissingSection(DecodeError):
    """A required, non-repeatable section element is absent."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required section <{name}>")


class MissingField(DecodeError):
    """A section element lacks one of its attributes."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing attribute {name!r}", field=name)


class UnitMismatch(DecodeError):
    """An explicit unit conflicts with the dimension the field expects."""

    def __init__(self, text: str, unit: str, expected: str, actual: str | None = None) -> None:
        self.unit = unit
        self.expected = expected
        self.actual = actual
        if actual is None:
            message = f"Unknown unit {unit!r}, expected a {expected.lower()} unit"
        else:
            message = f"Unit {unit!r} is a {actual.lower()} unit, expected a {expected.lower()} unit"
        super().__init__(message, text=text)


class NumericFormat(DecodeError):
    """A numeric literal is malformed, infinite or NaN."""

    def __init__(self, text: str, reason: str = "Malformed number") -> None:
        super().__init__(reason, text=text)


class StructuralError(DecodeError):
    """The document is not well-formed XML or not a preset document at all."""
