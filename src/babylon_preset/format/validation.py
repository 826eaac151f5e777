"""Validation of in-memory presets before they are written.

Decoding guarantees a well-formed `Preset`, but presets built or edited in
code can hold anything. `validate_preset` checks that every field has the
type its section expects and that the strings can be stored in XML, which is
exactly what the encoder needs to succeed.
"""

import dataclasses
from dataclasses import dataclass

from babylon_preset.format.model import (
    LFO_SLOTS,
    MOD_ENVELOPE_SLOTS,
    MOD_MATRIX_SLOTS,
    OSCILLATOR_SLOTS,
    Preset,
)
from babylon_preset.format.schema import SCHEMAS, xml_problem
from babylon_preset.format.types import Unrecognized
from babylon_preset.format.units import Quantity

# Slot counts of the synthesizer; more are written but Babylon ignores them
_SLOT_LIMITS = {
    "oscillators": OSCILLATOR_SLOTS,
    "lfos": LFO_SLOTS,
    "mod_envelopes": MOD_ENVELOPE_SLOTS,
    "mod_matrix": MOD_MATRIX_SLOTS,
}


class ValidationError(Exception):
    """Error during preset validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


@dataclass
class ValidationResult:
    """Result of validation with optional warnings."""

    valid: bool
    errors: list[str]
    warnings: list[str]

    @classmethod
    def success(cls, warnings: list[str] | None = None) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(valid=True, errors=[], warnings=warnings or [])

    @classmethod
    def failure(cls, errors: list[str], warnings: list[str] | None = None) -> "ValidationResult":
        """Create a failed validation result."""
        return cls(valid=False, errors=errors, warnings=warnings or [])


def validate_preset(preset: Preset, version: str | None = None) -> ValidationResult:
    """Validate a preset for encoding.

    Errors (encoding would fail or write a file that cannot be read back):
    - the schema version is not supported
    - a section is missing or has the wrong type
    - a field has the wrong type or unit dimension, or is not finite
    - a string cannot be stored in XML

    Warnings (the file is written but may surprise the user):
    - unrecognized enumeration values
    - an empty preset name
    - more slots than the synthesizer has
    - a description that reads back as "no description"

    Args:
        preset: The preset to validate.
        version: Schema version it will be written as. Defaults to the
            preset's own.

    Returns:
        ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    version = version or preset.schema_version
    schema = SCHEMAS.get(version)
    if schema is None:
        errors.append(f"Unsupported schema version {version!r}")
        return ValidationResult.failure(errors, warnings)

    # Metadata
    if not isinstance(preset.name, str):
        errors.append(f"name must be a string, got {type(preset.name).__name__}")
    elif not preset.name.strip():
        warnings.append("name is empty")
    for name in schema.metadata:
        value = getattr(preset, name)
        if value is None:
            continue
        if not isinstance(value, str):
            if name != "name":
                errors.append(f"{name} must be a string, got {type(value).__name__}")
            continue
        problem = xml_problem(value)
        if problem is not None:
            errors.append(f"{name} {problem}")
    if preset.description is not None and preset.description == schema.blank_description:
        warnings.append(
            f"description {preset.description!r} is read back as no description "
            f"in schema version {schema.version}"
        )

    # Sections
    for section, rule in schema.sections.items():
        value = getattr(preset, section)
        if rule.repeated:
            if not isinstance(value, list):
                errors.append(f"{section} must be a list, got {type(value).__name__}")
                continue
            limit = _SLOT_LIMITS.get(section)
            if limit is not None and len(value) > limit:
                warnings.append(f"{section} has {len(value)} slots, Babylon uses only {limit}")
            groups = list(enumerate(value))
        else:
            groups = [(None, value)]

        for slot, group in groups:
            where = section if slot is None else f"{section}[{slot}]"
            if type(group) is not rule.group:
                errors.append(
                    f"{where} must be {rule.group.__name__}, got {type(group).__name__}"
                )
                continue
            for name, field_rule in rule.fields.items():
                field_value = getattr(group, name)
                problem = field_rule.kind.check(field_value)
                if problem is not None:
                    errors.append(f"{where}.{name}: {problem}")
                    continue
                for item in field_value if isinstance(field_value, list) else [field_value]:
                    if isinstance(item, Unrecognized):
                        warnings.append(f"{where}.{name}: unrecognized value {item.raw!r}")

    if errors:
        return ValidationResult.failure(errors, warnings)
    return ValidationResult.success(warnings)


def quantity_fields(preset: Preset) -> list[tuple[str, Quantity]]:
    """List every unit-bearing field as ``(path, value)``."""
    found = []
    for section, slot, group in preset.groups():
        where = section if slot is None else f"{section}[{slot}]"
        for f in dataclasses.fields(group):
            value = getattr(group, f.name)
            if isinstance(value, Quantity):
                found.append((f"{where}.{f.name}", value))
    return found
