"""Preset file writer.

This module provides functionality to write Babylon presets as ``.bab``
files or as in-memory document text.
"""

from pathlib import Path

from babylon_preset.format.codec import encode
from babylon_preset.format.document import serialize
from babylon_preset.format.model import Preset
from babylon_preset.format.validation import ValidationError, validate_preset


def dumps(preset: Preset, *, version: str | None = None, validate: bool = True) -> str:
    """Encode a preset as document text.

    Args:
        preset: The preset to encode.
        version: Schema version to write. Defaults to the preset's own.
        validate: Whether to validate the preset before encoding.

    Returns:
        The document text, starting with an XML declaration.

    Raises:
        ValidationError: If validation fails and validate=True.
        UnsupportedVersion: If the version is not supported.
    """
    if validate:
        result = validate_preset(preset, version)
        if not result.valid:
            raise ValidationError(f"Preset validation failed: {result.errors}")

    return serialize(encode(preset, version))


def save_preset(
    path: Path | str,
    preset: Preset,
    *,
    version: str | None = None,
    validate: bool = True,
) -> None:
    """Save a preset to a file.

    Args:
        path: Output file path. Missing parent directories are created.
        preset: The preset to save.
        version: Schema version to write. Defaults to the preset's own.
        validate: Whether to validate the preset before writing.

    Raises:
        ValidationError: If validation fails and validate=True.
        UnsupportedVersion: If the version is not supported.
    """
    path = Path(path)
    text = dumps(preset, version=version, validate=validate)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
