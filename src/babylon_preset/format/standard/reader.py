"""Preset file reader.

This module provides functionality to load Babylon presets from ``.bab``
files or from in-memory document text.
"""

import logging
from pathlib import Path

from babylon_preset.format.codec import decode
from babylon_preset.format.document import parse
from babylon_preset.format.errors import StructuralError
from babylon_preset.format.model import Preset

logger = logging.getLogger(__name__)

# Maximum file size in bytes; factory presets are a few kilobytes
MAX_FILE_SIZE_BYTES = 4 * 1024 * 1024


def loads(data: bytes | str) -> Preset:
    """Decode a preset from document text.

    Args:
        data: The document as bytes (any encoding its declaration names) or
            as text.

    Returns:
        The decoded preset.

    Raises:
        DecodeError: If the document is malformed or is not a supported
            preset document.
    """
    return decode(parse(data))


def load_preset(path: Path | str) -> Preset:
    """Load a preset from a file.

    Args:
        path: Path to the ``.bab`` file.

    Returns:
        The decoded preset.

    Raises:
        OSError: If the file cannot be read.
        StructuralError: If the file exceeds 4 MiB or is not well-formed XML.
        DecodeError: If the file is not a supported preset document.
    """
    path = Path(path)

    file_size = path.stat().st_size
    if file_size > MAX_FILE_SIZE_BYTES:
        raise StructuralError(
            f"File size ({file_size / (1024 * 1024):.1f} MiB) exceeds maximum "
            f"allowed size of {MAX_FILE_SIZE_BYTES // (1024 * 1024)} MiB"
        )

    logger.debug(f"Loading preset from {path}")
    return loads(path.read_bytes())
