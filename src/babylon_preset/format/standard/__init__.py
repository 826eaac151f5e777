"""Preset file reader and writer.

This subpackage provides functionality for reading and writing Babylon
presets as ``.bab`` files and as in-memory document text.
"""

from babylon_preset.format.standard.reader import MAX_FILE_SIZE_BYTES, load_preset, loads
from babylon_preset.format.standard.writer import dumps, save_preset

__all__ = [
    "MAX_FILE_SIZE_BYTES",
    "dumps",
    "load_preset",
    "loads",
    "save_preset",
]
