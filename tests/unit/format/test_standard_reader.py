"""Unit tests for the standard preset reader module."""

from pathlib import Path

import pytest

from babylon_preset.format import (
    DecodeError,
    Preset,
    StructuralError,
    UnsupportedVersion,
    Waveform,
    dumps,
    load_preset,
    loads,
    save_preset,
)
from babylon_preset.format.standard.reader import MAX_FILE_SIZE_BYTES


class TestLoads:
    """Tests for loads function."""

    def test_text(self) -> None:
        text = dumps(Preset.init(name="Text"))
        assert loads(text).name == "Text"

    def test_bytes(self) -> None:
        data = dumps(Preset.init(name="Bytes")).encode("utf-8")
        assert loads(data).name == "Bytes"

    def test_non_ascii(self) -> None:
        preset = Preset.init(name="Flûte douce ♪")
        assert loads(dumps(preset).encode("utf-8")).name == "Flûte douce ♪"

    def test_declared_latin1_encoding(self) -> None:
        text = dumps(Preset.init(name="Café"))
        text = text.replace('encoding="UTF-8"', 'encoding="ISO-8859-1"')
        assert loads(text.encode("latin-1")).name == "Café"

    def test_decoded_text_ignores_declared_encoding(self) -> None:
        text = dumps(Preset.init(name="Café"))
        text = text.replace('encoding="UTF-8"', 'encoding="ISO-8859-1"')
        assert loads(text).name == "Café"

    def test_without_declaration(self) -> None:
        text = dumps(Preset.init(name="Bare"))
        text = text.split("\n", 1)[1]
        assert loads(text).name == "Bare"

    @pytest.mark.parametrize("data", ["", "not xml", "<Preset", b"\x00\x01"])
    def test_malformed(self, data: str | bytes) -> None:
        with pytest.raises(StructuralError) as exc_info:
            loads(data)
        assert "Malformed XML" in str(exc_info.value)

    def test_not_a_preset(self) -> None:
        with pytest.raises(UnsupportedVersion):
            loads("<html><body/></html>")

    def test_errors_are_decode_errors(self) -> None:
        with pytest.raises(DecodeError):
            loads('<Preset version="2.0" name="x"/>')


class TestLoadPreset:
    """Tests for load_preset function."""

    def test_basic_roundtrip(self, tmp_path: Path) -> None:
        preset = Preset.init(name="Test Roundtrip")
        preset.author = "Test Author"
        preset.oscillators[1].waveform = Waveform.SAW

        output_path = tmp_path / "test_roundtrip.bab"
        save_preset(output_path, preset)
        loaded = load_preset(output_path)

        assert loaded == preset
        assert loaded.name == "Test Roundtrip"
        assert loaded.author == "Test Author"
        assert loaded.oscillators[1].waveform is Waveform.SAW

    def test_accepts_str_path(self, tmp_path: Path) -> None:
        output_path = tmp_path / "str_path.bab"
        save_preset(output_path, Preset.init())
        assert load_preset(str(output_path)) == Preset.init()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_preset(tmp_path / "missing.bab")

    def test_rejects_oversized_file(self, tmp_path: Path) -> None:
        output_path = tmp_path / "huge.bab"
        output_path.write_bytes(b" " * (MAX_FILE_SIZE_BYTES + 1))

        with pytest.raises(StructuralError, match="exceeds maximum"):
            load_preset(output_path)

    def test_malformed_file(self, tmp_path: Path) -> None:
        output_path = tmp_path / "broken.bab"
        output_path.write_text("<Preset version=")

        with pytest.raises(StructuralError):
            load_preset(output_path)
