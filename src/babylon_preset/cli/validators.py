from babylon_preset.format.schema import SCHEMAS


def validate_schema_version(type_: object, version: str | None) -> None:
    """Validate that version names a supported schema."""
    if version is None:
        return

    if version not in SCHEMAS:
        supported = ", ".join(SCHEMAS)
        raise ValueError(f"Unsupported schema version {version!r} (supported: {supported})")


def validate_preset_name(type_: object, name: str) -> None:
    if not name.strip():
        raise ValueError("Preset name must not be empty")
