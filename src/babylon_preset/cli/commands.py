import dataclasses
import json
import sys
from pathlib import Path
from typing import Annotated, Any

from cyclopts import App, Parameter
from rich.console import Console
from rich.table import Table

from babylon_preset.cli.validators import validate_preset_name, validate_schema_version
from babylon_preset.format import (
    CURRENT_SCHEMA_VERSION,
    SCHEMAS,
    DecodeError,
    Preset,
    PresetError,
    ValidationError,
    load_preset,
    save_preset,
    validate_preset,
)
from babylon_preset.format.types import FileEnum, ModDestination, ModSource, Unrecognized
from babylon_preset.format.units import Quantity, Time
from babylon_preset.format.validation import quantity_fields

# No app-level --version flag; the name is taken by the schema version option
app = App(
    name="babylon-preset",
    help="A utility for inspecting and converting Babylon synthesizer presets",
    version_flags=[],
)
console = Console()

_EFFECT_SECTIONS = {
    "Distortion": "distortion",
    "LoFi": "lofi",
    "Filter": "effect_filter",
    "Chorus": "chorus",
    "Equalizer": "equalizer",
    "Delay": "delay",
    "Reverb": "reverb",
}


def print_error(message: str) -> None:
    """Print an error message in red."""
    console.print(message, style="bold red", markup=False)


def print_success(message: str) -> None:
    """Print a success message in green."""
    console.print(message, style="bold green", markup=False)


def print_warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(message, style="bold yellow", markup=False)


def print_json(data: object) -> None:
    """Print JSON without rich wrapping or highlighting it."""
    console.print(json.dumps(data, indent=2), markup=False, highlight=False, soft_wrap=True)


def _to_plain(value: Any) -> Any:
    """Convert model values to JSON-compatible data, units kept in the text."""
    if isinstance(value, Quantity):
        return str(value)
    if isinstance(value, (FileEnum, Unrecognized)):
        return value.to_file()
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _to_plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, list):
        return [_to_plain(item) for item in value]
    return value


@app.command
def info(
    file: Path,
    parameters: bool = False,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
) -> int:
    """
    Display information about a preset file.

    Parameters
    ----------
    file: Path
        The path to the .bab preset file
    parameters: bool
        Also list every unit-bearing parameter
    output_json: bool
        Output the whole preset as JSON (default: False)
    """
    if not file.exists():
        print_error(f"Error: File {file} does not exist")
        return 1

    try:
        preset = load_preset(file)
    except (PresetError, OSError) as e:
        print_error(f"Error: {e}")
        return 1

    if output_json:
        print_json(_to_plain(preset))
        return 0

    console.print(f"Preset: {file}", markup=False)
    console.print(f"  Name: {preset.name}", markup=False)
    console.print(f"  Schema version: {preset.schema_version}")
    if preset.author:
        console.print(f"  Author: {preset.author}", markup=False)
    if preset.category:
        console.print(f"  Category: {preset.category}", markup=False)
    if preset.description:
        console.print(f"  Description: {preset.description}", markup=False)

    voice = preset.voice
    console.print(f"  Polyphony: {voice.polyphony}")
    console.print(f"  Portamento: {voice.portamento_mode}", markup=False)
    play_mode = voice.play_mode
    console.print(
        f"  Play mode: {getattr(play_mode, 'display_name', play_mode)}", markup=False
    )

    # Oscillators
    enabled = sum(1 for osc in preset.oscillators if osc.enabled)
    console.print(f"  Oscillators: {len(preset.oscillators)} ({enabled} enabled)")
    table = Table(show_header=True, header_style="bold")
    table.add_column("Slot", justify="right")
    table.add_column("On")
    table.add_column("Waveform")
    table.add_column("Cutoff", justify="right")
    table.add_column("Volume", justify="right")
    for slot, osc in enumerate(preset.oscillators, start=1):
        table.add_row(
            str(slot),
            "yes" if osc.enabled else "no",
            str(osc.waveform),
            str(osc.cutoff),
            str(osc.volume),
        )
    console.print(table)

    console.print(f"  Filter: {preset.filter.mode} at {preset.filter.cutoff}", markup=False)
    console.print(f"  LFOs: {len(preset.lfos)}")
    console.print(f"  Mod envelopes: {len(preset.mod_envelopes)}")

    routes = [
        slot
        for slot in preset.mod_matrix
        if slot.source != ModSource.NONE and slot.destination != ModDestination.NONE
    ]
    console.print(f"  Modulation routes: {len(routes)}")
    for route in routes:
        console.print(
            f"    {route.source} -> {route.destination} ({route.amount})", markup=False
        )

    order = ", ".join(str(effect) for effect in preset.effect_chain.order)
    console.print(f"  Effect chain: {order}", markup=False)
    active = [
        str(effect)
        for effect in preset.effect_chain.order
        if str(effect) in _EFFECT_SECTIONS
        and getattr(preset, _EFFECT_SECTIONS[str(effect)]).enabled
    ]
    console.print(f"  Active effects: {', '.join(active) or 'none'}", markup=False)

    if parameters:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Parameter")
        table.add_column("Value", justify="right")
        for path, value in quantity_fields(preset):
            table.add_row(path, str(value))
        console.print(table)

    return 0


@app.command
def validate(
    file: Path,
    strict: bool = False,
    output_json: Annotated[bool, Parameter(name=["--json"])] = False,
) -> int:
    """
    Validate a Babylon preset file.

    Decodes the whole document, then checks the decoded preset for values
    that would not survive being written back.

    Parameters
    ----------
    file: Path
        The path to the .bab preset file to validate
    strict: bool
        Treat warnings as errors (default: False)
    output_json: bool
        Output results as JSON (default: False)
    """
    results: dict[str, object] = {
        "file": str(file),
        "valid": True,
        "errors": [],
        "warnings": [],
    }
    errors: list[str] = []
    warnings: list[str] = []

    # Check file exists
    if not file.exists():
        errors.append(f"File not found: {file}")
        results["valid"] = False
        results["errors"] = errors
        if output_json:
            print_json(results)
        else:
            print_error(f"[FAIL] File not found: {file}")
        return 1

    # Decode the file
    try:
        preset = load_preset(file)
    except DecodeError as e:
        errors.append(f"Decode error: {e}")
        results["valid"] = False
        results["errors"] = errors
        if output_json:
            print_json(results)
        else:
            print_error(f"[FAIL] Decode error: {e}")
            console.print(
                "  Suggestion: Check that this is a Babylon preset. "
                "Use 'babylon-preset versions' to list the supported schema versions."
            )
        return 1
    except OSError as e:
        errors.append(f"Read error: {e}")
        results["valid"] = False
        results["errors"] = errors
        if output_json:
            print_json(results)
        else:
            print_error(f"[FAIL] Read error: {e}")
        return 1

    results["version"] = preset.schema_version

    validation = validate_preset(preset)
    errors.extend(validation.errors)
    warnings.extend(validation.warnings)
    results["errors"] = errors
    results["warnings"] = warnings
    if errors:
        results["valid"] = False

    # In strict mode, warnings become errors
    if strict and warnings:
        results["valid"] = False
        results["errors"] = errors + [f"Strict mode: {w}" for w in warnings]

    if output_json:
        print_json(results)
        return 0 if results["valid"] else 1

    # Rich formatted output
    if results["valid"]:
        print_success(f"[PASS] {file}")
        console.print(f"  Name: {preset.name}", markup=False)
        console.print(f"  Schema version: {preset.schema_version}")
        console.print(f"  Oscillators: {len(preset.oscillators)}")
        console.print(f"  Modulation slots: {len(preset.mod_matrix)}")

        if warnings:
            console.print("")
            for warning in warnings:
                print_warning(f"  [WARN] {warning}")
    else:
        print_error(f"[FAIL] {file}")
        err_list = results.get("errors", [])
        if isinstance(err_list, list):
            for error in err_list:
                console.print(f"  {error}", markup=False)

    return 0 if results["valid"] else 1


@app.command
def convert(
    source: Path,
    output: Path,
    version: Annotated[str | None, Parameter(validator=validate_schema_version)] = None,
) -> int:
    """
    Convert a preset to another schema version.

    Parameters
    ----------
    source: Path
        The .bab preset file to read
    output: Path
        The output destination for the converted .bab file
    version: str | None
        The schema version to write (default: the current version)
    """
    if not source.exists():
        print_error(f"Error: File {source} does not exist")
        return 1

    version = version or CURRENT_SCHEMA_VERSION
    try:
        preset = load_preset(source)
        save_preset(output, preset, version=version)
    except (PresetError, ValidationError, OSError) as e:
        print_error(f"Error: {e}")
        return 1

    print_success(
        f"Converted {source} from schema {preset.schema_version} to {version}: {output}"
    )
    return 0


@app.command
def init(
    output: Path,
    name: Annotated[str, Parameter(validator=validate_preset_name)] = "init",
    version: Annotated[str | None, Parameter(validator=validate_schema_version)] = None,
) -> int:
    """
    Write Babylon's factory "init" preset.

    Parameters
    ----------
    output: Path
        The output destination for the .bab file
    name: str
        The preset name
    version: str | None
        The schema version to write (default: the current version)
    """
    preset = Preset.init(name=name, schema_version=version or CURRENT_SCHEMA_VERSION)
    try:
        save_preset(output, preset)
    except (ValidationError, OSError) as e:
        print_error(f"Error: {e}")
        return 1

    print_success(f"Wrote {preset.name!r} (schema {preset.schema_version}) to {output}")
    return 0


@app.command
def versions() -> int:
    """
    List the supported preset schema versions.
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("Version")
    table.add_column("Root element")
    table.add_column("Time unit")
    table.add_column("Description attribute")

    for version, schema in SCHEMAS.items():
        label = f"{version} (current)" if version == CURRENT_SCHEMA_VERSION else version
        table.add_row(
            label,
            f"<{schema.root}>",
            schema.units[Time],
            schema.metadata["description"],
        )

    console.print(table)
    return 0


def main() -> None:
    sys.exit(app())


if __name__ == "__main__":
    main()
