"""Preset model <-> element tree.

Decoding and encoding are driven entirely by the `Schema` of the document's
version, so this module knows nothing about any particular revision of the
format. Both directions are pure functions of their input.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any

from babylon_preset.format.errors import (
    DecodeError,
    MissingField,
    MissingSection,
    StructuralError,
)
from babylon_preset.format.model import Preset
from babylon_preset.format.schema import VERSION_ATTRIBUTE, Schema, SectionRule, resolve
from babylon_preset.format.types import Unrecognized

logger = logging.getLogger(__name__)


def decode(root: ET.Element) -> Preset:
    """Decode a parsed preset document.

    Args:
        root: The document's root element.

    Returns:
        The fully populated preset.

    Raises:
        DecodeError: If the document cannot be decoded. The error carries the
            element, slot and attribute it was raised for.
    """
    schema = resolve(root.get(VERSION_ATTRIBUTE))
    logger.debug(f"Decoding preset with schema version {schema.version}")

    if root.tag != schema.root:
        raise StructuralError(
            f"Root element <{root.tag}> is not <{schema.root}> of schema version {schema.version}"
        )

    metadata = _decode_metadata(root, schema)
    sections: dict[str, Any] = {}
    for name, rule in schema.sections.items():
        elements = _find_section(root, rule)
        if rule.repeated:
            sections[name] = [
                _decode_group(element, rule, slot, schema)
                for slot, element in enumerate(elements)
            ]
        else:
            sections[name] = _decode_group(elements[0], rule, None, schema)

    _warn_unknown_elements(root, schema)
    return Preset(**metadata, **sections, schema_version=schema.version)


def encode(preset: Preset, version: str | None = None) -> ET.Element:
    """Encode a preset as an element tree.

    Unmodified values keep the text they were decoded from unless the preset
    is written in a different version than it was read in.

    Args:
        preset: The preset to encode.
        version: Schema version to write. Defaults to the preset's own.

    Raises:
        UnsupportedVersion: If the version is not supported.
    """
    schema = resolve(version or preset.schema_version)
    verbatim = schema.version == preset.schema_version

    root = ET.Element(schema.root)
    root.set(VERSION_ATTRIBUTE, schema.version)
    for name, attribute in schema.metadata.items():
        value = getattr(preset, name)
        if name == "description" and value is None:
            value = schema.blank_description
        if value is not None:
            root.set(attribute, value)

    containers: dict[str, ET.Element] = {}
    for name, rule in schema.sections.items():
        parent = root
        if rule.container is not None:
            if rule.container not in containers:
                containers[rule.container] = ET.SubElement(root, rule.container)
            parent = containers[rule.container]

        value = getattr(preset, name)
        groups = value if rule.repeated else [value]
        for group in groups:
            element = ET.SubElement(parent, rule.element)
            for field_name, field_rule in rule.fields.items():
                element.set(
                    field_rule.attribute,
                    field_rule.kind.encode(getattr(group, field_name), schema, verbatim=verbatim),
                )

    return root


def _decode_metadata(root: ET.Element, schema: Schema) -> dict[str, str | None]:
    metadata = {name: root.get(attribute) for name, attribute in schema.metadata.items()}
    if metadata["name"] is None:
        raise MissingField(schema.metadata["name"]).locate(root.tag)
    if metadata.get("description") == schema.blank_description:
        metadata["description"] = None
    return metadata


def _find_section(root: ET.Element, rule: SectionRule) -> list[ET.Element]:
    parent = root
    if rule.container is not None:
        found = root.find(rule.container)
        if found is None:
            raise MissingSection(rule.container)
        parent = found

    elements = parent.findall(rule.element)
    if not rule.repeated and not elements:
        raise MissingSection(rule.element)
    if not rule.repeated and len(elements) > 1:
        logger.warning(f"Ignoring {len(elements) - 1} extra <{rule.element}> element(s)")
    return elements


def _decode_group(
    element: ET.Element, rule: SectionRule, slot: int | None, schema: Schema
) -> Any:
    values = {}
    for name, field_rule in rule.fields.items():
        attribute = field_rule.attribute
        text = element.get(attribute)
        try:
            if text is None:
                raise MissingField(attribute)
            value = field_rule.kind.decode(text, schema)
        except DecodeError as e:
            e.locate(rule.element, slot, attribute)
            raise
        _warn_unrecognized(value, rule.element, slot, attribute)
        values[name] = value

    known = {field_rule.attribute for field_rule in rule.fields.values()}
    for attribute in element.keys():
        if attribute not in known:
            logger.warning(f"Ignoring unknown attribute {attribute!r} of <{rule.element}>")

    return rule.group(**values)


def _warn_unrecognized(value: Any, element: str, slot: int | None, attribute: str) -> None:
    items = value if isinstance(value, list) else [value]
    for item in items:
        if isinstance(item, Unrecognized):
            where = f"<{element}>" if slot is None else f"<{element}>[{slot + 1}]"
            logger.warning(f"Unrecognized value {item.raw!r} for {where} @{attribute}")


def _warn_unknown_elements(root: ET.Element, schema: Schema) -> None:
    expected: dict[str, set[str]] = {schema.root: set()}
    for rule in schema.sections.values():
        if rule.container is None:
            expected[schema.root].add(rule.element)
        else:
            expected[schema.root].add(rule.container)
            expected.setdefault(rule.container, set()).add(rule.element)

    for child in root:
        if child.tag not in expected[schema.root]:
            logger.warning(f"Ignoring unknown element <{child.tag}>")
        elif child.tag in expected:
            for grandchild in child:
                if grandchild.tag not in expected[child.tag]:
                    logger.warning(f"Ignoring unknown element <{grandchild.tag}> in <{child.tag}>")
