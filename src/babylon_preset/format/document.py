"""XML text <-> element tree.

The codec works on `xml.etree.ElementTree` elements; this module is the only
place that deals with the text form. Written documents always use two-space
indentation, an XML declaration and a trailing newline, which is the layout
Babylon itself writes.
"""

import copy
import xml.etree.ElementTree as ET

from babylon_preset.format.errors import StructuralError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = "  "


def parse(data: bytes | str) -> ET.Element:
    """Parse a preset document.

    Text is taken as already decoded, whatever encoding its declaration
    names; bytes are decoded as the declaration says.

    Raises:
        StructuralError: If the data is not well-formed XML.
    """
    try:
        return ET.fromstring(data)
    except ET.ParseError as e:
        raise StructuralError(f"Malformed XML: {e}") from e


def serialize(root: ET.Element) -> str:
    """Render an element tree as preset document text."""
    root = copy.deepcopy(root)
    ET.indent(root, space=INDENT)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"
