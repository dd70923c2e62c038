"""XML layout export.

One ``<Frame>`` sized to the canvas, holding one empty element per widget
with its scalar properties as attributes. Tables, lists and unset values
have no attribute form and are left out.
"""

import re
from typing import Any
from xml.etree import ElementTree as ET

from gridforge.core import get_logger
from gridforge.document.models import Document
from gridforge.literal import ColorRef, format_number

logger = get_logger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_NAME = re.compile(r"[A-Za-z_][\w.-]*\Z")


def attribute_text(value: Any) -> str | None:
    """Attribute form of a scalar property, or None when it has none."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, str):
        return value
    if isinstance(value, ColorRef):
        return value.name
    return None


def build_layout(document: Document) -> ET.Element:
    """Element tree for a document, widgets in generation order."""
    root = ET.Element(document.dialect.value)
    frame = ET.SubElement(
        root,
        "Frame",
        {"width": str(document.canvas_width), "height": str(document.canvas_height)},
    )
    for widget in document.ordered_widgets():
        attributes = {}
        skipped = []
        for key, value in widget.properties.items():
            text = attribute_text(value)
            if text is None:
                continue
            if not _NAME.match(key):
                skipped.append(key)
                continue
            attributes[key] = text
        if skipped:
            logger.warning(
                "properties_not_expressible",
                widget=widget.id,
                type=widget.type_name,
                properties=skipped,
            )
        ET.SubElement(frame, widget.type_name, attributes)
    return root


def generate_xml(document: Document) -> str:
    """Render a document as an XML layout."""
    root = build_layout(document)
    ET.indent(root)
    text = XML_DECLARATION + "\n" + ET.tostring(root, encoding="unicode") + "\n"
    logger.info("generated", dialect=document.dialect.value, format="xml", widgets=len(document.widgets))
    return text
