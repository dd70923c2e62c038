"""Interchange codec: Document to and from JSON-shaped data."""

from typing import Any

from gridforge.core import (
    DocumentFormatError,
    extract_json,
    get_logger,
    get_settings,
    safe_json_dumps,
    validate_value_depth,
)
from gridforge.core.id import new_widget_id
from gridforge.dialect import Dialect
from gridforge.literal.values import ColorRef
from .models import Document, WidgetInstance

logger = get_logger(__name__)

FORMAT_TAG = "gridforge/1"
COLOR_TAG = "$color"


def encode_document(document: Document) -> dict[str, Any]:
    """Document as a plain, JSON-ready dict (widgets as an ordered list)."""
    return {
        "format": FORMAT_TAG,
        "canvasWidth": document.canvas_width,
        "canvasHeight": document.canvas_height,
        "targetDialect": document.dialect.value,
        "widgets": [encode_widget(widget) for widget in document.widgets.values()],
    }


def encode_widget(widget: WidgetInstance) -> dict[str, Any]:
    return {
        "id": widget.id,
        "typeName": widget.type_name,
        "properties": to_plain(widget.properties),
        "children": list(widget.children),
    }


def decode_document(data: dict[str, Any]) -> Document:
    """
    Rebuild a Document, re-validating every type name.

    Accepts the native shape, the designer's ``terminal``/``elements`` shape
    and the project-file shape.

    Raises:
        DocumentFormatError: If the data is not shaped like a document
        UnknownWidgetType: If a widget type is absent from the dialect registry
    """
    if not isinstance(data, dict):
        raise DocumentFormatError(f"Expected object, got {type(data).__name__}")

    if "widgets" in data:
        return _decode_native(data)
    if "elements" in data and "terminal" in data:
        return _decode_designer(data)
    if "elements" in data and "framework" in data:
        return _decode_project_body(data)

    logger.error("invalid_format", keys=sorted(data)[:10])
    raise DocumentFormatError("Invalid document: expected 'widgets' or 'elements'")


def dumps(document: Document, indent: int | None = None) -> str:
    """Serialize a Document to interchange text."""
    if indent is None:
        indent = get_settings().json_indent
    return safe_json_dumps(encode_document(document), indent=indent)


def loads(text: str, repair: bool = False) -> Document:
    """
    Parse interchange text into a Document.

    Raises:
        JSONParseError: If the text is not a JSON object
        DocumentFormatError: If the object is not a document
        UnknownWidgetType: If a widget type is unknown
    """
    return decode_document(extract_json(text, repair=repair))


def to_plain(value: Any) -> Any:
    """Replace ColorRef markers with tagged objects."""
    if isinstance(value, ColorRef):
        return {COLOR_TAG: value.name}
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_plain(item) for item in value]
    return value


def from_plain(value: Any) -> Any:
    """Inverse of to_plain."""
    if isinstance(value, dict):
        if len(value) == 1 and isinstance(value.get(COLOR_TAG), str):
            return ColorRef(value[COLOR_TAG])
        return {key: from_plain(item) for key, item in value.items()}
    if isinstance(value, list):
        return [from_plain(item) for item in value]
    return value


def _decode_native(data: dict[str, Any]) -> Document:
    widgets = data.get("widgets")
    if not isinstance(widgets, list):
        raise DocumentFormatError("'widgets' must be a list")
    return _build(
        data.get("canvasWidth"),
        data.get("canvasHeight"),
        data.get("targetDialect"),
        [_decode_widget(item, "typeName", "properties") for item in widgets],
    )


def _decode_designer(data: dict[str, Any]) -> Document:
    terminal = data.get("terminal")
    elements = data.get("elements")
    if not isinstance(terminal, dict) or not isinstance(elements, list):
        raise DocumentFormatError("'terminal' must be an object and 'elements' a list")
    return _build(
        terminal.get("width"),
        terminal.get("height"),
        data.get("framework", Dialect.BASALT.value),
        [_decode_widget(item, "type", "props") for item in elements],
    )


def _decode_project_body(data: dict[str, Any]) -> Document:
    properties = data.get("properties") or {}
    elements = data.get("elements")
    if not isinstance(properties, dict) or not isinstance(elements, list):
        raise DocumentFormatError("'properties' must be an object and 'elements' a list")
    return _build(
        properties.get("width"),
        properties.get("height"),
        data.get("framework"),
        [_decode_widget(item, "type", "props") for item in elements],
    )


def _decode_widget(item: Any, type_key: str, props_key: str) -> WidgetInstance:
    if not isinstance(item, dict) or not isinstance(item.get(type_key), str):
        raise DocumentFormatError(f"Widget entries need a string '{type_key}'")
    properties = item.get(props_key) or {}
    if not isinstance(properties, dict):
        raise DocumentFormatError(f"Widget '{props_key}' must be an object")
    validate_value_depth(properties, get_settings().max_literal_depth)
    children = item.get("children") or []
    return WidgetInstance(
        id=str(item.get("id") or new_widget_id()),
        type_name=item[type_key],
        properties=from_plain(properties),
        children=[str(child) for child in children if isinstance(child, (str, int))],
    )


def _build(width: Any, height: Any, dialect: Any, widgets: list[WidgetInstance]) -> Document:
    try:
        target = Dialect(dialect)
    except ValueError as e:
        raise DocumentFormatError(f"Unknown target dialect: {dialect!r}") from e
    try:
        return Document.from_widgets(widgets, width, height, target)
    except ValueError as e:
        raise DocumentFormatError(f"Invalid document: {e}") from e
