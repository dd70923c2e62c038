"""PixelUI widget catalog (table constructors)."""

from typing import Any

from gridforge.dialect import Dialect
from .types import TypeRegistry, WidgetTypeDescriptor

# Field names PixelUI spells differently from the property keys
_FIELDS = {"background": "bg", "foreground": "fg"}

# Irregular constructor identifiers; anything absent is lower-first
CONSTRUCTORS = {
    "CheckBox": "checkBox",
    "RadioButton": "radioButton",
    "ToggleSwitch": "toggle",
    "TextBox": "textBox",
    "TextArea": "textArea",
    "ListView": "list",
    "ComboBox": "comboBox",
    "ProgressBar": "progressBar",
    "TreeView": "tree",
    "Table": "table",
    "LineChart": "chart",
}


def _widget(type_name: str, width: int = 10, height: int = 1, **props: Any) -> WidgetTypeDescriptor:
    defaults = {"x": 1, "y": 1, "width": width, "height": height}
    defaults.update(props)
    defaults.setdefault("background", "black")
    defaults.setdefault("foreground", "white")
    defaults.setdefault("visible", True)
    return WidgetTypeDescriptor(
        type_name=type_name,
        default_properties=defaults,
        emission_keys=dict(_FIELDS),
        constructor=CONSTRUCTORS.get(type_name),
    )


DESCRIPTORS = [
    _widget("Frame", width=20, height=10, title="", border=False),
    _widget("Label", text="Label", align="left"),
    _widget("Button", width=8, height=3, text="Button", background="gray", enabled=True),
    _widget("TextBox", width=15, text="", placeholder="", maxLength=None, masked=False),
    _widget("TextArea", width=20, height=6, text="", readOnly=False),
    _widget("CheckBox", text="", checked=False),
    _widget("RadioButton", text="", checked=False, group="default"),
    _widget("ToggleSwitch", width=6, on=False, onColor="lime", offColor="gray"),
    _widget("Slider", width=15, min=0, max=100, value=0, step=1, trackColor="gray"),
    _widget("ProgressBar", width=15, value=0, max=100, barColor="lime", showPercent=False),
    _widget("ListView", width=15, height=8, items=[], selectedIndex=None, selectedColor="blue"),
    _widget("ComboBox", width=15, items=[], selectedIndex=None, dropHeight=5),
    _widget("Table", width=25, height=10, columns=[], data=[], headerColor="blue", sortable=False),
    _widget("TreeView", width=20, height=10, nodes=[], expandAll=False),
    _widget("LineChart", width=20, height=10, series={}, minValue=0, maxValue=100, axisColor="gray"),
]


def build_registry() -> TypeRegistry:
    return TypeRegistry(Dialect.PIXELUI, DESCRIPTORS)
