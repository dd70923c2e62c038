"""Basalt widget catalog (fluent method chains)."""

from typing import Any

from gridforge.dialect import Dialect
from .types import TypeRegistry, WidgetTypeDescriptor, setter_name

_BASE = {"background": "black", "foreground": "white", "visible": True}


def _widget(
    type_name: str,
    x: int = 1,
    y: int = 1,
    width: int = 10,
    height: int = 5,
    emission_keys: dict[str, str] | None = None,
    **props: Any,
) -> WidgetTypeDescriptor:
    defaults = {"x": x, "y": y, "width": width, "height": height}
    defaults.update(props)
    for key, value in _BASE.items():
        defaults.setdefault(key, value)
    return WidgetTypeDescriptor(type_name=type_name, default_properties=defaults, emission_keys=emission_keys or {})


DESCRIPTORS = [
    _widget("Frame"),
    _widget("Container", offsetX=0, offsetY=0),
    _widget(
        "Flexbox", width=20,
        flexDirection="row", flexSpacing=1, flexJustifyContent="flex-start", flexWrap=False,
    ),
    _widget("Label", width=8, height=1, text="Label", autoSize=True),
    _widget("Button", width=8, height=3, text="Button", background="gray"),
    _widget(
        "Input", width=15, height=1,
        text="", placeholder="...",
        focusedBackground="blue", focusedForeground="white", placeholderColor="gray",
        maxLength=None, pattern=None, replaceChar=None,
    ),
    _widget("Checkbox", height=1, checked=False, text="", checkedText="X", autoSize=True),
    _widget(
        "List", width=15, height=8,
        items=[], selectable=True, multiSelection=False,
        selectedBackground="blue", selectedForeground="white",
    ),
    _widget(
        "Table", width=25, height=10,
        columns=[], data=[], headerColor="blue", selectedColor="lightBlue", gridColor="gray",
    ),
    _widget("Tree", width=20, height=10, nodes=[], nodeColor="white", selectedColor="lightBlue"),
    _widget("TextBox", width=20, height=8, lines=[""], editable=True),
    _widget(
        "Dropdown", width=15, height=1,
        items=[], isOpen=False, dropdownHeight=5, selectedText="", dropSymbol="▼",
        emission_keys={"isOpen": "setOpen"},
    ),
    _widget("Menu", width=20, height=1, items=[], separatorColor="gray"),
    _widget(
        "Slider", width=15, height=1,
        step=1, max=100, horizontal=True, barColor="gray", sliderColor="blue",
    ),
    _widget(
        "ProgressBar", width=15, height=1,
        progress=0, showPercentage=False, progressColor="lime", direction="right",
    ),
    _widget("Graph", width=20, height=10, minValue=0, maxValue=100, series={}),
    _widget("BarChart", width=20, height=10, minValue=0, maxValue=100, series={}),
    _widget("LineChart", width=20, height=10, minValue=0, maxValue=100, series={}),
    _widget("Display", width=20, height=10),
    _widget("BigFont", width=15, height=5, text="BigFont", fontSize=1),
    _widget(
        "Image", height=8,
        bimg={}, currentFrame=1, autoResize=False, offsetX=0, offsetY=0,
    ),
    _widget(
        "Program", width=20, height=15,
        path="", running=False,
        emission_keys={"path": "execute"},
    ),
]


def build_registry() -> TypeRegistry:
    return TypeRegistry(Dialect.BASALT, DESCRIPTORS, key_transform=setter_name, reverse_prefix="set")
