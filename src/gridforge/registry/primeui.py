"""PrimeUI widget catalog (positional calls).

Default property order is the declared parameter order: position and size
first, then the widget's own optional parameters, colors last.
"""

from typing import Any

from gridforge.dialect import Dialect
from .types import TypeRegistry, WidgetTypeDescriptor


def _widget(type_name: str, width: int = 10, height: int = 1, **props: Any) -> WidgetTypeDescriptor:
    defaults = {"x": 1, "y": 1, "width": width, "height": height}
    defaults.update(props)
    defaults.setdefault("foreground", "white")
    defaults.setdefault("background", "black")
    return WidgetTypeDescriptor(type_name=type_name, default_properties=defaults)


DESCRIPTORS = [
    _widget("Label", text="Label"),
    _widget("Button", width=8, height=3, text="Button", enabled=True, foreground="white", background="gray"),
    _widget("BorderBox", width=20, height=8),
    _widget("CheckBox", text="", checked=False),
    _widget("InputBox", width=15, placeholder="", replaceChar=None),
    _widget("TextBox", width=20, height=6, text=""),
    _widget("SelectionBox", width=15, height=6, entries=[], selected=1),
    _widget("ScrollBox", width=20, height=8, innerHeight=20, scrollbar=True),
    _widget("ProgressBar", width=15, progress=0, useShade=False),
    _widget("CenterLabel", width=20, text=""),
]


def build_registry() -> TypeRegistry:
    return TypeRegistry(Dialect.PRIMEUI, DESCRIPTORS)
