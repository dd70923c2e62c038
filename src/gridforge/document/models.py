"""Design Document Models."""

import copy
from typing import Any

from pydantic import BaseModel, Field, model_validator

from gridforge.core import get_logger
from gridforge.core.id import new_widget_id
from gridforge.dialect import Dialect
from gridforge.registry import get_registry

logger = get_logger(__name__)

# Terminal sizes in character cells
CANVAS_PRESETS: dict[str, tuple[int, int]] = {
    "computer": (51, 19),
    "pocket": (26, 20),
    "advanced": (51, 19),
    "monitor": (7, 5),
    "monitor3x2": (10, 6),
    "monitor5x4": (16, 12),
}


class WidgetInstance(BaseModel):
    """One placed widget."""

    id: str = Field(..., description="Opaque, stable widget identifier")
    type_name: str = Field(..., description="Type name in the document's dialect")
    properties: dict[str, Any] = Field(default_factory=dict)
    children: list[str] = Field(default_factory=list)


class Document(BaseModel):
    """
    A design: canvas size, target dialect and widgets in insertion order.

    Every widget type must resolve in the dialect's registry; otherwise
    construction raises UnknownWidgetType and no document exists.
    """

    canvas_width: int = Field(default=51, gt=0)
    canvas_height: int = Field(default=19, gt=0)
    dialect: Dialect = Field(default=Dialect.BASALT)
    widgets: dict[str, WidgetInstance] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_widgets(self) -> "Document":
        registry = get_registry(self.dialect)
        for widget_id, widget in self.widgets.items():
            # UnknownWidgetType is not a ValueError, so pydantic lets it through
            registry.require(widget.type_name)
            if widget.id != widget_id:
                raise ValueError(f"Widget key {widget_id!r} does not match id {widget.id!r}")
        return self

    @classmethod
    def from_preset(cls, preset: str = "computer", dialect: Dialect | str = Dialect.BASALT) -> "Document":
        """Empty document sized by a terminal preset."""
        if preset not in CANVAS_PRESETS:
            raise KeyError(f"Unknown canvas preset: {preset}")
        width, height = CANVAS_PRESETS[preset]
        return cls(canvas_width=width, canvas_height=height, dialect=Dialect(dialect))

    @classmethod
    def from_widgets(
        cls,
        widgets: list[WidgetInstance],
        canvas_width: int,
        canvas_height: int,
        dialect: Dialect | str,
    ) -> "Document":
        """
        Build a validated document from an ordered widget list.

        Raises:
            ValueError: If two widgets share an id
        """
        ids = [widget.id for widget in widgets]
        duplicates = sorted({widget_id for widget_id in ids if ids.count(widget_id) > 1})
        if duplicates:
            raise ValueError(f"Duplicate widget ids: {', '.join(duplicates)}")
        return cls(
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            dialect=Dialect(dialect),
            widgets={widget.id: widget for widget in widgets},
        )

    def create_widget(
        self,
        type_name: str,
        overrides: dict[str, Any] | None = None,
        widget_id: str | None = None,
    ) -> WidgetInstance:
        """Widget of this dialect with defaults merged with overrides (not added)."""
        return create_widget(self.dialect, type_name, overrides, widget_id)

    def add_widget(
        self,
        type_name: str,
        overrides: dict[str, Any] | None = None,
        widget_id: str | None = None,
    ) -> WidgetInstance:
        """Create a widget and append it to the document."""
        widget = self.create_widget(type_name, overrides, widget_id)
        if widget.id in self.widgets:
            raise ValueError(f"Duplicate widget id: {widget.id}")
        self.widgets[widget.id] = widget
        logger.debug("widget_added", id=widget.id, type=type_name)
        return widget

    def set_property(self, widget_id: str, key: str, value: Any) -> None:
        """Replace exactly one property of one widget."""
        self.widgets[widget_id].properties[key] = value

    def remove_widget(self, widget_id: str) -> WidgetInstance:
        widget = self.widgets.pop(widget_id)
        for other in self.widgets.values():
            if widget_id in other.children:
                other.children.remove(widget_id)
        return widget

    def clear(self) -> None:
        self.widgets.clear()

    def ordered_widgets(self) -> list[WidgetInstance]:
        """
        Widgets in generation order.

        Insertion order, stably re-sorted by an explicit ``z`` property when
        any widget carries one.
        """
        widgets = list(self.widgets.values())
        if any("z" in widget.properties for widget in widgets):
            widgets.sort(key=_z_order)
        return widgets

    def retarget(self, dialect: Dialect | str) -> "Document":
        """Copy of this document for another dialect; types must exist there."""
        return Document(
            canvas_width=self.canvas_width,
            canvas_height=self.canvas_height,
            dialect=Dialect(dialect),
            widgets=copy.deepcopy(self.widgets),
        )


def create_widget(
    dialect: Dialect | str,
    type_name: str,
    overrides: dict[str, Any] | None = None,
    widget_id: str | None = None,
) -> WidgetInstance:
    """
    Instantiate a widget type: a fresh copy of its defaults merged with overrides.

    Raises:
        UnknownWidgetType: If the dialect has no such type
    """
    descriptor = get_registry(dialect).require(type_name)
    properties = descriptor.defaults()
    if overrides:
        properties.update(copy.deepcopy(overrides))
    return WidgetInstance(id=widget_id or new_widget_id(), type_name=type_name, properties=properties)


def _z_order(widget: WidgetInstance) -> float:
    z = widget.properties.get("z")
    if isinstance(z, bool) or not isinstance(z, (int, float)):
        return 0
    return z
