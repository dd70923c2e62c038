"""Shared generator plumbing: ordering, naming and the diff set."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from gridforge.core import get_logger
from gridforge.dialect import Dialect, profile_for
from gridforge.document.models import Document, WidgetInstance
from gridforge.literal import emit, values_equal
from gridforge.palette import to_color_literal
from gridforge.registry import ESSENTIAL_PROPERTIES, TypeRegistry, WidgetTypeDescriptor, get_registry

logger = get_logger(__name__)

VARIABLE_PREFIX = "element"


@dataclass(frozen=True)
class PlannedWidget:
    """A widget ready for emission."""

    name: str
    widget: WidgetInstance
    descriptor: WidgetTypeDescriptor
    changes: dict[str, Any]


def diff_properties(widget: WidgetInstance, descriptor: WidgetTypeDescriptor) -> dict[str, Any]:
    """
    Properties that differ from the type defaults, essentials always first.

    ``x``, ``y``, ``width`` and ``height`` are included whether or not they
    equal their defaults.
    """
    defaults = descriptor.default_properties
    changes = {key: widget.properties.get(key, defaults.get(key)) for key in ESSENTIAL_PROPERTIES}
    for key, value in widget.properties.items():
        if key in changes:
            continue
        if key in defaults and values_equal(value, defaults[key]):
            continue
        changes[key] = value
    return changes


def plan(document: Document, registry: TypeRegistry) -> list[PlannedWidget]:
    """Order widgets, name them ``element1..N`` and compute each diff set."""
    planned = []
    for index, widget in enumerate(document.ordered_widgets(), start=1):
        descriptor = registry.require(widget.type_name)
        planned.append(
            PlannedWidget(
                name=f"{VARIABLE_PREFIX}{index}",
                widget=widget,
                descriptor=descriptor,
                changes=diff_properties(widget, descriptor),
            )
        )
    return planned


class CodeGenerator(ABC):
    """Document -> source text for one dialect."""

    dialect: Dialect

    def __init__(self, include_comments: bool = True) -> None:
        self.include_comments = include_comments
        self.profile = profile_for(self.dialect)
        self.registry = get_registry(self.dialect)

    def generate(self, document: Document) -> str:
        """Render the whole document. Reads the document, never mutates it."""
        if document.dialect != self.dialect:
            raise ValueError(f"{self.dialect.value} generator cannot render a {document.dialect.value} document")

        planned = plan(document, self.registry)
        lines = self.header(document)
        for item in planned:
            lines.append("")
            if self.include_comments:
                lines.append(f"-- {item.widget.type_name}")
            lines.extend(self.render_widget(item))
        lines.append("")
        lines.extend(self.footer(document))
        text = "\n".join(lines) + "\n"

        logger.info("generated", dialect=self.dialect.value, widgets=len(planned), size=len(text))
        return text

    @abstractmethod
    def header(self, document: Document) -> list[str]:
        """Require line and root container setup."""

    @abstractmethod
    def render_widget(self, item: PlannedWidget) -> list[str]:
        """Statements for one widget."""

    @abstractmethod
    def footer(self, document: Document) -> list[str]:
        """Event loop start."""

    def comment(self, text: str) -> list[str]:
        return [f"-- {text}"] if self.include_comments else []

    def literal(self, value: Any) -> str:
        return emit(value, self.dialect)

    def property_literal(self, key: str, value: Any) -> str:
        """Literal for a property value; palette names under color keys become references."""
        return self.literal(to_color_literal(key, value))

    def require_line(self, variable: str) -> str:
        return f"local {variable} = require({self.literal(self.profile.module.lower())})"
