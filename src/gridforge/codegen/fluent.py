"""Fluent method chain backend (basalt)."""

from gridforge.core import get_logger
from gridforge.dialect import Dialect
from gridforge.document.models import Document
from gridforge.literal import is_identifier
from .base import CodeGenerator, PlannedWidget

logger = get_logger(__name__)

ROOT = "main"

# Properties folded into a single two-argument setter
COMBINED_SETTERS = {
    "setPosition": ("x", "y"),
    "setSize": ("width", "height"),
}


class FluentGenerator(CodeGenerator):
    """
    Emits ``local elementN = main:addType()`` followed by one setter call
    per changed property.
    """

    dialect = Dialect.BASALT

    def header(self, document: Document) -> list[str]:
        module = self.profile.module
        return [
            self.require_line(module),
            "",
            *self.comment("Create main frame"),
            f"local {ROOT} = {module}.createFrame()",
            f"{ROOT}:setSize({document.canvas_width}, {document.canvas_height})",
        ]

    def render_widget(self, item: PlannedWidget) -> list[str]:
        name = item.name
        type_name = item.widget.type_name
        lines = [f"local {name} = {ROOT}:add{type_name}()"]

        combined = set()
        for setter, keys in COMBINED_SETTERS.items():
            args = ", ".join(self.property_literal(key, item.changes[key]) for key in keys)
            lines.append(f"{name}:{setter}({args})")
            combined.update(keys)

        skipped = []
        for key, value in item.changes.items():
            if key in combined:
                continue
            method = self.registry.emission_key(type_name, key)
            if not is_identifier(method):
                skipped.append(key)
                continue
            lines.append(f"{name}:{method}({self.property_literal(key, value)})")

        if skipped:
            logger.warning(
                "properties_not_expressible",
                widget=item.widget.id,
                type=type_name,
                properties=skipped,
            )
        return lines

    def footer(self, document: Document) -> list[str]:
        return [*self.comment("Start the UI"), f"{self.profile.module}.run()"]
