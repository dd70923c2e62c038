"""Table constructor backend (pixelui)."""

from gridforge.dialect import Dialect
from gridforge.document.models import Document
from gridforge.palette import to_color_literal
from .base import CodeGenerator, PlannedWidget

ROOT = "app"


class TableGenerator(CodeGenerator):
    """Emits ``local elementN = app.ctor({...})`` with one table per widget."""

    dialect = Dialect.PIXELUI

    def header(self, document: Document) -> list[str]:
        module = self.profile.module
        size = self.literal({"width": document.canvas_width, "height": document.canvas_height})
        return [
            self.require_line(module),
            "",
            *self.comment("Create application"),
            f"local {ROOT} = {module}.create({size})",
        ]

    def render_widget(self, item: PlannedWidget) -> list[str]:
        type_name = item.widget.type_name
        fields = {
            self.registry.emission_key(type_name, key): to_color_literal(key, value)
            for key, value in item.changes.items()
        }
        constructor = self.registry.constructor_for(type_name)
        return [f"local {item.name} = {ROOT}.{constructor}({self.literal(fields)})"]

    def footer(self, document: Document) -> list[str]:
        return [*self.comment("Start the UI"), f"{ROOT}:run()"]
