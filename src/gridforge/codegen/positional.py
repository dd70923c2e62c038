"""Positional call backend (primeui)."""

from gridforge.core import get_logger
from gridforge.dialect import Dialect
from gridforge.document.models import Document
from .base import CodeGenerator, PlannedWidget

logger = get_logger(__name__)

ROOT = "main"


class PositionalGenerator(CodeGenerator):
    """
    Emits ``local elementN = PrimeUI.ctor(main, x, y, width, height, ...)``.

    Arguments follow the descriptor's parameter order. The argument list
    stops after the last changed parameter; an unchanged parameter before
    it is written out as its default so later arguments keep their slots.
    """

    dialect = Dialect.PRIMEUI

    def header(self, document: Document) -> list[str]:
        module = self.profile.module
        return [
            self.require_line(module),
            "",
            *self.comment("Create main window"),
            f"local {ROOT} = window.create(term.current(), 1, 1, {document.canvas_width}, {document.canvas_height})",
        ]

    def render_widget(self, item: PlannedWidget) -> list[str]:
        order = item.descriptor.parameter_order
        skipped = [key for key in item.changes if key not in order]
        if skipped:
            logger.warning(
                "properties_not_expressible",
                widget=item.widget.id,
                type=item.widget.type_name,
                properties=skipped,
            )

        emitted = [index for index, key in enumerate(order) if key in item.changes]
        last = emitted[-1] if emitted else -1

        args = [ROOT]
        for key in order[: last + 1]:
            if key in item.changes:
                value = item.changes[key]
            else:
                value = item.widget.properties.get(key, item.descriptor.default_properties.get(key))
            args.append(self.property_literal(key, value))

        constructor = self.registry.constructor_for(item.widget.type_name)
        return [f"local {item.name} = {self.profile.module}.{constructor}({', '.join(args)})"]

    def footer(self, document: Document) -> list[str]:
        return [*self.comment("Start the UI"), f"{self.profile.module}.run()"]
