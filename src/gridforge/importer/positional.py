"""Positional call extraction (primeui)."""

import re
from typing import Any

from gridforge.core import LiteralSyntaxError, get_settings
from gridforge.dialect import Dialect
from gridforge.literal import find_closing, parse_span, split_spans
from .base import IDENT, Declaration, StatementExtractor


class PositionalExtractor(StatementExtractor):
    """
    Reads ``local v = PrimeUI.ctor(parent, x, y, width, height, ...)``.

    The parent argument is dropped; the rest map onto the type's parameter
    order. Omitted trailing parameters keep their defaults.
    """

    dialect = Dialect.PRIMEUI
    default_root = "main"

    def root_pattern(self, module: str) -> str:
        return rf"local\s+({IDENT})\s*=\s*window\s*\.\s*create\s*\("

    def declaration_pattern(self, module: str, root: str) -> str:
        return rf"local\s+({IDENT})\s*=\s*{re.escape(module)}\s*\.\s*({IDENT})\s*\("

    def canvas_size(self, text: str, module: str) -> tuple[int, int] | None:
        match = re.search(self.root_pattern(module), text)
        if match is None:
            return None
        close = find_closing(text, match.end() - 1)
        spans = split_spans(text, match.end(), close)
        # window.create(parent, x, y, width, height)
        if len(spans) < 5:
            return None
        return self.size_from_spans(text, spans[3:5])

    def parse_declaration(self, text: str, declaration: Declaration) -> tuple[str, dict[str, Any]]:
        type_name = self.registry.type_for_constructor(declaration.name)
        order = self.registry.require(type_name).parameter_order

        spans = split_spans(text, declaration.args_start, declaration.args_end)
        if not spans:
            raise LiteralSyntaxError(f"{declaration.name} is missing its parent argument", declaration.args_start)
        values = spans[1:]
        if len(values) > len(order):
            raise LiteralSyntaxError(
                f"{declaration.name} takes at most {len(order)} arguments after the parent, got {len(values)}",
                values[len(order)][0],
            )
        max_depth = get_settings().max_literal_depth
        return type_name, {key: parse_span(text, s, e, max_depth) for key, (s, e) in zip(order, values)}
