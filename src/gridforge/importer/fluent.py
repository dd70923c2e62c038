"""Fluent method chain extraction (basalt)."""

import re
from typing import Any

from gridforge.core import LiteralSyntaxError, get_logger
from gridforge.dialect import Dialect
from gridforge.literal import blank_strings, find_closing, split_spans
from .base import IDENT, Declaration, StatementExtractor

logger = get_logger(__name__)

# Setters that carry two properties at once
EXPANDED_SETTERS = {
    "setPosition": ("x", "y"),
    "setSize": ("width", "height"),
}

_CHAINED_CALL = re.compile(rf"\s*:\s*({IDENT})\s*\(")


class FluentExtractor(StatementExtractor):
    """Reads ``local v = main:addType()`` plus ``:setX(...)`` trailers."""

    dialect = Dialect.BASALT
    default_root = "main"

    def root_pattern(self, module: str) -> str:
        return rf"local\s+({IDENT})\s*=\s*{re.escape(module)}\s*\.\s*(?:createFrame|getMainFrame)\s*\("

    def declaration_pattern(self, module: str, root: str) -> str:
        return rf"local\s+({IDENT})\s*=\s*{re.escape(root)}\s*:\s*add({IDENT})\s*\("

    def canvas_size(self, text: str, module: str) -> tuple[int, int] | None:
        root = self._root_variable(text, module)
        match = re.search(rf"\b{re.escape(root)}\s*:\s*setSize\s*\(", text)
        if match is None:
            return None
        close = find_closing(text, match.end() - 1)
        return self.size_from_spans(text, split_spans(text, match.end(), close))

    def parse_declaration(self, text: str, declaration: Declaration) -> tuple[str, dict[str, Any]]:
        type_name = declaration.name
        self.registry.require(type_name)

        args = self.parse_arguments(text, declaration.args_start, declaration.args_end)
        raw = dict(self.property_table(args, f"add{type_name}", declaration.args_start))

        # Chained directly onto the declaration
        calls, position = self._read_chain(text, declaration.args_end + 1, declaration.scope_end)

        # Statement form: ``var:setX(...)`` up to the next declaration, outside strings
        code = blank_strings(text, position, declaration.scope_end)
        statement = re.compile(rf"(?<![\w.:]){re.escape(declaration.variable)}(?=\s*:)")
        search_from = 0
        while True:
            match = statement.search(code, search_from)
            if match is None:
                break
            name_end = position + match.end()
            chained, after = self._read_chain(text, name_end, declaration.scope_end)
            calls.extend(chained)
            search_from = max(after, name_end) - position

        for method, start, end in calls:
            self._apply_call(raw, type_name, method, text, start, end)
        return type_name, raw

    def _read_chain(self, text: str, position: int, end: int) -> tuple[list[tuple[str, int, int]], int]:
        """Consecutive ``:method(args)`` calls starting at position."""
        calls = []
        while True:
            match = _CHAINED_CALL.match(text, position, end)
            if match is None:
                return calls, position
            close = find_closing(text, match.end() - 1)
            calls.append((match.group(1), match.end(), close))
            position = close + 1

    def _apply_call(self, raw: dict[str, Any], type_name: str, method: str, text: str, start: int, end: int) -> None:
        if method in EXPANDED_SETTERS:
            keys = EXPANDED_SETTERS[method]
            args = self.parse_arguments(text, start, end)
            if len(args) < len(keys):
                raise LiteralSyntaxError(f"{method} expects {len(keys)} arguments", start)
            raw.update(zip(keys, args))
            return

        key = self.registry.property_key(type_name, method)
        if key is None:
            logger.debug("method_skipped", type=type_name, method=method)
            return
        args = self.parse_arguments(text, start, end)
        if not args:
            logger.debug("method_skipped", type=type_name, method=method, reason="no arguments")
            return
        raw[key] = args[0]
