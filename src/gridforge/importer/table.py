"""Table constructor extraction (pixelui)."""

import re
from typing import Any

from gridforge.core import get_logger
from gridforge.dialect import Dialect
from gridforge.literal import find_closing, find_top_level, split_spans
from .base import IDENT, Declaration, StatementExtractor

logger = get_logger(__name__)


class TableExtractor(StatementExtractor):
    """Reads ``local v = app.ctor({...})``."""

    dialect = Dialect.PIXELUI
    default_root = "app"

    def root_pattern(self, module: str) -> str:
        return rf"local\s+({IDENT})\s*=\s*{re.escape(module)}\s*\.\s*create\s*\("

    def declaration_pattern(self, module: str, root: str) -> str:
        return rf"local\s+({IDENT})\s*=\s*{re.escape(root)}\s*[.:]\s*({IDENT})\s*\("

    def canvas_size(self, text: str, module: str) -> tuple[int, int] | None:
        match = re.search(self.root_pattern(module), text)
        if match is None:
            return None
        close = find_closing(text, match.end() - 1)
        spans = split_spans(text, match.end(), close)
        if len(spans) != 1 or text[spans[0][0]] != "{":
            return None

        # Only the width and height fields need to be literal
        start, end = spans[0]
        fields = {}
        for s, e in split_spans(text, start + 1, end - 1):
            equals = find_top_level(text, "=", s, e)
            if equals < 0:
                continue
            name = text[s:equals].strip()
            if name in ("width", "height"):
                fields[name] = (equals + 1, e)
        if set(fields) != {"width", "height"}:
            return None
        return self.size_from_spans(text, [fields["width"], fields["height"]])

    def parse_declaration(self, text: str, declaration: Declaration) -> tuple[str, dict[str, Any]]:
        type_name = self.registry.type_for_constructor(declaration.name)
        args = self.parse_arguments(text, declaration.args_start, declaration.args_end)
        fields = self.property_table(args, declaration.name, declaration.args_start)

        raw = {}
        for name, value in fields.items():
            key = self.registry.property_key(type_name, name)
            if key is None:
                logger.debug("field_skipped", type=type_name, field=name)
                continue
            raw[key] = value
        return type_name, raw
