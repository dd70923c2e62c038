"""Shared statement extraction: fingerprint, declaration walk, widget assembly."""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from gridforge.core import LiteralSyntaxError, NoRecognizedDeclarations, get_logger, get_settings
from gridforge.core.id import new_widget_id
from gridforge.dialect import Dialect, profile_for
from gridforge.document.models import CANVAS_PRESETS, Document, WidgetInstance
from gridforge.literal import blank_comments, find_closing, parse_span, split_spans
from gridforge.palette import unwrap_color
from gridforge.registry import get_registry

logger = get_logger(__name__)

IDENT = r"[A-Za-z_]\w*"


@dataclass(frozen=True)
class Declaration:
    """One ``local var = <root>...(`` match with its argument region."""

    variable: str
    name: str
    start: int
    args_start: int
    args_end: int
    scope_end: int


class StatementExtractor(ABC):
    """
    Recovers widgets from source text in one dialect.

    Subclasses supply the declaration pattern and turn one declaration into
    a type name plus raw properties; this class handles comments, scoping,
    color unwrapping and merging onto defaults.
    """

    dialect: Dialect
    default_root: str

    def __init__(self) -> None:
        self.profile = profile_for(self.dialect)
        self.registry = get_registry(self.dialect)
        self._require = re.compile(
            rf"local\s+({IDENT})\s*=\s*require\s*\(?\s*[\"']{re.escape(self.profile.module)}[\"']",
            re.IGNORECASE,
        )

    def matches(self, source: str) -> bool:
        """Whether the source carries this dialect's require line."""
        return self._require.search(blank_comments(source)) is not None

    def extract_widgets(self, source: str) -> list[WidgetInstance]:
        """
        Widgets declared in the source, in declaration order.

        Raises:
            NoRecognizedDeclarations: If the require line is missing
            LiteralSyntaxError: If any declaration is malformed
            UnknownWidgetType: If a declaration names an unknown type
        """
        text = blank_comments(source)
        module = self._module_variable(text)
        root = self._root_variable(text, module)

        widgets = []
        for declaration in self._declarations(text, module, root):
            type_name, raw = self.parse_declaration(text, declaration)
            widgets.append(self._build_widget(type_name, raw))

        logger.info("widgets_extracted", dialect=self.dialect.value, count=len(widgets))
        return widgets

    def extract_document(self, source: str) -> Document:
        """Widgets plus canvas size; the configured preset fills in a missing size."""
        widgets = self.extract_widgets(source)
        text = blank_comments(source)
        size = self.canvas_size(text, self._module_variable(text))
        if size is None:
            size = CANVAS_PRESETS[get_settings().canvas_preset]
            logger.debug("canvas_size_defaulted", dialect=self.dialect.value, size=size)
        width, height = size
        return Document.from_widgets(widgets, width, height, self.dialect)

    @abstractmethod
    def declaration_pattern(self, module: str, root: str) -> str:
        """Regex ending at the opening parenthesis; groups are variable and name."""

    @abstractmethod
    def parse_declaration(self, text: str, declaration: Declaration) -> tuple[str, dict[str, Any]]:
        """Type name and raw property values for one declaration."""

    @abstractmethod
    def root_pattern(self, module: str) -> str:
        """Regex whose first group is the root container variable."""

    @abstractmethod
    def canvas_size(self, text: str, module: str) -> tuple[int, int] | None:
        """Canvas size from the root container setup, if present."""

    def parse_arguments(self, text: str, start: int, end: int) -> list[Any]:
        """Comma-separated literals between ``start`` and ``end``."""
        max_depth = get_settings().max_literal_depth
        return [parse_span(text, s, e, max_depth) for s, e in split_spans(text, start, end)]

    def property_table(self, args: list[Any], callee: str, offset: int) -> dict[str, Any]:
        """
        The single property-table argument of a declaration, or ``{}``.

        Raises:
            LiteralSyntaxError: If there is more than one argument or it is not a table
        """
        if not args:
            return {}
        # An empty ``{}`` parses as an empty list
        if args == [[]]:
            return {}
        if len(args) > 1 or not isinstance(args[0], dict):
            raise LiteralSyntaxError(f"{callee} takes one property table", offset)
        return args[0]

    def size_from_spans(self, text: str, spans: list[tuple[int, int]]) -> tuple[int, int] | None:
        """Two integer literals, or None when the size is not literal."""
        if len(spans) != 2:
            return None
        try:
            width, height = (parse_span(text, s, e) for s, e in spans)
        except LiteralSyntaxError as e:
            logger.warning("canvas_size_unreadable", dialect=self.dialect.value, error=str(e))
            return None
        if not all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in (width, height)):
            return None
        return width, height

    def _module_variable(self, text: str) -> str:
        match = self._require.search(text)
        if match is None:
            raise NoRecognizedDeclarations(self.dialect.value)
        return match.group(1)

    def _root_variable(self, text: str, module: str) -> str:
        match = re.search(self.root_pattern(module), text)
        return match.group(1) if match else self.default_root

    def _declarations(self, text: str, module: str, root: str) -> list[Declaration]:
        pattern = re.compile(self.declaration_pattern(module, root))
        found = []
        position = 0
        for match in pattern.finditer(text):
            # Matches inside an earlier declaration's arguments are not declarations
            if match.start() < position:
                continue
            open_index = match.end() - 1
            close = find_closing(text, open_index)
            found.append((match, open_index, close))
            position = close + 1

        declarations = []
        for index, (match, open_index, close) in enumerate(found):
            scope_end = found[index + 1][0].start() if index + 1 < len(found) else len(text)
            declarations.append(
                Declaration(
                    variable=match.group(1),
                    name=match.group(2),
                    start=match.start(),
                    args_start=open_index + 1,
                    args_end=close,
                    scope_end=scope_end,
                )
            )
        return declarations

    def _build_widget(self, type_name: str, raw: dict[str, Any]) -> WidgetInstance:
        descriptor = self.registry.require(type_name)
        properties = descriptor.defaults()
        for key, value in raw.items():
            value = unwrap_color(key, value)
            if value == [] and isinstance(properties.get(key), dict):
                value = {}
            properties[key] = value
        return WidgetInstance(id=new_widget_id(), type_name=type_name, properties=properties)
