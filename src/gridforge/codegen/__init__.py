"""
Code generators
One backend per dialect, all driven by the same plan
"""

from gridforge.core import get_settings
from gridforge.dialect import Dialect
from gridforge.document.models import Document
from .base import CodeGenerator, PlannedWidget, diff_properties, plan
from .fluent import FluentGenerator
from .layout import build_layout, generate_xml
from .positional import PositionalGenerator
from .table import TableGenerator

GENERATORS: dict[Dialect, type[CodeGenerator]] = {
    Dialect.BASALT: FluentGenerator,
    Dialect.PIXELUI: TableGenerator,
    Dialect.PRIMEUI: PositionalGenerator,
}


class GeneratorSet:
    """One generator per dialect, sharing a comment setting."""

    def __init__(self, include_comments: bool = True) -> None:
        self.include_comments = include_comments
        self._generators = {dialect: cls(include_comments=include_comments) for dialect, cls in GENERATORS.items()}

    def get(self, dialect: Dialect | str, include_comments: bool | None = None) -> CodeGenerator:
        if include_comments is None or include_comments == self.include_comments:
            return self._generators[Dialect(dialect)]
        return GENERATORS[Dialect(dialect)](include_comments=include_comments)


def get_generator(dialect: Dialect | str, include_comments: bool | None = None) -> CodeGenerator:
    """Generator instance for a dialect; comment lines default to settings."""
    if include_comments is None:
        include_comments = get_settings().emit_comments
    return GENERATORS[Dialect(dialect)](include_comments=include_comments)


def generate(document: Document, include_comments: bool | None = None) -> str:
    """Render a document in its own target dialect."""
    return get_generator(document.dialect, include_comments).generate(document)


__all__ = [
    "CodeGenerator",
    "PlannedWidget",
    "FluentGenerator",
    "TableGenerator",
    "PositionalGenerator",
    "GENERATORS",
    "GeneratorSet",
    "diff_properties",
    "plan",
    "get_generator",
    "generate",
    "build_layout",
    "generate_xml",
]
