"""
Importers
Statement extractors per dialect and format dispatch
"""

from .base import Declaration, StatementExtractor
from .fluent import FluentExtractor
from .table import TableExtractor
from .positional import PositionalExtractor
from .dispatch import EXTRACTORS, ImportDispatcher, extract_document, extract_widgets, import_source, try_import

__all__ = [
    "Declaration",
    "StatementExtractor",
    "FluentExtractor",
    "TableExtractor",
    "PositionalExtractor",
    "EXTRACTORS",
    "ImportDispatcher",
    "extract_document",
    "extract_widgets",
    "import_source",
    "try_import",
]
