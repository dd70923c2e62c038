"""
gridforge
Terminal UI designs to and from ComputerCraft UI framework source
"""

from .core import (
    GridforgeError,
    LiteralSyntaxError,
    UnterminatedAggregate,
    UnknownWidgetType,
    NoRecognizedDeclarations,
    UnrecognizedFormat,
    DocumentFormatError,
    ValidationError,
    Settings,
    get_settings,
)
from .dialect import Dialect
from .literal import ColorRef, emit, parse_literal, parse_value
from .registry import get_registry
from .document import Document, WidgetInstance, Project, create_widget, dumps, loads
from .codegen import generate, get_generator
from .importer import ImportDispatcher, import_source, try_import

__version__ = "0.1.0"

__all__ = [
    "GridforgeError",
    "LiteralSyntaxError",
    "UnterminatedAggregate",
    "UnknownWidgetType",
    "NoRecognizedDeclarations",
    "UnrecognizedFormat",
    "DocumentFormatError",
    "ValidationError",
    "Settings",
    "get_settings",
    "Dialect",
    "ColorRef",
    "emit",
    "parse_literal",
    "parse_value",
    "get_registry",
    "Document",
    "WidgetInstance",
    "Project",
    "create_widget",
    "dumps",
    "loads",
    "generate",
    "get_generator",
    "ImportDispatcher",
    "import_source",
    "try_import",
]
