"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    GridforgeError,
    ValidationError,
    LiteralSyntaxError,
    UnterminatedAggregate,
    UnknownWidgetType,
    NoRecognizedDeclarations,
    UnrecognizedFormat,
    DocumentFormatError,
)
from .validate import (
    ExportRequest,
    ImportRequest,
    validate_source_size,
    validate_value_depth,
)
from .logging_config import configure_logging, get_logger, LogContext
from .json import extract_json, safe_json_dumps, JSONParseError


def create_container(settings: Settings | None = None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "GridforgeError",
    "ValidationError",
    "LiteralSyntaxError",
    "UnterminatedAggregate",
    "UnknownWidgetType",
    "NoRecognizedDeclarations",
    "UnrecognizedFormat",
    "DocumentFormatError",
    # Validation
    "ExportRequest",
    "ImportRequest",
    "validate_source_size",
    "validate_value_depth",
    # Logging
    "configure_logging",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "JSONParseError",
    # DI
    "create_container",
]
