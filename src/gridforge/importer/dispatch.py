"""Import dispatch: interchange first, then dialect extractors by priority."""

from returns.result import Failure, Result, Success

from gridforge.core import (
    DocumentFormatError,
    GridforgeError,
    JSONParseError,
    LogContext,
    Settings,
    UnrecognizedFormat,
    extract_json,
    get_logger,
    get_settings,
    validate_source_size,
)
from gridforge.dialect import Dialect
from gridforge.document.codec import decode_document
from gridforge.document.models import Document, WidgetInstance
from .base import StatementExtractor
from .fluent import FluentExtractor
from .positional import PositionalExtractor
from .table import TableExtractor

logger = get_logger(__name__)

EXTRACTORS: dict[Dialect, type[StatementExtractor]] = {
    Dialect.BASALT: FluentExtractor,
    Dialect.PIXELUI: TableExtractor,
    Dialect.PRIMEUI: PositionalExtractor,
}


class ImportDispatcher:
    """
    Turns arbitrary import text into a Document.

    Order: size check, interchange decode, then each extractor in the
    configured priority whose require line is present. Nothing is returned
    unless the whole input was understood.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.extractors = {dialect: cls() for dialect, cls in EXTRACTORS.items()}

    def import_source(self, source: str, dialect: Dialect | str | None = None) -> Document:
        """
        Import interchange JSON, a project file or dialect source.

        Args:
            source: Text to import
            dialect: Skip detection and use this dialect's extractor

        Raises:
            ValidationError: If the source is too large
            UnrecognizedFormat: If nothing recognizes the text
            UnknownWidgetType: If a recognized input names an unknown type
            LiteralSyntaxError: If a recognized declaration is malformed
        """
        validate_source_size(source, self.settings.max_source_bytes, "source")

        if dialect is not None:
            extractor = self.extractors[Dialect(dialect)]
            with LogContext(dialect=extractor.dialect.value):
                return extractor.extract_document(source)

        document = self._decode_interchange(source)
        if document is not None:
            logger.info("imported", format="interchange", widgets=len(document.widgets))
            return document

        for name in self.settings.import_priority:
            extractor = self.extractors[Dialect(name)]
            if extractor.matches(source):
                with LogContext(dialect=extractor.dialect.value):
                    document = extractor.extract_document(source)
                logger.info("imported", format=extractor.dialect.value, widgets=len(document.widgets))
                return document

        logger.warning("import_unrecognized", size=len(source))
        raise UnrecognizedFormat()

    def try_import(self, source: str, dialect: Dialect | str | None = None) -> Result[Document, GridforgeError]:
        """import_source (Result pattern version)."""
        try:
            return Success(self.import_source(source, dialect))
        except GridforgeError as e:
            return Failure(e)

    def _decode_interchange(self, source: str) -> Document | None:
        try:
            data = extract_json(source)
        except JSONParseError:
            return None
        try:
            return decode_document(data)
        except DocumentFormatError as e:
            logger.debug("interchange_rejected", error=str(e))
            return None


def import_source(source: str, dialect: Dialect | str | None = None) -> Document:
    """Import with the default settings."""
    return ImportDispatcher().import_source(source, dialect)


def try_import(source: str, dialect: Dialect | str | None = None) -> Result[Document, GridforgeError]:
    return ImportDispatcher().try_import(source, dialect)


def extract_widgets(source: str, dialect: Dialect | str) -> list[WidgetInstance]:
    """Widgets declared in dialect source, without building a Document."""
    return EXTRACTORS[Dialect(dialect)]().extract_widgets(source)


def extract_document(source: str, dialect: Dialect | str) -> Document:
    return EXTRACTORS[Dialect(dialect)]().extract_document(source)
