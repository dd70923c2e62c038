"""Error taxonomy for the design engine.

Every error here is terminal for the operation that raised it. Nothing is
retried internally; the caller decides whether to ask the user again.
"""


class GridforgeError(Exception):
    """Base class for all design engine failures."""

    pass


class ValidationError(GridforgeError):
    """Input failed validation (size, depth, request fields)."""

    pass


class LiteralSyntaxError(GridforgeError):
    """Malformed value text."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (at offset {offset})")
        self.offset = offset


class UnterminatedAggregate(LiteralSyntaxError):
    """An opening delimiter has no matching closer."""

    def __init__(self, offset: int, opener: str = "{") -> None:
        super().__init__(f"unterminated {opener!r}", offset)
        self.opener = opener


class UnknownWidgetType(GridforgeError):
    """A document or import references a type absent from the active registry."""

    def __init__(self, type_name: str, dialect: str | None = None) -> None:
        where = f" for dialect {dialect!r}" if dialect else ""
        super().__init__(f"Unknown widget type {type_name!r}{where}")
        self.type_name = type_name
        self.dialect = dialect


class NoRecognizedDeclarations(GridforgeError):
    """Import text does not carry the dialect fingerprint."""

    def __init__(self, dialect: str) -> None:
        super().__init__(f"No {dialect} declarations recognized")
        self.dialect = dialect


class UnrecognizedFormat(GridforgeError):
    """Neither interchange decode nor any dialect extractor matched."""

    def __init__(self, message: str = "Unrecognized format: expected a design file or UI source") -> None:
        super().__init__(message)


class DocumentFormatError(GridforgeError):
    """Interchange data is not shaped like a design document."""

    pass
