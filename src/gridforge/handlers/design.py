"""Design Handler."""

import time
from typing import Any

import pydantic

from gridforge.codegen import GeneratorSet, generate_xml
from gridforge.core import (
    ExportRequest,
    GridforgeError,
    ImportRequest,
    LogContext,
    Settings,
    ValidationError,
    get_logger,
)
from gridforge.dialect import Dialect
from gridforge.document import Document, Project, WidgetInstance, dumps, dumps_project
from gridforge.importer import ImportDispatcher
from gridforge.monitoring import metrics_collector, trace_operation

logger = get_logger(__name__)

DEFAULT_PROJECT_NAME = "Untitled"


class DesignHandler:
    """
    Owns the session document and serves export and load requests.

    A failed load leaves the session document untouched.
    """

    def __init__(
        self,
        dispatcher: ImportDispatcher,
        generators: GeneratorSet,
        settings: Settings,
        document: Document | None = None,
        name: str = DEFAULT_PROJECT_NAME,
    ) -> None:
        self.dispatcher = dispatcher
        self.generators = generators
        self.settings = settings
        if document is None:
            document = Document.from_preset(settings.canvas_preset, settings.default_dialect)
        self.document = document
        self.name = name

    def new(self, preset: str | None = None, dialect: Dialect | str | None = None) -> Document:
        """Replace the session with an empty document."""
        self.document = Document.from_preset(
            preset or self.settings.canvas_preset,
            dialect or self.settings.default_dialect,
        )
        logger.info("document_new", dialect=self.document.dialect.value, width=self.document.canvas_width)
        return self.document

    def add_widget(self, type_name: str, overrides: dict[str, Any] | None = None) -> WidgetInstance:
        return self.document.add_widget(type_name, overrides)

    def set_property(self, widget_id: str, key: str, value: Any) -> None:
        self.document.set_property(widget_id, key, value)

    def remove_widget(self, widget_id: str) -> WidgetInstance:
        return self.document.remove_widget(widget_id)

    def export(self, target: str, include_comments: bool | None = None) -> str:
        """
        Render the session document.

        Args:
            target: A dialect name, ``json``, ``project`` or ``xml``
            include_comments: Override the configured comment lines

        Raises:
            ValidationError: If the target is unknown
            UnknownWidgetType: If a widget has no counterpart in the target dialect
        """
        start_time = time.time()
        target_label = target

        try:
            validated = _validate(ExportRequest, target=target, include_comments=include_comments)
            target_label = validated.target
            logger.info("export", target=validated.target, widgets=len(self.document.widgets))

            with LogContext(target=validated.target), trace_operation("export"):
                text = self._render(validated)

            duration = time.time() - start_time
            metrics_collector.record_export(validated.target, "success", duration, len(self.document.widgets))
            return text

        except ValidationError as e:
            duration = time.time() - start_time
            metrics_collector.record_export(target_label, "validation_error", duration)
            logger.error("validation", error=str(e))
            raise
        except GridforgeError as e:
            duration = time.time() - start_time
            metrics_collector.record_export(target_label, "error", duration)
            metrics_collector.record_error(type(e).__name__, "design_handler")
            logger.error("export_failed", target=target_label, error=str(e))
            raise

    def load(self, source: str, dialect: str | None = None, filename: str | None = None) -> Document:
        """
        Import text and make it the session document.

        Raises:
            ValidationError: If the request is empty or too large
            UnrecognizedFormat: If nothing recognizes the text
            UnknownWidgetType: If the text names an unknown type
            LiteralSyntaxError: If a declaration is malformed
        """
        start_time = time.time()

        try:
            validated = _validate(ImportRequest, source=source, dialect=dialect, filename=filename)
            logger.info("load", filename=validated.filename, dialect=validated.dialect, size=len(validated.source))

            with trace_operation("load", filename=validated.filename):
                document = self.dispatcher.import_source(validated.source, validated.dialect)

            self.document = document
            duration = time.time() - start_time
            metrics_collector.record_import("success", duration, len(source))
            logger.info("loaded", dialect=document.dialect.value, widgets=len(document.widgets))
            return document

        except ValidationError as e:
            duration = time.time() - start_time
            metrics_collector.record_import("validation_error", duration, len(source or ""))
            logger.error("validation", error=str(e))
            raise
        except GridforgeError as e:
            duration = time.time() - start_time
            metrics_collector.record_import("error", duration, len(source or ""))
            metrics_collector.record_error(type(e).__name__, "design_handler")
            logger.error("load_failed", error=str(e))
            raise

    def _render(self, request: ExportRequest) -> str:
        if request.target == "json":
            return dumps(self.document, indent=self.settings.json_indent)
        if request.target == "project":
            project = Project(name=self.name, document=self.document)
            return dumps_project(project, indent=self.settings.json_indent)
        if request.target == "xml":
            return generate_xml(self.document)

        document = self.document
        if document.dialect != request.target:
            document = document.retarget(request.target)
        return self.generators.get(document.dialect, request.include_comments).generate(document)


def _validate(model: type[pydantic.BaseModel], **fields: Any) -> Any:
    try:
        return model(**fields)
    except pydantic.ValidationError as e:
        raise ValidationError(str(e)) from e
