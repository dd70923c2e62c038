"""Tests for import dispatch."""

import pytest

from gridforge.core import (
    NoRecognizedDeclarations,
    Settings,
    UnknownWidgetType,
    UnrecognizedFormat,
    ValidationError,
)
from gridforge.dialect import Dialect
from gridforge.document import Project, dumps, dumps_project
from gridforge.importer import ImportDispatcher, extract_document, extract_widgets, try_import

from .test_importer import BASALT_SOURCE, PIXELUI_SOURCE


@pytest.fixture
def dispatcher(settings):
    return ImportDispatcher(settings)


@pytest.mark.unit
class TestDispatch:
    """Format detection."""

    def test_interchange_first(self, dispatcher, basalt_document):
        document = dispatcher.import_source(dumps(basalt_document))
        assert list(document.widgets) == list(basalt_document.widgets)

    def test_project_file(self, dispatcher, pixelui_document):
        document = dispatcher.import_source(dumps_project(Project(name="Shop", document=pixelui_document)))
        assert document.dialect == Dialect.PIXELUI
        assert len(document.widgets) == 2

    def test_source_by_fingerprint(self, dispatcher):
        assert dispatcher.import_source(PIXELUI_SOURCE).dialect == Dialect.PIXELUI
        assert dispatcher.import_source(BASALT_SOURCE).dialect == Dialect.BASALT

    def test_priority_order(self):
        both = PIXELUI_SOURCE + "\n" + BASALT_SOURCE
        assert ImportDispatcher(Settings(import_priority=["basalt", "pixelui"])).import_source(both).dialect == "basalt"
        assert ImportDispatcher(Settings(import_priority=["pixelui", "basalt"])).import_source(both).dialect == "pixelui"

    def test_explicit_dialect(self, dispatcher):
        with pytest.raises(NoRecognizedDeclarations):
            dispatcher.import_source(BASALT_SOURCE, "primeui")

    def test_unrecognized(self, dispatcher):
        with pytest.raises(UnrecognizedFormat):
            dispatcher.import_source("print('hello')")

    def test_broken_json_falls_through(self, dispatcher):
        with pytest.raises(UnrecognizedFormat):
            dispatcher.import_source('{"widgets": [')

    def test_unknown_type_in_json_is_terminal(self, dispatcher):
        text = '{"canvasWidth": 5, "canvasHeight": 5, "targetDialect": "basalt", "widgets": [{"typeName": "Spinner"}]}'
        with pytest.raises(UnknownWidgetType):
            dispatcher.import_source(text)

    def test_size_limit(self):
        with pytest.raises(ValidationError):
            ImportDispatcher(Settings(max_source_bytes=16)).import_source(BASALT_SOURCE)


@pytest.mark.unit
def test_try_import_result():
    """Result pattern wraps success and failure."""
    assert try_import(BASALT_SOURCE).unwrap().dialect == Dialect.BASALT
    assert isinstance(try_import("nothing here").failure(), UnrecognizedFormat)


@pytest.mark.unit
def test_extract_by_dialect_name():
    widgets = extract_widgets(PIXELUI_SOURCE, "pixelui")
    assert [w.type_name for w in widgets] == ["CheckBox", "Table", "LineChart"]

    document = extract_document(BASALT_SOURCE, Dialect.BASALT)
    assert (document.canvas_width, document.canvas_height) == (26, 20)

    with pytest.raises(NoRecognizedDeclarations):
        extract_widgets(BASALT_SOURCE, "primeui")
