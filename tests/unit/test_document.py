"""Tests for the document model."""

import pydantic
import pytest

from gridforge.core import UnknownWidgetType
from gridforge.dialect import Dialect
from gridforge.document import CANVAS_PRESETS, Document, WidgetInstance, create_widget


@pytest.mark.unit
def test_create_widget_merges_defaults():
    """Overrides replace defaults; everything else comes from the type."""
    widget = create_widget("basalt", "Button", {"text": "OK"})
    assert widget.properties["text"] == "OK"
    assert widget.properties["background"] == "gray"
    assert widget.id.startswith("element_")


@pytest.mark.unit
def test_unknown_type_rejected_at_construction():
    """A document cannot hold a type its dialect lacks."""
    widget = WidgetInstance(id="w1", type_name="Spinner", properties={})
    with pytest.raises(UnknownWidgetType):
        Document(widgets={"w1": widget})


@pytest.mark.unit
def test_key_must_match_id():
    widget = create_widget("basalt", "Label", widget_id="a")
    with pytest.raises(pydantic.ValidationError):
        Document(widgets={"b": widget})


@pytest.mark.unit
def test_from_widgets_rejects_shared_ids():
    widgets = [create_widget("basalt", "Button", widget_id="a"), create_widget("basalt", "Label", widget_id="a")]
    with pytest.raises(ValueError, match="Duplicate widget ids"):
        Document.from_widgets(widgets, 10, 5, "basalt")


@pytest.mark.unit
def test_canvas_must_be_positive():
    with pytest.raises(pydantic.ValidationError):
        Document(canvas_width=0)


@pytest.mark.unit
def test_from_preset():
    document = Document.from_preset("pocket", "pixelui")
    assert (document.canvas_width, document.canvas_height) == CANVAS_PRESETS["pocket"]
    assert document.dialect == Dialect.PIXELUI
    with pytest.raises(KeyError):
        Document.from_preset("toaster")


@pytest.mark.unit
class TestEditing:
    """Single-widget edits."""

    def test_set_property_touches_one_key(self, basalt_document):
        before = dict(basalt_document.widgets["element_label"].properties)
        basalt_document.set_property("element_button", "text", "Cancel")
        assert basalt_document.widgets["element_button"].properties["text"] == "Cancel"
        assert basalt_document.widgets["element_label"].properties == before

    def test_duplicate_id(self, basalt_document):
        with pytest.raises(ValueError):
            basalt_document.add_widget("Label", widget_id="element_button")

    def test_remove_widget(self, basalt_document):
        basalt_document.widgets["element_label"].children.append("element_button")
        basalt_document.remove_widget("element_button")
        assert "element_button" not in basalt_document.widgets
        assert basalt_document.widgets["element_label"].children == []


@pytest.mark.unit
class TestOrdering:
    """Generation order."""

    def test_insertion_order(self, basalt_document):
        assert [w.id for w in basalt_document.ordered_widgets()] == ["element_button", "element_label"]

    def test_z_sort_is_stable(self):
        document = Document()
        document.add_widget("Label", {"z": 2}, widget_id="top")
        document.add_widget("Label", widget_id="first")
        document.add_widget("Label", widget_id="second")
        assert [w.id for w in document.ordered_widgets()] == ["first", "second", "top"]


@pytest.mark.unit
def test_retarget():
    """Shared types survive a dialect change; the original is untouched."""
    document = Document()
    document.add_widget("Button", {"text": "OK"}, widget_id="b")
    retargeted = document.retarget("primeui")
    assert retargeted.dialect == Dialect.PRIMEUI
    retargeted.set_property("b", "text", "Changed")
    assert document.widgets["b"].properties["text"] == "OK"

    document.add_widget("Flexbox", widget_id="f")
    with pytest.raises(UnknownWidgetType):
        document.retarget("primeui")
