"""Tests for the per-dialect type registries."""

import pytest

from gridforge.core import UnknownWidgetType
from gridforge.dialect import Dialect
from gridforge.palette import is_color_key, to_color_literal, unwrap_color
from gridforge.literal import ColorRef
from gridforge.registry import ESSENTIAL_PROPERTIES, get_registry


@pytest.mark.unit
@pytest.mark.parametrize("dialect", list(Dialect))
def test_every_type_has_essentials(dialect):
    """Every descriptor defines position and size."""
    registry = get_registry(dialect)
    assert len(registry) > 0
    for type_name in registry.type_names:
        defaults = registry.require(type_name).default_properties
        assert all(key in defaults for key in ESSENTIAL_PROPERTIES)


@pytest.mark.unit
def test_registry_is_cached():
    """String and enum lookups share one registry."""
    assert get_registry("basalt") is get_registry(Dialect.BASALT)


@pytest.mark.unit
def test_defaults_are_fresh_copies():
    """Mutating an instance's defaults never touches the descriptor."""
    descriptor = get_registry("basalt").require("List")
    defaults = descriptor.defaults()
    defaults["items"].append("x")
    assert descriptor.default_properties["items"] == []


@pytest.mark.unit
def test_unknown_type():
    """Unknown type names raise with the name attached."""
    with pytest.raises(UnknownWidgetType) as exc_info:
        get_registry("primeui").require("Flexbox")
    assert exc_info.value.type_name == "Flexbox"


@pytest.mark.unit
class TestBasaltKeys:
    """Setter naming."""

    def test_setter(self):
        assert get_registry("basalt").emission_key("Button", "text") == "setText"

    def test_override(self):
        registry = get_registry("basalt")
        assert registry.emission_key("Dropdown", "isOpen") == "setOpen"
        assert registry.property_key("Dropdown", "setOpen") == "isOpen"

    def test_reverse(self):
        registry = get_registry("basalt")
        assert registry.property_key("Button", "setBackground") == "background"
        assert registry.property_key("Button", "onClick") is None


@pytest.mark.unit
class TestPixelUIKeys:
    """Field renames and constructors."""

    def test_color_fields(self):
        registry = get_registry("pixelui")
        assert registry.emission_key("Button", "background") == "bg"
        assert registry.property_key("Button", "fg") == "foreground"

    def test_constructors(self):
        registry = get_registry("pixelui")
        assert registry.constructor_for("CheckBox") == "checkBox"
        assert registry.constructor_for("ListView") == "list"
        assert registry.constructor_for("Button") == "button"
        assert registry.type_for_constructor("toggle") == "ToggleSwitch"

    def test_unknown_constructor(self):
        with pytest.raises(UnknownWidgetType):
            get_registry("pixelui").type_for_constructor("spinner")


@pytest.mark.unit
def test_primeui_parameter_order():
    """Position and size lead, colors trail."""
    order = get_registry("primeui").require("Button").parameter_order
    assert order[:4] == ESSENTIAL_PROPERTIES
    assert order[-2:] == ("foreground", "background")


@pytest.mark.unit
class TestPalette:
    """Color-key rule."""

    @pytest.mark.parametrize("key", ["background", "foreground", "headerColor", "focusedBackground", "color"])
    def test_color_keys(self, key):
        assert is_color_key(key)

    @pytest.mark.parametrize("key", ["text", "items", "backgroundImage"])
    def test_plain_keys(self, key):
        assert not is_color_key(key)

    def test_promotion(self):
        assert to_color_literal("background", "red") == ColorRef("red")
        assert to_color_literal("background", "notacolor") == "notacolor"
        assert to_color_literal("text", "red") == "red"

    def test_unwrap(self):
        assert unwrap_color("barColor", ColorRef("lime")) == "lime"
        assert unwrap_color("text", ColorRef("lime")) == ColorRef("lime")
