"""Pytest configuration and fixtures."""

import os

import pytest

from gridforge.core import Settings, create_container
from gridforge.dialect import Dialect
from gridforge.document import Document
from gridforge.handlers import DesignHandler


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["GRIDFORGE_LOG_LEVEL"] = "DEBUG"
    os.environ["GRIDFORGE_EMIT_COMMENTS"] = "true"


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings, independent of the cached environment settings."""
    return Settings()


@pytest.fixture
def di_container(settings):
    """Dependency injection container for testing."""
    return create_container(settings)


@pytest.fixture
def handler(di_container):
    """Design handler with an empty basalt document."""
    return di_container.get(DesignHandler)


# ============================================================================
# Document Fixtures
# ============================================================================

@pytest.fixture
def basalt_document():
    """Basalt document with a button and a label."""
    document = Document(canvas_width=20, canvas_height=10, dialect=Dialect.BASALT)
    document.add_widget("Button", {"x": 2, "y": 3, "text": "OK"}, widget_id="element_button")
    document.add_widget("Label", {"x": 2, "y": 1, "text": "Hello", "foreground": "yellow"}, widget_id="element_label")
    return document


@pytest.fixture
def pixelui_document():
    """PixelUI document with a checkbox and a table."""
    document = Document(canvas_width=26, canvas_height=20, dialect=Dialect.PIXELUI)
    document.add_widget("CheckBox", {"x": 3, "y": 4, "text": "Remember", "checked": True})
    document.add_widget("Table", {"columns": ["Name", "Qty"], "data": [["Apple", 3], ["Pear", 5]]})
    return document


@pytest.fixture
def primeui_document():
    """PrimeUI document with a button and an input box."""
    document = Document(canvas_width=51, canvas_height=19, dialect=Dialect.PRIMEUI)
    document.add_widget("Button", {"x": 5, "y": 5, "text": "Go"})
    document.add_widget("InputBox", {"x": 5, "y": 9, "width": 20})
    return document
