"""Validation tests."""

import pytest
from hypothesis import given, strategies as st

from gridforge.core import (
    ExportRequest,
    ImportRequest,
    ValidationError,
    validate_source_size,
    validate_value_depth,
)


def test_export_request_targets():
    """Dialects and interchange targets are accepted, lower-cased."""
    assert ExportRequest(target="PixelUI").target == "pixelui"
    assert ExportRequest(target="json").target == "json"
    assert ExportRequest(target="project", include_comments=False).include_comments is False


def test_export_request_unknown_target():
    with pytest.raises(Exception):
        ExportRequest(target="swing")


def test_export_request_is_frozen():
    request = ExportRequest(target="basalt")
    with pytest.raises(Exception):
        request.target = "primeui"


def test_import_request_whitespace():
    """Test whitespace-only source validation."""
    with pytest.raises(Exception):
        ImportRequest(source="   ")


def test_import_request_dialect_hint():
    assert ImportRequest(source="x", dialect=" Basalt ").dialect == "basalt"
    with pytest.raises(Exception):
        ImportRequest(source="x", dialect="swing")


def test_import_request_extra_fields():
    with pytest.raises(Exception):
        ImportRequest(source="x", encoding="utf-8")


def test_validate_source_size():
    """Size is measured in UTF-8 bytes."""
    validate_source_size("abc", 3)
    with pytest.raises(ValidationError):
        validate_source_size("é" * 2, 3)


def test_validate_value_depth():
    """Test nesting depth validation."""
    shallow = {"a": [{"b": 1}]}
    validate_value_depth(shallow, max_depth=5)

    deep: list = []
    current = deep
    for _ in range(10):
        inner: list = []
        current.append(inner)
        current = inner

    with pytest.raises(ValidationError):
        validate_value_depth(deep, max_depth=5)


@given(st.text(min_size=1, max_size=500))
def test_source_validation_property(source):
    """Property test: any source with visible content is accepted, stripped."""
    if source.strip():
        assert ImportRequest(source=source).source == source.strip()
