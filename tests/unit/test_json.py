"""JSON helper tests."""

import json

import pytest

from gridforge.core import JSONParseError, extract_json, safe_json_dumps


@pytest.mark.unit
class TestExtractJson:
    """Object extraction."""

    def test_plain(self):
        assert extract_json('{"a": 1}') == {"a": 1}

    def test_code_fence(self):
        assert extract_json('```json\n{"a": [1, 2]}\n```') == {"a": [1, 2]}

    def test_not_an_object(self):
        with pytest.raises(JSONParseError):
            extract_json("[1, 2]")

    def test_invalid(self):
        with pytest.raises(JSONParseError) as exc_info:
            extract_json('{"a": 1,}')
        assert exc_info.value.original is not None

    def test_repair(self):
        assert extract_json('{"a": 1,}', repair=True) == {"a": 1}


@pytest.mark.unit
@pytest.mark.parametrize("indent", [0, 2, 4])
def test_safe_json_dumps(indent):
    data = {"name": "Grid", "sizes": [1, 2], "label": "é"}
    text = safe_json_dumps(data, indent=indent)
    assert json.loads(text) == data
    if indent:
        assert "\n" + " " * indent + '"name"' in text
