"""Fast JSON parsing and encoding for interchange files."""

from typing import Any
import json

import msgspec
import orjson
from json_repair import repair_json

from .errors import GridforgeError


class JSONParseError(GridforgeError):
    """JSON parsing failed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


def extract_json_boundaries(text: str) -> str | None:
    """
    Extract the JSON object text, dropping markdown fences around pasted content.

    Args:
        text: Text potentially containing a JSON object

    Returns:
        The object text, or None when the text does not start an object
    """
    working_text = text.strip()

    if working_text.startswith("```"):
        first_newline = working_text.find("\n")
        end_marker = working_text.rfind("```")
        if first_newline != -1 and end_marker > first_newline:
            working_text = working_text[first_newline + 1:end_marker].strip()

    # Interchange files are a single top-level object
    if not working_text.startswith("{") or not working_text.endswith("}"):
        return None

    return working_text


def extract_json(text: str, repair: bool = False) -> dict[str, Any]:
    """
    Parse a JSON object from text.

    Args:
        text: Text containing a JSON object
        repair: Attempt to repair invalid JSON with json_repair

    Returns:
        Parsed JSON dictionary

    Raises:
        JSONParseError: If parsing fails
    """
    json_str = extract_json_boundaries(text)
    if json_str is None:
        raise JSONParseError("No JSON object found in text")

    # Try msgspec first (fastest)
    try:
        result = msgspec.json.decode(json_str.encode("utf-8"))
    except msgspec.DecodeError as e:
        if not repair:
            raise JSONParseError(f"Invalid JSON: {e}", e) from e

        # Last resort: try json_repair
        try:
            result = json.loads(repair_json(json_str))
        except (ValueError, TypeError) as repair_error:
            raise JSONParseError(f"JSON repair failed: {repair_error}", repair_error) from repair_error

    if not isinstance(result, dict):
        raise JSONParseError(f"Expected dict, got {type(result).__name__}")
    return result


def safe_json_dumps(obj: Any, **kwargs: Any) -> str:
    """
    Encode object to JSON string using fastest available library.

    Args:
        obj: Object to encode
        **kwargs: Additional arguments (indent)

    Returns:
        JSON string
    """
    indent = kwargs.get("indent", 0) or 0

    # orjson covers compact and two-space output
    if indent in (0, 2):
        option = orjson.OPT_INDENT_2 if indent == 2 else 0
        try:
            return orjson.dumps(obj, option=option).decode("utf-8")
        except TypeError:
            # Fallback for edge cases (e.g., integers outside 64-bit range)
            pass

    # Use stdlib for other indents or as fallback (most compatible)
    return json.dumps(obj, indent=indent if indent > 0 else None, ensure_ascii=False)
