"""Property value model.

Values are plain Python data plus one marker type:

    str          String
    int | float  Number
    bool         Boolean
    None         Null
    ColorRef     symbolic palette reference (``colors.red``)
    list         List of values
    dict         Table of string keys to values, insertion ordered
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class ColorRef:
    """A palette reference, distinct from a plain string."""

    name: str

    def __str__(self) -> str:
        return self.name


Value = Union[str, int, float, bool, None, ColorRef, list["Value"], dict[str, "Value"]]


class ValueKind(str, Enum):
    """Tag of a value."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    COLOR = "color"
    LIST = "list"
    TABLE = "table"


LUA_KEYWORDS = frozenset({
    "and", "break", "do", "else", "elseif", "end", "false", "for", "function",
    "goto", "if", "in", "local", "nil", "not", "or", "repeat", "return", "then",
    "true", "until", "while",
})

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")


def kind_of(value: Any) -> ValueKind:
    """Classify a value; raises TypeError for anything outside the model."""
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if value is None:
        return ValueKind.NULL
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, ColorRef):
        return ValueKind.COLOR
    if isinstance(value, list):
        return ValueKind.LIST
    if isinstance(value, dict):
        return ValueKind.TABLE
    raise TypeError(f"Unsupported value type: {type(value).__name__}")


def is_identifier(key: str) -> bool:
    """True if key can be written bare as a table key."""
    return bool(_IDENTIFIER.match(key)) and key not in LUA_KEYWORDS


def values_equal(a: Any, b: Any) -> bool:
    """Structural equality that keeps booleans apart from numbers."""
    kind_a, kind_b = kind_of(a), kind_of(b)
    if kind_a != kind_b:
        return False
    if kind_a == ValueKind.LIST:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    if kind_a == ValueKind.TABLE:
        return a.keys() == b.keys() and all(values_equal(a[k], b[k]) for k in a)
    return a == b
