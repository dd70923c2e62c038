"""Literal emitter: Value to dialect literal text."""

import math
from decimal import Decimal
from typing import Any

from gridforge.dialect import Dialect, DialectProfile, profile_for
from .values import ColorRef, ValueKind, is_identifier, kind_of

_STRING_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r", "\0": "\\0"}


def emit(value: Any, dialect: Dialect | str) -> str:
    """
    Render a value as literal text for a dialect.

    Raises:
        TypeError: For values outside the value model
        ValueError: For non-finite numbers or non-identifier color names
    """
    return _emit(value, profile_for(dialect))


def _emit(value: Any, profile: DialectProfile) -> str:
    kind = kind_of(value)

    if kind == ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind == ValueKind.NULL:
        return profile.null_keyword
    if kind == ValueKind.NUMBER:
        return format_number(value)
    if kind == ValueKind.STRING:
        return quote(value, profile.quote)
    if kind == ValueKind.COLOR:
        return _emit_color(value, profile)
    if kind == ValueKind.LIST:
        return "{" + ", ".join(_emit(item, profile) for item in value) + "}"

    pairs = []
    for key, item in value.items():
        if not isinstance(key, str):
            raise TypeError(f"Table keys must be strings, got {type(key).__name__}")
        key_text = key if is_identifier(key) else f"[{quote(key, profile.quote)}]"
        pairs.append(f"{key_text} = {_emit(item, profile)}")
    return "{" + ", ".join(pairs) + "}"


def format_number(value: int | float) -> str:
    """Canonical decimal form without exponent; integral floats print as ints."""
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise ValueError(f"Cannot emit non-finite number {value!r}")
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def quote(text: str, delimiter: str = '"') -> str:
    escaped = "".join(_STRING_ESCAPES.get(ch, ch) for ch in text)
    return delimiter + escaped.replace(delimiter, "\\" + delimiter) + delimiter


def _emit_color(value: ColorRef, profile: DialectProfile) -> str:
    if not is_identifier(value.name):
        raise ValueError(f"Color name {value.name!r} is not an identifier")
    return f"{profile.palette}.{value.name}"
