"""Literal parser: value text to Value."""

import re

from gridforge.core.errors import LiteralSyntaxError
from .scanner import QUOTES, find_closing, find_top_level, split_spans
from .values import ColorRef, Value

DEFAULT_MAX_DEPTH = 32

_NUMBER = re.compile(r"-?\d+(?:\.\d+)?")
_IDENT = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_KEYWORDS: dict[str, Value] = {"true": True, "false": False, "nil": None}
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "0": "\0"}


def parse_literal(text: str, cursor: int = 0, max_depth: int = DEFAULT_MAX_DEPTH) -> tuple[Value, int]:
    """
    Parse the literal starting at ``cursor``.

    Args:
        text: Source text
        cursor: Offset where the literal may begin (leading whitespace is skipped)
        max_depth: Maximum aggregate nesting

    Returns:
        ``(value, new_cursor)`` with ``new_cursor`` just past the literal

    Raises:
        LiteralSyntaxError: If no literal begins at ``cursor``
        UnterminatedAggregate: If an aggregate is never closed
    """
    return _parse(text, cursor, len(text), 0, max_depth)


def parse_value(text: str, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Parse text that must consist of exactly one literal."""
    return _parse_complete(text, 0, len(text), 0, max_depth)


def parse_span(text: str, start: int, end: int, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Parse ``text[start:end]`` as exactly one literal, reporting offsets in ``text``."""
    return _parse_complete(text, start, end, 0, max_depth)


def _parse(text: str, cursor: int, end: int, depth: int, max_depth: int) -> tuple[Value, int]:
    cursor = _skip_whitespace(text, cursor, end)
    if cursor >= end:
        raise LiteralSyntaxError("expected a literal", cursor)

    ch = text[cursor]
    if ch in QUOTES:
        return _parse_string(text, cursor, end)
    if ch == "{":
        return _parse_aggregate(text, cursor, end, depth, max_depth)

    match = _NUMBER.match(text, cursor, end)
    if match:
        literal = match.group()
        number = float(literal) if "." in literal else int(literal)
        return number, match.end()

    match = _IDENT.match(text, cursor, end)
    if match:
        word = match.group()
        if word in _KEYWORDS:
            return _KEYWORDS[word], match.end()
        return _parse_reference(text, cursor, match.end(), end)

    raise LiteralSyntaxError(f"unexpected character {ch!r}", cursor)


def _parse_complete(text: str, start: int, end: int, depth: int, max_depth: int) -> Value:
    value, cursor = _parse(text, start, end, depth, max_depth)
    cursor = _skip_whitespace(text, cursor, end)
    if cursor != end:
        raise LiteralSyntaxError("unexpected text after literal", cursor)
    return value


def _parse_string(text: str, cursor: int, end: int) -> tuple[str, int]:
    quote = text[cursor]
    chars: list[str] = []
    i = cursor + 1
    while i < end:
        ch = text[i]
        if ch == "\\" and i + 1 < end:
            escaped = text[i + 1]
            chars.append(_ESCAPES.get(escaped, escaped))
            i += 2
            continue
        if ch == quote:
            return "".join(chars), i + 1
        chars.append(ch)
        i += 1
    raise LiteralSyntaxError("unterminated string", cursor)


def _parse_reference(text: str, cursor: int, ident_end: int, end: int) -> tuple[ColorRef, int]:
    word = text[cursor:ident_end]
    if ident_end < end and text[ident_end] == ".":
        member = _IDENT.match(text, ident_end + 1, end)
        if member:
            after = _skip_whitespace(text, member.end(), end)
            if after < end and text[after] == "(":
                raise LiteralSyntaxError(f"call to {word}.{member.group()} is not a literal", cursor)
            return ColorRef(member.group()), member.end()
    raise LiteralSyntaxError(f"unexpected identifier {word!r}", cursor)


def _parse_aggregate(text: str, cursor: int, end: int, depth: int, max_depth: int) -> tuple[Value, int]:
    if depth >= max_depth:
        raise LiteralSyntaxError(f"aggregate nesting exceeds {max_depth}", cursor)

    close = find_closing(text, cursor, end)
    spans = split_spans(text, cursor + 1, close)

    # Empty aggregate is a list by convention
    if not spans:
        return [], close + 1

    equals = [find_top_level(text, "=", s, e) for s, e in spans]
    if any(eq != -1 for eq in equals):
        table: dict[str, Value] = {}
        for (s, e), eq in zip(spans, equals):
            if eq == -1:
                raise LiteralSyntaxError("positional entry in keyed aggregate", s)
            key = _parse_key(text, s, eq, depth, max_depth)
            table[key] = _parse_complete(text, eq + 1, e, depth + 1, max_depth)
        return table, close + 1

    items = [_parse_complete(text, s, e, depth + 1, max_depth) for s, e in spans]
    return items, close + 1


def _parse_key(text: str, start: int, end: int, depth: int, max_depth: int) -> str:
    while end > start and text[end - 1].isspace():
        end -= 1
    if start < end and text[start] == "[" and text[end - 1] == "]":
        key = _parse_complete(text, start + 1, end - 1, depth + 1, max_depth)
        if not isinstance(key, str):
            raise LiteralSyntaxError("table keys must be strings", start)
        return key
    match = _IDENT.match(text, start, end)
    if not match or match.end() != end:
        raise LiteralSyntaxError("invalid table key", start)
    return match.group()


def _skip_whitespace(text: str, cursor: int, end: int) -> int:
    while cursor < end and text[cursor].isspace():
        cursor += 1
    return cursor
