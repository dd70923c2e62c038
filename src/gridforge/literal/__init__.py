"""
Literal syntax
Value model, scanner, parser and emitter for Lua-style literals
"""

from .values import ColorRef, Value, ValueKind, kind_of, is_identifier, values_equal
from .scanner import find_closing, find_top_level, split_spans, split_top_level, blank_comments, blank_strings
from .parser import parse_literal, parse_value, parse_span
from .emitter import emit, format_number, quote

__all__ = [
    "ColorRef",
    "Value",
    "ValueKind",
    "kind_of",
    "is_identifier",
    "values_equal",
    "find_closing",
    "find_top_level",
    "split_spans",
    "split_top_level",
    "blank_comments",
    "blank_strings",
    "parse_literal",
    "parse_value",
    "parse_span",
    "emit",
    "format_number",
    "quote",
]
