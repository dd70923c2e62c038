"""Bracket- and quote-aware scanning shared by the literal parser and extractors.

Nested aggregates (a table widget's column list inside its property block,
a function call inside an argument list) defeat any fixed-width regex, so
every "where does this end" and "where are the top-level commas" question
goes through the one structural walker below.
"""

from collections.abc import Iterator

from gridforge.core.errors import LiteralSyntaxError, UnterminatedAggregate

QUOTES = "\"'"
OPENERS = "({["
CLOSERS = ")}]"
PAIRS = {")": "(", "}": "{", "]": "["}


def walk(text: str, start: int = 0, end: int | None = None) -> Iterator[tuple[int, str, int]]:
    """
    Yield ``(index, char, depth)`` for every character outside string literals.

    Depth is the nesting level the character sits at: an opener is reported at
    the outer level, its matching closer likewise. Quote characters and string
    contents are not yielded; a backslash inside a string escapes the next
    character.

    Raises:
        LiteralSyntaxError: On a closer that does not match the innermost opener
    """
    end = len(text) if end is None else end
    stack: list[str] = []
    quote: str | None = None
    i = start
    while i < end:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = None
        elif ch in QUOTES:
            quote = ch
        elif ch in OPENERS:
            yield i, ch, len(stack)
            stack.append(ch)
        elif ch in CLOSERS:
            if not stack or stack[-1] != PAIRS[ch]:
                raise LiteralSyntaxError(f"unbalanced {ch!r}", i)
            stack.pop()
            yield i, ch, len(stack)
        else:
            yield i, ch, len(stack)
        i += 1


def find_closing(text: str, open_index: int, end: int | None = None) -> int:
    """
    Find the index of the delimiter closing the one at ``open_index``.

    Raises:
        UnterminatedAggregate: If the opener is never closed before ``end``
    """
    opener = text[open_index]
    if opener not in OPENERS:
        raise LiteralSyntaxError(f"expected an opening delimiter, found {opener!r}", open_index)
    for index, ch, depth in walk(text, open_index, end):
        if depth == 0 and ch in CLOSERS:
            return index
    raise UnterminatedAggregate(open_index, opener)


def find_top_level(text: str, char: str, start: int = 0, end: int | None = None) -> int:
    """Index of the first ``char`` at depth 0 outside strings, or -1."""
    for index, ch, depth in walk(text, start, end):
        if depth == 0 and ch == char:
            return index
    return -1


def split_spans(text: str, start: int = 0, end: int | None = None) -> list[tuple[int, int]]:
    """
    Split ``text[start:end]`` on top-level commas.

    Returns whitespace-trimmed ``(start, end)`` spans in original offsets. A
    single empty trailing segment (dangling comma) is dropped; an entirely
    blank region yields no spans.
    """
    end = len(text) if end is None else end
    spans: list[tuple[int, int]] = []
    segment_start = start
    for index, ch, depth in walk(text, start, end):
        if depth == 0 and ch == ",":
            spans.append(_trim(text, segment_start, index))
            segment_start = index + 1
    last = _trim(text, segment_start, end)
    if last[0] < last[1] or spans:
        spans.append(last)
    if spans and spans[-1][0] == spans[-1][1]:
        spans.pop()
    return spans


def split_top_level(text: str) -> list[str]:
    """Split text on top-level commas into trimmed segments."""
    return [text[s:e] for s, e in split_spans(text)]


def blank_comments(text: str) -> str:
    """Replace Lua comments outside strings with spaces, keeping offsets intact."""
    chars = list(text)
    quote: str | None = None
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or ch == "\n":
                quote = None
            i += 1
            continue
        if ch in QUOTES:
            quote = ch
            i += 1
            continue
        if text.startswith("--", i):
            if text.startswith("--[[", i):
                close = text.find("]]", i + 4)
                stop = n if close == -1 else close + 2
            else:
                newline = text.find("\n", i)
                stop = n if newline == -1 else newline
            for j in range(i, stop):
                if chars[j] != "\n":
                    chars[j] = " "
            i = stop
            continue
        i += 1
    return "".join(chars)


def blank_strings(text: str, start: int = 0, end: int | None = None) -> str:
    """
    ``text[start:end]`` with string literal contents replaced by spaces.

    Quote characters stay and the length is unchanged, so index ``i`` in the
    result is ``start + i`` in the source.
    """
    end = len(text) if end is None else end
    chars = list(text[start:end])
    quote: str | None = None
    i = 0
    while i < len(chars):
        ch = chars[i]
        if quote:
            if ch == quote or ch == "\n":
                quote = None
            else:
                if ch == "\\" and i + 1 < len(chars) and chars[i + 1] != "\n":
                    chars[i + 1] = " "
                chars[i] = " "
                if ch == "\\":
                    i += 1
        elif ch in QUOTES:
            quote = ch
        i += 1
    return "".join(chars)


def _trim(text: str, start: int, end: int) -> tuple[int, int]:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end
