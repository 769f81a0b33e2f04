"""Input preprocessing and character classification."""

from __future__ import annotations

import re

from .constants import (
    CARRIAGE_RETURN,
    CARRIAGE_RETURN_LINE_FEED,
    EOF,
    HORIZONTAL_TAB,
    LINE_ENDINGS,
    LINE_FEED,
    REPLACEMENT_CHARACTER,
)
from .models import Code, Point

_LABEL_ESCAPE_PATTERN = re.compile(r"\\([\[\]\\])")


def preprocess(text: str) -> list[Code]:
    r"""Split text into the units consumed by tokenizers.

    ``\r\n`` becomes a single line-ending unit, lone ``\r`` and ``\n`` keep
    their own codes, tabs map to ``HORIZONTAL_TAB`` and NUL is replaced with
    U+FFFD. The list always ends with the EOF sentinel.

    Args:
        text: Source text.

    Returns:
        list[Code]: One unit per logical character, followed by ``None``.

    Examples:
        preprocess("a\r\nb")  # [97, -3, 98, None]
    """
    codes: list[Code] = []
    index = 0
    length = len(text)

    while index < length:
        character = text[index]
        if character == "\r":
            if index + 1 < length and text[index + 1] == "\n":
                codes.append(CARRIAGE_RETURN_LINE_FEED)
                index += 2
                continue
            codes.append(CARRIAGE_RETURN)
        elif character == "\n":
            codes.append(LINE_FEED)
        elif character == "\t":
            codes.append(HORIZONTAL_TAB)
        elif character == "\0":
            codes.append(REPLACEMENT_CHARACTER)
        else:
            codes.append(ord(character))
        index += 1

    codes.append(EOF)
    return codes


def markdown_line_ending(code: Code) -> bool:
    """Return True for carriage return, line feed, and CRLF units."""
    return code in LINE_ENDINGS


def advance_point(point: Point, code: Code) -> Point:
    """Compute the position following a consumed unit.

    Args:
        point: Position of the unit.
        code: The unit being consumed.

    Returns:
        Point: Position right after the unit.
    """
    if code == CARRIAGE_RETURN_LINE_FEED:
        return Point(line=point.line + 1, column=1, offset=point.offset + 2)
    if markdown_line_ending(code):
        return Point(line=point.line + 1, column=1, offset=point.offset + 1)
    return Point(line=point.line, column=point.column + 1, offset=point.offset + 1)


def unescape_label(content: str) -> str:
    r"""Resolve the escapes a label recognizes.

    Only ``\[``, ``\]`` and ``\\`` are escapes inside a label; any other
    backslash stays literal.

    Examples:
        unescape_label(r"a\]b")  # "a]b"
        unescape_label(r"a\b")  # "a\\b"
    """
    return _LABEL_ESCAPE_PATTERN.sub(r"\1", content)
