"""Constants used across the mdc-label package."""

from __future__ import annotations

# Sentinel codes, matching the values downstream micromark renderers expect
EOF = None
CARRIAGE_RETURN = -5
LINE_FEED = -4
CARRIAGE_RETURN_LINE_FEED = -3
HORIZONTAL_TAB = -2

BACKSLASH = ord("\\")
OPENING_SQUARE_BRACKET = ord("[")
CLOSING_SQUARE_BRACKET = ord("]")
REPLACEMENT_CHARACTER = 0xFFFD

LINE_ENDINGS = frozenset({CARRIAGE_RETURN, LINE_FEED, CARRIAGE_RETURN_LINE_FEED})
LABEL_ESCAPABLE = frozenset({OPENING_SQUARE_BRACKET, BACKSLASH, CLOSING_SQUARE_BRACKET})

# Span types emitted inside a label's content
LINE_ENDING_TYPE = "lineEnding"
CHUNK_TEXT_TYPE = "chunkText"

# Limits
MAX_LABEL_DEPTH = 3
MAX_LABEL_SIZE = 999  # same ceiling as micromark's linkReferenceSizeMax
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024
