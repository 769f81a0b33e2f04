"""Data models for mdc-label."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Optional, Union

from .constants import MAX_LABEL_DEPTH, MAX_LABEL_SIZE

if TYPE_CHECKING:
    from .effects import Effects

# An input unit: a code point, a negative line-ending/tab code, or None for EOF
Code = Optional[int]

# A state receives the next unit and returns the state for the unit after it
State = Callable[[Code], Any]


class LabelState(Enum):
    """States of the label tokenizer.

    Attributes:
        START: Expecting the opening bracket.
        AFTER_START: Right after the opening bracket; detects empty labels.
        AT_BREAK: Before starting or resuming a text chunk.
        LABEL: Inside a text chunk.
        LABEL_ESCAPE: After a backslash inside a text chunk.
        AT_CLOSING_BRACE: At the bracket that closes the label.
    """

    START = auto()
    AFTER_START = auto()
    AT_BREAK = auto()
    LABEL = auto()
    LABEL_ESCAPE = auto()
    AT_CLOSING_BRACE = auto()


@dataclass
class LabelContext:
    """Per-invocation record threaded through every tokenizer transition.

    Attributes:
        effects: Emission interface receiving enter/consume/exit calls.
        ok: Continuation reached after the closing bracket.
        nok: Continuation called with the unit that made the label malformed.
        type: Span type of the whole label.
        marker_type: Span type of each bracket.
        string_type: Span type of the content between the brackets.
        disallow_eol: Whether a line ending inside the label is a failure.
        max_depth: Deepest nesting allowed, counting the outer brackets.
        max_size: Escaped characters allowed before the label fails.
        state: Current state.
        balance: Nested bracket groups currently open inside the content.
        size: Escaped characters consumed so far.
    """

    effects: Effects
    ok: State
    nok: State
    type: str
    marker_type: str
    string_type: str
    disallow_eol: bool = False
    max_depth: int = MAX_LABEL_DEPTH
    max_size: int = MAX_LABEL_SIZE
    state: LabelState = LabelState.START
    balance: int = 0
    size: int = 0


# What a transition returns: the next state after consuming, or a hand-off
Transition = Union[LabelState, State, None]


@dataclass(frozen=True)
class Point:
    """Position in the source text.

    Attributes:
        line: One-based line number.
        column: One-based column number.
        offset: Zero-based index into the source string.
    """

    line: int = 1
    column: int = 1
    offset: int = 0


class EventKind(Enum):
    ENTER = auto()
    CONSUME = auto()
    EXIT = auto()


@dataclass(frozen=True)
class Event:
    """One entry of the output event stream.

    Attributes:
        kind: Whether a span was entered, exited, or a unit consumed.
        type: Span type; for consumed units, the innermost open span.
        point: Position at the time of the event.
        code: The consumed unit, for CONSUME events.
    """

    kind: EventKind
    type: str | None
    point: Point
    code: Code = None


@dataclass
class Token:
    """A span rebuilt from matching enter and exit events."""

    type: str
    start: Point
    end: Point
    children: list[Token] = field(default_factory=list)


@dataclass
class Label:
    """A label recognized by the scanner.

    Attributes:
        start: Position of the opening bracket.
        end: Position just past the closing bracket.
        raw: Source text, brackets included.
        content: Source text between the brackets.
        text: Content with the label escapes resolved.
        escapes: Number of escape sequences consumed.
        tokens: Token tree emitted for the label.
    """

    start: Point
    end: Point
    raw: str
    content: str
    text: str
    escapes: int
    tokens: list[Token]
