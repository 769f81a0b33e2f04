"""Token emission interface and an in-memory event recorder."""

from __future__ import annotations

from typing import Protocol

from .character import advance_point
from .exceptions import UnbalancedSpanError, UnexpectedCodeError
from .models import Code, Event, EventKind, Point, Token


class Effects(Protocol):
    """Interface tokenizers emit their events through."""

    def enter(self, type_: str) -> None: ...

    def consume(self, code: Code) -> None: ...

    def exit(self, type_: str) -> None: ...


class EventRecorder:
    """Record enter/consume/exit calls as a flat event stream.

    Enforces strict nesting: exiting anything but the innermost open span
    raises `UnbalancedSpanError`.

    Args:
        start: Position of the first unit that will be consumed.

    Examples:
        recorder = EventRecorder()
        recorder.enter("label")
        recorder.consume(ord("["))
        recorder.exit("label")
        recorder.tree()  # [Token("label", Point(1, 1, 0), Point(1, 2, 1))]
    """

    def __init__(self, start: Point | None = None):
        self.events: list[Event] = []
        self.point = start or Point()
        self.consumed = 0
        self._stack: list[str] = []

    @property
    def open_spans(self) -> tuple[str, ...]:
        """Types of the spans entered but not yet exited, outermost first."""
        return tuple(self._stack)

    @property
    def is_balanced(self) -> bool:
        return not self._stack

    def enter(self, type_: str) -> None:
        self._stack.append(type_)
        self.events.append(Event(EventKind.ENTER, type_, self.point))

    def consume(self, code: Code) -> None:
        if code is None:
            raise UnexpectedCodeError(code, "a unit to consume")
        innermost = self._stack[-1] if self._stack else None
        self.events.append(Event(EventKind.CONSUME, innermost, self.point, code))
        self.point = advance_point(self.point, code)
        self.consumed += 1

    def exit(self, type_: str) -> None:
        if not self._stack or self._stack[-1] != type_:
            raise UnbalancedSpanError(self._stack[-1] if self._stack else None, type_)
        self._stack.pop()
        self.events.append(Event(EventKind.EXIT, type_, self.point))

    def tree(self) -> list[Token]:
        """Rebuild the span hierarchy from the recorded events.

        Returns:
            list[Token]: Top-level tokens, each holding its nested children.

        Raises:
            UnbalancedSpanError: If a span is still open.
        """
        if self._stack:
            raise UnbalancedSpanError(self._stack[-1], None)

        roots: list[Token] = []
        open_tokens: list[Token] = []
        for event in self.events:
            if event.kind is EventKind.ENTER:
                token = Token(event.type, start=event.point, end=event.point)
                siblings = open_tokens[-1].children if open_tokens else roots
                siblings.append(token)
                open_tokens.append(token)
            elif event.kind is EventKind.EXIT:
                open_tokens.pop().end = event.point
        return roots
