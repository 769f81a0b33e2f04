"""Label tokenizer for bracketed inline spans.

Recognizes ``[…]`` labels one unit at a time. Unlike the CommonMark label
grammar it allows empty labels, balanced nested bracket groups (used by
component slots and attributes), and optionally forbids line endings.

Each transition inspects the next unit and either consumes it and names the
next `LabelState`, re-evaluates the same unit in another state by calling
that transition directly, or hands off to one of the caller's
continuations. Nothing is ever consumed and then reverted.
"""

from __future__ import annotations

from collections.abc import Callable

from .character import markdown_line_ending
from .constants import (
    BACKSLASH,
    CHUNK_TEXT_TYPE,
    CLOSING_SQUARE_BRACKET,
    EOF,
    LABEL_ESCAPABLE,
    LINE_ENDING_TYPE,
    MAX_LABEL_DEPTH,
    MAX_LABEL_SIZE,
    OPENING_SQUARE_BRACKET,
)
from .effects import Effects
from .exceptions import UnexpectedCodeError
from .models import Code, LabelContext, LabelState, State, Transition


def _start(ctx: LabelContext, code: Code) -> Transition:
    if code != OPENING_SQUARE_BRACKET:
        raise UnexpectedCodeError(code, "`[`")
    ctx.effects.enter(ctx.type)
    ctx.effects.enter(ctx.marker_type)
    ctx.effects.consume(code)
    ctx.effects.exit(ctx.marker_type)
    return LabelState.AFTER_START


def _after_start(ctx: LabelContext, code: Code) -> Transition:
    if code == CLOSING_SQUARE_BRACKET:
        ctx.effects.enter(ctx.marker_type)
        ctx.effects.consume(code)
        ctx.effects.exit(ctx.marker_type)
        ctx.effects.exit(ctx.type)
        return ctx.ok

    ctx.effects.enter(ctx.string_type)
    return _at_break(ctx, code)


def _at_break(ctx: LabelContext, code: Code) -> Transition:
    if code is EOF or ctx.size > ctx.max_size:
        return ctx.nok(code)

    # A `]` that closes a nested group is content and is handled by `_label`
    if code == CLOSING_SQUARE_BRACKET and not ctx.balance:
        return _at_closing_brace(ctx, code)

    if markdown_line_ending(code):
        if ctx.disallow_eol:
            return ctx.nok(code)
        ctx.effects.enter(LINE_ENDING_TYPE)
        ctx.effects.consume(code)
        ctx.effects.exit(LINE_ENDING_TYPE)
        return LabelState.AT_BREAK

    ctx.effects.enter(CHUNK_TEXT_TYPE)
    return _label(ctx, code)


def _label(ctx: LabelContext, code: Code) -> Transition:
    if code is EOF or markdown_line_ending(code) or ctx.size > ctx.max_size:
        ctx.effects.exit(CHUNK_TEXT_TYPE)
        return _at_break(ctx, code)

    if code == OPENING_SQUARE_BRACKET:
        ctx.balance += 1
        # The outer brackets are the first level
        if ctx.balance + 1 > ctx.max_depth:
            return ctx.nok(code)
    elif code == CLOSING_SQUARE_BRACKET:
        if not ctx.balance:
            ctx.effects.exit(CHUNK_TEXT_TYPE)
            return _at_closing_brace(ctx, code)
        ctx.balance -= 1

    ctx.effects.consume(code)
    return LabelState.LABEL_ESCAPE if code == BACKSLASH else LabelState.LABEL


def _at_closing_brace(ctx: LabelContext, code: Code) -> Transition:
    ctx.effects.exit(ctx.string_type)
    ctx.effects.enter(ctx.marker_type)
    ctx.effects.consume(code)
    ctx.effects.exit(ctx.marker_type)
    ctx.effects.exit(ctx.type)
    return ctx.ok


def _label_escape(ctx: LabelContext, code: Code) -> Transition:
    if code in LABEL_ESCAPABLE:
        ctx.effects.consume(code)
        ctx.size += 1
        return LabelState.LABEL

    # The backslash was already consumed as literal content
    return _label(ctx, code)


_TRANSITIONS: dict[LabelState, Callable[[LabelContext, Code], Transition]] = {
    LabelState.START: _start,
    LabelState.AFTER_START: _after_start,
    LabelState.AT_BREAK: _at_break,
    LabelState.LABEL: _label,
    LabelState.LABEL_ESCAPE: _label_escape,
    LabelState.AT_CLOSING_BRACE: _at_closing_brace,
}


class LabelTokenizer:
    """Callable state driving one label scan.

    Calling the tokenizer with a unit returns the state for the following
    unit: the tokenizer itself while the label is open, the success
    continuation once the closing bracket is consumed, or the result of the
    failure continuation.

    Args:
        ctx: Context for this invocation; never shared with another scan.
    """

    def __init__(self, ctx: LabelContext):
        self.ctx = ctx

    @property
    def state(self) -> LabelState:
        return self.ctx.state

    def __call__(self, code: Code) -> State | None:
        outcome = _TRANSITIONS[self.ctx.state](self.ctx, code)
        if isinstance(outcome, LabelState):
            self.ctx.state = outcome
            return self
        return outcome


def create_label(
    effects: Effects,
    ok: State,
    nok: State,
    type_: str,
    marker_type: str,
    string_type: str,
    disallow_eol: bool = False,
    *,
    max_depth: int = MAX_LABEL_DEPTH,
    max_size: int = MAX_LABEL_SIZE,
) -> LabelTokenizer:
    """Create the start state of a label tokenizer.

    The first unit fed to the returned state must be ``[``; callers check
    this with their own lookahead.

    Args:
        effects: Emission interface receiving the span events.
        ok: Continuation that receives the unit after the closing bracket.
        nok: Continuation called with the unit that made the label malformed.
        type_: Span type of the whole label.
        marker_type: Span type of the opening and closing brackets.
        string_type: Span type of the content between the brackets.
        disallow_eol: Fail on any line ending inside the label.
        max_depth: Deepest bracket nesting allowed, counting the outer
            brackets.
        max_size: Escaped characters allowed before the label fails.

    Returns:
        LabelTokenizer: State expecting the opening bracket.

    Raises:
        UnexpectedCodeError: When the first unit is not ``[`` (raised on that
            call, not here).

    Examples:
        start = create_label(recorder, ok, nok, "label", "labelMarker", "labelString")
        state = start(ord("["))
    """
    ctx = LabelContext(
        effects=effects,
        ok=ok,
        nok=nok,
        type=type_,
        marker_type=marker_type,
        string_type=string_type,
        disallow_eol=disallow_eol,
        max_depth=max_depth,
        max_size=max_size,
    )
    return LabelTokenizer(ctx)
