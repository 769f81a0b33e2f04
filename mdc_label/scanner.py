"""Drive label tokenizers over source text."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice

from .character import advance_point, preprocess, unescape_label
from .config import LabelConfig, validate_config
from .constants import BACKSLASH, EOF, LABEL_ESCAPABLE, OPENING_SQUARE_BRACKET
from .effects import EventRecorder
from .logger import get_logger
from .models import Code, Label, Point, State
from .tokenizer import create_label

logger = get_logger(__name__)


def drive(state: State | None, codes: Iterable[Code]) -> State | None:
    """Feed units into a state until one returns None or the units run out.

    Shared by every tokenizer whose states take one unit and return the
    state for the next.

    Args:
        state: Start state.
        codes: Units to feed, normally ending with the EOF sentinel.

    Returns:
        State | None: The state waiting for the next unit, or None once a
            state finished the scan.
    """
    for code in codes:
        if state is None:
            break
        state = state(code)
    return state


def attempt_label(
    text: str, codes: list[Code], index: int, point: Point, config: LabelConfig
) -> tuple[Label, int] | None:
    """Try to tokenize a label starting at ``codes[index]``.

    Args:
        text: Source text the units were produced from.
        codes: Units of the whole source, as returned by `preprocess`.
        index: Index of the opening bracket in `codes`.
        point: Position of the opening bracket.
        config: Span types and grammar limits.

    Returns:
        tuple[Label, int] | None: The label and the number of units it spans,
            or None when the bracket does not open a well-formed label.
    """
    recorder = EventRecorder(start=point)
    outcome: list[bool] = []

    def ok(code: Code) -> None:
        outcome.append(True)

    def nok(code: Code) -> None:
        outcome.append(False)

    start = create_label(
        recorder,
        ok,
        nok,
        config.label_type,
        config.marker_type,
        config.string_type,
        config.disallow_eol,
        max_depth=config.max_depth,
        max_size=config.max_escapes,
    )
    drive(start, islice(codes, index, None))

    if not outcome or not outcome[0]:
        logger.debug(
            "No label at %d:%d (gave up at %d:%d)",
            point.line,
            point.column,
            recorder.point.line,
            recorder.point.column,
        )
        return None

    end = recorder.point
    raw = text[point.offset : end.offset]
    content = raw[1:-1]
    label = Label(
        start=point,
        end=end,
        raw=raw,
        content=content,
        text=unescape_label(content),
        escapes=start.ctx.size,
        tokens=recorder.tree(),
    )
    return label, recorder.consumed


def scan_labels(text: str, config: LabelConfig | None = None) -> list[Label]:
    r"""Find every well-formed label in `text`.

    A ``[`` that does not open a well-formed label is read as plain text and
    scanning resumes right after it. Backslash-escaped brackets never open a
    label, and recognized labels are not searched for inner labels.

    Args:
        text: Source text.
        config: Span types and grammar limits. Defaults to a new `LabelConfig`.

    Returns:
        list[Label]: Labels in source order.

    Raises:
        ConfigError: If the configuration fails validation.

    Examples:
        scan_labels("see [docs] and \\[not this]")  # one label, "docs"
    """
    config = config or LabelConfig()
    validate_config(config)

    codes = preprocess(text)
    labels: list[Label] = []
    point = Point()
    index = 0

    while codes[index] is not EOF:
        code = codes[index]

        if code == BACKSLASH and codes[index + 1] in LABEL_ESCAPABLE:
            point = advance_point(advance_point(point, code), codes[index + 1])
            index += 2
            continue

        if code == OPENING_SQUARE_BRACKET:
            attempt = attempt_label(text, codes, index, point, config)
            if attempt is not None:
                label, units = attempt
                labels.append(label)
                point = label.end
                index += units
                continue

        point = advance_point(point, code)
        index += 1

    logger.debug("Found %d label(s) in %d unit(s)", len(labels), len(codes) - 1)
    return labels
