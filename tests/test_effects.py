from __future__ import annotations

import pytest

from mdc_label.effects import EventRecorder
from mdc_label.exceptions import UnbalancedSpanError, UnexpectedCodeError
from mdc_label.models import EventKind, Point


def test_recorder_tracks_points_and_consumed_units():
    recorder = EventRecorder(start=Point(3, 7, 40))

    recorder.enter("outer")
    recorder.consume(ord("a"))
    recorder.consume(ord("b"))
    recorder.exit("outer")

    assert recorder.point == Point(3, 9, 42)
    assert recorder.consumed == 2
    assert [event.kind for event in recorder.events] == [
        EventKind.ENTER,
        EventKind.CONSUME,
        EventKind.CONSUME,
        EventKind.EXIT,
    ]


def test_tree_nests_children():
    recorder = EventRecorder()
    recorder.enter("outer")
    recorder.enter("first")
    recorder.consume(ord("a"))
    recorder.exit("first")
    recorder.enter("second")
    recorder.consume(ord("b"))
    recorder.exit("second")
    recorder.exit("outer")

    (outer,) = recorder.tree()
    assert outer.type == "outer"
    assert [child.type for child in outer.children] == ["first", "second"]
    assert outer.children[1].start == Point(1, 2, 1)
    assert outer.end == Point(1, 3, 2)


def test_exit_must_match_innermost_span():
    recorder = EventRecorder()
    recorder.enter("outer")
    recorder.enter("inner")

    with pytest.raises(UnbalancedSpanError) as excinfo:
        recorder.exit("outer")

    assert excinfo.value.expected == "inner"
    assert excinfo.value.actual == "outer"


def test_exit_without_open_span():
    with pytest.raises(UnbalancedSpanError):
        EventRecorder().exit("outer")


def test_tree_rejects_open_spans():
    recorder = EventRecorder()
    recorder.enter("outer")

    assert recorder.is_balanced is False
    assert recorder.open_spans == ("outer",)
    with pytest.raises(UnbalancedSpanError):
        recorder.tree()


def test_end_of_input_cannot_be_consumed():
    with pytest.raises(UnexpectedCodeError):
        EventRecorder().consume(None)
