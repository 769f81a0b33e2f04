from mdc_label.effects import EventRecorder
from mdc_label.models import LabelContext, LabelState, Point


def test_label_state_members():
    assert list(LabelState) == [
        LabelState.START,
        LabelState.AFTER_START,
        LabelState.AT_BREAK,
        LabelState.LABEL,
        LabelState.LABEL_ESCAPE,
        LabelState.AT_CLOSING_BRACE,
    ]


def test_label_context_defaults():
    ctx = LabelContext(
        effects=EventRecorder(),
        ok=print,
        nok=print,
        type="label",
        marker_type="labelMarker",
        string_type="labelString",
    )

    assert ctx.state is LabelState.START
    assert ctx.balance == 0
    assert ctx.size == 0
    assert ctx.disallow_eol is False
    assert ctx.max_depth == 3
    assert ctx.max_size == 999


def test_point_defaults_to_start_of_text():
    assert Point() == Point(line=1, column=1, offset=0)
