from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from mdc_label.character import markdown_line_ending, preprocess
from mdc_label.config import LabelConfig
from mdc_label.effects import EventRecorder
from mdc_label.scanner import drive, scan_labels
from mdc_label.tokenizer import create_label

label_body = st.text(alphabet="ab[]\\\n\r", max_size=40)


def _run(text: str, disallow_eol: bool = False):
    recorder = EventRecorder()
    received: list[tuple[str, int | None]] = []
    start = create_label(
        recorder,
        lambda code: received.append(("ok", code)),
        lambda code: received.append(("nok", code)),
        "label",
        "labelMarker",
        "labelString",
        disallow_eol,
    )
    codes = preprocess(text)
    drive(start, codes)
    return received, recorder, start, codes


@given(label_body, st.booleans())
def test_exactly_one_continuation_is_reached(body: str, disallow_eol: bool):
    received, _, _, _ = _run(f"[{body}", disallow_eol)

    assert len(received) == 1


@given(label_body, st.booleans())
def test_continuation_receives_first_unconsumed_unit(body: str, disallow_eol: bool):
    """Property: no unit is skipped or consumed twice before a hand-off."""
    received, recorder, _, codes = _run(f"[{body}", disallow_eol)

    (_, code) = received[0]
    assert code == codes[recorder.consumed]


@given(label_body)
def test_successful_parse_is_well_formed(body: str):
    received, recorder, start, _ = _run(f"[{body}")

    if received[0][0] != "ok":
        return
    assert recorder.is_balanced
    (label,) = recorder.tree()
    assert label.type == "label"
    assert label.children[0].type == "labelMarker"
    assert label.children[-1].type == "labelMarker"
    assert start.ctx.balance == 0


@given(label_body)
def test_balance_stays_within_depth_limit(body: str):
    _, _, start, _ = _run(f"[{body}")

    assert 0 <= start.ctx.balance <= start.ctx.max_depth


@given(label_body)
def test_disallowed_line_endings_never_appear_in_labels(body: str):
    received, recorder, _, _ = _run(f"[{body}", disallow_eol=True)

    consumed = [event.code for event in recorder.events if event.code is not None]
    if received[0][0] == "ok":
        assert not any(markdown_line_ending(code) for code in consumed)


@given(st.text(alphabet="xy [\\]\n", max_size=60), st.booleans())
def test_scanned_labels_are_ordered_slices_of_source(text: str, disallow_eol: bool):
    labels = scan_labels(text, LabelConfig(disallow_eol=disallow_eol))

    previous_end = 0
    for label in labels:
        assert label.raw == text[label.start.offset : label.end.offset]
        assert label.raw.startswith("[")
        assert label.raw.endswith("]")
        assert label.start.offset >= previous_end
        previous_end = label.end.offset


@given(st.text(max_size=80))
def test_scan_never_raises(text: str):
    scan_labels(text)
