from __future__ import annotations

import logging

import pytest

from mdc_label.character import preprocess
from mdc_label.config import ConfigError, LabelConfig
from mdc_label.models import Point
from mdc_label.scanner import attempt_label, drive, scan_labels


def test_scan_finds_label_with_positions():
    (label,) = scan_labels("see [docs] here")

    assert label.raw == "[docs]"
    assert label.content == "docs"
    assert label.text == "docs"
    assert label.start == Point(1, 5, 4)
    assert label.end == Point(1, 11, 10)
    assert label.escapes == 0


def test_scan_resolves_escapes_in_text():
    (label,) = scan_labels("[a\\]b]")

    assert label.content == "a\\]b"
    assert label.text == "a]b"
    assert label.escapes == 1


def test_scan_keeps_empty_label():
    (label,) = scan_labels("x[]y")

    assert label.raw == "[]"
    assert label.text == ""
    assert [child.type for child in label.tokens[0].children] == ["labelMarker", "labelMarker"]


def test_scan_skips_escaped_opening_bracket():
    labels = scan_labels("\\[no] [yes]")

    assert [label.raw for label in labels] == ["[yes]"]


def test_scan_reinterprets_failed_bracket_as_text():
    labels = scan_labels("[a [b]")

    assert [label.raw for label in labels] == ["[b]"]
    assert labels[0].start.offset == 3


def test_scan_does_not_rescan_inside_labels():
    labels = scan_labels(":button[Click [me]] and [x]")

    assert [label.raw for label in labels] == ["[Click [me]]", "[x]"]


def test_scan_spans_lines_by_default():
    labels = scan_labels("[a\nb] [c]")

    assert [label.raw for label in labels] == ["[a\nb]", "[c]"]
    assert labels[0].end == Point(2, 3, 5)
    assert labels[1].start == Point(2, 4, 6)


def test_scan_respects_disallow_eol():
    labels = scan_labels("[a\nb] [c]", LabelConfig(disallow_eol=True))

    assert [label.raw for label in labels] == ["[c]"]


def test_scan_keeps_crlf_in_raw_text():
    (label,) = scan_labels("[a\r\nb]")

    assert label.raw == "[a\r\nb]"
    assert label.end.offset == 6


def test_scan_uses_configured_span_types():
    config = LabelConfig(
        label_type="componentTextLabel",
        marker_type="componentTextLabelMarker",
        string_type="componentTextLabelString",
    )
    (label,) = scan_labels("[x]", config)

    (token,) = label.tokens
    assert token.type == "componentTextLabel"
    assert [child.type for child in token.children] == [
        "componentTextLabelMarker",
        "componentTextLabelString",
        "componentTextLabelMarker",
    ]


def test_scan_rejects_invalid_config():
    with pytest.raises(ConfigError):
        scan_labels("[x]", LabelConfig(max_depth=0))


def test_scan_logs_failed_attempts(caplog):
    with caplog.at_level(logging.DEBUG, logger="mdc_label"):
        scan_labels("[open")

    assert "No label at 1:1" in caplog.text


def test_attempt_label_reports_consumed_units():
    text = "ab[c]d"
    codes = preprocess(text)

    label, units = attempt_label(text, codes, 2, Point(1, 3, 2), LabelConfig())

    assert label.raw == "[c]"
    assert units == 3


def test_attempt_label_returns_none_on_failure():
    text = "[c"
    assert attempt_label(text, preprocess(text), 0, Point(), LabelConfig()) is None


def test_drive_stops_when_state_finishes():
    seen: list[int | None] = []

    def collect(code):
        seen.append(code)
        return None if code == ord("b") else collect

    assert drive(collect, preprocess("abc")) is None
    assert seen == [ord("a"), ord("b")]


def test_drive_returns_pending_state():
    def forever(code):
        return forever

    assert drive(forever, [ord("a")]) is forever
