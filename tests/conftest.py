import pytest
from click.testing import CliRunner

from mdc_label.character import preprocess
from mdc_label.effects import EventRecorder
from mdc_label.scanner import drive
from mdc_label.tokenizer import create_label


@pytest.fixture()
def cli_runner() -> CliRunner:
    """Provides a reusable Click CLI runner."""
    return CliRunner()


@pytest.fixture()
def tokenize():
    """Runs one label tokenizer over a string.

    Returns the continuation reached with the unit it received, the recorder,
    and the tokenizer itself.
    """

    def _tokenize(text: str, disallow_eol: bool = False, **limits):
        recorder = EventRecorder()
        received: list[tuple[str, int | None]] = []

        def ok(code):
            received.append(("ok", code))

        def nok(code):
            received.append(("nok", code))

        start = create_label(
            recorder, ok, nok, "label", "labelMarker", "labelString", disallow_eol, **limits
        )
        drive(start, preprocess(text))
        assert len(received) == 1
        return received[0], recorder, start

    return _tokenize
