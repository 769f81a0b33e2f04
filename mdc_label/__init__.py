"""
mdc-label: streaming tokenizer for bracketed labels in markdown components.

This package can be used both as a CLI tool and as a library.

CLI Usage:
    mdc-label README.md

Library Usage:
    from mdc_label import EventRecorder, create_label, drive, preprocess

    recorder = EventRecorder()
    start = create_label(recorder, ok, nok, "label", "labelMarker", "labelString")
    drive(start, preprocess("[text] after"))

    # or let the scanner play the caller:
    from mdc_label import scan_labels

    labels = scan_labels("A [link] and a :component[slot [nested]]")
"""

from .character import markdown_line_ending, preprocess, unescape_label
from .config import ConfigError, LabelConfig
from .effects import Effects, EventRecorder
from .exceptions import TokenizeError, UnbalancedSpanError, UnexpectedCodeError
from .models import Event, EventKind, Label, LabelContext, LabelState, Point, Token
from .scanner import attempt_label, drive, scan_labels
from .tokenizer import LabelTokenizer, create_label

__version__ = "0.1.0"

__all__ = [
    # Core functionality
    "create_label",
    "LabelTokenizer",
    "drive",
    "scan_labels",
    "attempt_label",
    # Input units
    "preprocess",
    "markdown_line_ending",
    "unescape_label",
    # Emission
    "Effects",
    "EventRecorder",
    # Data models
    "Event",
    "EventKind",
    "Label",
    "LabelContext",
    "LabelState",
    "Point",
    "Token",
    "LabelConfig",
    # Exceptions
    "ConfigError",
    "TokenizeError",
    "UnbalancedSpanError",
    "UnexpectedCodeError",
    # Version
    "__version__",
]
