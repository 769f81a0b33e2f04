"""Package-specific exception types."""

from __future__ import annotations


class TokenizeError(ValueError):
    """Base class for tokenizer contract violations.

    A malformed label is never reported through these; it is handed to the
    caller's failure continuation instead.
    """


class UnexpectedCodeError(TokenizeError):
    """Raised when a state receives a unit the caller promised it would not.

    Args:
        code: The offending input unit (``None`` for end of input).
        expected: Human readable description of what was expected.
    """

    def __init__(self, code: int | None, expected: str):
        self.code = code
        self.expected = expected
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        found = "end of input" if self.code is None else f"code {self.code}"
        return f"Expected {self.expected}, found {found}"


class UnbalancedSpanError(TokenizeError):
    """Raised when enter/exit events do not nest strictly.

    Args:
        expected: Type of the innermost open span, or None when none is open.
        actual: Type passed to the offending ``exit`` call, or None when the
            stream ended with spans still open.
    """

    def __init__(self, expected: str | None, actual: str | None):
        self.expected = expected
        self.actual = actual
        if actual is None:
            message = f"Span `{expected}` was never exited"
        elif expected is None:
            message = f"Cannot exit `{actual}`: no span is open"
        else:
            message = f"Cannot exit `{actual}` while `{expected}` is open"
        super().__init__(message)
