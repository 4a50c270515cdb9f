from __future__ import annotations

from typing import NamedTuple


class UnwrapError(Exception):
    """Raised when unwrap() is called on an Err or Nothing, or unwrap_err() on an Ok."""

    def __init__(self, message: str, value: object):
        self.value = value
        super().__init__(message)


class CallSite(NamedTuple):
    filename: str
    lineno: int
    function: str

    def __str__(self) -> str:
        return f"{self.filename}:{self.lineno} in {self.function}"


class EvalAbort(BaseException):
    """Raised by eval_result / eval_option when extraction fails.

    Derives from BaseException so that `except Exception:` blocks in the
    code under test do not catch it. str() of the exception is the
    decorated report.
    """

    def __init__(self, report: str, value: object, location: CallSite | None = None):
        self.report = report
        self.value = value
        self.location = location
        super().__init__(report)
