"""Assert-and-extract helpers for tests and prototypes.

eval_result and eval_option unwrap a Result or an optional value. When
there is nothing to extract they raise EvalAbort with a dash-bracketed
report that is easy to spot in test-runner output:

    eval_result(Err("disk full"))

    raises EvalAbort with str() ==

        "\\n\\n ------...------\\n| 'disk full'\\n ------...------\\n\\n"

EvalAbort derives from BaseException, so it terminates the calling thread
or task instead of being swallowed by `except Exception:` handlers.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, TypeVar, overload

from typing_extensions import Never

from evalwrap.exceptions import CallSite, EvalAbort
from evalwrap.option import Option
from evalwrap.result import Result

T = TypeVar("T")

logger = logging.getLogger(__name__)

DECORATOR_WIDTH = 50
DECORATOR = "-" * DECORATOR_WIDTH
NONE_MESSAGE = "Option Evaluated to None ! "


def format_report(value: object) -> str:
    """Wrap repr(value) in the dash-bracketed failure envelope."""
    return f"\n\n {DECORATOR}\n| {value!r}\n {DECORATOR}\n\n"


def _caller_site() -> CallSite | None:
    # Two frames up: past _caller_site and the eval_* helper.
    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        if caller is None:
            return None
        code = caller.f_code
        return CallSite(code.co_filename, caller.f_lineno, code.co_name)
    finally:
        del frame


def _abort(value: object, location: CallSite | None) -> Never:
    __tracebackhide__ = True
    report = format_report(value)
    logger.debug("aborting at %s", location or "<unknown>")
    raise EvalAbort(report, value, location)


def eval_result(result: Result[T, Any]) -> T:
    """Return the Ok value, or abort with a decorated report of the Err value.

    >>> eval_result(Ok("Hello"))
    'Hello'
    """
    __tracebackhide__ = True
    if not isinstance(result, Result):
        raise TypeError(f"eval_result expects a Result, got {type(result).__name__}")
    if result.is_ok():
        return result.unwrap()
    _abort(result.unwrap_err(), _caller_site())


@overload
def eval_option(option: Option[T], description: str) -> T: ...  # type: ignore[overload-overlap]


@overload
def eval_option(option: T | None, description: str) -> T: ...


def eval_option(option: Any, description: str) -> Any:
    """Return the present value, or abort with NONE_MESSAGE + description.

    `option` is either an Option (Some / NOTHING) or a plain nullable value,
    where None counts as absent. A Result is rejected with TypeError.

    >>> eval_option(Some("Hello"), "greeting must be set")
    'Hello'
    """
    __tracebackhide__ = True
    if isinstance(option, Result):
        raise TypeError("eval_option expects an Option or a nullable value, got a Result; use eval_result")
    if isinstance(option, Option):
        if option.is_some():
            return option.unwrap()
    elif option is not None:
        return option
    _abort(NONE_MESSAGE + description, _caller_site())
