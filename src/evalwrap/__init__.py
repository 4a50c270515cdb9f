from __future__ import annotations

import logging

from evalwrap.abort import DECORATOR, DECORATOR_WIDTH, NONE_MESSAGE, eval_option, eval_result, format_report
from evalwrap.exceptions import CallSite, EvalAbort, UnwrapError
from evalwrap.option import NOTHING, Nothing, Option, Some, from_nullable, is_nothing, is_some
from evalwrap.result import Err, Ok, Result, from_call, is_err, is_ok

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Unwrap helpers
    "eval_result",
    "eval_option",
    "format_report",
    "DECORATOR",
    "DECORATOR_WIDTH",
    "NONE_MESSAGE",
    # Result types
    "Result",
    "Ok",
    "Err",
    "from_call",
    "is_ok",
    "is_err",
    # Option types
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "from_nullable",
    "is_some",
    "is_nothing",
    # Errors
    "EvalAbort",
    "CallSite",
    "UnwrapError",
]
