# /// script
# requires-python = ">=3.10"
# dependencies = ["pytest"]
# ///
"""Prototype Tests with eval_result / eval_option.

This example shows the assert-and-extract style in a small test module:
- eval_result to pull values out of Result-returning code
- eval_option for values that may be missing
- What the decorated report looks like when extraction fails

Run with: uv run pytest examples/test_prototype.py
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from evalwrap import Err, EvalAbort, Ok, Result, eval_option, eval_result, from_call, from_nullable

# =============================================================================
# Code Under Test
# =============================================================================


@dataclass
class Settings:
    host: str
    port: int


def parse_port(raw: str) -> Result[int, str]:
    port = from_call(int, raw).map_err(lambda exc: f"not a number: {raw!r}")
    return port.and_then(lambda p: Ok(p) if 0 < p < 65536 else Err(f"out of range: {p}"))


def parse_settings(raw: dict[str, str]) -> Result[Settings, str]:
    host = from_nullable(raw.get("host")).ok_or("missing host")
    return host.and_then(lambda h: parse_port(raw.get("port", "")).map(lambda p: Settings(h, p)))


# =============================================================================
# Tests
# =============================================================================


def test_settings_roundtrip() -> None:
    settings = eval_result(parse_settings({"host": "localhost", "port": "8080"}))
    assert settings == Settings("localhost", 8080)


def test_lookup_present() -> None:
    env = {"HOME": "/home/dev"}
    assert eval_option(env.get("HOME"), "HOME must be set") == "/home/dev"


def test_bad_port_report() -> None:
    with pytest.raises(EvalAbort) as exc_info:
        eval_result(parse_port("99999"))
    assert "| 'out of range: 99999'" in str(exc_info.value)


def test_missing_key_report() -> None:
    with pytest.raises(EvalAbort) as exc_info:
        eval_option({}.get("TOKEN"), "TOKEN must be exported for this test")
    assert "Option Evaluated to None ! TOKEN must be exported" in str(exc_info.value)


if __name__ == "__main__":
    # Show the report as it appears in output.
    try:
        eval_result(parse_settings({"port": "80"}))
    except EvalAbort as abort:
        print(abort)
        print(f"raised at {abort.location}")
