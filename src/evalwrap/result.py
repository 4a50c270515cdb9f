from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Literal, TypeVar

from evalwrap.exceptions import UnwrapError

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success
F = TypeVar("F")  # Mapped error


class Result(ABC, Generic[T, E]):
    """A Rust-like Result type: either Ok(value) or Err(error)."""

    __slots__ = ()

    @abstractmethod
    def is_ok(self) -> bool: ...

    @abstractmethod
    def unwrap(self) -> T: ...

    @abstractmethod
    def unwrap_err(self) -> E: ...

    def is_err(self) -> bool:
        return not self.is_ok()

    def expect(self, msg: str) -> T:
        if self.is_ok():
            return self.unwrap()
        raise UnwrapError(f"{msg}: {self.unwrap_err()!r}", self.unwrap_err())

    def unwrap_or(self, default: T) -> T:
        return self.unwrap() if self.is_ok() else default

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        if self.is_ok():
            return Ok(fn(self.unwrap()))
        return Err(self.unwrap_err())

    def map_err(self, fn: Callable[[E], F]) -> Result[T, F]:
        if self.is_err():
            return Err(fn(self.unwrap_err()))
        return Ok(self.unwrap())

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.unwrap()) if self.is_ok() else Err(self.unwrap_err())


class Ok(Result[T, E]):
    __slots__ = ("_value",)
    __match_args__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Ok({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Ok) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Ok", self._value))

    def is_ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> T:
        return self._value

    def unwrap_err(self) -> E:
        raise UnwrapError("Called unwrap_err on Ok", self._value)


class Err(Result[T, E]):
    __slots__ = ("_error",)
    __match_args__ = ("_error",)

    def __init__(self, error: E) -> None:
        self._error = error

    def __repr__(self) -> str:
        return f"Err({self._error!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Err) and self._error == other._error

    def __hash__(self) -> int:
        return hash(("Err", self._error))

    def is_ok(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        raise UnwrapError("Called unwrap on Err", self._error)

    def unwrap_err(self) -> E:
        return self._error


def is_ok(result: Result[Any, Any]) -> bool:
    return result.is_ok()


def is_err(result: Result[Any, Any]) -> bool:
    return result.is_err()


def from_call(
    fn: Callable[..., T],
    *args: Any,
    catch: type[BaseException] | tuple[type[BaseException], ...] = Exception,
    **kwargs: Any,
) -> Result[T, BaseException]:
    """Call fn and capture a raised exception as Err.

    from_call(int, "42")  → Ok(42)
    from_call(int, "x")   → Err(ValueError(...))

    Only exceptions matching `catch` are captured; anything else propagates.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except catch as exc:
        return Err(exc)
