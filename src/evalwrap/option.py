from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Literal, TypeVar

from evalwrap.exceptions import UnwrapError
from evalwrap.result import Err, Ok, Result

T = TypeVar("T")  # Present type
U = TypeVar("U")  # Mapped type
E = TypeVar("E")  # Error type for ok_or


class Option(ABC, Generic[T]):
    """A Rust-like Option type: either Some(value) or Nothing."""

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool: ...

    @abstractmethod
    def unwrap(self) -> T: ...

    def is_nothing(self) -> bool:
        return not self.is_some()

    def expect(self, msg: str) -> T:
        if self.is_some():
            return self.unwrap()
        raise UnwrapError(msg, None)

    def expect_nothing(self, msg: str) -> None:
        if self.is_some():
            raise UnwrapError(f"{msg}: {self.unwrap()!r}", self.unwrap())
        return None

    def unwrap_or(self, default: T) -> T:
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, fn: Callable[[], T]) -> T:
        return self.unwrap() if self.is_some() else fn()

    def map(self, fn: Callable[[T], U]) -> Option[U]:
        return Some(fn(self.unwrap())) if self.is_some() else NOTHING

    def and_then(self, fn: Callable[[T], Option[U]]) -> Option[U]:
        return fn(self.unwrap()) if self.is_some() else NOTHING

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        if self.is_some() and predicate(self.unwrap()):
            return self
        return NOTHING

    def ok_or(self, error: E) -> Result[T, E]:
        """Some(v) → Ok(v), Nothing → Err(error)."""
        return Ok(self.unwrap()) if self.is_some() else Err(error)

    def to_nullable(self) -> T | None:
        """Some(v) → v, Nothing → None. Lossy for Some(None)."""
        return self.unwrap() if self.is_some() else None


class Some(Option[T]):
    __slots__ = ("_value",)
    __match_args__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"Some({self._value!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Some) and self._value == other._value

    def __hash__(self) -> int:
        return hash(("Some", self._value))

    def is_some(self) -> Literal[True]:
        return True

    def is_nothing(self) -> Literal[False]:
        return False

    def unwrap(self) -> T:
        return self._value


class Nothing(Option[Any]):
    """The absent variant. Nothing() always returns the NOTHING singleton."""

    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Nothing)

    def __hash__(self) -> int:
        return hash("Nothing")

    def is_some(self) -> Literal[False]:
        return False

    def is_nothing(self) -> Literal[True]:
        return True

    def unwrap(self) -> Any:
        raise UnwrapError("Called unwrap on Nothing", None)


NOTHING = Nothing()


def from_nullable(value: T | None) -> Option[T]:
    """None → NOTHING, anything else → Some(value)."""
    return NOTHING if value is None else Some(value)


def is_some(option: Option[Any]) -> bool:
    return option.is_some()


def is_nothing(option: Option[Any]) -> bool:
    return option.is_nothing()
