from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from .errors import Panic
from .zero import zero_value

T = TypeVar("T")
U = TypeVar("U")


def _type_name(tp: Any) -> str:
    if tp is None:
        return "Option"
    return f"Option[{getattr(tp, '__name__', None) or repr(tp)}]"


class Option(Generic[T]):
    def is_some(self) -> bool: raise NotImplementedError
    def is_none(self) -> bool: return not self.is_some()

    def unwrap(self) -> T: raise NotImplementedError
    def unwrap_or(self, fallback: T) -> T: raise NotImplementedError
    def unwrap_or_zero(self) -> T: raise NotImplementedError
    def try_unwrap(self) -> Tuple[T, bool]: raise NotImplementedError

    def map(self, f: Callable[[T], U]) -> "Option[U]":
        if self.is_some():
            return Some(f(self.value))  # type: ignore[attr-defined]
        return NONE

    def flat_map(self, f: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_some():
            return f(self.value)  # type: ignore[attr-defined]
        return NONE

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_some() else default  # type: ignore[attr-defined]

    def to_nullable(self) -> Optional[T]:
        return self.value if self.is_some() else None  # type: ignore[attr-defined]


@dataclass(frozen=True)
class Some(Option[T]):
    value: T

    def is_some(self) -> bool: return True
    def unwrap(self) -> T: return self.value
    def unwrap_or(self, fallback: T) -> T: return self.value
    def unwrap_or_zero(self) -> T: return self.value
    def try_unwrap(self) -> Tuple[T, bool]: return self.value, True


@dataclass(frozen=True, repr=False)
class Nothing(Option[T]):
    # element type, only used to build zero values
    type_: Any = field(default=None, compare=False)

    def __repr__(self) -> str:
        if self.type_ is None:
            return "Nothing"
        return f"Nothing[{getattr(self.type_, '__name__', None) or repr(self.type_)}]"

    def is_some(self) -> bool: return False

    def unwrap(self) -> T:
        raise Panic(f"{_type_name(self.type_)}.unwrap: no value to unwrap")

    def unwrap_or(self, fallback: T) -> T: return fallback
    def unwrap_or_zero(self) -> T: return zero_value(self.type_)
    def try_unwrap(self) -> Tuple[T, bool]: return self.unwrap_or_zero(), False


NONE: Option[Any] = Nothing()


def none(tp: Any = None) -> Option[Any]:
    return NONE if tp is None else Nothing(tp)
