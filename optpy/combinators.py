from __future__ import annotations
import copy
from typing import Any, Callable, Optional, TypeVar

from .option import NONE, Option, Some, none

A = TypeVar("A")
B = TypeVar("B")
R = TypeVar("R")
T = TypeVar("T")


def join(a: Option[A], b: Option[B], f: Callable[[A, B], R]) -> Option[R]:
    """Combine two options with ``f`` when both are present."""
    if a.is_some() and b.is_some():
        return Some(f(a.unwrap(), b.unwrap()))
    return NONE


def map(o: Option[A], f: Callable[[A], Option[B]]) -> Option[B]:
    """Chain ``f`` onto a present value; ``f`` returns an Option itself."""
    if o.is_some():
        return f(o.unwrap())
    return NONE


def coalesce(*os: Option[T]) -> Option[T]:
    """First present option, or absent when there is none."""
    for o in os:
        if o.is_some():
            return o
    # all absent: keep the last one so its element type survives
    return os[-1] if os else NONE


def equal(a: Option[T], b: Option[T]) -> bool:
    if a.is_none() and b.is_none():
        return True
    if a.is_none() or b.is_none():
        return False
    return a.unwrap() == b.unwrap()


def from_nullable(v: Optional[T], tp: Any = None) -> Option[T]:
    if v is None:
        return none(tp)
    try:
        v = copy.copy(v)
    except (TypeError, copy.Error):
        # locks, modules, generators: wrap the object itself
        pass
    return Some(v)


def from_maybe(v: T, ok: bool) -> Option[T]:
    if ok:
        return Some(v)
    return none(type(v))
