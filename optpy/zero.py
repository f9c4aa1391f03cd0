from __future__ import annotations
import collections.abc as cabc
import dataclasses
import typing
from typing import Any, Dict

try:
    from types import UnionType  # type: ignore[attr-defined]
    _UNION_TYPES: tuple = (typing.Union, UnionType)
except ImportError:  # pragma: no cover - python < 3.10
    _UNION_TYPES = (typing.Union,)


_NONE_TYPE = type(None)

# classes whose no-argument constructor is their zero value
_SCALARS = (bool, int, float, complex, str, bytes, bytearray, list, dict, set, frozenset, tuple)

_ABSTRACT: Dict[Any, Any] = {
    cabc.Sequence: list,
    cabc.MutableSequence: list,
    cabc.Iterable: list,
    cabc.Collection: list,
    cabc.Mapping: dict,
    cabc.MutableMapping: dict,
    cabc.Set: set,
    cabc.MutableSet: set,
}


def is_option_type(tp: Any) -> bool:
    from .option import Option, Some, Nothing
    target = typing.get_origin(tp) or tp
    return target in (Option, Some, Nothing)


def option_arg(tp: Any) -> Any:
    args = typing.get_args(tp)
    return args[0] if args else None


def zero_value(tp: Any) -> Any:
    """Default value for a type annotation; None where no zero exists."""
    if tp is None or tp is _NONE_TYPE or tp is typing.Any or isinstance(tp, typing.TypeVar):
        return None
    if is_option_type(tp):
        from .option import none
        return none(option_arg(tp))
    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in _UNION_TYPES:
        if _NONE_TYPE in args:
            return None
        return zero_value(args[0])
    if origin is typing.Annotated:
        return zero_value(args[0])
    if origin is tuple:
        if not args or (len(args) == 2 and args[1] is Ellipsis) or args == ((),):
            return ()
        return tuple(zero_value(a) for a in args)
    if origin is not None:
        if origin in _ABSTRACT:
            return _ABSTRACT[origin]()
        return zero_value(origin)
    if tp in _ABSTRACT:
        return _ABSTRACT[tp]()
    if isinstance(tp, type) and dataclasses.is_dataclass(tp):
        return _zero_dataclass(tp)
    if tp in _SCALARS:
        return tp()
    return None


def _zero_dataclass(cls: type) -> Any:
    try:
        hints = typing.get_type_hints(cls)
    except NameError:
        # unresolvable annotations: those fields get None
        hints = {}
    kwargs: Dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        if f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
            continue
        kwargs[f.name] = zero_value(hints.get(f.name, Any))
    return cls(**kwargs)
