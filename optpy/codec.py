"""JSON encoding and type-directed decoding for Option values.

``Some(v)`` encodes as ``v`` and any ``Nothing`` as ``null``. There is no
envelope, so decoding needs the declared type: ``loads('{"Bar":null}', Rec)``
walks ``Rec``'s annotations and rebuilds an ``Option[int]`` for ``Bar``.

Dataclass fields may carry a ``json`` metadata key to rename them on the
wire::

    @dataclass
    class Rec:
        foo: str = field(metadata={"json": "Foo"})
        bar: Option[int] = NONE
"""
from __future__ import annotations
import collections.abc as cabc
import dataclasses
import json
import typing
from typing import Any, Dict, List

from .errors import DecodeError
from .logger import ConsoleLogger
from .option import Option, Some, none
from .zero import _UNION_TYPES, is_option_type, option_arg, zero_value

logger = ConsoleLogger("optpy.codec", level="WARN")

_NONE_TYPE = type(None)
_SEQUENCES = (list, cabc.Sequence, cabc.MutableSequence, cabc.Iterable, cabc.Collection)
_MAPPINGS = (dict, cabc.Mapping, cabc.MutableMapping)
_SETS = (set, frozenset, cabc.Set, cabc.MutableSet)


def _name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or repr(tp)


def _json_key(f: dataclasses.Field) -> str:
    return f.metadata.get("json", f.name)


class OptionJSONEncoder(json.JSONEncoder):
    def default(self, o: Any) -> Any:
        if isinstance(o, Option):
            return o.to_nullable()
        if dataclasses.is_dataclass(o) and not isinstance(o, type):
            return {_json_key(f): getattr(o, f.name) for f in dataclasses.fields(o)}
        return super().default(o)


def dumps(obj: Any, **kw: Any) -> str:
    kw.setdefault("cls", OptionJSONEncoder)
    kw.setdefault("separators", (",", ":"))
    return json.dumps(obj, **kw)


def loads(s: str | bytes, tp: Any = Any, **kw: Any) -> Any:
    try:
        data = json.loads(s, **kw)
    except json.JSONDecodeError as exc:
        logger.debug("invalid JSON", error=exc.msg, pos=exc.pos)
        raise DecodeError(f"invalid JSON: {exc.msg}", "$", s) from exc
    except ValueError as exc:
        # undecodable bytes, integers past the digit limit
        logger.debug("invalid JSON", error=str(exc))
        raise DecodeError(f"invalid JSON: {exc}", "$", s) from exc
    return decode(data, tp)


def decode(data: Any, tp: Any = Any, path: str = "$") -> Any:
    try:
        return _decode(data, tp, path)
    except DecodeError as exc:
        logger.debug("decode failed", path=exc.path, error=exc.message)
        raise


def _fail(data: Any, tp: Any, path: str) -> DecodeError:
    return DecodeError(f"cannot decode {type(data).__name__} {data!r} as {_name(tp)}", path, data)


def _decode(data: Any, tp: Any, path: str) -> Any:
    if tp is typing.Any or tp is object or isinstance(tp, typing.TypeVar):
        return data
    if tp is None or tp is _NONE_TYPE:
        if data is not None:
            raise _fail(data, _NONE_TYPE, path)
        return None
    if is_option_type(tp):
        arg = option_arg(tp)
        if data is None:
            return none(arg)
        return Some(data if arg is None else _decode(data, arg, path))

    origin = typing.get_origin(tp)
    args = typing.get_args(tp)
    if origin in _UNION_TYPES:
        return _decode_union(data, tp, args, path)
    if origin is typing.Annotated:
        return _decode(data, args[0], path)
    if data is None:
        raise DecodeError(f"null is not a valid {_name(tp)}", path, data)

    target = origin or tp
    if target is bool:
        if isinstance(data, bool):
            return data
        raise _fail(data, tp, path)
    if target is int:
        if isinstance(data, int) and not isinstance(data, bool):
            return data
        raise _fail(data, tp, path)
    if target is float:
        if isinstance(data, (int, float)) and not isinstance(data, bool):
            try:
                return float(data)
            except OverflowError:
                raise _fail(data, tp, path) from None
        raise _fail(data, tp, path)
    if target is str:
        if isinstance(data, str):
            return data
        raise _fail(data, tp, path)
    if target is tuple:
        return _decode_tuple(data, tp, args, path)
    if target in _SEQUENCES or target in _SETS:
        if not isinstance(data, list):
            raise _fail(data, tp, path)
        elem = args[0] if args else Any
        items = [_decode(x, elem, f"{path}[{i}]") for i, x in enumerate(data)]
        if target in _SETS:
            return frozenset(items) if target is frozenset else set(items)
        return items
    if target in _MAPPINGS:
        return _decode_mapping(data, tp, args, path)
    if isinstance(target, type) and dataclasses.is_dataclass(target):
        return _decode_dataclass(data, target, path)
    if isinstance(target, type) and isinstance(data, target):
        return data
    raise _fail(data, tp, path)


def _decode_union(data: Any, tp: Any, args: tuple, path: str) -> Any:
    if data is None:
        if _NONE_TYPE in args:
            return None
        raise DecodeError(f"null is not a valid {_name(tp)}", path, data)
    for member in args:
        if member is _NONE_TYPE:
            continue
        try:
            return _decode(data, member, path)
        except DecodeError:
            continue
    raise _fail(data, tp, path)


def _decode_tuple(data: Any, tp: Any, args: tuple, path: str) -> Any:
    if not isinstance(data, list):
        raise _fail(data, tp, path)
    if not args or (len(args) == 2 and args[1] is Ellipsis):
        elem = args[0] if args else Any
        return tuple(_decode(x, elem, f"{path}[{i}]") for i, x in enumerate(data))
    if args == ((),):
        args = ()
    if len(data) != len(args):
        raise DecodeError(f"expected {len(args)} items for {_name(tp)}, got {len(data)}", path, data)
    return tuple(_decode(x, a, f"{path}[{i}]") for i, (x, a) in enumerate(zip(data, args)))


def _decode_mapping(data: Any, tp: Any, args: tuple, path: str) -> Dict[Any, Any]:
    if not isinstance(data, dict):
        raise _fail(data, tp, path)
    key_tp = args[0] if args else Any
    val_tp = args[1] if len(args) > 1 else Any
    out: Dict[Any, Any] = {}
    for k, v in data.items():
        key: Any = k
        if key_tp is int:
            try:
                key = int(k)
            except ValueError:
                raise DecodeError(f"cannot decode key {k!r} as int", path, k) from None
        out[key] = _decode(v, val_tp, f"{path}.{k}")
    return out


def _decode_dataclass(data: Any, cls: type, path: str) -> Any:
    if not isinstance(data, dict):
        raise _fail(data, cls, path)
    try:
        hints = typing.get_type_hints(cls)
    except NameError as exc:
        raise DecodeError(f"cannot resolve annotations of {cls.__name__}: {exc}", path, data) from exc
    kwargs: Dict[str, Any] = {}
    missing: List[str] = []
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        key = _json_key(f)
        ftp = hints.get(f.name, Any)
        if key in data:
            kwargs[f.name] = _decode(data[key], ftp, f"{path}.{key}")
        elif is_option_type(ftp):
            kwargs[f.name] = none(option_arg(ftp))
            missing.append(key)
        elif f.default is not dataclasses.MISSING or f.default_factory is not dataclasses.MISSING:  # type: ignore[misc]
            missing.append(key)
        else:
            kwargs[f.name] = zero_value(ftp)
            missing.append(key)
    if missing:
        logger.debug("keys absent from input", path=path, record=cls.__name__, keys=",".join(missing))
    return cls(**kwargs)
