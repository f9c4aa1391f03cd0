"""
Basic options: construction, combinators, and JSON records.

Run: python examples/basic_options.py
"""
from dataclasses import dataclass, field

from optpy import (
    Option,
    Some,
    NONE,
    none,
    join,
    coalesce,
    from_nullable,
    dumps,
    loads,
    DecodeError,
)


@dataclass
class Profile:
    name: str = field(metadata={"json": "Name"})
    age: Option[int] = field(default=NONE, metadata={"json": "Age"})


def main():
    # Combine two optional readings only when both exist
    total = join(Some(4), Some(8), lambda a, b: a + b)
    print("join =>", total.unwrap())                    # 12

    # First configured value wins, even a falsy one
    port = coalesce(from_nullable(None), Some(0), Some(8080))
    print("coalesce =>", port.unwrap_or(80))            # 0

    # Absent values fall back to the type's zero value
    print("zero =>", none(int).unwrap_or_zero())        # 0

    # Records encode absent fields as null and decode them back
    raw = dumps(Profile("ann"))
    print("encode =>", raw)                             # {"Name":"ann","Age":null}
    print("decode =>", loads('{"Name":"bob","Age":41}', Profile))

    try:
        loads('{"Name":"bob","Age":"old"}', Profile)
    except DecodeError as e:
        print("decode error =>", e)


if __name__ == "__main__":
    main()
