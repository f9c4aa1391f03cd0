from __future__ import annotations
from typing import Optional


class Panic(BaseException):
    """Misuse of an Option, such as unwrapping an absent value.

    This is a defect rather than a failure, so it derives from BaseException
    and slips past ``except Exception`` handlers. Use ``unwrap_or``,
    ``unwrap_or_zero`` or ``try_unwrap`` where absence is expected.
    """


class DecodeError(ValueError):
    def __init__(self, message: str, path: str = "$", value: Optional[object] = None):
        super().__init__(f"{message} at {path}")
        self.message = message
        self.path = path
        self.value = value
