from .option import Option, Some, Nothing, NONE, none
from .combinators import join, map, coalesce, equal, from_nullable, from_maybe
from .zero import zero_value
from .errors import Panic, DecodeError
from .codec import OptionJSONEncoder, dumps, loads, decode
from .logger import ConsoleLogger

# map is reached as optpy.map, never via star-import
__all__ = [
    "Option", "Some", "Nothing", "NONE", "none",
    "join", "coalesce", "equal", "from_nullable", "from_maybe",
    "zero_value",
    "Panic", "DecodeError",
    "OptionJSONEncoder", "dumps", "loads", "decode",
    "ConsoleLogger",
]
