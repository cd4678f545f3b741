"""Integer <-> string conversion in arbitrary positional numeral bases."""
from __future__ import annotations

from .codec import convert, decode, encode, from_int, to_int, transcode
from .exceptions import (
    InvalidAlphabetError,
    RadixCodecException,
    StringInputError,
    UnknownPresetError,
)
from .presets import (
    BASE16,
    BASE32,
    BASE32_RFC,
    BASE36,
    BASE58,
    BASE62,
    BASE64,
    BASE64_URL,
    PRESETS,
    get_preset,
)
from .schemas import (
    Alphabet,
    BadChar,
    BadChars,
    CaseSensitivity,
    EmptyString,
    Result,
    StringInputErr,
    make,
)

__version__ = "1.0.0"

__all__ = [
    "Alphabet",
    "CaseSensitivity",
    "make",
    "from_int",
    "to_int",
    "convert",
    "encode",
    "decode",
    "transcode",
    "BadChar",
    "BadChars",
    "EmptyString",
    "Result",
    "StringInputErr",
    "BASE16",
    "BASE32",
    "BASE32_RFC",
    "BASE36",
    "BASE58",
    "BASE62",
    "BASE64",
    "BASE64_URL",
    "PRESETS",
    "get_preset",
    "RadixCodecException",
    "InvalidAlphabetError",
    "StringInputError",
    "UnknownPresetError",
]
