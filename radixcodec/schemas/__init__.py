from __future__ import annotations

from .alphabet import Alphabet, CaseSensitivity, make
from .errors import BadChar, BadChars, EmptyString, Result, StringInputErr

__all__ = [
    "Alphabet",
    "CaseSensitivity",
    "make",
    "BadChar",
    "BadChars",
    "EmptyString",
    "Result",
    "StringInputErr",
]
