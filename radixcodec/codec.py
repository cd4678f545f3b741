"""Positional numeral encode/decode over an :class:`Alphabet`."""
from __future__ import annotations

from typing import List, Union

from .presets import resolve
from .schemas.alphabet import Alphabet, check_symbols
from .schemas.errors import BadChar, BadChars, EmptyString, Result
from .utils.logging import get_logger

logger = get_logger("codec")


def _check_int(value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("value must be an integer")
    return value


def from_int(alphabet: Alphabet, value: int) -> str:
    """Encode an integer, most significant digit first.

    Negative values are encoded as their absolute value.
    """
    current = abs(_check_int(value))
    check_symbols(alphabet.symbols)
    radix = alphabet.radix
    symbols = alphabet.symbols

    if current < radix:
        return symbols[current]

    digits: List[str] = []
    while current >= radix:
        current, remainder = divmod(current, radix)
        digits.append(symbols[remainder])
    digits.append(symbols[current])
    return "".join(reversed(digits))


def to_int(alphabet: Alphabet, text: str) -> Result[int]:
    """Decode ``text`` into an integer.

    Returns a failed result with ``EmptyString`` for empty input, or with
    ``BadChars`` listing every character that is not a symbol.
    """
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    if not text:
        logger.debug("Decode failed: empty input")
        return Result[int].failure(EmptyString())

    check_symbols(alphabet.symbols)
    radix = alphabet.radix
    agnostic = alphabet.is_case_agnostic
    bad: List[BadChar] = []
    decoded = 0
    for index, char in enumerate(text):
        digit = alphabet.value_of(char.lower() if agnostic else char)
        if digit is None:
            bad.append(BadChar(index=index, char=char))
            continue
        decoded = decoded * radix + digit

    if bad:
        logger.debug(
            f"Decode failed: {len(bad)} invalid character(s) in input of length {len(text)}"
            f" at {[item.index for item in bad]}"
        )
        return Result[int].failure(BadChars(positions=tuple(bad)))
    return Result[int].success(decoded)


def convert(in_alphabet: Alphabet, out_alphabet: Alphabet, text: str) -> Result[str]:
    """Re-encode ``text`` from one alphabet into another."""
    decoded = to_int(in_alphabet, text)
    if not decoded.ok:
        return Result[str].failure(decoded.error)
    return Result[str].success(from_int(out_alphabet, decoded.value))


def encode(value: int, base: Union[Alphabet, str]) -> str:
    return from_int(resolve(base), value)


def decode(text: str, base: Union[Alphabet, str]) -> int:
    """Decode ``text``, raising :class:`StringInputError` on bad input."""
    return to_int(resolve(base), text).unwrap()


def transcode(text: str, from_base: Union[Alphabet, str], to_base: Union[Alphabet, str]) -> Result[str]:
    return convert(resolve(from_base), resolve(to_base), text)
