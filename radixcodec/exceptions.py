"""Custom exceptions for radixcodec."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .schemas.errors import StringInputErr


class RadixCodecException(Exception):
    """Base exception for all radixcodec errors."""

    code = "radixcodec_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidAlphabetError(RadixCodecException):
    """Exception raised when an alphabet cannot be used as a numeral base."""

    code = "invalid_alphabet"

    RADIX_TOO_SMALL = "radix_too_small"
    DUPLICATE_SYMBOL = "duplicate_symbol"

    def __init__(
        self,
        reason: str,
        symbols: str,
        symbol: Optional[str] = None,
        index: Optional[int] = None,
    ):
        self.reason = reason
        self.symbols = symbols
        self.radix = len(symbols)
        self.symbol = symbol
        self.index = index
        if reason == self.DUPLICATE_SYMBOL:
            message = f"duplicate symbol {symbol!r} at index {index}"
        else:
            message = f"alphabet needs at least 2 symbols, got {self.radix}"
        super().__init__(message)


class StringInputError(RadixCodecException):
    """Exception raised when a decode result is unwrapped on failure."""

    code = "invalid_input"

    def __init__(self, error: "StringInputErr"):
        self.error = error
        super().__init__(error.describe())


class UnknownPresetError(RadixCodecException, KeyError):
    """Exception raised when a preset name is not in the preset table."""

    code = "unknown_preset"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown preset: {name}")

    def __str__(self) -> str:
        return self.message
