from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, model_validator

from ..exceptions import InvalidAlphabetError


class CaseSensitivity(str, Enum):
    CASE_SENSITIVE = "sensitive"
    CASE_AGNOSTIC = "agnostic"


def check_symbols(symbols: str) -> None:
    """Raise :class:`InvalidAlphabetError` unless ``symbols`` can be a numeral base."""
    if len(symbols) < 2:
        raise InvalidAlphabetError(InvalidAlphabetError.RADIX_TOO_SMALL, symbols)
    seen = set()
    for index, symbol in enumerate(symbols):
        if symbol in seen:
            raise InvalidAlphabetError(
                InvalidAlphabetError.DUPLICATE_SYMBOL,
                symbols,
                symbol=symbol,
                index=index,
            )
        seen.add(symbol)


class Alphabet(BaseModel):
    """Ordered, duplicate-free digit symbols of a positional numeral base.

    The digit value of ``symbols[i]`` is ``i`` and the radix is
    ``len(symbols)``. Instances are immutable; build them with :func:`make`.
    Case-agnostic alphabets are matched against lowercased input, so their
    symbols are expected to be lowercase already.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    symbols: str
    case_sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE

    @model_validator(mode="after")
    def _check_symbols(self):
        check_symbols(self.symbols)
        return self

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False) -> "Alphabet":
        if not update:
            return super().model_copy(deep=deep)
        fields = {**self.model_dump(), **update}
        return make(fields["symbols"], fields["case_sensitivity"])

    @property
    def radix(self) -> int:
        return len(self.symbols)

    @property
    def is_case_agnostic(self) -> bool:
        return self.case_sensitivity is CaseSensitivity.CASE_AGNOSTIC

    def digit(self, value: int) -> str:
        """Symbol for a digit value in ``range(radix)``."""
        if not 0 <= value < self.radix:
            raise IndexError(f"digit value {value} out of range for radix {self.radix}")
        return self.symbols[value]

    def value_of(self, char: str) -> Optional[int]:
        """Digit value of ``char`` (first match), or ``None`` if it is not a symbol."""
        index = self.symbols.find(char) if len(char) == 1 else -1
        return index if index >= 0 else None


def make(
    symbols: str,
    case_sensitivity: CaseSensitivity = CaseSensitivity.CASE_SENSITIVE,
) -> Alphabet:
    if not isinstance(symbols, str):
        raise TypeError("symbols must be a string")
    return Alphabet(symbols=symbols, case_sensitivity=CaseSensitivity(case_sensitivity))
