from __future__ import annotations

from typing import Annotated, Any, Generic, Literal, Optional, Tuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..exceptions import StringInputError

T = TypeVar("T")


class EmptyString(BaseModel):
    """The input had zero characters."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["empty_string"] = "empty_string"

    def describe(self) -> str:
        return "input is empty"


class BadChar(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int
    char: str


class BadChars(BaseModel):
    """Input characters that are not symbols of the alphabet.

    ``positions`` holds every offending character in input order. Indexes are
    0-based in the caller's original string and ``char`` is the character as
    the caller wrote it, before any case normalization.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["bad_chars"] = "bad_chars"
    positions: Tuple[BadChar, ...]

    @field_validator("positions", mode="before")
    @classmethod
    def _coerce_pairs(cls, value):
        if isinstance(value, (list, tuple)):
            return tuple(
                {"index": item[0], "char": item[1]} if isinstance(item, (list, tuple)) else item
                for item in value
            )
        return value

    @property
    def indexes(self) -> Tuple[int, ...]:
        return tuple(item.index for item in self.positions)

    def describe(self) -> str:
        listed = ", ".join(f"{item.char!r} at {item.index}" for item in self.positions)
        return f"invalid characters: {listed}"


StringInputErr = Annotated[Union[EmptyString, BadChars], Field(discriminator="kind")]


class Result(BaseModel, Generic[T]):
    """Outcome of a decode or convert call: a value or a ``StringInputErr``."""

    model_config = ConfigDict(frozen=True)

    value: Optional[T] = None
    error: Optional[StringInputErr] = None

    @model_validator(mode="after")
    def _one_of(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("exactly one of value and error must be set")
        return self

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StringInputErr) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise StringInputError(self.error)
        return self.value

    def unwrap_or(self, default: Any) -> Any:
        if self.error is not None:
            return default
        return self.value
