"""Error handling: name tags, token costs and positive non-zero integers."""

from __future__ import annotations

from dataclasses import dataclass

_I32 = 32
_I64 = 64


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer strictly: an optional sign followed by ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the items: 5 tokens each plus a processing fee of 1.

    Raises ValueError when the quantity is not a valid 32-bit integer.
    """
    processing_fee = 1
    cost_per_item = 5
    quantity = _parse_int(item_quantity, _I32)
    return quantity * cost_per_item + processing_fee


class CreationError(ValueError):
    """Raised when a value cannot be a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"

    def __init__(self, reason: str) -> None:
        if reason not in (self.NEGATIVE, self.ZERO):
            raise ValueError(f"unknown creation error reason: {reason!r}")
        super().__init__(reason)
        self.reason = reason

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.reason == other.reason

    def __hash__(self) -> int:
        return hash(self.reason)


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Raised when text cannot be parsed into a positive non-zero integer.

    `cause` holds either the CreationError or the ValueError from parsing.
    """

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause

    @classmethod
    def from_creation(cls, error: CreationError) -> ParsePosNonzeroError:
        return cls(error)

    @classmethod
    def from_parse_int(cls, error: ValueError) -> ParsePosNonzeroError:
        return cls(error)

    @property
    def is_creation(self) -> bool:
        return isinstance(self.cause, CreationError)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        return type(self.cause) is type(other.cause) and str(self.cause) == str(other.cause)

    def __hash__(self) -> int:
        return hash((type(self.cause), str(self.cause)))


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        value = _parse_int(text, _I64)
    except ValueError as error:
        raise ParsePosNonzeroError.from_parse_int(error) from error
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as error:
        raise ParsePosNonzeroError.from_creation(error) from error