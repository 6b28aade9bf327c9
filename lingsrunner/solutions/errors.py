"""Reference solutions of the error handling exercises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_EMPTY = "cannot parse integer from empty string"
_INVALID = "invalid digit found in string"
_TOO_LARGE = "number too large to fit in target type"
_TOO_SMALL = "number too small to fit in target type"


def _parse_signed(text: str, bits: int) -> int:
    """Parse a signed integer of ``bits`` width, with the usual error messages."""
    if not text:
        raise ValueError(_EMPTY)
    low = -(1 << (bits - 1))
    high = (1 << (bits - 1)) - 1
    negative = text[0] == "-"
    digits = text[1:] if text[0] in "+-" else text
    if not digits:
        raise ValueError(_INVALID)
    value = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            raise ValueError(_INVALID)
        value = value * 10 + (ord(ch) - ord("0"))
        if negative and -value < low:
            raise ValueError(_TOO_SMALL)
        if not negative and value > high:
            raise ValueError(_TOO_LARGE)
    return -value if negative else value


def _check_i32(value: int, operation: str) -> int:
    if not -(1 << 31) <= value <= (1 << 31) - 1:
        raise OverflowError(f"attempt to {operation} with overflow")
    return value


class NametagError(ValueError):
    """A nametag cannot be made for an empty name."""


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise NametagError for an empty name."""
    if not name:
        raise NametagError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed for the typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_signed(item_quantity, 32)
    subtotal = _check_i32(qty * cost_per_item, "multiply")
    return _check_i32(subtotal + processing_fee, "add")


def afford(tokens: int, item_quantity: str) -> str:
    """Describe whether ``tokens`` pay for the typed quantity and what is left."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationErrorKind(Enum):
    """Why a positive non-zero integer could not be made."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A value was not a positive non-zero integer."""

    def __init__(self, kind: CreationErrorKind):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationErrorKind.ZERO)


class ParsePosNonzeroError(ValueError):
    """Parsing a positive non-zero integer failed.

    ``creation`` holds the creation error kind when the text was a number
    but not a positive one, and is None when the text was not a number.
    """

    def __init__(self, cause: CreationError | ValueError):
        super().__init__(str(cause))
        self.creation: CreationErrorKind | None = (
            cause.kind if isinstance(cause, CreationError) else None
        )


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and require it to be positive and non-zero."""
    try:
        value = _parse_signed(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err