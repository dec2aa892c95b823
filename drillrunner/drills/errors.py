"""Error handling drills: name tags, token costs and positive integers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_BITS = 32
_I64_BITS = 64


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed decimal integer of the given width.

    Raises ValueError with the same wording as the standard integer parser.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text, 10)
    if value > 2 ** (bits - 1) - 1:
        raise ValueError("number too large to fit in target type")
    if value < -(2 ** (bits - 1)):
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the name tag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Tokens needed to buy the typed quantity: 5 per item plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer, and
    OverflowError when the cost does not fit in one.
    """
    processing_fee = 1
    cost_per_item = 5
    qty = _parse_int(item_quantity, _I32_BITS)
    cost = qty * cost_per_item + processing_fee
    if not -(2 ** (_I32_BITS - 1)) <= cost <= 2 ** (_I32_BITS - 1) - 1:
        raise OverflowError("attempt to compute the cost overflowed")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> str:
    """Try to buy the typed quantity and describe the result.

    Raises ValueError when the quantity cannot be parsed.
    """
    cost = total_cost(item_quantity)
    if cost > tokens:
        return "You can't afford that many!"
    return f"You now have {tokens - cost} tokens."


class CreationErrorKind(Enum):
    """Why a PositiveNonzeroInteger could not be created."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """Raised for values that are not strictly positive."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)


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
    """Raised by parse_pos_nonzero; exactly one of its causes is set."""

    def __init__(
        self,
        creation: CreationError | None = None,
        parse_int: ValueError | None = None,
    ) -> None:
        if (creation is None) == (parse_int is None):
            raise TypeError("exactly one cause must be given")
        cause = creation if creation is not None else parse_int
        super().__init__(str(cause))
        self.creation = creation
        self.parse_int = parse_int

    @classmethod
    def from_creation(cls, err: CreationError) -> ParsePosNonzeroError:
        return cls(creation=err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> ParsePosNonzeroError:
        return cls(parse_int=err)


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse a 64-bit integer and require it to be strictly positive."""
    try:
        value = _parse_int(text, _I64_BITS)
    except ValueError as err:
        raise ParsePosNonzeroError.from_parse_int(err) from err
    try:
        return PositiveNonzeroInteger(value)
    except CreationError as err:
        raise ParsePosNonzeroError.from_creation(err) from err