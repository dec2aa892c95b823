"""Iterator drills: capitalising words, division results, factorials and counting."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from enum import Enum

_U64_MAX = 2**64 - 1
_NUMBERS = (27, 297, 38502, 81)


def capitalize_first(text: str) -> str:
    """Upper-case the first character if it is an ASCII letter."""
    if not text:
        return ""
    first = text[0]
    if "a" <= first <= "z":
        first = first.upper()
    return first + text[1:]


def capitalize_words_vector(words: Iterable[str]) -> list[str]:
    """Capitalise each word."""
    return [capitalize_first(word) for word in words]


def capitalize_words_string(words: Iterable[str]) -> str:
    """Capitalise each word and join them together."""
    return "".join(capitalize_first(word) for word in words)


class DivisionError(ArithmeticError):
    """Base class for failed exact divisions."""


class DivideByZeroError(DivisionError):
    """The divisor was zero."""

    def __init__(self) -> None:
        super().__init__("division by zero")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DivideByZeroError):
            return NotImplemented
        return True

    def __hash__(self) -> int:
        return hash(DivideByZeroError)


class NotDivisibleError(DivisionError):
    """The dividend is not a multiple of the divisor."""

    def __init__(self, dividend: int, divisor: int) -> None:
        super().__init__(f"{dividend} is not divisible by {divisor}")
        self.dividend = dividend
        self.divisor = divisor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NotDivisibleError):
            return NotImplemented
        return (self.dividend, self.divisor) == (other.dividend, other.divisor)

    def __hash__(self) -> int:
        return hash((self.dividend, self.divisor))


def divide(a: int, b: int) -> int:
    """Return ``a / b`` when it divides evenly; raise a DivisionError otherwise."""
    if b == 0:
        raise DivideByZeroError()
    if a % b != 0:
        raise NotDivisibleError(dividend=a, divisor=b)
    quotient, _ = divmod(a, b)
    return quotient


def _try_divide(a: int, b: int) -> int | DivisionError:
    try:
        return divide(a, b)
    except DivisionError as err:
        return err


def result_with_list() -> list[int]:
    """Divide each sample number by 27, raising the first error met."""
    return [divide(n, 27) for n in _NUMBERS]


def list_of_results() -> list[int | DivisionError]:
    """Divide each sample number by 27, keeping each result or error in place."""
    return [_try_divide(n, 27) for n in _NUMBERS]


def factorial(num: int) -> int:
    """Factorial of an unsigned 64-bit number; the result must fit in 64 bits."""
    if num < 0:
        raise ValueError("factorial is defined for non-negative numbers only")
    result = math.prod(range(1, num + 1))
    if result > _U64_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return result


class Progress(Enum):
    """How far an exercise has been worked through."""

    NONE = "none"
    SOME = "some"
    COMPLETE = "complete"


def count_progress(progress_map: Mapping[str, Progress], value: Progress) -> int:
    """Count the entries of the map with the given progress."""
    return sum(1 for progress in progress_map.values() if progress is value)


def count_collection(
    collection: Iterable[Mapping[str, Progress]], value: Progress
) -> int:
    """Count entries with the given progress across all maps."""
    return sum(count_progress(progress_map, value) for progress_map in collection)