"""Basic drills: strings, conditionals, options, lists, generics and counting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_COLOR_WORDS = frozenset({"green", "blue", "red"})


def is_a_color_word(attempt: str) -> bool:
    """Whether the word is one of the known colours."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Strip surrounding whitespace."""
    return text.strip()


def compose_me(text: str) -> str:
    """Append ``" world!"`` to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every ``cars`` with ``balloons``."""
    return text.replace("cars", "balloons")


def bigger(a: int, b: int) -> int:
    """Return the larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """Map ``fizz`` to ``foo``, ``fuzz`` to ``bar`` and anything else to ``baz``."""
    if fizzish == "fizz":
        return "foo"
    if fizzish == "fuzz":
        return "bar"
    return "baz"


def is_even(num: int) -> bool:
    """Whether the number is even."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def square(num: int) -> int:
    """The number multiplied by itself."""
    return num * num


def maybe_icecream(time_of_day: int) -> int | None:
    """Pieces of ice cream left at the given hour; None for hours past 23."""
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0


def array_and_vec() -> tuple[tuple[int, ...], list[int]]:
    """A fixed array and a list holding the same elements."""
    array = (10, 20, 30, 40)
    return array, list(array)


def vec_loop(values: Iterable[int]) -> list[int]:
    """Double every value."""
    doubled = list(values)
    for index, value in enumerate(doubled):
        doubled[index] = value * 2
    return doubled


def vec_map(values: Iterable[int]) -> list[int]:
    """Double every value."""
    return [value * 2 for value in values]


def longest(x: str, y: str) -> str:
    """Return the string with more UTF-8 bytes; ``y`` on a tie."""
    return x if len(x.encode("utf-8")) > len(y.encode("utf-8")) else y


def fill_vec(values: Iterable[int]) -> list[int]:
    """Return a list of the values followed by 22, 44 and 66."""
    return [*values, 22, 44, 66]


def byte_counter(text: str) -> int:
    """Number of bytes in the UTF-8 encoding of the text."""
    return len(text.encode("utf-8"))


def char_counter(text: str) -> int:
    """Number of characters in the text."""
    return len(text)


def num_sq(num: int) -> int:
    """The square of the number."""
    return num * num


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a value of any type."""

    value: T