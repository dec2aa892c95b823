"""Recursive lists and copy-on-write absolute values."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A value followed by the rest of the list."""

    value: int
    next: Cons | Nil


def create_empty_list() -> Nil:
    """An empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single 1."""
    return Cons(1, Nil())


def abs_all(values: Sequence[int]) -> Sequence[int]:
    """Absolute values, copying only when a value has to change.

    The input itself is returned when no value is negative; otherwise a new
    list is returned and the input is left alone.
    """
    if all(value >= 0 for value in values):
        return values
    return [abs(value) for value in values]