"""Small quizzes: apple pricing, a string transformer and report cards."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip surrounding whitespace."""


@dataclass(frozen=True)
class Append:
    """Append ``"bar"`` the given number of times."""

    times: int


Command = Uppercase | Trim | Append


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Uppercase():
                output.append(text.upper())
            case Trim():
                output.append(text.strip())
            case Append(times=times):
                output.append(text + "bar" * times)
            case _:
                raise TypeError(f"unknown command: {command!r}")
    return output


def _display(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "inf" if value > 0 else "-inf"
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    return str(value)


@dataclass
class ReportCard:
    """A student's report card holding a numeric or alphabetic grade."""

    grade: Any
    student_name: str
    student_age: int

    def render(self) -> str:
        """Return the one-line summary of the card."""
        return (
            f"{self.student_name} ({self.student_age}) - "
            f"achieved a grade of {_display(self.grade)}"
        )