"""Shared behaviour drills: appending "Bar", licensing info and combined capabilities."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch
from typing import Any


@singledispatch
def append_bar(value: Any) -> Any:
    """Append ``"Bar"`` to a string or to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that reports its licensing information."""

    def licensing_info(self) -> str:
        """The licensing information, shared by all licensed software."""
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    """Whether two pieces of software report the same licensing information."""
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    """Provides some_function."""

    def some_function(self) -> bool:
        return True


class OtherTrait:
    """Provides other_function."""

    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    """Has both capabilities."""


class OtherStruct(SomeTrait, OtherTrait):
    """Has both capabilities."""


def some_func(item: Any) -> bool:
    """Call both capabilities; the item must provide both."""
    if not isinstance(item, SomeTrait) or not isinstance(item, OtherTrait):
        raise TypeError("item must implement both SomeTrait and OtherTrait")
    return item.some_function() and item.other_function()