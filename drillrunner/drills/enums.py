"""Message drills: a small state machine driven by tagged messages."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    """A position on the board."""

    x: int
    y: int


@dataclass(frozen=True)
class ChangeColor:
    """Set the colour to an RGB triple."""

    color: tuple[int, int, int]


@dataclass(frozen=True)
class Echo:
    """Print the text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to the given point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop processing."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class State:
    """Colour, position and whether a quit was requested."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
        """Apply one message to the state."""
        match message:
            case ChangeColor(color=color):
                self.color = color
            case Echo(text=text):
                print(text)
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")