"""Reference solution of the message-processing enum exercise."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Quit:
    """Ask the machine to quit."""


@dataclass(frozen=True)
class Echo:
    """Print a text."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move to a point."""

    point: Point


@dataclass(frozen=True)
class ChangeColor:
    """Change the colour to an RGB triple."""

    color: tuple[int, int, int]


Message = Quit | Echo | Move | ChangeColor


@dataclass
class MachineState:
    """A machine that reacts to messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False

    def process(self, message: Message) -> None:
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