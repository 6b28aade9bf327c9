"""Reference solutions of the quiz exercises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable


def calculate_price_of_apples(num: int) -> int:
    """Apples cost 2 each, or 1 each when more than 40 are bought."""
    return num if num > 40 else num * 2


class Command(Enum):
    """A transformation without arguments."""

    UPPERCASE = "uppercase"
    TRIM = "trim"


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string ``count`` times."""

    count: int


def transformer(items: Iterable[tuple[str, Command | Append]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    output = []
    for text, command in items:
        match command:
            case Command.UPPERCASE:
                output.append(text.upper())
            case Command.TRIM:
                output.append(text.strip())
            case Append(count=count):
                output.append(text + "bar" * count)
            case _:
                raise ValueError(f"unknown command: {command!r}")
    return output


@dataclass
class ReportCard:
    """A report card whose grade may be any printable value."""

    grade: Any
    student_name: str
    student_age: int

    def print(self) -> str:
        return f"{self.student_name} ({self.student_age}) - achieved a grade of {self.grade}"