"""Reference solutions of the hash map exercises."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

_U8_MAX = 255


class Fruit(Enum):
    """Kinds of fruit in a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket() -> dict[str, int]:
    """A basket of at least three kinds and five pieces of fruit."""
    return {"banana": 2, "apple": 2, "peach": 2}


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add 20 of every kind of fruit not already in the basket."""
    for fruit in Fruit:
        basket.setdefault(fruit, 20)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _parse_u8(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits:
        raise ValueError("invalid digit found in string")
    value = 0
    for ch in digits:
        if not "0" <= ch <= "9":
            raise ValueError("invalid digit found in string")
        value = value * 10 + (ord(ch) - ord("0"))
        if value > _U8_MAX:
            raise ValueError("number too large to fit in target type")
    return value


def _add_u8(a: int, b: int) -> int:
    total = a + b
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of ``team1,team2,goals1,goals2``."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"expected four comma separated fields: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_u8(fields[2])
        team_2_score = _parse_u8(fields[3])

        team1 = scores.setdefault(team_1_name, Team(team_1_name))
        team1.goals_scored = _add_u8(team1.goals_scored, team_1_score)
        team1.goals_conceded = _add_u8(team1.goals_conceded, team_2_score)

        team2 = scores.setdefault(team_2_name, Team(team_2_name))
        team2.goals_scored = _add_u8(team2.goals_scored, team_2_score)
        team2.goals_conceded = _add_u8(team2.goals_conceded, team_1_score)
    return scores