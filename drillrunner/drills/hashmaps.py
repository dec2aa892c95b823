"""Dictionary drills: fruit baskets and a football scores table."""

from __future__ import annotations

import re
from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import Enum

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U8_MAX = 255


def fruit_basket() -> dict[str, int]:
    """A basket with three kinds of fruit, two of each."""
    return {"banana": 2, "apple": 2, "orange": 2}


class Fruit(Enum):
    """Kinds of fruit that may go into a basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: MutableMapping[Fruit, int]) -> None:
    """Add one of every missing kind of fruit, leaving existing counts alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    name: str
    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid goal count: {text!r}")
    value = int(text)
    if value > _U8_MAX:
        raise ValueError(f"goal count out of range: {text!r}")
    return value


def _add_goals(current: int, extra: int) -> int:
    total = current + extra
    if total > _U8_MAX:
        raise OverflowError("attempt to add with overflow")
    return total


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of teams from lines of ``team1,team2,goals1,goals2``.

    Raises ValueError for a malformed line and OverflowError when a total
    goes above 255.
    """
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_goals(fields[2])
        team_2_score = _parse_goals(fields[3])

        team1 = scores.setdefault(team_1_name, Team(team_1_name))
        team1.goals_scored = _add_goals(team1.goals_scored, team_1_score)
        team1.goals_conceded = _add_goals(team1.goals_conceded, team_2_score)

        team2 = scores.setdefault(team_2_name, Team(team_2_name))
        team2.goals_scored = _add_goals(team2.goals_scored, team_2_score)
        team2.goals_conceded = _add_goals(team2.goals_conceded, team_1_score)
    return scores