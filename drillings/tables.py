"""Lists, dictionaries and a small string-command machine."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union


def vec_loop(values: list[int]) -> list[int]:
    """Double every element of the list in place and return it."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Iterable[int]) -> list[int]:
    """Return a new list with every element doubled."""
    return [value * 2 for value in values]


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of every fruit kind the basket lacks, leaving existing kinds alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _goals(text: str) -> int:
    goals = int(text)
    if not 0 <= goals <= 255:
        raise ValueError(f"goal count out of range: {text!r}")
    return goals


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table of goals from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score, team_2_score = _goals(fields[2]), _goals(fields[3])

        team_1 = scores.setdefault(team_1_name, Team())
        team_1.goals_scored += team_1_score
        team_1.goals_conceded += team_2_score

        team_2 = scores.setdefault(team_2_name, Team())
        team_2.goals_scored += team_2_score
        team_2.goals_conceded += team_1_score
    return scores


@dataclass(frozen=True)
class Uppercase:
    pass


@dataclass(frozen=True)
class Trim:
    pass


@dataclass(frozen=True)
class Append:
    count: int


Command = Union[Uppercase, Trim, Append]


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(count):
            return text + "bar" * count
        case _:
            raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string and return the results in order."""
    return [_apply(text, command) for text, command in items]