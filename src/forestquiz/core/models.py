from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

Feature = Literal["x1", "x2"]


@dataclass(frozen=True)
class Tree:
    """Depth-2 tree: one split on ``feature`` and two constant leaves."""

    id: int
    feature: Feature
    threshold: float
    left_class: int
    right_class: int


@dataclass(frozen=True)
class Point:
    x1: float
    x2: float

    def value(self, feature: str) -> float:
        if feature == "x1":
            return self.x1
        if feature == "x2":
            return self.x2
        raise KeyError(f"unknown feature '{feature}'")


@dataclass(frozen=True)
class Session:
    """One round: forest, test point and the precomputed vote breakdown."""

    forest: tuple[Tree, ...]
    point: Point
    votes: tuple[int, ...]
    majority: int

    @property
    def size(self) -> int:
        return len(self.forest)


@dataclass(frozen=True)
class GuessResult:
    is_correct: bool
    guess: int
    majority: int
    votes: tuple[int, ...]

    @property
    def blue_votes(self) -> int:
        return sum(1 for v in self.votes if v == 1)

    @property
    def red_votes(self) -> int:
        return len(self.votes) - self.blue_votes


class RoundPhase(str, Enum):
    CONFIGURING = "configuring"
    HIDDEN = "hidden"
    REVEALED = "revealed"


@dataclass(frozen=True)
class Action:
    """User input captured by a presenter between reveal steps."""

    kind: Literal["guess", "new_round", "quit"]
    guess: int | None = None
