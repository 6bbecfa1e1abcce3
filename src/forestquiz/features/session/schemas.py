from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

__all__ = [
    "GuessPayload",
    "PointPayload",
    "RoundPayload",
    "SummaryPayload",
    "TreePayload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class PointPayload(_APIModel):
    x1: float
    x2: float


class TreePayload(_APIModel):
    id: int
    title: str
    feature: str
    threshold: float
    split: str
    left_class: int
    right_class: int
    left_label: str
    right_label: str
    # Populated only once the round is revealed.
    vote: int | None = None
    went_left: bool | None = None


class GuessPayload(_APIModel):
    correct: bool
    guess: int
    majority: int
    majority_label: str
    votes: list[int]
    red_votes: int
    blue_votes: int
    feedback: str
    summary_line: str


class RoundPayload(_APIModel):
    round_no: int
    tree_count: int
    point: PointPayload
    point_text: str
    trees: list[TreePayload]
    votes_hidden: bool
    reveal: GuessPayload | None = None


class SummaryPayload(_APIModel):
    rounds: int
    guesses: int
    correct: int
    accuracy_pct: float
    streak: int
    best_streak: int
