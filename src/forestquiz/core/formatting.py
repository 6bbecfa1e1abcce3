from __future__ import annotations

from .models import GuessResult, Point, Tree
from .settings import CLASS_LABELS


def class_label(cls: int) -> str:
    return CLASS_LABELS.get(cls, "?")


def format_threshold(threshold: float) -> str:
    return f"{threshold:.2f}"


def format_point(point: Point) -> str:
    return f"Test point: x1 = {point.x1:.2f}, x2 = {point.x2:.2f}"


def split_label(tree: Tree) -> str:
    return f"{tree.feature} ≤ {format_threshold(tree.threshold)}"


def tree_title(tree: Tree) -> str:
    # Trees are numbered from 1 for learners.
    return f"Tree {tree.id + 1}"


def vote_chip(index: int, vote: int) -> str:
    return f"T{index + 1} vote: {class_label(vote)}"


def majority_line(result: GuessResult) -> str:
    return (
        f"Forest majority: {class_label(result.majority)} "
        f"(Red: {result.red_votes}, Blue: {result.blue_votes})"
    )


def feedback_text(result: GuessResult) -> str:
    if result.is_correct:
        return "Correct! 🎉"
    return f"Incorrect. Forest predicts {class_label(result.majority)}."
