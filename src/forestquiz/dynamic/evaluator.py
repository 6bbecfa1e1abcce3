from __future__ import annotations

from collections.abc import Sequence

from ..core.models import Point, Tree

__all__ = ["evaluate", "evaluate_forest", "majority_vote", "routes_left"]


def routes_left(tree: Tree, point: Point) -> bool:
    # Values equal to the threshold go left.
    return point.value(tree.feature) <= tree.threshold


def evaluate(tree: Tree, point: Point) -> int:
    return tree.left_class if routes_left(tree, point) else tree.right_class


def majority_vote(votes: Sequence[int]) -> int:
    """Return 1 when strictly more than half of ``votes`` are 1, else 0."""

    blue = sum(1 for v in votes if v == 1)
    return 1 if blue * 2 > len(votes) else 0


def evaluate_forest(forest: Sequence[Tree], point: Point) -> tuple[tuple[int, ...], int]:
    votes = tuple(evaluate(tree, point) for tree in forest)
    return votes, majority_vote(votes)
