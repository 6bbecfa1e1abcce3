"""Random forest generation and evaluation."""

from .evaluator import evaluate, evaluate_forest, majority_vote, routes_left
from .generator import generate_forest, generate_point, generate_tree

__all__ = [
    "evaluate",
    "evaluate_forest",
    "generate_forest",
    "generate_point",
    "generate_tree",
    "majority_vote",
    "routes_left",
]
