"""Application-layer services coordinating quiz rounds."""

from .controller import QuizController, normalize_tree_count, parse_tree_count, start_new_round, submit_guess
from .session_engine import SessionEngine

__all__ = [
    "QuizController",
    "SessionEngine",
    "normalize_tree_count",
    "parse_tree_count",
    "start_new_round",
    "submit_guess",
]
