"""Round engine primitives.

A compact orchestration layer keeps random number generation and round
construction together. The controller decides *when* a round is built; the
engine decides *how*.
"""

from __future__ import annotations

import random
from dataclasses import dataclass

from ..core.models import Session
from ..dynamic.evaluator import evaluate_forest
from ..dynamic.generator import generate_forest, generate_point


@dataclass
class SessionEngine:
    """Wraps the RNG for reproducible round generation."""

    rng: random.Random

    def build_round(self, tree_count: int) -> Session:
        forest = generate_forest(self.rng, tree_count)
        point = generate_point(self.rng)
        votes, majority = evaluate_forest(forest, point)
        return Session(forest=forest, point=point, votes=votes, majority=majority)
