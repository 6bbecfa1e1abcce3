from __future__ import annotations

import logging
import random

from ..core.models import Feature, Point, Tree
from ..core.rng import choice, coin, uniform_unit
from ..core.settings import FEATURES, THRESHOLD_GRID, VARIETY_PROBABILITY

__all__ = ["generate_forest", "generate_point", "generate_tree"]

logger = logging.getLogger(__name__)


def generate_tree(
    rng: random.Random,
    index: int,
    *,
    grid: tuple[float, ...] = THRESHOLD_GRID,
    variety: float = VARIETY_PROBABILITY,
) -> Tree:
    """Draw one depth-2 tree.

    Draw order is fixed (feature, threshold, left leaf, right leaf, variety
    roll) so scripted generators line up with tests. Matching leaves are
    split apart with probability ``variety``; the remainder stay degenerate
    on purpose.
    """

    feature: Feature = FEATURES[0] if coin(rng) else FEATURES[1]
    threshold = choice(rng, grid)
    left = 0 if coin(rng) else 1
    right = 0 if coin(rng) else 1
    if left == right and uniform_unit(rng) < variety:
        right = 1 - left
    return Tree(id=index, feature=feature, threshold=threshold, left_class=left, right_class=right)


def generate_point(rng: random.Random) -> Point:
    return Point(x1=round(uniform_unit(rng), 2), x2=round(uniform_unit(rng), 2))


def generate_forest(rng: random.Random, count: int) -> tuple[Tree, ...]:
    forest = tuple(generate_tree(rng, index) for index in range(count))
    logger.debug("generated forest", extra={"trees": count})
    return forest
