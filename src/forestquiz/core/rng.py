"""Random draws used by the forest generator.

Every helper takes the entropy source explicitly and funnels through
``rng.random()``, so a seeded ``random.Random`` reproduces a round and a
:class:`ScriptedRandom` pins every individual draw in tests.
"""

from __future__ import annotations

import math
import random
import secrets
from collections.abc import Iterable, Sequence
from typing import TypeVar

from .errors import InvalidArgument

__all__ = ["ScriptedRandom", "choice", "coin", "make_rng", "uniform_int", "uniform_unit"]

T = TypeVar("T")


def uniform_unit(rng: random.Random) -> float:
    return rng.random()


def uniform_int(rng: random.Random, a: int, b: int) -> int:
    """Return an integer in ``[a, b]`` inclusive. Callers guarantee ``a <= b``."""

    return math.floor(uniform_unit(rng) * (b - a + 1)) + a


def coin(rng: random.Random) -> bool:
    return uniform_unit(rng) < 0.5


def choice(rng: random.Random, items: Sequence[T]) -> T:
    if not items:
        raise InvalidArgument("cannot choose from an empty sequence")
    index = math.floor(uniform_unit(rng) * len(items))
    return items[min(index, len(items) - 1)]


def make_rng(seed: int | None = None) -> random.Random:
    """Build a generator; without a seed one is drawn from the OS."""

    actual_seed = seed if seed is not None else secrets.randbits(32)
    return random.Random(actual_seed)


class ScriptedRandom(random.Random):
    """``random.Random`` whose ``random()`` replays a fixed sequence.

    Raises ``IndexError`` once the script is exhausted so tests notice an
    unexpected extra draw.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._script = [float(v) for v in values]
        self._cursor = 0
        super().__init__(0)

    def random(self) -> float:  # type: ignore[override]
        if self._cursor >= len(self._script):
            raise IndexError(f"scripted random exhausted after {len(self._script)} draws")
        value = self._script[self._cursor]
        self._cursor += 1
        return value

    @property
    def consumed(self) -> int:
        return self._cursor
