"""Quiz tunables and environment-driven settings.

The constants below are pedagogical choices rather than protocol
requirements: the threshold grid keeps mental arithmetic tractable and the
variety probability nudges generated trees toward informative splits.

Runtime settings are read from environment variables so the CLI, the TUI and
the web server share one source of defaults::

    FORESTQUIZ_TREES=7 FORESTQUIZ_SEED=42 forestquiz

Command-line flags override whatever the environment provides.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

from .models import Feature

__all__ = [
    "CLASS_LABELS",
    "DEFAULT_TREES",
    "FEATURES",
    "LOG_LEVELS",
    "MAX_TREES",
    "MIN_TREES",
    "QuizSettings",
    "THRESHOLD_GRID",
    "VARIETY_PROBABILITY",
]

FEATURES: Final[tuple[Feature, Feature]] = ("x1", "x2")
THRESHOLD_GRID: Final[tuple[float, ...]] = (0.2, 0.35, 0.5, 0.65, 0.8)
VARIETY_PROBABILITY: Final = 0.7

MIN_TREES: Final = 3
MAX_TREES: Final = 15
DEFAULT_TREES: Final = 5

CLASS_LABELS: Final[Mapping[int, str]] = {0: "Red", 1: "Blue"}

LOG_LEVELS: Final = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

_ENV_PREFIX: Final = "FORESTQUIZ_"


def _env_int(environ: Mapping[str, str], name: str) -> int | None:
    raw = environ.get(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class QuizSettings:
    """Defaults shared by every presentation layer."""

    default_trees: int = DEFAULT_TREES
    seed: int | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> QuizSettings:
        env = os.environ if environ is None else environ
        trees = _env_int(env, "TREES")
        level = (env.get(_ENV_PREFIX + "LOG_LEVEL") or "WARNING").strip().upper()
        return cls(
            default_trees=trees if trees is not None else DEFAULT_TREES,
            seed=_env_int(env, "SEED"),
            log_level=level if level in LOG_LEVELS else "WARNING",
        )
