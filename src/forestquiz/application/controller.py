from __future__ import annotations

import logging
import math
import random

from ..core.errors import InvalidArgument, InvalidState
from ..core.models import GuessResult, RoundPhase, Session
from ..core.rng import make_rng
from ..core.settings import DEFAULT_TREES, MAX_TREES, MIN_TREES
from .session_engine import SessionEngine

__all__ = [
    "QuizController",
    "normalize_tree_count",
    "parse_tree_count",
    "start_new_round",
    "submit_guess",
]

logger = logging.getLogger(__name__)


def parse_tree_count(raw: object) -> int | None:
    """Read a requested tree count, truncating toward zero.

    Returns ``None`` for anything that is not a finite number (bools included),
    so callers can substitute their own default.
    """

    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            raw = float(raw.strip())
        except ValueError:
            return None
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    return None


def normalize_tree_count(raw: object, *, default: int = DEFAULT_TREES) -> int:
    """Clamp a requested tree count into ``[MIN_TREES, MAX_TREES]`` and force it odd.

    Missing or non-numeric input falls back to ``default``; nothing is rejected.
    """

    value = parse_tree_count(raw)
    if value is None:
        value = default
    n = max(MIN_TREES, min(MAX_TREES, value))
    if n % 2 == 0:
        n += 1
    # An even ceiling would let the increment overshoot; step back inside.
    if n > MAX_TREES:
        n -= 2
    if n % 2 == 0 or not (MIN_TREES <= n <= MAX_TREES):
        raise AssertionError(f"tree count {n} violates the odd [{MIN_TREES}, {MAX_TREES}] invariant")
    if n != value:
        logger.debug("normalized tree count", extra={"requested": raw, "effective": n})
    return n


def start_new_round(requested_count: object, rng: random.Random) -> Session:
    n = normalize_tree_count(requested_count)
    return SessionEngine(rng=rng).build_round(n)


def submit_guess(session: Session | None, guessed_class: int) -> GuessResult:
    if session is None:
        raise InvalidState("no round has been started")
    if guessed_class not in (0, 1) or isinstance(guessed_class, bool):
        raise InvalidArgument(f"guess must be 0 or 1, got {guessed_class!r}")
    return GuessResult(
        is_correct=guessed_class == session.majority,
        guess=guessed_class,
        majority=session.majority,
        votes=session.votes,
    )


class QuizController:
    """Owns the current round and its Hidden/Revealed phase.

    Each call to :meth:`start_new_round` replaces the round wholesale. The
    first guess of a round reveals it; later guesses return that first
    result untouched until a new round starts.
    """

    def __init__(self, *, rng: random.Random | None = None, default_trees: int = DEFAULT_TREES) -> None:
        self._engine = SessionEngine(rng=rng if rng is not None else make_rng())
        self._default_trees = default_trees
        self._session: Session | None = None
        self._phase = RoundPhase.CONFIGURING
        self._result: GuessResult | None = None
        self.rounds_started = 0

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def phase(self) -> RoundPhase:
        return self._phase

    @property
    def votes_hidden(self) -> bool:
        return self._phase is not RoundPhase.REVEALED

    @property
    def last_result(self) -> GuessResult | None:
        return self._result

    def start_new_round(self, requested_count: object = None) -> Session:
        n = normalize_tree_count(requested_count, default=self._default_trees)
        session = self._engine.build_round(n)
        self._session = session
        self._result = None
        self._phase = RoundPhase.HIDDEN
        self.rounds_started += 1
        logger.debug(
            "round started",
            extra={"round": self.rounds_started, "trees": n, "majority": session.majority},
        )
        return session

    def submit_guess(self, guessed_class: int) -> GuessResult:
        result = submit_guess(self._session, guessed_class)
        if self._phase is RoundPhase.REVEALED and self._result is not None:
            logger.debug("guess ignored after reveal", extra={"guess": guessed_class})
            return self._result
        self._result = result
        self._phase = RoundPhase.REVEALED
        logger.debug("guess submitted", extra={"guess": guessed_class, "correct": result.is_correct})
        return result
