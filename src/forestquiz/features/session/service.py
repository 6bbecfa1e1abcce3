from __future__ import annotations

import logging
import secrets
import string
import threading
from dataclasses import dataclass, field
from typing import Any

from ...application.controller import QuizController, normalize_tree_count
from ...core.formatting import class_label, feedback_text, format_point, majority_line, split_label, tree_title
from ...core.models import GuessResult, RoundPhase
from ...core.rng import make_rng
from ...core.scoring import guess_record, summarize_records
from ...core.settings import DEFAULT_TREES
from ...dynamic.evaluator import routes_left
from .schemas import GuessPayload, PointPayload, RoundPayload, SummaryPayload, TreePayload

__all__ = [
    "SessionConfig",
    "SessionManager",
    "SessionState",
    "_guess_payload",
    "_round_payload",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionConfig:
    """Configuration for a quiz session."""

    trees: int = DEFAULT_TREES
    seed: int | None = None


@dataclass
class SessionState:
    config: SessionConfig
    controller: QuizController
    records: list[dict[str, Any]] = field(default_factory=list)


class SessionManager:
    """Owns one quiz controller per session, independent of the presentation layer."""

    def __init__(self) -> None:
        self._sessions: dict[str, SessionState] = {}
        self._lock = threading.Lock()

    def create_session(self, config: SessionConfig) -> str:
        seed = config.seed if config.seed is not None else secrets.SystemRandom().getrandbits(32)
        trees = normalize_tree_count(config.trees)
        controller = QuizController(rng=make_rng(seed), default_trees=trees)
        controller.start_new_round()
        session_id = _sid()
        state = SessionState(config=SessionConfig(trees=trees, seed=seed), controller=controller)
        with self._lock:
            self._sessions[session_id] = state
        logger.debug("session created", extra={"session_id": session_id, "trees": trees})
        return session_id

    def get_round(self, session_id: str) -> RoundPayload:
        with self._lock:
            state = self._require_session(session_id)
            return _round_payload(state.controller)

    def new_round(self, session_id: str, trees: object = None) -> RoundPayload:
        with self._lock:
            state = self._require_session(session_id)
            requested = trees if trees is not None else state.config.trees
            state.controller.start_new_round(requested)
            return _round_payload(state.controller)

    def guess(self, session_id: str, guessed_class: int) -> GuessPayload:
        with self._lock:
            state = self._require_session(session_id)
            controller = state.controller
            first_guess = controller.phase is RoundPhase.HIDDEN
            result = controller.submit_guess(guessed_class)
            session = controller.session
            if first_guess and session is not None:
                state.records.append(
                    guess_record(
                        controller.rounds_started,
                        trees=session.size,
                        guess=result.guess,
                        majority=result.majority,
                        correct=result.is_correct,
                    )
                )
            return _guess_payload(result)

    def summary(self, session_id: str) -> SummaryPayload:
        with self._lock:
            state = self._require_session(session_id)
            stats = summarize_records(state.records, rounds=state.controller.rounds_started)
            return SummaryPayload(
                rounds=stats.rounds,
                guesses=stats.guesses,
                correct=stats.correct,
                accuracy_pct=stats.accuracy_pct,
                streak=stats.streak,
                best_streak=stats.best_streak,
            )

    def _require_session(self, session_id: str) -> SessionState:
        state = self._sessions.get(session_id)
        if state is None:
            raise KeyError(f"session '{session_id}' not found")
        return state


def _sid(length: int = 10) -> str:
    alphabet = string.ascii_lowercase + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def _guess_payload(result: GuessResult) -> GuessPayload:
    return GuessPayload(
        correct=result.is_correct,
        guess=result.guess,
        majority=result.majority,
        majority_label=class_label(result.majority),
        votes=list(result.votes),
        red_votes=result.red_votes,
        blue_votes=result.blue_votes,
        feedback=feedback_text(result),
        summary_line=majority_line(result),
    )


def _round_payload(controller: QuizController) -> RoundPayload:
    session = controller.session
    if session is None:
        raise ValueError("controller has no active round")
    reveal = not controller.votes_hidden
    trees = [
        TreePayload(
            id=tree.id,
            title=tree_title(tree),
            feature=tree.feature,
            threshold=tree.threshold,
            split=split_label(tree),
            left_class=tree.left_class,
            right_class=tree.right_class,
            left_label=class_label(tree.left_class),
            right_label=class_label(tree.right_class),
            vote=vote if reveal else None,
            went_left=routes_left(tree, session.point) if reveal else None,
        )
        for tree, vote in zip(session.forest, session.votes)
    ]
    result = controller.last_result
    return RoundPayload(
        round_no=controller.rounds_started,
        tree_count=session.size,
        point=PointPayload(x1=session.point.x1, x2=session.point.x2),
        point_text=format_point(session.point),
        trees=trees,
        votes_hidden=not reveal,
        reveal=_guess_payload(result) if reveal and result is not None else None,
    )
