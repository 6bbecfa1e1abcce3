from __future__ import annotations

import logging
from typing import Any

from ..application.controller import QuizController
from .interfaces import Presenter
from .scoring import guess_record, summarize_records

logger = logging.getLogger(__name__)


def run_core(
    presenter: Presenter,
    controller: QuizController,
    *,
    rounds: int,
    tree_count: object = None,
) -> list[dict[str, Any]]:
    """Drive ``rounds`` quiz rounds through ``presenter``.

    A "new round" action redraws the current round without recording a
    guess; "quit" ends the session early. Returns the guess records.
    """

    presenter.start_session(rounds)
    records: list[dict[str, Any]] = []

    played = 0
    while played < rounds:
        session = controller.start_new_round(tree_count)
        presenter.show_round(session, played + 1)
        action = presenter.prompt_action(session.size)
        if action.kind == "quit":
            logger.debug("session quit", extra={"played": played})
            break
        if action.kind == "new_round" or action.guess is None:
            continue
        result = controller.submit_guess(action.guess)
        presenter.show_reveal(session, result)
        played += 1
        records.append(
            guess_record(
                played,
                trees=session.size,
                guess=result.guess,
                majority=result.majority,
                correct=result.is_correct,
            )
        )

    presenter.summary(summarize_records(records))
    return records
