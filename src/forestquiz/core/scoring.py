from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SummaryStats:
    rounds: int
    guesses: int
    correct: int
    accuracy_pct: float
    streak: int
    best_streak: int


def guess_record(round_no: int, *, trees: int, guess: int, majority: int, correct: bool) -> dict[str, Any]:
    return {
        "round": round_no,
        "trees": trees,
        "guess": guess,
        "majority": majority,
        "correct": correct,
    }


def summarize_records(records: Sequence[Mapping[str, Any]], *, rounds: int | None = None) -> SummaryStats:
    """Tally guess records into accuracy and streak figures.

    ``rounds`` counts started rounds, including ones left unanswered; when
    omitted it falls back to the number of distinct rounds in ``records``.
    """

    guesses = len(records)
    correct = sum(1 for r in records if r.get("correct"))
    round_ids = {r.get("round", idx) for idx, r in enumerate(records)}
    played = rounds if rounds is not None else len(round_ids)

    best = 0
    current = 0
    for record in records:
        if record.get("correct"):
            current += 1
            best = max(best, current)
        else:
            current = 0

    accuracy_pct = (100.0 * correct / guesses) if guesses else 0.0
    return SummaryStats(
        rounds=played,
        guesses=guesses,
        correct=correct,
        accuracy_pct=accuracy_pct,
        streak=current,
        best_streak=best,
    )
