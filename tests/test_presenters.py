from __future__ import annotations

import random

from rich.console import Console

from forestquiz.application import QuizController, submit_guess
from forestquiz.core.engine_core import run_core
from forestquiz.core.models import Point, Session, Tree
from forestquiz.core.scoring import SummaryStats
from forestquiz.dynamic.evaluator import evaluate_forest
from forestquiz.ui.presenters import RichPresenter


def _presenter(answers: list[str]) -> tuple[RichPresenter, Console]:
    console = Console(record=True, width=120, color_system=None, force_terminal=False)
    feed = iter(answers)
    return RichPresenter(console=console, input_fn=lambda _prompt: next(feed)), console


def _fixed_session() -> Session:
    forest = (
        Tree(id=0, feature="x1", threshold=0.5, left_class=1, right_class=0),
        Tree(id=1, feature="x2", threshold=0.35, left_class=0, right_class=1),
        Tree(id=2, feature="x1", threshold=0.8, left_class=1, right_class=0),
    )
    point = Point(x1=0.3, x2=0.9)
    votes, majority = evaluate_forest(forest, point)
    return Session(forest=forest, point=point, votes=votes, majority=majority)


def test_prompt_action_parses_aliases_and_retries():
    presenter, console = _presenter(["??", "h", "Blue"])
    action = presenter.prompt_action(3)
    assert action.kind == "guess"
    assert action.guess == 1
    text = console.export_text()
    assert "Invalid input" in text
    assert "Controls" in text


def test_prompt_action_new_round_and_quit():
    presenter, _ = _presenter(["n", "q", "r"])
    assert presenter.prompt_action(3).kind == "new_round"
    assert presenter.prompt_action(3).kind == "quit"
    assert presenter.prompt_action(3).guess == 0


def test_round_hides_votes_until_reveal():
    presenter, console = _presenter([])
    session = _fixed_session()
    presenter.start_session(1)
    presenter.show_round(session, 1)
    hidden = console.export_text()
    assert "Test point: x1 = 0.30, x2 = 0.90" in hidden
    assert "x2 ≤ 0.35" in hidden
    assert "T1 vote" not in hidden

    presenter.show_reveal(session, submit_guess(session, 0))
    revealed = console.export_text()
    assert "Incorrect. Forest predicts Blue." in revealed
    assert "T1 vote: Blue" in revealed
    assert "Forest majority: Blue (Red: 0, Blue: 3)" in revealed


def test_summary_output():
    presenter, console = _presenter([])
    presenter.summary(SummaryStats(rounds=0, guesses=0, correct=0, accuracy_pct=0.0, streak=0, best_streak=0))
    assert "No rounds answered." in console.export_text()

    presenter.summary(SummaryStats(rounds=4, guesses=4, correct=3, accuracy_pct=75.0, streak=2, best_streak=2))
    text = console.export_text()
    assert "Session Summary" in text
    assert "3 (75%)" in text


def test_full_terminal_session():
    presenter, console = _presenter(["r", "b", "q"])
    records = run_core(presenter, QuizController(rng=random.Random(21)), rounds=3, tree_count=5)
    assert len(records) == 2
    text = console.export_text()
    assert "Round 1/3" in text
    assert "Forest majority:" in text
