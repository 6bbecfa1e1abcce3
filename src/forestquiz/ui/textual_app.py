from __future__ import annotations

import random

from textual import on
from textual.app import App, ComposeResult
from textual.containers import Container, Grid, Horizontal
from textual.widgets import Button, Footer, Header, Input, Label, Static

from ..application.controller import QuizController
from ..core.formatting import (
    class_label,
    feedback_text,
    format_point,
    majority_line,
    split_label,
    tree_title,
    vote_chip,
)
from ..core.models import GuessResult, Session, Tree
from ..core.scoring import guess_record, summarize_records
from ..core.settings import DEFAULT_TREES
from ..dynamic.evaluator import routes_left

CLASS_STYLES = {
    0: "#d24a5f",  # red – punchy crimson
    1: "#2d6fe6",  # blue – vibrant cobalt
}

_CSS = """
    Screen {
        layout: vertical;
        background: #f4f6fb;
        color: #1b233d;
    }
    .section {
        padding: 1 2;
        background: #ffffff;
        border: solid #d9e2f5;
        margin: 0 0 1 0;
    }
    #title {
        text-align: center;
        color: #111a33;
        width: 100%;
    }
    #point {
        text-align: center;
        width: 100%;
        padding: 0 2;
        background: #e7edff;
        color: #1b2d55;
    }
    #config-row, #guess-row {
        height: auto;
        align-horizontal: center;
    }
    #tree-count {
        width: 12;
    }
    #forest {
        layout: grid;
        grid-size: 3;
        grid-gutter: 1 2;
        height: auto;
    }
    .tree-card {
        height: auto;
        padding: 0 1;
        background: #f1f4fb;
        border: dashed #c3cde3;
        color: #1b2d55;
    }
    #btn-red { background: #f2d6d9; color: #684249; }
    #btn-blue { background: #dbe6fb; color: #283f72; }
    #btn-new { background: #2f6bff; color: #ffffff; }
    #feedback {
        min-height: 3;
        color: #2d3b62;
    }
"""


class QuizApp(App[None]):
    TITLE = "Random Forest Quiz"
    SUB_TITLE = "Predict the majority vote"
    BINDINGS = [
        ("ctrl+n", "new_round", "New round"),
        ("r", "guess(0)", "Guess Red"),
        ("b", "guess(1)", "Guess Blue"),
        ("ctrl+q", "quit", "Quit"),
    ]
    CSS = _CSS

    def __init__(self, *, trees: int = DEFAULT_TREES, rng: random.Random | None = None) -> None:
        super().__init__()
        self._requested_trees = trees
        self.controller = QuizController(rng=rng, default_trees=trees)
        self.records: list[dict] = []

    def compose(self) -> ComposeResult:  # type: ignore[override]
        yield Header(show_clock=False)
        with Container(classes="section", id="info"):
            yield Label("Random Forest Quiz", id="title")
            yield Static("", id="point")
            with Horizontal(id="config-row"):
                yield Label("Trees (3–15, odd): ")
                yield Input(value=str(self._requested_trees), id="tree-count")
                yield Button("New round", id="btn-new")
        with Container(classes="section"):
            yield Grid(id="forest")
        with Container(classes="section"):
            with Horizontal(id="guess-row"):
                yield Button("Red", id="btn-red")
                yield Button("Blue", id="btn-blue")
            yield Static("", id="feedback")
            yield Static("", id="votes")
        yield Footer()

    def on_mount(self) -> None:  # type: ignore[override]
        self.new_round()

    # --- rendering helpers ---
    @staticmethod
    def _leaf_markup(cls: int, *, taken: bool) -> str:
        style = CLASS_STYLES.get(cls, "white")
        label = class_label(cls)
        if taken:
            return f"[b reverse {style}] {label} [/]"
        return f"[{style}]{label}[/]"

    @classmethod
    def render_tree_card(cls, tree: Tree, session: Session, *, reveal: bool) -> str:
        went_left = routes_left(tree, session.point)
        left = cls._leaf_markup(tree.left_class, taken=reveal and went_left)
        right = cls._leaf_markup(tree.right_class, taken=reveal and not went_left)
        if reveal:
            vote = session.votes[tree.id]
            vote_line = f"Vote: {cls._leaf_markup(vote, taken=False)}"
        else:
            vote_line = "Vote: [dim]?[/]"
        return "\n".join(
            [
                f"[b]{tree_title(tree)}[/]",
                f"{split_label(tree)}",
                f"≤ {left}   > {right}",
                vote_line,
            ]
        )

    @staticmethod
    def render_votes(result: GuessResult) -> str:
        chips = [
            f"[{CLASS_STYLES.get(vote, 'white')}]{vote_chip(i, vote)}[/]" for i, vote in enumerate(result.votes)
        ]
        return "  ".join(chips) + f"\n[b]{majority_line(result)}[/]"

    def _render_forest(self, *, reveal: bool) -> None:
        session = self.controller.session
        if session is None:
            return
        forest = self.query_one("#forest", Grid)
        forest.remove_children()
        cards = [
            Static(self.render_tree_card(tree, session, reveal=reveal), classes="tree-card")
            for tree in session.forest
        ]
        if cards:
            forest.mount(*cards)

    # --- actions ---
    def new_round(self) -> None:
        count_input = self.query_one("#tree-count", Input)
        session = self.controller.start_new_round(count_input.value)
        count_input.value = str(session.size)
        self.query_one("#point", Static).update(format_point(session.point))
        self.query_one("#feedback", Static).update("[dim]Which class does the forest vote for?[/]")
        self.query_one("#votes", Static).update("")
        self._render_forest(reveal=False)

    def guess(self, cls: int) -> None:
        if self.controller.session is None or not self.controller.votes_hidden:
            return
        result = self.controller.submit_guess(cls)
        session = self.controller.session
        self.records.append(
            guess_record(
                self.controller.rounds_started,
                trees=session.size,
                guess=cls,
                majority=result.majority,
                correct=result.is_correct,
            )
        )
        stats = summarize_records(self.records, rounds=self.controller.rounds_started)
        colour = "green" if result.is_correct else "red"
        self.query_one("#feedback", Static).update(
            f"[{colour}]{feedback_text(result)}[/]  [dim]{stats.correct}/{stats.guesses} correct[/]"
        )
        self.query_one("#votes", Static).update(self.render_votes(result))
        self._render_forest(reveal=True)

    @on(Button.Pressed, "#btn-new")
    def _on_new(self) -> None:
        self.new_round()

    @on(Button.Pressed, "#btn-red")
    def _on_red(self) -> None:
        self.guess(0)

    @on(Button.Pressed, "#btn-blue")
    def _on_blue(self) -> None:
        self.guess(1)

    @on(Input.Submitted, "#tree-count")
    def _on_count_submitted(self) -> None:
        self.new_round()

    def action_new_round(self) -> None:
        self.new_round()

    def action_guess(self, cls: int) -> None:
        self.guess(cls)


def run_textual(trees: int = DEFAULT_TREES, seed: int | None = None) -> None:
    rng = random.Random(seed) if seed is not None else None
    QuizApp(trees=trees, rng=rng).run()
