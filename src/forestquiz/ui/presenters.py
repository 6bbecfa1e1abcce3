from __future__ import annotations

from collections.abc import Callable

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..core.formatting import (
    class_label,
    feedback_text,
    format_point,
    majority_line,
    split_label,
    tree_title,
    vote_chip,
)
from ..core.interfaces import Presenter
from ..core.models import Action, GuessResult, Session
from ..core.scoring import SummaryStats
from ..dynamic.evaluator import routes_left

_CLASS_STYLE = {0: "bold #d24a5f", 1: "bold #2d6fe6"}

_GUESS_ALIASES = {
    "0": 0,
    "r": 0,
    "red": 0,
    "1": 1,
    "b": 1,
    "blue": 1,
}


class RichPresenter(Presenter):
    def __init__(
        self,
        *,
        no_color: bool = False,
        console: Console | None = None,
        input_fn: Callable[[str], str] | None = None,
    ) -> None:
        if console is not None:
            self.console = console
        elif no_color:
            self.console = Console(force_terminal=False, color_system=None)
        else:
            self.console = Console(force_terminal=True, color_system="auto")
        self._input = input_fn or input
        self._total_rounds = 0

    def start_session(self, total_rounds: int) -> None:
        self._total_rounds = total_rounds
        guide = (
            "[bold]Welcome![/] Each round deals a small forest of one-split trees.\n"
            "- Follow the test point down every tree in your head.\n"
            "- Predict the class most trees vote for.\n"
            "- After your guess, every tree's vote is revealed.\n\n"
            "[bold]Controls[/]: r = Red • b = Blue • n = new round • h = help • q = quit"
        )
        self.console.print(Panel(guide, title="Random Forest Quiz", border_style="green"))
        self.console.print()

    def show_round(self, session: Session, round_no: int) -> None:
        self.console.rule(f"Round {round_no}/{self._total_rounds} — {session.size} trees")
        self.console.print(format_point(session.point))
        self.console.print(self._forest_table(session, reveal=False))
        self.console.print("[dim]Which class does the forest vote for?[/]")

    def prompt_action(self, n_trees: int) -> Action:  # noqa: ARG002
        while True:
            raw = self._input("Your guess (r/b), n = new round, q = quit: ").strip().lower()
            if raw in _GUESS_ALIASES:
                return Action(kind="guess", guess=_GUESS_ALIASES[raw])
            if raw in {"n", "new"}:
                return Action(kind="new_round")
            if raw in {"q", "quit"}:
                return Action(kind="quit")
            if raw in {"h", "help"}:
                self._print_help()
                continue
            self.console.print("[red]Invalid input[/]. Enter r for Red, b for Blue, n or q.")

    def show_reveal(self, session: Session, result: GuessResult) -> None:
        style = "green" if result.is_correct else "yellow"
        self.console.print(f"\n[{style}]{feedback_text(result)}[/]")
        self.console.print(self._forest_table(session, reveal=True))
        chips = [
            f"[{_CLASS_STYLE.get(vote, 'bold')}]{vote_chip(i, vote)}[/]" for i, vote in enumerate(result.votes)
        ]
        self.console.print("  ".join(chips))
        self.console.print(f"[bold]{majority_line(result)}[/]")
        self.console.print("[dim]—[/]\n")

    def summary(self, stats: SummaryStats) -> None:
        if not stats.guesses:
            self.console.print("No rounds answered.")
            return
        table = Table(title="Session Summary", show_header=False)
        table.add_row("Rounds answered:", str(stats.guesses))
        table.add_row("Correct guesses:", f"{stats.correct} ({stats.accuracy_pct:.0f}%)")
        table.add_row("Current streak:", str(stats.streak))
        table.add_row("Best streak:", str(stats.best_streak))
        self.console.print("\n")
        self.console.print(table)

    # --- helpers ---
    def _leaf(self, cls: int, *, taken: bool) -> str:
        label = class_label(cls)
        if taken:
            return f"[{_CLASS_STYLE.get(cls, 'bold')} reverse] {label} [/]"
        return f"[{_CLASS_STYLE.get(cls, 'bold')}]{label}[/]"

    def _forest_table(self, session: Session, *, reveal: bool) -> Table:
        table = Table(show_header=True, header_style="bold blue", box=box.SIMPLE_HEAVY)
        table.add_column("Tree", style="cyan", no_wrap=True)
        table.add_column("Split", style="bold")
        table.add_column("≤ (left)", justify="center")
        table.add_column("> (right)", justify="center")
        table.add_column("Vote", justify="center")
        for tree, vote in zip(session.forest, session.votes):
            went_left = reveal and routes_left(tree, session.point)
            went_right = reveal and not went_left
            vote_cell = self._leaf(vote, taken=False) if reveal else "[dim]?[/]"
            table.add_row(
                tree_title(tree),
                split_label(tree),
                self._leaf(tree.left_class, taken=went_left),
                self._leaf(tree.right_class, taken=went_right),
                vote_cell,
            )
        return table

    def _print_help(self) -> None:
        table = Table(show_header=False)
        table.add_row("Guess Red:", "r or 0")
        table.add_row("Guess Blue:", "b or 1")
        table.add_row("New round:", "n")
        table.add_row("Help:", "h")
        table.add_row("Quit:", "q")
        self.console.print(Panel.fit(table, title="Controls", style="dim"))
