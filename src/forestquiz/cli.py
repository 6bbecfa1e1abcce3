from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from .application.controller import QuizController, normalize_tree_count
from .core.engine_core import run_core
from .core.rng import make_rng
from .core.settings import LOG_LEVELS, QuizSettings
from .ui.presenters import RichPresenter


def _add_play_args(p: argparse.ArgumentParser, settings: QuizSettings) -> None:
    p.add_argument(
        "--trees",
        type=str,
        default=str(settings.default_trees),
        help="Trees per round; clamped to 3-15 and forced odd",
    )
    p.add_argument("--rounds", type=int, default=5, help="Number of rounds to play")
    # If omitted, runs with a random seed for variety. Pass an int to reproduce.
    p.add_argument("--seed", type=int, default=settings.seed, help="RNG seed (random if omitted)")
    p.add_argument("--no-color", action="store_true", help="Disable colored output (default is colored)")
    p.add_argument("--tui", action="store_true", help="Launch the Textual interface instead of the prompt")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="Logging level (default: WARNING)",
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Terminal quiz. An optional leading "play" subcommand is accepted."""

    args_in = list(sys.argv[1:] if argv is None else argv)
    first_non_flag = next((t for t in args_in if not t.startswith("-")), None)
    if first_non_flag == "play":
        args_in.remove("play")

    settings = QuizSettings.from_env()
    parser = argparse.ArgumentParser(prog="forestquiz", description="Random forest majority-vote quiz")
    _add_play_args(parser, settings)
    args = parser.parse_args(args_in)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.tui:
        from .ui.textual_app import run_textual

        run_textual(trees=normalize_tree_count(args.trees), seed=args.seed)
        return

    controller = QuizController(rng=make_rng(args.seed), default_trees=settings.default_trees)
    run_core(
        RichPresenter(no_color=args.no_color),
        controller,
        rounds=max(1, args.rounds),
        tree_count=args.trees,
    )


if __name__ == "__main__":
    main()
