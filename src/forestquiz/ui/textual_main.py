from __future__ import annotations

import argparse

from ..core.settings import QuizSettings
from .textual_app import run_textual


def main() -> None:
    settings = QuizSettings.from_env()
    p = argparse.ArgumentParser(prog="forestquiz-tui", description="Textual UI for the random forest quiz")
    p.add_argument("--trees", type=int, default=settings.default_trees, help="Trees per round (3-15, odd)")
    p.add_argument("--seed", type=int, default=settings.seed, help="RNG seed (random if omitted)")
    args = p.parse_args()
    run_textual(trees=args.trees, seed=args.seed)


if __name__ == "__main__":
    main()
