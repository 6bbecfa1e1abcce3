from __future__ import annotations

from abc import ABC, abstractmethod

from .models import Action, GuessResult, Session
from .scoring import SummaryStats


class Presenter(ABC):
    """Render sink for quiz rounds; implementations own all I/O."""

    @abstractmethod
    def start_session(self, total_rounds: int) -> None: ...

    @abstractmethod
    def show_round(self, session: Session, round_no: int) -> None:
        """Render the point and forest with every vote hidden."""

    @abstractmethod
    def prompt_action(self, n_trees: int) -> Action: ...

    @abstractmethod
    def show_reveal(self, session: Session, result: GuessResult) -> None: ...

    @abstractmethod
    def summary(self, stats: SummaryStats) -> None: ...
