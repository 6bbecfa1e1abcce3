from __future__ import annotations

__all__ = ["InvalidArgument", "InvalidState", "QuizError"]


class QuizError(Exception):
    """Base class for quiz failures surfaced to callers."""


class InvalidArgument(QuizError, ValueError):
    """Raised for arguments outside an operation's domain (empty choice set, bad guess)."""


class InvalidState(QuizError, RuntimeError):
    """Raised when an operation needs an active round and none exists."""
