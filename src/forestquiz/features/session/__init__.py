"""Session feature: service layer, schemas, and API router."""

from .router import create_session_routers
from .schemas import GuessPayload, PointPayload, RoundPayload, SummaryPayload, TreePayload
from .service import SessionConfig, SessionManager

__all__ = [
    "GuessPayload",
    "PointPayload",
    "RoundPayload",
    "SessionConfig",
    "SessionManager",
    "SummaryPayload",
    "TreePayload",
    "create_session_routers",
]
