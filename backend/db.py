"""
Session store shared across routers.
No game logic lives here — only registry primitives.
"""
import threading
import uuid

from fastapi import HTTPException

from analytics.game import GameSession
from models import Difficulty, HistoricalFigure
from queries.biography import WikipediaLookup

_sessions: dict[str, GameSession] = {}
_lock = threading.Lock()


def create_session(target_a: HistoricalFigure, target_b: HistoricalFigure, difficulty: Difficulty) -> GameSession:
    session = GameSession(id=uuid.uuid4().hex, target_a=target_a, target_b=target_b, difficulty=difficulty)
    with _lock:
        _sessions[session.id] = session
    return session


def get_session(session_id: str) -> GameSession:
    with _lock:
        session = _sessions.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Game '{session_id}' not found.")
    return session


def drop_session(session_id: str) -> None:
    with _lock:
        _sessions.pop(session_id, None)


def clear_sessions() -> None:
    with _lock:
        _sessions.clear()


# ── Biography lookup ─────────────────────────────────────────────────────────

async def get_lookup():
    """FastAPI dependency: one lookup client per request."""
    async with WikipediaLookup() as lookup:
        yield lookup
