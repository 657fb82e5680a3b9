"""In-memory registry of live game sessions for the HTTP API."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from maze_game.config import get_settings
from maze_game.core.maze_state import MazeState
from maze_game.services.game_controller import GameController

logger = logging.getLogger(__name__)

DEFAULT_MAX_SESSIONS = 1000


@dataclass
class GameSession:
    """A running game plus where its maze came from."""
    session_id: str
    controller: GameController
    source: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def state(self) -> MazeState:
        return self.controller.state


class SessionStore:
    """
    Holds sessions for the lifetime of the process. Nothing is persisted.

    The store keeps at most ``max_sessions`` entries. When it is full,
    finished sessions are dropped first, then the oldest active ones.
    """

    def __init__(self, max_sessions: int = DEFAULT_MAX_SESSIONS):
        self.max_sessions = max_sessions
        self._sessions: dict[str, GameSession] = {}

    def create(self, state: MazeState, source: str) -> GameSession:
        """Start a new session on state."""
        self._make_room()

        session_id = f"sess_{uuid.uuid4().hex[:12]}"
        session = GameSession(
            session_id=session_id,
            controller=GameController(state),
            source=source,
        )
        self._sessions[session_id] = session
        logger.info(f"Session {session_id} started ({source}, {state.width}x{state.height})")
        return session

    def get(self, session_id: str) -> Optional[GameSession]:
        """Get session by ID."""
        return self._sessions.get(session_id)

    def remove(self, session_id: str) -> bool:
        """End and remove a session."""
        if session_id in self._sessions:
            del self._sessions[session_id]
            return True
        return False

    def clear(self) -> None:
        self._sessions.clear()

    def _make_room(self) -> None:
        if len(self._sessions) < self.max_sessions:
            return

        finished = [sid for sid, s in self._sessions.items() if s.controller.finished]
        for session_id in finished:
            del self._sessions[session_id]

        # Dicts keep insertion order, so the first key is the oldest session
        while len(self._sessions) >= self.max_sessions:
            oldest = next(iter(self._sessions))
            del self._sessions[oldest]
            logger.warning(f"Session store full, evicted active session {oldest}")

        if finished:
            logger.info(f"Evicted {len(finished)} finished sessions")

    def __len__(self) -> int:
        return len(self._sessions)


@lru_cache
def get_session_store() -> SessionStore:
    """Get the process-wide session store."""
    return SessionStore(get_settings().max_sessions)
