"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, HTTPException, status

from maze_game.config import Settings, get_settings
from maze_game.core.maze_parser import load_all_mazes
from maze_game.core.maze_state import MazeState
from maze_game.services.session_store import GameSession, SessionStore, get_session_store


def get_maze_catalogue(
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict[str, MazeState]:
    """Load the bundled mazes. Each call returns fresh, independent states."""
    return load_all_mazes(
        settings.mazes_dir,
        min_size=settings.min_size,
        max_size=settings.max_size,
        require_reachable=settings.require_reachable,
    )


def get_game_session(
    session_id: str,
    store: Annotated[SessionStore, Depends(get_session_store)],
) -> GameSession:
    """Resolve the session_id path parameter to a live session."""
    session = store.get(session_id)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Session not found: {session_id}",
        )
    return session


# Type aliases for cleaner route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Store = Annotated[SessionStore, Depends(get_session_store)]
MazeCatalogue = Annotated[dict[str, MazeState], Depends(get_maze_catalogue)]
CurrentSession = Annotated[GameSession, Depends(get_game_session)]
