"""Session routes for playing maze games."""

import logging
import random

from fastapi import APIRouter, HTTPException, Response, status

from maze_game.api.deps import AppSettings, CurrentSession, Store, get_maze_catalogue
from maze_game.config import Settings
from maze_game.core.maze_engine import Direction
from maze_game.core.maze_generator import MazeGenerator
from maze_game.core.maze_parser import parse_maze_text
from maze_game.core.maze_state import MazeState
from maze_game.schemas.session import (
    CommandRequest,
    CommandResponse,
    MapResponse,
    MoveRequest,
    MoveResponse,
    SessionCreateRequest,
    SessionPosition,
    SessionState,
)
from maze_game.services.session_store import GameSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["Sessions"])


def _position(state: MazeState) -> SessionPosition:
    return SessionPosition(**state.player_position.to_dict())


def _session_state(session: GameSession) -> SessionState:
    state = session.state
    return SessionState(
        id=session.session_id,
        source=session.source,
        width=state.width,
        height=state.height,
        player_position=_position(state),
        exit_position=SessionPosition(**state.exit_position.to_dict()),
        move_count=session.controller.move_count,
        status=session.controller.status.value,
        created_at=session.created_at,
    )


def _build_maze(request: SessionCreateRequest, settings: Settings) -> tuple[MazeState, str]:
    if request.maze is not None:
        # Only bundled mazes need the catalogue on disk
        maze = get_maze_catalogue(settings).get(request.maze)
        if maze is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Maze not found: {request.maze}",
            )
        return maze, f"maze:{request.maze}"

    if request.grid_data is not None:
        maze = parse_maze_text(
            request.grid_data,
            min_size=settings.min_size,
            max_size=settings.max_size,
            require_reachable=settings.require_reachable,
        )
        return maze, "upload"

    options = request.generate
    seed = options.seed if options.seed is not None else settings.seed
    min_size = options.min_size if options.min_size is not None else settings.min_size
    max_size = options.max_size if options.max_size is not None else settings.max_size
    if max_size > settings.max_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"max_size may not exceed {settings.max_size}",
        )

    generator = MazeGenerator(random.Random(seed), settings.exit_attempts)
    return generator.generate(min_size, max_size), "generated"


def _ensure_active(session: GameSession) -> None:
    if session.controller.finished:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Session is not active (status: {session.controller.status.value})",
        )


@router.post(
    "",
    response_model=SessionState,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    request: SessionCreateRequest,
    settings: AppSettings,
    store: Store,
) -> SessionState:
    """Create a new game session.

    The maze comes from a bundled file, uploaded text, or the generator.
    The player starts on the maze's start cell.
    """
    maze, source = _build_maze(request, settings)
    session = store.create(maze, source)
    return _session_state(session)


@router.get(
    "/{session_id}",
    response_model=SessionState,
)
async def get_session(session: CurrentSession) -> SessionState:
    """Get session state by ID."""
    return _session_state(session)


@router.post(
    "/{session_id}/move",
    response_model=MoveResponse,
)
async def move(request: MoveRequest, session: CurrentSession) -> MoveResponse:
    """Move one cell in a direction.

    Blocked moves are reported in the outcome and leave the position unchanged.
    """
    _ensure_active(session)
    result = session.controller.move(Direction(request.direction))

    if result.finished:
        logger.info(
            f"Session {session.session_id} completed in "
            f"{session.controller.move_count} moves"
        )

    return MoveResponse(
        outcome=result.outcome.value,
        message=result.message,
        position=_position(session.state),
        moves=session.controller.move_count,
        status=session.controller.status.value,
    )


@router.post(
    "/{session_id}/command",
    response_model=CommandResponse,
)
async def command(request: CommandRequest, session: CurrentSession) -> CommandResponse:
    """Send a raw console command (W/A/S/D, M or Q)."""
    _ensure_active(session)
    result = session.controller.handle(request.command)

    return CommandResponse(
        action=result.action.value,
        message=result.message,
        outcome=result.outcome.value if result.outcome else None,
        rows=result.rows,
        position=_position(session.state),
        status=session.controller.status.value,
    )


@router.get(
    "/{session_id}/map",
    response_model=MapResponse,
)
async def get_map(session: CurrentSession) -> MapResponse:
    """Render the maze with the player drawn as X."""
    return MapResponse(rows=session.state.render(), player_position=_position(session.state))


@router.delete(
    "/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def end_session(session: CurrentSession, store: Store) -> Response:
    """Quit the game and discard the session."""
    if not session.controller.finished:
        session.controller.quit()
    store.remove(session.session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
