"""Maze routes for listing, inspecting and validating mazes."""

from fastapi import APIRouter, HTTPException, status

from maze_game.api.deps import AppSettings, MazeCatalogue
from maze_game.core.maze_parser import MazeLoadError, parse_maze_text
from maze_game.schemas.maze import (
    MazeDetail,
    MazeListItem,
    MazeListResponse,
    MazePosition,
    MazeValidateRequest,
    MazeValidateResponse,
)

router = APIRouter(prefix="/maze", tags=["Mazes"])


@router.get(
    "",
    response_model=MazeListResponse,
)
async def list_mazes(catalogue: MazeCatalogue) -> MazeListResponse:
    """List all bundled mazes.

    Grid rows are not included - use GET /v1/maze/{name} for full details.
    """
    maze_items = [
        MazeListItem(name=name, width=maze.width, height=maze.height)
        for name, maze in catalogue.items()
    ]

    return MazeListResponse(
        mazes=maze_items,
        total=len(maze_items),
    )


@router.get(
    "/{name}",
    response_model=MazeDetail,
)
async def get_maze(name: str, catalogue: MazeCatalogue) -> MazeDetail:
    """Get a bundled maze with its rendered rows."""
    maze = catalogue.get(name)

    if maze is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {name}",
        )

    return MazeDetail(
        name=name,
        width=maze.width,
        height=maze.height,
        start=MazePosition(**maze.start_position.to_dict()),
        exit=MazePosition(**maze.exit_position.to_dict()),
        rows=maze.render(),
    )


@router.post(
    "/validate",
    response_model=MazeValidateResponse,
)
async def validate_maze(
    request: MazeValidateRequest,
    settings: AppSettings,
) -> MazeValidateResponse:
    """Validate maze text without starting a session."""
    try:
        parse_maze_text(
            request.grid_data,
            min_size=settings.min_size,
            max_size=settings.max_size,
            require_reachable=settings.require_reachable,
        )
    except MazeLoadError as e:
        return MazeValidateResponse(valid=False, error=str(e), category=e.category)

    return MazeValidateResponse(valid=True)
