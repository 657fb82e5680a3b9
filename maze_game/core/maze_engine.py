"""
Text Maze movement engine.

A four-outcome transition function over MazeState:
- Boundary check (cannot step off the grid)
- Wall collision
- Position update
- Exit detection
"""

from enum import Enum

from .maze_state import MazeState


class Direction(Enum):
    """Movement directions."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            Direction.UP: (0, -1),
            Direction.DOWN: (0, 1),
            Direction.LEFT: (-1, 0),
            Direction.RIGHT: (1, 0),
        }
        return deltas[self]


class MoveOutcome(Enum):
    """Result of a single move."""
    MOVED = "moved"
    BLOCKED_BY_BOUNDARY = "blocked_by_boundary"
    BLOCKED_BY_WALL = "blocked_by_wall"
    REACHED_EXIT = "reached_exit"

    @property
    def message(self) -> str:
        messages = {
            MoveOutcome.MOVED: "Moved.",
            MoveOutcome.BLOCKED_BY_BOUNDARY: "Cannot move off the edge!",
            MoveOutcome.BLOCKED_BY_WALL: "Blocked by wall!",
            MoveOutcome.REACHED_EXIT: "!!! VICTORY !!! You found the exit!",
        }
        return messages[self]

    @property
    def is_blocked(self) -> bool:
        return self in (MoveOutcome.BLOCKED_BY_BOUNDARY, MoveOutcome.BLOCKED_BY_WALL)

    @property
    def is_terminal(self) -> bool:
        return self is MoveOutcome.REACHED_EXIT


def apply_move(state: MazeState, direction: Direction) -> MoveOutcome:
    """
    Move the player one cell in direction.

    Blocked moves leave the state untouched. Calling this again after
    REACHED_EXIT is not meaningful; the caller must end the game.

    Args:
        state: Maze to update in place.
        direction: Direction to move.

    Returns:
        MoveOutcome describing what happened.
    """
    dx, dy = direction.delta
    target = state.player_position.offset(dx, dy)

    if not state.in_bounds(target):
        return MoveOutcome.BLOCKED_BY_BOUNDARY

    if state.is_wall(target):
        return MoveOutcome.BLOCKED_BY_WALL

    state.player_position = target

    if target == state.exit_position:
        return MoveOutcome.REACHED_EXIT
    return MoveOutcome.MOVED
