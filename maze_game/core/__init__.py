# Core module
from .maze_engine import Direction, MoveOutcome, apply_move
from .maze_generator import (
    InvalidRangeError,
    MazeConfigError,
    MazeGenerator,
    generate_maze,
)
from .maze_parser import (
    MAX_SIZE,
    MIN_SIZE,
    DuplicateMarkerError,
    InvalidCharacterError,
    MarkerKind,
    MazeContentError,
    MazeLoadError,
    MazeShapeError,
    MissingMarkerError,
    NotRectangularError,
    OutOfBoundsError,
    SourceUnavailableError,
    UnreachableExitError,
    load_all_mazes,
    load_maze,
    parse_maze_text,
    read_maze,
    validate_maze_text,
)
from .maze_state import CellType, MazeState, Position

__all__ = [
    "CellType",
    "Direction",
    "DuplicateMarkerError",
    "InvalidCharacterError",
    "InvalidRangeError",
    "MAX_SIZE",
    "MIN_SIZE",
    "MarkerKind",
    "MazeConfigError",
    "MazeContentError",
    "MazeGenerator",
    "MazeLoadError",
    "MazeShapeError",
    "MazeState",
    "MissingMarkerError",
    "MoveOutcome",
    "NotRectangularError",
    "OutOfBoundsError",
    "Position",
    "SourceUnavailableError",
    "UnreachableExitError",
    "apply_move",
    "generate_maze",
    "load_all_mazes",
    "load_maze",
    "parse_maze_text",
    "read_maze",
    "validate_maze_text",
]
