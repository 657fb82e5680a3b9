"""
Maze Parser for Text Maze.

Loads and validates maze files from the filesystem or any seekable text stream.

Maze Format:
    # = Wall (impassable)
      = Open path (space)
    S = Start position (exactly one)
    E = Exit (exactly one)

Every row must have the same length and both dimensions must lie within the
configured size range.
"""

import io
import logging
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO, Union

from .maze_state import CellType, MazeState, Position

logger = logging.getLogger(__name__)

MIN_SIZE = 5
MAX_SIZE = 100

START_CHAR = "S"
EXIT_CHAR = "E"
VALID_CHARS = {"#", " ", START_CHAR, EXIT_CHAR}

MazeSource = Union[str, Path, TextIO]


class MarkerKind(Enum):
    """Markers that must appear exactly once in a maze file."""
    START = "start"
    EXIT = "exit"

    @property
    def char(self) -> str:
        return START_CHAR if self is MarkerKind.START else EXIT_CHAR


class MazeLoadError(Exception):
    """Base exception for every failed maze load."""

    category = "load_error"


class MazeShapeError(MazeLoadError):
    """Exception raised when the maze has the wrong shape."""


class MazeContentError(MazeLoadError):
    """Exception raised when the maze content is invalid."""


class NotRectangularError(MazeShapeError):
    category = "not_rectangular"

    def __init__(self, row: int, expected: int, actual: int):
        self.row = row
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid maze: Not rectangular "
            f"(row {row} has {actual} columns, expected {expected})"
        )


class OutOfBoundsError(MazeShapeError):
    category = "out_of_bounds"

    def __init__(self, width: int, height: int, min_size: int, max_size: int):
        self.width = width
        self.height = height
        super().__init__(
            f"Invalid maze dimensions: {width}x{height} "
            f"(each side must be between {min_size} and {max_size})"
        )


class InvalidCharacterError(MazeContentError):
    category = "invalid_character"

    def __init__(self, position: Position, char: str):
        self.position = position
        self.char = char
        super().__init__(
            f"Invalid character {char!r} at position ({position.x}, {position.y})"
        )


class DuplicateMarkerError(MazeContentError):
    category = "duplicate_marker"

    def __init__(self, kind: MarkerKind, first: Position, second: Position):
        self.kind = kind
        self.first = first
        self.second = second
        super().__init__(
            f"Multiple {kind.value} positions: first at ({first.x}, {first.y}), "
            f"second at ({second.x}, {second.y})"
        )


class MissingMarkerError(MazeContentError):
    category = "missing_marker"

    def __init__(self, kind: MarkerKind):
        self.kind = kind
        super().__init__(f"Missing {kind.value} position ({kind.char})")


class UnreachableExitError(MazeContentError):
    category = "unreachable"

    def __init__(self, start: Position, exit_: Position):
        self.start = start
        self.exit = exit_
        super().__init__(
            f"Exit at ({exit_.x}, {exit_.y}) cannot be reached "
            f"from start at ({start.x}, {start.y})"
        )


class SourceUnavailableError(MazeLoadError):
    category = "source_unavailable"


def _strip_newline(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def _measure(stream: TextIO) -> tuple[int, int]:
    """First pass: return (width, height), rejecting ragged rows."""
    width = 0
    height = 0
    for row, raw in enumerate(stream):
        length = len(_strip_newline(raw))
        if row == 0:
            width = length
        elif length != width:
            raise NotRectangularError(row, width, length)
        height += 1
    return width, height


def _populate(
    stream: TextIO, width: int, height: int
) -> tuple[list[list[CellType]], Position, Position]:
    """Second pass: build the terrain grid and locate the markers."""
    grid: list[list[CellType]] = []
    markers: dict[MarkerKind, Position] = {}

    for y, raw in enumerate(stream):
        if y >= height:
            break
        row = []
        for x, char in enumerate(_strip_newline(raw)):
            position = Position(x, y)
            if char not in VALID_CHARS:
                raise InvalidCharacterError(position, char)

            for kind in MarkerKind:
                if char != kind.char:
                    continue
                if kind in markers:
                    raise DuplicateMarkerError(kind, markers[kind], position)
                markers[kind] = position

            row.append(CellType.WALL if char == "#" else CellType.PATH)
        grid.append(row)

    for kind in MarkerKind:
        if kind not in markers:
            raise MissingMarkerError(kind)

    return grid, markers[MarkerKind.START], markers[MarkerKind.EXIT]


def read_maze(
    stream: TextIO,
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
    require_reachable: bool = True,
) -> MazeState:
    """
    Parse a maze from a seekable text stream.

    The stream is read twice: once to check the shape, then again from the
    start to fill the grid.

    Args:
        stream: Seekable text stream positioned at the first row.
        min_size: Smallest allowed width and height.
        max_size: Largest allowed width and height.
        require_reachable: Reject mazes whose exit cannot be reached.

    Returns:
        MazeState with the player on the start cell.

    Raises:
        MazeLoadError: One of its subclasses, describing the first problem found.
    """
    origin = stream.tell()
    width, height = _measure(stream)

    if not (min_size <= height <= max_size and min_size <= width <= max_size):
        raise OutOfBoundsError(width, height, min_size, max_size)

    stream.seek(origin)
    grid, start, exit_ = _populate(stream, width, height)

    state = MazeState(
        height=height,
        width=width,
        grid=grid,
        player_position=start,
        exit_position=exit_,
    )

    if require_reachable and not state.is_solvable():
        raise UnreachableExitError(start, exit_)

    logger.debug(f"Loaded {width}x{height} maze, start {start}, exit {exit_}")
    return state


def load_maze(
    source: MazeSource,
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
    require_reachable: bool = True,
) -> MazeState:
    """
    Load and validate a maze from a file path or an open text stream.

    Raises:
        SourceUnavailableError: If the file cannot be opened or decoded.
        MazeLoadError: If the maze content is invalid.
    """
    if not isinstance(source, (str, Path)):
        try:
            return read_maze(source, min_size, max_size, require_reachable)
        except UnicodeDecodeError as e:
            raise SourceUnavailableError("Maze stream is not valid UTF-8 text") from e
        except io.UnsupportedOperation as e:
            raise SourceUnavailableError(f"Maze stream must be seekable: {e}") from e
        except OSError as e:
            raise SourceUnavailableError(f"Error reading maze stream: {e}") from e

    file_path = Path(source)
    try:
        with open(file_path, "r", encoding="utf-8", newline="") as stream:
            return read_maze(stream, min_size, max_size, require_reachable)
    except FileNotFoundError as e:
        raise SourceUnavailableError(f"Maze file not found: {file_path}") from e
    except IsADirectoryError as e:
        raise SourceUnavailableError(f"Path is not a file: {file_path}") from e
    except UnicodeDecodeError as e:
        raise SourceUnavailableError(f"Maze file is not valid UTF-8 text: {file_path}") from e
    except OSError as e:
        raise SourceUnavailableError(f"Error opening file {file_path}: {e}") from e


def parse_maze_text(
    maze_text: str,
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
    require_reachable: bool = True,
) -> MazeState:
    """Parse maze text held in memory."""
    stream = io.StringIO(maze_text, newline="")
    return read_maze(stream, min_size, max_size, require_reachable)


def load_all_mazes(
    mazes_dir: Union[Path, str],
    min_size: int = MIN_SIZE,
    max_size: int = MAX_SIZE,
    require_reachable: bool = True,
) -> dict[str, MazeState]:
    """
    Load all maze files from a directory.

    Args:
        mazes_dir: Path to the directory containing ``*.txt`` maze files.

    Returns:
        Mapping of file stem to loaded maze, in file name order.

    Raises:
        SourceUnavailableError: If the directory doesn't exist.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.is_dir():
        raise SourceUnavailableError(f"Mazes directory not found: {mazes_dir}")

    mazes = {}
    for maze_file in sorted(mazes_dir.glob("*.txt")):
        try:
            mazes[maze_file.stem] = load_maze(
                maze_file, min_size, max_size, require_reachable
            )
        except MazeLoadError as e:
            # Log error but continue loading other mazes
            logger.warning(f"Failed to load {maze_file}: {e}")

    return mazes


def validate_maze_text(
    maze_text: str, require_reachable: bool = True
) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text, require_reachable=require_reachable)
        return True, None
    except MazeLoadError as e:
        return False, str(e)
