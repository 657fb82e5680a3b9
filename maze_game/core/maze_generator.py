"""
Procedural maze generation.

Carves corridors with an iterative randomized depth-first search that jumps
two cells at a time, so corridors stay one cell wide with walls between them.
After an exit is picked, a repair walk from the start to the exit carves any
wall in the way, so the exit is always reachable.
"""

import logging
import random
from typing import Optional

from .maze_state import CellType, MazeState, Position

logger = logging.getLogger(__name__)

# Smallest side that leaves two distinct cells on the odd interior lattice
SMALLEST_SIDE = 5
DEFAULT_EXIT_ATTEMPTS = 100

_STRIDES = [(0, -2), (0, 2), (-2, 0), (2, 0)]


class MazeConfigError(Exception):
    """Exception raised when the generator is configured incorrectly."""


class InvalidRangeError(MazeConfigError):
    """Exception raised for an unusable size range."""

    def __init__(self, min_size: int, max_size: int):
        self.min_size = min_size
        self.max_size = max_size
        if min_size > max_size:
            reason = "min_size is greater than max_size"
        else:
            reason = f"sizes must be at least {SMALLEST_SIDE}"
        super().__init__(f"Invalid size range [{min_size}, {max_size}]: {reason}")


class MazeGenerator:
    """
    Randomized DFS maze generator.

    The random source is passed in explicitly, so a seeded ``random.Random``
    reproduces the same maze on every run.

    Example usage:
        generator = MazeGenerator(random.Random(42))
        state = generator.generate(5, 25)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        exit_attempts: int = DEFAULT_EXIT_ATTEMPTS,
    ):
        if exit_attempts < 0:
            raise MazeConfigError(f"exit_attempts must not be negative, got {exit_attempts}")
        self.rng = rng if rng is not None else random.Random()
        self.exit_attempts = exit_attempts

    def generate(self, min_size: int, max_size: int) -> MazeState:
        """
        Generate a maze with both sides picked uniformly in [min_size, max_size].

        Raises:
            InvalidRangeError: If min_size > max_size or min_size is too small.
        """
        if min_size > max_size or min_size < SMALLEST_SIDE:
            raise InvalidRangeError(min_size, max_size)

        height = self.rng.randint(min_size, max_size)
        width = self.rng.randint(min_size, max_size)
        grid = [[CellType.WALL] * width for _ in range(height)]

        player = Position(1, 1)
        visited = self._carve(grid, width, height, player)
        exit_ = self._place_exit(visited, player, width, height)

        state = MazeState(
            height=height,
            width=width,
            grid=grid,
            player_position=player,
            exit_position=exit_,
        )

        connected = state.is_solvable()
        self._repair(grid, player, exit_)

        # Markers always sit on open terrain
        for marker in (player, exit_):
            grid[marker.y][marker.x] = CellType.PATH

        logger.debug(
            f"Generated {width}x{height} maze: {len(visited)} cells visited, "
            f"exit {exit_}, connected before repair={connected}"
        )
        return state

    def _carve(
        self, grid: list[list[CellType]], width: int, height: int, origin: Position
    ) -> list[Position]:
        """Carve corridors from origin. Returns visited cells in visit order."""
        grid[origin.y][origin.x] = CellType.PATH
        seen = {origin}
        order = [origin]
        stack = [origin]

        while stack:
            current = stack.pop()
            strides = list(_STRIDES)
            self.rng.shuffle(strides)
            for dx, dy in strides:
                target = current.offset(dx, dy)
                if not (1 <= target.x <= width - 2 and 1 <= target.y <= height - 2):
                    continue
                if target in seen:
                    continue
                between = current.offset(dx // 2, dy // 2)
                grid[between.y][between.x] = CellType.PATH
                grid[target.y][target.x] = CellType.PATH
                seen.add(target)
                order.append(target)
                stack.append(target)

        return order

    def _place_exit(
        self, visited: list[Position], player: Position, width: int, height: int
    ) -> Position:
        for _ in range(self.exit_attempts):
            candidate = self.rng.choice(visited)
            if candidate != player:
                return candidate
        return Position(width - 2, height - 2)

    @staticmethod
    def _repair(grid: list[list[CellType]], start: Position, target: Position) -> None:
        """Walk greedily from start to target, carving every wall on the way."""
        x, y = start.x, start.y
        while (x, y) != (target.x, target.y):
            if x != target.x:
                x += 1 if target.x > x else -1
            else:
                y += 1 if target.y > y else -1
            if grid[y][x] == CellType.WALL:
                grid[y][x] = CellType.PATH


def generate_maze(
    min_size: int,
    max_size: int,
    rng: Optional[random.Random] = None,
    exit_attempts: int = DEFAULT_EXIT_ATTEMPTS,
) -> MazeState:
    """Generate one maze. See MazeGenerator.generate."""
    return MazeGenerator(rng, exit_attempts).generate(min_size, max_size)
