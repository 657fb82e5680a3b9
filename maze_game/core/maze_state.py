"""
Maze state shared by the loader, the generator and the movement engine.

The grid holds terrain only. Start, exit and player markers live in the
position fields and are drawn on top of the terrain when rendering:

    # = Wall (impassable)
      = Open path
    S = Start position (render only)
    E = Exit (render only)
    X = Player (render only, wins over any other glyph)
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional


class CellType(Enum):
    """Terrain stored in the grid."""
    WALL = "#"
    PATH = " "


START_GLYPH = "S"
EXIT_GLYPH = "E"
PLAYER_GLYPH = "X"


@dataclass(frozen=True)
class Position:
    """2D position in the maze."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        """Return the position shifted by (dx, dy)."""
        return Position(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass
class MazeState:
    """Terrain grid plus the player and exit positions of one game."""
    height: int
    width: int
    grid: list[list[CellType]]
    player_position: Position
    exit_position: Position
    start_position: Optional[Position] = None

    def __post_init__(self) -> None:
        if self.start_position is None:
            self.start_position = self.player_position

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def cell(self, position: Position) -> CellType:
        """Get terrain at position. Out of bounds reads as wall."""
        if not self.in_bounds(position):
            return CellType.WALL
        return self.grid[position.y][position.x]

    def is_wall(self, position: Position) -> bool:
        return self.cell(position) == CellType.WALL

    def open_neighbours(self, position: Position) -> Iterator[Position]:
        """Yield the in-bounds non-wall cells next to position."""
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            neighbour = position.offset(dx, dy)
            if self.in_bounds(neighbour) and not self.is_wall(neighbour):
                yield neighbour

    def reachable_from(self, origin: Position) -> set[Position]:
        """Flood fill over open cells starting at origin."""
        visited = {origin}
        queue = deque([origin])
        while queue:
            current = queue.popleft()
            for neighbour in self.open_neighbours(current):
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return visited

    def is_solvable(self) -> bool:
        """True if the exit can be reached from the player's cell."""
        return self.exit_position in self.reachable_from(self.player_position)

    def render(self) -> list[str]:
        """
        Build the render model: one string per row with markers overlaid.

        Returns:
            Rows of glyphs, the player drawn as X on top of everything else.
        """
        rows = []
        for y, row in enumerate(self.grid):
            glyphs = [cell.value for cell in row]
            if self.start_position.y == y:
                glyphs[self.start_position.x] = START_GLYPH
            if self.exit_position.y == y:
                glyphs[self.exit_position.x] = EXIT_GLYPH
            if self.player_position.y == y:
                glyphs[self.player_position.x] = PLAYER_GLYPH
            rows.append("".join(glyphs))
        return rows

    def to_text(self) -> str:
        """Render the maze as newline-separated rows."""
        return "\n".join(self.render())

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "start_position": self.start_position.to_dict(),
            "player_position": self.player_position.to_dict(),
            "exit_position": self.exit_position.to_dict(),
        }
