"""Game controller: turns raw commands into moves and renders."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO

from maze_game.core.maze_engine import Direction, MoveOutcome, apply_move
from maze_game.core.maze_state import MazeState

logger = logging.getLogger(__name__)

PROMPT = "Command (WASD/M/Q): "
QUIT_MESSAGE = "Game quit."
INVALID_MESSAGE = "Invalid action."

COMMAND_DIRECTIONS = {
    "W": Direction.UP,
    "A": Direction.LEFT,
    "S": Direction.DOWN,
    "D": Direction.RIGHT,
}


class GameStatus(Enum):
    """Lifecycle of one game session."""
    ACTIVE = "active"
    QUIT = "quit"
    COMPLETED = "completed"


class CommandAction(Enum):
    """What a raw command resolved to."""
    MOVE = "move"
    MAP = "map"
    QUIT = "quit"
    INVALID = "invalid"


class GameFinishedError(Exception):
    """Exception raised when a command arrives after the game has ended."""


@dataclass
class CommandResult:
    """Result of handling one command."""
    action: CommandAction
    message: Optional[str] = None
    outcome: Optional[MoveOutcome] = None
    rows: list[str] = field(default_factory=list)
    finished: bool = False


def read_command(line: str) -> str:
    """Return the first non-blank character of line, upper-cased, or ''."""
    stripped = line.lstrip()
    return stripped[0].upper() if stripped else ""


def format_map(rows: list[str]) -> str:
    """Console layout of the render model: cells separated by spaces."""
    return "\n".join(" ".join(row) for row in rows)


class GameController:
    """
    Drives one game over a MazeState.

    Example usage:
        controller = GameController(state)
        result = controller.handle("d")
        if result.finished:
            ...
    """

    def __init__(self, state: MazeState):
        self.state = state
        self.status = GameStatus.ACTIVE
        self.move_count = 0

    @property
    def finished(self) -> bool:
        return self.status is not GameStatus.ACTIVE

    def handle(self, command: str) -> CommandResult:
        """
        Handle a raw command line (W/A/S/D, M or Q, case-insensitive).

        Only the first non-blank character counts; the rest is discarded.

        Raises:
            GameFinishedError: If the game already ended.
        """
        self._ensure_active()
        key = read_command(command)

        if key == "Q":
            return self.quit()
        if key == "M":
            return CommandResult(action=CommandAction.MAP, rows=self.state.render())

        direction = COMMAND_DIRECTIONS.get(key)
        if direction is None:
            return CommandResult(action=CommandAction.INVALID, message=INVALID_MESSAGE)
        return self.move(direction)

    def move(self, direction: Direction) -> CommandResult:
        """Apply a move that has already been mapped to a Direction."""
        self._ensure_active()
        outcome = apply_move(self.state, direction)
        self.move_count += 1

        if outcome.is_terminal:
            self._finish(GameStatus.COMPLETED)

        return CommandResult(
            action=CommandAction.MOVE,
            message=outcome.message,
            outcome=outcome,
            finished=self.finished,
        )

    def quit(self) -> CommandResult:
        self._ensure_active()
        self._finish(GameStatus.QUIT)
        return CommandResult(action=CommandAction.QUIT, message=QUIT_MESSAGE, finished=True)

    def run(self, input_stream: TextIO, output: TextIO) -> GameStatus:
        """
        Console loop: prompt, read a line, handle it, until victory or quit.

        Blank lines are skipped without a new prompt. End of input counts as
        quitting.
        """
        while not self.finished:
            output.write(PROMPT)
            output.flush()
            line = input_stream.readline()
            while line and not line.strip():
                line = input_stream.readline()
            if not line:
                output.write("\n")
                self.quit()
                output.write(QUIT_MESSAGE + "\n")
                break

            result = self.handle(line)
            if result.action is CommandAction.MAP:
                output.write(format_map(result.rows) + "\n")
            elif result.outcome is MoveOutcome.REACHED_EXIT:
                output.write("\n" + result.message + "\n")
            elif result.outcome is MoveOutcome.MOVED:
                continue
            elif result.message:
                output.write(result.message + "\n")

        return self.status

    def _ensure_active(self) -> None:
        if self.finished:
            raise GameFinishedError(f"Game already ended ({self.status.value})")

    def _finish(self, status: GameStatus) -> None:
        self.status = status
        logger.info(f"Game ended: {status.value} after {self.move_count} moves")
