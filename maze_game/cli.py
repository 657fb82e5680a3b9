"""Console entry point: play a maze from a file or a generated one."""

import argparse
import random
import sys
from textwrap import dedent
from typing import Optional, TextIO

from maze_game import __version__
from maze_game.config import get_settings
from maze_game.core.maze_generator import MazeConfigError, MazeGenerator
from maze_game.core.maze_parser import MazeLoadError, load_maze
from maze_game.core.maze_state import MazeState
from maze_game.logging_config import configure_logging
from maze_game.services.game_controller import GameController

EXIT_OK = 0
EXIT_LOAD_FAILED = 1


def build_parser() -> argparse.ArgumentParser:
    epilog = dedent(
        """
        Commands during play:
          W/A/S/D   Move up/left/down/right (case-insensitive)
          M         Show the map (X marks the player)
          Q         Quit

        Examples:
          # Play a maze file
          maze-game mazes/tutorial.txt

          # Play a generated maze, reproducibly
          maze-game --generate --seed 42 --max-size 21
        """
    )

    parser = argparse.ArgumentParser(
        prog="maze-game",
        description="Navigate a text maze from S to E.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "maze_file",
        nargs="?",
        help="Path to a maze text file",
    )
    source.add_argument(
        "--generate",
        action="store_true",
        help="Play a randomly generated maze instead of a file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --generate (default: env MAZE_SEED or random)",
    )
    parser.add_argument(
        "--min-size",
        type=int,
        default=None,
        help="Smallest maze side (default: env MAZE_MIN_SIZE or 5)",
    )
    parser.add_argument(
        "--max-size",
        type=int,
        default=None,
        help="Largest maze side (default: env MAZE_MAX_SIZE or 100)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level, written to stderr (default: WARNING)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"maze-game {__version__}",
    )
    return parser


def _prepare_maze(args: argparse.Namespace) -> MazeState:
    settings = get_settings()
    min_size = args.min_size if args.min_size is not None else settings.min_size
    max_size = args.max_size if args.max_size is not None else settings.max_size

    if args.generate:
        seed = args.seed if args.seed is not None else settings.seed
        generator = MazeGenerator(random.Random(seed), settings.exit_attempts)
        return generator.generate(min_size, max_size)

    return load_maze(
        args.maze_file,
        min_size=min_size,
        max_size=max_size,
        require_reachable=settings.require_reachable,
    )


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Run one game and return the process exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        state = _prepare_maze(args)
    except MazeLoadError as e:
        print(f"Failed to load maze: {e}", file=sys.stderr)
        return EXIT_LOAD_FAILED
    except MazeConfigError as e:
        print(f"Invalid generator settings: {e}", file=sys.stderr)
        return EXIT_LOAD_FAILED

    GameController(state).run(stdin, stdout)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
