"""Text Maze: a terminal and HTTP maze game."""

__version__ = "1.0.0"
