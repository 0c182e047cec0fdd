"""A simple sudoku game: board logic, pygame rendering and the game window."""

__version__ = "0.1.0"
__all__ = ["board", "render", "game"]