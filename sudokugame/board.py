"""Sudoku board state: cell values, fixed clues, conflicts and the selection."""

from __future__ import annotations

import random
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Protocol

SIZE = 9
BOX = 3
PUZZLE_CLUES = 21
DIGITS = range(1, SIZE + 1)


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


@dataclass(frozen=True)
class Cell:
    """One square of the board. A value of 0 means the square is empty."""

    value: int = 0
    fixed: bool = False
    invalid: bool = False

    @property
    def is_empty(self) -> bool:
        return self.value == 0


class Direction(Enum):
    """Selection movement, as a (row delta, column delta) pair."""

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)


def _units() -> Iterator[list[tuple[int, int]]]:
    """Yield every row, column and 3x3 box as a list of positions."""
    for i in range(SIZE):
        yield [(i, j) for j in range(SIZE)]
        yield [(j, i) for j in range(SIZE)]
        top, left = (i // BOX) * BOX, (i % BOX) * BOX
        yield [(top + j // BOX, left + j % BOX) for j in range(SIZE)]


class Board:
    """A 9x9 sudoku grid with a selected cell."""

    def __init__(self) -> None:
        self._grid: list[list[Cell]] = []
        self.selected_row = 0
        self.selected_col = 0
        self.clear()

    def clear(self) -> None:
        """Empty every cell and move the selection to the top-left corner."""
        self._grid = [[Cell() for _ in range(SIZE)] for _ in range(SIZE)]
        self.selected_row = 0
        self.selected_col = 0

    def create_puzzle(self, rng: _RandomSource | None = None) -> None:
        """Clear the board and scatter fixed clues that do not conflict."""
        rng = rng if rng is not None else random
        self.clear()
        for _ in range(PUZZLE_CLUES):
            while True:
                row, col = rng.randint(0, SIZE - 1), rng.randint(0, SIZE - 1)
                if not self._grid[row][col].is_empty:
                    continue
                if any(self.is_safe_to_insert(v, row, col) for v in DIGITS):
                    break
            value = rng.randint(1, SIZE)
            while not self.is_safe_to_insert(value, row, col):
                value = rng.randint(1, SIZE)
            self._grid[row][col] = Cell(value, fixed=True)

    def is_safe_to_insert(self, value: int, row: int, col: int) -> bool:
        """Return False if value already appears in the row, column or box."""
        self._check_position(row, col)
        if any(self._grid[i][col].value == value for i in range(SIZE)):
            return False
        if any(self._grid[row][i].value == value for i in range(SIZE)):
            return False
        top, left = (row // BOX) * BOX, (col // BOX) * BOX
        return all(
            self._grid[r][c].value != value
            for r in range(top, top + BOX)
            for c in range(left, left + BOX)
        )

    def highlight_invalid(self) -> None:
        """Recompute conflict flags for the whole board."""
        self.clear_invalid()
        for unit in _units():
            seen: dict[int, list[tuple[int, int]]] = defaultdict(list)
            for row, col in unit:
                value = self._grid[row][col].value
                if value:
                    seen[value].append((row, col))
            for positions in seen.values():
                if len(positions) > 1:
                    for row, col in positions:
                        cell = self._grid[row][col]
                        self._grid[row][col] = Cell(cell.value, cell.fixed, True)

    def clear_invalid(self) -> None:
        """Drop every conflict flag."""
        self._grid = [
            [Cell(cell.value, cell.fixed, False) for cell in row] for row in self._grid
        ]

    def move_selection(self, direction: Direction) -> None:
        """Move the selection one step, stopping at the board edge."""
        drow, dcol = direction.value
        self.selected_row = min(max(self.selected_row + drow, 0), SIZE - 1)
        self.selected_col = min(max(self.selected_col + dcol, 0), SIZE - 1)

    def select(self, row: int, col: int) -> None:
        """Select the cell at row, col."""
        self._check_position(row, col)
        self.selected_row = row
        self.selected_col = col

    def erase_selected(self) -> None:
        """Empty the selected cell unless it holds a fixed clue."""
        if not self._selected_cell.fixed:
            self._grid[self.selected_row][self.selected_col] = Cell()

    def enter_digit(self, digit: int) -> None:
        """Write a digit into the selected cell, flagging it if it conflicts."""
        if not 0 <= digit <= SIZE:
            raise ValueError(f"digit must be between 0 and {SIZE}, got {digit}")
        if self._selected_cell.fixed:
            return
        invalid = not self.is_safe_to_insert(
            digit, self.selected_row, self.selected_col
        )
        self._grid[self.selected_row][self.selected_col] = Cell(digit, invalid=invalid)

    def __getitem__(self, position: tuple[int, int]) -> Cell:
        row, col = position
        self._check_position(row, col)
        return self._grid[row][col]

    @property
    def _selected_cell(self) -> Cell:
        return self._grid[self.selected_row][self.selected_col]

    @staticmethod
    def _check_position(row: int, col: int) -> None:
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"cell ({row}, {col}) is outside the board")