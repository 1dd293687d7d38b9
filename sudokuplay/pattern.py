"""Pattern-based board and click handling for the point-and-click variant."""

from __future__ import annotations

import random
from dataclasses import dataclass

SIZE = 9
BOARD_LEFT = 80
BOARD_TOP = 40
BOARD_RIGHT = 720
BOARD_BOTTOM = 680
CELL_PIXELS = 71


@dataclass
class Cell:
    """One board cell; a value of 0 means empty."""

    value: int = 0
    fixed: bool = False


def pattern_board(empty_cells: int, rng: random.Random | None = None) -> list[list[Cell]]:
    """Fill a shifted-pattern grid, then clear ``empty_cells`` random picks.

    Picks may repeat, so fewer cells than requested can end up empty.
    """
    rng = rng or random.Random()
    board = [
        [Cell((i * 3 + i // 3 + j) % SIZE + 1, True) for j in range(SIZE)]
        for i in range(SIZE)
    ]
    for _ in range(empty_cells):
        i, j = rng.randrange(SIZE), rng.randrange(SIZE)
        board[i][j] = Cell(0, False)
    return board


def empty_cells_for(difficulty: int) -> int:
    """Number of random clears for a difficulty (1, 2 or 3); 0 otherwise."""
    return {1: 30, 2: 45, 3: 60}.get(difficulty, 0)


def cell_at(x: int, y: int) -> tuple[int, int] | None:
    """Map a pixel position to ``(row, col)``, or None outside the board."""
    if not (BOARD_LEFT < x < BOARD_RIGHT and BOARD_TOP < y < BOARD_BOTTOM):
        return None
    row = (y - BOARD_TOP) // CELL_PIXELS
    col = (x - BOARD_LEFT) // CELL_PIXELS
    if row >= SIZE or col >= SIZE:
        return None
    return row, col


class PatternGame:
    """Board state with a chosen number and a selected cell."""

    def __init__(self, difficulty: int, rng: random.Random | None = None) -> None:
        self.difficulty = difficulty
        self.board = pattern_board(empty_cells_for(difficulty), rng)
        self.selected_number: int | None = None
        self.selected_cell: tuple[int, int] | None = None

    def select_number(self, number: int) -> None:
        """Choose the number the next cell click will write."""
        if not 1 <= number <= SIZE:
            raise ValueError(f"number must be between 1 and {SIZE}: {number}")
        self.selected_number = number

    def click_cell(self, row: int, col: int) -> bool:
        """Select a free cell and write the chosen number; return True if written."""
        cell = self.board[row][col]
        if cell.fixed:
            return False
        self.selected_cell = (row, col)
        if self.selected_number is None:
            return False
        cell.value = self.selected_number
        self.selected_number = None
        return True