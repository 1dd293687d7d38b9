"""Sudoku board: generation, solving, move validation and terminal rendering."""

from __future__ import annotations

import random
from enum import IntEnum

N = 9
BOX = 3

Grid = list[list[int]]

_RESET = "\033[0m"
_LAST_MOVE = "\033[44;97m"
_SAME_VALUE = "\033[46;30m"
_CORRECT = "\033[32m"
_WRONG = "\033[31m"

OUT_OF_RANGE = "Entrada fuera de rango"
LOCKED_CELL = "Celda bloqueada"


class Difficulty(IntEnum):
    """Puzzle difficulty; the value is the menu number."""

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def empty_cells(self) -> int:
        """Number of cells cleared from the solved grid."""
        return {Difficulty.EASY: 35, Difficulty.MEDIUM: 45, Difficulty.HARD: 55}[self]


class InvalidMove(ValueError):
    """Raised when a move is out of range or targets a given cell."""


def is_safe(grid: Grid, row: int, col: int, num: int) -> bool:
    """Return True if ``num`` appears in neither the row, the column nor the box."""
    if num in grid[row]:
        return False
    if any(line[col] == num for line in grid):
        return False
    top, left = row - row % BOX, col - col % BOX
    return all(
        num not in grid[r][left:left + BOX] for r in range(top, top + BOX)
    )


def solve(grid: Grid) -> bool:
    """Fill the empty cells of ``grid`` in place by backtracking.

    Returns False, leaving ``grid`` unchanged, when no completion exists.
    """
    empties = [(r, c) for r in range(N) for c in range(N) if grid[r][c] == 0]
    return _fill(grid, empties, 0)


def _fill(grid: Grid, empties: list[tuple[int, int]], index: int) -> bool:
    if index == len(empties):
        return True
    row, col = empties[index]
    for num in range(1, N + 1):
        if is_safe(grid, row, col, num):
            grid[row][col] = num
            if _fill(grid, empties, index + 1):
                return True
    grid[row][col] = 0
    return False


def generate_puzzle(difficulty: Difficulty | int, rng: random.Random | None = None) -> Grid:
    """Build a solved grid from a shuffled first row and clear cells by difficulty."""
    difficulty = Difficulty(difficulty)
    rng = rng or random.Random()
    first_row = list(range(1, N + 1))
    rng.shuffle(first_row)
    grid = [first_row] + [[0] * N for _ in range(N - 1)]
    solve(grid)
    remaining = difficulty.empty_cells
    while remaining:
        row, col = rng.randrange(N), rng.randrange(N)
        if grid[row][col]:
            grid[row][col] = 0
            remaining -= 1
    return grid


class Sudoku:
    """A playable puzzle: the grid, its given cells and the last move made."""

    def __init__(self, difficulty: Difficulty | int = Difficulty.EASY,
                 rng: random.Random | None = None) -> None:
        self.difficulty = Difficulty(difficulty)
        self.grid: Grid = generate_puzzle(self.difficulty, rng)
        self.fixed = [[value != 0 for value in row] for row in self.grid]
        self.last_move: tuple[int, int, int] | None = None

    def is_safe(self, row: int, col: int, num: int) -> bool:
        """Return True if ``num`` fits at ``(row, col)`` in the current grid."""
        return is_safe(self.grid, row, col, num)

    def is_fixed(self, row: int, col: int) -> bool:
        """Return True if the cell was given by the puzzle."""
        return self.fixed[row][col]

    def place(self, row: int, col: int, value: int) -> None:
        """Write ``value`` at zero-based ``(row, col)``."""
        if not (0 <= row < N and 0 <= col < N and 1 <= value <= N):
            raise InvalidMove(OUT_OF_RANGE)
        if self.fixed[row][col]:
            raise InvalidMove(LOCKED_CELL)
        self.grid[row][col] = value
        self.last_move = (row, col, value)

    def solution(self) -> Grid:
        """Return a completed copy of the grid, or the plain copy if none exists."""
        copy = [row[:] for row in self.grid]
        solve(copy)
        return copy

    def render(self) -> str:
        """Return the grid as coloured terminal text, one line per row."""
        solved = self.solution()
        return "".join(
            "".join(
                self._cell_text(r, c, value, solved[r][c])
                for c, value in enumerate(row)
            ) + "\n"
            for r, row in enumerate(self.grid)
        )

    def _cell_text(self, row: int, col: int, value: int, expected: int) -> str:
        if self.last_move is not None and value == self.last_move[2]:
            colour = _LAST_MOVE if (row, col) == self.last_move[:2] else _SAME_VALUE
            return f"{colour}{value}{_RESET} "
        if value == 0:
            return ". "
        if self.fixed[row][col]:
            return f"{value} "
        colour = _CORRECT if value == expected else _WRONG
        return f"{colour}{value}{_RESET} "