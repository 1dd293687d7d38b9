import random

import pytest

from sudokuplay.pattern import (
    Cell,
    PatternGame,
    cell_at,
    empty_cells_for,
    pattern_board,
)


def _units(values):
    rows = values
    cols = [[values[r][c] for r in range(9)] for c in range(9)]
    boxes = [
        [values[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)]
        for br in range(0, 9, 3)
        for bc in range(0, 9, 3)
    ]
    return rows + cols + boxes


def test_full_pattern_board_is_valid_sudoku():
    board = pattern_board(0, random.Random(0))
    values = [[cell.value for cell in row] for row in board]
    assert all(sorted(unit) == list(range(1, 10)) for unit in _units(values))
    assert all(cell.fixed for row in board for cell in row)
    assert values[0] == list(range(1, 10))


def test_pattern_board_clears_cells():
    board = pattern_board(30, random.Random(1))
    empty = [cell for row in board for cell in row if cell.value == 0]
    assert 0 < len(empty) <= 30
    for row in board:
        for cell in row:
            assert cell.fixed == (cell.value != 0)
    assert empty[0] == Cell(0, False)


@pytest.mark.parametrize("difficulty, count", [(1, 30), (2, 45), (3, 60), (0, 0), (4, 0)])
def test_empty_cells_for(difficulty, count):
    assert empty_cells_for(difficulty) == count


def test_cell_at_inside_board():
    assert cell_at(81, 41) == (0, 0)
    assert cell_at(81 + 71 * 4, 41 + 71 * 2) == (2, 4)


@pytest.mark.parametrize("x, y", [(80, 100), (720, 100), (100, 40), (100, 680), (719, 679), (10, 10)])
def test_cell_at_outside_board(x, y):
    assert cell_at(x, y) is None


def _free_cell(game):
    return next(
        (r, c) for r in range(9) for c in range(9) if not game.board[r][c].fixed
    )


def test_click_writes_selected_number():
    game = PatternGame(1, random.Random(2))
    r, c = _free_cell(game)
    game.select_number(7)
    assert game.click_cell(r, c) is True
    assert game.board[r][c].value == 7
    assert game.selected_number is None
    assert game.selected_cell == (r, c)


def test_click_without_number_only_selects():
    game = PatternGame(2, random.Random(3))
    r, c = _free_cell(game)
    assert game.click_cell(r, c) is False
    assert game.selected_cell == (r, c)
    assert game.board[r][c].value == 0


def test_click_on_fixed_cell_is_ignored():
    game = PatternGame(1, random.Random(4))
    r, c = next((r, c) for r in range(9) for c in range(9) if game.board[r][c].fixed)
    before = game.board[r][c].value
    game.select_number(3)
    assert game.click_cell(r, c) is False
    assert game.board[r][c].value == before
    assert game.selected_number == 3
    assert game.selected_cell is None


@pytest.mark.parametrize("number", [0, 10, -1])
def test_select_number_rejects_out_of_range(number):
    game = PatternGame(1, random.Random(5))
    with pytest.raises(ValueError):
        game.select_number(number)
    assert game.selected_number is None