# sudokuplay

A Sudoku game for the terminal. Each round builds a fresh solved grid by
shuffling the first row and solving the rest by backtracking. It then clears
cells at random according to the chosen difficulty:

| Option | Difficulty | Empty cells |
|--------|------------|-------------|
| 1      | Easy       | 35          |
| 2      | Medium     | 45          |
| 3      | Hard       | 55          |

## Installing

```
pip install .
```

## Playing

```
sudokuplay
```

The command takes no options. It reads from standard input and writes to
standard output.

The menu asks for a difficulty. Options 1, 2 and 3 start a game at that level
and option 4 quits. Any other number starts an easy game, and so does input
that is not a number. The program also ends when the input runs out.

During a game you enter three numbers: row, column and value, each from 1 to 9.
They may be on one line or spread over several. Enter `0 0 0` to go back to the
menu. A move out of range prints `Entrada fuera de rango`. A move on a given
cell prints `Celda bloqueada`. The prompts and messages are in Spanish.

Empty cells show as `.`. Given cells show in plain text. The numbers you place
are green when they match the solution of the current grid and red when they
don't. The cell you changed last is shown white on blue. Every other cell that
holds the same number, given or placed, is shown black on cyan.

## Using it as a library

```python
import random
from sudokuplay.board import Sudoku, Difficulty, solve, is_safe, generate_puzzle

game = Sudoku(Difficulty.MEDIUM, random.Random(7))
print(game.render())
game.place(0, 0, 5)          # rows and columns count from 0 here
answer = game.solution()      # a solved copy of the current grid
```

`sudokuplay.board` provides:

- `Difficulty`: `EASY`, `MEDIUM` and `HARD`, with values 1 to 3. Its
  `empty_cells` property gives 35, 45 or 55.
- `generate_puzzle(difficulty, rng=None)` returns a 9×9 list of lists with
  0 for the empty cells.
- `solve(grid)` fills the empty cells of a grid in place and returns whether
  it found a solution. If it finds none, it leaves the grid unchanged.
- `is_safe(grid, row, col, num)` tells whether `num` is absent from the row,
  the column and the 3×3 box.
- `Sudoku` holds `grid`, `fixed` (the given cells) and `last_move`. Its methods
  are `is_safe`, `is_fixed`, `place`, `solution` and `render`. `place` raises
  `InvalidMove`, a `ValueError`, for a position or value out of range or for a
  given cell. `solution` returns an unsolved copy of the grid when the current
  entries leave no solution.

`sudokuplay.game` holds the terminal loop. `run(lines, out, rng=None)` drives
the menu from any iterable of text lines and writes to any text stream.
`play(sudoku, lines, out)` runs the move loop for a single game.
`choose_difficulty(value)` maps a menu number to a `Difficulty`. `main(argv=None)`
is the command entry point.

## Point-and-click board model

`sudokuplay.pattern` has a second, simpler game model. `pattern_board(empty_cells, rng=None)`
fills every cell from a fixed shifted pattern. It then clears `empty_cells`
random picks, and since picks may repeat, fewer cells can end up empty.
`empty_cells_for(difficulty)` gives 30, 45 or 60 for difficulties 1, 2 and 3,
and 0 for anything else.

`PatternGame(difficulty, rng=None)` keeps a board of `Cell` objects (`value`,
`fixed`) along with a chosen number and a selected cell. `select_number(number)`
accepts 1 to 9 and raises `ValueError` for anything else. `click_cell(row, col)`
ignores given cells. On a free cell it selects the cell, writes the chosen
number if there is one, clears the choice, and returns whether it wrote a value.

`cell_at(x, y)` maps a pixel position to `(row, col)` on a board that lies
strictly between x = 80 and 720 and y = 40 and 680, with 71-pixel cells. It
returns `None` outside that area.

## What it does not do

The package has no graphical window. `sudokuplay.pattern` is the state and
click logic only, with nothing that draws a board or reads mouse events. The
only way to play is the terminal command. Neither game model checks for a
finished puzzle or declares a win.