"""Interactive terminal game: difficulty menu and move loop."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from sudokuplay.board import Difficulty, InvalidMove, Sudoku

MENU = (
    "Selecciona la dificultad del Sudoku:\n"
    "1. Facil\n2. Medio\n3. Dificil\n4. Salir\nOpcion: "
)
PROMPT = "\nFila Columna Valor (0 0 0 para salir al menú): "
FAREWELL = "Hasta luego!\n"
QUIT_OPTION = 4


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    """Return the next integer, None at end of input, or 0 for a non-number."""
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return 0


def play(sudoku: Sudoku, lines: Iterable[str], out: TextIO) -> None:
    """Run the move loop until ``0 0 0`` or the end of input."""
    tokens = _tokens(lines)
    while True:
        out.write(sudoku.render())
        out.write(PROMPT)
        move = [_read_int(tokens) for _ in range(3)]
        if None in move:
            return
        row, col, value = move
        if row == col == value == 0:
            return
        try:
            sudoku.place(row - 1, col - 1, value)
        except InvalidMove as exc:
            out.write(f"\033[31m{exc}\033[0m\n")


def choose_difficulty(value: int) -> Difficulty:
    """Map a menu number to a difficulty, falling back to easy."""
    if value in (1, 2, 3):
        return Difficulty(value)
    return Difficulty.EASY


def run(lines: Iterable[str], out: TextIO, rng: random.Random | None = None) -> int:
    """Show the menu and play games until the user quits or input ends."""
    tokens = _tokens(lines)
    while True:
        out.write(MENU)
        option = _read_int(tokens)
        if option is None or option == QUIT_OPTION:
            break
        play(Sudoku(choose_difficulty(option), rng), tokens, out)
    out.write(FAREWELL)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Command entry point."""
    parser = argparse.ArgumentParser(prog="sudokuplay", description="Play Sudoku in the terminal.")
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())