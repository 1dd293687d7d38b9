"""Terminal Sudoku: puzzle generation, solving, a play loop and a click-driven board model."""

__version__ = "0.1.0"
__all__ = ["__version__"]