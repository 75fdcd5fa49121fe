"""A grid of words and helpers that visit it row by row or column by column.

A visitor is called as ``func(text, row, col, rows, cols)``. If it returns
a string, that string replaces the cell; if it returns None the cell stays.
"""

from __future__ import annotations

import sys
from typing import Callable, Optional, Sequence

Visitor = Callable[[str, int, int, int, int], Optional[str]]

STATIC_DATA = ("this", "is", "a", "list", "of", "words")


def allocate_grid(rows: int, cols: int) -> list[list[str]]:
    """Return a ``rows`` by ``cols`` grid filled with the sample words in turn."""
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must not be negative")
    return [
        [STATIC_DATA[(r * cols + c) % len(STATIC_DATA)] for c in range(cols)]
        for r in range(rows)
    ]


def _dimensions(grid: list[list[str]]) -> tuple[int, int]:
    rows = len(grid)
    return rows, (len(grid[0]) if rows else 0)


def apply_by_row(func: Visitor, grid: list[list[str]]) -> None:
    """Call ``func`` on every cell, one row at a time."""
    rows, cols = _dimensions(grid)
    for r, row in enumerate(grid):
        for c, text in enumerate(row):
            result = func(text, r, c, rows, cols)
            if result is not None:
                row[c] = result


def apply_by_col(func: Visitor, grid: list[list[str]]) -> None:
    """Call ``func`` on every cell, one column at a time.

    The visitor receives the column index where the row index is expected
    and the row index where the column index is expected.
    """
    rows, cols = _dimensions(grid)
    for c in range(cols):
        for r in range(rows):
            result = func(grid[r][c], c, r, rows, cols)
            if result is not None:
                grid[r][c] = result


def capitalize_first_col(text: str, row: int, col: int, rows: int, cols: int) -> str:
    """Upper-case the words of column 0, leaving other words unchanged."""
    return text.upper() if col == 0 else text


def print_str(text: str, row: int, col: int, rows: int, cols: int) -> None:
    """Print a word followed by a space, ending the line after the last column."""
    print(f"{text} ", end="")
    if (col + 1) % cols == 0:
        print()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a sample grid row by row and column by column."""
    grid = allocate_grid(4, 3)
    print("\nOriginal matrix:")
    apply_by_row(print_str, grid)
    print("\nModified matrix: ")
    apply_by_row(print_str, grid)
    apply_by_row(print_str, grid)
    print("\nMatrix by column: ")
    apply_by_col(print_str, grid)
    return 0


if __name__ == "__main__":
    sys.exit(main())