"""Offset <-> screen position arithmetic for a wrapped input line.

No debug_console imports: everything here is pure and can be tested
without a terminal.

The input line starts with a prompt of width ``L`` at column 0 of
``origin_row``; logical offset ``p`` occupies linear cell ``L + p``.
Writing into the last of ``W`` columns moves the cursor to column 0 of
the next row, so the cell index maps directly onto (column, row).
"""

from __future__ import annotations

from typing import NamedTuple


class Position(NamedTuple):
    column: int
    row: int


def _check_geometry(width: int, prompt_width: int):
    if width <= 0:
        raise ValueError(f"terminal width must be positive, got {width}")
    if prompt_width < 0:
        raise ValueError(f"prompt width must not be negative, got {prompt_width}")


def position_of(offset: int, width: int, prompt_width: int, origin_row: int) -> Position:
    """Return the screen position of ``offset`` in a line rooted at ``origin_row``."""
    _check_geometry(width, prompt_width)
    if offset < 0:
        raise ValueError(f"offset must not be negative, got {offset}")
    first_row_capacity = width - prompt_width
    if offset < first_row_capacity:
        return Position(prompt_width + offset, origin_row)
    # Wrapped: count cells past the first row
    overflow = offset - first_row_capacity
    return Position(overflow % width, origin_row + 1 + overflow // width)


def origin_row_of(current_row: int, offset: int, width: int, prompt_width: int) -> int:
    """Recover the row holding offset 0, given the caret's row and offset.

    Inverse of :func:`position_of` in the row coordinate:
    ``position_of(offset, ..., origin_row_of(row, offset, ...)).row == row``.
    """
    _check_geometry(width, prompt_width)
    return current_row - (prompt_width + offset) // width


def end_position_of(length: int, width: int, prompt_width: int, origin_row: int) -> Position:
    """Position just past the last byte of a buffer of ``length`` bytes."""
    return position_of(length, width, prompt_width, origin_row)


def rows_spanned(length: int, width: int, prompt_width: int) -> int:
    """Number of terminal rows from the origin row to the end-position row, inclusive."""
    _check_geometry(width, prompt_width)
    return (prompt_width + length) // width + 1
