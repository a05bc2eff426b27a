"""
Physical layout of the flat buffer.

A table keeps every element in one list. ``Order`` says which logical axis
varies slowest in that list, and the helpers below turn logical
coordinates into physical offsets (or whole-axis spans) for either layout:

    ROW_MAJOR     offset(r, c) = r * num_cols + c
    COLUMN_MAJOR  offset(r, c) = c * num_rows + r

Spans are plain ``slice`` objects. Along the contiguous axis the step is 1,
along the other axis the step is the length of the contiguous axis, so a
list can be read, assigned or deleted through the same slice.
"""

from __future__ import annotations
from enum import Enum


class Order(Enum):
    """Which logical axis is contiguous in the backing buffer."""

    ROW_MAJOR = "row-major"
    COLUMN_MAJOR = "column-major"

    @classmethod
    def default(cls) -> Order:
        return cls.ROW_MAJOR

    def swap(self) -> Order:
        """Return the opposite layout."""
        if self is Order.ROW_MAJOR:
            return Order.COLUMN_MAJOR
        return Order.ROW_MAJOR

    def __str__(self):
        return self.value


def offset(order: Order, num_cols: int, num_rows: int, row: int, col: int) -> int:
    """Physical offset of logical cell (row, col). No bounds checking."""
    if order is Order.ROW_MAJOR:
        return row * num_cols + col
    return col * num_rows + row


def row_span(order: Order, num_cols: int, num_rows: int, row: int) -> slice:
    """Slice of physical offsets holding logical row ``row``."""
    if order is Order.ROW_MAJOR:
        start = row * num_cols
        return slice(start, start + num_cols, 1)
    # one element per column, num_rows apart
    return slice(row, row + num_cols * num_rows, num_rows)


def col_span(order: Order, num_cols: int, num_rows: int, col: int) -> slice:
    """Slice of physical offsets holding logical column ``col``."""
    if order is Order.COLUMN_MAJOR:
        start = col * num_rows
        return slice(start, start + num_rows, 1)
    return slice(col, col + num_cols * num_rows, num_cols)
