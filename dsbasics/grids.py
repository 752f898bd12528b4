"""Summaries of flat sequences and rendering of two-dimensional grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _require_values(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("at least one value is required")
    return items


def average(values: Iterable[int]) -> float:
    """Return the arithmetic mean of values."""
    items = _require_values(values)
    return sum(items) / len(items)


def min_max(values: Iterable[int]) -> tuple[int, int]:
    """Return the smallest and largest of values, in one pass."""
    items = _require_values(values)
    low = high = items[0]
    for value in items:
        low = min(low, value)
        high = max(high, value)
    return low, high


def largest(values: Iterable[int]) -> int:
    """Return the largest of values."""
    return max(_require_values(values))


def format_grid(rows: Iterable[Iterable[int]]) -> str:
    """Return every cell of the grid, row by row, on one space-separated line."""
    return " ".join(str(cell) for row in rows for cell in row)


def paired_cells(rows: Sequence[Sequence[int]]) -> list[str]:
    """Render each row with every cell shown next to a second view of the same cell."""
    views = [[(row, column) for column in range(len(row))] for row in rows]
    lines = []
    for row, view_row in zip(rows, views):
        lines.append(
            " ".join(
                f"arr1: {cell}, arr2: {source[position]}"
                for cell, (source, position) in zip(row, view_row)
            )
        )
    return lines