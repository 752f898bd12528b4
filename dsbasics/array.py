"""A fixed-length array of integers with bounds-checked access."""

from __future__ import annotations

import operator
from collections.abc import Iterator


class Array:
    """A contiguous block of integer slots, zero-filled on creation."""

    __slots__ = ("_cells",)

    def __init__(self, length: int) -> None:
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"Array length must not be negative, got {length}")
        self._cells: list[int] = [0] * length

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[int]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"Array({self._cells!r})"

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._cells):
            raise IndexError(
                f"Index {index} out of bounds (0-{len(self._cells) - 1})"
            )
        return index

    def __getitem__(self, index: int) -> int:
        return self._cells[self._check_index(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self._cells[self._check_index(index)] = operator.index(value)

    def slice(self, start: int, end: int) -> Array:
        """Return a new array holding the values from start up to, not including, end."""
        start = operator.index(start)
        end = operator.index(end)
        if start < 0 or end > len(self._cells) or end < start:
            raise IndexError(
                f"Slice {start}:{end} out of bounds for array of length {len(self._cells)}"
            )
        sliced = Array(end - start)
        sliced._cells[:] = self._cells[start:end]
        return sliced

    def describe(self) -> str:
        """Return a multi-line description of the array and its contents."""
        lines = [f"Array length: {len(self._cells)}", "Array:", "["]
        lines.extend(f"\t{value}," for value in self._cells)
        lines.append("]")
        return "\n".join(lines) + "\n"