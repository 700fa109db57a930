"""A rectangular two-dimensional array of rows."""

from __future__ import annotations

from typing import Any, Iterable

from algolab.exceptions import IllegalArgumentError


class Matrix:
    """Row-major matrix whose rows are ordinary Python lists."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise IllegalArgumentError("dimensions must be non-negative")
        self._rows: list[list[Any]] = [[0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> Matrix:
        """Build a matrix holding copies of the given rows."""
        matrix = cls(0, 0)
        matrix._rows = [list(row) for row in rows]
        return matrix

    def __getitem__(self, row: int) -> list[Any]:
        return self._rows[row]

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._rows!r})"

    def numrows(self) -> int:
        """Return the number of rows."""
        return len(self._rows)

    def numcols(self) -> int:
        """Return the length of the first row, or 0 for an empty matrix."""
        return len(self._rows[0]) if self._rows else 0