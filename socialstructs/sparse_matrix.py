"""A sparse matrix addressed by non-negative row and column indices."""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

_MISSING = "X"


class SparseMatrix(Generic[T]):
    """Sparse matrix that stores only the cells that were set.

    ``width`` and ``height`` are the largest column and row index seen.
    """

    def __init__(self) -> None:
        self._rows: dict[int, dict[int, T]] = {}
        self.width = 0
        self.height = 0

    def insert(self, i: int, j: int, value: T) -> None:
        """Set cell (``i``, ``j``), replacing any earlier value."""
        self.width = max(self.width, j)
        self.height = max(self.height, i)
        self._rows.setdefault(i, {})[j] = value

    def get(self, i: int, j: int, default: T | None = None) -> T | None:
        """Return the value at (``i``, ``j``), or ``default`` if unset."""
        return self._rows.get(i, {}).get(j, default)

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, tuple) or len(cell) != 2:
            return False
        i, j = cell
        return j in self._rows.get(i, {})

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows.values())

    def __iter__(self) -> Iterator[tuple[int, int, T]]:
        """Yield ``(i, j, value)`` for every set cell, row by row."""
        for i in sorted(self._rows):
            row = self._rows[i]
            for j in sorted(row):
                yield i, j, row[j]

    def column_headers(self) -> str:
        """Return the header line, columns -1 through ``width``."""
        return "".join(f"{j:>3}" for j in range(-1, self.width + 1))

    def render(self) -> str:
        """Return the whole matrix as text, with ``X`` for unset cells."""
        parts = [self.column_headers()]
        for i in range(self.height + 1):
            cells = "".join(
                f"{_MISSING if (i, j) not in self else str(self.get(i, j)):>3}"
                for j in range(self.width + 1)
            )
            parts.append(f"\n{i:>3}{cells}")
        parts.append("\n")
        return "".join(parts)