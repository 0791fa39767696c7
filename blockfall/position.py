"""Cell coordinates on the playfield."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A cell location given as a row and a column."""

    row: int
    column: int

    def moved(self, rows: int, columns: int) -> Position:
        """Return this position shifted by the given number of rows and columns."""
        return Position(self.row + rows, self.column + columns)