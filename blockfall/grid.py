"""The playfield: a fixed-size matrix of cell values."""

from __future__ import annotations


class Grid:
    """A board of cells; 0 marks an empty cell, other values a block id."""

    def __init__(self, rows: int = 20, columns: int = 10) -> None:
        self.num_rows = rows
        self.num_cols = columns
        self.cells: list[list[int]] = []
        self.initialize()

    def initialize(self) -> None:
        """Empty every cell."""
        self.cells = [[0] * self.num_cols for _ in range(self.num_rows)]

    def __getitem__(self, key: tuple[int, int]) -> int:
        row, column = self._checked(key)
        return self.cells[row][column]

    def __setitem__(self, key: tuple[int, int], value: int) -> None:
        row, column = self._checked(key)
        self.cells[row][column] = value

    def _checked(self, key: tuple[int, int]) -> tuple[int, int]:
        row, column = key
        if self.is_cell_outside(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside the grid")
        return row, column

    def is_cell_outside(self, row: int, column: int) -> bool:
        """Tell whether the coordinates lie outside the board."""
        return not (0 <= row < self.num_rows and 0 <= column < self.num_cols)

    def is_cell_empty(self, row: int, column: int) -> bool:
        """Tell whether the cell is on the board and holds no block."""
        if self.is_cell_outside(row, column):
            return False
        return self.cells[row][column] == 0

    def is_row_full(self, row: int) -> bool:
        """Tell whether every cell of the row is occupied."""
        return all(self.cells[row])

    def clear_full_rows(self) -> int:
        """Remove full rows, drop the rows above them, and return how many went."""
        completed = 0
        for row in reversed(range(self.num_rows)):
            if self.is_row_full(row):
                self.cells[row] = [0] * self.num_cols
                completed += 1
            elif completed:
                self._move_row_down(row, completed)
        return completed

    def _move_row_down(self, row: int, distance: int) -> None:
        target = row + distance
        if target < self.num_rows:
            self.cells[target] = list(self.cells[row])
        self.cells[row] = [0] * self.num_cols