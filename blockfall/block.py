"""A falling piece with a set of rotation states."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from blockfall.position import Position


class Block:
    """A piece made of cells, with rotation states and an offset on the grid."""

    def __init__(
        self,
        block_id: int,
        rotations: Iterable[Sequence[Position]],
        start_column: int = 0,
    ) -> None:
        self.id = block_id
        self.rotations: tuple[tuple[Position, ...], ...] = tuple(
            tuple(cells) for cells in rotations
        )
        if not self.rotations:
            raise ValueError("a block needs at least one rotation state")
        self.rotation_state = 0
        self.row_offset = 0
        self.column_offset = 0
        self.move(0, start_column)

    def __repr__(self) -> str:
        return (
            f"Block(id={self.id}, rotation_state={self.rotation_state}, "
            f"offset=({self.row_offset}, {self.column_offset}))"
        )

    def cell_positions(self) -> list[Position]:
        """Return the grid positions occupied in the current rotation."""
        return [
            cell.moved(self.row_offset, self.column_offset)
            for cell in self.rotations[self.rotation_state]
        ]

    def move(self, rows: int, columns: int) -> None:
        """Shift the block by the given number of rows and columns."""
        self.row_offset += rows
        self.column_offset += columns

    def rotate(self) -> None:
        """Advance to the next rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state + 1) % len(self.rotations)

    def undo_rotation(self) -> None:
        """Step back to the previous rotation state, wrapping around."""
        self.rotation_state = (self.rotation_state - 1) % len(self.rotations)

    def copy(self) -> Block:
        """Return an independent block in the same state."""
        clone = Block(self.id, self.rotations)
        clone.rotation_state = self.rotation_state
        clone.row_offset = self.row_offset
        clone.column_offset = self.column_offset
        return clone