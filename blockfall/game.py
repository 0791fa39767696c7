"""Game state and rules: moving, rotating and locking pieces, clearing rows, scoring."""

from __future__ import annotations

import enum
import random
from collections.abc import Callable

from blockfall.block import Block
from blockfall.blocks import all_blocks
from blockfall.grid import Grid

_POINTS_FOR_LINES = {1: 10, 2: 20, 3: 30}


class Key(enum.Enum):
    """Player input understood by the game."""

    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"
    UP = "up"
    OTHER = "other"


class Game:
    """One round of play on a grid, with the falling piece and the one after it."""

    def __init__(
        self,
        rng: random.Random | None = None,
        on_rotate: Callable[[], None] | None = None,
        on_clear: Callable[[], None] | None = None,
    ) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._on_rotate = on_rotate
        self._on_clear = on_clear
        self.grid = Grid()
        self._bag: list[Block] = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.game_over = False
        self.score = 0

    def _random_block(self) -> Block:
        if not self._bag:
            self._bag = all_blocks()
        return self._bag.pop(self._rng.randrange(len(self._bag)))

    def handle_key(self, key: Key | None) -> None:
        """React to one key press; ``None`` means no key was pressed."""
        if key is None:
            return
        if self.game_over:
            self.game_over = False
            self.reset()
        actions = {
            Key.LEFT: self.move_block_left,
            Key.RIGHT: self.move_block_right,
            Key.DOWN: self.move_block_down,
            Key.UP: self.rotate_block,
        }
        action = actions.get(key)
        if action is not None:
            action()

    def _misplaced(self) -> bool:
        return self.is_block_outside() or not self.block_fits()

    def move_block_left(self) -> None:
        """Shift the falling piece one column left if there is room."""
        if self.game_over:
            return
        self.current_block.move(0, -1)
        if self._misplaced():
            self.current_block.move(0, 1)

    def move_block_right(self) -> None:
        """Shift the falling piece one column right if there is room."""
        if self.game_over:
            return
        self.current_block.move(0, 1)
        if self._misplaced():
            self.current_block.move(0, -1)

    def move_block_down(self) -> None:
        """Drop the falling piece one row, locking it when it cannot go further."""
        if self.game_over:
            return
        self.current_block.move(1, 0)
        if self._misplaced():
            self.current_block.move(-1, 0)
            self.lock_block()

    def rotate_block(self) -> None:
        """Rotate the falling piece, undoing the turn if it does not fit."""
        if self.game_over:
            return
        self.current_block.rotate()
        if self._misplaced():
            self.current_block.undo_rotation()
        elif self._on_rotate is not None:
            self._on_rotate()

    def is_block_outside(self) -> bool:
        """Tell whether any cell of the falling piece lies off the board."""
        return any(
            self.grid.is_cell_outside(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def block_fits(self) -> bool:
        """Tell whether every cell of the falling piece is on an empty cell."""
        return all(
            self.grid.is_cell_empty(cell.row, cell.column)
            for cell in self.current_block.cell_positions()
        )

    def lock_block(self) -> None:
        """Fix the falling piece into the grid and bring in the next one."""
        for cell in self.current_block.cell_positions():
            self.grid[cell.row, cell.column] = self.current_block.id
        self.current_block = self.next_block
        if not self.block_fits():
            self.game_over = True
        self.next_block = self._random_block()
        rows_cleared = self.grid.clear_full_rows()
        if rows_cleared > 0:
            if self._on_clear is not None:
                self._on_clear()
            self.update_score(rows_cleared)

    def reset(self) -> None:
        """Start a fresh round."""
        self.grid.initialize()
        self._bag = all_blocks()
        self.current_block = self._random_block()
        self.next_block = self._random_block()
        self.game_over = False
        self.score = 0

    def update_score(self, lines_cleared: int) -> None:
        """Add the points earned for clearing the given number of rows."""
        self.score += _POINTS_FOR_LINES.get(lines_cleared, 0)