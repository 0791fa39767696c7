"""Drawing the grid and pieces onto a pygame surface."""

from __future__ import annotations

import pygame

from blockfall.block import Block
from blockfall.colors import cell_colors
from blockfall.game import Game
from blockfall.grid import Grid

CELL_SIZE = 45
GRID_OFFSET = 10

_NEXT_BLOCK_OFFSETS = {3: (384, 340), 4: (364, 380), 7: (340, 380)}
_DEFAULT_NEXT_OFFSET = (390, 380)

_COLORS = cell_colors()


def _cell_rect(row: int, column: int, offset_x: int, offset_y: int) -> pygame.Rect:
    return pygame.Rect(
        column * CELL_SIZE + offset_x,
        row * CELL_SIZE + offset_y,
        CELL_SIZE - 1,
        CELL_SIZE - 1,
    )


def draw_grid(surface: pygame.Surface, grid: Grid) -> None:
    """Paint every cell of the grid in the colour of its value."""
    for row, values in enumerate(grid.cells):
        for column, value in enumerate(values):
            pygame.draw.rect(
                surface, _COLORS[value], _cell_rect(row, column, GRID_OFFSET, GRID_OFFSET)
            )


def draw_block(surface: pygame.Surface, block: Block, offset_x: int, offset_y: int) -> None:
    """Paint the cells of a block, shifted by the given pixel offset."""
    color = _COLORS[block.id]
    for cell in block.cell_positions():
        pygame.draw.rect(surface, color, _cell_rect(cell.row, cell.column, offset_x, offset_y))


def next_block_offset(block_id: int) -> tuple[int, int]:
    """Return the pixel offset used to show a piece in the preview box."""
    return _NEXT_BLOCK_OFFSETS.get(block_id, _DEFAULT_NEXT_OFFSET)


def draw_game(surface: pygame.Surface, game: Game) -> None:
    """Paint the grid, the falling piece and the preview of the next piece."""
    draw_grid(surface, game.grid)
    draw_block(surface, game.current_block, GRID_OFFSET, GRID_OFFSET)
    draw_block(surface, game.next_block, *next_block_offset(game.next_block.id))