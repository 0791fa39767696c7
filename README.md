# blockfall

A falling-block puzzle game. Seven block shapes drop one at a time into a
grid that is 10 columns wide and 20 rows tall. Fill a whole row to clear it
and score points.

## Installing

```
pip install .
```

## Playing

```
blockfall
```

Options:

- `--sounds DIR`: the directory that holds `rotatesound.mp3`,
  `clearsound.mp3` and `bgsound.mp3` (default: `Sounds`, relative to the
  current directory). If a file cannot be loaded, or no audio device is
  available, the game runs without that sound.
- `--font PATH`: a TrueType font for the score panel text. Without it, or if
  it cannot be loaded, pygame's default font is used.

Controls:

- **Left / Right arrow**: move the falling block sideways
- **Down arrow**: move the block down one row
- **Up arrow**: rotate the block

Blocks also drop by one row on their own every 0.2 seconds. Once a block can
no longer move down, it locks in place and the next block, which is shown in
the "Next" panel, takes its place.

Scoring depends on how many rows clear at once:

| Rows cleared | Points |
|--------------|--------|
| 1            | 10     |
| 2            | 20     |
| 3            | 30     |

Clearing four or more rows at once scores nothing.

When a new block has no room to appear, the game is over. Press any key to
start again. The key you press also acts in the new game.

## Using the game logic directly

The rules do not depend on pygame. You can drive them from code:

```python
import random

from blockfall.game import Game, Key

game = Game(rng=random.Random(1), on_rotate=None, on_clear=None)
game.handle_key(Key.LEFT)
game.move_block_down()
print(game.score, game.game_over)
```

`Game` calls `on_rotate` after each successful rotation and `on_clear` when
rows are cleared. Blocks are drawn from a bag that holds one of each shape,
and the bag is refilled once it is empty.

Other modules:

- `blockfall.grid.Grid` holds the board. It is indexed as `grid[row, column]`.
- `blockfall.blocks` builds the seven shapes (`i_block()`, `j_block()`,
  `l_block()`, `o_block()`, `s_block()`, `t_block()`, `z_block()`,
  `all_blocks()`).
- `blockfall.block.Block` is a piece with its rotation states and offset.
- `blockfall.colors.cell_colors()` gives the palette. Index 0 is an empty
  cell.
- `blockfall.render` draws a game onto a pygame surface (`draw_game`,
  `draw_grid`, `draw_block`).
- `blockfall.app` holds the window loop (`main`), the fall timer
  (`EventTimer`) and the key mapping (`key_from_pygame`).

## What it does not do

The package ships no sound or font files. You have to supply them
yourself with `--sounds` and `--font`. There are no levels, no speed-up, no
hard drop and no saved high scores.

## Running the tests

```
pip install .[test]
pytest
```