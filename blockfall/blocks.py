"""Factories for the seven standard pieces."""

from __future__ import annotations

from blockfall.block import Block
from blockfall.position import Position

_P = Position


def j_block() -> Block:
    """Return a new J piece."""
    return Block(
        1,
        [
            [_P(0, 1), _P(1, 1), _P(2, 0), _P(2, 1)],
            [_P(0, 0), _P(1, 0), _P(1, 1), _P(1, 2)],
            [_P(0, 1), _P(0, 2), _P(1, 1), _P(2, 1)],
            [_P(1, 0), _P(1, 1), _P(1, 2), _P(2, 2)],
        ],
        3,
    )


def l_block() -> Block:
    """Return a new L piece."""
    return Block(
        2,
        [
            [_P(0, 0), _P(1, 0), _P(1, 1), _P(1, 2)],
            [_P(0, 1), _P(0, 2), _P(1, 1), _P(2, 1)],
            [_P(1, 0), _P(1, 1), _P(1, 2), _P(2, 2)],
            [_P(0, 1), _P(1, 1), _P(2, 0), _P(2, 1)],
        ],
        3,
    )


def i_block() -> Block:
    """Return a new I piece."""
    vertical = [_P(0, 1), _P(1, 1), _P(2, 1), _P(3, 1)]
    horizontal = [_P(1, 0), _P(1, 1), _P(1, 2), _P(1, 3)]
    return Block(3, [vertical, horizontal, vertical, horizontal], 3)


def o_block() -> Block:
    """Return a new O piece."""
    return Block(4, [[_P(0, 0), _P(0, 1), _P(1, 0), _P(1, 1)]], 4)


def s_block() -> Block:
    """Return a new S piece."""
    flat = [_P(0, 1), _P(0, 2), _P(1, 0), _P(1, 1)]
    upright = [_P(0, 1), _P(1, 1), _P(1, 2), _P(2, 2)]
    return Block(5, [flat, upright, flat, upright], 3)


def t_block() -> Block:
    """Return a new T piece."""
    return Block(
        6,
        [
            [_P(0, 0), _P(0, 1), _P(0, 2), _P(1, 1)],
            [_P(0, 1), _P(1, 0), _P(1, 1), _P(2, 1)],
            [_P(0, 1), _P(1, 0), _P(1, 1), _P(1, 2)],
            [_P(0, 1), _P(1, 1), _P(1, 2), _P(2, 1)],
        ],
        3,
    )


def z_block() -> Block:
    """Return a new Z piece."""
    flat = [_P(0, 0), _P(0, 1), _P(1, 1), _P(1, 2)]
    return Block(
        7,
        [
            flat,
            [_P(0, 2), _P(1, 1), _P(1, 2), _P(2, 1)],
            flat,
            [_P(0, 1), _P(1, 0), _P(1, 1), _P(2, 0)],
        ],
        4,
    )


def all_blocks() -> list[Block]:
    """Return one fresh instance of every piece."""
    return [i_block(), j_block(), l_block(), o_block(), s_block(), t_block(), z_block()]