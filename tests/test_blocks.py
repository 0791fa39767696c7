from blockfall.blocks import (
    all_blocks,
    i_block,
    j_block,
    l_block,
    o_block,
    s_block,
    t_block,
    z_block,
)
from blockfall.position import Position


def test_all_blocks_order_by_id():
    assert [block.id for block in all_blocks()] == [3, 1, 2, 4, 5, 6, 7]


def test_factory_ids():
    ids = [
        j_block().id,
        l_block().id,
        i_block().id,
        o_block().id,
        s_block().id,
        t_block().id,
        z_block().id,
    ]
    assert ids == [1, 2, 3, 4, 5, 6, 7]


def test_every_rotation_has_four_distinct_cells():
    blocks = all_blocks()
    assert len(blocks) == 7
    for block in blocks:
        for _ in range(4):
            assert len(set(block.cell_positions())) == 4
            block.rotate()


def test_spawn_fits_inside_standard_board():
    blocks = all_blocks()
    assert len(blocks) == 7
    for block in blocks:
        for _ in range(4):
            for cell in block.cell_positions():
                assert 0 <= cell.row < 20
                assert 0 <= cell.column < 10
            block.rotate()


def test_o_block_spawn_position():
    assert set(o_block().cell_positions()) == {
        Position(0, 4),
        Position(0, 5),
        Position(1, 4),
        Position(1, 5),
    }


def test_o_block_rotation_has_no_effect():
    block = o_block()
    start = block.cell_positions()
    block.rotate()
    assert block.cell_positions() == start


def test_i_block_alternates_between_two_shapes():
    block = i_block()
    start = block.cell_positions()
    block.rotate()
    side = block.cell_positions()
    block.rotate()
    assert block.cell_positions() == start
    block.rotate()
    assert block.cell_positions() == side


def test_factories_return_independent_instances():
    first, second = j_block(), j_block()
    first.move(5, 0)
    assert second.cell_positions() != first.cell_positions()
    assert second.cell_positions() == j_block().cell_positions()


def test_all_blocks_returns_fresh_pieces():
    first = all_blocks()
    first[0].move(3, 0)
    assert all_blocks()[0].cell_positions() == i_block().cell_positions()