from blockfall.colors import Color, cell_colors


def test_empty_cell_is_dark_grey():
    assert cell_colors()[0] == Color(26, 31, 40, 255)


def test_one_colour_per_block_id_plus_empty():
    assert len(cell_colors()) == 8


def test_all_colours_are_opaque():
    assert all(color.a == 255 for color in cell_colors())


def test_components_in_byte_range():
    for color in cell_colors():
        assert all(0 <= component <= 255 for component in color)


def test_palette_order_fixed_entries():
    palette = cell_colors()
    assert palette[1] == Color(0, 255, 0, 255)
    assert palette[7] == Color(0, 0, 255, 255)


def test_colour_default_alpha_is_opaque():
    assert Color(1, 2, 3) == Color(1, 2, 3, 255)


def test_each_call_returns_independent_list():
    first = cell_colors()
    first.clear()
    assert cell_colors()[0] == Color(26, 31, 40, 255)