import pytest

from c7gamedata.civ3.coordinates import get_map_coordinates, get_tile_index


def staggered_grid(width: int, height: int):
    return {(x, y) for y in range(height) for x in range(width) if (x + y) % 2 == 0}


@pytest.mark.parametrize("width,height", [(2, 1), (4, 4), (10, 3), (80, 60), (100, 80)])
def test_indices_fill_staggered_grid_without_gaps(width, height):
    count = width // 2 * height
    coords = [get_map_coordinates(i, width) for i in range(count)]
    assert len(set(coords)) == count
    assert set(coords) == staggered_grid(width, height)


@pytest.mark.parametrize("width", [2, 6, 100])
def test_mapping_is_injective_over_larger_ranges(width):
    coords = [get_map_coordinates(i, width) for i in range(width * width)]
    assert len(set(coords)) == len(coords)


def test_known_positions():
    # First row starts at x=0, second row is shifted one column right
    assert get_map_coordinates(0, 8) == (0, 0)
    assert get_map_coordinates(3, 8) == (6, 0)
    assert get_map_coordinates(4, 8) == (1, 1)
    assert get_map_coordinates(9, 8) == (2, 2)


@pytest.mark.parametrize("width", [4, 30, 100])
def test_tile_index_inverts_coordinates(width):
    for i in range(width // 2 * 7):
        x, y = get_map_coordinates(i, width)
        assert get_tile_index(x, y, width) == i


def test_tile_index_rejects_off_grid_positions():
    with pytest.raises(ValueError):
        get_tile_index(1, 0, 10)


@pytest.mark.parametrize("width", [0, -4, 7])
def test_width_must_be_even_and_positive(width):
    with pytest.raises(ValueError):
        get_map_coordinates(0, width)
