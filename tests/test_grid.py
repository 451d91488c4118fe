import pytest

from grid import GridMap, InvalidInputError, manhattan, position_id, position_xy


def test_position_id_is_row_major():
    assert position_id(0, 0, 4) == 0
    assert position_id(3, 0, 4) == 3
    assert position_id(1, 2, 4) == 9
    assert position_xy(9, 4) == (1, 2)


def test_manhattan():
    assert manhattan(0, 0, 3, 4) == 7
    assert manhattan(5, 1, 2, 1) == 3


def test_from_rows_marks_blocked_cells():
    grid = GridMap.from_rows(["..#", "#.."])
    assert (grid.width, grid.height) == (3, 2)
    assert list(grid.cells) == [1, 1, 0, 0, 1, 1]
    assert grid.is_passable(0, 0)
    assert not grid.is_passable(2, 0)
    assert not grid.is_passable(0, 1)


def test_from_rows_accepts_numeric_rows():
    grid = GridMap.from_rows([[1, 0], [5, 1]])
    assert list(grid.cells) == [1, 0, 1, 1]


def test_out_of_bounds_is_not_passable():
    grid = GridMap(bytes([1] * 4), 2, 2)
    assert not grid.in_bounds(-1, 0)
    assert not grid.in_bounds(2, 0)
    assert not grid.in_bounds(0, 2)
    assert not grid.is_passable(0, -1)


def test_neighbors_order_and_filtering():
    grid = GridMap.from_rows([
        "...",
        ".#.",
        "...",
    ])
    assert list(grid.neighbors(1, 0)) == [(2, 0), (0, 0)]
    assert list(grid.neighbors(0, 0)) == [(1, 0), (0, 1)]
    assert list(grid.neighbors(2, 2)) == [(1, 2), (2, 1)]


@pytest.mark.parametrize("cells,width,height", [
    (bytes(4), 0, 4),
    (bytes(4), 2, -1),
    (bytes(3), 2, 2),
    (None, 2, 2),
])
def test_invalid_maps_are_rejected(cells, width, height):
    with pytest.raises(InvalidInputError):
        GridMap(cells, width, height)


def test_ragged_rows_are_rejected():
    with pytest.raises(InvalidInputError):
        GridMap.from_rows(["...", ".."])
    with pytest.raises(InvalidInputError):
        GridMap.from_rows(["..x"])
    with pytest.raises(InvalidInputError):
        GridMap.from_rows([])


def test_invalid_input_is_a_value_error():
    assert issubclass(InvalidInputError, ValueError)
