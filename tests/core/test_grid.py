from path_finder.core.grid import find_target, grid_shape, is_traversable
from path_finder.core.position import Position


GRID = [
    [1, 1, 0],
    [1, "X", 1],
    ["X", 0, 1],
]


def test_find_target_row_major():
    assert find_target(GRID, "X") == Position(1, 1)


def test_find_target_missing():
    assert find_target(GRID, "Y") is None


def test_find_target_compares_by_equality():
    assert find_target([["a", "bb"], ["cc", "bb"]], "b" * 2) == (0, 1)


def test_is_traversable_bounds():
    assert is_traversable(Position(0, 0), GRID, 0)
    assert not is_traversable(Position(-1, 0), GRID, 0)
    assert not is_traversable(Position(0, -1), GRID, 0)
    assert not is_traversable(Position(3, 0), GRID, 0)
    assert not is_traversable(Position(0, 3), GRID, 0)


def test_is_traversable_obstacles():
    assert not is_traversable(Position(0, 2), GRID, 0)
    assert not is_traversable(Position(2, 1), GRID, 0)
    assert is_traversable(Position(1, 1), GRID, 0)


def test_grid_shape():
    assert grid_shape(GRID) == (3, 3)
    assert grid_shape([]) == (0, 0)
