# tests/conftest.py
import pytest


L_SHAPE_GRID = [[1, 1, 1], [1, 0, 1], [1, "X", 1]]

QUESTION_MARK_GRID = [
    ["X", 1, 1, 1, 1],
    [1, 1, 1, 0, 1],
    [0, 0, 1, 0, 1],
    [1, 1, 1, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 1, 1, 1],
    [1, 0, 1, 0, 1],
    [1, 1, 1, 1, 1],
]

SWITCHBACK_GRID = [
    ["X", 1, 0, 1, 1],
    [0, 1, 1, 1, 1],
    [0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 0],
    [1, 1, 1, 1, 1],
    [0, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]


@pytest.fixture
def l_shape_grid():
    return [row[:] for row in L_SHAPE_GRID]


@pytest.fixture
def question_mark_grid():
    return [row[:] for row in QUESTION_MARK_GRID]


@pytest.fixture
def switchback_grid():
    return [row[:] for row in SWITCHBACK_GRID]
