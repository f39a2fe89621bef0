import pytest

from grid_navigation import Coordinate, Direction, Grid, Path
from grid_navigation.utilities import path_cost, path_directions, render_path


def _path(*points):
    return Path([Coordinate(x, y) for x, y in points])


def test_path_cost():
    assert path_cost(_path((0, 0), (1, 0), (2, 0), (3, 0))) == 3
    assert path_cost(_path((0, 0), (1, 0), (1, 1), (1, 2))) == 3
    assert path_cost(_path((4, 4))) == 0


def test_path_directions():
    path = _path((0, 0), (1, 0), (1, 1), (0, 1), (0, 0))
    assert path_directions(path) == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]
    assert path_directions(_path((3, 3))) == []

    with pytest.raises(ValueError):
        path_directions(_path((0, 0), (2, 0)))


def test_render_path_draws_on_a_copy():
    grid = Grid({(x, y): "." for x in range(3) for y in range(2)})
    path = _path((0, 0), (1, 0), (1, 1), (2, 1))
    arrows = {Direction.UP: "^", Direction.RIGHT: ">", Direction.DOWN: "v", Direction.LEFT: "<"}

    rendered = render_path(path, grid, "S", "E", arrows.get, " ")
    assert rendered.splitlines() == [
        "-----",
        "|S>.|",
        "|.vE|",
        "-----",
    ]
    assert grid.count(".") == 6
