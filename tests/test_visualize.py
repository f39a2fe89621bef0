from grid_navigation import Coordinate, Grid, Grid3D, LocationTarget, find_shortest_path
from grid_navigation.visualize import visualize


def test_visualize_grid_with_path_saves_png(tmp_path):
    grid = Grid({(x, y): "." for x in range(4) for y in range(3)})
    grid.set((1, 1), "#")
    grid.remove((3, 0))
    path = find_shortest_path(grid, Coordinate(0, 0), LocationTarget(Coordinate(2, 2)),
                              lambda current, following: following != "#")

    target = tmp_path / "grid.png"
    visualize(grid, path, value_to_color={".": "white", "#": "black"}.get, save_path=str(target))
    assert target.exists()
    assert target.stat().st_size > 0


def test_visualize_grid3d_one_panel_per_layer(tmp_path):
    grid = Grid3D({(x, y, z): z for x in range(2) for y in range(2) for z in range(3)})
    target = tmp_path / "layers.png"
    visualize(grid, save_path=str(target))
    assert target.exists()
