"""Single-entry visualization helper for grids and search paths."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

import matplotlib.pyplot as plt

from .Grid import SparseGrid
from .Grid3D import Grid3D
from .Objects import Path

ColorMap = Callable[[Any], str]


def _palette() -> List[str]:
    return [
        "#e41a1c", "#377eb8", "#4daf4a", "#984ea3", "#ff7f00",
        "#ffff33", "#a65628", "#f781bf", "#999999", "#1b9e77",
    ]


def _default_colors(grid: SparseGrid) -> ColorMap:
    palette = _palette()
    colors: Dict[Any, str] = {}
    for _, value in sorted(grid.items(), key=lambda item: item[0]):
        if value not in colors:
            colors[value] = palette[len(colors) % len(palette)]
    return lambda value: colors.get(value, "white")


def _draw_plane(ax, grid: SparseGrid, z: Optional[int], path: Optional[Path],
                value_to_color: ColorMap, empty_color: str) -> None:
    min_x, max_x = grid.min_x(), grid.max_x()
    min_y, max_y = grid.min_y(), grid.max_y()
    cols = max_x - min_x + 1
    rows = max_y - min_y + 1

    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            location = (x, y) if z is None else (x, y, z)
            value = grid.get(location)
            color = empty_color if value is None else value_to_color(value)
            ax.add_patch(
                plt.Rectangle((x - min_x, max_y - y), 1, 1, facecolor=color, edgecolor='black')
            )

    if path is not None:
        points = [p for p in path if z is None or p.z == z]
        if points:
            xs = [p.x - min_x + 0.5 for p in points]
            ys = [max_y - p.y + 0.5 for p in points]
            ax.plot(xs, ys, '-', color='black', linewidth=2)
            if points[0] == path.start:
                ax.plot(xs[0], ys[0], 'go', markersize=8)
            if points[-1] == path.end:
                ax.plot(xs[-1], ys[-1], 'ro', markersize=8)

    ax.set_xlim(0, cols)
    ax.set_ylim(0, rows)
    ax.set_xticks(range(cols + 1))
    ax.set_yticks(range(rows + 1))
    ax.set_aspect('equal')
    ax.grid(True, color='black', linestyle=':', linewidth=0.5)


def visualize(grid: SparseGrid, path: Optional[Path] = None, value_to_color: Optional[ColorMap] = None,
              empty_color: str = "white", show: bool = False, save_path: str | None = None) -> None:
    """Draw a grid and an optional path.

    Args:
        grid: Grid, or Grid3D drawn as one panel per z layer.
        path: optional path returned by ``find_shortest_path``.
        value_to_color: maps a cell value to a matplotlib color; by default
            each distinct value gets a palette color.
        empty_color: color of locations absent from the grid.
        show: display via matplotlib.
        save_path: optional filepath to save PNG.
    """
    colors = value_to_color or _default_colors(grid)
    cols = grid.max_x() - grid.min_x() + 1
    rows = grid.max_y() - grid.min_y() + 1

    if isinstance(grid, Grid3D):
        layers = list(range(grid.min_z(), grid.max_z() + 1))
        fig, axs = plt.subplots(1, len(layers), figsize=(cols * len(layers) / 2, rows / 2), squeeze=False)
        for ax, z in zip(axs[0], layers):
            ax.set_title(f"z = {z}")
            _draw_plane(ax, grid, z, path, colors, empty_color)
        plt.tight_layout()
    else:
        fig, ax = plt.subplots(figsize=(cols / 2, rows / 2))
        _draw_plane(ax, grid, None, path, colors, empty_color)

    if save_path:
        plt.savefig(save_path, bbox_inches='tight', dpi=150)
    if show:
        plt.show()
    else:
        plt.close(fig)
