from typing import Any, Callable, List

from .directions import Direction, direction_between_adjacent
from .Grid import Glyph, SparseGrid
from .Objects import Path


def path_cost(path: Path) -> int:
    """Calculate the cost (number of steps) of the given path."""
    return max(0, len(path) - 1)


def path_directions(path: Path) -> List[Direction]:
    """Directions of each step of a 2d path."""
    return [direction_between_adjacent(a, b) for a, b in zip(path.locations, path.locations[1:])]


def render_path(
    path: Path,
    grid: SparseGrid,
    start_value: Any,
    end_value: Any,
    direction_to_value: Callable[[Direction], Any],
    empty_value: Any,
    value_to_glyph: Glyph = str,
) -> str:
    """Render a 2d path on top of a copy of ``grid``.

    Each step is drawn with the value of the direction it was entered from,
    the first location with ``start_value`` and, for paths longer than two
    locations, the last one with ``end_value``.
    """
    canvas = type(grid).from_grid(grid)
    locations = path.locations

    canvas.set(locations[0], start_value)
    for prev, location in zip(locations, locations[1:]):
        canvas.set(location, direction_to_value(direction_between_adjacent(prev, location)))
    if len(locations) > 2:
        canvas.set(locations[-1], end_value)

    return canvas.render(empty_value, value_to_glyph)
