from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence, Tuple

from grid_navigation import (
    Coordinate,
    Direction,
    Grid,
    LocationTarget,
    ValueTarget,
    find_shortest_path,
    path_cost,
    render_path,
)

logger = logging.getLogger(__name__)

SAMPLE_MAP = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""

ARROWS = {
    Direction.UP: "^",
    Direction.RIGHT: ">",
    Direction.DOWN: "v",
    Direction.LEFT: "<",
}


def read_elevation_map(text: str) -> Tuple[Coordinate, Coordinate, Grid]:
    """Parse a letter elevation map; ``S`` is the start at ``a``, ``E`` the goal at ``z``."""
    start: Optional[Coordinate] = None
    goal: Optional[Coordinate] = None
    grid = Grid()
    for y, line in enumerate(text.strip().splitlines()):
        for x, char in enumerate(line.strip()):
            location = Coordinate(x, y)
            if char == "S":
                start, char = location, "a"
            elif char == "E":
                goal, char = location, "z"
            grid.set(location, char)
    if start is None or goal is None:
        raise ValueError("Elevation map needs both an 'S' and an 'E' marker")
    return start, goal, grid


def climbing_validator(reverse: bool = False) -> Callable[[str, str], bool]:
    """Allow climbing at most one level per step (or descending, when ``reverse``)."""
    if reverse:
        return lambda current, following: ord(current) - ord(following) <= 1
    return lambda current, following: ord(following) - ord(current) <= 1


def solve(text: str) -> Tuple[Optional[int], Optional[int]]:
    """Return the fewest steps from S to E, and from any ``a`` to E."""
    start, goal, grid = read_elevation_map(text)

    path = find_shortest_path(grid, start, LocationTarget(goal), climbing_validator())
    if path is not None and logger.isEnabledFor(logging.DEBUG):
        logger.debug("\n%s", render_path(path, grid, "S", "E", ARROWS.get, "."))

    # Walking backwards from E finds the closest low point in a single search.
    reverse_path = find_shortest_path(grid, goal, ValueTarget("a"), climbing_validator(reverse=True))

    return (
        path_cost(path) if path is not None else None,
        path_cost(reverse_path) if reverse_path is not None else None,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Run both searches over the map file given as first argument, or over the sample."""
    args = list(sys.argv[1:] if argv is None else argv)
    text = Path(args[0]).read_text() if args else SAMPLE_MAP

    fewest_steps, fewest_steps_from_any_low_point = solve(text)
    print("=========================")
    print(f"Solution1: {fewest_steps}")
    print(f"Solution2: {fewest_steps_from_any_low_point}")
    print("=========================")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
