import logging
from typing import Any, Callable, List, Optional, Set

from .Grid import SparseGrid
from .Objects import Location, Path, PathTarget

logger = logging.getLogger(__name__)

LocationValidator = Callable[[Any, Any], bool]
RoundHook = Callable[[int, int], None]


class PathFinder:
    """Breadth-first search over the locations of a grid.

    Works on ``Grid`` and ``Grid3D`` alike: the neighborhood comes from
    ``grid.neighbors``. The frontier holds whole paths, each branch owning
    its own copy, so memory grows with frontier size times path length.
    """

    def __init__(
        self,
        grid: SparseGrid,
        location_validator: Optional[LocationValidator] = None,
        on_round: Optional[RoundHook] = None,
    ):
        self.grid = grid
        self.location_validator = location_validator
        self.on_round = on_round

    def _next_locations(self, location: Location, visited: Set[Location]) -> List[Location]:
        current_value = self.grid.value_at(location)
        candidates: List[Location] = []
        for neighbor in self.grid.neighbors(location):
            if neighbor in visited:
                continue
            if self.location_validator is not None and not self.location_validator(
                current_value, self.grid.value_at(neighbor)
            ):
                continue
            candidates.append(neighbor)
        return candidates

    def find(self, start, goal: PathTarget) -> Optional[Path]:
        """Return the first shortest path from ``start`` to ``goal``, or None."""
        start = self.grid.to_location(start)
        # Raises MissingCoordinateError when the start is off the grid.
        self.grid.value_at(start)

        if goal.is_reached(self.grid, start):
            return Path.starting_at(start)

        visited: Set[Location] = {start}
        frontier: List[Path] = [Path.starting_at(start)]

        rounds = 0
        while frontier:
            rounds += 1
            logger.debug("Search round %s: %s paths of length %s.", rounds, len(frontier), rounds)
            if self.on_round is not None:
                self.on_round(rounds, len(frontier))

            current_paths, frontier = frontier, []
            for path in current_paths:
                for location in self._next_locations(path.end, visited):
                    next_path = path.extended(location)
                    if goal.is_reached(self.grid, location):
                        logger.debug("Reached %s from %s in %s steps.", location, start, len(next_path) - 1)
                        return next_path
                    visited.add(location)
                    frontier.append(next_path)

        logger.debug("No path from %s to %s after visiting %s locations.", start, goal, len(visited))
        return None


def find_shortest_path(
    grid: SparseGrid,
    start,
    goal: PathTarget,
    location_validator: Optional[LocationValidator] = None,
    on_round: Optional[RoundHook] = None,
) -> Optional[Path]:
    """Find the first shortest path between ``start`` and ``goal``.

    Args:
        grid: Grid or Grid3D; locations absent from it cannot be entered.
        start: starting location, must be part of the grid.
        goal: LocationTarget or ValueTarget.
        location_validator: optional ``f(current_value, next_value) -> bool``
            gating each step; all orthogonal steps are allowed when omitted.
        on_round: optional ``f(round_number, frontier_size)`` progress hook.

    Returns:
        The path including its start location, or None when the goal cannot
        be reached.
    """
    return PathFinder(grid, location_validator=location_validator, on_round=on_round).find(start, goal)
