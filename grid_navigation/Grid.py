import logging
from typing import Any, Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .directions import adjacent_orthogonal_locations
from .errors import EmptyGridError, MissingCoordinateError
from .Objects import Coordinate, CoordinateLike, as_coordinate

logger = logging.getLogger(__name__)

Glyph = Callable[[Any], str]


def axis_length(low: int, high: int) -> int:
    """Length of an axis spanning ``[low, high]``.

    The extra cell is only counted when the range contains zero, which keeps
    grids whose origin sits outside of the populated area one cell shorter.
    """
    if high < 0 or low > 0:
        return high - low
    return high - low + 1


class SparseGrid:
    """Dict-backed mapping of locations to values, shared by 2d and 3d grids."""

    def __init__(self, locations: Optional[Mapping[Any, Any]] = None):
        self._locations: Dict[Any, Any] = {}
        if locations:
            for location, value in locations.items():
                self.set(location, value)

    def to_location(self, location):
        raise NotImplementedError

    def _adjacent(self, location) -> List[Any]:
        raise NotImplementedError

    @classmethod
    def from_grid(cls, other: "SparseGrid"):
        """Return a value-wise copy of ``other``."""
        grid = cls()
        grid._locations = dict(other._locations)
        return grid

    def is_empty(self) -> bool:
        return not self._locations

    def size(self) -> int:
        return len(self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    def __contains__(self, location) -> bool:
        return self.to_location(location) in self._locations

    def __iter__(self) -> Iterator[Any]:
        return iter(self._locations)

    def items(self) -> Iterable[Tuple[Any, Any]]:
        return self._locations.items()

    def locations(self) -> List[Any]:
        return list(self._locations)

    def set(self, location, value):
        """Store ``value`` at ``location`` and return the value it replaced, if any."""
        location = self.to_location(location)
        previous = self._locations.get(location)
        self._locations[location] = value
        return previous

    def get(self, location, default=None):
        return self._locations.get(self.to_location(location), default)

    def value_at(self, location):
        location = self.to_location(location)
        try:
            return self._locations[location]
        except KeyError:
            raise MissingCoordinateError(location) from None

    def remove(self, location):
        return self._locations.pop(self.to_location(location), None)

    def count(self, value) -> int:
        return sum(1 for v in self._locations.values() if v == value)

    def mapped_locations_with_value(self, value) -> List[Any]:
        """Populated locations holding ``value``, in no particular order."""
        return [location for location, v in self._locations.items() if v == value]

    def retain(self, predicate: Callable[[Any, Any], bool]) -> int:
        """Drop every location for which ``predicate(location, value)`` is false.

        Returns the number of dropped locations.
        """
        before = len(self._locations)
        self._locations = {
            location: value for location, value in self._locations.items() if predicate(location, value)
        }
        removed = before - len(self._locations)
        logger.debug("Retained %s of %s locations.", len(self._locations), before)
        return removed

    def neighbors(self, location) -> List[Any]:
        """Orthogonal neighbors of ``location`` that are part of the grid."""
        return [q for q in self._adjacent(self.to_location(location)) if q in self._locations]

    def _bound(self, axis: str, pick: Callable[[Iterable[int]], int]) -> int:
        if not self._locations:
            raise EmptyGridError(f"{pick.__name__}_{axis}")
        return pick(getattr(location, axis) for location in self._locations)

    def min_x(self) -> int:
        return self._bound("x", min)

    def max_x(self) -> int:
        return self._bound("x", max)

    def min_y(self) -> int:
        return self._bound("y", min)

    def max_y(self) -> int:
        return self._bound("y", max)

    def width(self) -> int:
        return axis_length(self.min_x(), self.max_x())

    def height(self) -> int:
        return axis_length(self.min_y(), self.max_y())

    def _render_plane(self, make_location: Callable[[int, int], Any], empty_value, value_to_glyph: Glyph) -> List[str]:
        min_x, max_x = self.min_x(), self.max_x()
        min_y, max_y = self.min_y(), self.max_y()
        separator = "-" * (max_x - min_x + 3)

        lines = [separator]
        for y in range(min_y, max_y + 1):
            row = "".join(
                value_to_glyph(self._locations.get(make_location(x, y), empty_value))
                for x in range(min_x, max_x + 1)
            )
            lines.append(f"|{row}|")
        lines.append(separator)
        return lines


class Grid(SparseGrid):
    """A 2d grid stored as a mapping of ``Coordinate`` to value."""

    def to_location(self, location: CoordinateLike) -> Coordinate:
        return as_coordinate(location)

    def _adjacent(self, location: Coordinate) -> List[Coordinate]:
        return adjacent_orthogonal_locations(location)

    def _scan(self, matches: Callable[[Any], bool]) -> List[Coordinate]:
        min_x, max_x = self.min_x(), self.max_x()
        min_y, max_y = self.min_y(), self.max_y()

        found: List[Coordinate] = []
        for y in range(min_y, max_y + 1):
            for x in range(min_x, max_x + 1):
                location = Coordinate(x, y)
                if location in self._locations and matches(self._locations[location]):
                    found.append(location)
        return found

    def locations_with_value(self, value) -> List[Coordinate]:
        """Locations holding ``value``, top to bottom then left to right."""
        return self._scan(lambda v: v == value)

    def locations_with_any_of(self, values: Iterable[Any]) -> List[Coordinate]:
        wanted = list(values)
        return self._scan(lambda v: v in wanted)

    def render(self, empty_value, value_to_glyph: Glyph = str) -> str:
        """Return the grid as a bordered text block, one line per row."""
        return "\n".join(self._render_plane(Coordinate, empty_value, value_to_glyph))
