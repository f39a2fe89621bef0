from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Iterator, List, Sequence, Union

from .errors import MissingCoordinateError


@total_ordering
@dataclass(frozen=True)
class Coordinate:
    """A 2d lattice point, ordered row-major by ``(y, x)``."""

    x: int
    y: int

    def _key(self):
        return (self.y, self.x)

    def __lt__(self, other):
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self._key() < other._key()

    def manhattan_distance(self, other: "Coordinate") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def clamp(self, low: "Coordinate", high: "Coordinate") -> "Coordinate":
        """Return ``low`` or ``high`` when outside of them, ``self`` otherwise."""
        if self < low:
            return low
        if high < self:
            return high
        return self


@total_ordering
@dataclass(frozen=True)
class Coordinate3D:
    """A 3d lattice point, ordered layer-major by ``(z, y, x)``."""

    x: int
    y: int
    z: int

    def _key(self):
        return (self.z, self.y, self.x)

    def __lt__(self, other):
        if not isinstance(other, Coordinate3D):
            return NotImplemented
        return self._key() < other._key()

    def manhattan_distance(self, other: "Coordinate3D") -> int:
        return abs(self.x - other.x) + abs(self.y - other.y) + abs(self.z - other.z)

    def clamp(self, low: "Coordinate3D", high: "Coordinate3D") -> "Coordinate3D":
        if self < low:
            return low
        if high < self:
            return high
        return self


CoordinateLike = Union[Coordinate, Sequence[int]]
Coordinate3DLike = Union[Coordinate3D, Sequence[int]]
Location = Union[Coordinate, Coordinate3D]


def as_coordinate(value: CoordinateLike) -> Coordinate:
    """Best-effort conversion of a coordinate-like value to Coordinate."""
    if isinstance(value, Coordinate):
        return value
    if isinstance(value, Coordinate3D):
        raise ValueError(f"Expected a 2d coordinate, got {value}")
    if len(value) == 2:
        x, y = map(int, value)
        return Coordinate(x, y)
    raise ValueError(f"Expected 2 components, got {len(value)}: {value}")


def as_coordinate3d(value: Coordinate3DLike) -> Coordinate3D:
    """Best-effort conversion of a coordinate-like value to Coordinate3D."""
    if isinstance(value, Coordinate3D):
        return value
    if isinstance(value, Coordinate):
        return Coordinate3D(value.x, value.y, 0)
    if len(value) == 3:
        x, y, z = map(int, value)
        return Coordinate3D(x, y, z)
    if len(value) == 2:
        x, y = map(int, value)
        return Coordinate3D(x, y, 0)
    raise ValueError(f"Expected 2 or 3 components, got {len(value)}: {value}")


@dataclass
class Path:
    """Ordered walk of locations starting at ``locations[0]``.

    A path never shrinks. ``extended`` returns a copy so that sibling
    branches of a search do not share their tail.
    """

    locations: List[Location]

    def __post_init__(self):
        self.locations = list(self.locations)
        if not self.locations:
            raise ValueError("A path holds at least its start location")

    @classmethod
    def starting_at(cls, location: Location) -> "Path":
        return cls([location])

    @property
    def start(self) -> Location:
        return self.locations[0]

    @property
    def end(self) -> Location:
        return self.locations[-1]

    def extended(self, location: Location) -> "Path":
        return Path(self.locations + [location])

    def __len__(self) -> int:
        return len(self.locations)

    def __iter__(self) -> Iterator[Location]:
        return iter(self.locations)

    def __getitem__(self, index):
        return self.locations[index]


class PathTarget:
    """Base class for search goals."""

    def is_reached(self, grid, location: Location) -> bool:
        raise NotImplementedError


@dataclass(frozen=True)
class LocationTarget(PathTarget):
    """Goal reached on one specific location."""

    location: Location

    def is_reached(self, grid, location: Location) -> bool:
        return location == grid.to_location(self.location)


@dataclass(frozen=True)
class ValueTarget(PathTarget):
    """Goal reached on any location holding ``value``."""

    value: Any

    def is_reached(self, grid, location: Location) -> bool:
        try:
            return grid.value_at(location) == self.value
        except MissingCoordinateError:
            return False
