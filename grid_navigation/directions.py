"""Directions, rotations and adjacency helpers.

The y axis grows downwards: ``Up`` and ``North`` decrease ``y``.
"""

from enum import Enum
from typing import Dict, List, Tuple

from .Objects import Coordinate, Coordinate3D


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    LEFT = "left"


class CardinalDirection(Enum):
    NORTH = "north"
    NORTH_EAST = "north_east"
    EAST = "east"
    SOUTH_EAST = "south_east"
    SOUTH = "south"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"


class Rotation(Enum):
    CLOCKWISE = "clockwise"
    COUNTER_CLOCKWISE = "counter_clockwise"


class Direction3D(Enum):
    UP = "up"
    DOWN = "down"
    RIGHT = "right"
    LEFT = "left"
    IN = "in"
    OUT = "out"


_DIRECTION_OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}

_CARDINAL_OFFSETS: Dict[CardinalDirection, Tuple[int, int]] = {
    CardinalDirection.NORTH: (0, -1),
    CardinalDirection.NORTH_EAST: (1, -1),
    CardinalDirection.EAST: (1, 0),
    CardinalDirection.SOUTH_EAST: (1, 1),
    CardinalDirection.SOUTH: (0, 1),
    CardinalDirection.SOUTH_WEST: (-1, 1),
    CardinalDirection.WEST: (-1, 0),
    CardinalDirection.NORTH_WEST: (-1, -1),
}

_DIRECTION_3D_OFFSETS: Dict[Direction3D, Tuple[int, int, int]] = {
    Direction3D.LEFT: (-1, 0, 0),
    Direction3D.RIGHT: (1, 0, 0),
    Direction3D.UP: (0, -1, 0),
    Direction3D.DOWN: (0, 1, 0),
    Direction3D.IN: (0, 0, -1),
    Direction3D.OUT: (0, 0, 1),
}

_CLOCKWISE: Dict[Direction, Direction] = {
    Direction.UP: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
    Direction.DOWN: Direction.LEFT,
    Direction.LEFT: Direction.UP,
}

_COUNTER_CLOCKWISE: Dict[Direction, Direction] = {after: before for before, after in _CLOCKWISE.items()}

_OPPOSITE: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


def adjacent_orthogonal_locations(location: Coordinate) -> List[Coordinate]:
    """Return the four orthogonal neighbors: up, right, down, left."""
    x, y = location.x, location.y
    return [
        Coordinate(x, y - 1),
        Coordinate(x + 1, y),
        Coordinate(x, y + 1),
        Coordinate(x - 1, y),
    ]


def adjacent_diagonal_locations(location: Coordinate) -> List[Coordinate]:
    """Return the four diagonal neighbors: top-right, down-right, down-left, top-left."""
    x, y = location.x, location.y
    return [
        Coordinate(x + 1, y - 1),
        Coordinate(x + 1, y + 1),
        Coordinate(x - 1, y + 1),
        Coordinate(x - 1, y - 1),
    ]


def adjacent_orthogonal_locations_3d(location: Coordinate3D) -> List[Coordinate3D]:
    """Return the six face neighbors: -x, +x, -y, +y, -z, +z."""
    x, y, z = location.x, location.y, location.z
    return [
        Coordinate3D(x - 1, y, z),
        Coordinate3D(x + 1, y, z),
        Coordinate3D(x, y - 1, z),
        Coordinate3D(x, y + 1, z),
        Coordinate3D(x, y, z - 1),
        Coordinate3D(x, y, z + 1),
    ]


def adjacent_in_direction(location: Coordinate, direction: Direction) -> Coordinate:
    dx, dy = _DIRECTION_OFFSETS[direction]
    return Coordinate(location.x + dx, location.y + dy)


def adjacent_in_cardinal_direction(location: Coordinate, direction: CardinalDirection) -> Coordinate:
    dx, dy = _CARDINAL_OFFSETS[direction]
    return Coordinate(location.x + dx, location.y + dy)


def adjacent_in_direction_3d(location: Coordinate3D, direction: Direction3D) -> Coordinate3D:
    dx, dy, dz = _DIRECTION_3D_OFFSETS[direction]
    return Coordinate3D(location.x + dx, location.y + dy, location.z + dz)


def direction_between_adjacent(start: Coordinate, end: Coordinate) -> Direction:
    """Direction of the single orthogonal step leading from ``start`` to ``end``."""
    offset = (end.x - start.x, end.y - start.y)
    for direction, delta in _DIRECTION_OFFSETS.items():
        if delta == offset:
            return direction
    raise ValueError(f"{start} and {end} are not orthogonally adjacent")


def rotate(direction: Direction, rotation: Rotation) -> Direction:
    if rotation is Rotation.CLOCKWISE:
        return _CLOCKWISE[direction]
    return _COUNTER_CLOCKWISE[direction]


def opposite(direction: Direction) -> Direction:
    return _OPPOSITE[direction]
