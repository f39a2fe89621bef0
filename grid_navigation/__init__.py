from .directions import (
    CardinalDirection,
    Direction,
    Direction3D,
    Rotation,
    adjacent_diagonal_locations,
    adjacent_in_cardinal_direction,
    adjacent_in_direction,
    adjacent_in_direction_3d,
    adjacent_orthogonal_locations,
    adjacent_orthogonal_locations_3d,
    direction_between_adjacent,
    opposite,
    rotate,
)
from .errors import EmptyGridError, MissingCoordinateError, NavigationError
from .Grid import Grid
from .Grid3D import Grid3D
from .Objects import (
    Coordinate,
    Coordinate3D,
    LocationTarget,
    Path,
    PathTarget,
    ValueTarget,
    as_coordinate,
    as_coordinate3d,
)
from .PathFinder import PathFinder, find_shortest_path
from .utilities import path_cost, path_directions, render_path
