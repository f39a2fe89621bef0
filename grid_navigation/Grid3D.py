from typing import Any, Callable, Iterable, List

from .directions import adjacent_orthogonal_locations_3d
from .Grid import Glyph, SparseGrid, axis_length
from .Objects import Coordinate3D, Coordinate3DLike, as_coordinate3d


class Grid3D(SparseGrid):
    """A 3d grid stored as a mapping of ``Coordinate3D`` to value."""

    def to_location(self, location: Coordinate3DLike) -> Coordinate3D:
        return as_coordinate3d(location)

    def _adjacent(self, location: Coordinate3D) -> List[Coordinate3D]:
        return adjacent_orthogonal_locations_3d(location)

    def min_z(self) -> int:
        return self._bound("z", min)

    def max_z(self) -> int:
        return self._bound("z", max)

    def depth(self) -> int:
        return axis_length(self.min_z(), self.max_z())

    def _scan(self, matches: Callable[[Any], bool]) -> List[Coordinate3D]:
        min_x, max_x = self.min_x(), self.max_x()
        min_y, max_y = self.min_y(), self.max_y()
        min_z, max_z = self.min_z(), self.max_z()

        found: List[Coordinate3D] = []
        for z in range(min_z, max_z + 1):
            for y in range(min_y, max_y + 1):
                for x in range(min_x, max_x + 1):
                    location = Coordinate3D(x, y, z)
                    if location in self._locations and matches(self._locations[location]):
                        found.append(location)
        return found

    def locations_with_value(self, value) -> List[Coordinate3D]:
        """Locations holding ``value``, layer by layer then row-major."""
        return self._scan(lambda v: v == value)

    def locations_with_any_of(self, values: Iterable[Any]) -> List[Coordinate3D]:
        wanted = list(values)
        return self._scan(lambda v: v in wanted)

    def render_z_layer(self, z: int, empty_value, value_to_glyph: Glyph = str) -> str:
        """Render layer ``z`` within the x/y bounds of the whole grid."""
        lines = self._render_plane(lambda x, y: Coordinate3D(x, y, z), empty_value, value_to_glyph)
        return "\n".join(lines)

    def render(self, empty_value, value_to_glyph: Glyph = str) -> str:
        blocks: List[str] = []
        for z in range(self.min_z(), self.max_z() + 1):
            blocks.append(f"z = {z}")
            blocks.append(self.render_z_layer(z, empty_value, value_to_glyph))
            blocks.append("")
        return "\n".join(blocks)
