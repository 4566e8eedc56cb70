"""Grid coordinate utilities.

Maps continuous world positions on the ground plane to integer grid cells and back.
"""
import math

from roadgrid.citygen.dataclass import Direction, GridCell, Point


class GridUtils:
    """Collection of coordinate conversion functions for the generation lattice."""

    @staticmethod
    def world_to_cell(point: Point, cell_size: float) -> GridCell:
        """Map a world position to the grid cell containing it.

        Rounds to the nearest integer, halves to even.

        Args:
            point: World position; only x and z are used.
            cell_size: World units per grid unit.

        Returns:
            The grid cell.
        """
        return GridCell(round(point.x / cell_size), round(point.z / cell_size))

    @staticmethod
    def cell_to_world(cell: GridCell, cell_size: float) -> Point:
        """Map a grid cell to the world position of its center on the ground plane.

        Args:
            cell: The grid cell.
            cell_size: World units per grid unit.

        Returns:
            World position of the cell center.
        """
        return Point(cell.x * cell_size, 0.0, cell.y * cell_size)

    @staticmethod
    def is_lattice_cell(cell: GridCell, grid_spacing: int) -> bool:
        """Check if both coordinates of a cell are exact multiples of the grid spacing."""
        if grid_spacing <= 0:
            return False
        return cell.x % grid_spacing == 0 and cell.y % grid_spacing == 0

    @staticmethod
    def lateral_offset(direction: Direction, distance: float) -> Point:
        """Offset of the given length to the right-hand side of a travel direction."""
        side = direction.turn_right()
        return Point(side.dx * distance, 0.0, side.dz * distance)

    @staticmethod
    def yaw_towards(origin: Point, target: Point) -> float:
        """Heading in degrees from origin to target, 0 along +z and 90 along +x."""
        return math.degrees(math.atan2(target.x - origin.x, target.z - origin.z)) % 360
