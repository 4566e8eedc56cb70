"""Occupancy map module for the road network.

The occupancy map is the single source of truth for which grid cells hold a road
segment. Cells are only ever added during a run; there is no removal.
"""
from typing import Dict, Iterator, List, Optional

from roadgrid.citygen.dataclass import GridCell, Segment, SegmentKind


class OccupancyMap:
    """Mapping from grid cell to the segment placed there."""

    def __init__(self):
        """Initialize an empty occupancy map."""
        self._cells: Dict[GridCell, Segment] = {}

    def is_occupied(self, cell: GridCell) -> bool:
        """Check if a cell already holds a segment."""
        return cell in self._cells

    def place(self, segment: Segment) -> bool:
        """Record a segment at its cell.

        Args:
            segment: The segment to record.

        Returns:
            True if the segment was recorded, False if the cell was already occupied.
        """
        if self.is_occupied(segment.cell):
            return False
        self._cells[segment.cell] = segment
        return True

    def get(self, cell: GridCell) -> Optional[Segment]:
        """Get the segment placed at a cell, or None."""
        return self._cells.get(cell)

    def kind_at(self, cell: GridCell) -> Optional[SegmentKind]:
        """Get the kind of the segment placed at a cell, or None."""
        segment = self._cells.get(cell)
        return segment.kind if segment else None

    @property
    def cells(self) -> List[GridCell]:
        """Occupied cells in placement order."""
        return list(self._cells)

    @property
    def segments(self) -> List[Segment]:
        """Placed segments in placement order."""
        return list(self._cells.values())

    def __contains__(self, cell: GridCell) -> bool:
        return self.is_occupied(cell)

    def __iter__(self) -> Iterator[GridCell]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)
