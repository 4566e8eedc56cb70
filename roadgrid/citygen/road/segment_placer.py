"""Segment placement module.

Every road segment of every generation strategy is placed through the segment placer,
which checks the occupancy map, records the segment and hands it to the tree collector.
"""
from typing import Iterable, Optional

from roadgrid.citygen.dataclass import Direction, GridCell, Segment, SegmentKind
from roadgrid.citygen.element.tree_generator import TreeCandidateCollector
from roadgrid.citygen.road.generation_context import GenerationContext
from roadgrid.utils.grid_utils import GridUtils
from roadgrid.utils.logger import Logger

PREFAB_KEYS = {
    SegmentKind.STRAIGHT: 'citygen.road.prefabs.straight',
    SegmentKind.INTERSECTION: 'citygen.road.prefabs.intersection',
}


class MissingPrefabError(Exception):
    """Raised when no content handle is configured for a segment kind that would be placed."""
    pass


class SegmentPlacer:
    """Places road segments on the grid."""

    def __init__(self, config, tree_collector: TreeCandidateCollector = None):
        """Initialize the segment placer.

        Args:
            config: Configuration with road and tree settings.
            tree_collector: Collector for roadside tree candidates.
        """
        self.config = config
        self.cell_size = float(config['citygen.road.cell_size'])
        self.prefabs = {kind: config.get(key, '') for kind, key in PREFAB_KEYS.items()}
        self.tree_collector = tree_collector or TreeCandidateCollector(config)
        self.logger = Logger.get_logger('SegmentPlacer')

    def validate(self, kinds: Iterable[SegmentKind]):
        """Check that a content handle exists for every segment kind that may be placed.

        Args:
            kinds: Segment kinds the caller may place.

        Raises:
            MissingPrefabError: If a kind has no content handle configured.
        """
        for kind in SegmentKind:
            if kind in kinds and not self.prefabs.get(kind):
                raise MissingPrefabError(
                    f'No prefab configured for {kind.value} segments ({PREFAB_KEYS[kind]})'
                )

    def place(self, context: GenerationContext, cell: GridCell, kind: SegmentKind,
              direction: Direction) -> Optional[Segment]:
        """Place a segment if its cell is free.

        Args:
            context: State of the current run.
            cell: Target cell.
            kind: Kind of segment to place.
            direction: Travel direction through the segment.

        Returns:
            The placed segment, or None if the cell was already occupied.
        """
        segment = Segment(
            cell=cell,
            kind=kind,
            direction=direction,
            position=GridUtils.cell_to_world(cell, self.cell_size),
            prefab=self.prefabs[kind],
        )
        if not context.occupancy_map.place(segment):
            context.stats.conflicts += 1
            self.logger.debug(f'Skipped placement at ({cell.x}, {cell.y}) due to overlap')
            return None

        context.stats.placed += 1
        self.tree_collector.collect(context, segment)
        return segment
