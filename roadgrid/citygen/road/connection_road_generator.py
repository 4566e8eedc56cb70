"""Connection-point road network generation module.

An alternative to the grid frontier generator. A single main road grows from the
origin through open connections; after a fixed number of consecutive straight pieces
the next piece is an intersection. Every intersection grows straight branch arms on
its free sides, limited to a maximum branch depth, and the main road carries on from
the end of the forward arm. Side arms end open.
"""
from typing import Optional, Set

from roadgrid.citygen.dataclass import (Direction, FrontierEntry, GridCell,
                                        Segment, SegmentKind)
from roadgrid.citygen.road.branch_policy import BranchPolicy
from roadgrid.citygen.road.generation_context import (GenerationContext,
                                                      GrowthState)
from roadgrid.citygen.road.segment_placer import SegmentPlacer
from roadgrid.utils.logger import Logger


class ConnectionRoadGenerator:
    """Handles main-road generation with depth-limited branches."""

    name = 'connection'

    def __init__(self, config, max_segments: int = None, segment_placer: SegmentPlacer = None):
        """Initialize the road generator.

        Args:
            config: Configuration with road settings.
            max_segments: Maximum number of segments to place, overrides the config.
            segment_placer: Placer shared with the rest of the run.
        """
        self.config = config
        self.max_segments = int(config['citygen.road.segment_count_limit'] if max_segments is None else max_segments)
        self.main_road_length = int(config['citygen.road.connection.main_road_length'])
        self.max_branch_depth = int(config['citygen.road.connection.max_branch_depth'])
        self.intersection_interval = int(config['citygen.road.connection.intersection_interval'])
        self.segment_placer = segment_placer or SegmentPlacer(config)

        self.start_cell = GridCell(0, 0)
        self.start_direction = Direction.FORWARD

        self.logger = Logger.get_logger('ConnectionRoadGenerator')

    def required_kinds(self) -> Set[SegmentKind]:
        """Segment kinds this generator may place with its current settings."""
        kinds = set()
        if self.max_segments > 0 and self.main_road_length > 0:
            kinds.add(SegmentKind.STRAIGHT)
        if min(self.max_segments, self.main_road_length) > self.intersection_interval:
            kinds.add(SegmentKind.INTERSECTION)
        return kinds

    def generate(self, context: GenerationContext) -> None:
        """Grow the main road and its branches into the given context.

        Args:
            context: Fresh state of the current run.

        Raises:
            MissingPrefabError: If a segment kind that may be placed has no prefab.
        """
        self.segment_placer.validate(self.required_kinds())
        context.stats.requested = self.max_segments

        if self.max_segments <= 0 or self.main_road_length <= 0:
            context.state = GrowthState.DRAINED
            return

        start = self.segment_placer.place(context, self.start_cell, SegmentKind.STRAIGHT, self.start_direction)
        self._open_ahead(context, start)
        context.state = GrowthState.GROWING

        main_placed = 1
        consecutive_straights = 1
        while main_placed < self.main_road_length and context.stats.placed < self.max_segments:
            entry = context.frontier.dequeue()
            if entry is None:
                break

            if context.occupancy_map.is_occupied(entry.target):
                context.stats.conflicts += 1
                self.logger.debug(f'Skipped placement at ({entry.target.x}, {entry.target.y}) due to overlap')
                continue

            if consecutive_straights >= self.intersection_interval:
                kind = SegmentKind.INTERSECTION
            else:
                kind = SegmentKind.STRAIGHT

            segment = self.segment_placer.place(context, entry.target, kind, entry.incoming)
            if segment is None:
                continue
            main_placed += 1

            if kind == SegmentKind.STRAIGHT:
                consecutive_straights += 1
                self._open_ahead(context, segment)
            else:
                consecutive_straights = 0
                self._generate_branches(context, segment)

        context.state = GrowthState.DRAINED
        self.logger.info(
            f'Road generation completed. Main road: {main_placed}, total placed: {context.stats.placed}'
        )

    def _open_ahead(self, context: GenerationContext, segment: Segment) -> None:
        """Open the connection at the far end of a segment if the cell beyond is free."""
        next_cell = segment.cell.neighbor(segment.direction)
        if not context.occupancy_map.is_occupied(next_cell):
            context.frontier.enqueue(FrontierEntry(next_cell, segment.direction, segment.cell))

    def _generate_branches(self, context: GenerationContext, intersection: Segment) -> None:
        """Grow arms from an intersection and continue the main road past the forward arm."""
        forward = intersection.direction
        for direction in BranchPolicy.candidate_directions(forward):
            arm_end = self._grow_arm(context, intersection.cell, direction)
            if arm_end is None:
                if direction == forward:
                    self._open_ahead(context, intersection)
                else:
                    context.record_open_connection(intersection.cell, direction)
            elif direction == forward:
                self._open_ahead(context, arm_end)

    def _grow_arm(self, context: GenerationContext, cell: GridCell, direction: Direction) -> Optional[Segment]:
        """Place up to `max_branch_depth` straight pieces from a cell.

        Returns:
            The last piece placed, or None if no piece was placed.
        """
        last = None
        current = cell
        for _ in range(self.max_branch_depth):
            if context.stats.placed >= self.max_segments:
                break
            current = current.neighbor(direction)
            if context.occupancy_map.is_occupied(current):
                break
            segment = self.segment_placer.place(context, current, SegmentKind.STRAIGHT, direction)
            if segment is None:
                break
            last = segment
        return last
