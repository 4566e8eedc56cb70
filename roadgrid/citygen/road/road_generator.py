"""Grid road network generation module.

This module grows a road network cell by cell. A start segment is placed at the
origin, then a FIFO frontier of candidate cells is drained until it runs dry or the
configured number of segments has been placed. Cells on the intersection lattice may
become intersections, which fan out through the branch policy; all other cells become
straight segments that continue in their travel direction.
"""
import random
from typing import Set

from roadgrid.citygen.dataclass import (Direction, FrontierEntry, GridCell,
                                        Segment, SegmentKind)
from roadgrid.citygen.road.branch_policy import BranchPolicy
from roadgrid.citygen.road.generation_context import (GenerationContext,
                                                      GrowthState)
from roadgrid.citygen.road.segment_placer import SegmentPlacer
from roadgrid.utils.grid_utils import GridUtils
from roadgrid.utils.logger import Logger


class GridRoadGenerator:
    """Handles frontier-expansion road network generation."""

    name = 'grid'

    def __init__(self, config, max_segments: int = None, segment_placer: SegmentPlacer = None):
        """Initialize the road generator.

        Args:
            config: Configuration with road settings.
            max_segments: Maximum number of segments to place, overrides the config.
            segment_placer: Placer shared with the rest of the run.
        """
        self.config = config
        self.max_segments = int(config['citygen.road.segment_count_limit'] if max_segments is None else max_segments)
        self.grid_spacing = int(config['citygen.road.grid_spacing'])
        self.intersection_chance = float(config['citygen.road.intersection_chance'])
        self.branch_policy = BranchPolicy(float(config['citygen.road.branch_chance']))
        self.segment_placer = segment_placer or SegmentPlacer(config)

        self.start_cell = GridCell(0, 0)
        self.start_direction = Direction.FORWARD

        self.logger = Logger.get_logger('GridRoadGenerator')

    def required_kinds(self) -> Set[SegmentKind]:
        """Segment kinds this generator may place with its current settings."""
        kinds = set()
        if self.max_segments > 0:
            kinds.add(SegmentKind.STRAIGHT)
        if self.max_segments > 1 and self.intersection_chance > 0 and self.grid_spacing > 0:
            kinds.add(SegmentKind.INTERSECTION)
        return kinds

    def generate(self, context: GenerationContext) -> None:
        """Grow a complete road network into the given context.

        Args:
            context: Fresh state of the current run.

        Raises:
            MissingPrefabError: If a segment kind that may be placed has no prefab.
        """
        self.segment_placer.validate(self.required_kinds())
        context.stats.requested = self.max_segments

        self.generate_initial_segment(context)
        while not self.generate_step(context):
            pass

        self.logger.info(f'Road generation completed. Total placed: {context.stats.placed}')
        if context.stats.starved:
            self.logger.info(
                f'Frontier drained before reaching {self.max_segments} segments '
                f'({context.stats.placed} placed)'
            )

    def generate_initial_segment(self, context: GenerationContext) -> None:
        """Place the start segment at the origin and seed the frontier with its successor."""
        if self.max_segments <= 0:
            context.state = GrowthState.DRAINED
            return

        segment = self.segment_placer.place(context, self.start_cell, SegmentKind.STRAIGHT, self.start_direction)
        if segment is not None:
            self._continue_straight(context, segment)
        context.state = GrowthState.GROWING

    def generate_step(self, context: GenerationContext) -> bool:
        """Process one frontier entry.

        Returns:
            True when generation should stop, False otherwise.
        """
        if context.state != GrowthState.GROWING:
            return True

        if context.stats.placed >= self.max_segments or context.frontier.empty():
            context.state = GrowthState.DRAINED
            return True

        entry = context.frontier.dequeue()

        # Another path reached this cell first
        if context.occupancy_map.is_occupied(entry.target):
            context.stats.stale_entries += 1
            self.logger.debug(f'Dropped stale frontier entry ({entry.target.x}, {entry.target.y})')
            return False

        kind = self.choose_segment_kind(context.rng, entry.target)
        segment = self.segment_placer.place(context, entry.target, kind, entry.incoming)
        if segment is None:
            return False

        if kind == SegmentKind.INTERSECTION:
            self._branch(context, segment)
        else:
            self._continue_straight(context, segment)
        return False

    def choose_segment_kind(self, rng: random.Random, cell: GridCell) -> SegmentKind:
        """Decide whether a cell becomes an intersection or a straight segment.

        Only cells on the intersection lattice draw from the random source.
        """
        if GridUtils.is_lattice_cell(cell, self.grid_spacing) and rng.random() < self.intersection_chance:
            return SegmentKind.INTERSECTION
        return SegmentKind.STRAIGHT

    def _continue_straight(self, context: GenerationContext, segment: Segment) -> None:
        """Enqueue the cell ahead of a straight segment if it is free."""
        next_cell = segment.cell.neighbor(segment.direction)
        if not context.occupancy_map.is_occupied(next_cell):
            context.frontier.enqueue(FrontierEntry(next_cell, segment.direction, segment.cell))

    def _branch(self, context: GenerationContext, segment: Segment) -> None:
        """Enqueue the neighbors chosen by the branch policy and remember the rest."""
        decision = self.branch_policy.select(context.rng, segment.cell, segment.direction, context.occupancy_map)
        for entry in decision.enqueued:
            context.frontier.enqueue(entry)
        for direction in decision.declined:
            context.record_open_connection(segment.cell, direction)
