"""Per-run generation state.

A fresh context is created for every generation run and handed to the generator
strategies, so no state survives from one run into the next and independent runs
never share mutable state.
"""
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Dict, List

from roadgrid.citygen.dataclass import (Direction, GenerationStats, GridCell,
                                        Segment, SegmentKind, TreeCandidate)
from roadgrid.citygen.road.frontier_queue import FrontierQueue
from roadgrid.citygen.road.occupancy_map import OccupancyMap


class GrowthState(Enum):
    """State of the road growth within a run."""
    INIT = auto()
    GROWING = auto()
    DRAINED = auto()


@dataclass
class GenerationContext:
    """All mutable state of one generation run."""
    rng: random.Random
    occupancy_map: OccupancyMap = field(default_factory=OccupancyMap)
    frontier: FrontierQueue = field(default_factory=FrontierQueue)
    tree_candidates: List[TreeCandidate] = field(default_factory=list)
    declined_connections: Dict[GridCell, List[Direction]] = field(default_factory=dict)
    stats: GenerationStats = field(default_factory=GenerationStats)
    state: GrowthState = GrowthState.INIT

    @classmethod
    def seeded(cls, seed) -> 'GenerationContext':
        """Create a context with its own random source seeded with `seed`."""
        return cls(rng=random.Random(seed))

    @property
    def placements(self) -> List[Segment]:
        """Placed segments in placement order."""
        return self.occupancy_map.segments

    def record_open_connection(self, cell: GridCell, direction: Direction):
        """Remember a direction of an intersection that was left unused."""
        self.declined_connections.setdefault(cell, []).append(direction)

    def open_connections(self) -> Dict[GridCell, List[Direction]]:
        """Collect the unused connection directions of every intersection.

        A direction is open when the branch policy declined it, or when its frontier
        entry was still queued when growth stopped, and its neighbor cell is free.

        Returns:
            Mapping from intersection cell to its open directions, in placement order.
        """
        pending: Dict[GridCell, List[Direction]] = {}
        for cell, directions in self.declined_connections.items():
            pending.setdefault(cell, []).extend(directions)
        for entry in self.frontier:
            if entry.source is not None:
                pending.setdefault(entry.source, []).append(entry.incoming)

        result: Dict[GridCell, List[Direction]] = {}
        for cell in self.occupancy_map:
            if self.occupancy_map.kind_at(cell) != SegmentKind.INTERSECTION:
                continue
            open_directions = []
            for direction in pending.get(cell, []):
                if direction in open_directions or self.occupancy_map.is_occupied(cell.neighbor(direction)):
                    continue
                open_directions.append(direction)
            if open_directions:
                result[cell] = open_directions
        return result
