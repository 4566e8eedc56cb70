"""Tree candidate collection module.

For every placed segment each side of the road gets a chance to receive a tree,
offset laterally from the segment with a small random jitter. Candidates are not
checked against each other here; the tree resolver does that after growth.
"""
from typing import List

from roadgrid.citygen.dataclass import Point, Segment, TreeCandidate
from roadgrid.utils.grid_utils import GridUtils


class TreeCandidateCollector:
    """Generates provisional roadside tree positions."""

    def __init__(self, config):
        """Initialize the collector.

        Args:
            config: Configuration dictionary with tree settings.
        """
        self.config = config
        self.prefab = config.get('citygen.element.tree_prefab', '')
        self.density = float(config['citygen.element.tree_density'])
        self.offset = float(config['citygen.element.tree_offset'])
        self.jitter = float(config['citygen.element.tree_jitter'])

    @property
    def enabled(self) -> bool:
        """Trees are collected only with a prefab and a positive density."""
        return bool(self.prefab) and self.density > 0

    def collect(self, context, segment: Segment) -> List[TreeCandidate]:
        """Queue tree candidates on both sides of a freshly placed segment.

        Args:
            context: State of the current run; candidates are appended to it.
            segment: The placed segment.

        Returns:
            The candidates produced for this segment.
        """
        if not self.enabled:
            return []

        candidates = []
        for side in (-1, 1):
            if context.rng.random() >= self.density:
                continue

            offset = GridUtils.lateral_offset(segment.direction, side * self.offset)
            jitter = Point(
                context.rng.uniform(-self.jitter, self.jitter),
                0.0,
                context.rng.uniform(-self.jitter, self.jitter),
            )
            candidates.append(TreeCandidate(segment.position + offset + jitter, segment.cell))

        context.tree_candidates.extend(candidates)
        context.stats.tree_candidates += len(candidates)
        return candidates
