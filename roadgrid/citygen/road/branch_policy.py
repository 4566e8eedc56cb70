"""Branch policy for intersections.

An intersection considers every direction except the one leading back to where it
was reached from, in the order forward, left, right relative to travel. The first
free neighbor always continues so the network never dies at an intersection; each
further free neighbor branches with the configured probability.
"""
import random
from dataclasses import dataclass, field
from typing import List

from roadgrid.citygen.dataclass import Direction, FrontierEntry, GridCell
from roadgrid.citygen.road.occupancy_map import OccupancyMap


@dataclass
class BranchDecision:
    """Outcome of the branch policy at one intersection."""
    enqueued: List[FrontierEntry] = field(default_factory=list)
    declined: List[Direction] = field(default_factory=list)
    blocked: List[Direction] = field(default_factory=list)


class BranchPolicy:
    """Decides which neighbors of an intersection join the frontier."""

    def __init__(self, branch_chance: float):
        """Initialize the branch policy.

        Args:
            branch_chance: Probability that each neighbor after the first is enqueued.
        """
        self.branch_chance = branch_chance

    @staticmethod
    def candidate_directions(incoming: Direction) -> List[Direction]:
        """Directions an intersection may lead to, in tie-break order."""
        return [incoming, incoming.turn_left(), incoming.turn_right()]

    def select(self, rng: random.Random, cell: GridCell, incoming: Direction,
               occupancy_map: OccupancyMap) -> BranchDecision:
        """Select the frontier entries produced by an intersection.

        Args:
            rng: Random source of the current run.
            cell: Cell of the intersection.
            incoming: Direction the intersection was reached by.
            occupancy_map: Occupancy of the current run.

        Returns:
            The entries to enqueue, the free directions that were not taken, and the
            directions whose neighbor is already occupied.
        """
        decision = BranchDecision()
        for direction in self.candidate_directions(incoming):
            next_cell = cell.neighbor(direction)
            if occupancy_map.is_occupied(next_cell):
                decision.blocked.append(direction)
                continue

            # the first free neighbor is taken without a draw
            if not decision.enqueued or rng.random() < self.branch_chance:
                decision.enqueued.append(FrontierEntry(next_cell, direction, cell))
            else:
                decision.declined.append(direction)
        return decision
