"""Tree resolution module.

Runs once after road growth over all tree candidates in submission order. A candidate
is accepted unless its tree cell is taken by a road or by an earlier tree.
"""
from typing import List, Set

from roadgrid.citygen.dataclass import GridCell, Tree
from roadgrid.utils.grid_utils import GridUtils
from roadgrid.utils.logger import Logger


class TreeResolver:
    """Deduplicates tree candidates against roads and against each other."""

    def __init__(self, config):
        """Initialize the resolver.

        Args:
            config: Configuration dictionary with road and tree settings.
        """
        self.config = config
        self.prefab = config.get('citygen.element.tree_prefab', '')
        self.cell_size = float(config['citygen.road.cell_size'])
        self.tree_cell_size = float(config['citygen.element.tree_cell_size'])
        self.logger = Logger.get_logger('TreeResolver')

    def resolve(self, context) -> List[Tree]:
        """Accept or reject every tree candidate of the run.

        Args:
            context: State of the current run.

        Returns:
            Accepted trees, each with a random yaw, in submission order.
        """
        occupancy_map = context.occupancy_map
        taken: Set[GridCell] = set()
        trees = []

        for candidate in context.tree_candidates:
            tree_cell = GridUtils.world_to_cell(candidate.position, self.tree_cell_size)
            road_cell = GridUtils.world_to_cell(candidate.position, self.cell_size)

            if tree_cell in taken or occupancy_map.is_occupied(tree_cell) or occupancy_map.is_occupied(road_cell):
                context.stats.trees_rejected += 1
                continue

            taken.add(tree_cell)
            trees.append(Tree(
                position=candidate.position,
                rotation=context.rng.uniform(0.0, 360.0),
                prefab=self.prefab,
                tree_cell=tree_cell,
            ))

        context.stats.trees_accepted += len(trees)
        self.logger.debug(f'Accepted {len(trees)} of {len(context.tree_candidates)} tree candidates')
        return trees
