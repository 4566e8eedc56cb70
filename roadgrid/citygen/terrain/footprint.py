"""Footprint calculation module.

The footprint is the padded axis-aligned rectangle on the ground plane that covers
every placed road segment and every accepted tree. It sizes the terrain patch laid
under the network.
"""
from typing import Iterable, Optional

import numpy as np

from roadgrid.citygen.dataclass import Footprint, GridCell, TerrainPatch, Tree
from roadgrid.utils.grid_utils import GridUtils


class FootprintCalculator:
    """Measures generated content and sizes the terrain under it."""

    def __init__(self, config):
        """Initialize the calculator.

        Args:
            config: Configuration dictionary with road and terrain settings.
        """
        self.config = config
        self.cell_size = float(config['citygen.road.cell_size'])
        self.padding = float(config['citygen.terrain.padding'])

    def calculate(self, cells: Iterable[GridCell], trees: Iterable[Tree]) -> Optional[Footprint]:
        """Compute the padded bounding rectangle of roads and trees.

        Args:
            cells: Occupied road cells.
            trees: Accepted trees.

        Returns:
            The footprint, or None if there is no content at all.
        """
        coords = [
            (position.x, position.z)
            for position in [GridUtils.cell_to_world(cell, self.cell_size) for cell in cells]
            + [tree.position for tree in trees]
        ]
        if not coords:
            return None

        points = np.asarray(coords, dtype=float)
        min_x, min_z = points.min(axis=0)
        max_x, max_z = points.max(axis=0)

        return Footprint(
            min_x=float(min_x) - self.padding,
            max_x=float(max_x) + self.padding,
            min_z=float(min_z) - self.padding,
            max_z=float(max_z) + self.padding,
        )

    def terrain_patch(self, footprint: Optional[Footprint]) -> Optional[TerrainPatch]:
        """Size a terrain patch for a footprint.

        Args:
            footprint: Footprint of the network, or None for an empty network.

        Returns:
            The terrain patch, or None for an empty network.
        """
        if footprint is None:
            return None
        return TerrainPatch.from_footprint(
            footprint,
            height=float(self.config['citygen.terrain.height']),
            heightmap_resolution=int(self.config['citygen.terrain.heightmap_resolution']),
            elevation=float(self.config['citygen.terrain.elevation']),
        )
