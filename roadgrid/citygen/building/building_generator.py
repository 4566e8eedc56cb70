"""Building generator module for planning buildings along road segments.

Walks the placed segments in order and proposes building positions on both sides of
each one. Only positions are planned here; instantiating the building content is up
to the engine side.
"""
import random
from typing import List

from roadgrid.citygen.dataclass import Building, Point, Segment
from roadgrid.citygen.road.occupancy_map import OccupancyMap
from roadgrid.utils.grid_utils import GridUtils
from roadgrid.utils.logger import Logger


class BuildingPlacer:
    """Building placer class for placing buildings along road segments."""
    def __init__(self, config):
        """Initialize the building placer.

        Args:
            config: Configuration dictionary with parameters for building generation.
        """
        self.config = config
        self.prefab = config.get('citygen.building.prefab', '')
        self.cell_size = float(config['citygen.road.cell_size'])
        self.offset_from_road = float(config['citygen.building.offset_from_road'])
        self.spacing = float(config['citygen.building.spacing'])
        self.half_extent = float(config['citygen.building.half_extent'])
        self.random_spread = float(config['citygen.building.random_spread'])
        self.min_distance = float(config['citygen.building.min_distance'])
        self.spawn_chance = float(config['citygen.building.spawn_chance'])
        self.scale = float(config['citygen.building.scale'])

        self.logger = Logger.get_logger('BuildingPlacer')

    def place_along_segments(self, segments: List[Segment], occupancy_map: OccupancyMap,
                             rng: random.Random) -> List[Building]:
        """Plan buildings along every segment.

        Args:
            segments: Placed segments in placement order.
            occupancy_map: Occupancy of the generated network.
            rng: Random source of the current run.

        Returns:
            Planned buildings.
        """
        if not self.prefab:
            self.logger.warning('No building prefab assigned.')
            return []

        buildings: List[Building] = []
        for segment in segments:
            self.generate_buildings_along_segment(segment, occupancy_map, rng, buildings)

        self.logger.info(f'Buildings placed: {len(buildings)}')
        return buildings

    def generate_buildings_along_segment(self, segment: Segment, occupancy_map: OccupancyMap,
                                         rng: random.Random, buildings: List[Building]):
        """Plan buildings on both sides of one segment.

        Args:
            segment: Road segment to place buildings along.
            occupancy_map: Occupancy of the generated network.
            rng: Random source of the current run.
            buildings: Buildings accepted so far; new ones are appended.
        """
        forward = segment.direction
        for distance in self._offsets_along_segment():
            base = segment.position + Point(forward.dx * distance, 0.0, forward.dz * distance)

            # -1: left, 1: right
            for side in (-1, 1):
                if rng.random() > self.spawn_chance:
                    continue

                jitter = Point(
                    rng.uniform(-self.random_spread, self.random_spread),
                    0.0,
                    rng.uniform(-self.random_spread, self.random_spread),
                )
                position = base + GridUtils.lateral_offset(forward, side * self.offset_from_road) + jitter

                if not self.can_place_building(position, occupancy_map, buildings):
                    continue

                facing = forward.turn_left() if side == 1 else forward.turn_right()
                buildings.append(Building(
                    position=position,
                    rotation=facing.yaw,
                    prefab=self.prefab,
                    segment_cell=segment.cell,
                    scale=self.scale,
                ))

    def can_place_building(self, position: Point, occupancy_map: OccupancyMap, buildings: List[Building]) -> bool:
        """Check if a building can be placed at the specified location.

        Args:
            position: Proposed building position.
            occupancy_map: Occupancy of the generated network.
            buildings: Buildings accepted so far.

        Returns:
            True if the position is off the road and far enough from other buildings.
        """
        if occupancy_map.is_occupied(GridUtils.world_to_cell(position, self.cell_size)):
            return False
        return all(position.planar_distance(b.position) >= self.min_distance for b in buildings)

    def _offsets_along_segment(self) -> List[float]:
        """Distances from the segment center at which buildings are attempted."""
        if self.spacing <= 0:
            return [0.0]
        offsets = []
        distance = -self.half_extent
        while distance <= self.half_extent + 1e-9:
            offsets.append(distance)
            distance += self.spacing
        return offsets
