"""Passenger generator module.

Passengers wait where an intersection connection leads nowhere: at the tile edge of
every open connection, facing the intersection center. Ground snapping is left to the
engine side; positions are planned at a fixed ground height.
"""
from typing import Dict, List

from roadgrid.citygen.dataclass import Direction, GridCell, Passenger, Point
from roadgrid.citygen.road.occupancy_map import OccupancyMap
from roadgrid.utils.grid_utils import GridUtils
from roadgrid.utils.logger import Logger


class PassengerPlacer:
    """Plans passengers on the open connections of intersections."""

    def __init__(self, config):
        """Initialize the passenger placer.

        Args:
            config: Configuration dictionary with road and passenger settings.
        """
        self.config = config
        self.prefab = config.get('citygen.passenger.prefab', '')
        self.cell_size = float(config['citygen.road.cell_size'])
        self.ground_height = float(config['citygen.passenger.ground_height'])
        self.scale = float(config['citygen.passenger.scale'])
        self.logger = Logger.get_logger('PassengerPlacer')

    def place_at_open_connections(self, open_connections: Dict[GridCell, List[Direction]],
                                  occupancy_map: OccupancyMap) -> List[Passenger]:
        """Plan one passenger per open intersection connection.

        Args:
            open_connections: Open directions per intersection cell.
            occupancy_map: Occupancy of the generated network.

        Returns:
            Planned passengers.
        """
        if not open_connections:
            self.logger.warning('No open intersection connections found')
            return []

        passengers = []
        half_cell = self.cell_size / 2
        for cell, directions in open_connections.items():
            center = occupancy_map.get(cell).position
            for direction in directions:
                position = Point(
                    center.x + direction.dx * half_cell,
                    self.ground_height,
                    center.z + direction.dz * half_cell,
                )
                passengers.append(Passenger(
                    position=position,
                    rotation=GridUtils.yaw_towards(position, center),
                    prefab=self.prefab,
                    intersection_cell=cell,
                    direction=direction,
                    scale=self.scale,
                ))

        self.logger.info(f'Spawned {len(passengers)} passengers.')
        return passengers
