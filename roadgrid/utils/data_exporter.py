"""Module for exporting generated road networks to JSON files.

This module exports roads, trees, terrain, buildings and passengers, plus an
engine-facing node list for the content placer.
"""
import json
import os
from typing import Dict

from roadgrid.citygen.dataclass import Point, RoadNetwork


class DataExporter:
    """Manages the export of a generated network to JSON files."""

    def __init__(self, network: RoadNetwork):
        """Initialize the data exporter with a generated network.

        Args:
            network: The generated network.
        """
        self.network = network

    def export_road_data(self) -> Dict:
        """Export all road data.

        Returns:
            Dictionary containing road segment data, open intersection connections and run stats.
        """
        return {
            'roads': [segment.to_dict() for segment in self.network.segments],
            'open_connections': [
                {
                    'cell': cell.to_dict(),
                    'directions': [direction.name.lower() for direction in directions]
                }
                for cell, directions in self.network.open_connections.items()
            ],
            'stats': self.network.stats.to_dict()
        }

    def export_tree_data(self) -> Dict:
        """Export all accepted trees."""
        return {'trees': [tree.to_dict() for tree in self.network.trees]}

    def export_terrain_data(self) -> Dict:
        """Export footprint and terrain patch; both are None for an empty network."""
        return {
            'footprint': self.network.footprint.to_dict() if self.network.footprint else None,
            'terrain': self.network.terrain.to_dict() if self.network.terrain else None
        }

    def export_building_data(self) -> Dict:
        """Export all planned buildings."""
        return {'buildings': [building.to_dict() for building in self.network.buildings]}

    def export_passenger_data(self) -> Dict:
        """Export all planned passengers."""
        return {'passengers': [passenger.to_dict() for passenger in self.network.passengers]}

    def export_to_json(self, output_dir: str):
        """Export all data to JSON files.

        Args:
            output_dir: Directory path where the JSON files will be written.
        """
        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        files = {
            'roads.json': self.export_road_data(),
            'trees.json': self.export_tree_data(),
            'terrain.json': self.export_terrain_data(),
            'buildings.json': self.export_building_data(),
            'passengers.json': self.export_passenger_data(),
        }
        for file_name, data in files.items():
            with open(os.path.join(output_dir, file_name), 'w') as f:
                json.dump(data, f, indent=2)

        self.convert_layout_to_world(output_dir)

    @staticmethod
    def _node(node_id: str, instance_name: str, position: Point, yaw: float, scale: float = 1.0) -> Dict:
        """Build one engine node entry."""
        return {
            'id': node_id,
            'instance_name': instance_name,
            'properties': {
                'location': {
                    'x': round(position.x, 4),
                    'y': round(position.y, 4),
                    'z': round(position.z, 4)
                },
                'orientation': {
                    'pitch': 0,
                    'yaw': round(yaw, 4),
                    'roll': 0
                },
                'scale': {
                    'x': scale,
                    'y': scale,
                    'z': scale
                }
            }
        }

    def convert_layout_to_world(self, output_dir: str) -> Dict:
        """Convert the network to the node list consumed by the content placer.

        Args:
            output_dir: Directory path where the world JSON file will be written.

        Returns:
            The world data that was written.
        """
        world_data = {
            'terrain': self.network.terrain.to_dict() if self.network.terrain else None,
            'nodes': []
        }
        nodes = world_data['nodes']

        for segment in self.network.segments:
            node = self._node(f'GEN_Road_{len(nodes)}', segment.prefab, segment.position, segment.rotation)
            node['kind'] = segment.kind.value
            node['cell'] = segment.cell.to_dict()
            nodes.append(node)

        for tree in self.network.trees:
            nodes.append(self._node(f'GEN_Tree_{len(nodes)}', tree.prefab, tree.position, tree.rotation))

        for building in self.network.buildings:
            node = self._node(f'GEN_Building_{len(nodes)}', building.prefab, building.position,
                              building.rotation, building.scale)
            node['segment_assignment'] = building.segment_cell.to_dict()
            nodes.append(node)

        for passenger in self.network.passengers:
            node = self._node(f'GEN_Passenger_{len(nodes)}', passenger.prefab, passenger.position,
                              passenger.rotation, passenger.scale)
            node['intersection_assignment'] = passenger.intersection_cell.to_dict()
            nodes.append(node)

        if not os.path.exists(output_dir):
            os.makedirs(output_dir)

        with open(os.path.join(output_dir, 'progen_world.json'), 'w') as f:
            json.dump(world_data, f, indent=2)
        return world_data
