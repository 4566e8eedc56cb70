"""Road generation module for creating road networks on a grid.

This module provides the occupancy map, the frontier queue, the branch policy and
the two generation strategies: grid frontier expansion and connection-point growth
with depth-limited branches.
"""
from roadgrid.citygen.road.branch_policy import BranchDecision, BranchPolicy
from roadgrid.citygen.road.connection_road_generator import \
    ConnectionRoadGenerator
from roadgrid.citygen.road.frontier_queue import FrontierQueue
from roadgrid.citygen.road.generation_context import (GenerationContext,
                                                      GrowthState)
from roadgrid.citygen.road.network_generator import (GENERATORS,
                                                     NetworkGenerator,
                                                     create_road_generator)
from roadgrid.citygen.road.occupancy_map import OccupancyMap
from roadgrid.citygen.road.road_generator import GridRoadGenerator
from roadgrid.citygen.road.segment_placer import (MissingPrefabError,
                                                  SegmentPlacer)

__all__ = ['BranchDecision', 'BranchPolicy', 'ConnectionRoadGenerator', 'FrontierQueue', 'GenerationContext',
           'GrowthState', 'GENERATORS', 'NetworkGenerator', 'create_road_generator', 'OccupancyMap',
           'GridRoadGenerator', 'MissingPrefabError', 'SegmentPlacer']
