"""Dataclass module for the road network generation."""
from roadgrid.citygen.dataclass.dataclass import (Building, Direction,
                                                  Footprint, FrontierEntry,
                                                  GenerationStats, GridCell,
                                                  Passenger, Point,
                                                  RoadNetwork, Segment,
                                                  SegmentKind, TerrainPatch,
                                                  Tree, TreeCandidate)

__all__ = ['Building', 'Direction', 'Footprint', 'FrontierEntry', 'GenerationStats', 'GridCell', 'Passenger', 'Point',
           'RoadNetwork', 'Segment', 'SegmentKind', 'TerrainPatch', 'Tree', 'TreeCandidate']
