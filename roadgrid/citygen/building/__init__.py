"""Building placement along generated roads."""
from roadgrid.citygen.building.building_generator import BuildingPlacer

__all__ = ['BuildingPlacer']
