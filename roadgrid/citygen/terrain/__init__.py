"""Terrain sizing for a generated road network."""
from roadgrid.citygen.terrain.footprint import FootprintCalculator

__all__ = ['FootprintCalculator']
