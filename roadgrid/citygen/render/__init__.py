"""Rendering package for network previews.

This package draws top-down images of a generated network: terrain, roads, trees,
buildings and passengers.
"""
from roadgrid.citygen.render.visualization import render_network

__all__ = ['render_network']
