"""City generation package.

This package provides the procedural road network generator and the content derived
from a generated network: roadside trees, the terrain patch underneath, and the
attachment points used by building and passenger placers.
"""
