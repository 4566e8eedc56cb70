"""RoadGrid package for procedural road network generation.

This package grows road networks on a grid and derives roadside trees, a terrain
patch, and building and passenger attachment points from the result.
"""

from roadgrid.citygen.city.city_generator import CityGenerator
from roadgrid.citygen.function_call.city_function_call import CityFunctionCall
from roadgrid.config import Config
from roadgrid.utils.logger import Logger

__all__ = ['CityGenerator', 'CityFunctionCall', 'Config', 'Logger']
