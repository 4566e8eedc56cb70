"""High-level function call interface for generation, export and preview."""
from roadgrid.citygen.function_call.city_function_call import CityFunctionCall

__all__ = ['CityFunctionCall']
