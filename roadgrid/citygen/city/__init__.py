"""City generation and management package.

This package drives a complete generation run: road growth, tree resolution, the
footprint and terrain patch, and the downstream building and passenger plans.
"""
