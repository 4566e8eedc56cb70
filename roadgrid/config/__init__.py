"""Configuration management package.

This package provides functionality for loading and managing generation configuration.
Values live in YAML files and are read through dot-notation paths.
"""

from roadgrid.config.config_loader import Config

__all__ = ['Config']
