"""Utility package for coordinate conversion, logging and data export."""
