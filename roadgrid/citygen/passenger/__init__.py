"""Passenger placement at the open ends of intersections."""
from roadgrid.citygen.passenger.passenger_generator import PassengerPlacer

__all__ = ['PassengerPlacer']
