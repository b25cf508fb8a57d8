# worldnav/navigation/arrival.py
"""
Decides when the plane has reached its target city.
"""
from .data_models import Coordinate
from .utils.coordinates import haversine_distance_m
from ..constants.game import GameConstants

class ArrivalDetector:
    """Great-circle distance check against a fixed arrival radius."""

    THRESHOLD_M = GameConstants.ARRIVAL_THRESHOLD_M

    @staticmethod
    def distance_meters(a: Coordinate, b: Coordinate) -> float:
        return haversine_distance_m(a.lat, a.lon, b.lat, b.lon)

    def has_arrived(self, current: Coordinate, target: Coordinate) -> bool:
        return self.distance_meters(current, target) < self.THRESHOLD_M
