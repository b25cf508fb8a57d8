# worldnav/navigation/plane.py

import logging
from typing import Optional

from .data_models import Coordinate
from .utils.coordinates import get_bearing, clamp_latitude, wrap_longitude
from ..constants.game import GameConstants

class PlaneNavigator:
    """Tracks the player's plane as it is nudged across the map."""

    def __init__(self, start: Optional[Coordinate] = None):
        self.start = start or Coordinate(*GameConstants.START_POSITION)
        self.position = self.start

    def reset(self) -> Coordinate:
        self.position = self.start
        return self.position

    def move(self, d_lat: float = 0.0, d_lon: float = 0.0) -> Coordinate:
        """Shift the plane by degree deltas; latitude clamps, longitude wraps."""
        self.position = Coordinate(
            lat=clamp_latitude(self.position.lat + d_lat),
            lon=wrap_longitude(self.position.lon + d_lon)
        )
        logging.debug(f"Plane moved to ({self.position.lat:.4f}, {self.position.lon:.4f})")
        return self.position

    def place_at(self, coordinate: Coordinate) -> Coordinate:
        self.position = coordinate
        return self.position

    def heading_to(self, target: Coordinate) -> float:
        """Initial bearing from the plane to `target`, for orienting the plane icon."""
        return get_bearing(self.position.lat, self.position.lon, target.lat, target.lon)
