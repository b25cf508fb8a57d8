# worldnav/navigation/utils/coordinates.py
"""
Geodetic helpers for plane navigation on a spherical Earth.
"""
import math
import numpy as np

from ...constants.game import GameConstants

def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculates the Haversine distance between two points in meters."""
    d_lat = np.radians(lat2 - lat1)
    d_lon = np.radians(lon2 - lon1)
    a = np.sin(d_lat / 2)**2 + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lon / 2)**2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return float(GameConstants.EARTH_RADIUS_M * c)

def get_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculates the initial bearing from point 1 to point 2.

    Args:
        lat1, lon1: Latitude and longitude of point 1 (in degrees).
        lat2, lon2: Latitude and longitude of point 2 (in degrees).

    Returns:
        float: The bearing in degrees (from 0 to 360).
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    dlon = math.radians(lon2 - lon1)

    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - \
        math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)

    return (math.degrees(math.atan2(y, x)) + 360) % 360

def clamp_latitude(lat: float) -> float:
    return max(-90.0, min(90.0, lat))

def wrap_longitude(lon: float) -> float:
    """Wraps a longitude into [-180, 180)."""
    return ((lon + 180.0) % 360.0) - 180.0
