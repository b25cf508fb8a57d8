from .coordinates import haversine_distance_m, get_bearing, clamp_latitude, wrap_longitude

__all__ = [
    "haversine_distance_m",
    "get_bearing",
    "clamp_latitude",
    "wrap_longitude"
]
