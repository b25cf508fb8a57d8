# worldnav/navigation/data_models.py
from dataclasses import dataclass
from typing import Tuple

@dataclass(frozen=True)
class Coordinate:
    """A point on the globe in degrees."""
    lat: float
    lon: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.lat, self.lon
