# worldnav/catalog/data_models.py
from dataclasses import dataclass, field

from ..navigation.data_models import Coordinate

@dataclass(frozen=True)
class City:
    """A navigable city. Two cities are the same city when name and country match."""
    name: str
    country: str
    continent: str = field(compare=False)
    latitude: float = field(compare=False)
    longitude: float = field(compare=False)
    is_primary: bool = field(default=False, compare=False)

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(lat=self.latitude, lon=self.longitude)

    @property
    def label(self) -> str:
        return f"{self.name}, {self.country}"
