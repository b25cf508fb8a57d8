# worldnav/catalog/core.py
"""
The city catalog: the static list of navigation targets and the
tier-filtered random draw that picks the next one.
"""
import json
import logging
import math
import random
from typing import List, Optional, Dict, Any

from .data_models import City
from ..constants.game import GameConstants
from ..exceptions import StorageError

class CityCatalog:
    """Holds the navigable cities loaded from a city record store."""

    def __init__(self, store, rng: Optional[random.Random] = None):
        """
        Args:
            store: Record store exposing `select_all()` (see SQLiteCityStore).
            rng: Random source for target selection; the module-level
                 generator is used when omitted.
        """
        self.store = store
        self.rng = rng or random
        self._cities: List[City] = []

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    @property
    def cities(self) -> List[City]:
        return list(self._cities)

    def load_all(self) -> List[City]:
        """Reads every stored city, skipping rows with unusable coordinates."""
        rows = self.store.select_all()
        cities = []
        for row in rows:
            city = self._parse_row(row)
            if city is None:
                logging.warning(f"Skipping city row with malformed gps_location: {row.get('city')!r}")
                continue
            cities.append(city)
        return cities

    def refresh(self) -> int:
        """Reloads the cached city list; keeps the previous list if the store fails."""
        try:
            self._cities = self.load_all()
        except StorageError as e:
            logging.error(f"City catalog unavailable, keeping {len(self._cities)} cached cities: {e}")
            return len(self._cities)
        logging.info(f"City catalog loaded {len(self._cities)} cities.")
        return len(self._cities)

    def primary_cities(self) -> List[City]:
        return [city for city in self._cities if city.is_primary]

    def random_city(self, tier: int) -> Optional[City]:
        """Uniform draw; tiers up to PRIMARY_ONLY_MAX_TIER only see primary cities."""
        primary_only = tier <= GameConstants.PRIMARY_ONLY_MAX_TIER
        candidates = self.primary_cities() if primary_only else self._cities
        if not candidates:
            return None
        return self.rng.choice(candidates)

    @staticmethod
    def _parse_row(row: Dict[str, Any]) -> Optional[City]:
        coordinates = CityCatalog._parse_coordinates(row.get("gps_location"))
        if coordinates is None:
            return None
        lon, lat = coordinates
        return City(
            name=row["city"],
            country=row["country"],
            continent=row["continent"],
            latitude=lat,
            longitude=lon,
            is_primary=row.get("is_primary") == 1
        )

    @staticmethod
    def _parse_coordinates(gps_location) -> Optional[tuple]:
        """Extracts (lon, lat) from a GeoJSON point string."""
        try:
            geo = json.loads(gps_location)
        except (TypeError, ValueError):
            return None
        if not isinstance(geo, dict):
            return None

        coords = geo.get("coordinates")
        if not isinstance(coords, list) or len(coords) < 2:
            return None
        lon, lat = coords[0], coords[1]
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in (lon, lat)):
            return None
        if not (math.isfinite(lon) and math.isfinite(lat)):
            return None
        if not (-90 <= lat <= 90 and -180 <= lon <= 180):
            return None
        return float(lon), float(lat)
