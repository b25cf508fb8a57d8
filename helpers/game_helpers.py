# helpers/game_helpers.py
import logging
import time
from typing import List, Dict, Any, Optional

from worldnav.catalog.core import CityCatalog
from worldnav.catalog.city_store import SQLiteCityStore
from worldnav.catalog.data_models import City
from worldnav.catalog.sample_data import sample_rows
from worldnav.config import GameConfig
from worldnav.exceptions import StorageError
from worldnav.ranking.blob_store import JsonFileBlobStore
from worldnav.ranking.core import RankingStore
from worldnav.ranking.data_models import Player
from worldnav.session.core import ProgressionController, elapsed
from worldnav.session.data_models import SessionSnapshot, ArrivalOutcome

class _UnavailableCityStore:
    """Stands in when the city database cannot be opened; every read fails."""
    def __init__(self, error: StorageError):
        self.error = error

    def select_all(self):
        raise self.error

def build_controller(config: Optional[GameConfig] = None) -> ProgressionController:
    """Wires the city database, rankings file and controller for one process."""
    config = config or GameConfig()
    config.ensure_data_dir()

    try:
        store = SQLiteCityStore(config.database_path)
        if config.seed_sample_cities:
            store.insert_if_empty(sample_rows())
    except StorageError as e:
        logging.error(f"City database unavailable: {e}")
        store = _UnavailableCityStore(e)

    catalog = CityCatalog(store)
    catalog.refresh()
    rankings = RankingStore(JsonFileBlobStore(config.data_dir, config.rankings_key))
    return ProgressionController(catalog, rankings)

def city_to_dict(city: Optional[City]) -> Optional[Dict[str, Any]]:
    if city is None:
        return None
    return {
        "name": city.name, "country": city.country, "continent": city.continent,
        "lat": city.latitude, "lon": city.longitude, "is_primary": city.is_primary
    }

def cities_as_geojson(cities: List[City]) -> dict:
    features = []
    for i, city in enumerate(cities):
        feature = {
            "type": "Feature", "geometry": {"type": "Point", "coordinates": [city.longitude, city.latitude]},
            "properties": { "id": i, "name": city.name, "country": city.country,
                           "continent": city.continent, "is_primary": city.is_primary }
        }
        features.append(feature)
    return {"type": "FeatureCollection", "features": features}

def snapshot_to_dict(snapshot: SessionSnapshot, now: Optional[float] = None) -> Dict[str, Any]:
    now = time.time() if now is None else now
    return {
        "phase": snapshot.phase.value,
        "player_name": snapshot.player_name,
        "current_city": city_to_dict(snapshot.current_city),
        "cities_visited": snapshot.cities_visited,
        "cities_total": snapshot.cities_total,
        "tier": snapshot.tier,
        "total_time": snapshot.total_time,
        "last_leg_time": snapshot.last_leg_time,
        "is_active": snapshot.is_active,
        "awaiting_next_city": snapshot.awaiting_next_city,
        # A completed session keeps showing its last-known leg clock
        "leg_elapsed": elapsed(now, snapshot.current_city_start_time) if snapshot.is_active else snapshot.last_leg_time,
        "session_elapsed": elapsed(now, snapshot.session_start_time) if snapshot.is_active else snapshot.total_time
    }

def outcome_to_dict(outcome: Optional[ArrivalOutcome]) -> Optional[Dict[str, Any]]:
    if outcome is None:
        return None
    return {
        "effect": outcome.effect.value,
        "message": outcome.message,
        "cities_visited": outcome.cities_visited,
        "total_time": outcome.total_time,
        "leg_time": outcome.leg_time,
        "reached_city": city_to_dict(outcome.reached_city),
        "next_city": city_to_dict(outcome.next_city),
        "rank": outcome.rank
    }

def rankings_to_list(players: List[Player]) -> List[Dict[str, Any]]:
    return [
        {"rank": i + 1, "name": p.name, "games_played": p.games_played,
         "total_time": p.total_time, "average_time": p.average_time}
        for i, p in enumerate(players)
    ]

def format_response(success: bool, message: str, data: Dict = None) -> Dict[str, Any]:
    """Standardized response format for all routes."""
    return {
        "module": "worldnav", "success": success, "message": message,
        "data": data or {}, "timestamp": time.time()
    }
