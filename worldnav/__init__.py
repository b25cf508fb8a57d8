"""
worldnav - World Navigation Challenge

Fly a plane to twenty randomly chosen cities as fast as you can; finished
sessions feed a persistent player ranking.
"""

from .catalog import CityCatalog, SQLiteCityStore, City
from .config import GameConfig
from .exceptions import WorldNavError, StorageError, ValidationError, StateError
from .navigation import ArrivalDetector, Coordinate, PlaneNavigator
from .ranking import RankingStore, JsonFileBlobStore, Player
from .session import ProgressionController, SessionPhase, ArrivalEffect, elapsed

__all__ = [
    "CityCatalog",
    "SQLiteCityStore",
    "City",
    "GameConfig",
    "WorldNavError",
    "StorageError",
    "ValidationError",
    "StateError",
    "ArrivalDetector",
    "Coordinate",
    "PlaneNavigator",
    "RankingStore",
    "JsonFileBlobStore",
    "Player",
    "ProgressionController",
    "SessionPhase",
    "ArrivalEffect",
    "elapsed"
]
