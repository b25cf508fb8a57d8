"""
catalog - The navigable cities and tier-filtered target selection
"""

from .core import CityCatalog
from .city_store import SQLiteCityStore
from .data_models import City
from .sample_data import SAMPLE_CITIES, sample_rows

__all__ = [
    "CityCatalog",
    "SQLiteCityStore",
    "City",
    "SAMPLE_CITIES",
    "sample_rows"
]
