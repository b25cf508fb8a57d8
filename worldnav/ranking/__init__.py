"""
ranking - Player statistics and persisted rankings
"""

from .core import RankingStore
from .blob_store import JsonFileBlobStore
from .data_models import Player

__all__ = ['RankingStore', 'JsonFileBlobStore', 'Player']
