# worldnav/ranking/core.py
"""
Durable player rankings, ordered by average session time (lower is better).
"""
import json
import logging
from typing import List, Optional

from .data_models import Player
from ..exceptions import StorageError

logger = logging.getLogger(__name__)

class RankingStore:
    """Owns the process-wide player collection and its persistence."""

    def __init__(self, blob_store):
        """
        Args:
            blob_store: Exposes `read_blob() -> Optional[bytes]` and
                        `write_blob(bytes)` (see JsonFileBlobStore).
        """
        self.blob_store = blob_store
        self._players: List[Player] = self.load()

    def load(self) -> List[Player]:
        """Restores the saved players. Missing or corrupt data gives an empty list."""
        try:
            raw = self.blob_store.read_blob()
        except StorageError as e:
            logger.error(f"Rankings unreadable, starting empty: {e}")
            return []
        if raw is None:
            logger.info("No saved rankings found.")
            return []

        try:
            entries = json.loads(raw)
            if not isinstance(entries, list):
                raise ValueError(f"Expected a list of players, got {type(entries).__name__}")
            players = [Player.from_dict(entry) for entry in entries]
        except (ValueError, TypeError) as e:
            logger.warning(f"Discarding corrupt rankings data: {e}")
            return []

        logger.info(f"Loaded rankings for {len(players)} players.")
        return players

    def save(self) -> bool:
        """Persists the current ordering. A failed write is logged and reported as False."""
        payload = json.dumps([player.to_dict() for player in self._players]).encode("utf-8")
        try:
            self.blob_store.write_blob(payload)
        except StorageError as e:
            logger.error(f"Could not save rankings, keeping them in memory: {e}")
            return False
        logger.info(f"Rankings saved for {len(self._players)} players.")
        return True

    def record_session(self, player_name: str, total_time: float) -> Player:
        """Adds one completed session to a player's totals and re-ranks everyone."""
        player = self._find(player_name)
        if player is not None:
            player.total_time += total_time
            player.games_played += 1
        else:
            player = Player(name=player_name, total_time=total_time, games_played=1)
            self._players.append(player)

        # list.sort is stable: equal averages keep their insertion order
        self._players.sort(key=lambda p: p.average_time)
        self.save()
        logger.info(
            f"Recorded session for {player_name}: {total_time:.1f}s "
            f"(games={player.games_played}, avg={player.average_time:.1f}s)"
        )
        return player

    def rankings_sorted(self) -> List[Player]:
        return [Player(p.name, p.total_time, p.games_played) for p in self._players]

    def rank_of(self, player_name: str) -> Optional[int]:
        for index, player in enumerate(self._players):
            if player.name == player_name:
                return index + 1
        return None

    def _find(self, player_name: str) -> Optional[Player]:
        return next((p for p in self._players if p.name == player_name), None)
