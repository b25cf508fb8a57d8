# worldnav/ranking/data_models.py
import math
from dataclasses import dataclass
from typing import Dict, Any

@dataclass
class Player:
    """Cumulative statistics for one player name across completed sessions."""
    name: str
    total_time: float = 0.0
    games_played: int = 0

    @property
    def average_time(self) -> float:
        return self.total_time / self.games_played if self.games_played > 0 else 0.0

    def to_dict(self) -> Dict[str, Any]:
        """Wire form stored in the rankings blob."""
        return {"name": self.name, "totalTime": self.total_time, "gamesPlayed": self.games_played}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Player":
        """Raises ValueError when the entry is not a valid player record."""
        if not isinstance(data, dict):
            raise ValueError(f"Player entry must be an object, got {type(data).__name__}")
        name = data.get("name")
        total_time = data.get("totalTime")
        games_played = data.get("gamesPlayed")

        if not isinstance(name, str):
            raise ValueError("Player name must be a string")
        if isinstance(total_time, bool) or not isinstance(total_time, (int, float)):
            raise ValueError(f"Invalid totalTime for {name!r}")
        if isinstance(games_played, bool) or not isinstance(games_played, int):
            raise ValueError(f"Invalid gamesPlayed for {name!r}")
        if not math.isfinite(total_time) or total_time < 0:
            raise ValueError(f"totalTime out of range for {name!r}: {total_time}")
        if games_played < 1:
            raise ValueError(f"gamesPlayed out of range for {name!r}: {games_played}")
        return cls(name=name, total_time=float(total_time), games_played=games_played)
