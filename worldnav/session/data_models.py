# worldnav/session/data_models.py
"""
Session state for one play-through, plus the read-only views and transition
results handed to presentation code.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..catalog.data_models import City

class SessionPhase(Enum):
    IDLE = "idle"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"

class ArrivalEffect(Enum):
    """What the caller should show after an arrival report."""
    CITY_REACHED = "city_reached"            # Show leg time, then continue
    SESSION_COMPLETED = "session_completed"  # Show final time and rank
    IGNORED = "ignored"                      # Reported in the wrong phase

@dataclass
class GameSession:
    """
    Mutable state of the active game. While `is_active` is True both
    `current_city` and `current_city_start_time` are set.
    """
    player_name: str = ""
    current_city: Optional[City] = None
    cities_visited: int = 0
    session_start_time: Optional[float] = None
    current_city_start_time: Optional[float] = None
    total_time: float = 0.0
    is_active: bool = False
    last_leg_time: float = 0.0
    awaiting_next_city: bool = False    # Arrived, next target not yet assigned

@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of the session as presentation code sees it."""
    phase: SessionPhase
    player_name: str
    current_city: Optional[City]
    cities_visited: int
    cities_total: int
    tier: int
    session_start_time: Optional[float]
    current_city_start_time: Optional[float]
    total_time: float
    last_leg_time: float
    is_active: bool
    awaiting_next_city: bool

@dataclass(frozen=True)
class ArrivalOutcome:
    """Result of an arrival report and the effect the caller should present."""
    effect: ArrivalEffect
    cities_visited: int
    total_time: float
    leg_time: float = 0.0
    reached_city: Optional[City] = None
    next_city: Optional[City] = None
    rank: Optional[int] = None
    message: str = ""

    @property
    def completed(self) -> bool:
        return self.effect is ArrivalEffect.SESSION_COMPLETED
