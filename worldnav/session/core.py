# worldnav/session/core.py
"""
The progression state machine: starts a session, accounts for each arrival,
raises the difficulty tier as cities are reached, and hands the finished
session to the rankings after the last city.

    IDLE --start_game--> IN_PROGRESS --arrival x20--> COMPLETED
                         ^    |
                         +----+ arrival / advance_to_city
"""
import logging
import time
from dataclasses import replace
from typing import Callable, Optional, Tuple, List

from .data_models import GameSession, SessionSnapshot, SessionPhase, ArrivalOutcome, ArrivalEffect
from ..catalog.data_models import City
from ..constants.game import GameConstants
from ..exceptions import ValidationError, StateError
from ..navigation.arrival import ArrivalDetector
from ..navigation.data_models import Coordinate
from ..navigation.plane import PlaneNavigator
from ..ranking.data_models import Player

def elapsed(now: float, start_time: Optional[float]) -> float:
    """Seconds since `start_time`; 0 when nothing has started."""
    if start_time is None:
        return 0.0
    return max(0.0, now - start_time)

class ProgressionController:
    """Drives one game at a time through its twenty legs."""

    def __init__(
        self,
        catalog,
        ranking_store,
        detector: Optional[ArrivalDetector] = None,
        plane: Optional[PlaneNavigator] = None,
        clock: Callable[[], float] = time.time
    ):
        """
        Args:
            catalog: CityCatalog used to draw targets by tier.
            ranking_store: RankingStore that receives completed sessions.
            detector: Arrival check applied to plane position updates.
            plane: Plane whose moves feed position updates.
            clock: Source of POSIX timestamps.
        """
        self.catalog = catalog
        self.ranking_store = ranking_store
        self.detector = detector or ArrivalDetector()
        self.plane = plane or PlaneNavigator()
        self.clock = clock
        self.session = GameSession()

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logging.info("ProgressionController initialized.")

    # --- Read accessors ---

    @property
    def phase(self) -> SessionPhase:
        if self.session.is_active:
            return SessionPhase.IN_PROGRESS
        if self.session.session_start_time is None:
            return SessionPhase.IDLE
        return SessionPhase.COMPLETED

    @property
    def player_name(self) -> str:
        return self.session.player_name

    @property
    def current_tier(self) -> int:
        return GameConstants.tier_for(self.session.cities_visited)

    @property
    def plane_position(self) -> Coordinate:
        return self.plane.position

    def snapshot(self) -> SessionSnapshot:
        s = self.session
        return SessionSnapshot(
            phase=self.phase,
            player_name=s.player_name,
            current_city=s.current_city,
            cities_visited=s.cities_visited,
            cities_total=GameConstants.CITIES_PER_SESSION,
            tier=self.current_tier,
            session_start_time=s.session_start_time,
            current_city_start_time=s.current_city_start_time,
            total_time=s.total_time,
            last_leg_time=s.last_leg_time,
            is_active=s.is_active,
            awaiting_next_city=s.awaiting_next_city
        )

    def rankings_sorted(self) -> List[Player]:
        return self.ranking_store.rankings_sorted()

    # --- Transitions ---

    def start_game(self, player_name: str, first_city: Optional[City] = None) -> SessionSnapshot:
        """
        Begins a new session, abandoning any session already running.

        Raises:
            ValidationError: empty player name, or no city to start from.
        """
        name = (player_name or "").strip()
        if not name:
            raise ValidationError("Player name must not be empty")

        if first_city is None:
            first_city = self.catalog.random_city(GameConstants.MIN_TIER)
        if first_city is None:
            raise ValidationError(f"No city available for tier {GameConstants.MIN_TIER}")

        if self.session.is_active:
            logging.info(f"Abandoning session of {self.session.player_name} at {self.session.cities_visited} cities.")

        now = self.clock()
        self.session = GameSession(
            player_name=name,
            current_city=first_city,
            cities_visited=0,
            session_start_time=now,
            current_city_start_time=now,
            total_time=0.0,
            is_active=True
        )
        self.plane.reset()
        logging.info(f"Game started for {name}: first target {first_city.label}")
        return self.snapshot()

    def arrived_at_current_city(self, now: Optional[float] = None) -> ArrivalOutcome:
        """Accounts for the leg just flown; completes the session on the last city."""
        try:
            self._require_leg_in_flight("arrived_at_current_city")
        except StateError as e:
            logging.warning(f"Ignoring arrival: {e}")
            return self._ignored(str(e))

        s = self.session
        now = self.clock() if now is None else now
        navigation_time = elapsed(now, s.current_city_start_time)
        s.last_leg_time = navigation_time
        s.total_time += navigation_time
        s.cities_visited += 1
        s.awaiting_next_city = True
        reached = s.current_city
        logging.info(
            f"{s.player_name} reached {reached.label} in {navigation_time:.1f}s "
            f"({s.cities_visited}/{GameConstants.CITIES_PER_SESSION})"
        )

        if s.cities_visited >= GameConstants.CITIES_PER_SESSION:
            return self._complete(reached)

        return ArrivalOutcome(
            effect=ArrivalEffect.CITY_REACHED,
            cities_visited=s.cities_visited,
            total_time=s.total_time,
            leg_time=navigation_time,
            reached_city=reached,
            message=f"You reached {reached.name}"
        )

    def advance_to_city(self, next_city: Optional[City] = None, now: Optional[float] = None) -> Optional[City]:
        """
        Assigns the next target after an arrival. Returns None when called
        out of order.

        Raises:
            ValidationError: no city available for the current tier.
        """
        s = self.session
        try:
            self._require_pending_arrival("advance_to_city")
        except StateError as e:
            logging.warning(f"Ignoring advance: {e}")
            return None

        tier = self.current_tier
        if next_city is None:
            next_city = self.catalog.random_city(tier)
        if next_city is None:
            raise ValidationError(f"No city available for tier {tier}")

        reached = s.current_city
        s.current_city = next_city
        s.current_city_start_time = self.clock() if now is None else now
        s.awaiting_next_city = False
        self.plane.place_at(reached.coordinate)
        logging.info(f"Next target for {s.player_name}: {next_city.label} (tier {tier})")
        return next_city

    def report_arrival(self, next_city: Optional[City] = None, now: Optional[float] = None) -> ArrivalOutcome:
        """Arrival accounting followed by the next target, unless the session just ended."""
        outcome = self.arrived_at_current_city(now=now)
        if outcome.effect is not ArrivalEffect.CITY_REACHED:
            return outcome
        chosen = self.advance_to_city(next_city, now=now)
        return replace(outcome, next_city=chosen)

    def update_position(self, position: Coordinate) -> Optional[ArrivalOutcome]:
        """Checks a plane position against the current target; arrival fires at most once per leg."""
        s = self.session
        if not s.is_active or s.awaiting_next_city:
            return None
        if not self.detector.has_arrived(position, s.current_city.coordinate):
            return None
        return self.arrived_at_current_city()

    def move_plane(self, d_lat: float = 0.0, d_lon: float = 0.0) -> Tuple[Coordinate, Optional[ArrivalOutcome]]:
        position = self.plane.move(d_lat, d_lon)
        return position, self.update_position(position)

    # --- Internals ---

    def _complete(self, reached: City) -> ArrivalOutcome:
        s = self.session
        s.is_active = False
        s.awaiting_next_city = False
        self.ranking_store.record_session(s.player_name, s.total_time)
        rank = self.ranking_store.rank_of(s.player_name)
        logging.info(f"Session complete for {s.player_name}: total {s.total_time:.1f}s, rank #{rank}")
        return ArrivalOutcome(
            effect=ArrivalEffect.SESSION_COMPLETED,
            cities_visited=s.cities_visited,
            total_time=s.total_time,
            leg_time=s.last_leg_time,
            reached_city=reached,
            rank=rank,
            message="Game Complete!"
        )

    def _require_leg_in_flight(self, action: str):
        s = self.session
        if not s.is_active or s.current_city_start_time is None or s.awaiting_next_city:
            raise StateError(action, self._describe_phase())

    def _require_pending_arrival(self, action: str):
        s = self.session
        if not s.is_active or not s.awaiting_next_city:
            raise StateError(action, self._describe_phase())

    def _describe_phase(self) -> str:
        if self.session.awaiting_next_city:
            return "awaiting next city"
        return self.phase.value

    def _ignored(self, message: str) -> ArrivalOutcome:
        return ArrivalOutcome(
            effect=ArrivalEffect.IGNORED,
            cities_visited=self.session.cities_visited,
            total_time=self.session.total_time,
            message=message
        )
