#!/usr/bin/env python3
# worldnav/session/tests/test_progression.py
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from unittest.mock import MagicMock
from worldnav.catalog.data_models import City
from worldnav.exceptions import ValidationError
from worldnav.navigation.data_models import Coordinate
from worldnav.session.core import ProgressionController, elapsed
from worldnav.session.data_models import SessionPhase, ArrivalEffect

class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now

LONDON = City("London", "UK", "Europe", 51.5074, -0.1276, True)
PARIS = City("Paris", "France", "Europe", 48.8566, 2.3522, True)
NORTH = City("North", "Testland", "Nowhere", 10.0, 0.0, True)

class TestProgressionController(unittest.TestCase):
    def setUp(self):
        self.clock = FakeClock(1000.0)
        self.catalog = MagicMock()
        self.catalog.random_city.return_value = LONDON
        self.ranking_store = MagicMock()
        self.ranking_store.rank_of.return_value = 1
        self.controller = ProgressionController(self.catalog, self.ranking_store, clock=self.clock)

    def test_starts_idle(self):
        snapshot = self.controller.snapshot()
        self.assertEqual(snapshot.phase, SessionPhase.IDLE)
        self.assertFalse(snapshot.is_active)
        self.assertIsNone(snapshot.current_city)

    def test_start_game_sets_initial_state(self):
        snapshot = self.controller.start_game("  Alice ")
        self.assertEqual(snapshot.phase, SessionPhase.IN_PROGRESS)
        self.assertEqual(snapshot.player_name, "Alice")
        self.assertEqual(snapshot.current_city, LONDON)
        self.assertEqual(snapshot.cities_visited, 0)
        self.assertEqual(snapshot.total_time, 0.0)
        self.assertEqual(snapshot.tier, 1)
        self.assertEqual(snapshot.session_start_time, 1000.0)
        self.assertEqual(snapshot.current_city_start_time, 1000.0)
        self.catalog.random_city.assert_called_once_with(1)

    def test_start_game_rejects_empty_name(self):
        """Blank names never start a session"""
        for name in ("", "   ", None):
            with self.assertRaises(ValidationError):
                self.controller.start_game(name)
        self.assertEqual(self.controller.phase, SessionPhase.IDLE)
        self.catalog.random_city.assert_not_called()

    def test_start_game_without_cities_fails(self):
        self.catalog.random_city.return_value = None
        with self.assertRaises(ValidationError):
            self.controller.start_game("Alice")
        self.assertEqual(self.controller.phase, SessionPhase.IDLE)

    def test_first_city_can_be_chosen(self):
        self.controller.start_game("Alice", first_city=PARIS)
        self.assertEqual(self.controller.snapshot().current_city, PARIS)
        self.catalog.random_city.assert_not_called()

    def test_full_session_records_once(self):
        """Twenty 10-second legs finish the game with a 200-second total"""
        self.clock.now = 0.0
        self.controller.start_game("Alice")

        outcomes = [self.controller.report_arrival(now=10.0 * leg) for leg in range(1, 21)]

        for outcome in outcomes[:-1]:
            self.assertEqual(outcome.effect, ArrivalEffect.CITY_REACHED)
            self.assertAlmostEqual(outcome.leg_time, 10.0)
            self.assertEqual(outcome.next_city, LONDON)

        final = outcomes[-1]
        self.assertTrue(final.completed)
        self.assertEqual(final.cities_visited, 20)
        self.assertAlmostEqual(final.total_time, 200.0)
        self.assertEqual(final.rank, 1)
        self.assertEqual(final.message, "Game Complete!")
        self.assertIsNone(final.next_city)

        self.ranking_store.record_session.assert_called_once_with("Alice", 200.0)
        snapshot = self.controller.snapshot()
        self.assertEqual(snapshot.phase, SessionPhase.COMPLETED)
        self.assertFalse(snapshot.is_active)

    def test_tier_rises_every_two_cities(self):
        """Targets are drawn at tier min(10, visited // 2 + 1)"""
        self.controller.start_game("Alice")
        for _ in range(20):
            self.controller.report_arrival()

        tiers = [c.args[0] for c in self.catalog.random_city.call_args_list]
        expected = [1] + [min(10, visited // 2 + 1) for visited in range(1, 20)]
        self.assertEqual(tiers, expected)
        self.assertEqual(self.controller.current_tier, 10)

    def test_total_is_sum_of_leg_times(self):
        self.clock.now = 0.0
        self.controller.start_game("Alice")
        legs = [3.5, 12.0, 0.25]
        now = 0.0
        for leg in legs:
            now += leg
            self.controller.report_arrival(now=now)
        self.assertAlmostEqual(self.controller.snapshot().total_time, sum(legs))
        self.assertAlmostEqual(self.controller.snapshot().last_leg_time, 0.25)

    def test_arrival_while_idle_is_ignored(self):
        outcome = self.controller.arrived_at_current_city()
        self.assertEqual(outcome.effect, ArrivalEffect.IGNORED)
        self.assertEqual(self.controller.phase, SessionPhase.IDLE)
        self.ranking_store.record_session.assert_not_called()

    def test_second_arrival_before_advance_is_ignored(self):
        """A leg is never counted twice"""
        self.controller.start_game("Alice")
        self.clock.now = 1030.0
        first = self.controller.arrived_at_current_city()
        second = self.controller.arrived_at_current_city()

        self.assertEqual(first.effect, ArrivalEffect.CITY_REACHED)
        self.assertEqual(second.effect, ArrivalEffect.IGNORED)
        self.assertEqual(self.controller.snapshot().cities_visited, 1)
        self.assertAlmostEqual(self.controller.snapshot().total_time, 30.0)

    def test_advance_without_arrival_is_ignored(self):
        self.assertIsNone(self.controller.advance_to_city())
        self.controller.start_game("Alice")
        self.assertIsNone(self.controller.advance_to_city(PARIS))
        self.assertEqual(self.controller.snapshot().current_city, LONDON)

    def test_advance_without_candidates_fails(self):
        self.controller.start_game("Alice")
        self.controller.arrived_at_current_city()
        self.catalog.random_city.return_value = None
        with self.assertRaises(ValidationError):
            self.controller.advance_to_city()

    def test_arrival_after_completion_is_ignored(self):
        self.controller.start_game("Alice")
        for _ in range(20):
            self.controller.report_arrival()
        outcome = self.controller.arrived_at_current_city()
        self.assertEqual(outcome.effect, ArrivalEffect.IGNORED)
        self.assertEqual(self.controller.snapshot().cities_visited, 20)
        self.ranking_store.record_session.assert_called_once()

    def test_restart_abandons_running_session(self):
        """The abandoned session is never recorded"""
        self.controller.start_game("Alice")
        self.controller.report_arrival()
        snapshot = self.controller.start_game("Bob")
        self.assertEqual(snapshot.player_name, "Bob")
        self.assertEqual(snapshot.cities_visited, 0)
        self.ranking_store.record_session.assert_not_called()

    def test_clock_going_backwards_counts_zero(self):
        self.controller.start_game("Alice")
        outcome = self.controller.arrived_at_current_city(now=500.0)
        self.assertEqual(outcome.leg_time, 0.0)

    def test_rankings_sorted_delegates(self):
        self.ranking_store.rankings_sorted.return_value = ["sentinel"]
        self.assertEqual(self.controller.rankings_sorted(), ["sentinel"])

class TestPlaneArrival(unittest.TestCase):
    def setUp(self):
        self.catalog = MagicMock()
        self.catalog.random_city.return_value = NORTH
        self.controller = ProgressionController(self.catalog, MagicMock(), clock=FakeClock())
        self.controller.start_game("Alice")

    def test_moving_into_radius_fires_arrival(self):
        """Two 5-degree steps north from the origin reach (10, 0)"""
        position, outcome = self.controller.move_plane(d_lat=5)
        self.assertEqual(position, Coordinate(5.0, 0.0))
        self.assertIsNone(outcome)

        position, outcome = self.controller.move_plane(d_lat=5)
        self.assertEqual(outcome.effect, ArrivalEffect.CITY_REACHED)
        self.assertEqual(outcome.reached_city, NORTH)

    def test_arrival_fires_once_per_leg(self):
        self.controller.move_plane(d_lat=10)
        _, outcome = self.controller.move_plane(d_lon=0.5)
        self.assertIsNone(outcome)
        self.assertEqual(self.controller.snapshot().cities_visited, 1)

    def test_advance_places_plane_at_reached_city(self):
        self.controller.move_plane(d_lat=9)
        self.catalog.random_city.return_value = LONDON
        self.assertEqual(self.controller.advance_to_city(), LONDON)
        self.assertEqual(self.controller.plane_position, NORTH.coordinate)

    def test_repeat_target_fires_on_next_move(self):
        """Drawn again, the city just reached arrives on the next move, even a zero step"""
        self.controller.move_plane(d_lat=10)
        self.assertEqual(self.controller.advance_to_city(), NORTH)
        _, outcome = self.controller.move_plane(0.0, 0.0)
        self.assertEqual(outcome.effect, ArrivalEffect.CITY_REACHED)
        self.assertEqual(self.controller.snapshot().cities_visited, 2)

    def test_start_resets_plane(self):
        self.controller.move_plane(d_lat=-20, d_lon=30)
        self.controller.start_game("Bob")
        self.assertEqual(self.controller.plane_position, Coordinate(0.0, 0.0))

class TestElapsed(unittest.TestCase):
    def test_elapsed(self):
        self.assertEqual(elapsed(100.0, None), 0.0)
        self.assertEqual(elapsed(100.0, 40.0), 60.0)
        self.assertEqual(elapsed(40.0, 100.0), 0.0)

if __name__ == '__main__':
    unittest.main()
