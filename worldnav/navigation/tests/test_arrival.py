#!/usr/bin/env python3
# worldnav/navigation/tests/test_arrival.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from worldnav.navigation.arrival import ArrivalDetector
from worldnav.navigation.data_models import Coordinate

LONDON = Coordinate(51.5074, -0.1276)
PARIS = Coordinate(48.8566, 2.3522)

class TestArrivalDetector(unittest.TestCase):
    def setUp(self):
        self.detector = ArrivalDetector()

    def test_distance_to_self_is_zero(self):
        """A point is zero meters from itself"""
        for point in (LONDON, Coordinate(0, 0), Coordinate(-33.8688, 151.2093), Coordinate(90, 0)):
            self.assertEqual(self.detector.distance_meters(point, point), 0.0)

    def test_distance_is_symmetric(self):
        """Distance does not depend on direction"""
        pairs = [
            (LONDON, PARIS),
            (Coordinate(40.7128, -74.006), Coordinate(35.6762, 139.6917)),
            (Coordinate(-34.6037, -58.3816), Coordinate(55.7558, 37.6173))
        ]
        for a, b in pairs:
            self.assertAlmostEqual(self.detector.distance_meters(a, b), self.detector.distance_meters(b, a), places=6)

    def test_london_paris_distance(self):
        """London to Paris is roughly 344 km"""
        distance_km = self.detector.distance_meters(LONDON, PARIS) / 1000
        self.assertAlmostEqual(distance_km, 344, delta=2)

    def test_not_arrived_outside_threshold(self):
        """344 km is outside the 200 km arrival radius"""
        self.assertFalse(self.detector.has_arrived(LONDON, PARIS))

    def test_arrived_one_degree_away(self):
        """One degree of longitude on the equator (~111 km) counts as arrival"""
        distance_km = self.detector.distance_meters(Coordinate(0, 0), Coordinate(0, 1)) / 1000
        self.assertAlmostEqual(distance_km, 111.2, delta=0.5)
        self.assertTrue(self.detector.has_arrived(Coordinate(0, 0), Coordinate(0, 1)))

    def test_threshold_is_strict(self):
        """Arrival requires strictly less than the threshold"""
        self.assertEqual(ArrivalDetector.THRESHOLD_M, 200_000)
        self.assertFalse(self.detector.has_arrived(Coordinate(0, 0), Coordinate(0, 2)))

    def test_returns_builtin_float(self):
        """Distances are plain floats, not numpy scalars"""
        self.assertIs(type(self.detector.distance_meters(LONDON, PARIS)), float)

if __name__ == '__main__':
    unittest.main()
