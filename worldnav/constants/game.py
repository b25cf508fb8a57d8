# worldnav/constants/game.py

class GameConstants:
    """Fixed rules of the World Navigation Challenge."""

    # ===== SESSION =====
    CITIES_PER_SESSION = 20

    # ===== ARRIVAL =====
    ARRIVAL_THRESHOLD_M = 200_000   # 200 km, playable at 5 degree plane steps
    EARTH_RADIUS_M = 6_371_000      # Mean Earth radius

    # ===== DIFFICULTY =====
    MIN_TIER = 1
    MAX_TIER = 10
    PRIMARY_ONLY_MAX_TIER = 5       # Tiers up to this draw primary cities only
    CITIES_PER_TIER = 2             # Tier rises every 2 cities

    # ===== PLANE =====
    PLANE_STEP_DEG = 5.0
    START_POSITION = (0.0, 0.0)     # (lat, lon)

    @classmethod
    def tier_for(cls, cities_visited: int) -> int:
        """Difficulty tier for the next target after `cities_visited` arrivals."""
        return min(cls.MAX_TIER, cities_visited // cls.CITIES_PER_TIER + 1)
