# worldnav/catalog/sample_data.py
"""
The cities the game ships with, seeded into an empty city database.
"""
import json
from typing import List, Dict, Any

# (city, country, continent, longitude, latitude, is_primary)
SAMPLE_CITIES = [
    ("New York", "USA", "North America", -74.006, 40.7128, True),
    ("London", "UK", "Europe", -0.1276, 51.5074, True),
    ("Tokyo", "Japan", "Asia", 139.6917, 35.6762, True),
    ("Paris", "France", "Europe", 2.3522, 48.8566, True),
    ("Sydney", "Australia", "Oceania", 151.2093, -33.8688, True),
    ("Cairo", "Egypt", "Africa", 31.2357, 30.0444, True),
    ("Rio de Janeiro", "Brazil", "South America", -43.1729, -22.9068, True),
    ("Mumbai", "India", "Asia", 72.8777, 19.0760, True),
    ("Barcelona", "Spain", "Europe", 2.1734, 41.3851, False),
    ("Amsterdam", "Netherlands", "Europe", 4.9041, 52.3676, False),
    ("Bangkok", "Thailand", "Asia", 100.5018, 13.7563, False),
    ("Dubai", "UAE", "Asia", 55.2708, 25.2048, False),
    ("Toronto", "Canada", "North America", -79.3832, 43.6532, False),
    ("Mexico City", "Mexico", "North America", -99.1332, 19.4326, True),
    ("Buenos Aires", "Argentina", "South America", -58.3816, -34.6037, True),
    ("Moscow", "Russia", "Europe", 37.6173, 55.7558, True),
    ("Singapore", "Singapore", "Asia", 103.8198, 1.3521, False),
    ("Cape Town", "South Africa", "Africa", 18.4241, -33.9249, False),
    ("Istanbul", "Turkey", "Asia", 28.9784, 41.0082, False),
    ("Seoul", "South Korea", "Asia", 126.9780, 37.5665, False),
    ("Melbourne", "Australia", "Oceania", 144.9631, -37.8136, False),
    ("Lima", "Peru", "South America", -77.0428, -12.0464, False),
    ("Lagos", "Nigeria", "Africa", 3.3792, 6.5244, False),
    ("Jakarta", "Indonesia", "Asia", 106.8456, -6.2088, False),
    ("Manila", "Philippines", "Asia", 120.9842, 14.5995, False),
]

def point_geojson(lon: float, lat: float) -> str:
    """GeoJSON Point text in the [lon, lat] order the city table stores."""
    return json.dumps({"type": "Point", "coordinates": [lon, lat]})

def sample_rows() -> List[Dict[str, Any]]:
    return [
        {
            "city": name,
            "country": country,
            "continent": continent,
            "gps_location": point_geojson(lon, lat),
            "is_primary": is_primary
        }
        for name, country, continent, lon, lat, is_primary in SAMPLE_CITIES
    ]
