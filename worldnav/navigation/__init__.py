"""
navigation - Plane position tracking and arrival detection
"""

from .arrival import ArrivalDetector
from .data_models import Coordinate
from .plane import PlaneNavigator

__all__ = [
    'ArrivalDetector',
    'Coordinate',
    'PlaneNavigator'
]
