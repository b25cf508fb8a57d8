"""
session - Game session lifecycle and progression
"""

from .core import ProgressionController, elapsed
from .data_models import GameSession, SessionSnapshot, SessionPhase, ArrivalOutcome, ArrivalEffect

__all__ = [
    'ProgressionController',
    'elapsed',
    'GameSession',
    'SessionSnapshot',
    'SessionPhase',
    'ArrivalOutcome',
    'ArrivalEffect'
]
