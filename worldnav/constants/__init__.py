from .game import GameConstants

__all__ = ['GameConstants']
