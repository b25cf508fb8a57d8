# worldnav/exceptions.py
"""
Shared error types for the World Navigation game.

StorageError is logged and degraded by the component that owns the store,
ValidationError is raised to the caller, StateError marks a transition
requested in the wrong phase and is logged as a no-op.
"""

class WorldNavError(Exception):
    """Base exception for all game errors."""
    pass

class StorageError(WorldNavError):
    """Backing store could not be read or written."""
    def __init__(self, message="Storage failure", store=None):
        self.store = store
        super().__init__(f"{message} [Store: {store}]" if store else message)

class ValidationError(WorldNavError):
    """Caller supplied input the game cannot start or continue with."""
    pass

class StateError(WorldNavError):
    """Transition requested while the session is in the wrong phase."""
    def __init__(self, action, phase, message="Transition not allowed"):
        self.action = action
        self.phase = phase
        super().__init__(f"{message}: {action} while {phase}")
