# Area: Game
"""
Game lifecycle - state machine and score card state.

This package handles:
- Lifecycle states and transitions
- Player and round bookkeeping
- The session that commits and announces each mutation
"""

from .enums import GameStatus, GameEvent
from .state_machine import GameStateMachine
from .state import GameState

__all__ = [
    "GameStatus",
    "GameEvent",
    "GameStateMachine",
    "GameState",
]
