# Area: Game
"""
rummy_score._game.enums — Game State Machine Enums
==================================================

Defines the states and events for the game lifecycle state machine.
"""

from enum import Enum


class GameStatus(Enum):
    """
    States of the game lifecycle.

    State transitions:
    NOT_STARTED -> IN_PROGRESS (on START_NEW_GAME)
    IN_PROGRESS -> IN_PROGRESS (on ADD_PLAYER, ADD_ROUND, SET_ENTRY)
    IN_PROGRESS -> NOT_STARTED (on END_GAME)
    """
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"


class GameEvent(Enum):
    """
    Events that trigger state transitions.

    Events are triggered by:
    - START_NEW_GAME: user starts a fresh score card
    - ADD_PLAYER: a player joins (possibly mid-game)
    - ADD_ROUND: a new round column is opened for every player
    - SET_ENTRY: a round's score is chosen for one player
    - END_GAME: the score card is cleared
    """
    START_NEW_GAME = "START_NEW_GAME"
    ADD_PLAYER = "ADD_PLAYER"
    ADD_ROUND = "ADD_ROUND"
    SET_ENTRY = "SET_ENTRY"
    END_GAME = "END_GAME"
