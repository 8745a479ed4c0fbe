# Area: Game
"""
rummy_score._game.state_machine — Game State Machine
====================================================

Tracks whether a game is in progress and validates each operation
against the current state before GameState applies it.
"""

import logging
from .enums import GameStatus, GameEvent
from ..errors import InvalidTransitionError

logger = logging.getLogger("rummy_score.game.state_machine")


# Valid state transitions: {current_state: {event: next_state}}
TRANSITIONS = {
    GameStatus.NOT_STARTED: {
        GameEvent.START_NEW_GAME: GameStatus.IN_PROGRESS,
    },
    GameStatus.IN_PROGRESS: {
        GameEvent.ADD_PLAYER: GameStatus.IN_PROGRESS,
        GameEvent.ADD_ROUND: GameStatus.IN_PROGRESS,
        GameEvent.SET_ENTRY: GameStatus.IN_PROGRESS,
        GameEvent.END_GAME: GameStatus.NOT_STARTED,
    },
}


class GameStateMachine:
    """
    State machine for the game lifecycle.

    Attributes:
        current_state: The current state of the state machine
    """

    def __init__(self, initial: GameStatus = GameStatus.NOT_STARTED):
        """Initialize state machine, NOT_STARTED unless restoring."""
        self.current_state = initial

    @property
    def in_progress(self) -> bool:
        return self.current_state == GameStatus.IN_PROGRESS

    def can_transition(self, event: GameEvent) -> bool:
        """
        Check if a transition is valid from current state.

        Args:
            event: The event to check

        Returns:
            True if the transition is valid, False otherwise
        """
        valid_transitions = TRANSITIONS.get(self.current_state, {})
        return event in valid_transitions

    def ensure(self, event: GameEvent) -> None:
        """
        Check a transition without executing it.

        Raises:
            InvalidTransitionError: If the event is not valid now
        """
        if not self.can_transition(event):
            raise InvalidTransitionError(event.value, self.current_state.value)

    def transition(self, event: GameEvent) -> GameStatus:
        """
        Execute a state transition.

        Args:
            event: The event triggering the transition

        Returns:
            The new state after transition

        Raises:
            InvalidTransitionError: If the transition is not valid
        """
        self.ensure(event)
        next_state = TRANSITIONS[self.current_state][event]
        if next_state != self.current_state:
            logger.debug(
                f"Transition: {self.current_state.value} → {next_state.value} ({event.value})"
            )
        self.current_state = next_state
        return next_state
