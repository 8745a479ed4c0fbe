# Area: Game
"""
rummy_score._game.state — Score card state
==========================================

The aggregate of all players, the round counter, and the in-progress
flag. Every player always holds exactly ``round_count`` entries; the
mutating operations below are the only place that invariant is kept.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List
import logging

from .enums import GameEvent, GameStatus
from .state_machine import GameStateMachine
from ..errors import EmptyPlayerNameError, OutOfRangeError
from ..models import PlayerRecord, ScoreEntry

logger = logging.getLogger("rummy_score.game.state")


@dataclass
class GameState:
    """
    Players (in insertion order), round count, and game lifecycle.

    Validation happens before any mutation, so a failed operation
    leaves the state untouched.
    """
    players: List[PlayerRecord] = field(default_factory=list)
    round_count: int = 0
    machine: GameStateMachine = field(default_factory=GameStateMachine)

    @classmethod
    def restored(
        cls, players: List[PlayerRecord], round_count: int, in_progress: bool
    ) -> "GameState":
        """Rebuild a state from a persisted snapshot."""
        status = GameStatus.IN_PROGRESS if in_progress else GameStatus.NOT_STARTED
        return cls(
            players=list(players),
            round_count=round_count,
            machine=GameStateMachine(status),
        )

    @property
    def in_progress(self) -> bool:
        return self.machine.in_progress

    @property
    def status(self) -> GameStatus:
        return self.machine.current_state

    # ── Operations ───────────────────────────────────────────

    def start_new_game(self) -> None:
        self.machine.transition(GameEvent.START_NEW_GAME)
        self.players = []
        self.round_count = 0
        logger.info("New game started")

    def add_player(self, name: str) -> PlayerRecord:
        """
        Append a player pre-filled with one Zero entry per elapsed round.

        Raises:
            InvalidTransitionError: If no game is in progress
            EmptyPlayerNameError: If the name is empty
        """
        self.machine.ensure(GameEvent.ADD_PLAYER)
        if not name or not name.strip():
            raise EmptyPlayerNameError()
        player = PlayerRecord.create(name, self.round_count)
        self.machine.transition(GameEvent.ADD_PLAYER)
        self.players.append(player)
        logger.info(f"Player added: {name} ({len(player.scores)} rounds pre-filled)")
        return player

    def add_round(self) -> int:
        """Append a Zero entry to every player and return the new round count."""
        self.machine.transition(GameEvent.ADD_ROUND)
        for player in self.players:
            player.append_round()
        self.round_count += 1
        logger.info(f"Round {self.round_count} added")
        return self.round_count

    def set_player_entry(
        self, player_index: int, round_index: int, entry: ScoreEntry
    ) -> None:
        """
        Replace one player's entry for one round (both indices 0-based).

        Raises:
            InvalidTransitionError: If no game is in progress
            OutOfRangeError: If either index is invalid
        """
        self.machine.ensure(GameEvent.SET_ENTRY)
        player = self.get_player(player_index)
        if not 0 <= round_index < self.round_count:
            raise OutOfRangeError("round", round_index, self.round_count)
        player.set_entry(round_index, entry)
        self.machine.transition(GameEvent.SET_ENTRY)
        logger.debug(
            f"Entry set: {player.name} round {round_index + 1} = {entry.export_token()}"
        )

    def end_game(self) -> None:
        self.machine.transition(GameEvent.END_GAME)
        self.players = []
        self.round_count = 0
        logger.info("Game ended, score card cleared")

    # ── Read helpers ─────────────────────────────────────────

    def get_player(self, player_index: int) -> PlayerRecord:
        if not 0 <= player_index < len(self.players):
            raise OutOfRangeError("player", player_index, len(self.players))
        return self.players[player_index]
