# Area: Game
"""
rummy_score._game.session — Score keeping session
=================================================

Owns the one live RuleConfiguration and the GameState, and wires them
to the persistence adapter and to subscribers. Every successful
mutation is committed (saved) and then announced as an event.

Usage:
    session = ScoreSession.open(SqlitePersistenceAdapter("rummy.db"))
    session.start_new_game()
    session.add_player("Asha")
    session.add_round()
    session.set_entry(0, 0, ScoreRule.DROP)
    print(session.export_csv())
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .state import GameState
from ..errors import PersistenceError
from ..export import render_csv, write_export
from ..models import PlayerRecord, ScoreEntry
from ..rule_config import RuleConfiguration
from ..rules import ScoreRule
from .._shared.logging_config import log_persistence_failure
from .._storage.adapter import PersistenceAdapter

logger = logging.getLogger("rummy_score.game.session")

Listener = Callable[[str, "ScoreSession"], None]

# Event names passed to subscribers
EVENT_LOADED = "loaded"
EVENT_GAME_STARTED = "game_started"
EVENT_PLAYER_ADDED = "player_added"
EVENT_ROUND_ADDED = "round_added"
EVENT_ENTRY_CHANGED = "entry_changed"
EVENT_GAME_ENDED = "game_ended"
EVENT_RULES_CHANGED = "rules_changed"


class ScoreSession:
    """
    Application context for one score card.

    Attributes:
        adapter: Persistence adapter used for commits and the startup load
        config: The shared rule configuration
        state: The current game state
        last_save_failed: True if the most recent commit did not persist
    """

    def __init__(
        self,
        adapter: PersistenceAdapter,
        config: Optional[RuleConfiguration] = None,
    ):
        self.adapter = adapter
        self.config = config if config is not None else RuleConfiguration()
        self.state = GameState()
        self.last_save_failed = False
        self._loaded = False
        self._mutated = False
        self._listeners: List[Listener] = []

    @classmethod
    def open(cls, adapter: PersistenceAdapter) -> "ScoreSession":
        """Create a session and restore the last saved snapshot."""
        session = cls(adapter)
        session.load()
        return session

    # ── Lifecycle ────────────────────────────────────────────

    def load(self) -> bool:
        """
        Restore state from the adapter. Call once, before any operation.

        A failed or empty load leaves the defaults in place.

        Returns:
            True if a snapshot was restored

        Raises:
            RuntimeError: If called a second time or after a mutation
        """
        if self._loaded:
            raise RuntimeError("Session state has already been loaded")
        if self._mutated:
            raise RuntimeError("Cannot load after the session has been modified")
        self._loaded = True
        try:
            snapshot = self.adapter.load()
        except PersistenceError as e:
            log_persistence_failure(e)
            return False
        if snapshot is None:
            return False
        state, config = snapshot
        self.state = state
        # Keep the same instance so existing references see the values
        self.config.update_from(config)
        logger.info(
            f"Restored {len(state.players)} players, {state.round_count} rounds "
            f"(in progress: {state.in_progress})"
        )
        self._notify(EVENT_LOADED)
        return True

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ── Mutations ────────────────────────────────────────────

    def start_new_game(self) -> None:
        self.state.start_new_game()
        self._commit(EVENT_GAME_STARTED)

    def add_player(self, name: str) -> PlayerRecord:
        player = self.state.add_player(name)
        self._commit(EVENT_PLAYER_ADDED)
        return player

    def add_round(self) -> int:
        round_count = self.state.add_round()
        self._commit(EVENT_ROUND_ADDED)
        return round_count

    def set_entry(
        self,
        player_index: int,
        round_index: int,
        rule: ScoreRule,
        custom_value: Optional[int] = None,
    ) -> ScoreEntry:
        """
        Choose a rule for one player's round (indices 0-based).

        Non-custom rules drop any custom value; CUSTOM without a value
        stores 0.
        """
        if rule is ScoreRule.CUSTOM:
            entry = ScoreEntry.custom(custom_value if custom_value is not None else 0)
        else:
            entry = ScoreEntry(rule)
        self.state.set_player_entry(player_index, round_index, entry)
        self._commit(EVENT_ENTRY_CHANGED)
        return entry

    def set_custom_value(self, player_index: int, round_index: int, value: int) -> ScoreEntry:
        """Set a literal value for one round, switching it to CUSTOM."""
        return self.set_entry(player_index, round_index, ScoreRule.CUSTOM, value)

    def end_game(self) -> None:
        self.state.end_game()
        self._commit(EVENT_GAME_ENDED)

    def set_rule_value(self, rule: ScoreRule, value: int) -> None:
        """
        Change a rule's point value.

        Allowed in any state. Totals for rounds already played follow
        the new value.

        Raises:
            KeyError: If the rule has no configurable value
        """
        self.config.set_value(rule, value)
        self._commit(EVENT_RULES_CHANGED)

    # ── Read helpers ─────────────────────────────────────────

    def totals(self) -> Dict[str, int]:
        """Map of player id to current total."""
        return {p.id: p.total_score(self.config) for p in self.state.players}

    def export_csv(self) -> str:
        return render_csv(self.state, self.config)

    def export_to_file(self, directory: str = ".") -> Path:
        """
        Write the CSV export to a timestamped file.

        Raises:
            ExportError: If the file cannot be written
        """
        return write_export(self.export_csv(), directory)

    # ── Internals ────────────────────────────────────────────

    def _commit(self, event: str) -> None:
        self._mutated = True
        try:
            self.adapter.save(self.state, self.config)
            self.last_save_failed = False
            logger.debug(f"Committed after {event}")
        except PersistenceError as e:
            self.last_save_failed = True
            log_persistence_failure(e)
        self._notify(event)

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception:
                logger.exception(f"Subscriber failed on {event}")
