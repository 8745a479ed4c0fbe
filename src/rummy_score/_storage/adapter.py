# Area: Storage
"""
rummy_score._storage.adapter — Persistence adapter interface
============================================================

The session calls ``save`` after every successful mutation and ``load``
once at startup. Implementations raise PersistenceError on I/O failure;
the session logs and swallows it.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional, Tuple

from .._game.state import GameState
from ..rule_config import RuleConfiguration
from .snapshot import decode_snapshot, encode_snapshot

Snapshot = Tuple[GameState, RuleConfiguration]


class PersistenceAdapter(ABC):
    """Abstract durable store for the score card and rule values."""

    @abstractmethod
    def save(self, state: GameState, config: RuleConfiguration) -> None:
        """
        Persist the full state and rule configuration.

        Raises:
            PersistenceError: If the store cannot be written
        """

    @abstractmethod
    def load(self) -> Optional[Snapshot]:
        """
        Read the last saved snapshot.

        Returns:
            (GameState, RuleConfiguration), or None if nothing was saved

        Raises:
            PersistenceError: If the store cannot be read
        """


class InMemoryPersistenceAdapter(PersistenceAdapter):
    """
    Keeps the encoded snapshot in a dict.

    Goes through the same encoding as the SQLite adapter, so a load
    returns fresh objects rather than the instances that were saved.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(values or {})
        self.save_count = 0

    def save(self, state: GameState, config: RuleConfiguration) -> None:
        self.values.update(encode_snapshot(state, config))
        self.save_count += 1

    def load(self) -> Optional[Snapshot]:
        if not self.values:
            return None
        return decode_snapshot(self.values)
