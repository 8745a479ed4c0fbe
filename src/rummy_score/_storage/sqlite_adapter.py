# Area: Storage
"""
rummy_score._storage.sqlite_adapter — SQLite persistence
========================================================

Persists the score card to a local SQLite file through
StateRepository. All keys are written in one transaction.
"""

import logging
import sqlite3
from typing import Optional

from .._game.state import GameState
from ..errors import PersistenceError
from ..rule_config import RuleConfiguration
from .adapter import PersistenceAdapter, Snapshot
from .database import DEFAULT_DB_PATH, init_database
from .repo_state import StateRepository
from .snapshot import decode_snapshot, encode_snapshot

logger = logging.getLogger("rummy_score.storage.sqlite")


class SqlitePersistenceAdapter(PersistenceAdapter):
    """
    Persistence adapter backed by a SQLite database file.

    The schema is created on first use.
    """

    def __init__(self, db_path: str = DEFAULT_DB_PATH):
        self.db_path = db_path
        self.repo = StateRepository(db_path)
        self._initialized = False

    def _ensure_schema(self) -> None:
        if not self._initialized:
            init_database(self.db_path)
            self._initialized = True

    def save(self, state: GameState, config: RuleConfiguration) -> None:
        try:
            self._ensure_schema()
            self.repo.put_many(encode_snapshot(state, config))
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError("save", self.db_path, e) from e
        logger.debug(
            f"Saved {len(state.players)} players, {state.round_count} rounds to {self.db_path}"
        )

    def load(self) -> Optional[Snapshot]:
        try:
            self._ensure_schema()
            values = self.repo.get_all()
        except (sqlite3.Error, OSError) as e:
            raise PersistenceError("load", self.db_path, e) from e
        if not values:
            logger.info(f"No saved state in {self.db_path}")
            return None
        logger.info(f"Loaded saved state from {self.db_path}")
        return decode_snapshot(values)

