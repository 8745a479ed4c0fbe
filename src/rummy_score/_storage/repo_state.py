# Area: Storage
"""
rummy_score._storage.repo_state — Score State Repository
========================================================

Repository for the score_state key-value table.
"""

from typing import Dict
from .database import BaseRepository


class StateRepository(BaseRepository):
    """
    Repository for score_state table.

    Handles reading and writing JSON-encoded values by key.
    """

    def get_all(self) -> Dict[str, str]:
        """Get every stored key and value."""
        query = "SELECT key, value FROM score_state"
        rows = self._execute(query, fetch=True) or []
        return {row["key"]: row["value"] for row in rows}

    def put_many(self, values: Dict[str, str]) -> None:
        """
        Store several values in one transaction.

        Args:
            values: Mapping of key to JSON-encoded text
        """
        query = """
            INSERT OR REPLACE INTO score_state (key, value, updated_at)
            VALUES (?, ?, CURRENT_TIMESTAMP)
        """
        self._execute_batch((query, (key, value)) for key, value in values.items())

