# Area: Storage
"""
Storage - persistence adapters for the score card.

This package handles:
- SQLite schema and connection management
- Key-value repository
- Snapshot encoding with tolerant decoding
"""

from .adapter import PersistenceAdapter, InMemoryPersistenceAdapter
from .sqlite_adapter import SqlitePersistenceAdapter

__all__ = [
    "PersistenceAdapter",
    "InMemoryPersistenceAdapter",
    "SqlitePersistenceAdapter",
]
