"""
rummy_score — Rummy Score Card
==============================

Tracks named players across an open-ended sequence of rounds, totals
each player's score under the Drop / Middle Drop / Full Count rules
(plus free-form custom values), persists the card between runs, and
exports it as CSV.

Quick Start:
    from rummy_score import ScoreSession, SqlitePersistenceAdapter, ScoreRule
    session = ScoreSession.open(SqlitePersistenceAdapter("rummy_score.db"))
    session.start_new_game()
    session.add_player("Asha")
    session.add_round()
    session.set_entry(0, 0, ScoreRule.DROP)
    print(session.export_csv())

Command line:
    rummy-score start
    rummy-score add-player Asha
    rummy-score show
"""

from .errors import (
    RummyScoreError,
    OutOfRangeError,
    InvalidTransitionError,
    EmptyPlayerNameError,
    PersistenceError,
    ExportError,
)
from .rules import ScoreRule, resolve, menu_label
from .rule_config import (
    RuleConfiguration,
    DEFAULT_DROP_VALUE,
    DEFAULT_MIDDLE_DROP_VALUE,
    DEFAULT_FULL_COUNT_VALUE,
)
from .models import ScoreEntry, PlayerRecord
from ._game import GameState, GameStatus
from ._game.session import ScoreSession
from ._storage import (
    PersistenceAdapter,
    InMemoryPersistenceAdapter,
    SqlitePersistenceAdapter,
)
from .export import render_csv, export_filename, write_export
from ._shared.logging_config import setup_logging

__all__ = [
    # Main classes
    "ScoreSession",
    "GameState",
    "GameStatus",
    "PlayerRecord",
    "ScoreEntry",
    "ScoreRule",
    "RuleConfiguration",
    # Persistence
    "PersistenceAdapter",
    "InMemoryPersistenceAdapter",
    "SqlitePersistenceAdapter",
    # Functions
    "resolve",
    "menu_label",
    "render_csv",
    "export_filename",
    "write_export",
    "setup_logging",
    # Constants
    "DEFAULT_DROP_VALUE",
    "DEFAULT_MIDDLE_DROP_VALUE",
    "DEFAULT_FULL_COUNT_VALUE",
    # Errors
    "RummyScoreError",
    "OutOfRangeError",
    "InvalidTransitionError",
    "EmptyPlayerNameError",
    "PersistenceError",
    "ExportError",
]
__version__ = "1.0.0"
