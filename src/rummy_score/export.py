# Area: Export
"""
rummy_score.export — Score card CSV export
==========================================

Renders the score card as comma-separated text:

    Round,<player names in insertion order>
    1,<entry token per player>
    ...
    Total,<total per player>

Entry tokens are the rule's display token ("0", "Game", "Drop",
"M-Drop", "Full Count"), or the literal value for Custom entries.
Column and row order follow player and round insertion order.
"""

import csv
import io
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Optional

from ._game.state import GameState
from .errors import ExportError
from .rule_config import RuleConfiguration

logger = logging.getLogger("rummy_score.export")

# Export timestamps use a fixed UTC-5 offset
EST = timezone(timedelta(hours=-5), "EST")
FILENAME_PREFIX = "RummyScoreCard"


def build_rows(state: GameState, config: RuleConfiguration) -> List[List[str]]:
    """Build header, one row per round, and the totals row."""
    rows = [["Round"] + [p.name for p in state.players]]
    for round_index in range(state.round_count):
        rows.append(
            [str(round_index + 1)]
            + [p.scores[round_index].export_token() for p in state.players]
        )
    rows.append(["Total"] + [str(p.total_score(config)) for p in state.players])
    return rows


def render_csv(state: GameState, config: RuleConfiguration) -> str:
    """
    Render the score card as CSV text.

    Names containing commas or quotes are quoted so columns stay aligned.

    Args:
        state: Current game state
        config: Rule values used for the totals row

    Returns:
        CSV text with "\\n" line endings
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerows(build_rows(state, config))
    return buffer.getvalue()


def export_filename(now: Optional[datetime] = None) -> str:
    """
    Timestamped export filename, e.g. RummyScoreCard_2026_10_17_09_30_00_EST.csv.

    Args:
        now: Moment to stamp (defaults to the current time)
    """
    moment = (now or datetime.now(timezone.utc)).astimezone(EST)
    return f"{FILENAME_PREFIX}_{moment.strftime('%Y_%m_%d_%H_%M_%S')}_EST.csv"


def write_export(text: str, directory: str = ".", now: Optional[datetime] = None) -> Path:
    """
    Write exported text to a timestamped UTF-8 file.

    Args:
        text: Rendered CSV text
        directory: Target directory (created if missing)
        now: Moment used for the filename

    Returns:
        Path of the written file

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(directory) / export_filename(now)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
    except OSError as e:
        raise ExportError(str(path), e) from e
    logger.info(f"Score card exported to {path}")
    return path
