# Area: Storage
"""
rummy_score._storage.snapshot — Persisted snapshot encoding
===========================================================

Encodes GameState + RuleConfiguration into the key-value layout and
decodes it back. Decoding is tolerant: each key that is absent or
malformed falls back to its default instead of failing the load. An
unusable roundCount is taken from the longest player's entries.

Keys:
    players          JSON list of players (id, name, scores)
    roundCount       JSON integer
    gameInProgress   JSON boolean
    dropValue        JSON integer
    middleDropValue  JSON integer
    fullCountValue   JSON integer
"""

from __future__ import annotations
import json
import logging
import uuid
from typing import Dict, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .._game.state import GameState
from ..models import PlayerRecord, ScoreEntry
from ..rule_config import (
    DEFAULT_DROP_VALUE,
    DEFAULT_FULL_COUNT_VALUE,
    DEFAULT_MIDDLE_DROP_VALUE,
    RuleConfiguration,
)
from ..rules import ScoreRule

logger = logging.getLogger("rummy_score.storage.snapshot")

KEY_PLAYERS = "players"
KEY_ROUND_COUNT = "roundCount"
KEY_GAME_IN_PROGRESS = "gameInProgress"
KEY_DROP_VALUE = "dropValue"
KEY_MIDDLE_DROP_VALUE = "middleDropValue"
KEY_FULL_COUNT_VALUE = "fullCountValue"

ALL_KEYS = (
    KEY_PLAYERS,
    KEY_ROUND_COUNT,
    KEY_GAME_IN_PROGRESS,
    KEY_DROP_VALUE,
    KEY_MIDDLE_DROP_VALUE,
    KEY_FULL_COUNT_VALUE,
)

T = TypeVar("T")


class ScoreEntrySnapshot(BaseModel):
    rule: ScoreRule = Field(alias="scoreOption")
    custom_value: Optional[int] = Field(default=None, alias="customValue")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("rule", mode="before")
    @classmethod
    def _parse_rule(cls, value):
        if isinstance(value, ScoreRule):
            return value
        if not isinstance(value, str):
            raise ValueError("scoreOption must be a string")
        return ScoreRule.parse(value)


class PlayerSnapshot(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str
    scores: List[ScoreEntrySnapshot] = Field(default_factory=list)


_PLAYERS_ADAPTER = TypeAdapter(List[PlayerSnapshot])
_INT_ADAPTER = TypeAdapter(int)
_BOOL_ADAPTER = TypeAdapter(bool)


def encode_snapshot(state: GameState, config: RuleConfiguration) -> Dict[str, str]:
    """Encode state and rule values as key -> JSON text."""
    players = [
        PlayerSnapshot(
            id=p.id,
            name=p.name,
            scores=[
                ScoreEntrySnapshot(rule=e.rule, custom_value=e.custom_value)
                for e in p.scores
            ],
        )
        for p in state.players
    ]
    return {
        KEY_PLAYERS: _PLAYERS_ADAPTER.dump_json(players, by_alias=True).decode("utf-8"),
        KEY_ROUND_COUNT: json.dumps(state.round_count),
        KEY_GAME_IN_PROGRESS: json.dumps(state.in_progress),
        KEY_DROP_VALUE: json.dumps(config.drop_value),
        KEY_MIDDLE_DROP_VALUE: json.dumps(config.middle_drop_value),
        KEY_FULL_COUNT_VALUE: json.dumps(config.full_count_value),
    }


def decode_snapshot(values: Dict[str, str]) -> Tuple[GameState, RuleConfiguration]:
    """
    Decode a key -> JSON text mapping.

    Args:
        values: Stored values; missing keys are allowed

    Returns:
        (GameState, RuleConfiguration) with per-key defaults applied
    """
    players = [
        PlayerRecord(
            id=p.id,
            name=p.name,
            scores=[ScoreEntry(e.rule, e.custom_value) for e in p.scores],
        )
        for p in _decode(values, KEY_PLAYERS, _PLAYERS_ADAPTER, [])
    ]
    round_count = _decode(values, KEY_ROUND_COUNT, _INT_ADAPTER, None)
    if round_count is None or round_count < 0:
        inferred = max((len(p.scores) for p in players), default=0)
        if round_count is not None or players:
            logger.warning(f"Unusable {KEY_ROUND_COUNT} {round_count}, using {inferred}")
        round_count = inferred
    in_progress = _decode(values, KEY_GAME_IN_PROGRESS, _BOOL_ADAPTER, False)

    config = RuleConfiguration(
        drop_value=_decode(values, KEY_DROP_VALUE, _INT_ADAPTER, DEFAULT_DROP_VALUE),
        middle_drop_value=_decode(
            values, KEY_MIDDLE_DROP_VALUE, _INT_ADAPTER, DEFAULT_MIDDLE_DROP_VALUE
        ),
        full_count_value=_decode(
            values, KEY_FULL_COUNT_VALUE, _INT_ADAPTER, DEFAULT_FULL_COUNT_VALUE
        ),
    )

    _align_rounds(players, round_count)
    return GameState.restored(players, round_count, in_progress), config


def _decode(
    values: Dict[str, str], key: str, adapter: TypeAdapter, default: Optional[T]
) -> Optional[T]:
    raw = values.get(key)
    if raw is None:
        return default
    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        logger.warning(f"Malformed {key} in saved state, using default: {e.error_count()} error(s)")
        return default


def _align_rounds(players: List[PlayerRecord], round_count: int) -> None:
    """Pad or truncate each player's entries to round_count."""
    for player in players:
        count = len(player.scores)
        if count == round_count:
            continue
        logger.warning(
            f"Player {player.name} has {count} entries for {round_count} rounds, aligning"
        )
        if count < round_count:
            player.scores.extend(ScoreEntry.zero() for _ in range(round_count - count))
        else:
            del player.scores[round_count:]
