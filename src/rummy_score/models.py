# Area: Scoring
"""
rummy_score.models — Score entry and player record dataclasses
==============================================================

A PlayerRecord holds one ScoreEntry per elapsed round, indexed
positionally (entry i is round i+1). Totals are recomputed from the
live RuleConfiguration on every call and never cached.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import OutOfRangeError
from .rule_config import RuleConfiguration
from .rules import ScoreRule, resolve


@dataclass
class ScoreEntry:
    """
    One round's score for one player.

    Attributes:
        rule: Scoring rule for the round
        custom_value: Literal points; meaningful only when rule is CUSTOM
    """

    rule: ScoreRule = ScoreRule.ZERO
    custom_value: Optional[int] = None

    @classmethod
    def zero(cls) -> "ScoreEntry":
        """Entry used to fill a newly added round."""
        return cls(ScoreRule.ZERO, 0)

    @classmethod
    def custom(cls, value: int) -> "ScoreEntry":
        return cls(ScoreRule.CUSTOM, value)

    def points(self, config: RuleConfiguration) -> int:
        """Point value of this entry under the given configuration."""
        if self.rule is ScoreRule.CUSTOM:
            return resolve(self.rule, config, self.custom_value)
        return resolve(self.rule, config)

    def export_token(self) -> str:
        """Custom value for CUSTOM entries, the rule token otherwise."""
        if self.rule is ScoreRule.CUSTOM:
            return str(self.custom_value if self.custom_value is not None else 0)
        return self.rule.token

    def cell_text(self, config: RuleConfiguration) -> str:
        return str(self.points(config))


@dataclass
class PlayerRecord:
    """
    A player's identity, name, and per-round score entries.

    Attributes:
        name: Display name
        scores: One entry per elapsed round
        id: Stable unique identifier, never reused
    """

    name: str
    scores: List[ScoreEntry] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @classmethod
    def create(cls, name: str, round_count: int) -> "PlayerRecord":
        """
        Create a player aligned with the rounds already played.

        Args:
            name: Display name
            round_count: Number of Zero entries to pre-populate
        """
        return cls(name=name, scores=[ScoreEntry.zero() for _ in range(round_count)])

    def total_score(self, config: RuleConfiguration) -> int:
        return sum(entry.points(config) for entry in self.scores)

    def get_entry(self, round_index: int) -> ScoreEntry:
        self._check_round(round_index)
        return self.scores[round_index]

    def set_entry(self, round_index: int, entry: ScoreEntry) -> None:
        """
        Replace the entry at a 0-based round index.

        Raises:
            OutOfRangeError: If round_index is not an elapsed round
        """
        self._check_round(round_index)
        self.scores[round_index] = entry

    def append_round(self) -> None:
        self.scores.append(ScoreEntry.zero())

    def _check_round(self, round_index: int) -> None:
        if not 0 <= round_index < len(self.scores):
            raise OutOfRangeError("round", round_index, len(self.scores))
