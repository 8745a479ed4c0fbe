# Area: Scoring
"""
rummy_score.rules — Named scoring rules
=======================================

The closed set of Rummy scoring categories. Each member's value is the
display token used in exports and persisted snapshots.

Resolution:
    ZERO, GAME                    -> 0
    DROP, MIDDLE_DROP, FULL_COUNT -> live value from RuleConfiguration
    CUSTOM                        -> the entry's own value (0 if missing)
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .rule_config import RuleConfiguration


class ScoreRule(Enum):
    """Scoring category of a single round entry."""
    ZERO = "0"
    GAME = "Game"
    DROP = "Drop"
    MIDDLE_DROP = "M-Drop"
    FULL_COUNT = "Full Count"
    CUSTOM = "Custom"

    @property
    def token(self) -> str:
        """Display token written to exports."""
        return self.value

    @property
    def is_configurable(self) -> bool:
        return self in CONFIGURABLE_RULES

    @classmethod
    def parse(cls, raw: str) -> "ScoreRule":
        """
        Look up a rule by token or member name.

        Accepts "M-Drop", "MIDDLE_DROP", "middle-drop" and similar
        spellings. Raises ValueError for anything else.
        """
        try:
            return cls(raw)
        except ValueError:
            pass
        key = raw.strip().upper().replace("-", "_").replace(" ", "_")
        if key in cls.__members__:
            return cls.__members__[key]
        for member in cls:
            if member.value.upper() == raw.strip().upper():
                return member
        raise ValueError(f"Unknown score rule: {raw!r}")


CONFIGURABLE_RULES = (ScoreRule.DROP, ScoreRule.MIDDLE_DROP, ScoreRule.FULL_COUNT)


def resolve(
    rule: ScoreRule,
    config: "RuleConfiguration",
    custom_value: Optional[int] = None,
) -> int:
    """
    Resolve a rule to its point value under the given configuration.

    Args:
        rule: The scoring rule
        config: Live rule configuration (read on every call)
        custom_value: The entry's own value, used only for CUSTOM

    Returns:
        Point value; CUSTOM without a value resolves to 0
    """
    if rule is ScoreRule.CUSTOM:
        return custom_value if custom_value is not None else 0
    if rule.is_configurable:
        return config.get_value(rule)
    return 0


def menu_label(rule: ScoreRule, config: "RuleConfiguration") -> str:
    """Picker label, e.g. "Drop (25)" for configurable rules."""
    if rule.is_configurable:
        return f"{rule.token} ({config.get_value(rule)})"
    return rule.token
