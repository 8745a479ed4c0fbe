# Area: Scoring
"""
rummy_score.rule_config — Rule point values
===========================================

Holds the three configurable point values (drop, middle drop, full
count). One instance is owned by the session and shared by reference;
totals are always computed against its current values, so changing a
value also changes the contribution of rounds already played.
"""

import logging
from dataclasses import dataclass

from .rules import ScoreRule

logger = logging.getLogger("rummy_score.rule_config")

DEFAULT_DROP_VALUE = 25
DEFAULT_MIDDLE_DROP_VALUE = 40
DEFAULT_FULL_COUNT_VALUE = 80

# rule -> attribute name on RuleConfiguration
_RULE_FIELDS = {
    ScoreRule.DROP: "drop_value",
    ScoreRule.MIDDLE_DROP: "middle_drop_value",
    ScoreRule.FULL_COUNT: "full_count_value",
}


@dataclass
class RuleConfiguration:
    """
    Configurable point values for Drop, Middle Drop and Full Count.

    Negative values are accepted; bounds are left to the caller.

    Attributes:
        drop_value: Points for a Drop
        middle_drop_value: Points for a Middle Drop
        full_count_value: Points for a Full Count
    """

    drop_value: int = DEFAULT_DROP_VALUE
    middle_drop_value: int = DEFAULT_MIDDLE_DROP_VALUE
    full_count_value: int = DEFAULT_FULL_COUNT_VALUE

    def get_value(self, rule: ScoreRule) -> int:
        """
        Get the configured value for a rule.

        Raises:
            KeyError: If the rule has no configurable value
        """
        return getattr(self, _RULE_FIELDS[rule])

    def set_value(self, rule: ScoreRule, value: int) -> None:
        """
        Set the configured value for a rule.

        Args:
            rule: DROP, MIDDLE_DROP or FULL_COUNT
            value: New point value (any integer)

        Raises:
            KeyError: If the rule has no configurable value
        """
        field_name = _RULE_FIELDS[rule]
        old = getattr(self, field_name)
        setattr(self, field_name, int(value))
        logger.info(f"Rule {rule.token}: {old} → {value}")

    def update_from(self, other: "RuleConfiguration") -> None:
        """Copy values from another configuration, keeping this instance."""
        self.drop_value = other.drop_value
        self.middle_drop_value = other.middle_drop_value
        self.full_count_value = other.full_count_value
