# Area: Scoring Tests
"""Tests for score rules and rule resolution."""

import pytest
from rummy_score.rules import ScoreRule, resolve, menu_label, CONFIGURABLE_RULES
from rummy_score.rule_config import RuleConfiguration


class TestResolve:
    """Tests for resolve()."""

    def test_zero_and_game_resolve_to_zero(self):
        config = RuleConfiguration()
        assert resolve(ScoreRule.ZERO, config) == 0
        assert resolve(ScoreRule.GAME, config) == 0

    def test_configurable_rules_use_config(self):
        config = RuleConfiguration()
        assert resolve(ScoreRule.DROP, config) == 25
        assert resolve(ScoreRule.MIDDLE_DROP, config) == 40
        assert resolve(ScoreRule.FULL_COUNT, config) == 80

    def test_custom_uses_supplied_value(self):
        assert resolve(ScoreRule.CUSTOM, RuleConfiguration(), 17) == 17

    def test_custom_without_value_is_zero(self):
        """A custom entry with no value silently counts as 0."""
        assert resolve(ScoreRule.CUSTOM, RuleConfiguration()) == 0

    def test_custom_value_ignored_for_other_rules(self):
        assert resolve(ScoreRule.DROP, RuleConfiguration(), 999) == 25
        assert resolve(ScoreRule.GAME, RuleConfiguration(), 999) == 0

    def test_reads_live_config(self):
        config = RuleConfiguration()
        config.drop_value = 10
        assert resolve(ScoreRule.DROP, config) == 10

    def test_negative_custom_value(self):
        assert resolve(ScoreRule.CUSTOM, RuleConfiguration(), -5) == -5


class TestScoreRuleParse:
    """Tests for ScoreRule.parse()."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("0", ScoreRule.ZERO),
            ("Game", ScoreRule.GAME),
            ("drop", ScoreRule.DROP),
            ("M-Drop", ScoreRule.MIDDLE_DROP),
            ("middle-drop", ScoreRule.MIDDLE_DROP),
            ("MIDDLE_DROP", ScoreRule.MIDDLE_DROP),
            ("Full Count", ScoreRule.FULL_COUNT),
            ("full-count", ScoreRule.FULL_COUNT),
            ("custom", ScoreRule.CUSTOM),
            ("zero", ScoreRule.ZERO),
        ],
    )
    def test_parse_spellings(self, raw, expected):
        assert ScoreRule.parse(raw) is expected

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            ScoreRule.parse("bonus")


class TestLabels:
    """Tests for display tokens and menu labels."""

    def test_tokens(self):
        assert [r.token for r in ScoreRule] == [
            "0", "Game", "Drop", "M-Drop", "Full Count", "Custom",
        ]

    def test_configurable_rules(self):
        assert CONFIGURABLE_RULES == (
            ScoreRule.DROP, ScoreRule.MIDDLE_DROP, ScoreRule.FULL_COUNT,
        )
        assert ScoreRule.DROP.is_configurable is True
        assert ScoreRule.CUSTOM.is_configurable is False

    def test_menu_label_shows_live_value(self):
        config = RuleConfiguration()
        assert menu_label(ScoreRule.DROP, config) == "Drop (25)"
        config.middle_drop_value = 45
        assert menu_label(ScoreRule.MIDDLE_DROP, config) == "M-Drop (45)"
        assert menu_label(ScoreRule.FULL_COUNT, config) == "Full Count (80)"

    def test_menu_label_plain_for_other_rules(self):
        config = RuleConfiguration()
        assert menu_label(ScoreRule.GAME, config) == "Game"
        assert menu_label(ScoreRule.CUSTOM, config) == "Custom"
