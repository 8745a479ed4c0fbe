# Area: Storage Tests
"""Tests for snapshot encoding and tolerant decoding."""

import json

from rummy_score._game.state import GameState
from rummy_score._storage.snapshot import (
    ALL_KEYS,
    decode_snapshot,
    encode_snapshot,
)
from rummy_score.models import PlayerRecord, ScoreEntry
from rummy_score.rule_config import RuleConfiguration
from rummy_score.rules import ScoreRule


def _populated_state():
    state = GameState()
    state.start_new_game()
    state.add_player("A")
    state.add_player("B")
    for _ in range(3):
        state.add_round()
    state.set_player_entry(0, 1, ScoreEntry(ScoreRule.DROP))
    state.set_player_entry(0, 2, ScoreEntry.custom(17))
    state.set_player_entry(1, 1, ScoreEntry(ScoreRule.GAME))
    state.set_player_entry(1, 2, ScoreEntry(ScoreRule.FULL_COUNT))
    return state


class TestEncode:
    """Tests for encode_snapshot."""

    def test_writes_all_keys(self):
        values = encode_snapshot(GameState(), RuleConfiguration())
        assert set(values) == set(ALL_KEYS)

    def test_player_layout(self):
        values = encode_snapshot(_populated_state(), RuleConfiguration())
        players = json.loads(values["players"])
        assert [p["name"] for p in players] == ["A", "B"]
        assert players[0]["scores"][1] == {"scoreOption": "Drop", "customValue": None}
        assert players[0]["scores"][2] == {"scoreOption": "Custom", "customValue": 17}
        assert players[1]["scores"][2]["scoreOption"] == "Full Count"

    def test_scalar_values(self):
        config = RuleConfiguration(drop_value=20, middle_drop_value=35, full_count_value=75)
        values = encode_snapshot(_populated_state(), config)
        assert values["roundCount"] == "3"
        assert values["gameInProgress"] == "true"
        assert values["dropValue"] == "20"
        assert values["middleDropValue"] == "35"
        assert values["fullCountValue"] == "75"


class TestRoundTrip:
    """decode(encode(x)) reproduces x."""

    def test_populated_state(self):
        state = _populated_state()
        config = RuleConfiguration(drop_value=20, middle_drop_value=35, full_count_value=75)

        loaded_state, loaded_config = decode_snapshot(encode_snapshot(state, config))

        assert loaded_state.players == state.players
        assert loaded_state.round_count == 3
        assert loaded_state.in_progress is True
        assert loaded_config == config

    def test_default_state(self):
        loaded_state, loaded_config = decode_snapshot(
            encode_snapshot(GameState(), RuleConfiguration())
        )
        assert loaded_state.players == []
        assert loaded_state.round_count == 0
        assert loaded_state.in_progress is False
        assert loaded_config == RuleConfiguration()

    def test_ids_survive(self):
        state = _populated_state()
        loaded_state, _ = decode_snapshot(encode_snapshot(state, RuleConfiguration()))
        assert [p.id for p in loaded_state.players] == [p.id for p in state.players]


class TestTolerantDecode:
    """Absent or malformed keys fall back to defaults."""

    def test_empty_mapping(self):
        state, config = decode_snapshot({})
        assert state.players == []
        assert state.round_count == 0
        assert state.in_progress is False
        assert config == RuleConfiguration()

    def test_malformed_players(self):
        state, _ = decode_snapshot({"players": "{not json", "roundCount": "0"})
        assert state.players == []

    def test_unknown_rule_tag_rejects_players(self):
        raw = json.dumps([{"id": "x", "name": "A", "scores": [{"scoreOption": "Bonus"}]}])
        state, _ = decode_snapshot({"players": raw, "roundCount": "1"})
        assert state.players == []

    def test_malformed_scalars(self):
        values = {
            "roundCount": '"many"',
            "gameInProgress": "[]",
            "dropValue": "2.5",
            "middleDropValue": "null",
            "fullCountValue": "oops",
        }
        state, config = decode_snapshot(values)
        assert state.round_count == 0
        assert state.in_progress is False
        assert config == RuleConfiguration()

    def test_one_bad_key_keeps_the_rest(self):
        values = encode_snapshot(_populated_state(), RuleConfiguration(drop_value=5))
        values["fullCountValue"] = "oops"
        state, config = decode_snapshot(values)
        assert len(state.players) == 2
        assert config.drop_value == 5
        assert config.full_count_value == 80

    def test_member_names_accepted(self):
        raw = json.dumps([{
            "id": "p1", "name": "A",
            "scores": [{"scoreOption": "MIDDLE_DROP"}, {"rule": "CUSTOM", "custom_value": 4}],
        }])
        state, _ = decode_snapshot({"players": raw, "roundCount": "2"})
        assert state.players[0].scores == [
            ScoreEntry(ScoreRule.MIDDLE_DROP, None),
            ScoreEntry(ScoreRule.CUSTOM, 4),
        ]

    def test_missing_player_id_is_generated(self):
        raw = json.dumps([{"name": "A", "scores": []}])
        state, _ = decode_snapshot({"players": raw})
        assert state.players[0].id

    def test_custom_without_value_loads_as_zero_points(self):
        raw = json.dumps([{"id": "p", "name": "A", "scores": [{"scoreOption": "Custom"}]}])
        state, config = decode_snapshot({"players": raw, "roundCount": "1"})
        assert state.players[0].total_score(config) == 0

    def test_short_players_are_padded(self):
        raw = json.dumps([{"id": "p", "name": "A", "scores": [{"scoreOption": "Drop"}]}])
        state, _ = decode_snapshot({"players": raw, "roundCount": "3", "gameInProgress": "true"})
        assert state.players[0].scores == [
            ScoreEntry(ScoreRule.DROP), ScoreEntry.zero(), ScoreEntry.zero(),
        ]
        assert all(len(p.scores) == state.round_count for p in state.players)

    def test_long_players_are_truncated(self):
        player = PlayerRecord.create("A", 4)
        state = GameState.restored([player], 4, True)
        values = encode_snapshot(state, RuleConfiguration())
        values["roundCount"] = "2"
        loaded, _ = decode_snapshot(values)
        assert len(loaded.players[0].scores) == 2

    def test_negative_round_count(self):
        state, _ = decode_snapshot({"roundCount": "-3"})
        assert state.round_count == 0

    def test_malformed_round_count_keeps_player_entries(self):
        state = _populated_state()
        values = encode_snapshot(state, RuleConfiguration())
        values["roundCount"] = '"oops"'
        loaded, config = decode_snapshot(values)
        assert loaded.round_count == 3
        assert [len(p.scores) for p in loaded.players] == [3, 3]
        assert loaded.players[0].scores[1] == ScoreEntry(ScoreRule.DROP)
        assert loaded.players[0].total_score(config) == 25 + 17

    def test_missing_round_count_uses_longest_player(self):
        raw = json.dumps([
            {"id": "a", "name": "A", "scores": [{"scoreOption": "Drop"}, {"scoreOption": "Game"}]},
            {"id": "b", "name": "B", "scores": [{"scoreOption": "Full Count"}]},
        ])
        state, _ = decode_snapshot({"players": raw, "gameInProgress": "true"})
        assert state.round_count == 2
        assert state.players[1].scores == [ScoreEntry(ScoreRule.FULL_COUNT), ScoreEntry.zero()]
