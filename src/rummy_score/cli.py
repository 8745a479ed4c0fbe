# Area: Shared
"""
rummy_score.cli — Command-line interface
========================================

Drives a score card stored in a local SQLite file. Each invocation
loads the saved state, applies one command, and saves it again.

Usage:
    rummy-score start
    rummy-score add-player Asha
    rummy-score add-round
    rummy-score set 1 1 drop                  # player 1, round 1
    rummy-score set 2 1 custom --value 17
    rummy-score rules --drop 20
    rummy-score show
    rummy-score export --output-dir exports/
    rummy-score end

Player and round numbers are 1-based on the command line.
"""

import argparse
import sys
from typing import List, Optional

from ._config import load_config, log_level_value, validate_config
from ._game.session import ScoreSession
from ._shared.logging_config import setup_logging
from ._storage.sqlite_adapter import SqlitePersistenceAdapter
from .errors import RummyScoreError
from .rules import CONFIGURABLE_RULES, ScoreRule, menu_label


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="rummy-score",
        description="Rummy score card - track rounds, totals and export CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  rummy-score start
  rummy-score add-player Asha
  rummy-score set 1 3 "full count"
  RUMMY_DB_PATH=friday.db rummy-score show
        """,
    )
    parser.add_argument("--config", type=str, help="Path to JSON config file")
    parser.add_argument("--db", type=str, help="SQLite database path (overrides config)")
    parser.add_argument("--log-file", type=str, help="Log file path (overrides config)")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("show", help="Print the score card")
    sub.add_parser("start", help="Start a new game")
    sub.add_parser("end", help="End the game and clear the score card")
    sub.add_parser("add-round", help="Add a round for every player")

    add_player = sub.add_parser("add-player", help="Add a player")
    add_player.add_argument("name", help="Player name")

    set_entry = sub.add_parser("set", help="Set a player's score for a round")
    set_entry.add_argument("player", type=int, help="Player number (1-based)")
    set_entry.add_argument("round", type=int, help="Round number (1-based)")
    set_entry.add_argument(
        "rule", help="One of: 0, game, drop, m-drop, full-count, custom"
    )
    set_entry.add_argument("--value", type=int, help="Points for a custom entry")

    rules = sub.add_parser("rules", help="Show or change rule point values")
    rules.add_argument("--drop", type=int, help="Points for a Drop")
    rules.add_argument("--middle-drop", type=int, help="Points for a Middle Drop")
    rules.add_argument("--full-count", type=int, help="Points for a Full Count")

    export = sub.add_parser("export", help="Export the score card as CSV")
    export.add_argument("--output-dir", type=str, help="Directory for the CSV file")
    export.add_argument(
        "--stdout", action="store_true", help="Print the CSV instead of writing a file"
    )

    return parser


def format_table(session: ScoreSession) -> str:
    """Render the score card for the terminal."""
    state, config = session.state, session.config
    if not state.in_progress:
        return "No game in progress. Run 'rummy-score start'."
    if not state.players:
        return f"Game in progress, {state.round_count} round(s), no players yet."

    header = ["Round"] + [p.name for p in state.players]
    rows = [header]
    for round_index in range(state.round_count):
        rows.append(
            [str(round_index + 1)]
            + [_cell(p.get_entry(round_index), config) for p in state.players]
        )
    rows.append(["Total"] + [str(p.total_score(config)) for p in state.players])

    widths = [max(len(row[i]) for row in rows) for i in range(len(header))]
    lines = ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]
    lines.insert(1, "  ".join("-" * w for w in widths))
    return "\n".join(lines)


def _cell(entry, config) -> str:
    if entry.rule is ScoreRule.CUSTOM:
        return entry.cell_text(config)
    if entry.rule in (ScoreRule.ZERO, ScoreRule.GAME):
        return entry.rule.token
    return f"{entry.rule.token}:{entry.cell_text(config)}"


def format_rules(session: ScoreSession) -> str:
    return "\n".join(menu_label(rule, session.config) for rule in CONFIGURABLE_RULES)


def run_command(args: argparse.Namespace, session: ScoreSession, config: dict) -> str:
    """
    Apply one command to the session.

    Returns:
        Text to print on stdout
    """
    command = args.command

    if command == "show":
        return format_table(session)

    if command == "start":
        session.start_new_game()
        return "New game started."

    if command == "end":
        session.end_game()
        return "Game ended. Score card cleared."

    if command == "add-round":
        round_count = session.add_round()
        return f"Round {round_count} added."

    if command == "add-player":
        player = session.add_player(args.name)
        return f"Added {player.name} as player {len(session.state.players)}."

    if command == "set":
        rule = ScoreRule.parse(args.rule)
        entry = session.set_entry(args.player - 1, args.round - 1, rule, args.value)
        player = session.state.players[args.player - 1]
        return (
            f"{player.name}, round {args.round}: {entry.export_token()} "
            f"(total {player.total_score(session.config)})"
        )

    if command == "rules":
        changes = (
            (ScoreRule.DROP, args.drop),
            (ScoreRule.MIDDLE_DROP, args.middle_drop),
            (ScoreRule.FULL_COUNT, args.full_count),
        )
        for rule, value in changes:
            if value is not None:
                session.set_rule_value(rule, value)
        return format_rules(session)

    if command == "export":
        if args.stdout:
            return session.export_csv().rstrip("\n")
        path = session.export_to_file(args.output_dir or config["export_dir"])
        return f"Exported to {path}"

    raise ValueError(f"Unknown command: {command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    if args.db:
        config["db_path"] = args.db
    if args.log_file:
        config["log_file"] = args.log_file

    try:
        validate_config(config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config["log_file"], log_level_value(config))

    session = ScoreSession.open(SqlitePersistenceAdapter(config["db_path"]))
    try:
        output = run_command(args, session, config)
    except (RummyScoreError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    if session.last_save_failed:
        print("Warning: changes could not be saved.", file=sys.stderr)
    return 0
