# Area: Shared Tests
"""End-to-end tests for the command-line interface."""

import logging

import pytest
from rummy_score.cli import build_parser, main


@pytest.fixture(autouse=True)
def restore_package_logger():
    """main() reconfigures the package logger; put it back afterwards."""
    pkg_logger = logging.getLogger("rummy_score")
    handlers, level, propagate = list(pkg_logger.handlers), pkg_logger.level, pkg_logger.propagate
    yield
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        pkg_logger.addHandler(handler)
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate


@pytest.fixture
def run(tmp_path, capsys):
    """Run the CLI against a temporary database; return (code, stdout, stderr)."""
    db = str(tmp_path / "cli.db")
    log = str(tmp_path / "cli.log")

    def _run(*argv):
        code = main(["--db", db, "--log-file", log, *argv])
        out, err = capsys.readouterr()
        return code, out, err

    return _run


class TestParser:
    """Tests for build_parser()."""

    def test_set_arguments(self):
        args = build_parser().parse_args(["set", "2", "3", "custom", "--value", "-5"])
        assert (args.player, args.round, args.rule, args.value) == (2, 3, "custom", -5)

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestCommands:
    """Commands persist across invocations."""

    def test_show_without_game(self, run):
        code, out, _ = run("show")
        assert code == 0
        assert "No game in progress" in out

    def test_full_game(self, run):
        assert run("start")[0] == 0
        assert run("add-player", "A")[0] == 0
        assert run("add-player", "B")[0] == 0
        for _ in range(3):
            assert run("add-round")[0] == 0
        run("set", "1", "2", "drop")
        run("set", "2", "2", "game")
        run("set", "1", "3", "custom", "--value", "17")
        run("set", "2", "3", "full count")

        code, out, _ = run("export", "--stdout")
        assert code == 0
        assert out == (
            "Round,A,B\n"
            "1,0,0\n"
            "2,Drop,Game\n"
            "3,17,Full Count\n"
            "Total,42,80\n"
        )

    def test_show_table(self, run):
        run("start")
        run("add-player", "Asha")
        run("add-round")
        run("set", "1", "1", "m-drop")
        code, out, _ = run("show")
        assert code == 0
        lines = out.splitlines()
        assert lines[0].split() == ["Round", "Asha"]
        assert lines[2].split() == ["1", "M-Drop:40"]
        assert lines[3].split() == ["Total", "40"]

    def test_set_reports_total(self, run):
        run("start")
        run("add-player", "A")
        run("add-round")
        _, out, _ = run("set", "1", "1", "full-count")
        assert out.strip() == "A, round 1: Full Count (total 80)"

    def test_rules_change_is_retroactive(self, run):
        run("start")
        run("add-player", "A")
        run("add-round")
        run("set", "1", "1", "drop")
        code, out, _ = run("rules", "--drop", "30")
        assert code == 0
        assert out.splitlines() == ["Drop (30)", "M-Drop (40)", "Full Count (80)"]
        _, csv_out, _ = run("export", "--stdout")
        assert csv_out.splitlines()[-1] == "Total,30"

    def test_rules_survive_end_game(self, run):
        run("rules", "--full-count", "100")
        run("start")
        run("end")
        _, out, _ = run("rules")
        assert "Full Count (100)" in out

    def test_end_clears_card(self, run):
        run("start")
        run("add-player", "A")
        code, out, _ = run("end")
        assert code == 0
        _, out, _ = run("show")
        assert "No game in progress" in out

    def test_export_file(self, run, tmp_path):
        run("start")
        run("add-player", "A")
        code, out, _ = run("export", "--output-dir", str(tmp_path / "exports"))
        assert code == 0
        files = list((tmp_path / "exports").glob("RummyScoreCard_*_EST.csv"))
        assert len(files) == 1
        assert files[0].read_text(encoding="utf-8") == "Round,A\nTotal,0\n"


class TestErrors:
    """Errors print to stderr and exit with 1."""

    def test_add_player_before_start(self, run):
        code, _, err = run("add-player", "A")
        assert code == 1
        assert "Invalid transition" in err

    def test_round_out_of_range(self, run):
        run("start")
        run("add-player", "A")
        code, _, err = run("set", "1", "1", "drop")
        assert code == 1
        assert "round index 0 out of range" in err

    def test_unknown_rule(self, run):
        run("start")
        run("add-player", "A")
        run("add-round")
        code, _, err = run("set", "1", "1", "bonus")
        assert code == 1
        assert "Unknown score rule" in err

    def test_empty_name(self, run):
        run("start")
        code, _, err = run("add-player", "")
        assert code == 1
        assert "must not be empty" in err

    def test_start_twice(self, run):
        run("start")
        code, _, _ = run("start")
        assert code == 1
