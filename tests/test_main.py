"""Tests for the command-line interface."""

import json

import pytest
from bgmatch import __version__
from bgmatch.main import main, build_parser, build_rules


class TestParser:
    """Tests for argument parsing."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert f"bgmatch {__version__}" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage: bgmatch" in capsys.readouterr().out


class TestRulesCommand:
    """Tests for `bgmatch rules`."""

    def test_default_rules(self, capsys):
        assert main(["rules"]) == 0
        out = capsys.readouterr().out
        assert "Points: 7, Beaver: false" in out
        assert "Crawford: true, Holland: false" in out

    def test_flags(self, capsys):
        code = main([
            "rules", "--points", "5", "--beaver", "--raccoon", "--murphy", "3",
            "--jacoby", "--crawford", "--holland",
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == (
            "Points: 5, Beaver: true, Raccoon: true, Murphy: true, "
            "Murphy Limit: 3, Jacoby: true, Crawford: true, Holland: true"
        )

    def test_build_rules_from_config(self, rules_path):
        rules_path.write_text(json.dumps({"points": 9, "beaver": True}), encoding="utf-8")
        args = build_parser().parse_args(["rules", "--config", str(rules_path), "--jacoby"])
        rules = build_rules(args)
        assert rules.points == 9
        assert rules.beaver is True
        assert rules.jacoby is True

    def test_inconsistent_rules_warn(self, capsys, caplog):
        assert main(["rules", "--raccoon"]) == 0
        assert "Raccoon: true" in capsys.readouterr().out
        assert "raccoon requires beaver" in caplog.text

    def test_strict_rejects(self, capsys):
        assert main(["rules", "--raccoon", "--strict"]) == 2
        assert "raccoon requires beaver" in capsys.readouterr().err

    def test_save(self, capsys, rules_path):
        assert main(["rules", "--points", "3", "--save", str(rules_path)]) == 0
        assert "Rules saved to" in capsys.readouterr().out
        assert json.loads(rules_path.read_text(encoding="utf-8"))["points"] == 3

    def test_bad_config(self, capsys, tmp_path):
        assert main(["rules", "--config", str(tmp_path / "nope.json")]) == 2
        assert "Cannot read rules file" in capsys.readouterr().err


class TestOtherCommands:
    """Tests for board, roll and fairness."""

    def test_board(self, capsys):
        assert main(["board"]) == 0
        out = capsys.readouterr().out
        assert "Match to: 3" in out
        assert "Player to move: Player 1" in out

    def test_roll(self, capsys):
        assert main(["roll", "--count", "4"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 4
        for line in lines:
            die1, die2 = line.split()[:2]
            assert 1 <= int(die1) <= 6
            assert 1 <= int(die2) <= 6

    def test_roll_invalid_count(self, capsys):
        assert main(["roll", "--count", "0"]) == 2
        assert "count must be positive" in capsys.readouterr().err

    def test_fairness(self, capsys):
        assert main(["fairness", "--trials", "2000"]) == 0
        out = capsys.readouterr().out
        assert "Trials: 2000" in out

    def test_fairness_invalid_trials(self, capsys):
        assert main(["fairness", "--trials", "0"]) == 2
        assert "trials must be positive" in capsys.readouterr().err
