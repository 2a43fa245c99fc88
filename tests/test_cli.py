"""Tests for launch argument handling."""
from __future__ import annotations

import io
import json

import pytest

from flashcard_trainer import cli
from flashcard_trainer.config import TrainerConfig, load_config
from flashcard_trainer.storage import read_cards, write_cards
from flashcard_trainer.types import Card


class TestParser:
    def test_single_dash_flags_any_order(self):
        imp, exp, rest = cli.scan_launch_paths(["-export", "out.jsonl", "junk", "-import", "in.jsonl"])
        assert imp == "in.jsonl"
        assert exp == "out.jsonl"
        assert rest == ["junk"]

    def test_flags_optional(self):
        assert cli.scan_launch_paths([]) == (None, None, [])

    def test_short_prefixes_are_not_flags(self):
        """-i / -e are unrelated arguments, not abbreviations of -import / -export."""
        imp, exp, rest = cli.scan_launch_paths(["-i", "x", "-e"])
        assert (imp, exp) == (None, None)
        assert rest == ["-i", "x", "-e"]

    def test_trailing_flag_without_value_ignored(self):
        imp, exp, rest = cli.scan_launch_paths(["-import", "in.jsonl", "-export"])
        assert imp == "in.jsonl"
        assert exp is None
        assert rest == ["-export"]

    def test_first_occurrence_wins(self):
        imp, _, _ = cli.scan_launch_paths(["-import", "a.jsonl", "-import", "b.jsonl"])
        assert imp == "a.jsonl"


class TestMain:
    def test_import_and_export_roundtrip(self, workspace_dir, monkeypatch, capsys):
        src = workspace_dir / "in.jsonl"
        dst = workspace_dir / "out.jsonl"
        write_cards(src, [Card("a", "1", 2)])
        monkeypatch.setattr("sys.stdin", io.StringIO("add\nb\n2\nexit\n"))

        rc = cli.main(["-import", str(src), "-export", str(dst)])

        assert rc == 0
        out = capsys.readouterr().out
        assert "1 cards have been loaded." in out
        assert "Bye bye!" in out
        assert read_cards(dst) == [Card("a", "1", 2), Card("b", "2", 0)]

    def test_missing_import_file_reported(self, workspace_dir, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))

        rc = cli.main(["-import", str(workspace_dir / "missing.jsonl")])

        assert rc == 0
        assert "File not found." in capsys.readouterr().out


class TestConfig:
    def test_defaults(self):
        assert load_config(None) == TrainerConfig()

    def test_load(self, workspace_dir):
        path = workspace_dir / "cfg.json"
        path.write_text(json.dumps({"random_seed": 7, "log_level": "debug", "extra": 1}), encoding="utf-8")

        cfg = load_config(path)
        assert cfg.random_seed == 7
        assert cfg.log_level == "DEBUG"
        assert cfg.encoding == "utf-8"


class TestLaunchArgumentsIgnored:
    """Unrelated or incomplete launch arguments never stop the session."""

    def test_short_flags_do_not_import(self, workspace_dir, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))

        rc = cli.main(["-i", str(workspace_dir / "nope.jsonl"), "-e"])

        assert rc == 0
        out = capsys.readouterr().out
        assert "File not found." not in out
        assert "Bye bye!" in out

    def test_trailing_export_without_path(self, workspace_dir, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))

        assert cli.main(["-export"]) == 0
        assert "cards have been saved" not in capsys.readouterr().out
        assert list(workspace_dir.iterdir()) == []


class TestBadOptions:
    def test_unknown_log_level_is_usage_error(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))

        with pytest.raises(SystemExit) as ei:
            cli.main(["--log-level", "loud"])

        assert ei.value.code == 2
        assert "unknown log level: LOUD" in capsys.readouterr().err

    def test_missing_config_is_usage_error(self, workspace_dir, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))

        with pytest.raises(SystemExit) as ei:
            cli.main(["--config", str(workspace_dir / "missing.json")])

        assert ei.value.code == 2
        assert "cannot load config" in capsys.readouterr().err

    def test_known_log_level_accepted(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("exit\n"))
        assert cli.main(["--log-level", "debug"]) == 0
