"""Tests for the CLI entry point and init command."""

from __future__ import annotations

import io
from argparse import Namespace

import pytest
import yaml

from src.commands.init import DEFAULT_ALIASES, run_init_command, write_config_files
from src.core import config as config_module
from src.core.config import Config
from src.core.router import Router
from src.main import cli, run_commands


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv(config_module.CONFIG_DIR_ENV, raising=False)
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_DIR", tmp_path / "missing-default")


class TestRunCommands:
    """Tests for the REPL loop body."""

    def test_prints_feedback_and_errors(self):
        out = io.StringIO()
        lines = [
            "addf n/Court 1 l/Hall t/10:00 c/4",
            "",
            "addf n/Court 2 l/Hall t/25:00 c/4",
            "deletef 9",
            "bogus",
        ]
        finished = run_commands(Router(Config()), lines, out)
        output = out.getvalue().splitlines()
        print("\n OUTPUT:\n" + out.getvalue())

        assert finished is False
        assert output[0].startswith("New facility added: Court 1")
        assert output[1].startswith("Time should be in the 24-hour HH:MM format")
        assert output[2] == "The facility index provided is invalid"
        assert output[3] == "Unknown command"

    def test_stops_at_exit(self):
        out = io.StringIO()
        router = Router(Config())
        finished = run_commands(router, ["exit", "addf n/Court 1 l/Hall t/10:00 c/4"], out)
        assert finished is True
        assert router.book.facilities == ()

    def test_help_prints_command_list(self):
        out = io.StringIO()
        run_commands(Router(Config()), ["help"], out)
        assert "Available commands:" in out.getvalue()


class TestCli:
    def test_runs_commands_from_arguments(self, capsys):
        code = cli(["-c", "addm n/Amy Bee p/123 e/amy@example.com a/Street", "-c", "listm"])
        captured = capsys.readouterr()
        assert code == 0
        assert "1. Amy Bee" in captured.out

    def test_missing_config_dir_fails(self, tmp_path):
        assert cli(["--config-dir", str(tmp_path / "absent"), "-c", "listf"]) == 1

    def test_repl_reads_stdin_until_eof(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("listf\n"))
        assert cli([]) == 0
        assert "There are no facilities in the address book" in capsys.readouterr().out

    def test_config_aliases_are_available(self, tmp_path, capsys):
        write_config_files(tmp_path, force=True)
        assert cli(["--config-dir", str(tmp_path), "-c", "lf"]) == 0
        assert "There are no facilities" in capsys.readouterr().out


class TestInitCommand:
    def test_writes_starter_files(self, tmp_path):
        target = tmp_path / "cfg"
        code = run_init_command(Namespace(config_dir=str(target), force=False))
        assert code == 0
        data = yaml.safe_load((target / "aliases.yaml").read_text(encoding="utf-8"))
        assert data == {"aliases": DEFAULT_ALIASES}
        assert "LOG_LEVEL=WARNING" in (target / ".env").read_text(encoding="utf-8")

    def test_cli_init_with_config_dir(self, tmp_path):
        target = tmp_path / "cfg"
        assert cli(["init", "--config-dir", str(target), "--force"]) == 0
        assert (target / "aliases.yaml").is_file()
        assert (target / ".env").is_file()

    def test_cli_init_accepts_top_level_config_dir(self, tmp_path):
        target = tmp_path / "cfg"
        assert cli(["--config-dir", str(target), "init"]) == 0
        assert (target / "aliases.yaml").is_file()

    def test_cli_init_uses_environment_directory(self, tmp_path, monkeypatch):
        target = tmp_path / "from-env"
        monkeypatch.setenv(config_module.CONFIG_DIR_ENV, str(target))
        assert cli(["init"]) == 0
        assert (target / ".env").is_file()

    def test_cli_init_defaults_to_home_directory(self, tmp_path):
        assert cli(["init", "--force"]) == 0
        assert (tmp_path / "missing-default" / "aliases.yaml").is_file()

    def test_keeps_existing_files_when_declined(self, tmp_path, monkeypatch):
        (tmp_path / "aliases.yaml").write_text("aliases: {}\n", encoding="utf-8")
        monkeypatch.setattr("builtins.input", lambda prompt: "n")
        written = write_config_files(tmp_path)
        assert written == [tmp_path / ".env"]
        assert (tmp_path / "aliases.yaml").read_text(encoding="utf-8") == "aliases: {}\n"
