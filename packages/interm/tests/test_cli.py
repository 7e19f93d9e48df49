"""Tests for the interm command line"""
from __future__ import annotations

from typer.testing import CliRunner

from interm import cli as cli_mod
from interm.errors import CursorError

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(cli_mod.app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == "interm 0.1.1"


def test_downloads_completes() -> None:
    result = runner.invoke(cli_mod.app, ["downloads", "-n", "2", "--max-delay", "0", "--seed", "1"])
    assert result.exit_code == 0, result.output
    assert "Download 1: Complete" in result.output
    assert "All downloads complete!" in result.output


def test_downloads_rejects_zero_count() -> None:
    result = runner.invoke(cli_mod.app, ["downloads", "--count", "0"])
    assert result.exit_code != 0


def test_downloads_reports_terminal_errors(monkeypatch) -> None:
    async def _broken(*_args, **_kwargs):
        raise CursorError("broken pipe")

    monkeypatch.setattr(cli_mod, "run_downloads", _broken)
    result = runner.invoke(cli_mod.app, ["downloads", "-n", "1"])
    assert result.exit_code == 1
    assert "All downloads complete!" not in result.output


def test_downloads_warns_when_stdout_is_not_a_terminal() -> None:
    result = runner.invoke(cli_mod.app, ["downloads", "-n", "1", "--max-delay", "0"])
    assert result.exit_code == 0, result.output
    assert "stdout is not a terminal" in result.output
