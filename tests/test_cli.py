import io
import json
from pathlib import Path

from loguru import logger
import pytest

from helpers import p, write_file
from trashcan.app.console import ConsoleConfirmer
from trashcan.main import main


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


@pytest.fixture
def cli(tmp_path: Path, home: Path):
    settings = tmp_path / "settings.json"
    settings.write_text(
        json.dumps({"trash": {"convention": "home", "home_root": str(home)}}), encoding="utf-8"
    )
    base = ["--settings", str(settings), "--log-dir", str(tmp_path / "logs")]

    def run(*args: str) -> int:
        return main([*base, *args])

    return run


def test_delete_then_list_then_restore(cli, home: Path, capsys):
    notes = write_file(home / "alice" / "notes.txt")
    trashed = home / ".TRASHCAN" / "alice!notes.txt"

    assert cli("delete", p(notes)) == 0
    assert f"moved    {p(notes)} -> {p(trashed)}" in capsys.readouterr().out

    assert cli("list") == 0
    assert f"alice!notes.txt\t{p(notes)}" in capsys.readouterr().out

    assert cli("restore", p(trashed)) == 0
    assert notes.exists()


def test_purge_with_yes(cli, home: Path, capsys):
    victim = write_file(home / ".TRASHCAN" / "alice!v.txt")
    assert cli("-y", "delete", p(victim)) == 0
    assert f"removed  {p(victim)}" in capsys.readouterr().out
    assert not victim.exists()


def test_purge_declined_on_eof(cli, home: Path, monkeypatch, capsys):
    victim = write_file(home / ".TRASHCAN" / "alice!v.txt")
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli("purge", p(victim)) == 1
    assert "aborted" in capsys.readouterr().err
    assert victim.exists()


def test_validation_error_exit_status(cli, home: Path, capsys):
    assert cli("trash", p(home / "alice") + "/..") == 2
    assert "Batch rejected" in capsys.readouterr().err


def test_restore_conflict_exit_status(cli, home: Path, capsys):
    notes = write_file(home / "alice" / "notes.txt")
    cli("trash", p(notes))
    write_file(notes)
    assert cli("restore", p(home / ".TRASHCAN" / "alice!notes.txt")) == 1
    assert "conflict" in capsys.readouterr().err


def test_bad_settings_file(tmp_path: Path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    assert main(["--settings", str(bad), "--log-dir", str(tmp_path / "logs"), "list"]) == 2
    assert "invalid settings" in capsys.readouterr().err


def test_log_command(cli, capsys):
    assert cli("log") == 0
    assert capsys.readouterr().out.strip().endswith(".log")


def test_console_confirmer(monkeypatch):
    stream = io.StringIO()
    monkeypatch.setattr("builtins.input", lambda: "Yes")
    assert ConsoleConfirmer(stream=stream).confirm("Go?")
    assert "Go?" in stream.getvalue()
    monkeypatch.setattr("builtins.input", lambda: "n")
    assert not ConsoleConfirmer(stream=stream).confirm("Go?")
    assert ConsoleConfirmer(assume_yes=True).confirm("Go?")
