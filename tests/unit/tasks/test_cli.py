# tests/unit/tasks/test_cli.py
from __future__ import annotations

import sqlite3
from pathlib import Path

from typer.testing import CliRunner

from skillsnap_api.tasks.cli import app

runner = CliRunner()


def test_init_db_creates_tables(tmp_path: Path, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    from skillsnap_api.config.settings import get_settings

    db_file = tmp_path / "cli.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_file}")
    get_settings.cache_clear()

    result = runner.invoke(app, ["init-db"])

    assert result.exit_code == 0, result.output
    assert "database initialized (sqlite)" in result.output
    with sqlite3.connect(db_file) as conn:
        names = {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"portfolio_users", "projects", "skills", "accounts"} <= names


def test_no_args_shows_help() -> None:
    result = runner.invoke(app, [])
    assert "init-db" in result.output
    assert "serve" in result.output
