"""CLI tests — init-db, create-user, users against a throwaway SQLite file."""

import pytest
from click.testing import CliRunner

from bloglist.cli.main import main


@pytest.fixture
def env(tmp_path, monkeypatch):
    monkeypatch.setenv("BLOGLIST_JWT_SECRET", "cli-secret")
    monkeypatch.setenv("BLOGLIST_DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("BLOGLIST_PASSWORD_HASH_ROUNDS", "4")
    return monkeypatch


def test_create_and_list_users(env):
    runner = CliRunner()
    r = runner.invoke(main, ["init-db"])
    assert r.exit_code == 0, r.output

    r = runner.invoke(main, ["create-user", "alice", "--name", "Alice", "--password", "sekret"])
    assert r.exit_code == 0, r.output
    assert "Created alice" in r.output

    r = runner.invoke(main, ["users"])
    assert r.exit_code == 0
    assert "alice" in r.output
    assert "sekret" not in r.output


def test_create_user_duplicate(env):
    runner = CliRunner()
    runner.invoke(main, ["init-db"])
    runner.invoke(main, ["create-user", "bob", "--password", "sekret"])
    r = runner.invoke(main, ["create-user", "bob", "--password", "sekret"])
    assert r.exit_code == 1
    assert "unique" in r.output


def test_missing_secret_exits(monkeypatch):
    monkeypatch.delenv("BLOGLIST_JWT_SECRET", raising=False)
    r = CliRunner().invoke(main, ["init-db"])
    assert r.exit_code == 1
    assert "BLOGLIST_JWT_SECRET" in r.output
