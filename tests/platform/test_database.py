"""Tests for the SQLite schema and transaction helper."""

import sqlite3

import pytest

from shiptivity_platform.persistence import SCHEMA_VERSION, get_connection, init_db, transaction


def test_init_db_creates_tables(db_conn):
    tables = {
        row[0]
        for row in db_conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
    }
    assert {"clients", "schema_version"} <= tables


def test_init_db_records_schema_version(db_conn):
    row = db_conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    assert row[0] == SCHEMA_VERSION


def test_init_db_is_idempotent(db_conn):
    init_db(db_conn)
    rows = db_conn.execute("SELECT COUNT(*) FROM schema_version").fetchone()
    assert rows[0] == 1


def test_status_check_constraint(db_conn):
    with pytest.raises(sqlite3.IntegrityError):
        db_conn.execute(
            "INSERT INTO clients (name, status, priority) VALUES ('x', 'archived', 1)"
        )


def test_get_connection_creates_file(tmp_path):
    path = tmp_path / "board.db"
    conn = get_connection(path)
    try:
        assert path.exists()
        assert conn.row_factory is sqlite3.Row
    finally:
        conn.close()


def test_get_connection_uses_env_override(tmp_path, monkeypatch):
    path = tmp_path / "from-env.db"
    monkeypatch.setenv("SHIPTIVITY_DB_PATH", str(path))
    conn = get_connection()
    conn.close()
    assert path.exists()


class TestTransaction:

    def test_commits_on_success(self, db_conn):
        with transaction(db_conn):
            db_conn.execute("INSERT INTO clients (name, status, priority) VALUES ('a', 'backlog', 1)")
        assert db_conn.execute("SELECT COUNT(*) FROM clients").fetchone()[0] == 1
        assert not db_conn.in_transaction

    def test_rolls_back_on_error(self, db_conn):
        with pytest.raises(RuntimeError):
            with transaction(db_conn, immediate=True):
                db_conn.execute("INSERT INTO clients (name, status, priority) VALUES ('a', 'backlog', 1)")
                raise RuntimeError("boom")
        assert db_conn.execute("SELECT COUNT(*) FROM clients").fetchone()[0] == 0

    def test_nested_block_joins_outer(self, db_conn):
        with pytest.raises(RuntimeError):
            with transaction(db_conn):
                with transaction(db_conn):
                    db_conn.execute("INSERT INTO clients (name, status, priority) VALUES ('a', 'backlog', 1)")
                assert db_conn.in_transaction
                raise RuntimeError("outer fails")
        assert db_conn.execute("SELECT COUNT(*) FROM clients").fetchone()[0] == 0
