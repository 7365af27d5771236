"""Platform-owned SQLite database primitives."""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from shiptivity_platform.runtime.config import get_db_path

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1


def get_connection(db_path: Path | None = None) -> sqlite3.Connection:
    """Open (or create) the clients database and ensure the schema exists.

    The connection may be shared across threads; callers serialize access
    (see ``ClientService``). The caller is responsible for closing it.
    """
    path = Path(db_path) if db_path is not None else get_db_path()
    conn = sqlite3.connect(str(path), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    init_db(conn)
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create tables if they don't exist and record the schema version."""
    conn.executescript(_SCHEMA_SQL)

    row = conn.execute("SELECT MAX(version) FROM schema_version").fetchone()
    current = row[0] if row[0] is not None else 0

    if current < SCHEMA_VERSION:
        logger.info("Initialising clients schema v%d", SCHEMA_VERSION)
        conn.execute(
            "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
            (SCHEMA_VERSION,),
        )
        conn.commit()


@contextmanager
def transaction(conn: sqlite3.Connection, *, immediate: bool = False) -> Iterator[sqlite3.Connection]:
    """Run the enclosed statements in one transaction.

    ``immediate`` takes SQLite's write lock up front, so reads inside the
    block see the state the block's writes will be applied to. When a
    transaction is already open the block joins it and the outer owner
    commits or rolls back.
    """
    if conn.in_transaction:
        yield conn
        return

    conn.execute("BEGIN IMMEDIATE" if immediate else "BEGIN")
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise


_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY
);

CREATE TABLE IF NOT EXISTS clients (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    description TEXT DEFAULT '',
    status TEXT NOT NULL CHECK (status IN ('backlog', 'in-progress', 'complete')),
    priority INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_clients_status_priority ON clients(status, priority);
"""


__all__ = ["SCHEMA_VERSION", "get_connection", "init_db", "transaction"]
