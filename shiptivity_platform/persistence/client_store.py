"""Platform-owned client store."""

import logging
import sqlite3
from typing import Optional, Sequence

from core.domain import Client, Lane, PersistenceError, WriteEntry

from .database import transaction

logger = logging.getLogger(__name__)


class ClientStore:
    """CRUD operations for swimlane clients."""

    @staticmethod
    def create(conn: sqlite3.Connection, name: str, description: str = "",
               status: Lane = Lane.BACKLOG) -> Client:
        """Insert a client at the bottom of its lane. Returns the new client."""
        with transaction(conn, immediate=True):
            row = conn.execute(
                "SELECT COALESCE(MAX(priority), 0) FROM clients WHERE status = ?",
                (status.value,),
            ).fetchone()
            priority = row[0] + 1
            cursor = conn.execute(
                """INSERT INTO clients (name, description, status, priority)
                   VALUES (?, ?, ?, ?)""",
                (name, description, status.value, priority),
            )
        return Client(
            id=cursor.lastrowid,
            name=name,
            description=description,
            status=status,
            priority=priority,
        )

    @staticmethod
    def get(conn: sqlite3.Connection, client_id: int) -> Optional[Client]:
        """Load a single client by id."""
        row = conn.execute(
            "SELECT * FROM clients WHERE id = ? LIMIT 1", (client_id,)
        ).fetchone()
        if row is None:
            return None
        return ClientStore._row_to_client(row)

    @staticmethod
    def exists(conn: sqlite3.Connection, client_id: int) -> bool:
        row = conn.execute(
            "SELECT 1 FROM clients WHERE id = ? LIMIT 1", (client_id,)
        ).fetchone()
        return row is not None

    @staticmethod
    def list_all(conn: sqlite3.Connection) -> list[Client]:
        """List every client in id order."""
        rows = conn.execute("SELECT * FROM clients ORDER BY id").fetchall()
        return [ClientStore._row_to_client(r) for r in rows]

    @staticmethod
    def list_by_status(conn: sqlite3.Connection, status: Lane) -> list[Client]:
        """List the clients of one lane, top of the lane first."""
        rows = conn.execute(
            "SELECT * FROM clients WHERE status = ? ORDER BY priority, id",
            (status.value,),
        ).fetchall()
        return [ClientStore._row_to_client(r) for r in rows]

    @staticmethod
    def apply_write_set(conn: sqlite3.Connection, write_set: Sequence[WriteEntry]) -> None:
        """Apply every entry of ``write_set`` or none of them.

        Raises ``PersistenceError`` when the transaction cannot commit.
        """
        if not write_set:
            return
        try:
            with transaction(conn):
                conn.executemany(
                    "UPDATE clients SET status = :status, priority = :priority WHERE id = :id",
                    [entry.to_params() for entry in write_set],
                )
        except sqlite3.Error as e:
            logger.exception("Failed to apply write-set of %d row(s)", len(write_set))
            raise PersistenceError() from e

    # --- Internal helpers ---

    @staticmethod
    def _row_to_client(row: sqlite3.Row) -> Client:
        return Client.from_dict(dict(row))
