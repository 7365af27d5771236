"""Platform-owned client workflow service."""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import Any, Optional

from core.domain import (
    Client,
    InvalidIdError,
    Lane,
    MovePlan,
    MoveRequest,
    PersistenceError,
)
from core.service import parse_status, plan_move
from shiptivity_platform.persistence import ClientStore, get_connection, transaction

logger = logging.getLogger(__name__)


def parse_client_id(raw_id: Any) -> int:
    """Coerce a path/CLI id into an int or raise ``InvalidIdError``."""
    if isinstance(raw_id, bool):
        raise InvalidIdError("Id can only be integer.")
    if isinstance(raw_id, int):
        return raw_id
    try:
        return int(str(raw_id).strip())
    except ValueError as e:
        raise InvalidIdError("Id can only be integer.") from e


def validate_id(conn: sqlite3.Connection, raw_id: Any) -> int:
    """Return the integer id when it names an existing client."""
    client_id = parse_client_id(raw_id)
    if not ClientStore.exists(conn, client_id):
        raise InvalidIdError("Cannot find client with that id.")
    return client_id


class ClientService:
    """Owns the long-lived connection and serializes board mutations.

    One connection is kept open for the life of the process and closed on
    shutdown. Every move runs read -> plan -> write under a process lock and
    inside one ``BEGIN IMMEDIATE`` transaction, so concurrent moves (threads
    or other processes on the same file) never plan against a stale board.
    """

    def __init__(self, db_path: Optional[Path] = None):
        self.db_path = db_path
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()

    # --- Connection lifecycle ---

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            self._conn = get_connection(self.db_path)
        return self._conn

    def connect(self, db_path: Optional[Path] = None) -> sqlite3.Connection:
        """(Re)open the database, closing any previous connection."""
        self.close()
        if db_path is not None:
            self.db_path = db_path
        return self.conn

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    # --- Queries ---

    def list_clients(self, status: Any = None) -> list[Client]:
        """Return every client, or the clients of one lane when ``status`` is given."""
        lane = None if status is None else parse_status(status)
        # Reads share the move connection, so they wait for any open move
        # to commit or roll back.
        with self._lock:
            if lane is None:
                return ClientStore.list_all(self.conn)
            return ClientStore.list_by_status(self.conn, lane)

    def get_client(self, raw_id: Any) -> Client:
        with self._lock:
            client_id = validate_id(self.conn, raw_id)
            return ClientStore.get(self.conn, client_id)

    # --- Mutations ---

    def add_client(self, name: str, description: str = "", status: Any = Lane.BACKLOG) -> Client:
        """Create a client at the bottom of ``status``."""
        lane = parse_status(status)
        with self._lock:
            client = ClientStore.create(self.conn, name, description, lane)
        logger.info("Created client %d in %s at priority %d", client.id, lane.value, client.priority)
        return client

    def move_client(self, request: MoveRequest) -> MovePlan:
        """Plan and persist a move. Returns the plan holding the updated board.

        Raises a ``MoveError`` subclass for invalid requests and
        ``PersistenceError`` when the write-set cannot be committed; in both
        cases the stored board is left as it was.
        """
        with self._lock:
            try:
                with transaction(self.conn, immediate=True):
                    validate_id(self.conn, request.client_id)
                    plan = plan_move(ClientStore.list_all(self.conn), request)
                    ClientStore.apply_write_set(self.conn, plan.write_set)
            except sqlite3.Error as e:
                logger.exception("Move of client %s could not be committed", request.client_id)
                raise PersistenceError() from e

        if plan.changed:
            logger.info(
                "Moved client %d (%s): %d row(s) written",
                request.client_id, plan.outcome.value, len(plan.write_set),
            )
        else:
            logger.info("Move of client %d was a no-op (%s)", request.client_id, plan.outcome.value)
        return plan
