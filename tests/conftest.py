"""
Shared fixtures for shiptivity tests.
"""

import sqlite3

import pytest
from fastapi.testclient import TestClient

from core.domain import Client, Lane
from shiptivity_platform.persistence import init_db
from shiptivity_platform.services import ClientService


def _client(id: int, status: str, priority: int, name: str) -> Client:
    return Client(id=id, name=name, status=Lane(status), priority=priority)


def _seed(conn: sqlite3.Connection, clients: list[Client]) -> None:
    conn.executemany(
        "INSERT INTO clients (id, name, description, status, priority) VALUES (?, ?, ?, ?, ?)",
        [(c.id, c.name, c.description, c.status.value, c.priority) for c in clients],
    )
    conn.commit()


@pytest.fixture
def sample_clients():
    """Board shared by most tests.

    backlog:     A(1) B(2) C(3)
    in-progress: D(1)
    complete:    E(1) F(2)
    """
    return [
        _client(1, "backlog", 1, "A"),
        _client(2, "backlog", 2, "B"),
        _client(3, "backlog", 3, "C"),
        _client(4, "in-progress", 1, "D"),
        _client(5, "complete", 1, "E"),
        _client(6, "complete", 2, "F"),
    ]


@pytest.fixture
def db_conn():
    """Create an in-memory SQLite connection with the shiptivity schema."""
    conn = sqlite3.connect(":memory:", check_same_thread=False)
    conn.row_factory = sqlite3.Row
    init_db(conn)
    yield conn
    conn.close()


@pytest.fixture
def seeded_conn(db_conn, sample_clients):
    """In-memory connection holding ``sample_clients``."""
    _seed(db_conn, sample_clients)
    return db_conn


@pytest.fixture
def db_path(tmp_path, sample_clients):
    """A seeded on-disk database file."""
    path = tmp_path / "clients.db"
    service = ClientService(path)
    _seed(service.conn, sample_clients)
    service.close()
    return path


@pytest.fixture
def service(db_path):
    """ClientService bound to the seeded database file."""
    svc = ClientService(db_path)
    yield svc
    svc.close()


@pytest.fixture
def api_client(db_path):
    """FastAPI test client bound to the seeded database file."""
    from web.app import app
    from web.routes import client_service

    client_service.connect(db_path)
    with TestClient(app) as test_client:
        yield test_client
    client_service.close()
    client_service.db_path = None
