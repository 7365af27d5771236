"""Tests for the ClientStore persistence adapter."""

import pytest

from core.domain import Lane, PersistenceError, WriteEntry
from shiptivity_platform.persistence import ClientStore


class TestQueries:

    def test_list_all_in_id_order(self, seeded_conn):
        clients = ClientStore.list_all(seeded_conn)
        assert [c.id for c in clients] == [1, 2, 3, 4, 5, 6]
        assert clients[0].status is Lane.BACKLOG

    def test_list_by_status_sorted_by_priority(self, seeded_conn):
        seeded_conn.execute("UPDATE clients SET priority = 5 WHERE id = 1")
        seeded_conn.commit()
        names = [c.name for c in ClientStore.list_by_status(seeded_conn, Lane.BACKLOG)]
        assert names == ["B", "C", "A"]

    def test_get_and_exists(self, seeded_conn):
        assert ClientStore.get(seeded_conn, 4).name == "D"
        assert ClientStore.get(seeded_conn, 99) is None
        assert ClientStore.exists(seeded_conn, 4) is True
        assert ClientStore.exists(seeded_conn, 99) is False


class TestCreate:

    def test_appends_to_bottom_of_lane(self, seeded_conn):
        client = ClientStore.create(seeded_conn, "G", "new", Lane.BACKLOG)
        assert client.priority == 4
        assert ClientStore.get(seeded_conn, client.id).description == "new"

    def test_first_client_in_empty_lane(self, db_conn):
        client = ClientStore.create(db_conn, "solo", status=Lane.COMPLETE)
        assert client.priority == 1


class TestApplyWriteSet:

    def test_applies_all_rows(self, seeded_conn):
        ClientStore.apply_write_set(seeded_conn, [
            WriteEntry(id=1, status=Lane.IN_PROGRESS, priority=1),
            WriteEntry(id=4, status=Lane.IN_PROGRESS, priority=2),
        ])
        assert ClientStore.get(seeded_conn, 1).status is Lane.IN_PROGRESS
        assert ClientStore.get(seeded_conn, 4).priority == 2

    def test_empty_write_set_is_noop(self, seeded_conn):
        ClientStore.apply_write_set(seeded_conn, [])
        assert not seeded_conn.in_transaction

    def test_failure_applies_nothing(self, seeded_conn):
        seeded_conn.execute(
            """CREATE TRIGGER reject_client_six BEFORE UPDATE ON clients
               WHEN NEW.id = 6 BEGIN SELECT RAISE(ABORT, 'locked row'); END"""
        )
        with pytest.raises(PersistenceError) as exc:
            ClientStore.apply_write_set(seeded_conn, [
                WriteEntry(id=5, status=Lane.COMPLETE, priority=2),
                WriteEntry(id=6, status=Lane.COMPLETE, priority=1),
            ])
        assert exc.value.to_payload() == {
            "message": "Failed to update swinelane.",
            "long_message": "Database error.",
        }
        assert ClientStore.get(seeded_conn, 5).priority == 1
        assert ClientStore.get(seeded_conn, 6).priority == 2
