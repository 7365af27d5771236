"""Adapters between v1 contracts and core domain types."""

from __future__ import annotations

from numbers import Real
from typing import Any

from core.domain import Client, MoveRequest

from .schemas import ClientContract, UpdateClientRequest


def _is_absent(value: Any) -> bool:
    """Return True for values the v1 API has always treated as "not supplied".

    Existing API consumers send ``0`` or ``""`` to mean "leave as is",
    so both map to ``None`` here and never reach the core as real values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, Real) and not isinstance(value, bool):
        return value == 0
    return False


def update_request_to_move(client_id: int, req: UpdateClientRequest) -> MoveRequest:
    """Adapt a v1 update body into a core ``MoveRequest``."""
    return MoveRequest(
        client_id=client_id,
        status=None if _is_absent(req.status) else req.status,
        priority=None if _is_absent(req.priority) else req.priority,
    )


def client_to_contract(client: Client) -> ClientContract:
    return ClientContract(**client.to_dict())


def clients_to_payload(clients: list[Client]) -> list[dict[str, Any]]:
    return [client_to_contract(c).model_dump() for c in clients]


