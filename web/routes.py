"""
REST API routes for the shiptivity swimlane board.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Query

from contracts.v1 import UpdateClientRequest, client_to_contract, clients_to_payload, update_request_to_move
from shiptivity_platform.runtime.config import API_PREFIX
from shiptivity_platform.services import ClientService, parse_client_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix=API_PREFIX)

# Single shared service; holds the process-wide database connection.
client_service = ClientService()


@router.get("/clients")
async def list_clients(
    status: Optional[str] = Query(None, description="backlog | in-progress | complete"),
):
    """List all clients, optionally only those of one lane."""
    clients = client_service.list_clients(status or None)
    return clients_to_payload(clients)


@router.get("/clients/{client_id}")
async def get_client(client_id: str):
    """Get a client by id."""
    client = client_service.get_client(client_id)
    return client_to_contract(client).model_dump()


@router.put("/clients/{client_id}")
async def update_client(client_id: str, req: Optional[UpdateClientRequest] = None):
    """Move a client to a new lane and/or priority.

    Priority 1 is the top of a lane. Every other client in the affected
    lanes is re-ranked so each lane stays ranked 1..N without duplicates.
    Returns the full board on success, including when the requested state
    already holds.
    """
    move = update_request_to_move(parse_client_id(client_id), req or UpdateClientRequest())
    plan = client_service.move_client(move)
    return clients_to_payload(plan.clients)
