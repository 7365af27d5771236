"""v1 contract schemas and adapters."""

__version__ = "1.0.0"

from .adapters import (
    client_to_contract,
    clients_to_payload,
    update_request_to_move,
)
from .schemas import (
    ClientContract,
    MessageContract,
    UpdateClientRequest,
)

__all__ = [
    "__version__",
    "ClientContract",
    "MessageContract",
    "UpdateClientRequest",
    "client_to_contract",
    "clients_to_payload",
    "update_request_to_move",
]
