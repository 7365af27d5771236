"""Platform layer: SQLite persistence and board workflows over the stateless core."""

__version__ = "1.0.0"

from .persistence import ClientStore, get_connection, init_db, transaction
from .services import ClientService, parse_client_id, validate_id

__all__ = [
    "__version__",
    "ClientService",
    "ClientStore",
    "get_connection",
    "init_db",
    "transaction",
    "parse_client_id",
    "validate_id",
]
