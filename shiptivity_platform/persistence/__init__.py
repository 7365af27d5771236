"""Platform-owned persistence layer (database and stores)."""

from .client_store import ClientStore
from .database import SCHEMA_VERSION, get_connection, init_db, transaction
