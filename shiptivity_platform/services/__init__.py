"""Platform-owned workflow services."""

from .client_service import ClientService, parse_client_id, validate_id
