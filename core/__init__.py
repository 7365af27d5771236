"""Stateless swimlane reindexing engine."""

__version__ = "1.0.0"

from .domain import (
    Client,
    InvalidIdError,
    InvalidPriorityError,
    InvalidStatusError,
    Lane,
    MoveError,
    MoveOutcome,
    MovePlan,
    MoveRequest,
    NoopRequestError,
    PersistenceError,
    WriteEntry,
)
from .partition import build_view, extract, insert, is_contiguous, renumber, rotate
from .service import find_client, parse_priority, parse_status, plan_move

__all__ = [
    "__version__",
    "Client",
    "Lane",
    "MoveRequest",
    "MovePlan",
    "MoveOutcome",
    "WriteEntry",
    "MoveError",
    "InvalidIdError",
    "InvalidStatusError",
    "InvalidPriorityError",
    "NoopRequestError",
    "PersistenceError",
    "build_view",
    "rotate",
    "extract",
    "insert",
    "is_contiguous",
    "renumber",
    "find_client",
    "parse_status",
    "parse_priority",
    "plan_move",
]
