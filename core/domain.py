"""Core-native domain models for the swimlane reindexing engine."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class Lane(str, Enum):
    """The three fixed swimlanes a client can live in."""

    BACKLOG = "backlog"
    IN_PROGRESS = "in-progress"
    COMPLETE = "complete"

    @classmethod
    def values(cls) -> list[str]:
        return [lane.value for lane in cls]


LANE_CHOICES = " | ".join(Lane.values())


@dataclass(slots=True)
class Client:
    """A work item ranked inside one lane. Priority 1 is the top of the lane."""

    id: int
    name: str
    status: Lane
    priority: int
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Client":
        return cls(
            id=int(data["id"]),
            name=data.get("name") or "",
            description=data.get("description") or "",
            status=Lane(data["status"]),
            priority=int(data["priority"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "priority": self.priority,
        }

    def copy(self, **changes: Any) -> "Client":
        return replace(self, **changes)


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """Desired mutation of one client.

    ``None`` means "not supplied"; the orchestrator falls back to the
    client's current value for that field.
    """

    client_id: int
    status: Any = None
    priority: Any = None

    @property
    def is_empty(self) -> bool:
        return self.status is None and self.priority is None


@dataclass(frozen=True, slots=True)
class WriteEntry:
    """One row update produced by a move."""

    id: int
    status: Lane
    priority: int

    def to_params(self) -> dict[str, Any]:
        return {"id": self.id, "status": self.status.value, "priority": self.priority}


class MoveOutcome(str, Enum):
    ROTATED = "rotated"
    TRANSFERRED = "transferred"
    UNCHANGED = "unchanged"
    CLAMPED_NOOP = "clamped-noop"


@dataclass(slots=True)
class MovePlan:
    """Result of planning a move against an in-memory collection."""

    outcome: MoveOutcome
    clients: list[Client]
    write_set: tuple[WriteEntry, ...] = ()
    partitions: dict[Lane, list[Client]] = field(default_factory=dict)
    target_priority: int | None = None
    clamped: bool = False

    @property
    def changed(self) -> bool:
        return bool(self.write_set)


# --- Errors ---

class MoveError(Exception):
    """Base class for errors reported to callers as ``{message, long_message}``."""

    message = "Failed to update swinelane."

    def __init__(self, long_message: str, message: str | None = None):
        super().__init__(long_message)
        if message is not None:
            self.message = message
        self.long_message = long_message

    def to_payload(self) -> dict[str, str]:
        return {"message": self.message, "long_message": self.long_message}


class InvalidIdError(MoveError):
    message = "Invalid id provided."


class InvalidStatusError(MoveError):
    message = "Invalid status provided."

    def __init__(self, long_message: str | None = None):
        super().__init__(
            long_message
            or f"Status can only be one of the following: [{LANE_CHOICES}]."
        )


class InvalidPriorityError(MoveError):
    message = "Invalid priority provided."

    def __init__(self, long_message: str = "Priority can only be positive integer."):
        super().__init__(long_message)


class NoopRequestError(MoveError):
    def __init__(self, long_message: str = "Priority and Status is null."):
        super().__init__(long_message)


class PersistenceError(MoveError):
    def __init__(self, long_message: str = "Database error."):
        super().__init__(long_message)
