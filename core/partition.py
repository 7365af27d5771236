"""Ordered-partition primitives: lane views, rotation, extraction, insertion.

Every function here is pure. Inputs are never mutated; each returns a new
list of copied ``Client`` objects ordered by priority.
"""

from __future__ import annotations

from typing import Iterable

from .domain import Client, Lane


def build_view(clients: Iterable[Client], status: Lane) -> list[Client]:
    """Return the clients in ``status`` sorted by priority (stable on ties)."""
    return sorted(
        (c for c in clients if c.status == status),
        key=lambda c: c.priority,
    )


def renumber(partition: list[Client]) -> list[Client]:
    """Return copies of ``partition`` ranked 1..N in their current order."""
    return [c.copy(priority=i) for i, c in enumerate(partition, start=1)]


def _check_rank(rank: int, upper: int, label: str) -> None:
    if not 1 <= rank <= upper:
        raise ValueError(f"{label} {rank} is outside 1..{upper}")


def rotate(partition: list[Client], old_priority: int, new_priority: int) -> list[Client]:
    """Move the client at ``old_priority`` to ``new_priority`` within one lane.

    Only the contiguous range between the two ranks is renumbered: the
    mover takes ``new_priority`` and every client strictly between shifts
    by one toward the gap it left. Clients outside the range keep their
    priority.
    """
    size = len(partition)
    _check_rank(old_priority, size, "old priority")
    _check_rank(new_priority, size, "new priority")

    rotated = [c.copy() for c in partition]
    pos1 = old_priority - 1
    pos2 = new_priority - 1
    if pos1 == pos2:
        return rotated

    mover = rotated.pop(pos1)
    rotated.insert(pos2, mover)
    for i in range(min(pos1, pos2), max(pos1, pos2) + 1):
        rotated[i].priority = i + 1
    return rotated


def extract(partition: list[Client], index: int) -> list[Client]:
    """Remove the client at 0-based ``index`` and close the rank gap."""
    if not 0 <= index < len(partition):
        raise ValueError(f"index {index} is outside 0..{len(partition) - 1}")

    remaining = [c.copy() for c in partition[:index]]
    for c in partition[index + 1:]:
        remaining.append(c.copy(priority=c.priority - 1))
    return remaining


def insert(partition: list[Client], priority: int, client: Client, status: Lane) -> list[Client]:
    """Splice a copy of ``client`` into ``status`` at ``priority``.

    Every client at or below the target rank moves down by one.
    """
    _check_rank(priority, len(partition) + 1, "priority")

    index = priority - 1
    result = [c.copy() for c in partition[:index]]
    result.append(client.copy(status=status, priority=priority))
    for c in partition[index:]:
        result.append(c.copy(priority=c.priority + 1))
    return result


def is_contiguous(partition: Iterable[Client]) -> bool:
    """Return True when the lane's priorities are exactly ``1..len``."""
    priorities = sorted(c.priority for c in partition)
    return priorities == list(range(1, len(priorities) + 1))
