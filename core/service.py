"""Stateless move orchestration (collection + move request in, plan out)."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable

from .domain import (
    Client,
    InvalidIdError,
    InvalidPriorityError,
    InvalidStatusError,
    Lane,
    MoveOutcome,
    MovePlan,
    MoveRequest,
    NoopRequestError,
    WriteEntry,
)
from .partition import build_view, extract, insert, renumber, rotate


def parse_status(raw: Any) -> Lane:
    """Coerce ``raw`` into a ``Lane`` or raise ``InvalidStatusError``."""
    if isinstance(raw, Lane):
        return raw
    if isinstance(raw, str):
        try:
            return Lane(raw)
        except ValueError:
            pass
    raise InvalidStatusError()


def parse_priority(raw: Any) -> int:
    """Coerce ``raw`` into a non-negative int or raise ``InvalidPriorityError``.

    Booleans, strings and fractional numbers are rejected.
    """
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise InvalidPriorityError()
    if isinstance(raw, float) and not math.isfinite(raw):
        raise InvalidPriorityError()
    if raw < 0 or int(raw) != raw:
        raise InvalidPriorityError()
    return int(raw)


def find_client(clients: Iterable[Client], client_id: int) -> Client:
    for c in clients:
        if c.id == client_id:
            return c
    raise InvalidIdError("Cannot find client with that id.")


def _diff(before: dict[int, Client], partitions: list[list[Client]]) -> tuple[WriteEntry, ...]:
    """Return write entries for every client whose lane or rank changed."""
    entries = []
    for partition in partitions:
        for c in partition:
            prior = before.get(c.id)
            if prior is None or prior.status != c.status or prior.priority != c.priority:
                entries.append(WriteEntry(id=c.id, status=c.status, priority=c.priority))
    return tuple(entries)


def _merge(clients: list[Client], partitions: list[list[Client]]) -> list[Client]:
    updated = {c.id: c for partition in partitions for c in partition}
    return [updated.get(c.id, c) for c in clients]


def plan_move(clients: Iterable[Client], request: MoveRequest) -> MovePlan:
    """Plan a single-client move and the writes needed to persist it.

    Raises a ``MoveError`` subclass when the request is invalid. Requests
    whose end state already holds return a plan with an empty write-set.
    """
    clients = list(clients)
    client = find_client(clients, request.client_id)

    if request.is_empty:
        raise NoopRequestError()

    status = parse_status(client.status if request.status is None else request.status)
    priority = parse_priority(client.priority if request.priority is None else request.priority)
    if priority < 1:
        raise InvalidPriorityError()

    if status == client.status and priority == client.priority:
        return MovePlan(outcome=MoveOutcome.UNCHANGED, clients=clients, target_priority=priority)

    # Stored lanes may carry gaps or duplicate ranks written by other tools;
    # plan against their 1..N order and locate the mover by id.
    source = renumber(build_view(clients, client.status))
    current = next(i for i, c in enumerate(source, start=1) if c.id == client.id)
    same_lane = status == client.status
    destination = source if same_lane else renumber(build_view(clients, status))
    clamped = False

    # Out-of-range ranks are clamped to the end of the lane, not rejected.
    if same_lane and priority > len(destination):
        priority = len(destination)
        clamped = True
        if priority == current:
            return MovePlan(
                outcome=MoveOutcome.CLAMPED_NOOP,
                clients=clients,
                target_priority=priority,
                clamped=True,
            )
    elif not same_lane and priority > len(destination) + 1:
        priority = len(destination) + 1
        clamped = True

    before = {c.id: c for c in clients}

    if same_lane:
        rotated = rotate(destination, current, priority)
        partitions = {status: rotated}
        ordered = [rotated]
        outcome = MoveOutcome.ROTATED
    else:
        shrunk = extract(source, current - 1)
        grown = insert(destination, priority, client, status)
        partitions = {status: grown, client.status: shrunk}
        ordered = [grown, shrunk]
        outcome = MoveOutcome.TRANSFERRED

    return MovePlan(
        outcome=outcome,
        clients=_merge(clients, ordered),
        write_set=_diff(before, ordered),
        partitions=partitions,
        target_priority=priority,
        clamped=clamped,
    )
