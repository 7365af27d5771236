"""
CLI subcommand implementations for the shiptivity board.

Subcommands::

    shiptivity init
    shiptivity list [--status S]
    shiptivity show ID
    shiptivity add NAME [--description D] [--status S]
    shiptivity move ID [--status S] [--priority P]
"""

import argparse
import logging
import sys
from pathlib import Path

from core.domain import Lane, MoveError, MoveRequest
from core.partition import build_view
from shiptivity_platform.runtime.config import get_db_path, get_log_level
from shiptivity_platform.services import ClientService, parse_client_id


def _print_board(clients) -> None:
    """Print clients grouped by lane, top priority first."""
    for lane in Lane:
        view = build_view(clients, lane)
        print(f"\n{lane.value.upper()} ({len(view)})")
        for c in view:
            print(f"  {c.priority:>3}. [{c.id}] {c.name}")


def _print_client(client) -> None:
    print(f"Client #{client.id}: {client.name}")
    print(f"  Status:   {client.status.value}")
    print(f"  Priority: {client.priority}")
    if client.description:
        print(f"  {client.description}")


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------

def cmd_init(service: ClientService, args) -> None:
    service.connect()
    print(f"✓ Database ready at {service.db_path or get_db_path()}")


def cmd_list(service: ClientService, args) -> None:
    if args.status:
        for c in service.list_clients(args.status):
            print(f"  {c.priority:>3}. [{c.id}] {c.name}")
        return
    _print_board(service.list_clients())


def cmd_show(service: ClientService, args) -> None:
    _print_client(service.get_client(args.id))


def cmd_add(service: ClientService, args) -> None:
    client = service.add_client(args.name, args.description or "", args.status)
    print(f"✓ Added client #{client.id} to {client.status.value} at priority {client.priority}")


def cmd_move(service: ClientService, args) -> None:
    request = MoveRequest(
        client_id=parse_client_id(args.id),
        status=args.status,
        priority=args.priority,
    )
    plan = service.move_client(request)
    if not plan.changed:
        print("No change: client is already there.")
        return
    suffix = " (clamped to end of lane)" if plan.clamped else ""
    print(f"✓ {plan.outcome.value}: {len(plan.write_set)} client(s) re-ranked{suffix}")
    _print_board(plan.clients)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="shiptivity",
        description="Swimlane board with contiguous per-lane priorities",
    )
    parser.add_argument("--db", type=Path, default=None,
                        help="Path to the SQLite database (default: SHIPTIVITY_DB_PATH or ./clients.db)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("init", help="Create the database schema")

    p_list = subparsers.add_parser("list", help="List clients by lane")
    p_list.add_argument("--status", choices=Lane.values())

    p_show = subparsers.add_parser("show", help="Show one client")
    p_show.add_argument("id", help="Client ID")

    p_add = subparsers.add_parser("add", help="Add a client at the bottom of a lane")
    p_add.add_argument("name")
    p_add.add_argument("--description", default="")
    p_add.add_argument("--status", choices=Lane.values(), default=Lane.BACKLOG.value)

    p_move = subparsers.add_parser("move", help="Move a client to a lane and/or priority")
    p_move.add_argument("id", help="Client ID")
    p_move.add_argument("--status", choices=Lane.values())
    p_move.add_argument("--priority", type=int, help="Target priority (1 = top)")

    return parser


COMMANDS = {
    "init": cmd_init,
    "list": cmd_list,
    "show": cmd_show,
    "add": cmd_add,
    "move": cmd_move,
}


def main(argv=None):
    """Entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=get_log_level())

    service = ClientService(args.db)
    try:
        COMMANDS[args.command](service, args)
    except MoveError as e:
        print(f"Error: {e.message} {e.long_message}")
        sys.exit(1)
    finally:
        service.close()
