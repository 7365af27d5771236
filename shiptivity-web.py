#!/usr/bin/env python3
"""
shiptivity API server

Starts the swimlane board API (clients ranked per lane).

Usage:
    python shiptivity-web.py [--port 3001] [--host 127.0.0.1]

The database defaults to ./clients.db; set SHIPTIVITY_DB_PATH to override.
"""

from web.__main__ import main


if __name__ == "__main__":
    main()
