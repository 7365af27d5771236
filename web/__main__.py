"""
Entry point for running the API server as a module.

Usage:
    python -m web [--port 3001] [--host 127.0.0.1] [--reload]
"""

import argparse
import logging

import uvicorn
from dotenv import load_dotenv

from shiptivity_platform.runtime.config import DEFAULT_HOST, DEFAULT_PORT, get_log_level

APP_LOGGERS = ("core", "shiptivity_platform", "web")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="shiptivity: swimlane board API"
    )
    parser.add_argument(
        "--port", type=int, default=DEFAULT_PORT,
        help=f"Port to serve on (default: {DEFAULT_PORT})"
    )
    parser.add_argument(
        "--host", type=str, default=DEFAULT_HOST,
        help=f"Host to bind to (default: {DEFAULT_HOST})"
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload for development"
    )
    return parser


def configure_logging() -> str:
    """Send the app's own loggers to stderr at ``SHIPTIVITY_LOG_LEVEL``.

    Returns the level name so uvicorn can be run at the same level.
    """
    level = get_log_level()
    logging.basicConfig(format="%(levelname)s:     %(name)s - %(message)s")
    for name in APP_LOGGERS:
        logging.getLogger(name).setLevel(level)
    return level


def main():
    args = build_parser().parse_args()

    # .env must be read before the log level is looked up
    load_dotenv()
    level = configure_logging()

    print(f"\n  shiptivity API")
    print(f"  app running on http://{args.host}:{args.port}\n")

    uvicorn.run(
        "web.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=level.lower(),
    )


if __name__ == "__main__":
    main()
