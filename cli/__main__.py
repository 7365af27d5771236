"""
Entry point for running the shiptivity CLI as a module.

Usage:
    python -m cli list
    python -m cli move 12 --status in-progress --priority 1
"""

from .commands import main

if __name__ == "__main__":
    main()
