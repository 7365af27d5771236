"""Command-line interface for the shiptivity board."""
