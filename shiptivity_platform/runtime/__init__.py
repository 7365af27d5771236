"""Runtime configuration for the shiptivity platform."""
