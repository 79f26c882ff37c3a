"""CLI command groups for node-finder."""

__all__ = [
    "config",
    "resolve",
]
