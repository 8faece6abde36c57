"""Console utilities for todopad."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(highlight: bool = True) -> Console:
    """Shared Rich console; output settings are applied to it at startup."""
    return Console(highlight=highlight)
