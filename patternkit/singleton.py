"""Singleton pattern: a single shared instance holding an integer."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache


@dataclass
class Singleton:
    """State shared through the one instance returned by get_singleton()."""

    data: int = 0


@lru_cache(maxsize=None)
def get_singleton() -> Singleton:
    """Return the process-wide Singleton instance."""
    return Singleton()