"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from noglobals.core.walker import Scanner


@lru_cache
def get_scanner() -> Scanner:
    """Shared scanner singleton (one tree-sitter parser per process)."""
    return Scanner()
