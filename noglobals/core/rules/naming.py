"""
Naming convention helpers for Go identifiers.
"""

from __future__ import annotations


def is_exported(name: str) -> bool:
    """Go visibility: a name is exported when it starts with an uppercase letter."""
    return name[:1].isupper()


def looks_like_error(name: str) -> bool:
    """True if the name starts with 'Err' (exported) or 'err' (unexported)."""
    prefix = "Err" if is_exported(name) else "err"
    return name.startswith(prefix)
