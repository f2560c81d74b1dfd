"""
Token store package for Bouncer.

This package defines the deny-list interface Bouncer consumes and an
in-memory reference implementation.
"""

from .store import TokenStore

from .memory import (
    MemoryTokenStore,
    create_memory_store
)

__all__ = [
    "TokenStore",
    "MemoryTokenStore",
    "create_memory_store",
]
