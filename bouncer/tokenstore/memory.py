"""
In-memory deny list implementation for Bouncer.

This module provides a coroutine-safe in-memory token store suitable for
development, tests and single-process deployments. Records are lost when the
process exits.
"""

import asyncio
import logging
from typing import Dict, Optional

from .store import TokenStore
from ..errors import TokenStoreError

logger = logging.getLogger(__name__)


class MemoryTokenStore(TokenStore):
    """
    In-memory token store implementation.

    Revocation records live in a dictionary guarded by an ``asyncio.Lock``.
    Revoking an id twice keeps the first timestamp.
    """

    def __init__(self):
        self._deny_list: Dict[str, int] = {}
        self._lock = asyncio.Lock()

    async def add_to_deny_list(self, session_id: str, timestamp: int) -> bool:
        """Record a revocation. Returns False for an empty session id."""
        if not isinstance(session_id, str) or not session_id:
            logger.warning("Refusing to deny-list an empty session id")
            return False

        if isinstance(timestamp, bool) or not isinstance(timestamp, int):
            raise TokenStoreError(
                "Revocation timestamp must be an integer",
                details={'session_id': session_id},
            )

        async with self._lock:
            self._deny_list.setdefault(session_id, timestamp)
            logger.debug(f"Deny-listed session {session_id}")
            return True

    async def is_on_deny_list(self, session_id: str) -> bool:
        """Check whether a session id has a revocation record."""
        async with self._lock:
            return session_id in self._deny_list

    async def get_revocation_time(self, session_id: str) -> Optional[int]:
        """Return the revocation timestamp for a session, if any."""
        async with self._lock:
            return self._deny_list.get(session_id)

    async def remove_from_deny_list(self, session_id: str) -> bool:
        """
        Drop a revocation record.

        Returns:
            True if a record was removed, False if none existed
        """
        async with self._lock:
            if session_id in self._deny_list:
                del self._deny_list[session_id]
                logger.debug(f"Removed session {session_id} from deny list")
                return True
            return False

    async def count(self) -> int:
        """Count revocation records."""
        async with self._lock:
            return len(self._deny_list)

    async def clear(self) -> int:
        """
        Clear all revocation records.

        Returns:
            Number of records cleared
        """
        async with self._lock:
            count = len(self._deny_list)
            self._deny_list.clear()
            logger.info(f"Cleared {count} records from memory deny list")
            return count


def create_memory_store() -> MemoryTokenStore:
    """Create an empty in-memory token store."""
    return MemoryTokenStore()
