"""
Token store interface for Bouncer.

The token store holds the deny list: session ids that were explicitly
revoked, each with the time of revocation. Bouncer only calls into it and
never iterates or owns its contents.
"""

from abc import ABC, abstractmethod


class TokenStore(ABC):
    """
    Abstract base class for deny-list storage implementations.

    Implementations shared between bouncers, threads or processes must make
    their own operations safe for concurrent use.
    """

    @abstractmethod
    async def add_to_deny_list(self, session_id: str, timestamp: int) -> bool:
        """
        Record that a session was revoked.

        Args:
            session_id: Session identifier taken from a token
            timestamp: Revocation time in milliseconds since the epoch

        Returns:
            True if the revocation was recorded, False otherwise

        Raises:
            Exception: Storage failures propagate to the caller
        """
        pass

    @abstractmethod
    async def is_on_deny_list(self, session_id: str) -> bool:
        """
        Check whether a session was revoked.

        Args:
            session_id: Session identifier taken from a token

        Returns:
            True if a revocation record exists, False otherwise
        """
        pass
