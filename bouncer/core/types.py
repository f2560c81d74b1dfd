"""
Core types for Bouncer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Union

from ..common.utils import current_time_ms, from_epoch_ms
from ..errors import MalformedTokenError

UserId = Union[str, int]

# Separator between the payload and signature halves of an encoded token
TOKEN_SEPARATOR = "."


@dataclass(frozen=True)
class Token:
    """
    Session token record.

    ``session_id`` is minted by the bouncer when the token is created.
    ``expiration_time`` is an absolute instant in milliseconds since the epoch.
    """
    session_id: str
    user_id: UserId
    expiration_time: int

    @property
    def expires_at(self) -> datetime:
        """Expiration as an aware UTC datetime."""
        return from_epoch_ms(self.expiration_time)

    def is_expired(self, now_ms: Optional[int] = None) -> bool:
        """Check if the token expired before ``now_ms`` (defaults to now)."""
        if now_ms is None:
            now_ms = current_time_ms()
        return self.expiration_time < now_ms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire dictionary representation."""
        return {
            'sessionId': self.session_id,
            'userId': self.user_id,
            'expirationTime': self.expiration_time,
        }


@dataclass(frozen=True)
class ParsedToken:
    """The base64 payload and signature halves of an encoded token."""
    payload: str
    signature: str

    @classmethod
    def from_string(cls, encoded_token: str) -> 'ParsedToken':
        """
        Split an encoded token into its payload and signature.

        Args:
            encoded_token: ``<payload>.<signature>`` string

        Returns:
            ParsedToken instance

        Raises:
            MalformedTokenError: Unless the split yields exactly two non-empty parts
        """
        if not isinstance(encoded_token, str) or not encoded_token:
            raise MalformedTokenError("Token is empty")

        parts = encoded_token.split(TOKEN_SEPARATOR)
        if len(parts) != 2 or not all(parts):
            raise MalformedTokenError(
                "Token must have exactly two non-empty parts",
                details={'parts': len(parts)},
            )

        return cls(payload=parts[0], signature=parts[1])

    def __str__(self) -> str:
        return f"{self.payload}{TOKEN_SEPARATOR}{self.signature}"
