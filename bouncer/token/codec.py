"""
Token codec for Bouncer.

Converts a Token to and from its transport payload: compact JSON encoded as
standard base64. No cryptography happens here.
"""

import math
from typing import Any, Dict

from ..core.types import Token
from ..errors import MalformedTokenError
from ..util.encoding import decode_json_base64, encode_json_base64

REQUIRED_FIELDS = ('sessionId', 'userId', 'expirationTime')


class TokenCodec:
    """Serializes tokens to base64 JSON payloads and back."""

    def encode(self, token: Token) -> str:
        """Encode ``token`` as a base64 JSON payload."""
        return encode_json_base64(token.to_dict())

    def decode(self, payload: str) -> Token:
        """
        Decode a base64 JSON payload into a Token.

        Args:
            payload: Base64 payload produced by ``encode``

        Returns:
            Decoded Token

        Raises:
            MalformedTokenError: If the payload is not base64 JSON, or a field
                is missing or has the wrong type
        """
        try:
            data = decode_json_base64(payload)
        except ValueError as e:
            raise MalformedTokenError(f"Token payload could not be decoded: {e}", cause=e)

        if not isinstance(data, dict):
            raise MalformedTokenError("Token payload is not a JSON object")

        missing = [name for name in REQUIRED_FIELDS if name not in data]
        if missing:
            raise MalformedTokenError(
                f"Token payload is missing fields: {', '.join(missing)}",
                details={'missing': missing},
            )

        self._check_types(data)

        return Token(
            session_id=data['sessionId'],
            user_id=data['userId'],
            expiration_time=int(data['expirationTime']),
        )

    @staticmethod
    def _check_types(data: Dict[str, Any]) -> None:
        session_id = data['sessionId']
        if not isinstance(session_id, str) or not session_id:
            raise MalformedTokenError("sessionId must be a non-empty string")

        # bool is a subclass of int
        user_id = data['userId']
        if isinstance(user_id, bool) or not isinstance(user_id, (str, int)):
            raise MalformedTokenError("userId must be a string or an integer")

        expiration = data['expirationTime']
        if isinstance(expiration, bool) or not isinstance(expiration, (int, float)):
            raise MalformedTokenError("expirationTime must be a number")
        if isinstance(expiration, float) and not math.isfinite(expiration):
            raise MalformedTokenError("expirationTime must be finite")
        if isinstance(expiration, float) and not expiration.is_integer():
            raise MalformedTokenError("expirationTime must be a whole number of milliseconds")
