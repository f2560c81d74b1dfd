"""
Main Bouncer implementation.

Bouncer issues signed session tokens, revokes them through a deny list and
validates them. It also gates subjects through a Ruleset. Validation never
raises for bad input: a token is either accepted (True) or not (False).
"""

import logging
from datetime import datetime
from typing import Optional, Union

from .config import BouncerConfig
from .types import ParsedToken, Token, UserId
from ..authz.ruleset import Ruleset
from ..authz.types import Subject
from ..common.utils import current_time_ms, generate_session_id, to_epoch_ms
from ..errors import MalformedTokenError
from ..token.codec import TokenCodec
from ..token.signature import KeyMaterial, SignatureEngine
from ..tokenstore.store import TokenStore

logger = logging.getLogger(__name__)


class Bouncer:
    """
    Issues, revokes and validates session tokens.

    The key pair is parsed once here and held for the lifetime of the
    instance. The token store is held by reference and only queried.
    """

    def __init__(
        self,
        token_store: TokenStore,
        private_key: KeyMaterial,
        public_key: KeyMaterial,
        passphrase: Optional[KeyMaterial] = None,
        *,
        strict_payload: bool = False,
    ):
        """
        Initialize Bouncer.

        Args:
            token_store: Deny-list collaborator
            private_key: PEM private key, optionally passphrase protected
            public_key: PEM public key belonging to ``private_key``
            passphrase: Passphrase for an encrypted private key
            strict_payload: Raise instead of returning False when a payload
                with a valid signature cannot be decoded

        Raises:
            ConfigurationError: If the keys cannot be loaded or do not match
        """
        self.token_store = token_store
        self.strict_payload = strict_payload
        self._codec = TokenCodec()
        self._signer = SignatureEngine.from_pem(private_key, public_key, passphrase)
        logger.info(f"Bouncer initialized with {self._signer.algorithm} signatures")

    @classmethod
    def from_config(cls, token_store: TokenStore, config: BouncerConfig) -> "Bouncer":
        """
        Create a Bouncer from a validated configuration.

        Raises:
            ConfigurationError: If the configuration is incomplete or the keys are invalid

        Example:
            bouncer = Bouncer.from_config(MemoryTokenStore(), BouncerConfig.from_env())
        """
        config.validate()
        return cls(
            token_store,
            config.private_key,
            config.public_key,
            config.passphrase,
            strict_payload=config.strict_payload,
        )

    def create_token(self, user_id: UserId, expiration: Union[datetime, int]) -> str:
        """
        Issue a signed token for ``user_id``.

        Args:
            user_id: Caller identifier, a string or an integer
            expiration: Absolute expiry as a datetime or millisecond timestamp

        Returns:
            Encoded token ``<payload>.<signature>``

        Raises:
            TypeError: If ``user_id`` or ``expiration`` has an unsupported type
        """
        if isinstance(user_id, bool) or not isinstance(user_id, (str, int)):
            raise TypeError(f"user_id must be a string or an integer, got {type(user_id).__name__}")

        token = Token(
            session_id=generate_session_id(),
            user_id=user_id,
            expiration_time=to_epoch_ms(expiration),
        )
        payload = self._codec.encode(token)
        signature = self._signer.sign(payload)
        return str(ParsedToken(payload=payload, signature=signature))

    async def revoke_token(self, session_id: str) -> bool:
        """
        Add a session to the deny list.

        Revoking an unknown or already revoked session is not an error.

        Args:
            session_id: Session identifier from a token

        Returns:
            The token store's result
        """
        revoked = await self.token_store.add_to_deny_list(session_id, current_time_ms())
        if revoked:
            logger.info(f"Revoked session {session_id}")
        else:
            logger.warning(f"Token store refused to revoke session {session_id}")
        return revoked

    async def revoke_encoded_token(self, encoded_token: str) -> bool:
        """
        Revoke the session carried by an encoded token.

        Returns:
            False for empty or unverifiable tokens, otherwise the token store's result
        """
        token = self.read_token(encoded_token)
        if token is None:
            return False
        return await self.revoke_token(token.session_id)

    def read_token(self, encoded_token: str) -> Optional[Token]:
        """
        Verify the signature of an encoded token and decode it.

        Expiration and the deny list are not checked.

        Returns:
            The Token, or None if the token is malformed or its signature does not verify
        """
        try:
            parsed = ParsedToken.from_string(encoded_token)
        except MalformedTokenError:
            logger.debug("Rejected token: not two non-empty parts")
            return None

        if not self._signer.verify(parsed.payload, parsed.signature):
            logger.debug("Rejected token: signature mismatch")
            return None

        try:
            return self._codec.decode(parsed.payload)
        except MalformedTokenError as e:
            logger.error(f"Token with a valid signature has an undecodable payload: {e}")
            if self.strict_payload:
                raise
            return None

    async def validate_token(self, encoded_token: str) -> bool:
        """
        Check that a token is authentic, unexpired and not revoked.

        The signature is verified before anything in the payload is trusted.

        Args:
            encoded_token: Token as returned by ``create_token``

        Returns:
            True if the token is valid, False otherwise

        Raises:
            MalformedTokenError: Only with ``strict_payload`` enabled, for a
                signed payload that cannot be decoded
        """
        if not isinstance(encoded_token, str) or not encoded_token:
            logger.debug("Rejected token: empty")
            return False

        token = self.read_token(encoded_token)
        if token is None:
            return False

        if token.is_expired(current_time_ms()):
            logger.debug(f"Rejected token: session {token.session_id} expired")
            return False

        if await self.token_store.is_on_deny_list(token.session_id):
            logger.debug(f"Rejected token: session {token.session_id} revoked")
            return False

        return True

    async def validate_user(self, subject: Subject, ruleset: Ruleset) -> bool:
        """
        Evaluate ``subject`` against ``ruleset``.

        Sync rules run first; async rules are never invoked if a sync rule
        rejects the subject.

        Returns:
            True if every rule accepts the subject
        """
        if not ruleset.evaluate_sync(subject):
            return False
        return await ruleset.evaluate_async(subject)
