"""
Detached signatures for Bouncer tokens.

Signs and verifies opaque string payloads with an asymmetric key pair and
SHA-256. RSA keys use PKCS#1 v1.5 padding, elliptic curve keys use ECDSA.
"""

from typing import Optional, Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, padding, rsa

from ..errors import ConfigurationError, ErrorCode
from ..util.encoding import base64_decode, base64_encode

PrivateKey = Union[rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey]
PublicKey = Union[rsa.RSAPublicKey, ec.EllipticCurvePublicKey]
KeyMaterial = Union[str, bytes]


def _to_bytes(value: KeyMaterial) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return value


def load_private_key(pem: KeyMaterial, passphrase: Optional[KeyMaterial] = None) -> PrivateKey:
    """
    Parse a PEM private key, decrypting it with ``passphrase`` if given.

    Raises:
        ConfigurationError: If the PEM is unreadable, the passphrase is wrong
            or missing, or the key type is not RSA or EC
    """
    password = _to_bytes(passphrase) if passphrase else None
    try:
        key = serialization.load_pem_private_key(_to_bytes(pem), password=password)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ConfigurationError(
            f"Unable to load private key: {e}", ErrorCode.INVALID_KEY, cause=e
        )

    if not isinstance(key, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey)):
        raise ConfigurationError(
            f"Unsupported private key type: {type(key).__name__}",
            ErrorCode.UNSUPPORTED_KEY_TYPE,
        )
    return key


def load_public_key(pem: KeyMaterial) -> PublicKey:
    """
    Parse a PEM public key.

    Raises:
        ConfigurationError: If the PEM is unreadable or the key type is not RSA or EC
    """
    try:
        key = serialization.load_pem_public_key(_to_bytes(pem))
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise ConfigurationError(
            f"Unable to load public key: {e}", ErrorCode.INVALID_KEY, cause=e
        )

    if not isinstance(key, (rsa.RSAPublicKey, ec.EllipticCurvePublicKey)):
        raise ConfigurationError(
            f"Unsupported public key type: {type(key).__name__}",
            ErrorCode.UNSUPPORTED_KEY_TYPE,
        )
    return key


def _public_der(key: PublicKey) -> bytes:
    return key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


class SignatureEngine:
    """
    Produces and verifies detached SHA-256 signatures.

    The engine holds its keys for its whole lifetime and never exposes them.
    """

    def __init__(self, private_key: PrivateKey, public_key: PublicKey):
        """
        Initialize signature engine.

        Args:
            private_key: Parsed RSA or EC private key used for signing
            public_key: Parsed public key used for verification; must belong
                to ``private_key``

        Raises:
            ConfigurationError: If the public key does not match the private key
        """
        if _public_der(private_key.public_key()) != _public_der(public_key):
            raise ConfigurationError(
                "Public key does not match private key", ErrorCode.KEY_MISMATCH
            )

        self._private_key = private_key
        self._public_key = public_key

    @classmethod
    def from_pem(
        cls,
        private_pem: KeyMaterial,
        public_pem: KeyMaterial,
        passphrase: Optional[KeyMaterial] = None,
    ) -> "SignatureEngine":
        """Create an engine from PEM-encoded keys."""
        return cls(load_private_key(private_pem, passphrase), load_public_key(public_pem))

    @property
    def algorithm(self) -> str:
        """Short name of the signature scheme in use."""
        if isinstance(self._private_key, rsa.RSAPrivateKey):
            return "RS256"
        return "ES256"

    def sign(self, payload: str) -> str:
        """Sign the UTF-8 bytes of ``payload`` and return base64 signature."""
        message = payload.encode('utf-8')

        if isinstance(self._private_key, rsa.RSAPrivateKey):
            signature = self._private_key.sign(message, padding.PKCS1v15(), hashes.SHA256())
        else:
            signature = self._private_key.sign(message, ec.ECDSA(hashes.SHA256()))

        return base64_encode(signature)

    def verify(self, payload: str, signature: str) -> bool:
        """
        Verify a base64 ``signature`` over ``payload``.

        Returns:
            True if the signature matches, False for any mismatch or
            undecodable input
        """
        if not isinstance(payload, str) or not isinstance(signature, str):
            return False

        try:
            raw_signature = base64_decode(signature)
        except ValueError:
            return False

        try:
            message = payload.encode('utf-8')
            if isinstance(self._public_key, rsa.RSAPublicKey):
                self._public_key.verify(raw_signature, message, padding.PKCS1v15(), hashes.SHA256())
            else:
                self._public_key.verify(raw_signature, message, ec.ECDSA(hashes.SHA256()))
        except (InvalidSignature, ValueError, TypeError):
            return False

        return True
