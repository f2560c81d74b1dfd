"""
Token package for Bouncer.

Provides the payload codec and the detached signature engine used to build
and check encoded session tokens.
"""

from .codec import TokenCodec, REQUIRED_FIELDS
from .signature import (
    SignatureEngine,
    load_private_key,
    load_public_key,
)

__all__ = [
    "TokenCodec",
    "REQUIRED_FIELDS",
    "SignatureEngine",
    "load_private_key",
    "load_public_key",
]
