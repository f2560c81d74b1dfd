"""
Bouncer Python Package

Signed session tokens with deny-list revocation, and composable
authorization rules.
"""

__version__ = "0.2.0"

from .core.bouncer import Bouncer
from .core.config import BouncerConfig
from .core.types import Token, ParsedToken
from .authz.ruleset import Ruleset
from .tokenstore.store import TokenStore
from .tokenstore.memory import MemoryTokenStore
from .errors import (
    BouncerError,
    ConfigurationError,
    MalformedTokenError,
    TokenStoreError,
)

__all__ = [
    "Bouncer",
    "BouncerConfig",
    "Token",
    "ParsedToken",
    "Ruleset",
    "TokenStore",
    "MemoryTokenStore",
    "BouncerError",
    "ConfigurationError",
    "MalformedTokenError",
    "TokenStoreError",
]
