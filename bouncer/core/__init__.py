"""
Core Bouncer functionality.
"""

from .types import Token, ParsedToken, TOKEN_SEPARATOR
from .config import BouncerConfig
from .bouncer import Bouncer

__all__ = ["Bouncer", "BouncerConfig", "Token", "ParsedToken", "TOKEN_SEPARATOR"]
