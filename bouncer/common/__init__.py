"""
Common package providing shared helpers for Bouncer.
"""

from .utils import (
    generate_session_id,
    current_time_ms,
    to_epoch_ms,
    from_epoch_ms,
)

__all__ = [
    "generate_session_id",
    "current_time_ms",
    "to_epoch_ms",
    "from_epoch_ms",
]
