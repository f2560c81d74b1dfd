"""
Common utilities and helper functions for Bouncer.
"""

import time
import uuid
from datetime import datetime, timedelta, timezone
from typing import Union


def generate_session_id() -> str:
    """Generate a random 128-bit session identifier (UUID4)."""
    return str(uuid.uuid4())


def current_time_ms() -> int:
    """Current time as milliseconds since the Unix epoch."""
    return int(time.time() * 1000)


def to_epoch_ms(value: Union[datetime, int]) -> int:
    """
    Convert an instant to milliseconds since the Unix epoch.

    Naive datetimes are interpreted as local time, aware ones are honoured.

    Args:
        value: ``datetime`` or an integer millisecond timestamp

    Returns:
        Milliseconds since the Unix epoch

    Raises:
        TypeError: If value is neither a datetime nor an int
    """
    if isinstance(value, bool):
        raise TypeError("Expiration must be a datetime or an integer timestamp")
    if isinstance(value, datetime):
        return int(round(value.timestamp() * 1000))
    if isinstance(value, int):
        return value
    raise TypeError(
        f"Expiration must be a datetime or an integer timestamp, got {type(value).__name__}"
    )


def from_epoch_ms(value: int) -> datetime:
    """Convert a millisecond epoch timestamp to an aware UTC datetime."""
    seconds, millis = divmod(int(value), 1000)
    return datetime.fromtimestamp(seconds, tz=timezone.utc) + timedelta(milliseconds=millis)
