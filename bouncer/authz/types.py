"""
Rule types for Bouncer authorization.

Subjects are opaque to Bouncer; rules decide what they need from them.
"""

from typing import Any, Awaitable, Callable, Union

Subject = Any

SyncRule = Callable[[Subject], bool]
AsyncRule = Callable[[Subject], Union[Awaitable[bool], bool]]
