"""
Package authz implements rule-based authorization of arbitrary subjects.
"""

from .types import (
    Subject,
    SyncRule,
    AsyncRule,
)

from .ruleset import Ruleset

__all__ = [
    'Subject',
    'SyncRule',
    'AsyncRule',
    'Ruleset',
]
