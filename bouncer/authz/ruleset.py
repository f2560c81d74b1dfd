"""
Composable authorization rules for Bouncer.

A ruleset holds two ordered collections of predicates, one synchronous and
one asynchronous, and evaluates a subject against them. Evaluation stops at
the first rule that rejects the subject.
"""

import inspect
import logging
from typing import Dict, Iterable, Optional, Tuple

from .types import AsyncRule, Subject, SyncRule

logger = logging.getLogger(__name__)


class Ruleset:
    """
    Ordered, identity-unique collections of sync and async rules.

    Rules are keyed by ``id()`` so adding the same callable twice is a no-op
    and insertion order is preserved.

    Example:
        ruleset = (
            Ruleset()
            .add_sync_rule(lambda user: user["active"])
            .add_async_rule(has_paid_subscription)
        )
        allowed = ruleset.evaluate_sync(user) and await ruleset.evaluate_async(user)
    """

    def __init__(
        self,
        sync_rules: Optional[Iterable[SyncRule]] = None,
        async_rules: Optional[Iterable[AsyncRule]] = None,
    ):
        self._sync_rules: Dict[int, SyncRule] = {}
        self._async_rules: Dict[int, AsyncRule] = {}

        for rule in sync_rules or ():
            self.add_sync_rule(rule)
        for rule in async_rules or ():
            self.add_async_rule(rule)

    @staticmethod
    def _add(rules: Dict[int, object], rule) -> None:
        if not callable(rule):
            raise TypeError(f"Rule must be callable, got {type(rule).__name__}")
        rules.setdefault(id(rule), rule)

    @staticmethod
    def _delete(rules: Dict[int, object], rule) -> bool:
        if rules.get(id(rule)) is rule:
            del rules[id(rule)]
            return True
        return False

    @property
    def sync_rules(self) -> Tuple[SyncRule, ...]:
        """Sync rules in insertion order."""
        return tuple(self._sync_rules.values())

    @property
    def async_rules(self) -> Tuple[AsyncRule, ...]:
        """Async rules in insertion order."""
        return tuple(self._async_rules.values())

    def add_sync_rule(self, rule: SyncRule) -> "Ruleset":
        """Add a synchronous rule. Returns self for chaining."""
        self._add(self._sync_rules, rule)
        return self

    def add_async_rule(self, rule: AsyncRule) -> "Ruleset":
        """Add an asynchronous rule. Returns self for chaining."""
        self._add(self._async_rules, rule)
        return self

    def has_sync_rule(self, rule: SyncRule) -> bool:
        """Check if this exact callable is a sync rule."""
        return self._sync_rules.get(id(rule)) is rule

    def has_async_rule(self, rule: AsyncRule) -> bool:
        """Check if this exact callable is an async rule."""
        return self._async_rules.get(id(rule)) is rule

    def delete_sync_rule(self, rule: SyncRule) -> bool:
        """Remove a sync rule. Returns True if it was present."""
        return self._delete(self._sync_rules, rule)

    def delete_async_rule(self, rule: AsyncRule) -> bool:
        """Remove an async rule. Returns True if it was present."""
        return self._delete(self._async_rules, rule)

    def clear_sync_rules(self) -> None:
        """Remove all sync rules."""
        self._sync_rules.clear()

    def clear_async_rules(self) -> None:
        """Remove all async rules."""
        self._async_rules.clear()

    def evaluate_sync(self, subject: Subject) -> bool:
        """
        Evaluate sync rules in insertion order.

        Args:
            subject: Caller data passed to each rule

        Returns:
            False as soon as a rule returns a falsy value, True otherwise
            (including when there are no rules)
        """
        for index, rule in enumerate(self.sync_rules):
            if not rule(subject):
                logger.debug(f"Sync rule {index} rejected subject")
                return False
        return True

    async def evaluate_async(self, subject: Subject) -> bool:
        """
        Evaluate async rules one at a time, in insertion order.

        Each rule is awaited before the next one is invoked. A rule that
        returns a plain value instead of an awaitable is taken at its word.

        Args:
            subject: Caller data passed to each rule

        Returns:
            False as soon as a rule resolves to a falsy value, True otherwise
            (including when there are no rules)
        """
        for index, rule in enumerate(self.async_rules):
            result = rule(subject)
            if inspect.isawaitable(result):
                result = await result
            if not result:
                logger.debug(f"Async rule {index} rejected subject")
                return False
        return True

    def __len__(self) -> int:
        return len(self._sync_rules) + len(self._async_rules)

    def __repr__(self) -> str:
        return (
            f"Ruleset(sync_rules={len(self._sync_rules)}, "
            f"async_rules={len(self._async_rules)})"
        )
