"""
Registry of executable rule sets, keyed by team or standard identifier.

Rule sets are stored as tuples and replaced whole, under a lock owned by the
identifier, so a reader sees either the previous set or the new one.
"""

import threading
from collections.abc import Iterable

import structlog

from specguard.rules.linker import ExecutableRule

logger = structlog.get_logger(__name__)


class RuleRegistry:
    """Holds the executable rules loaded for each identifier."""

    def __init__(self) -> None:
        self._rules: dict[str, tuple[ExecutableRule, ...]] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _lock_for(self, identifier: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(identifier)
            if lock is None:
                lock = self._locks[identifier] = threading.Lock()
            return lock

    def register(self, identifier: str, rules: Iterable[ExecutableRule]) -> None:
        """Replace the rule set for `identifier`."""
        rule_set = tuple(rules)
        with self._lock_for(identifier):
            self._rules[identifier] = rule_set
        logger.info("rules_registered", identifier=identifier, rules=len(rule_set))

    def get(self, identifier: str) -> tuple[ExecutableRule, ...]:
        """Rules for `identifier`, or an empty tuple when none are loaded."""
        with self._lock_for(identifier):
            return self._rules.get(identifier, ())

    def clear(self, identifier: str) -> bool:
        with self._lock_for(identifier):
            existed = self._rules.pop(identifier, None) is not None
        if existed:
            logger.info("rules_cleared", identifier=identifier)
        return existed

    def identifiers(self) -> list[str]:
        return list(self._rules)
