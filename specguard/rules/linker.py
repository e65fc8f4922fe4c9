"""
Links parsed rules into executable form.

Every usable ParsedRule becomes an ExecutableRule holding a matcher for its
condition and an action executor for its action.
"""

import uuid
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import structlog

from specguard.core.constants import SPEC_RULE_TAG
from specguard.core.models import Severity, ViolationRecord
from specguard.core.utils.logging import log_operation
from specguard.rules.metrics import calculate_metric, compare_metric
from specguard.rules.models import (
    CustomCondition,
    MatchRecord,
    MetricCondition,
    ParsedRule,
    PatternCondition,
    RuleAction,
    RuleCondition,
)

logger = structlog.get_logger(__name__)


class RuleMatcher(ABC):
    """Abstract base class for condition matchers.

    Matchers scan content and return one MatchRecord per hit, in content order.
    """

    kind: str = ""

    @abstractmethod
    def find_matches(self, content: str, language: str) -> list[MatchRecord]:
        """Scan `content` written in `language` and return the hits."""
        pass


class PatternMatcher(RuleMatcher):
    """Reports every line on which the pattern is found, at its first occurrence."""

    kind = "pattern"

    def __init__(self, condition: PatternCondition):
        self.pattern = condition.pattern

    def find_matches(self, content: str, language: str) -> list[MatchRecord]:
        matches: list[MatchRecord] = []
        for index, line in enumerate(content.split("\n"), start=1):
            found = self.pattern.search(line)
            if found:
                matches.append(MatchRecord(line=index, column=found.start(), text=found.group(0), context=line))
        return matches


class MetricMatcher(RuleMatcher):
    """Reports a single file-level hit when the metric comparison holds."""

    kind = "metric"

    def __init__(self, condition: MetricCondition):
        self.condition = condition

    def find_matches(self, content: str, language: str) -> list[MatchRecord]:
        value = calculate_metric(content, self.condition.name)
        if not compare_metric(value, self.condition.operator, self.condition.threshold):
            return []
        return [MatchRecord(line=1, column=1, text=f"{self.condition.name}: {value}", context="File-level metric")]


class CustomMatcher(RuleMatcher):
    kind = "custom"

    def __init__(self, condition: CustomCondition):
        self.predicate = condition.predicate

    def find_matches(self, content: str, language: str) -> list[MatchRecord]:
        if not self.predicate(content, language):
            return []
        return [MatchRecord(line=1, column=1, text="Custom condition matched", context="File-level check")]


class ViolationAction:
    """Turns match records into violation records for one rule."""

    def __init__(self, action: RuleAction, severity: Severity, fallback_message: str):
        self.action = action
        self.severity = severity
        self.fallback_message = fallback_message

    def create_violation(self, match: MatchRecord) -> ViolationRecord:
        return ViolationRecord(
            id=f"spec_rule_{uuid.uuid4().hex[:12]}",
            severity=self.severity,
            message=self.action.message or self.fallback_message,
            line=match.line,
            column=match.column,
            rule=SPEC_RULE_TAG,
            suggestion=self.action.suggestion,
        )


@dataclass(frozen=True)
class ExecutableRuleMetadata:
    original_rule: ParsedRule
    compiled_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True)
class ExecutableRule:
    """A compiled rule ready to run against content."""

    id: str
    matcher: RuleMatcher
    action: ViolationAction
    metadata: ExecutableRuleMetadata


def create_matcher(condition: RuleCondition) -> RuleMatcher:
    if isinstance(condition, PatternCondition):
        return PatternMatcher(condition)
    if isinstance(condition, MetricCondition):
        return MetricMatcher(condition)
    if isinstance(condition, CustomCondition):
        return CustomMatcher(condition)
    raise TypeError(f"Unsupported condition type: {type(condition).__name__}")


def link_rule(rule: ParsedRule) -> ExecutableRule:
    """
    Convert one parsed rule into executable form.

    Raises:
        ValueError: If the rule lacks a condition or an action.
    """
    if rule.condition is None or rule.action is None:
        raise ValueError(f"Incomplete rule cannot be linked: {rule.id}")

    return ExecutableRule(
        id=rule.id,
        matcher=create_matcher(rule.condition),
        action=ViolationAction(rule.action, rule.severity, rule.message),
        metadata=ExecutableRuleMetadata(original_rule=rule),
    )


def link_rules(rules: Iterable[ParsedRule]) -> list[ExecutableRule]:
    """
    Convert parsed rules to executable rules, preserving order.

    Incomplete rules are skipped with a warning; the validator has already
    reported them as errors.
    """
    executable: list[ExecutableRule] = []
    with log_operation("rule_link"):
        for rule in rules:
            if rule.condition is None or rule.action is None:
                logger.warning("incomplete_rule_skipped", rule_id=rule.id)
                continue
            executable.append(link_rule(rule))
    return executable
