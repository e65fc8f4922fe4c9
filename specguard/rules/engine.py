"""
Execution engine for compiled specification rules.
"""

from collections.abc import Sequence

import structlog

from specguard.core.models import ViolationRecord
from specguard.core.utils.logging import log_operation
from specguard.rules.linker import ExecutableRule

logger = structlog.get_logger(__name__)


def execute_rule(rule: ExecutableRule, content: str, language: str) -> list[ViolationRecord]:
    """Run one rule: its matcher, then its action over every match."""
    return [rule.action.create_violation(match) for match in rule.matcher.find_matches(content, language)]


def execute(rules: Sequence[ExecutableRule], content: str, language: str) -> list[ViolationRecord]:
    """
    Run executable rules against a content buffer.

    Violations are ordered by rule order, then by match order within a rule.
    A rule whose matcher or action raises contributes nothing; the remaining
    rules still run.

    Args:
        rules: Executable rules in registration order.
        content: Source text to scan.
        language: Language tag passed through to matchers.

    Returns:
        The violations produced by all rules that ran cleanly.
    """
    violations: list[ViolationRecord] = []

    with log_operation("rule_execute", rules=len(rules), language=language):
        for rule in rules:
            try:
                violations.extend(execute_rule(rule, content, language))
            except Exception as e:
                logger.warning(
                    "rule_execution_failed",
                    rule_id=rule.id,
                    matcher=rule.matcher.kind,
                    error=str(e),
                    exc_info=True,
                )

    logger.debug("rules_executed", rules=len(rules), violations=len(violations))
    return violations
