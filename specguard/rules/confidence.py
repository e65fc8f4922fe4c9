from collections.abc import Sequence

from specguard.core.constants import USABLE_CONFIDENCE_THRESHOLD
from specguard.rules.models import ParsedRule


def overall_confidence(rules: Sequence[ParsedRule], error_count: int, total_statements: int) -> float:
    """
    Combine the parse success rate with the mean rule confidence.

    Returns 0.0 for a specification without statements.
    """
    if total_statements == 0:
        return 0.0

    success_rate = (total_statements - error_count) / total_statements
    avg_rule_confidence = sum(rule.confidence for rule in rules) / len(rules) if rules else 0.0
    # Validation errors are counted too, so the rate can dip below zero
    return min(1.0, max(0.0, (success_rate + avg_rule_confidence) / 2))


def usable_rules(rules: Sequence[ParsedRule]) -> list[ParsedRule]:
    """Rules confident enough to be linked and executed."""
    return [rule for rule in rules if rule.confidence > USABLE_CONFIDENCE_THRESHOLD]
