"""
Consistency checks over a compiled rule collection.

Validation only reports: duplicate identifiers and low confidence become
warnings, incomplete rules become errors, and no rule is renamed or removed.
"""

from collections import Counter
from collections.abc import Iterable

from pydantic import BaseModel, Field

from specguard.core.constants import LOW_CONFIDENCE_THRESHOLD
from specguard.rules.models import ParsedRule, ParseError


class ValidationReport(BaseModel):
    warnings: list[str] = Field(default_factory=list)
    errors: list[ParseError] = Field(default_factory=list)


def validate_rules(rules: Iterable[ParsedRule]) -> ValidationReport:
    """
    Validate rule consistency and completeness.

    Args:
        rules: Parsed rules in compilation order.

    Returns:
        Warnings for duplicate identifiers and low-confidence rules, errors for
        rules missing a condition or an action.
    """
    report = ValidationReport()
    seen: Counter[str] = Counter()

    for rule in rules:
        if seen[rule.id] > 0:
            report.warnings.append(f"Duplicate rule ID found: {rule.id}")
        seen[rule.id] += 1

        if rule.condition is None or rule.action is None:
            report.errors.append(
                ParseError(
                    line=0,
                    column=0,
                    message=f"Incomplete rule: {rule.id}",
                    original_text=rule.metadata.original_text,
                    suggestion="Ensure rule has both condition and action",
                )
            )

        if rule.confidence < LOW_CONFIDENCE_THRESHOLD:
            report.warnings.append(f"Low confidence rule: {rule.id} ({round(rule.confidence * 100)}%)")

    return report
