"""
Condition and action synthesis from free-text rule fragments.

Each heuristic is a substring or regex test applied in a fixed order, and
the first one that fires decides the condition kind. Phrases that fit none
of them become a literal pattern on the phrase.
"""

import re

import structlog

from specguard.rules.lexicon import (
    DECLARATION_PHRASES,
    KNOWN_LITERALS,
    METRIC_COMPARISON,
    MORE_THAN,
    PATTERN_VERB,
    classify_action,
)
from specguard.rules.models import (
    ActionType,
    MetricCondition,
    MetricOperator,
    PatternCondition,
    RuleAction,
    RuleCondition,
)

logger = structlog.get_logger(__name__)

FUNCTION_LENGTH_METRIC = "function lines"
PATTERN_VERBS: tuple[str, ...] = ("contains", "includes", "has")


def literal_pattern(text: str) -> PatternCondition:
    """Case-insensitive pattern matching `text` literally."""
    return PatternCondition(pattern=re.compile(re.escape(text), re.IGNORECASE))


def parse_condition(condition_text: str) -> RuleCondition:
    """
    Turn a condition phrase into a typed condition.

    Args:
        condition_text: The fragment between WHEN/IF and THEN.

    Returns:
        A metric or pattern condition.
    """
    text = condition_text.strip().lower()

    metric_match = METRIC_COMPARISON.search(text)
    if metric_match:
        return MetricCondition(
            name=metric_match.group(1).strip(),
            operator=MetricOperator(metric_match.group(2)),
            threshold=float(metric_match.group(3)),
        )

    for literal in KNOWN_LITERALS:
        if literal in text:
            return literal_pattern(literal)

    for phrase, token_pattern in DECLARATION_PHRASES.items():
        if phrase in text:
            return PatternCondition(pattern=re.compile(token_pattern, re.IGNORECASE))

    if "function" in text and "more than" in text:
        number_match = MORE_THAN.search(text)
        if number_match:
            return MetricCondition(
                name=FUNCTION_LENGTH_METRIC,
                operator=MetricOperator.GT,
                threshold=float(number_match.group(1)),
            )

    if any(verb in text for verb in PATTERN_VERBS):
        remainder = PATTERN_VERB.sub("", text, count=1)
        return literal_pattern(remainder)

    logger.debug("condition_defaulted_to_literal", condition=text)
    return literal_pattern(text)


def parse_action(action_text: str) -> RuleAction:
    """
    Classify an action phrase and derive its suggestion text.

    The phrase itself is kept verbatim as the action message.
    """
    text = action_text.strip()
    action_type = classify_action(text)

    if action_type == ActionType.WARNING:
        suggestion = f"Consider addressing: {text}"
    elif action_type == ActionType.SUGGESTION:
        suggestion = text
    else:
        suggestion = f"Fix: {text}"

    return RuleAction(type=action_type, message=text, suggestion=suggestion)
