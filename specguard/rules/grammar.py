"""
Grammar templates for specification statements.

Each template pairs a structural regex with a fixed confidence weight and a
builder. Templates are tried in the order of `BUILTIN_TEMPLATES`; the first one
whose regex matches a statement decides how it is compiled.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from specguard.core.models import Severity
from specguard.rules.lexicon import map_severity, scan_severity
from specguard.rules.models import (
    ActionType,
    CustomCondition,
    ParsedRule,
    PatternCondition,
    RuleAction,
    RuleMetadata,
)
from specguard.rules.predicates import ALWAYS_MATCH, NEVER_MATCH
from specguard.rules.synthesizer import parse_action, parse_condition

RuleBuilder = Callable[[re.Match[str], str, RuleMetadata], ParsedRule]


@dataclass(frozen=True)
class GrammarTemplate:
    """A named phrasing style the compiler recognises."""

    name: str
    pattern: re.Pattern[str]
    confidence: float
    builder: RuleBuilder

    def match(self, text: str) -> re.Match[str] | None:
        return self.pattern.search(text)


def _build_conditional_rule(match: re.Match[str], rule_id: str, metadata: RuleMetadata) -> ParsedRule:
    """Shared builder for WHEN/THEN and IF/THEN statements."""
    condition_text = match.group(1).strip()
    action_text = match.group(2).strip()
    severity_text = match.group(3)
    severity = map_severity(severity_text) if severity_text else Severity.WARNING

    return ParsedRule(
        id=rule_id,
        condition=parse_condition(condition_text),
        action=parse_action(action_text),
        severity=severity,
        message=f"{condition_text} - {action_text}",
        metadata=metadata,
    )


def build_function_rule(match: re.Match[str], rule_id: str, metadata: RuleMetadata) -> ParsedRule:
    target = match.group(2).strip()
    severity = map_severity(match.group(3))
    requirement = match.group(4).strip()
    message = f"Function {target} {requirement}"

    # The target is a regex fragment; an invalid one fails the build
    return ParsedRule(
        id=rule_id,
        condition=PatternCondition(pattern=re.compile(rf"function\s+\w*{target}\w*", re.IGNORECASE)),
        action=RuleAction(
            type=ActionType.VIOLATION,
            message=message,
            suggestion=f"Ensure function {target} meets requirement: {requirement}",
        ),
        severity=severity,
        message=message,
        metadata=metadata,
    )


def build_naming_rule(match: re.Match[str], rule_id: str, metadata: RuleMetadata) -> ParsedRule:
    element_type = match.group(1).strip()
    target = match.group(2).strip()
    severity = map_severity(match.group(3))
    requirement = match.group(4).strip()
    message = f"{element_type} {target} {requirement}"

    return ParsedRule(
        id=rule_id,
        condition=PatternCondition(pattern=re.compile(rf"({element_type})\s+\w*{target}\w*", re.IGNORECASE)),
        action=RuleAction(
            type=ActionType.VIOLATION,
            message=message,
            suggestion=f"Ensure {element_type} naming follows requirement: {requirement}",
        ),
        severity=severity,
        message=message,
        metadata=metadata,
    )


def build_quality_rule(match: re.Match[str], rule_id: str, metadata: RuleMetadata) -> ParsedRule:
    severity = map_severity(match.group(1))
    requirement = match.group(2).strip()
    message = f"Code {requirement}"

    return ParsedRule(
        id=rule_id,
        condition=CustomCondition(predicate=ALWAYS_MATCH),
        action=RuleAction(type=ActionType.SUGGESTION, message=message, suggestion=requirement),
        severity=severity,
        message=message,
        metadata=metadata,
    )


# Priority order matters: a statement is compiled by the first template that matches.
BUILTIN_TEMPLATES: tuple[GrammarTemplate, ...] = (
    GrammarTemplate(
        name="when_then",
        pattern=re.compile(r"WHEN\s+(.+?)\s+THEN\s+(.+?)(?:\s+SHALL\s+(.+?))?$", re.IGNORECASE),
        confidence=0.9,
        builder=_build_conditional_rule,
    ),
    GrammarTemplate(
        name="if_then",
        pattern=re.compile(r"IF\s+(.+?)\s+THEN\s+(.+?)(?:\s+SHALL\s+(.+?))?$", re.IGNORECASE),
        confidence=0.85,
        builder=_build_conditional_rule,
    ),
    GrammarTemplate(
        name="function",
        pattern=re.compile(r"(function|method)\s+(.+?)\s+(should|must|shall)\s+(.+)", re.IGNORECASE),
        confidence=0.8,
        builder=build_function_rule,
    ),
    GrammarTemplate(
        name="naming",
        pattern=re.compile(r"(variable|constant|class|interface)\s+(.+?)\s+(should|must|shall)\s+(.+)", re.IGNORECASE),
        confidence=0.75,
        builder=build_naming_rule,
    ),
    GrammarTemplate(
        name="quality",
        pattern=re.compile(r"code\s+(should|must|shall)\s+(.+)", re.IGNORECASE),
        confidence=0.7,
        builder=build_quality_rule,
    ),
)


def build_fallback_rule(text: str, rule_id: str, metadata: RuleMetadata) -> ParsedRule:
    """
    Record a statement no template recognised.

    The rule never fires; it only replays the statement as a suggestion so the
    requirement stays visible in diagnostics.
    """
    return ParsedRule(
        id=rule_id,
        condition=CustomCondition(predicate=NEVER_MATCH),
        action=RuleAction(
            type=ActionType.SUGGESTION,
            message=text,
            suggestion="Review this quality requirement",
        ),
        severity=scan_severity(text),
        message=text,
        metadata=metadata,
    )
