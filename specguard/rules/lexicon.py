"""
Keyword lexicon consulted by the specification compiler.

Maps modal verbs and severity words to severities, action verbs to action
categories, and a few well-known code phrases to ready-made patterns.
"""

import re

from specguard.core.models import Severity
from specguard.rules.models import ActionType

SEVERITY_KEYWORDS: dict[str, Severity] = {
    "must": Severity.ERROR,
    "shall": Severity.ERROR,
    "should": Severity.WARNING,
    "may": Severity.INFO,
    "critical": Severity.CRITICAL,
    "error": Severity.ERROR,
    "warning": Severity.WARNING,
    "info": Severity.INFO,
}

# Checked in order; the first keyword contained in the action phrase wins
ACTION_KEYWORDS: tuple[tuple[str, ActionType], ...] = (
    ("warn", ActionType.WARNING),
    ("suggest", ActionType.SUGGESTION),
    ("recommend", ActionType.SUGGESTION),
    ("flag", ActionType.VIOLATION),
    ("block", ActionType.VIOLATION),
)

# Specific API calls recognised verbatim inside a condition phrase
KNOWN_LITERALS: tuple[str, ...] = ("console.log",)

# Declaration phrases and the token pattern each one stands for
DECLARATION_PHRASES: dict[str, str] = {
    "var declaration": r"\bvar\s+\w+",
    "uses var": r"\bvar\s+\w+",
}

# Fallback severity scan, strongest first
FALLBACK_SEVERITY_KEYWORDS: tuple[tuple[tuple[str, ...], Severity], ...] = (
    (("must", "shall", "critical"), Severity.ERROR),
    (("should", "warning"), Severity.WARNING),
)

METRIC_COMPARISON = re.compile(r"(.*?)\s*(>=|<=|==|!=|>|<)\s*(\d+(?:\.\d+)?)")
MORE_THAN = re.compile(r"more than (\d+)")
PATTERN_VERB = re.compile(r"(.*?)(contains|includes|has)\s+")


def map_severity(keyword: str, default: Severity = Severity.WARNING) -> Severity:
    """Look up a severity keyword, case-insensitively."""
    return SEVERITY_KEYWORDS.get(keyword.strip().lower(), default)


def scan_severity(text: str) -> Severity:
    """Infer a severity from free text by keyword presence."""
    lowered = text.lower()
    for keywords, severity in FALLBACK_SEVERITY_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return severity
    return Severity.INFO


def classify_action(text: str) -> ActionType:
    lowered = text.lower()
    for keyword, action_type in ACTION_KEYWORDS:
        if keyword in lowered:
            return action_type
    return ActionType.VIOLATION
