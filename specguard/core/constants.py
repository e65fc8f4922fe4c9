"""
Application-wide constants.
"""

# Rules at or below this confidence are kept for diagnostics but never executed
USABLE_CONFIDENCE_THRESHOLD = 0.5

# The validator warns about rules below this confidence
LOW_CONFIDENCE_THRESHOLD = 0.7

FALLBACK_CONFIDENCE = 0.3

# Stamped on every violation produced by compiled specification rules
SPEC_RULE_TAG = "spec-driven-rule"

COMMENT_MARKERS: tuple[str, ...] = ("#", "//")

PARSE_SUGGESTION = (
    'Try using patterns like "WHEN [condition] THEN [action]" or "IF [condition] THEN [action]". '
    'Example: "WHEN function has more than 20 lines THEN warn about complexity"'
)
