import re

import pytest

from specguard.core.models import Severity
from specguard.rules.linker import (
    CustomMatcher,
    MetricMatcher,
    PatternMatcher,
    ViolationAction,
    create_matcher,
    link_rule,
    link_rules,
)
from specguard.rules.models import (
    ActionType,
    CustomCondition,
    MetricCondition,
    MetricOperator,
    ParsedRule,
    PatternCondition,
    RuleAction,
    RuleMetadata,
)
from specguard.rules.predicates import ALWAYS_MATCH, NEVER_MATCH


def make_rule(rule_id: str, condition, action: RuleAction | None = None) -> ParsedRule:
    return ParsedRule(
        id=rule_id,
        condition=condition,
        action=action,
        severity=Severity.ERROR,
        message=f"{rule_id} message",
        metadata=RuleMetadata(original_text=rule_id, confidence=0.9),
    )


class TestMatchers:
    def test_pattern_matcher_reports_each_matching_line(self) -> None:
        matcher = PatternMatcher(PatternCondition(pattern=re.compile(r"\bvar\s+\w+")))

        matches = matcher.find_matches("var a = 1;\nlet b;\n  var c = 2; var d;", "javascript")

        assert [(m.line, m.column, m.text) for m in matches] == [(1, 0, "var a"), (3, 2, "var c")]
        assert matches[1].context == "  var c = 2; var d;"

    def test_pattern_matcher_no_match(self) -> None:
        matcher = PatternMatcher(PatternCondition(pattern=re.compile("eval")))

        assert matcher.find_matches("const x = 1;", "javascript") == []

    def test_metric_matcher_fires_once_at_file_level(self) -> None:
        matcher = MetricMatcher(MetricCondition(name="lines", operator=MetricOperator.GT, threshold=5))

        matches = matcher.find_matches("\n".join(["x"] * 7), "python")

        assert len(matches) == 1
        assert (matches[0].line, matches[0].column) == (1, 1)
        assert matches[0].text == "lines: 7"
        assert matches[0].context == "File-level metric"

    def test_metric_matcher_below_threshold(self) -> None:
        matcher = MetricMatcher(MetricCondition(name="lines", operator=MetricOperator.GT, threshold=5))

        assert matcher.find_matches("a\nb\nc", "python") == []

    def test_custom_matcher(self) -> None:
        always = CustomMatcher(CustomCondition(predicate=ALWAYS_MATCH))
        never = CustomMatcher(CustomCondition(predicate=NEVER_MATCH))

        matches = always.find_matches("", "go")

        assert [(m.line, m.column, m.text, m.context) for m in matches] == [
            (1, 1, "Custom condition matched", "File-level check")
        ]
        assert never.find_matches("anything", "go") == []

    def test_custom_matcher_passes_language(self) -> None:
        seen = []

        def predicate(content: str, language: str) -> bool:
            seen.append((content, language))
            return language == "rust"

        matcher = CustomMatcher(CustomCondition(predicate=predicate))

        assert len(matcher.find_matches("fn main() {}", "rust")) == 1
        assert seen == [("fn main() {}", "rust")]

    def test_create_matcher_dispatch(self) -> None:
        assert isinstance(create_matcher(PatternCondition(pattern=re.compile("x"))), PatternMatcher)
        assert isinstance(create_matcher(MetricCondition(name="lines", operator=">", threshold=1)), MetricMatcher)
        assert isinstance(create_matcher(CustomCondition(predicate=ALWAYS_MATCH)), CustomMatcher)
        assert create_matcher(CustomCondition(predicate=ALWAYS_MATCH)).kind == "custom"


class TestViolationAction:
    def test_create_violation(self) -> None:
        action = ViolationAction(
            RuleAction(type=ActionType.WARNING, message="warn about it", suggestion="Consider addressing: it"),
            Severity.WARNING,
            "fallback",
        )
        matcher = PatternMatcher(PatternCondition(pattern=re.compile("x")))

        violation = action.create_violation(matcher.find_matches("ax", "py")[0])

        assert violation.id.startswith("spec_rule_")
        assert violation.severity == Severity.WARNING
        assert violation.message == "warn about it"
        assert (violation.line, violation.column) == (1, 1)
        assert violation.rule == "spec-driven-rule"
        assert violation.suggestion == "Consider addressing: it"

    def test_empty_action_message_uses_rule_message(self) -> None:
        action = ViolationAction(RuleAction(type=ActionType.VIOLATION, message=""), Severity.ERROR, "rule message")
        matches = CustomMatcher(CustomCondition(predicate=ALWAYS_MATCH)).find_matches("", "py")

        assert action.create_violation(matches[0]).message == "rule message"

    def test_violation_ids_are_unique(self) -> None:
        action = ViolationAction(RuleAction(type=ActionType.VIOLATION, message="m"), Severity.ERROR, "m")
        match = CustomMatcher(CustomCondition(predicate=ALWAYS_MATCH)).find_matches("", "py")[0]

        assert action.create_violation(match).id != action.create_violation(match).id


class TestLinkRules:
    def test_link_rule(self) -> None:
        rule = make_rule(
            "when_then_1", PatternCondition(pattern=re.compile("x")), RuleAction(type="warning", message="m")
        )

        executable = link_rule(rule)

        assert executable.id == "when_then_1"
        assert isinstance(executable.matcher, PatternMatcher)
        assert executable.action.severity == Severity.ERROR
        assert executable.metadata.original_rule is rule

    def test_link_rule_rejects_incomplete(self) -> None:
        with pytest.raises(ValueError, match="Incomplete rule"):
            link_rule(make_rule("broken", None))

    def test_link_rules_keeps_order_and_skips_incomplete(self) -> None:
        action = RuleAction(type=ActionType.SUGGESTION, message="m")
        rules = [
            make_rule("a", CustomCondition(predicate=ALWAYS_MATCH), action),
            make_rule("b", None, action),
            make_rule("c", MetricCondition(name="lines", operator=">", threshold=1), action),
        ]

        assert [rule.id for rule in link_rules(rules)] == ["a", "c"]
