# Rules package

from specguard.rules.compiler import SpecCompiler, compile_spec
from specguard.rules.engine import execute
from specguard.rules.line_checks import LineCheck, default_line_checks, run_line_checks
from specguard.rules.linker import ExecutableRule, link_rules
from specguard.rules.models import (
    ActionType,
    CompileResult,
    CustomCondition,
    MatchRecord,
    MetricCondition,
    MetricOperator,
    ParsedRule,
    ParseError,
    PatternCondition,
    RuleAction,
)
from specguard.rules.registry import RuleRegistry

__all__ = [
    "ActionType",
    "CompileResult",
    "CustomCondition",
    "ExecutableRule",
    "LineCheck",
    "MatchRecord",
    "MetricCondition",
    "MetricOperator",
    "ParsedRule",
    "ParseError",
    "PatternCondition",
    "RuleAction",
    "RuleRegistry",
    "SpecCompiler",
    "compile_spec",
    "default_line_checks",
    "execute",
    "link_rules",
    "run_line_checks",
]
