"""
Whole-content metrics available to metric conditions.

Metric names are looked up case-insensitively. Unknown names evaluate to 0,
which makes e.g. "function lines" rules fire only for operators that hold at 0.
"""

import operator
import re
from collections.abc import Callable

from specguard.rules.models import MetricOperator

FUNCTION_DEFINITION = re.compile(r"function\s+\w+")


def count_lines(content: str) -> int:
    return len(content.split("\n"))


def count_characters(content: str) -> int:
    return len(content)


def count_functions(content: str) -> int:
    return len(FUNCTION_DEFINITION.findall(content))


METRIC_CALCULATORS: dict[str, Callable[[str], int]] = {
    "lines": count_lines,
    "line count": count_lines,
    "characters": count_characters,
    "character count": count_characters,
    "functions": count_functions,
}

COMPARATORS: dict[MetricOperator, Callable[[float, float], bool]] = {
    MetricOperator.GT: operator.gt,
    MetricOperator.LT: operator.lt,
    MetricOperator.GE: operator.ge,
    MetricOperator.LE: operator.le,
    MetricOperator.EQ: operator.eq,
    MetricOperator.NE: operator.ne,
}


def calculate_metric(content: str, name: str) -> int:
    calculator = METRIC_CALCULATORS.get(name.strip().lower())
    return calculator(content) if calculator else 0


def compare_metric(value: float, op: MetricOperator, threshold: float) -> bool:
    return COMPARATORS[op](value, threshold)
