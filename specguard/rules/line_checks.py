"""
Built-in line checks.

These run on every analyzed file, whether or not a specification is loaded.
Each check looks at one line at a time and reports at most one violation per
line, with a 1-based column.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import structlog

from specguard.core.models import Severity, ViolationRecord

logger = structlog.get_logger(__name__)

JAVASCRIPT_LANGUAGES = frozenset({"javascript", "typescript"})


class LineCheck(ABC):
    """Abstract base class for built-in line checks."""

    # Class attributes describing the violation a check reports
    rule: str = ""
    id_prefix: str = ""
    severity: Severity = Severity.INFO
    message: str = ""
    suggestion: str = ""
    # Empty means the check applies to every language
    languages: frozenset[str] = frozenset()

    @abstractmethod
    def find_column(self, line: str) -> int | None:
        """Return the 1-based column of the finding on `line`, or None."""
        pass

    def applies_to(self, language: str) -> bool:
        return not self.languages or language.lower() in self.languages

    def describe(self, line: str) -> str:
        return self.message

    def check(self, line: str, line_number: int) -> ViolationRecord | None:
        column = self.find_column(line)
        if column is None:
            return None
        return ViolationRecord(
            id=f"{self.id_prefix}-{line_number}",
            severity=self.severity,
            message=self.describe(line),
            line=line_number,
            column=column,
            rule=self.rule,
            suggestion=self.suggestion,
        )


class SubstringCheck(LineCheck):
    """Reports the first occurrence of `needle` on a line."""

    needle: str = ""
    case_sensitive: bool = True

    def find_column(self, line: str) -> int | None:
        haystack = line if self.case_sensitive else line.lower()
        index = haystack.find(self.needle)
        return index + 1 if index >= 0 else None


class LongLineCheck(LineCheck):
    rule = "max-line-length"
    id_prefix = "long-line"
    severity = Severity.WARNING
    suggestion = "Consider breaking this line into multiple lines"

    def __init__(self, max_length: int = 120):
        self.max_length = max_length

    def find_column(self, line: str) -> int | None:
        return self.max_length + 1 if len(line) > self.max_length else None

    def describe(self, line: str) -> str:
        return f"Line exceeds {self.max_length} characters ({len(line)} characters)"


class TodoCommentCheck(SubstringCheck):
    rule = "no-todo-comments"
    id_prefix = "todo"
    severity = Severity.INFO
    message = "TODO comment found"
    suggestion = "Consider creating a proper issue or task"
    needle = "todo"
    case_sensitive = False


class ConsoleLogCheck(SubstringCheck):
    rule = "no-console"
    id_prefix = "console-log"
    severity = Severity.WARNING
    message = "console.log statement found"
    suggestion = "Use proper logging instead of console.log"
    languages = JAVASCRIPT_LANGUAGES
    needle = "console.log"


class VarDeclarationCheck(LineCheck):
    rule = "no-var"
    id_prefix = "var-declaration"
    severity = Severity.ERROR
    message = "Use let or const instead of var"
    suggestion = "Replace var with let or const"
    languages = JAVASCRIPT_LANGUAGES

    def find_column(self, line: str) -> int | None:
        if not line.strip().startswith("var "):
            return None
        return line.index("var") + 1


class PrintCallCheck(SubstringCheck):
    rule = "no-print"
    id_prefix = "print-statement"
    severity = Severity.INFO
    message = "print statement found"
    suggestion = "Consider using logging instead of print"
    languages = frozenset({"python"})
    needle = "print("


def default_line_checks(max_line_length: int = 120) -> list[LineCheck]:
    """The built-in checks in reporting order."""
    return [
        LongLineCheck(max_line_length),
        TodoCommentCheck(),
        ConsoleLogCheck(),
        VarDeclarationCheck(),
        PrintCallCheck(),
    ]


def run_line_checks(checks: Sequence[LineCheck], content: str, language: str) -> list[ViolationRecord]:
    """
    Run line checks over a content buffer.

    Violations are ordered by line, then by check order within a line.
    """
    applicable = [check for check in checks if check.applies_to(language)]
    if not applicable:
        return []

    violations: list[ViolationRecord] = []
    for line_number, line in enumerate(content.split("\n"), start=1):
        for check in applicable:
            violation = check.check(line, line_number)
            if violation is not None:
                violations.append(violation)

    logger.debug("line_checks_run", checks=len(applicable), violations=len(violations))
    return violations
