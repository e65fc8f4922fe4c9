import pytest

from specguard.core.models import Severity
from specguard.rules.line_checks import (
    ConsoleLogCheck,
    LongLineCheck,
    PrintCallCheck,
    TodoCommentCheck,
    VarDeclarationCheck,
    default_line_checks,
    run_line_checks,
)


class TestLineChecks:
    def test_long_line(self) -> None:
        violation = LongLineCheck().check("a" * 130, 3)

        assert violation is not None
        assert violation.id == "long-line-3"
        assert violation.rule == "max-line-length"
        assert violation.severity == Severity.WARNING
        assert violation.column == 121
        assert violation.message == "Line exceeds 120 characters (130 characters)"

    def test_line_at_limit_passes(self) -> None:
        assert LongLineCheck().check("a" * 120, 1) is None

    def test_custom_line_length(self) -> None:
        violation = LongLineCheck(max_length=10).check("a" * 11, 1)

        assert violation is not None
        assert violation.column == 11

    def test_todo_is_case_insensitive(self) -> None:
        violation = TodoCommentCheck().check("x = 1  # Todo: tidy", 4)

        assert violation is not None
        assert (violation.rule, violation.severity, violation.column) == ("no-todo-comments", Severity.INFO, 10)

    def test_console_log_column_is_one_based(self) -> None:
        violation = ConsoleLogCheck().check('  console.log("x")', 1)

        assert violation is not None
        assert violation.column == 3
        assert violation.suggestion == "Use proper logging instead of console.log"

    @pytest.mark.parametrize(
        ("line", "column"),
        [("var a = 1", 1), ("    var b = 2", 5), ("const variance = 1", None), ("let v = 'var '", None)],
    )
    def test_var_declaration(self, line, column) -> None:
        violation = VarDeclarationCheck().check(line, 1)

        assert (violation.column if violation else None) == column

    def test_print_call(self) -> None:
        violation = PrintCallCheck().check("print(total)", 2)

        assert violation is not None
        assert (violation.id, violation.rule, violation.severity) == ("print-statement-2", "no-print", Severity.INFO)

    @pytest.mark.parametrize(
        ("check", "language", "applies"),
        [
            (ConsoleLogCheck(), "typescript", True),
            (ConsoleLogCheck(), "JavaScript", True),
            (ConsoleLogCheck(), "python", False),
            (PrintCallCheck(), "python", True),
            (PrintCallCheck(), "typescript", False),
            (TodoCommentCheck(), "go", True),
        ],
    )
    def test_language_scoping(self, check, language, applies) -> None:
        assert check.applies_to(language) is applies


class TestRunLineChecks:
    def test_reports_by_line_then_check_order(self) -> None:
        content = 'var x = 1\nconsole.log("x") // TODO fix\n' + "a" * 130

        violations = run_line_checks(default_line_checks(), content, "typescript")

        assert [(v.rule, v.line, v.column) for v in violations] == [
            ("no-var", 1, 1),
            ("no-todo-comments", 2, 21),
            ("no-console", 2, 1),
            ("max-line-length", 3, 121),
        ]

    def test_python_file_skips_javascript_checks(self) -> None:
        violations = run_line_checks(default_line_checks(), "var = 1\nconsole.log\nprint(var)", "python")

        assert [v.rule for v in violations] == ["no-print"]

    def test_no_checks(self) -> None:
        assert run_line_checks([], "var x = 1", "javascript") == []

    def test_clean_content(self) -> None:
        assert run_line_checks(default_line_checks(), "const total = add(1, 2);", "typescript") == []
