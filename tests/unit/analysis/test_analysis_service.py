from specguard.analysis.models import AnalysisRequest
from specguard.analysis.service import AnalysisService, calculate_quality_score, count_lines_of_code
from specguard.core.models import QualitySpec, Severity, ViolationRecord
from specguard.rules.compiler import SpecCompiler
from specguard.rules.line_checks import ConsoleLogCheck

DEBUG_STATEMENT_RULE = "WHEN code contains console.log THEN warn about debug statements"
VAR_RULE = "IF code uses var declaration THEN flag for modernization SHALL error"


def violation(severity: Severity) -> ViolationRecord:
    return ViolationRecord(id="v", severity=severity, message="m", line=1, column=0, rule="spec-driven-rule")


class TestQualityScore:
    def test_no_violations(self) -> None:
        assert calculate_quality_score([]) == 100

    def test_penalties_by_severity(self) -> None:
        violations = [violation(Severity.CRITICAL), violation(Severity.ERROR), violation(Severity.WARNING)]
        violations.append(violation(Severity.INFO))

        assert calculate_quality_score(violations) == 100 - 10 - 5 - 2 - 1

    def test_penalty_is_capped(self) -> None:
        assert calculate_quality_score([violation(Severity.CRITICAL)] * 50) == 20

    def test_lines_of_code_ignores_blank_lines(self) -> None:
        assert count_lines_of_code("a\n\n   \nb\n") == 2


class TestValidateQualitySpec:
    def test_confident_spec_is_valid(self, analysis_service: AnalysisService) -> None:
        validation = analysis_service.validate_quality_spec(QualitySpec(content=DEBUG_STATEMENT_RULE))

        assert validation.is_valid is True
        assert validation.errors == []

    def test_fallback_only_spec_is_invalid(self, analysis_service: AnalysisService) -> None:
        validation = analysis_service.validate_quality_spec(QualitySpec(content="WHEN THEN\nIF THEN"))

        assert validation.is_valid is False
        assert "Low confidence rule: generic_1 (30%)" in validation.warnings

    def test_parse_errors_are_reported_with_lines(self, analysis_service: AnalysisService) -> None:
        spec = QualitySpec(content=f"{DEBUG_STATEMENT_RULE}\nfunction calc(x should validate input")

        validation = analysis_service.validate_quality_spec(spec)

        assert validation.is_valid is False
        assert validation.errors[0].startswith("Line 2: ")

    def test_empty_spec_is_invalid(self, analysis_service: AnalysisService) -> None:
        assert analysis_service.validate_quality_spec(QualitySpec(content="")).is_valid is False


class TestAnalyzeCode:
    def test_applies_team_rules_then_standards(self, analysis_service: AnalysisService) -> None:
        analysis_service.load_quality_standards("team-a", QualitySpec(content=VAR_RULE))
        analysis_service.load_quality_standards("typescript", QualitySpec(content=DEBUG_STATEMENT_RULE))
        request = AnalysisRequest(
            file_path="src/app.ts",
            content="console.log(1)\n\nvar a = 1",
            language="typescript",
            standards=["typescript"],
            context={"team_id": "team-a"},
        )

        result = analysis_service.analyze_code(request)

        assert [(v.message, v.line, v.severity) for v in result.violations] == [
            ("flag for modernization", 3, Severity.ERROR),
            ("warn about debug statements", 1, Severity.WARNING),
        ]
        assert result.quality_score == 100 - 5 - 2
        assert result.file_path == "src/app.ts"
        assert result.analysis_id.startswith("analysis_")
        assert result.metadata.lines_of_code == 2
        assert result.metadata.language == "typescript"

    def test_unknown_identifiers_are_skipped(self, analysis_service: AnalysisService) -> None:
        request = AnalysisRequest(file_path="a.py", content="print(1)", language="python", standards=["missing"])

        result = analysis_service.analyze_code(request)

        assert result.violations == []
        assert result.quality_score == 100

    def test_only_usable_rules_are_loaded(self, analysis_service: AnalysisService) -> None:
        result = analysis_service.load_quality_standards(
            "mixed", QualitySpec(content=f"{DEBUG_STATEMENT_RULE}\nAvoid deeply nested loops")
        )

        assert len(result.rules) == 2
        assert [rule.id for rule in analysis_service.get_loaded_rules("mixed")] == ["when_then_1"]

    def test_clear_rules(self, analysis_service: AnalysisService) -> None:
        analysis_service.load_quality_standards("team-a", QualitySpec(content=DEBUG_STATEMENT_RULE))

        analysis_service.clear_rules("team-a")

        assert analysis_service.get_loaded_rules("team-a") == ()
        assert analysis_service.get_loaded_rule_identifiers() == []


class TestAnalyzeCodeWithLineChecks:
    def test_line_checks_run_without_loaded_specs(self, compiler: SpecCompiler) -> None:
        service = AnalysisService(compiler=compiler)
        request = AnalysisRequest(
            file_path="src/app.ts",
            content='var x = 1\nconsole.log("x") // TODO fix\n' + "a" * 130,
            language="typescript",
        )

        result = service.analyze_code(request)

        assert [v.rule for v in result.violations] == ["no-var", "no-todo-comments", "no-console", "max-line-length"]
        assert result.quality_score == 100 - 5 - 1 - 2 - 2

    def test_line_checks_come_before_spec_rules(self, compiler: SpecCompiler) -> None:
        service = AnalysisService(compiler=compiler, line_checks=[ConsoleLogCheck()])
        service.load_quality_standards("typescript", QualitySpec(content=DEBUG_STATEMENT_RULE))
        request = AnalysisRequest(
            file_path="src/app.ts", content="console.log(1)", language="typescript", standards=["typescript"]
        )

        result = service.analyze_code(request)

        assert [(v.rule, v.column) for v in result.violations] == [("no-console", 1), ("spec-driven-rule", 0)]
        assert result.quality_score == 96

    def test_line_checks_can_be_disabled(self, compiler: SpecCompiler) -> None:
        service = AnalysisService(compiler=compiler, line_checks=[])
        request = AnalysisRequest(file_path="a.py", content="print(1)  # TODO", language="python")

        assert service.analyze_code(request).violations == []
