"""
Analysis service: runs the built-in line checks and the registered
specification rules against source files.
"""

import time
import uuid

import structlog

from specguard.analysis.models import AnalysisMetadata, AnalysisRequest, AnalysisResult, SpecValidation
from specguard.core.config import config
from specguard.core.models import QualitySpec, Severity, ViolationRecord
from specguard.core.utils.logging import log_operation
from specguard.rules.compiler import SpecCompiler
from specguard.rules.engine import execute
from specguard.rules.line_checks import LineCheck, default_line_checks, run_line_checks
from specguard.rules.linker import ExecutableRule, link_rules
from specguard.rules.models import CompileResult
from specguard.rules.registry import RuleRegistry

logger = structlog.get_logger(__name__)

SEVERITY_PENALTIES: dict[Severity, int] = {
    Severity.CRITICAL: 10,
    Severity.ERROR: 5,
    Severity.WARNING: 2,
    Severity.INFO: 1,
}

BASE_SCORE = 100
# At most 80% of the score can be lost to violations
MAX_PENALTY = BASE_SCORE * 0.8


def calculate_quality_score(violations: list[ViolationRecord]) -> int:
    penalty = sum(SEVERITY_PENALTIES.get(violation.severity, 0) for violation in violations)
    return max(0, round(BASE_SCORE - min(penalty, MAX_PENALTY)))


def count_lines_of_code(content: str) -> int:
    return sum(1 for line in content.split("\n") if line.strip())


class AnalysisService:
    """
    Loads compiled quality standards and runs them against files.

    Rule sets live in a RuleRegistry keyed by team or standard identifier.
    Built-in line checks come from the analysis config unless passed in; an
    empty list turns them off.
    """

    def __init__(
        self,
        compiler: SpecCompiler | None = None,
        registry: RuleRegistry | None = None,
        line_checks: list[LineCheck] | None = None,
    ):
        self.compiler = compiler or SpecCompiler()
        self.registry = registry or RuleRegistry()
        if line_checks is None:
            line_checks = (
                default_line_checks(config.analysis.max_line_length) if config.analysis.line_checks_enabled else []
            )
        self.line_checks = line_checks

    def load_quality_standards(self, identifier: str, spec: QualitySpec) -> CompileResult:
        """
        Compile a specification and register its usable rules under `identifier`.

        Args:
            identifier: Team or standard identifier.
            spec: The specification to load.

        Returns:
            The compile result, including rules that were not loaded.
        """
        with log_operation("load_quality_standards", subject_ids={"identifier": identifier}):
            result = self.compiler.compile(spec)

            if result.errors:
                logger.warning(
                    "spec_parse_errors",
                    identifier=identifier,
                    errors=[f"Line {error.line}: {error.message}" for error in result.errors],
                )
            if result.warnings:
                logger.warning("spec_parse_warnings", identifier=identifier, warnings=result.warnings)

            executable_rules = link_rules(result.usable_rules)
            self.registry.register(identifier, executable_rules)

        logger.info(
            "quality_standards_loaded",
            identifier=identifier,
            rules=len(executable_rules),
            confidence=round(result.overall_confidence * 100),
        )
        return result

    def validate_quality_spec(self, spec: QualitySpec) -> SpecValidation:
        """
        Decide whether a specification may be stored.

        A spec is valid when it compiles without errors, its overall confidence
        exceeds the configured acceptance level and at least one rule is usable.
        """
        result = self.compiler.compile(spec)
        return SpecValidation(
            is_valid=(
                not result.errors
                and result.overall_confidence > config.compiler.spec_acceptance_confidence
                and len(result.usable_rules) > 0
            ),
            errors=[f"Line {error.line}: {error.message}" for error in result.errors],
            warnings=result.warnings,
        )

    def apply_spec_rules(self, request: AnalysisRequest) -> list[ViolationRecord]:
        """Run the team's rules, then every requested standard, in that order."""
        identifiers: list[str] = []
        if request.team_id:
            identifiers.append(request.team_id)
        identifiers.extend(request.standards)

        violations: list[ViolationRecord] = []
        for identifier in identifiers:
            rules = self.registry.get(identifier)
            if not rules:
                logger.debug("no_rules_loaded", identifier=identifier)
                continue
            violations.extend(execute(rules, request.content, request.language))
        return violations

    def analyze_code(self, request: AnalysisRequest) -> AnalysisResult:
        start_time = time.time()

        with log_operation("analyze_code", subject_ids={"file": request.file_path}, language=request.language):
            violations = run_line_checks(self.line_checks, request.content, request.language)
            violations.extend(self.apply_spec_rules(request))

        return AnalysisResult(
            analysis_id=f"analysis_{uuid.uuid4().hex[:12]}",
            file_path=request.file_path,
            violations=violations,
            quality_score=calculate_quality_score(violations),
            processing_time_ms=int((time.time() - start_time) * 1000),
            metadata=AnalysisMetadata(
                language=request.language,
                lines_of_code=count_lines_of_code(request.content),
            ),
        )

    def get_loaded_rules(self, identifier: str) -> tuple[ExecutableRule, ...]:
        return self.registry.get(identifier)

    def clear_rules(self, identifier: str) -> None:
        self.registry.clear(identifier)

    def get_loaded_rule_identifiers(self) -> list[str]:
        return self.registry.identifiers()
