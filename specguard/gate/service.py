"""
Commit quality gate.

Analyzes the files of a pre-commit event with the loaded specification rules
and decides whether the commit is allowed, blocked or allowed with a warning.
"""

import time

import structlog
from pydantic import BaseModel, Field

from specguard.analysis.models import AnalysisRequest, AnalysisResult
from specguard.analysis.service import AnalysisService
from specguard.core.models import ViolationRecord
from specguard.gate.config import QualityGateConfigService
from specguard.gate.models import (
    ChangeType,
    CommitAction,
    CommitResult,
    PreCommitEvent,
    QualityGateConfig,
    ViolationCounts,
)

logger = structlog.get_logger(__name__)


class AggregatedAnalysis(BaseModel):
    total_files: int = 0
    average_quality_score: int = 100
    violations: list[ViolationRecord] = Field(default_factory=list)
    counts: ViolationCounts = Field(default_factory=ViolationCounts)


class GateDecision(BaseModel):
    action: CommitAction
    message: str


def aggregate_results(results: list[AnalysisResult]) -> AggregatedAnalysis:
    if not results:
        return AggregatedAnalysis()

    violations = [violation for result in results for violation in result.violations]
    counts = ViolationCounts()
    for violation in violations:
        setattr(counts, violation.severity.value, getattr(counts, violation.severity.value) + 1)

    return AggregatedAnalysis(
        total_files=len(results),
        average_quality_score=round(sum(result.quality_score for result in results) / len(results)),
        violations=violations,
        counts=counts,
    )


def summarize_counts(counts: ViolationCounts) -> str:
    parts: list[str] = []
    if counts.critical:
        parts.append(f"{counts.critical} critical")
    if counts.error:
        parts.append(f"{counts.error} error(s)")
    if counts.warning:
        parts.append(f"{counts.warning} warning(s)")
    if counts.info:
        parts.append(f"{counts.info} info")

    if not parts:
        return "No violations found."
    return f"Found: {', '.join(parts)}."


def make_gate_decision(analysis: AggregatedAnalysis, config: QualityGateConfig) -> GateDecision:
    """
    Compare aggregated counts against the configured thresholds.

    Checks run in order: critical, error, warning, quality score.
    """
    thresholds = config.thresholds
    counts = analysis.counts
    score = analysis.average_quality_score

    if thresholds.block_on_critical and counts.critical > thresholds.max_critical_violations:
        return GateDecision(
            action=CommitAction.BLOCK,
            message=(
                f"Commit blocked: {counts.critical} critical violation(s) found "
                f"(max allowed: {thresholds.max_critical_violations})"
            ),
        )

    if counts.error > thresholds.max_error_violations:
        return GateDecision(
            action=CommitAction.BLOCK,
            message=(
                f"Commit blocked: {counts.error} error violation(s) found "
                f"(max allowed: {thresholds.max_error_violations})"
            ),
        )

    if counts.warning > thresholds.max_warning_violations:
        return GateDecision(
            action=CommitAction.BLOCK,
            message=(
                f"Commit blocked: {counts.warning} warning violation(s) found "
                f"(max allowed: {thresholds.max_warning_violations})"
            ),
        )

    if score < thresholds.min_quality_score:
        if thresholds.warn_on_low_score:
            return GateDecision(
                action=CommitAction.WARN,
                message=(
                    f"Quality score is {score}/100 (minimum required: {thresholds.min_quality_score}). "
                    "Consider improving code quality before committing."
                ),
            )
        return GateDecision(
            action=CommitAction.BLOCK,
            message=f"Commit blocked: Quality score is {score}/100 (minimum required: {thresholds.min_quality_score})",
        )

    return GateDecision(
        action=CommitAction.ALLOW,
        message=f"Quality gate passed. {summarize_counts(counts)} Quality score: {score}/100",
    )


class QualityGateService:
    """Enforces quality thresholds on pre-commit events."""

    def __init__(
        self,
        analysis_service: AnalysisService | None = None,
        config_service: QualityGateConfigService | None = None,
    ):
        self.analysis_service = analysis_service or AnalysisService()
        self.config_service = config_service or QualityGateConfigService()

    def enforce(self, event: PreCommitEvent) -> CommitResult:
        start_time = time.time()

        def elapsed_ms() -> int:
            return int((time.time() - start_time) * 1000)

        try:
            config = self.config_service.get_config(event.team_id)
            if not config.enabled:
                return CommitResult(
                    action=CommitAction.ALLOW, message="Quality gate is disabled", processing_time_ms=elapsed_ms()
                )

            files = [
                change
                for change in event.changes
                if change.change_type != ChangeType.DELETED
                and not self.config_service.is_file_excluded(change.file_path, config)
            ]
            if not files:
                return CommitResult(
                    action=CommitAction.ALLOW,
                    message="No files to analyze (all excluded or deleted)",
                    processing_time_ms=elapsed_ms(),
                )

            results: list[AnalysisResult] = []
            for change in files:
                try:
                    results.append(
                        self.analysis_service.analyze_code(
                            AnalysisRequest(
                                file_path=change.file_path,
                                content=change.content,
                                language=change.language,
                                user_id=event.user_id,
                                standards=event.standards,
                                context={"team_id": event.team_id} if event.team_id else {},
                            )
                        )
                    )
                except Exception as e:
                    logger.warning("file_analysis_failed", file=change.file_path, error=str(e))

            aggregated = aggregate_results(results)
            decision = make_gate_decision(aggregated, config)
            logger.info("quality_gate_decided", action=decision.action.value, files=aggregated.total_files)

            return CommitResult(
                action=decision.action,
                message=decision.message,
                violations=aggregated.violations,
                quality_score=aggregated.average_quality_score,
                processing_time_ms=elapsed_ms(),
            )
        except Exception as e:
            logger.error("quality_gate_failed", error=str(e), exc_info=True)
            return CommitResult(
                action=CommitAction.WARN,
                message=f"Quality gate check failed: {e}",
                processing_time_ms=elapsed_ms(),
            )
