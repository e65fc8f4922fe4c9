from enum import StrEnum

from pydantic import BaseModel, Field

from specguard.core.models import ViolationRecord


class CommitAction(StrEnum):
    ALLOW = "allow"
    BLOCK = "block"
    WARN = "warn"


class ChangeType(StrEnum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"


class QualityThresholds(BaseModel):
    """Limits a commit has to stay within to pass the gate."""

    min_quality_score: int = 70
    max_critical_violations: int = 0
    max_error_violations: int = 3
    max_warning_violations: int = 10
    block_on_critical: bool = True
    warn_on_low_score: bool = True


DEFAULT_EXCLUDE_PATTERNS: list[str] = [
    "node_modules/**",
    "dist/**",
    "build/**",
    "*.test.ts",
    "*.test.js",
    "*.spec.ts",
    "*.spec.js",
    "*.md",
    "*.json",
]


class QualityGateConfig(BaseModel):
    enabled: bool = True
    thresholds: QualityThresholds = Field(default_factory=QualityThresholds)
    exclude_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))
    team_id: str | None = None


class FileChange(BaseModel):
    file_path: str
    content: str
    language: str
    change_type: ChangeType = ChangeType.MODIFIED


class PreCommitEvent(BaseModel):
    user_id: str
    team_id: str | None = None
    changes: list[FileChange] = Field(default_factory=list)
    commit_message: str = ""
    standards: list[str] = Field(default_factory=list)


class ViolationCounts(BaseModel):
    critical: int = 0
    error: int = 0
    warning: int = 0
    info: int = 0


class CommitResult(BaseModel):
    action: CommitAction
    message: str
    violations: list[ViolationRecord] = Field(default_factory=list)
    quality_score: int | None = None
    processing_time_ms: int = 0
