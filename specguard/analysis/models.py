from typing import Any

from pydantic import BaseModel, Field

from specguard.core.models import ViolationRecord


class AnalysisRequest(BaseModel):
    """A file to check against loaded team rules and named standards."""

    file_path: str
    content: str
    language: str
    user_id: str = "anonymous"
    standards: list[str] = Field(default_factory=list)
    context: dict[str, Any] = Field(default_factory=dict)

    @property
    def team_id(self) -> str | None:
        return self.context.get("team_id")


class AnalysisMetadata(BaseModel):
    language: str
    lines_of_code: int


class AnalysisResult(BaseModel):
    analysis_id: str
    file_path: str
    violations: list[ViolationRecord] = Field(default_factory=list)
    quality_score: int
    processing_time_ms: int
    metadata: AnalysisMetadata


class SpecValidation(BaseModel):
    """Whether a specification is good enough to be stored and loaded."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
