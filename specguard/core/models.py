from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Severity(StrEnum):
    """Severity levels a compiled rule can report with."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class SpecMetadata(BaseModel):
    """Optional descriptive metadata attached to a quality specification."""

    version: str | None = None
    author: str | None = None
    description: str | None = None


class QualitySpec(BaseModel):
    """
    A block of natural-language quality rules plus its metadata.

    Owned by the caller; the compiler only reads `content`.
    """

    content: str
    metadata: SpecMetadata = Field(default_factory=SpecMetadata)


class ViolationRecord(BaseModel):
    """A single reported violation, the externally visible output unit."""

    model_config = ConfigDict(frozen=True)

    id: str
    severity: Severity
    message: str
    line: int
    column: int
    rule: str
    suggestion: str | None = None
