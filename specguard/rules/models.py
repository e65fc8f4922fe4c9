import re
from collections.abc import Callable
from datetime import UTC, datetime
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from specguard.core.models import Severity

ContentPredicate = Callable[[str, str], bool]


class MetricOperator(StrEnum):
    """Comparison operators allowed in metric conditions."""

    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="
    EQ = "=="
    NE = "!="


class ActionType(StrEnum):
    """What a rule reports when its condition matches."""

    VIOLATION = "violation"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class Statement(BaseModel):
    """One candidate rule line taken from a specification."""

    model_config = ConfigDict(frozen=True)

    text: str
    line_number: int = Field(ge=1)


class PatternCondition(BaseModel):
    """Matches every line of content on which the regex is found."""

    model_config = ConfigDict(frozen=True)

    type: Literal["pattern"] = "pattern"
    pattern: re.Pattern[str]


class MetricCondition(BaseModel):
    """Matches when a whole-content metric compares true against a threshold."""

    model_config = ConfigDict(frozen=True)

    type: Literal["metric"] = "metric"
    name: str
    operator: MetricOperator
    threshold: float


class CustomCondition(BaseModel):
    """Matches according to an injected predicate strategy."""

    model_config = ConfigDict(frozen=True)

    type: Literal["custom"] = "custom"
    predicate: ContentPredicate

    @field_serializer("predicate")
    def _serialize_predicate(self, predicate: ContentPredicate) -> str:
        return getattr(predicate, "name", type(predicate).__name__)


RuleCondition = Annotated[PatternCondition | MetricCondition | CustomCondition, Field(discriminator="type")]


class RuleAction(BaseModel):
    """Describes the report produced when a rule's condition matches."""

    model_config = ConfigDict(frozen=True)

    type: ActionType
    message: str
    suggestion: str | None = None


class RuleMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    original_text: str
    confidence: float = Field(ge=0.0, le=1.0)
    parsed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class ParsedRule(BaseModel):
    """
    A rule recognized in a specification statement.

    `condition` and `action` are nullable only so that a defective rule can be
    represented and flagged by the validator; the compiler always sets both.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    condition: RuleCondition | None
    action: RuleAction | None
    severity: Severity
    message: str
    metadata: RuleMetadata

    @property
    def confidence(self) -> float:
        return self.metadata.confidence


class ParseError(BaseModel):
    """A compile-time diagnostic tied to a specification line (0 when not line-specific)."""

    line: int
    column: int
    message: str
    original_text: str
    suggestion: str | None = None


class CompileResult(BaseModel):
    """
    Outcome of compiling one specification.

    `rules` holds every constructed rule for diagnostics; `usable_rules` is the
    subset above the usability threshold, produced in the same pass.
    """

    rules: list[ParsedRule] = Field(default_factory=list)
    usable_rules: list[ParsedRule] = Field(default_factory=list)
    total_rules: int = 0
    successfully_parsed: int = 0
    overall_confidence: float = 0.0
    warnings: list[str] = Field(default_factory=list)
    errors: list[ParseError] = Field(default_factory=list)

    def summary(self) -> dict[str, Any]:
        return {
            "total_rules": self.total_rules,
            "successfully_parsed": self.successfully_parsed,
            "usable_rules": len(self.usable_rules),
            "overall_confidence": round(self.overall_confidence, 3),
            "warnings": len(self.warnings),
            "errors": len(self.errors),
        }


class MatchRecord(BaseModel):
    """A positional hit carried from a matcher to its action executor."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int
    text: str
    context: str
