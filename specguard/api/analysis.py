from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from specguard.analysis.models import AnalysisRequest, AnalysisResult
from specguard.analysis.service import AnalysisService
from specguard.api.dependencies import get_analysis_service, get_compiler, get_spec_service
from specguard.rules.compiler import SpecCompiler
from specguard.rules.models import ParseError

router = APIRouter()


class CompileRequest(BaseModel):
    content: str


class CompileResponse(BaseModel):
    rules: list[dict[str, Any]] = Field(default_factory=list)
    usable_rule_ids: list[str] = Field(default_factory=list)
    summary: dict[str, Any]
    warnings: list[str] = Field(default_factory=list)
    errors: list[ParseError] = Field(default_factory=list)


@router.post("/compile", response_model=CompileResponse)
async def compile_spec_text(request: CompileRequest, compiler: SpecCompiler = Depends(get_compiler)) -> CompileResponse:
    """Compile specification text without storing it."""
    result = compiler.compile(request.content)
    return CompileResponse(
        rules=[rule.model_dump(mode="json") for rule in result.rules],
        usable_rule_ids=[rule.id for rule in result.usable_rules],
        summary=result.summary(),
        warnings=result.warnings,
        errors=result.errors,
    )


@router.post("/analyze", response_model=AnalysisResult, dependencies=[Depends(get_spec_service)])
async def analyze_file(
    request: AnalysisRequest, analysis_service: AnalysisService = Depends(get_analysis_service)
) -> AnalysisResult:
    """Check one file against the team rules and the requested standards."""
    return analysis_service.analyze_code(request)
