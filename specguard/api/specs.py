from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel

from specguard.api.dependencies import get_spec_service
from specguard.api.errors import error_response
from specguard.core.errors import SpecNotFoundError
from specguard.core.models import QualitySpec, SpecMetadata
from specguard.specs.formats import SpecFormat
from specguard.specs.service import QualitySpecService, SpecOperationResult, SpecStats

router = APIRouter()


class SpecCreateRequest(BaseModel):
    identifier: str
    content: str
    metadata: SpecMetadata | None = None


class SpecUpdateRequest(BaseModel):
    content: str
    metadata: SpecMetadata | None = None


class SpecImportRequest(BaseModel):
    identifier: str
    source: str
    format: SpecFormat = SpecFormat.PLAIN


class SpecEntry(BaseModel):
    identifier: str
    spec: QualitySpec


def _operation_response(result: SpecOperationResult, success_status: int = status.HTTP_200_OK) -> JSONResponse:
    if result.success:
        return JSONResponse(status_code=success_status, content=result.model_dump())
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        code="spec_rejected",
        message="Quality specification rejected",
        details={"errors": result.errors, "warnings": result.warnings},
    )


@router.get("/specs", response_model=list[SpecEntry])
async def list_specs(spec_service: QualitySpecService = Depends(get_spec_service)) -> list[SpecEntry]:
    return [SpecEntry(identifier=identifier, spec=spec) for identifier, spec in spec_service.list_quality_specs()]


@router.get("/specs/stats", response_model=SpecStats)
async def spec_stats(spec_service: QualitySpecService = Depends(get_spec_service)) -> SpecStats:
    return spec_service.get_specification_stats()


@router.post("/specs", response_model=SpecOperationResult, status_code=status.HTTP_201_CREATED)
async def create_spec(request: SpecCreateRequest, spec_service: QualitySpecService = Depends(get_spec_service)):
    result = spec_service.create_quality_spec(request.identifier, request.content, request.metadata)
    return _operation_response(result, success_status=status.HTTP_201_CREATED)


@router.post("/specs/import", response_model=SpecOperationResult, status_code=status.HTTP_201_CREATED)
async def import_spec(request: SpecImportRequest, spec_service: QualitySpecService = Depends(get_spec_service)):
    result = spec_service.import_quality_spec(request.identifier, request.source, request.format)
    return _operation_response(result, success_status=status.HTTP_201_CREATED)


@router.get("/specs/{identifier}", response_model=SpecEntry)
async def get_spec(identifier: str, spec_service: QualitySpecService = Depends(get_spec_service)) -> SpecEntry:
    spec = spec_service.get_quality_spec(identifier)
    if spec is None:
        raise SpecNotFoundError(identifier)
    return SpecEntry(identifier=identifier, spec=spec)


@router.put("/specs/{identifier}", response_model=SpecOperationResult)
async def update_spec(
    identifier: str, request: SpecUpdateRequest, spec_service: QualitySpecService = Depends(get_spec_service)
):
    if spec_service.get_quality_spec(identifier) is None:
        raise SpecNotFoundError(identifier)
    return _operation_response(spec_service.update_quality_spec(identifier, request.content, request.metadata))


@router.delete("/specs/{identifier}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_spec(identifier: str, spec_service: QualitySpecService = Depends(get_spec_service)) -> None:
    if not spec_service.delete_quality_spec(identifier):
        raise SpecNotFoundError(identifier)


@router.get("/specs/{identifier}/export", response_class=PlainTextResponse)
async def export_spec(
    identifier: str,
    format: SpecFormat = Query(SpecFormat.MARKDOWN),
    spec_service: QualitySpecService = Depends(get_spec_service),
) -> str:
    exported = spec_service.export_quality_spec(identifier, format)
    if exported is None:
        raise SpecNotFoundError(identifier)
    return exported
