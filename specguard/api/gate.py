from typing import Any

from fastapi import APIRouter, Body, Depends

from specguard.api.dependencies import get_gate_config_service, get_gate_service
from specguard.gate.config import QualityGateConfigService
from specguard.gate.models import CommitResult, PreCommitEvent, QualityGateConfig
from specguard.gate.service import QualityGateService

router = APIRouter()


@router.post("/gate/enforce", response_model=CommitResult)
async def enforce_gate(
    event: PreCommitEvent, gate_service: QualityGateService = Depends(get_gate_service)
) -> CommitResult:
    """Decide whether a commit may proceed."""
    return gate_service.enforce(event)


@router.get("/gate/config/{team_id}", response_model=QualityGateConfig)
async def get_gate_config(
    team_id: str, config_service: QualityGateConfigService = Depends(get_gate_config_service)
) -> QualityGateConfig:
    return config_service.get_config(team_id)


@router.put("/gate/config/{team_id}", response_model=QualityGateConfig)
async def update_gate_config(
    team_id: str,
    changes: dict[str, Any] = Body(...),
    config_service: QualityGateConfigService = Depends(get_gate_config_service),
) -> QualityGateConfig:
    """Merge partial changes into a team's gate configuration."""
    return config_service.update_config(team_id, changes)
