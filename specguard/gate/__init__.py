from specguard.gate.config import QualityGateConfigService
from specguard.gate.models import CommitAction, CommitResult, PreCommitEvent, QualityGateConfig, QualityThresholds
from specguard.gate.service import QualityGateService

__all__ = [
    "CommitAction",
    "CommitResult",
    "PreCommitEvent",
    "QualityGateConfig",
    "QualityGateConfigService",
    "QualityGateService",
    "QualityThresholds",
]
