"""
Service dependencies for the HTTP layer.

The services hold the in-memory spec store, rule registry and gate configs,
so one instance of each is shared by every request. Tests swap them through
`app.dependency_overrides`.
"""

from functools import lru_cache

from specguard.analysis.service import AnalysisService
from specguard.gate.config import QualityGateConfigService
from specguard.gate.service import QualityGateService
from specguard.rules.compiler import SpecCompiler
from specguard.specs.service import QualitySpecService


@lru_cache
def get_compiler() -> SpecCompiler:
    return SpecCompiler()


@lru_cache
def get_analysis_service() -> AnalysisService:
    return AnalysisService(compiler=get_compiler())


@lru_cache
def get_spec_service() -> QualitySpecService:
    return QualitySpecService(analysis_service=get_analysis_service())


@lru_cache
def get_gate_config_service() -> QualityGateConfigService:
    return QualityGateConfigService()


@lru_cache
def get_gate_service() -> QualityGateService:
    # The spec store must exist first so default specs are registered
    get_spec_service()
    return QualityGateService(analysis_service=get_analysis_service(), config_service=get_gate_config_service())
