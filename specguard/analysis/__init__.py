from specguard.analysis.models import AnalysisRequest, AnalysisResult
from specguard.analysis.service import AnalysisService

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisService",
]
