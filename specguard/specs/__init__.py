from specguard.specs.formats import SpecFormat
from specguard.specs.service import QualitySpecService, SpecOperationResult, SpecStats

__all__ = [
    "QualitySpecService",
    "SpecFormat",
    "SpecOperationResult",
    "SpecStats",
]
