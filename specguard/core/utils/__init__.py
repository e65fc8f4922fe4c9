"""
Shared utilities for logging and path pattern matching.
"""

from specguard.core.utils.logging import configure_logging, log_operation
from specguard.core.utils.patterns import matches_any

__all__ = [
    "configure_logging",
    "log_operation",
    "matches_any",
]
