"""
Analysis configuration.
"""

from dataclasses import dataclass


@dataclass
class AnalysisConfig:
    """Settings for the built-in line checks run on every analyzed file."""

    line_checks_enabled: bool = True
    max_line_length: int = 120
