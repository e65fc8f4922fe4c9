"""
Specification compiler configuration.

Only acceptance policy lives here. The usability (0.5) and low-confidence (0.7)
thresholds are part of the compiler contract and live in core.constants.
"""

from dataclasses import dataclass


@dataclass
class CompilerConfig:
    """Specification acceptance settings."""

    # A spec is accepted into the store only above this overall confidence
    spec_acceptance_confidence: float = 0.7
    load_default_specs: bool = True
