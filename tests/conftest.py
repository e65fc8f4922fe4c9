"""
Shared pytest fixtures and project-root path setup.
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from specguard.analysis.service import AnalysisService  # noqa: E402
from specguard.rules.compiler import SpecCompiler  # noqa: E402


@pytest.fixture
def compiler() -> SpecCompiler:
    return SpecCompiler()


@pytest.fixture
def analysis_service(compiler: SpecCompiler) -> AnalysisService:
    return AnalysisService(compiler=compiler, line_checks=[])

