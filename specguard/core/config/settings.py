"""
Main configuration class that composes all configs.
"""

import json
import os

from dotenv import load_dotenv

from specguard.core.config.analysis_config import AnalysisConfig
from specguard.core.config.compiler_config import CompilerConfig
from specguard.core.config.cors_config import CORSConfig
from specguard.core.config.logging_config import LoggingConfig

# Load environment variables from a .env file
load_dotenv()

DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://127.0.0.1:3000"]


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.compiler = CompilerConfig(
            spec_acceptance_confidence=float(os.getenv("SPEC_ACCEPTANCE_CONFIDENCE", "0.7")),
            load_default_specs=os.getenv("LOAD_DEFAULT_SPECS", "true").lower() == "true",
        )

        self.analysis = AnalysisConfig(
            line_checks_enabled=os.getenv("LINE_CHECKS_ENABLED", "true").lower() == "true",
            max_line_length=int(os.getenv("MAX_LINE_LENGTH", "120")),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            json_logs=os.getenv("LOG_JSON", "false").lower() == "true",
        )

        # CORS configuration
        cors_headers = os.getenv("CORS_HEADERS", '["*"]')
        cors_origins = os.getenv("CORS_ORIGINS", json.dumps(DEFAULT_CORS_ORIGINS))

        try:
            self.cors = CORSConfig(
                headers=json.loads(cors_headers),
                origins=json.loads(cors_origins),
            )
        except json.JSONDecodeError:
            # Fallback to default values if JSON parsing fails
            self.cors = CORSConfig(headers=["*"], origins=list(DEFAULT_CORS_ORIGINS))

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if not 0.0 <= self.compiler.spec_acceptance_confidence <= 1.0:
            errors.append("SPEC_ACCEPTANCE_CONFIDENCE must be between 0 and 1")

        if self.analysis.max_line_length < 1:
            errors.append("MAX_LINE_LENGTH must be positive")

        if self.logging.level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            errors.append(f"LOG_LEVEL '{self.logging.level}' is not a valid logging level")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
