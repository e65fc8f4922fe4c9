"""
Per-team quality gate configuration.
"""

from typing import Any

import structlog
from pydantic import ValidationError

from specguard.core.errors import GateConfigError
from specguard.core.utils.patterns import matches_any
from specguard.gate.models import QualityGateConfig, QualityThresholds

logger = structlog.get_logger(__name__)

DEFAULT_TEAM = "default"


def _strict_team_config() -> QualityGateConfig:
    return QualityGateConfig(
        thresholds=QualityThresholds(
            min_quality_score=85,
            max_critical_violations=0,
            max_error_violations=1,
            max_warning_violations=5,
        ),
        team_id="strict-team",
    )


def _validation_messages(error: ValidationError) -> list[str]:
    messages = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "config"
        messages.append(f"{location}: {item['msg']}")
    return messages


class QualityGateConfigService:
    """Holds gate configurations keyed by team, falling back to the default one."""

    def __init__(self) -> None:
        self.default_config = QualityGateConfig()
        self._configs: dict[str, QualityGateConfig] = {
            DEFAULT_TEAM: self.default_config,
            "strict-team": _strict_team_config(),
        }

    def get_config(self, team_id: str | None = None) -> QualityGateConfig:
        if team_id and team_id in self._configs:
            return self._configs[team_id]
        return self.default_config

    def update_config(self, team_id: str, changes: dict[str, Any]) -> QualityGateConfig:
        """
        Merge partial changes into a team's configuration.

        Threshold changes are merged field by field, so a partial `thresholds`
        mapping keeps the remaining limits. The merged configuration is
        type-checked before the range checks run.

        Raises:
            GateConfigError: If the merged configuration is malformed or its
                thresholds are out of range.
        """
        existing = self.get_config(team_id)
        threshold_changes = changes.get("thresholds") or {}
        if not isinstance(threshold_changes, dict):
            raise GateConfigError(
                "Invalid configuration: thresholds must be a mapping", ["thresholds: must be a mapping"]
            )

        merged = existing.model_dump()
        merged.update({key: value for key, value in changes.items() if key != "thresholds"})
        merged["thresholds"] = {**existing.thresholds.model_dump(), **threshold_changes}
        merged["team_id"] = team_id

        try:
            updated = QualityGateConfig.model_validate(merged)
        except ValidationError as e:
            raise GateConfigError(f"Invalid configuration: {e}", _validation_messages(e)) from e

        errors = self.validate_thresholds(updated.thresholds.model_dump())
        if errors:
            raise GateConfigError(f"Invalid configuration: {', '.join(errors)}", errors)

        self._configs[team_id] = updated
        logger.info("gate_config_updated", team_id=team_id)
        return updated

    def is_file_excluded(self, file_path: str, config: QualityGateConfig) -> bool:
        return matches_any(file_path, config.exclude_patterns)

    def validate_thresholds(self, thresholds: dict[str, Any]) -> list[str]:
        errors: list[str] = []

        score = thresholds.get("min_quality_score")
        if score is not None and not 0 <= score <= 100:
            errors.append("min_quality_score must be between 0 and 100")

        for key in ("max_critical_violations", "max_error_violations", "max_warning_violations"):
            value = thresholds.get(key)
            if value is not None and value < 0:
                errors.append(f"{key} must be non-negative")

        return errors

    def export_config(self, team_id: str | None = None) -> str:
        return self.get_config(team_id).model_dump_json(indent=2)

    def import_config(self, team_id: str, config_json: str) -> QualityGateConfig:
        """
        Replace a team's configuration from its JSON export.

        Raises:
            GateConfigError: If the JSON is malformed or the thresholds invalid.
        """
        try:
            imported = QualityGateConfig.model_validate_json(config_json)
        except ValidationError as e:
            raise GateConfigError(f"Failed to import configuration: {e}", _validation_messages(e)) from e

        errors = self.validate_thresholds(imported.thresholds.model_dump())
        if errors:
            raise GateConfigError(f"Failed to import configuration: Invalid configuration: {', '.join(errors)}", errors)

        self._configs[team_id] = imported
        logger.info("gate_config_imported", team_id=team_id)
        return imported
