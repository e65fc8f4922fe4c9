import json

import pytest

from specguard.core.errors import GateConfigError
from specguard.gate.config import QualityGateConfigService


@pytest.fixture
def config_service() -> QualityGateConfigService:
    return QualityGateConfigService()


class TestQualityGateConfigService:
    def test_default_config(self, config_service: QualityGateConfigService) -> None:
        config = config_service.get_config()

        assert config.enabled is True
        assert config.thresholds.min_quality_score == 70
        assert config.thresholds.max_critical_violations == 0
        assert config.thresholds.max_error_violations == 3
        assert config.thresholds.max_warning_violations == 10
        assert config.thresholds.block_on_critical is True
        assert config.thresholds.warn_on_low_score is True
        assert "node_modules/**" in config.exclude_patterns

    def test_strict_team_config(self, config_service: QualityGateConfigService) -> None:
        thresholds = config_service.get_config("strict-team").thresholds

        assert (
            thresholds.min_quality_score,
            thresholds.max_critical_violations,
            thresholds.max_error_violations,
            thresholds.max_warning_violations,
        ) == (85, 0, 1, 5)

    def test_unknown_team_gets_default(self, config_service: QualityGateConfigService) -> None:
        assert config_service.get_config("nobody") is config_service.default_config

    def test_update_merges_partial_thresholds(self, config_service: QualityGateConfigService) -> None:
        updated = config_service.update_config("team-a", {"thresholds": {"min_quality_score": 90}})

        assert updated.team_id == "team-a"
        assert updated.thresholds.min_quality_score == 90
        assert updated.thresholds.max_error_violations == 3
        assert config_service.get_config("team-a") == updated
        assert config_service.get_config().thresholds.min_quality_score == 70

    def test_update_top_level_fields(self, config_service: QualityGateConfigService) -> None:
        updated = config_service.update_config("team-a", {"enabled": False, "exclude_patterns": ["vendor/**"]})

        assert updated.enabled is False
        assert updated.exclude_patterns == ["vendor/**"]

    @pytest.mark.parametrize(
        ("thresholds", "message"),
        [
            ({"min_quality_score": 150}, "min_quality_score must be between 0 and 100"),
            ({"max_error_violations": -1}, "max_error_violations must be non-negative"),
        ],
    )
    def test_update_rejects_invalid_thresholds(self, config_service, thresholds, message) -> None:
        with pytest.raises(GateConfigError) as exc_info:
            config_service.update_config("team-a", {"thresholds": thresholds})

        assert exc_info.value.errors == [message]
        assert config_service.get_config("team-a") is config_service.default_config

    def test_update_rejects_wrong_types(self, config_service: QualityGateConfigService) -> None:
        with pytest.raises(GateConfigError):
            config_service.update_config("team-a", {"enabled": "sometimes"})

    def test_update_rejects_non_numeric_threshold(self, config_service: QualityGateConfigService) -> None:
        with pytest.raises(GateConfigError) as exc_info:
            config_service.update_config("team-a", {"thresholds": {"min_quality_score": "high"}})

        assert exc_info.value.errors[0].startswith("thresholds.min_quality_score: ")
        assert config_service.get_config("team-a") is config_service.default_config

    def test_update_rejects_non_mapping_thresholds(self, config_service: QualityGateConfigService) -> None:
        with pytest.raises(GateConfigError) as exc_info:
            config_service.update_config("team-a", {"thresholds": [90]})

        assert exc_info.value.errors == ["thresholds: must be a mapping"]


    @pytest.mark.parametrize(
        ("path", "excluded"),
        [
            ("node_modules/react/index.js", True),
            ("dist/app.js", True),
            ("src/app.test.ts", True),
            ("docs/README.md", True),
            ("package.json", True),
            ("src/app.ts", False),
        ],
    )
    def test_is_file_excluded(self, config_service, path, excluded) -> None:
        assert config_service.is_file_excluded(path, config_service.get_config()) is excluded

    def test_export_and_import(self, config_service: QualityGateConfigService) -> None:
        exported = config_service.export_config("strict-team")

        imported = config_service.import_config("team-b", exported)

        assert json.loads(exported)["thresholds"]["min_quality_score"] == 85
        assert imported.thresholds == config_service.get_config("strict-team").thresholds
        assert config_service.get_config("team-b") == imported

    def test_import_malformed_json(self, config_service: QualityGateConfigService) -> None:
        with pytest.raises(GateConfigError, match="Failed to import configuration"):
            config_service.import_config("team-b", "{not json")

    def test_import_invalid_thresholds(self, config_service: QualityGateConfigService) -> None:
        payload = json.dumps({"thresholds": {"max_warning_violations": -5}})

        with pytest.raises(GateConfigError) as exc_info:
            config_service.import_config("team-b", payload)

        assert exc_info.value.errors == ["max_warning_violations must be non-negative"]
