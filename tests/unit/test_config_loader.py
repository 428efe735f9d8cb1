"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: YAML loading, defaults, profile merging
    ✅ Error Handling: Missing files, invalid values, non-mapping YAML
"""

from __future__ import annotations

from pathlib import Path

import pytest

from hr_record_filter.config.loader import ConfigLoader, load_config
from hr_record_filter.config.models import FilterEngineConfig

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_sample_config(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Load the sample YAML fixture
        EXPECTED: Overrides applied, remaining fields defaulted
        """
        # Arrange
        loader = ConfigLoader()

        # Act
        config = loader.load(sample_config_path)

        # Assert
        assert isinstance(config, FilterEngineConfig)
        assert config.classifiers.duration.short_max_days == 1
        assert config.classifiers.duration.medium_max_days == 3
        assert config.choices.leave_types == ["casual", "sick"]
        assert config.classifiers.time.early_before_minutes == 525

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config with only the version
        EXPECTED: Built-in thresholds and labels
        """
        config = ConfigLoader().load_from_dict({"version": "1.0"})

        assert config.unknown_label == "Unknown"
        assert config.classifiers.time.on_time_until_minutes == 540
        assert config.classifiers.salary.boundaries == [50_000, 80_000, 120_000]
        assert config.search_filter.enabled is True

    def test_shipped_default_matches_models(self) -> None:
        """
        SCENARIO: Load config/default.yaml from the project root
        EXPECTED: Same values as the model defaults
        """
        config = load_config("config/default.yaml", base_path=PROJECT_ROOT)

        assert config == FilterEngineConfig()

    def test_profile_overrides_time_thresholds(self) -> None:
        """
        SCENARIO: Apply the flexible_hours profile
        EXPECTED: Time thresholds moved, everything else unchanged
        """
        config = load_config(
            "config/default.yaml", profile="flexible_hours", base_path=PROJECT_ROOT
        )

        assert config.classifiers.time.early_before_minutes == 555
        assert config.classifiers.time.on_time_until_minutes == 570
        assert config.classifiers.duration.short_max_days == 2

    def test_missing_profile(self, tmp_path: Path) -> None:
        (tmp_path / "base.yaml").write_text('version: "1.0"\n')
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(FileNotFoundError, match="Profile not found"):
            loader.load("base.yaml", profile="night_shift")

    def test_file_not_found(self, tmp_path: Path) -> None:
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(FileNotFoundError):
            loader.load("nonexistent.yaml")

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        """
        SCENARIO: Time thresholds in the wrong order
        EXPECTED: Pydantic validation error
        """
        # Arrange
        config_content = """
version: "1.0"
classifiers:
  time:
    early_before_minutes: 600
    on_time_until_minutes: 540
"""
        (tmp_path / "invalid.yaml").write_text(config_content)
        loader = ConfigLoader(base_path=tmp_path)

        # Act & Assert
        with pytest.raises(Exception):  # Pydantic ValidationError
            loader.load("invalid.yaml")

    def test_rejects_mismatched_band_labels(self) -> None:
        with pytest.raises(Exception):  # Pydantic ValidationError
            ConfigLoader().load_from_dict(
                {"classifiers": {"salary": {"boundaries": [1, 2], "labels": ["a", "b"]}}}
            )

    def test_rejects_non_mapping_yaml(self, tmp_path: Path) -> None:
        (tmp_path / "list.yaml").write_text("- a\n- b\n")
        loader = ConfigLoader(base_path=tmp_path)

        with pytest.raises(ValueError, match="must contain a mapping"):
            loader.load("list.yaml")

    def test_merges_configs(self) -> None:
        """
        SCENARIO: Two configs merged together
        EXPECTED: Overlay values override base values, siblings survive
        """
        # Arrange
        loader = ConfigLoader()
        base = {
            "version": "1.0",
            "classifiers": {"duration": {"short_max_days": 2, "medium_max_days": 5}},
        }
        overlay = {"classifiers": {"duration": {"medium_max_days": 7}}}

        # Act
        result = loader._merge_configs(base, overlay)

        # Assert
        assert result["classifiers"]["duration"] == {"short_max_days": 2, "medium_max_days": 7}
        assert result["version"] == "1.0"
