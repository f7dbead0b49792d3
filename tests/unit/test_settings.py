"""Unit tests for Settings module."""

from pathlib import Path

import pytest
import yaml

from fitness_tracker.exceptions import ConfigurationError
from fitness_tracker.models import DebounceMode, MotionConfig
from fitness_tracker.settings import Settings, load_settings


class TestSettingsBasicLoading:
    """Test basic settings loading from different sources."""

    def test_default_values(self):
        """Test that settings use default values when no config is provided."""
        settings = Settings()

        assert settings.motion.window_size == 10
        assert settings.motion.step_threshold == 12.0
        assert settings.motion.walking_threshold == 10.5
        assert settings.motion.running_threshold == 13.5
        assert settings.motion.debounce_threshold == 3
        assert settings.motion.batch_size == 3
        assert settings.motion.debounce_mode == DebounceMode.IMMEDIATE
        assert settings.location.min_update_interval_ms == 1000
        assert settings.output_dir == Path("output")

    def test_load_from_env_vars(self, monkeypatch):
        """Test that settings are correctly loaded from environment variables."""
        monkeypatch.setenv("FITNESS_TRACKER_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("FITNESS_TRACKER_MOTION__BATCH_SIZE", "5")
        monkeypatch.setenv("FITNESS_TRACKER_MOTION__DEBOUNCE_MODE", "gated")

        settings = load_settings()

        assert settings.log_level == "DEBUG"
        assert settings.motion.batch_size == 5
        assert settings.motion.debounce_mode == DebounceMode.GATED

    def test_load_from_yaml(self, temp_config_file: Path):
        """Test that settings are correctly loaded from a YAML file."""
        config_data = {
            "motion": {"window_size": 5, "debounce_mode": "gated"},
            "location": {"min_update_interval_ms": 2000},
            "biometric": {"title": "Confirm it's you"},
        }
        with open(temp_config_file, "w") as f:
            yaml.dump(config_data, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.motion.window_size == 5
        assert settings.motion.debounce_mode == DebounceMode.GATED
        assert settings.motion.batch_size == 3
        assert settings.location.min_update_interval_ms == 2000
        assert settings.biometric.title == "Confirm it's you"

    def test_yaml_overrides_env_vars(self, monkeypatch, temp_config_file: Path):
        """Test that YAML settings override environment variables."""
        monkeypatch.setenv("FITNESS_TRACKER_LOG_LEVEL", "DEBUG")

        with open(temp_config_file, "w") as f:
            yaml.dump({"log_level": "WARNING"}, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.log_level == "WARNING"

    def test_empty_yaml(self, temp_config_file: Path):
        """Test that an empty config file falls back to defaults."""
        temp_config_file.write_text("")

        settings = load_settings(config_file=temp_config_file)

        assert settings.motion == MotionConfig()


class TestSettingsPathResolution:
    """Test path resolution and handling."""

    def test_relative_output_dir_resolved(self, temp_config_file: Path):
        """Test that a relative output dir is anchored at the config file."""
        with open(temp_config_file, "w") as f:
            yaml.dump({"output_dir": "reports"}, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.output_dir == temp_config_file.parent / "reports"

    def test_absolute_output_dir_preserved(
        self, temp_config_file: Path, tmp_path: Path
    ):
        """Test that absolute paths are preserved."""
        abs_dir = tmp_path / "absolute_reports"
        with open(temp_config_file, "w") as f:
            yaml.dump({"output_dir": str(abs_dir)}, f)

        settings = load_settings(config_file=temp_config_file)

        assert settings.output_dir == abs_dir


class TestSettingsValidation:
    """Test settings validation and constraints."""

    def test_band_order_enforced(self, temp_config_file: Path):
        """Test that the walking band must sit below the running band."""
        with open(temp_config_file, "w") as f:
            yaml.dump({"motion": {"walking_threshold": 14.0}}, f)

        with pytest.raises(ConfigurationError):
            load_settings(config_file=temp_config_file)

    @pytest.mark.parametrize("field", ["window_size", "batch_size", "debounce_threshold"])
    def test_sizes_must_be_positive(self, temp_config_file: Path, field: str):
        """Test that zero sizes are rejected."""
        with open(temp_config_file, "w") as f:
            yaml.dump({"motion": {field: 0}}, f)

        with pytest.raises(ConfigurationError):
            load_settings(config_file=temp_config_file)

    def test_unknown_debounce_mode(self, temp_config_file: Path):
        """Test that an unknown classifier variant is rejected."""
        with open(temp_config_file, "w") as f:
            yaml.dump({"motion": {"debounce_mode": "sometimes"}}, f)

        with pytest.raises(ConfigurationError):
            load_settings(config_file=temp_config_file)

    def test_negative_update_interval(self):
        """Test that a negative location interval is rejected."""
        with pytest.raises(ValueError):
            Settings(location={"min_update_interval_ms": -1})
