"""Application settings and configuration management."""

from pathlib import Path

import yaml
from pydantic import ValidationError as PydanticValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import BiometricPromptConfig, LocationConfig, MotionConfig


class Settings(BaseSettings):
    """
    Application settings for Fitness Tracker.

    Settings are loaded in the following order of precedence (highest to lowest):
    1. Values from a YAML config file passed to load_settings
    2. Environment variables (e.g., FITNESS_TRACKER_MOTION__BATCH_SIZE)
    3. .env file (if found)
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="FITNESS_TRACKER_",
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # --- File Paths ---
    output_dir: Path = Path("output")  # Where replay reports are written

    # --- Logging ---
    log_level: str = "INFO"

    # --- Motion pipeline ---
    motion: MotionConfig = MotionConfig()

    # --- Location updates ---
    location: LocationConfig = LocationConfig()

    # --- Biometric prompt ---
    biometric: BiometricPromptConfig = BiometricPromptConfig()


def load_settings(config_file: Path | None = None) -> Settings:
    """Load settings from a YAML file, environment variables, and defaults."""
    try:
        if config_file:
            with open(config_file, encoding="utf-8") as f:
                yaml_settings = yaml.safe_load(f) or {}

            # Relative output paths are anchored at the config file
            if "output_dir" in yaml_settings:
                output_dir = Path(yaml_settings["output_dir"]).expanduser()
                if not output_dir.is_absolute():
                    output_dir = config_file.parent / output_dir
                yaml_settings["output_dir"] = str(output_dir)

            return Settings(**yaml_settings)

        return Settings()
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
