"""
Shared pytest fixtures for Fitness Tracker tests.

This module provides reusable fixtures for:
- Settings configurations
- Accelerometer samples and recorded sessions
- Platform adapters (replay accelerometer, location provider)
"""

from pathlib import Path

import pandas as pd
import pytest

from fitness_tracker.adapters import ReplayAccelerometer, StaticLocationProvider
from fitness_tracker.models import DebounceMode, LocationRecord, RawSample
from fitness_tracker.settings import Settings

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def temp_config_file(tmp_path: Path) -> Path:
    """Create a temporary YAML config file path for testing."""
    return tmp_path / "config.yaml"


@pytest.fixture
def settings() -> Settings:
    """Provide default settings (immediate commit classifier)."""
    return Settings()


@pytest.fixture
def gated_settings() -> Settings:
    """Provide settings with the debounce-gated classifier."""
    settings = Settings()
    settings.motion = settings.motion.model_copy(
        update={"debounce_mode": DebounceMode.GATED}
    )
    return settings


# ============================================================================
# Data Fixtures - Samples
# ============================================================================


def sample_with_magnitude(value: float) -> RawSample:
    """Build a sample whose Euclidean norm equals value."""
    return RawSample(x=value, y=0.0, z=0.0)


@pytest.fixture
def make_sample():
    """Provide a factory for samples with a given magnitude."""
    return sample_with_magnitude


@pytest.fixture
def walking_samples() -> list[RawSample]:
    """
    Provide 9 samples alternating 11 and 13 m/s².

    Raw magnitudes cross the step threshold at indices 1, 3, 5 and 7; the
    moving average stays inside the walking band.
    """
    return [sample_with_magnitude(11.0 if i % 2 == 0 else 13.0) for i in range(9)]


@pytest.fixture
def samples_csv(tmp_path: Path) -> Path:
    """Create a recorded session CSV with 9 walking samples."""
    path = tmp_path / "samples.csv"
    pd.DataFrame(
        {
            "timestamp": list(range(0, 180, 20)),
            "x": [11.0 if i % 2 == 0 else 13.0 for i in range(9)],
            "y": [0.0] * 9,
            "z": [0.0] * 9,
        }
    ).to_csv(path, index=False)
    return path


# ============================================================================
# Platform Adapter Fixtures
# ============================================================================


@pytest.fixture
def accelerometer(walking_samples: list[RawSample]) -> ReplayAccelerometer:
    """Provide a replay accelerometer loaded with walking samples."""
    return ReplayAccelerometer(walking_samples)


@pytest.fixture
def gps_fix() -> LocationRecord:
    """Provide a GPS location fix."""
    return LocationRecord(
        latitude=40.4168,
        longitude=-3.7038,
        altitude=667.0,
        speed=1.4,
        accuracy=5.0,
        timestamp=1_700_000_000_000,
    )


@pytest.fixture
def network_fix() -> LocationRecord:
    """Provide a coarser network location fix."""
    return LocationRecord(
        latitude=40.4170,
        longitude=-3.7040,
        accuracy=120.0,
        timestamp=1_700_000_005_000,
    )


@pytest.fixture
def location_provider(gps_fix: LocationRecord) -> StaticLocationProvider:
    """Provide a permitted location provider with a cached GPS fix."""
    return StaticLocationProvider(last_known={"gps": gps_fix})
