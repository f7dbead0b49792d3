"""
Constants used throughout the Fitness Tracker package.

This module centralizes all magic numbers and commonly used values to improve
maintainability and clarity.
"""

from typing import Final


# === Motion Pipeline Constants ===
class MotionConstants:
    """Default thresholds and sizes for the motion-activity pipeline."""

    # Moving average window (number of magnitude samples)
    WINDOW_SIZE: Final[int] = 10

    # Step detection on the raw (unsmoothed) magnitude, in m/s²
    STEP_THRESHOLD: Final[float] = 12.0

    # Activity bands on the smoothed magnitude, in m/s² (lower edge inclusive)
    WALKING_THRESHOLD: Final[float] = 10.5
    RUNNING_THRESHOLD: Final[float] = 13.5

    # Consecutive agreeing ticks required by the gated classifier
    DEBOUNCE_THRESHOLD: Final[int] = 3

    # One report every N ingested samples
    BATCH_SIZE: Final[int] = 3


# === Location Constants ===
class LocationConstants:
    """Location update request parameters."""

    MIN_UPDATE_INTERVAL_MS: Final[int] = 1000
    MIN_UPDATE_DISTANCE_M: Final[float] = 0.0

    GPS_PROVIDER: Final[str] = "gps"
    NETWORK_PROVIDER: Final[str] = "network"

    FINE_LOCATION_PERMISSION: Final[str] = "ACCESS_FINE_LOCATION"
    COARSE_LOCATION_PERMISSION: Final[str] = "ACCESS_COARSE_LOCATION"


# === Biometric Prompt Text ===
class BiometricPromptText:
    """Default text shown on the biometric prompt."""

    TITLE: Final[str] = "Biometric Authentication"
    SUBTITLE: Final[str] = "Use your fingerprint"
    DESCRIPTION: Final[str] = "Place your finger on the sensor"
    NEGATIVE_BUTTON: Final[str] = "Cancel"


# === CSV Constants ===
class CSVConstants:
    """CSV file handling constants."""

    DEFAULT_SEPARATOR: Final[str] = ","
    SAMPLE_COLUMNS: Final[tuple[str, ...]] = ("x", "y", "z")
    OPTIONAL_SAMPLE_COLUMNS: Final[tuple[str, ...]] = ("timestamp",)
    REPORT_COLUMNS: Final[tuple[str, ...]] = (
        "step_count",
        "activity_type",
        "smoothed_magnitude",
    )
    REPORTS_FILENAME: Final[str] = "activity_reports.csv"
