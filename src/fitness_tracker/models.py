"""
Data models for the Fitness Tracker package.

This module defines all the core data structures used throughout the application,
ensuring type safety and data validation using Pydantic models.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import BiometricPromptText, LocationConstants, MotionConstants
from .exceptions import (
    PermissionDeniedError,
    PlatformError,
    ResourceUnavailableError,
    SecurityError,
    UnsupportedError,
)


class ActivityType(str, Enum):
    """Coarse activity classes reported by the motion pipeline."""

    STATIONARY = "stationary"
    WALKING = "walking"
    RUNNING = "running"


class DebounceMode(str, Enum):
    """
    Commit policy of the activity classifier.

    IMMEDIATE commits the candidate band on every tick. GATED commits only once
    the confidence counter reaches the debounce threshold.
    """

    IMMEDIATE = "immediate"
    GATED = "gated"


class RawSample(BaseModel):
    """A single tri-axial accelerometer reading in m/s²."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., description="Acceleration along the X axis")
    y: float = Field(..., description="Acceleration along the Y axis")
    z: float = Field(..., description="Acceleration along the Z axis")


class ActivityReport(BaseModel):
    """Batched report combining the step counter and classifier outputs."""

    model_config = ConfigDict(frozen=True)

    step_count: int = Field(..., ge=0, description="Steps since the last reset")
    activity_type: ActivityType = Field(..., description="Committed activity")
    smoothed_magnitude: float = Field(
        ..., description="Moving average of the acceleration magnitude"
    )

    def to_record(self) -> dict[str, int | str | float]:
        """Return the wire record emitted on the activity stream."""
        return {
            "stepCount": self.step_count,
            "activityType": self.activity_type.value,
            "magnitude": self.smoothed_magnitude,
        }


class MotionConfig(BaseModel):
    """Thresholds and sizes of the motion-activity pipeline."""

    window_size: int = Field(
        MotionConstants.WINDOW_SIZE, description="Moving average window in samples"
    )
    step_threshold: float = Field(
        MotionConstants.STEP_THRESHOLD,
        description="Raw magnitude a rising edge must cross to count a step",
    )
    walking_threshold: float = Field(
        MotionConstants.WALKING_THRESHOLD,
        description="Lower edge (inclusive) of the walking band",
    )
    running_threshold: float = Field(
        MotionConstants.RUNNING_THRESHOLD,
        description="Lower edge (inclusive) of the running band",
    )
    debounce_threshold: int = Field(
        MotionConstants.DEBOUNCE_THRESHOLD,
        description="Confidence required before the gated classifier commits",
    )
    batch_size: int = Field(
        MotionConstants.BATCH_SIZE, description="Samples per emitted report"
    )
    debounce_mode: DebounceMode = Field(
        DebounceMode.IMMEDIATE, description="Classifier commit policy"
    )

    @field_validator("window_size", "batch_size", "debounce_threshold")
    @classmethod
    def check_positive(cls, v: int, info) -> int:
        """Validate that sizes and counters are positive."""
        if v < 1:
            raise ValueError(f"{info.field_name} must be at least 1")
        return v

    @model_validator(mode="after")
    def check_band_order(self) -> "MotionConfig":
        """Validate that the walking band sits below the running band."""
        if self.walking_threshold >= self.running_threshold:
            raise ValueError("walking_threshold must be below running_threshold")
        return self


class LocationConfig(BaseModel):
    """Parameters for continuous location updates."""

    min_update_interval_ms: int = Field(
        LocationConstants.MIN_UPDATE_INTERVAL_MS,
        ge=0,
        description="Minimum time between location updates",
    )
    min_update_distance_m: float = Field(
        LocationConstants.MIN_UPDATE_DISTANCE_M,
        ge=0,
        description="Minimum distance between location updates",
    )


class BiometricPromptConfig(BaseModel):
    """Text shown on the biometric prompt."""

    title: str = BiometricPromptText.TITLE
    subtitle: str = BiometricPromptText.SUBTITLE
    description: str = BiometricPromptText.DESCRIPTION
    negative_button_text: str = BiometricPromptText.NEGATIVE_BUTTON


class LocationRecord(BaseModel):
    """A location fix as reported by the platform."""

    latitude: float
    longitude: float
    altitude: float = 0.0
    speed: float = 0.0
    accuracy: float = 0.0
    timestamp: int = Field(..., description="Fix time in epoch milliseconds")


class ErrorCode(str, Enum):
    """Stable error codes surfaced by the platform services."""

    PERMISSION_DENIED = "PERMISSION_DENIED"
    NO_LOCATION = "NO_LOCATION"
    SECURITY_ERROR = "SECURITY_ERROR"
    UNSUPPORTED = "UNSUPPORTED"


class AuthOutcome(str, Enum):
    """Terminal outcome of a biometric prompt."""

    SUCCEEDED = "succeeded"
    ERROR = "error"
    CANCELLED = "cancelled"


_ERROR_TYPES: dict[ErrorCode, type[PlatformError]] = {
    ErrorCode.PERMISSION_DENIED: PermissionDeniedError,
    ErrorCode.NO_LOCATION: ResourceUnavailableError,
    ErrorCode.SECURITY_ERROR: SecurityError,
    ErrorCode.UNSUPPORTED: UnsupportedError,
}


class ServiceError(BaseModel):
    """Typed failure returned by a permission-gated operation."""

    code: ErrorCode
    message: str = ""

    def to_exception(self) -> PlatformError:
        """Build the exception matching this error code."""
        return _ERROR_TYPES[self.code](self.message)


class LocationResult(BaseModel):
    """Either a location fix or the reason none could be provided."""

    location: LocationRecord | None = None
    error: ServiceError | None = None

    @model_validator(mode="after")
    def check_exclusive(self) -> "LocationResult":
        """Validate that exactly one of location and error is set."""
        if (self.location is None) == (self.error is None):
            raise ValueError("LocationResult needs exactly one of location or error")
        return self

    @classmethod
    def success(cls, location: LocationRecord) -> "LocationResult":
        """Wrap a successful fix."""
        return cls(location=location)

    @classmethod
    def failure(cls, code: ErrorCode, message: str = "") -> "LocationResult":
        """Wrap a failure with its stable code."""
        return cls(error=ServiceError(code=code, message=message))

    @property
    def ok(self) -> bool:
        """True when a location fix is present."""
        return self.location is not None

    def unwrap(self) -> LocationRecord:
        """Return the fix or raise the exception mapped from the error code."""
        if self.error is not None:
            raise self.error.to_exception()
        if self.location is None:
            raise ValueError("LocationResult holds neither a location nor an error")
        return self.location


class SessionSummary(BaseModel):
    """Aggregate view of the reports emitted during a session."""

    total_reports: int = Field(..., description="Number of reports emitted")
    final_step_count: int = Field(..., description="Step count of the last report")
    activity_distribution: dict[str, float] = Field(
        default_factory=dict, description="Share of reports per activity (%)"
    )
    mean_magnitude: float = Field(0.0, description="Mean smoothed magnitude")
    max_magnitude: float = Field(0.0, description="Maximum smoothed magnitude")

    @property
    def dominant_activity(self) -> ActivityType | None:
        """Activity with the largest share of reports."""
        if not self.activity_distribution:
            return None
        label = max(self.activity_distribution, key=self.activity_distribution.get)
        return ActivityType(label)
