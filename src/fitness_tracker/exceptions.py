"""
Custom exceptions for the Fitness Tracker package.

This module defines all custom exceptions used throughout the application,
providing clear error hierarchies and specific error types for different scenarios.
Platform errors carry a stable ``code`` that matches the wire error codes
reported by the location and biometric services.
"""


class FitnessTrackerError(Exception):
    """Base exception for all Fitness Tracker errors."""


class ConfigurationError(FitnessTrackerError):
    """Raised when there is an issue with configuration settings."""


class ValidationError(FitnessTrackerError):
    """Raised when data validation fails."""


class DataLoadError(FitnessTrackerError):
    """Raised when there is an error loading data files."""


class UnsupportedCommandError(FitnessTrackerError):
    """Raised when a control command is not recognised."""


class PlatformError(FitnessTrackerError):
    """Base class for errors reported by platform collaborators."""

    code: str = "PLATFORM_ERROR"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class PermissionDeniedError(PlatformError):
    """Raised when a permission-gated operation lacks its permission."""

    code = "PERMISSION_DENIED"


class ResourceUnavailableError(PlatformError):
    """Raised when a requested resource (e.g. a location fix) is not available."""

    code = "NO_LOCATION"


class SecurityError(PlatformError):
    """Raised when the platform refuses an authorized call at runtime."""

    code = "SECURITY_ERROR"


class UnsupportedError(PlatformError):
    """Raised when the device lacks the hardware or enrollment for a feature."""

    code = "UNSUPPORTED"
