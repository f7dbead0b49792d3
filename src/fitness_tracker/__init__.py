"""Fitness Tracker - real-time step counting and activity classification."""

__version__ = "1.0.0"

from . import adapters, analysis, constants, data, exceptions, models, motion, services
from .analysis import SessionSummarizer
from .data import SampleLoader
from .models import (
    ActivityReport,
    ActivityType,
    DebounceMode,
    ErrorCode,
    LocationRecord,
    LocationResult,
    RawSample,
    SessionSummary,
)
from .motion import (
    ActivityClassifier,
    MagnitudeFilter,
    MotionPipeline,
    ReportBatcher,
    StepDetector,
)
from .services import (
    ActivityControl,
    ActivityStream,
    BiometricService,
    LocationService,
    LocationStream,
)
from .settings import Settings, load_settings


def get_version() -> str:
    """Get the current version of fitness_tracker."""
    return __version__


def get_package_info() -> dict[str, str]:
    """Get package information including name and version."""
    return {
        "name": "fitness-tracker",
        "version": __version__,
        "description": "Real-time step counting and activity classification",
    }


__all__ = [
    # Version & Info
    "get_version",
    "get_package_info",
    # Models
    "ActivityReport",
    "ActivityType",
    "DebounceMode",
    "ErrorCode",
    "LocationRecord",
    "LocationResult",
    "RawSample",
    "SessionSummary",
    # Motion Pipeline
    "ActivityClassifier",
    "MagnitudeFilter",
    "MotionPipeline",
    "ReportBatcher",
    "StepDetector",
    # Services
    "ActivityControl",
    "ActivityStream",
    "BiometricService",
    "LocationService",
    "LocationStream",
    # Data & Analysis
    "SampleLoader",
    "SessionSummarizer",
    # Settings
    "Settings",
    "load_settings",
    # Modules
    "adapters",
    "analysis",
    "constants",
    "data",
    "exceptions",
    "models",
    "motion",
    "services",
]
