"""
Service layer for the device-facing channels.

This package contains the activity stream and control channel around the
motion pipeline, plus the location and biometric pass-through services.
"""

from .activity_service import ActivityControl, ActivityStream, ActivitySubscription
from .biometric_service import BiometricService
from .location_service import LocationService, LocationStream, LocationSubscription

__all__ = [
    "ActivityControl",
    "ActivityStream",
    "ActivitySubscription",
    "BiometricService",
    "LocationService",
    "LocationStream",
    "LocationSubscription",
]
