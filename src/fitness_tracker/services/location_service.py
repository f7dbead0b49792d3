"""
Location query and location stream services.

Thin permission-gated pass-throughs to the platform location provider. Every
failure is surfaced as a typed LocationResult carrying a stable error code;
nothing is retried.
"""

import logging
import queue
from collections.abc import Iterator

from ..adapters import LocationProvider
from ..constants import LocationConstants
from ..exceptions import SecurityError
from ..models import ErrorCode, LocationRecord, LocationResult
from ..settings import Settings

logger = logging.getLogger(__name__)

_END_OF_STREAM = object()

PERMISSION_DENIED_MESSAGE = "Location permission not granted"
NO_LOCATION_MESSAGE = "No location available"


class LocationService:
    """One-shot location operations."""

    def __init__(self, provider: LocationProvider, settings: Settings):
        """
        Initialize the service.

        Args:
            provider: Platform location provider
            settings: Application settings
        """
        self.provider = provider
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def is_gps_enabled(self) -> bool:
        """Whether the GPS provider is switched on."""
        return self.provider.is_provider_enabled(LocationConstants.GPS_PROVIDER)

    def request_permissions(self) -> bool:
        """
        Ensure fine and coarse location permission.

        Returns:
            True if permission is held after the request
        """
        if self.provider.has_permission():
            return True

        self.logger.info("Requesting location permissions")
        self.provider.request_permissions(
            [
                LocationConstants.FINE_LOCATION_PERMISSION,
                LocationConstants.COARSE_LOCATION_PERMISSION,
            ]
        )
        return self.provider.has_permission()

    def get_current_location(self) -> LocationResult:
        """
        Return the best last-known fix.

        Resolution order is the GPS fix, then the network fix.

        Returns:
            LocationResult with the fix, or an error coded PERMISSION_DENIED,
            NO_LOCATION or SECURITY_ERROR
        """
        if not self.provider.has_permission():
            return LocationResult.failure(
                ErrorCode.PERMISSION_DENIED, PERMISSION_DENIED_MESSAGE
            )

        try:
            location = self.provider.get_last_known_location(
                LocationConstants.GPS_PROVIDER
            )
            if location is None:
                location = self.provider.get_last_known_location(
                    LocationConstants.NETWORK_PROVIDER
                )
        except SecurityError as e:
            self.logger.error(f"Location query refused: {e}")
            return LocationResult.failure(ErrorCode.SECURITY_ERROR, str(e))

        if location is None:
            return LocationResult.failure(ErrorCode.NO_LOCATION, NO_LOCATION_MESSAGE)
        return LocationResult.success(location)


class LocationSubscription:
    """
    A live location subscription yielding LocationResult items.

    An error result is always the last item of the stream.
    """

    def __init__(self, provider: LocationProvider, settings: Settings):
        self.provider = provider
        self.settings = settings
        self.logger = logging.getLogger(__name__)
        self._queue: queue.Queue = queue.Queue()
        self._registered = False
        self._active = True
        self._open()

    def _open(self) -> None:
        if not self.provider.has_permission():
            self._fail(ErrorCode.PERMISSION_DENIED, PERMISSION_DENIED_MESSAGE)
            return

        config = self.settings.location
        try:
            self.provider.request_location_updates(
                LocationConstants.GPS_PROVIDER,
                config.min_update_interval_ms,
                config.min_update_distance_m,
                self._on_location,
            )
        except SecurityError as e:
            self.logger.error(f"Location updates refused: {e}")
            self._fail(ErrorCode.SECURITY_ERROR, str(e))
            return

        self._registered = True
        self.logger.info(
            f"Location subscription started "
            f"(interval={config.min_update_interval_ms}ms, "
            f"distance={config.min_update_distance_m}m)"
        )

    def _fail(self, code: ErrorCode, message: str) -> None:
        self._active = False
        self._queue.put(LocationResult.failure(code, message))
        self._queue.put(_END_OF_STREAM)

    def _on_location(self, location: LocationRecord) -> None:
        if self._active:
            self._queue.put(LocationResult.success(location))

    @property
    def active(self) -> bool:
        """Whether the subscription still receives updates."""
        return self._active

    def cancel(self) -> None:
        """Remove the platform listener; the stream ends after queued items."""
        if self._registered:
            self.provider.remove_updates(self._on_location)
            self._registered = False
            self.logger.info("Location subscription cancelled")
        if self._active:
            self._active = False
            self._queue.put(_END_OF_STREAM)

    def results(self, timeout: float | None = None) -> Iterator[LocationResult]:
        """
        Yield results as they arrive.

        Args:
            timeout: Seconds to wait for the next item before ending the
                iteration; None waits until the stream ends
        """
        while True:
            try:
                item = self._queue.get(timeout=timeout)
            except queue.Empty:
                return
            if item is _END_OF_STREAM:
                return
            yield item

    def __iter__(self) -> Iterator[LocationResult]:
        return self.results()

    def __enter__(self) -> "LocationSubscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


class LocationStream:
    """Creates location subscriptions over a location provider."""

    def __init__(self, provider: LocationProvider, settings: Settings):
        self.provider = provider
        self.settings = settings

    def subscribe(self) -> LocationSubscription:
        """Request continuous location updates."""
        return LocationSubscription(self.provider, self.settings)
