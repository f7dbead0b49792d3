"""
Platform adapter interfaces.

The motion pipeline and the services talk to device capabilities (sensors,
location, biometrics) only through the protocols defined here. In-memory
implementations are provided for offline replay and tests.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import Future
from typing import Protocol

from .constants import LocationConstants
from .exceptions import SecurityError
from .models import AuthOutcome, BiometricPromptConfig, LocationRecord, RawSample

logger = logging.getLogger(__name__)

SampleListener = Callable[[RawSample], None]
CompletionListener = Callable[[], None]
LocationListener = Callable[[LocationRecord], None]


class AccelerometerSource(Protocol):
    """Protocol for accelerometer sample sources."""

    def register(
        self,
        listener: SampleListener,
        on_complete: CompletionListener | None = None,
    ) -> None:
        """
        Start delivering samples to listener, one at a time.

        on_complete is called once if the source runs out of samples while
        listener is still registered.
        """
        ...

    def unregister(self, listener: SampleListener) -> None:
        """Stop delivering samples to listener."""
        ...


class LocationProvider(Protocol):
    """Protocol for platform location services."""

    def is_provider_enabled(self, provider: str) -> bool:
        """Whether the named provider is switched on."""
        ...

    def has_permission(self) -> bool:
        """Whether fine location permission is granted."""
        ...

    def request_permissions(self, permissions: Sequence[str]) -> None:
        """Ask the user for the given permissions."""
        ...

    def get_last_known_location(self, provider: str) -> LocationRecord | None:
        """
        Return the provider's cached fix.

        Raises:
            SecurityError: If the platform refuses the call
        """
        ...

    def request_location_updates(
        self,
        provider: str,
        min_interval_ms: int,
        min_distance_m: float,
        listener: LocationListener,
    ) -> None:
        """
        Register listener for continuous updates.

        Raises:
            SecurityError: If the platform refuses the call
        """
        ...

    def remove_updates(self, listener: LocationListener) -> None:
        """Unregister a listener added with request_location_updates."""
        ...


class BiometricAuthenticator(Protocol):
    """Protocol for platform biometric prompts."""

    def can_authenticate(self) -> bool:
        """Whether strong biometrics are available and enrolled."""
        ...

    def authenticate(self, prompt: BiometricPromptConfig) -> "Future[AuthOutcome]":
        """Show a prompt; the future resolves once the prompt is dismissed."""
        ...


class ReplayAccelerometer:
    """
    Accelerometer source that replays a fixed sequence of samples.

    Samples are delivered synchronously by ``run`` to every registered
    listener, in order, which preserves the sequential delivery contract.
    Once every sample has been delivered, listeners still registered get
    their completion callback.
    """

    def __init__(self, samples: Iterable[RawSample] = ()):
        self.samples = list(samples)
        self.listeners: list[SampleListener] = []
        self.completion: dict[SampleListener, CompletionListener] = {}

    def register(
        self,
        listener: SampleListener,
        on_complete: CompletionListener | None = None,
    ) -> None:
        self.listeners.append(listener)
        if on_complete is not None:
            self.completion[listener] = on_complete

    def unregister(self, listener: SampleListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)
        self.completion.pop(listener, None)

    def emit(self, sample: RawSample) -> None:
        """Deliver one sample to the current listeners."""
        for listener in list(self.listeners):
            listener(sample)

    def run(self) -> int:
        """
        Deliver all queued samples.

        Returns:
            Number of samples delivered before every listener unregistered
        """
        delivered = 0
        for sample in self.samples:
            if not self.listeners:
                break
            self.emit(sample)
            delivered += 1
        logger.debug(f"Replayed {delivered} of {len(self.samples)} samples")

        if delivered == len(self.samples):
            for listener in list(self.listeners):
                on_complete = self.completion.pop(listener, None)
                if on_complete is not None:
                    on_complete()
        return delivered


class StaticLocationProvider:
    """In-memory location provider with scripted fixes and permission state."""

    def __init__(
        self,
        last_known: dict[str, LocationRecord] | None = None,
        enabled_providers: Iterable[str] = (LocationConstants.GPS_PROVIDER,),
        permission_granted: bool = True,
        grant_on_request: bool = False,
        refuse_calls: bool = False,
    ):
        """
        Initialize the provider.

        Args:
            last_known: Cached fix per provider name
            enabled_providers: Providers reported as switched on
            permission_granted: Initial permission state
            grant_on_request: Whether request_permissions grants permission
            refuse_calls: Raise SecurityError from location calls
        """
        self.last_known = dict(last_known or {})
        self.enabled_providers = set(enabled_providers)
        self.permission_granted = permission_granted
        self.grant_on_request = grant_on_request
        self.refuse_calls = refuse_calls
        self.requested_permissions: list[str] = []
        self.update_requests: list[tuple[str, int, float]] = []
        self.listeners: list[LocationListener] = []

    def is_provider_enabled(self, provider: str) -> bool:
        return provider in self.enabled_providers

    def has_permission(self) -> bool:
        return self.permission_granted

    def request_permissions(self, permissions: Sequence[str]) -> None:
        self.requested_permissions.extend(permissions)
        if self.grant_on_request:
            self.permission_granted = True

    def get_last_known_location(self, provider: str) -> LocationRecord | None:
        if self.refuse_calls:
            raise SecurityError(f"Location access refused for provider {provider}")
        return self.last_known.get(provider)

    def request_location_updates(
        self,
        provider: str,
        min_interval_ms: int,
        min_distance_m: float,
        listener: LocationListener,
    ) -> None:
        if self.refuse_calls:
            raise SecurityError(f"Location updates refused for provider {provider}")
        self.update_requests.append((provider, min_interval_ms, min_distance_m))
        self.listeners.append(listener)

    def remove_updates(self, listener: LocationListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def push_location(self, location: LocationRecord) -> None:
        """Deliver a fix to every registered listener."""
        for listener in list(self.listeners):
            listener(location)


class ScriptedAuthenticator:
    """Biometric authenticator that resolves prompts from a fixed script."""

    def __init__(
        self,
        supported: bool = True,
        outcomes: Iterable[AuthOutcome] = (AuthOutcome.SUCCEEDED,),
    ):
        self.supported = supported
        self.outcomes = list(outcomes)
        self.prompts: list[BiometricPromptConfig] = []

    def can_authenticate(self) -> bool:
        return self.supported

    def authenticate(self, prompt: BiometricPromptConfig) -> "Future[AuthOutcome]":
        self.prompts.append(prompt)
        future: Future[AuthOutcome] = Future()
        outcome = self.outcomes.pop(0) if self.outcomes else AuthOutcome.CANCELLED
        future.set_result(outcome)
        return future
