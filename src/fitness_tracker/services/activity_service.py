"""
Activity stream and activity control services.

The activity stream wraps an accelerometer source in a scoped subscription:
subscribing registers a listener that feeds the subscription's own motion
pipeline, and cancelling releases that registration exactly once. Reports are
handed to the consumer through a thread-safe queue and read back as an
iterator.
"""

import logging
import queue
from collections.abc import Callable, Iterator
from typing import Protocol

from ..adapters import AccelerometerSource
from ..exceptions import UnsupportedCommandError
from ..models import ActivityReport, RawSample
from ..motion import MotionPipeline
from ..settings import Settings

logger = logging.getLogger(__name__)

_END_OF_STREAM = object()


class ActivityStreamProtocol(Protocol):
    """Protocol for activity streams."""

    def subscribe(self) -> "ActivitySubscription":
        """Start ingesting samples and return the live subscription."""
        ...


class ActivitySubscription:
    """
    A live activity subscription.

    Owns one MotionPipeline. Iterating yields wire records
    (``{"stepCount", "activityType", "magnitude"}``); ``reports`` yields the
    ActivityReport models. Iteration ends when the subscription is cancelled
    or the source runs out of samples. Use as a context manager to guarantee
    the source registration is released.
    """

    def __init__(
        self,
        source: AccelerometerSource,
        settings: Settings,
        on_cancel: Callable[["ActivitySubscription"], None] | None = None,
    ):
        """
        Register with the source and start ingesting.

        Args:
            source: Accelerometer sample source
            settings: Application settings for the motion pipeline
            on_cancel: Called once with this subscription when it ends
        """
        self.source = source
        self.on_cancel = on_cancel
        self.pipeline = MotionPipeline(settings)
        self.logger = logging.getLogger(__name__)
        self._queue: queue.Queue = queue.Queue()
        self._active = True
        self.source.register(self._on_sample, self._on_source_complete)
        self.logger.info("Activity subscription started")

    @property
    def active(self) -> bool:
        """Whether the subscription still receives samples."""
        return self._active

    def _on_sample(self, sample: RawSample) -> None:
        if not self._active:
            return
        report = self.pipeline.ingest(sample)
        if report is not None:
            self._queue.put(report)

    def _on_source_complete(self) -> None:
        self.logger.info("Accelerometer source exhausted")
        self.cancel()

    def cancel(self) -> None:
        """Release the source registration; no reports are emitted afterwards."""
        if not self._active:
            return
        self._active = False
        self.source.unregister(self._on_sample)
        self._queue.put(_END_OF_STREAM)
        self.logger.info(
            f"Activity subscription cancelled at {self.pipeline.step_count} steps"
        )
        if self.on_cancel is not None:
            self.on_cancel(self)

    def reports(self, timeout: float | None = None) -> Iterator[ActivityReport]:
        """
        Yield reports as they are produced.

        Args:
            timeout: Seconds to wait for the next report before ending the
                iteration; None waits until the subscription is cancelled

        Yields:
            ActivityReport models in emission order
        """
        while True:
            try:
                item = self._queue.get(timeout=timeout)
            except queue.Empty:
                return
            if item is _END_OF_STREAM:
                return
            yield item

    def drain(self) -> list[ActivityReport]:
        """Return every report queued so far without blocking."""
        drained = []
        while True:
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                break
            if item is _END_OF_STREAM:
                # Keep the end marker for any reader still iterating
                self._queue.put(item)
                break
            drained.append(item)
        return drained

    def __iter__(self) -> Iterator[dict[str, int | str | float]]:
        for report in self.reports():
            yield report.to_record()

    def __enter__(self) -> "ActivitySubscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.cancel()


class ActivityStream:
    """Creates activity subscriptions over an accelerometer source."""

    def __init__(self, source: AccelerometerSource, settings: Settings):
        """
        Initialize the stream.

        Args:
            source: Accelerometer sample source
            settings: Application settings
        """
        self.source = source
        self.settings = settings
        self.subscriptions: list[ActivitySubscription] = []

    def subscribe(self) -> ActivitySubscription:
        """Register a new subscription with the source."""
        subscription = ActivitySubscription(
            self.source, self.settings, on_cancel=self._release
        )
        self.subscriptions.append(subscription)
        return subscription

    def _release(self, subscription: ActivitySubscription) -> None:
        if subscription in self.subscriptions:
            self.subscriptions.remove(subscription)

    @property
    def active_subscriptions(self) -> list[ActivitySubscription]:
        """Subscriptions that have not been cancelled."""
        return list(self.subscriptions)

    def cancel_all(self) -> None:
        """Cancel every live subscription."""
        for subscription in self.active_subscriptions:
            subscription.cancel()


class ActivityControl:
    """
    Command/response control channel for the activity stream.

    ``start`` and ``reset`` zero the step counter of every live subscription;
    ``stop`` is acknowledged without touching pipeline state.
    """

    COMMANDS = ("start", "stop", "reset")

    def __init__(self, stream: ActivityStream):
        self.stream = stream
        self.logger = logging.getLogger(__name__)

    def handle(self, command: str) -> None:
        """
        Execute a control command.

        Args:
            command: One of "start", "stop", "reset"

        Raises:
            UnsupportedCommandError: If the command is not recognised
        """
        if command not in self.COMMANDS:
            raise UnsupportedCommandError(f"Unknown activity command: {command}")

        self.logger.debug(f"Handling activity command '{command}'")
        for subscription in self.stream.active_subscriptions:
            getattr(subscription.pipeline, command)()

    def start(self) -> None:
        self.handle("start")

    def stop(self) -> None:
        self.handle("stop")

    def reset(self) -> None:
        self.handle("reset")
