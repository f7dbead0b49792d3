"""
Motion-activity pipeline.

Composes the magnitude filter, step detector, activity classifier and report
batcher into a single ingest function: raw sample in, optional report out.
All state is owned by one pipeline instance per sensor subscription and is
mutated synchronously; callers must not ingest concurrently into one instance.
"""

import logging
from collections.abc import Iterable

from ..models import ActivityReport, ActivityType, RawSample
from ..settings import Settings
from .batcher import ReportBatcher
from .classifier import ActivityClassifier
from .filter import MagnitudeFilter, magnitude
from .steps import StepDetector

logger = logging.getLogger(__name__)


class MotionPipeline:
    """Turns a stream of accelerometer samples into batched activity reports."""

    def __init__(self, settings: Settings):
        """
        Initialize the pipeline.

        Args:
            settings: Application settings containing the motion configuration
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

        config = settings.motion
        self.filter = MagnitudeFilter(config.window_size)
        self.step_detector = StepDetector(config.step_threshold)
        self.classifier = ActivityClassifier(
            walking_threshold=config.walking_threshold,
            running_threshold=config.running_threshold,
            debounce_threshold=config.debounce_threshold,
            mode=config.debounce_mode,
        )
        self.batcher = ReportBatcher(config.batch_size)

        self.logger.debug(
            f"Motion pipeline ready (window={config.window_size}, "
            f"batch={config.batch_size}, debounce={config.debounce_mode.value})"
        )

    @property
    def step_count(self) -> int:
        """Steps counted since the last start/reset."""
        return self.step_detector.step_count

    @property
    def activity(self) -> ActivityType:
        """Currently committed activity."""
        return self.classifier.activity

    def ingest(self, sample: RawSample) -> ActivityReport | None:
        """
        Process one accelerometer sample.

        Args:
            sample: Raw accelerometer reading

        Returns:
            An ActivityReport when the current batch completes, otherwise None
        """
        raw = magnitude(sample)
        smoothed = self.filter.push_magnitude(raw)
        self.step_detector.observe(raw)
        committed = self.classifier.observe(smoothed)
        return self.batcher.tick(self.step_detector.step_count, committed, smoothed)

    def ingest_many(self, samples: Iterable[RawSample]) -> list[ActivityReport]:
        """Process samples in order and collect every emitted report."""
        reports = []
        for sample in samples:
            report = self.ingest(sample)
            if report is not None:
                reports.append(report)
        return reports

    def start(self) -> None:
        """Begin a new counting session; zeroes the step counter."""
        self.step_detector.reset()
        self.logger.info("Step counter started")

    def stop(self) -> None:
        """Acknowledge a stop request; pipeline state is left untouched."""
        self.logger.info("Stop requested; pipeline state unchanged")

    def reset(self) -> None:
        """Zero the step counter; filter and classifier state are kept."""
        self.step_detector.reset()
        self.logger.info("Step counter reset")
