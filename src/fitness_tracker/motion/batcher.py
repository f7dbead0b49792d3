"""Batched emission of activity reports."""

from ..constants import MotionConstants
from ..models import ActivityReport, ActivityType


class ReportBatcher:
    """
    Surfaces one report every ``batch_size`` ingested samples.

    Batching bounds the emission rate seen by the consumer independently of the
    sensor sampling rate.
    """

    def __init__(self, batch_size: int = MotionConstants.BATCH_SIZE):
        self.batch_size = batch_size
        self.sample_count = 0

    def tick(
        self,
        step_count: int,
        committed_activity: ActivityType,
        smoothed: float,
    ) -> ActivityReport | None:
        """
        Count one ingested sample and emit a report when the batch is full.

        Args:
            step_count: Current step count
            committed_activity: Activity committed by the classifier this tick
            smoothed: Current smoothed magnitude

        Returns:
            An ActivityReport on every batch_size-th call, otherwise None
        """
        self.sample_count += 1
        if self.sample_count < self.batch_size:
            return None

        self.sample_count = 0
        return ActivityReport(
            step_count=step_count,
            activity_type=committed_activity,
            smoothed_magnitude=smoothed,
        )
