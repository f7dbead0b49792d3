"""
Step detection on the raw acceleration magnitude.

A step is a strict rising-edge crossing of the step threshold. Smoothing is
bypassed so the timing of individual foot-strikes is preserved.
"""

import logging
from dataclasses import dataclass

from ..constants import MotionConstants

logger = logging.getLogger(__name__)


@dataclass
class StepCounterState:
    """Mutable state of the step detector."""

    step_count: int = 0
    last_raw_magnitude: float = 0.0


class StepDetector:
    """Counts upward threshold crossings of the raw magnitude."""

    def __init__(self, threshold: float = MotionConstants.STEP_THRESHOLD):
        self.threshold = threshold
        self.state = StepCounterState()

    @property
    def step_count(self) -> int:
        """Steps detected since creation or the last reset."""
        return self.state.step_count

    def observe(self, raw_magnitude: float) -> bool:
        """
        Feed one raw magnitude and report whether it completes a step.

        Args:
            raw_magnitude: Unsmoothed acceleration magnitude

        Returns:
            True if the value crosses the threshold from at-or-below to above
        """
        detected = (
            raw_magnitude > self.threshold
            and self.state.last_raw_magnitude <= self.threshold
        )
        if detected:
            self.state.step_count += 1
            logger.debug(
                f"Step detected at magnitude {raw_magnitude:.2f} "
                f"(total: {self.state.step_count})"
            )
        self.state.last_raw_magnitude = raw_magnitude
        return detected

    def reset(self) -> None:
        """Zero the step counter."""
        self.state.step_count = 0
