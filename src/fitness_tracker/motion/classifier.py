"""
Activity classification from the smoothed acceleration magnitude.

Each tick maps the smoothed magnitude to a candidate band:

    m < walking_threshold                       -> stationary
    walking_threshold <= m < running_threshold  -> walking
    m >= running_threshold                      -> running

A confidence counter tracks how many consecutive ticks repeated the previous
tick's candidate. Whether that counter gates the committed (visible) activity
depends on the debounce mode:

- IMMEDIATE: the candidate is committed on every tick; the counter is kept for
  inspection only.
- GATED: the committed activity changes only once the counter reaches the
  debounce threshold, suppressing flapping near band boundaries.
"""

import logging
from dataclasses import dataclass

from ..constants import MotionConstants
from ..models import ActivityType, DebounceMode

logger = logging.getLogger(__name__)


@dataclass
class ClassifierState:
    """Mutable state of the activity classifier."""

    committed_state: ActivityType = ActivityType.STATIONARY
    candidate_state: ActivityType = ActivityType.STATIONARY
    confidence_count: int = 0


class ActivityClassifier:
    """Three-band activity classifier with an optional debounce gate."""

    def __init__(
        self,
        walking_threshold: float = MotionConstants.WALKING_THRESHOLD,
        running_threshold: float = MotionConstants.RUNNING_THRESHOLD,
        debounce_threshold: int = MotionConstants.DEBOUNCE_THRESHOLD,
        mode: DebounceMode = DebounceMode.IMMEDIATE,
    ):
        """
        Initialize the classifier.

        Args:
            walking_threshold: Lower edge (inclusive) of the walking band
            running_threshold: Lower edge (inclusive) of the running band
            debounce_threshold: Confidence needed to commit in GATED mode
            mode: Commit policy
        """
        self.walking_threshold = walking_threshold
        self.running_threshold = running_threshold
        self.debounce_threshold = debounce_threshold
        self.mode = mode
        self.state = ClassifierState()

    @property
    def activity(self) -> ActivityType:
        """Currently committed activity."""
        return self.state.committed_state

    def candidate_for(self, smoothed: float) -> ActivityType:
        """Map a smoothed magnitude to its band, independent of state."""
        if smoothed < self.walking_threshold:
            return ActivityType.STATIONARY
        if smoothed < self.running_threshold:
            return ActivityType.WALKING
        return ActivityType.RUNNING

    def observe(self, smoothed: float) -> ActivityType:
        """
        Advance the classifier by one tick.

        Args:
            smoothed: Smoothed acceleration magnitude for this tick

        Returns:
            The committed activity after this tick
        """
        candidate = self.candidate_for(smoothed)
        state = self.state

        if candidate == state.candidate_state:
            state.confidence_count += 1
        else:
            state.confidence_count = 0
        state.candidate_state = candidate

        if self.mode is DebounceMode.IMMEDIATE:
            committed = candidate
        elif state.confidence_count >= self.debounce_threshold:
            committed = candidate
        else:
            committed = state.committed_state

        if committed != state.committed_state:
            logger.debug(
                f"Activity changed {state.committed_state.value} -> "
                f"{committed.value} (magnitude {smoothed:.2f}, "
                f"confidence {state.confidence_count})"
            )
            state.committed_state = committed

        return committed
