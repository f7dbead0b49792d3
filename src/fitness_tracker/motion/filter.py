"""
Magnitude computation and moving-average smoothing.

The filter keeps a bounded history of acceleration magnitudes and returns their
arithmetic mean, dampening single-sample noise before classification.
"""

import math
from collections import deque

from ..constants import MotionConstants
from ..models import RawSample


def magnitude(sample: RawSample) -> float:
    """Euclidean norm of the 3-axis acceleration vector."""
    return math.sqrt(sample.x * sample.x + sample.y * sample.y + sample.z * sample.z)


class MagnitudeFilter:
    """Bounded moving average over sample magnitudes."""

    def __init__(self, window_size: int = MotionConstants.WINDOW_SIZE):
        """
        Initialize the filter.

        Args:
            window_size: Number of most recent magnitudes kept in the average
        """
        self.window_size = window_size
        self.history: deque[float] = deque(maxlen=window_size)

    def push(self, sample: RawSample) -> float:
        """
        Add a sample and return the smoothed magnitude.

        Args:
            sample: Raw accelerometer reading

        Returns:
            Mean of the magnitudes currently held (at most window_size values)
        """
        return self.push_magnitude(magnitude(sample))

    def push_magnitude(self, value: float) -> float:
        """Add an already computed magnitude and return the smoothed value."""
        # deque(maxlen=...) evicts the oldest value on overflow
        self.history.append(value)
        return sum(self.history) / len(self.history)
