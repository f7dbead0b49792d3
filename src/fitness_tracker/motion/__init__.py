"""
Motion-activity processing.

This package contains the real-time accelerometer pipeline:
- filter: Magnitude computation and moving-average smoothing
- steps: Rising-edge step detection on the raw magnitude
- classifier: Stationary/walking/running classification with debounce
- batcher: Periodic report emission
- pipeline: Composition of the above into a single ingest call
"""

from .batcher import ReportBatcher
from .classifier import ActivityClassifier, ClassifierState
from .filter import MagnitudeFilter, magnitude
from .pipeline import MotionPipeline
from .steps import StepCounterState, StepDetector

__all__ = [
    "ActivityClassifier",
    "ClassifierState",
    "MagnitudeFilter",
    "MotionPipeline",
    "ReportBatcher",
    "StepCounterState",
    "StepDetector",
    "magnitude",
]
