"""
Data access layer.

This package contains modules for loading recorded accelerometer sessions.
"""

from .loader import SampleLoader

__all__ = [
    "SampleLoader",
]
