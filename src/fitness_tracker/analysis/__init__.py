"""
Analysis layer.

This package contains modules for summarizing recorded sessions.
"""

from .summarizer import SessionSummarizer, reports_to_frame

__all__ = [
    "SessionSummarizer",
    "reports_to_frame",
]
