"""
Session summary and aggregation.

This module turns the reports emitted during a session into a tabular view and
an aggregate SessionSummary.
"""

import logging
from collections.abc import Iterable
from typing import Protocol

import pandas as pd

from ..constants import CSVConstants
from ..exceptions import ValidationError
from ..models import ActivityReport, ActivityType, SessionSummary

logger = logging.getLogger(__name__)


class SummarizerProtocol(Protocol):
    """Protocol for summarizers."""

    def summarize(self, reports: Iterable[ActivityReport]) -> SessionSummary:
        """Create summary from emitted reports."""
        ...


def reports_to_frame(reports: Iterable[ActivityReport]) -> pd.DataFrame:
    """Convert reports to a DataFrame with one row per report."""
    rows = [report.model_dump(mode="json") for report in reports]
    return pd.DataFrame(rows, columns=list(CSVConstants.REPORT_COLUMNS))


class SessionSummarizer:
    """
    Creates session summaries from activity reports.

    The activity distribution is measured in reports, so each entry is the
    share of emission periods spent in that activity.
    """

    def __init__(self) -> None:
        """Initialize the summarizer."""
        self.logger = logging.getLogger(__name__)

    def summarize(self, reports: Iterable[ActivityReport]) -> SessionSummary:
        """Summarize a sequence of reports."""
        return self.summarize_frame(reports_to_frame(reports))

    def summarize_frame(self, reports_df: pd.DataFrame) -> SessionSummary:
        """
        Summarize reports held in a DataFrame.

        Args:
            reports_df: DataFrame with step_count, activity_type and
                smoothed_magnitude columns

        Returns:
            SessionSummary for the session

        Raises:
            ValidationError: If required columns are missing
        """
        missing = [
            col for col in CSVConstants.REPORT_COLUMNS if col not in reports_df.columns
        ]
        if missing:
            raise ValidationError(f"Missing report columns: {missing}")

        if reports_df.empty:
            return SessionSummary(total_reports=0, final_step_count=0)

        counts = reports_df["activity_type"].value_counts(normalize=True) * 100
        distribution = {
            activity.value: float(counts.get(activity.value, 0.0))
            for activity in ActivityType
        }
        magnitudes = reports_df["smoothed_magnitude"].astype(float)

        summary = SessionSummary(
            total_reports=len(reports_df),
            final_step_count=int(reports_df["step_count"].iloc[-1]),
            activity_distribution=distribution,
            mean_magnitude=float(magnitudes.mean()),
            max_magnitude=float(magnitudes.max()),
        )
        self.logger.debug(f"Summarized {summary.total_reports} reports")
        return summary
