"""Unit tests for sample loading and session summaries."""

from pathlib import Path

import pandas as pd
import pytest

from fitness_tracker.analysis import SessionSummarizer, reports_to_frame
from fitness_tracker.data import SampleLoader
from fitness_tracker.exceptions import DataLoadError, ValidationError
from fitness_tracker.models import ActivityReport, ActivityType, RawSample
from fitness_tracker.settings import Settings


class TestSampleLoader:
    """Test loading recorded sessions."""

    def test_load_samples(self, settings: Settings, samples_csv: Path):
        """Test a well-formed file loads every row."""
        df = SampleLoader(settings).load(samples_csv)

        assert list(df.columns) == ["x", "y", "z", "timestamp"]
        assert len(df) == 9

    def test_iter_samples(self, settings: Settings, samples_csv: Path):
        """Test rows become RawSample models in order."""
        loader = SampleLoader(settings)
        samples = list(loader.iter_samples(loader.load(samples_csv)))

        assert samples[0] == RawSample(x=11.0, y=0.0, z=0.0)
        assert samples[1] == RawSample(x=13.0, y=0.0, z=0.0)

    def test_missing_file(self, settings: Settings, tmp_path: Path):
        """Test a missing file raises DataLoadError."""
        with pytest.raises(DataLoadError):
            SampleLoader(settings).load(tmp_path / "missing.csv")

    def test_missing_columns(self, settings: Settings, tmp_path: Path):
        """Test a file without all axes raises ValidationError."""
        path = tmp_path / "samples.csv"
        pd.DataFrame({"x": [1.0], "y": [2.0]}).to_csv(path, index=False)

        with pytest.raises(ValidationError):
            SampleLoader(settings).load(path)

    def test_non_finite_rows_dropped(self, settings: Settings, tmp_path: Path):
        """Test rows with missing or unparseable values are dropped."""
        path = tmp_path / "samples.csv"
        path.write_text("x,y,z\n1.0,2.0,3.0\n,2.0,3.0\nabc,1.0,1.0\n4.0,5.0,6.0\n")

        df = SampleLoader(settings).load(path)

        assert df["x"].tolist() == [1.0, 4.0]


class TestSessionSummarizer:
    """Test session summaries."""

    @pytest.fixture
    def reports(self) -> list[ActivityReport]:
        """Provide four reports: two walking, one running, one stationary."""
        return [
            ActivityReport(
                step_count=0,
                activity_type=ActivityType.STATIONARY,
                smoothed_magnitude=9.8,
            ),
            ActivityReport(
                step_count=2, activity_type=ActivityType.WALKING, smoothed_magnitude=11.0
            ),
            ActivityReport(
                step_count=5, activity_type=ActivityType.WALKING, smoothed_magnitude=12.2
            ),
            ActivityReport(
                step_count=9, activity_type=ActivityType.RUNNING, smoothed_magnitude=15.0
            ),
        ]

    def test_summary(self, reports: list[ActivityReport]):
        """Test totals, distribution and magnitudes."""
        summary = SessionSummarizer().summarize(reports)

        assert summary.total_reports == 4
        assert summary.final_step_count == 9
        assert summary.activity_distribution == pytest.approx(
            {"stationary": 25.0, "walking": 50.0, "running": 25.0}
        )
        assert summary.mean_magnitude == pytest.approx(12.0)
        assert summary.max_magnitude == pytest.approx(15.0)
        assert summary.dominant_activity == ActivityType.WALKING

    def test_empty_session(self):
        """Test an empty session summarizes to zeros."""
        summary = SessionSummarizer().summarize([])

        assert summary.total_reports == 0
        assert summary.final_step_count == 0
        assert summary.dominant_activity is None

    def test_frame_round_trip(self, reports: list[ActivityReport], tmp_path: Path):
        """Test a saved report frame summarizes like the reports."""
        path = tmp_path / "reports.csv"
        reports_to_frame(reports).to_csv(path, index=False)

        summary = SessionSummarizer().summarize_frame(pd.read_csv(path))

        assert summary.final_step_count == 9
        assert summary.activity_distribution["walking"] == pytest.approx(50.0)

    def test_missing_columns(self):
        """Test frames without report columns are rejected."""
        with pytest.raises(ValidationError):
            SessionSummarizer().summarize_frame(pd.DataFrame({"step_count": [1]}))
