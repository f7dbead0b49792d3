"""
Data loading functionality.

This module provides a clean interface for loading recorded accelerometer
sessions used for offline replay.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Protocol

import numpy as np
import pandas as pd

from ..constants import CSVConstants
from ..exceptions import DataLoadError, ValidationError
from ..models import RawSample
from ..settings import Settings

logger = logging.getLogger(__name__)


class SampleLoaderProtocol(Protocol):
    """Protocol for sample loaders."""

    def load(self, path: Path) -> pd.DataFrame:
        """Load a recorded session."""
        ...


class SampleLoader:
    """
    Loads recorded accelerometer samples from CSV files.

    Files need ``x``, ``y`` and ``z`` columns; a ``timestamp`` column is kept
    when present. Rows with non-finite values are dropped, since the live
    pipeline does not sanitize its input.
    """

    def __init__(self, settings: Settings):
        """
        Initialize the loader.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self.logger = logging.getLogger(__name__)

    def load(self, path: Path) -> pd.DataFrame:
        """
        Load samples from a CSV file.

        Args:
            path: CSV file with one sample per row

        Returns:
            DataFrame with float columns x, y, z (and timestamp if present)

        Raises:
            DataLoadError: If the file is missing or unreadable
            ValidationError: If required columns are missing
        """
        if not path.exists():
            raise DataLoadError(f"Samples file not found: {path}")

        try:
            df = pd.read_csv(path, sep=CSVConstants.DEFAULT_SEPARATOR)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, OSError) as e:
            raise DataLoadError(f"Failed to read samples from {path}: {e}") from e

        missing = [col for col in CSVConstants.SAMPLE_COLUMNS if col not in df.columns]
        if missing:
            raise ValidationError(f"Missing sample columns: {missing}")

        keep = list(CSVConstants.SAMPLE_COLUMNS) + [
            col for col in CSVConstants.OPTIONAL_SAMPLE_COLUMNS if col in df.columns
        ]
        df = df[keep].copy()

        axes = list(CSVConstants.SAMPLE_COLUMNS)
        df[axes] = df[axes].apply(pd.to_numeric, errors="coerce").astype(float)
        finite = np.isfinite(df[axes].to_numpy()).all(axis=1)
        dropped = int((~finite).sum())
        if dropped:
            self.logger.warning(f"Dropped {dropped} non-finite rows from {path}")
            df = df[finite].reset_index(drop=True)

        self.logger.info(f"Loaded {len(df)} samples from {path}")
        return df

    @staticmethod
    def iter_samples(df: pd.DataFrame) -> Iterator[RawSample]:
        """Yield RawSample models in row order."""
        for x, y, z in df[list(CSVConstants.SAMPLE_COLUMNS)].itertuples(
            index=False, name=None
        ):
            yield RawSample(x=x, y=y, z=z)
