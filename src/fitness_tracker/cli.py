"""
Command-line interface for the Fitness Tracker package.

This module provides a command-line interface for replaying recorded
accelerometer sessions through the motion pipeline and summarizing the
emitted activity reports.
"""

import logging
from pathlib import Path

import click
import pandas as pd

from . import __version__
from .adapters import ReplayAccelerometer
from .analysis import SessionSummarizer, reports_to_frame
from .constants import CSVConstants
from .data import SampleLoader
from .exceptions import FitnessTrackerError
from .models import DebounceMode, SessionSummary
from .services import ActivityStream
from .settings import load_settings


# Configure basic logging
def configure_logging(verbose: bool = False, log_level: str = "INFO") -> None:
    """Configure logging; --verbose forces DEBUG over the configured level."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else log_level.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )


def echo_summary(summary: SessionSummary) -> None:
    """Print a session summary."""
    click.echo("\nSession Summary")
    click.echo("=" * 40)
    click.echo(f"Reports: {summary.total_reports}")
    click.echo(f"Steps: {summary.final_step_count}")
    click.echo(f"Mean magnitude: {summary.mean_magnitude:.2f}")
    click.echo(f"Max magnitude: {summary.max_magnitude:.2f}")

    if summary.activity_distribution:
        click.echo("\nActivity Distribution (% of reports)")
        click.echo("-" * 30)
        for activity, share in summary.activity_distribution.items():  # pylint: disable=no-member
            click.echo(f"{activity}: {share:.1f}%")
        click.echo(f"Dominant: {summary.dominant_activity.value}")


@click.group()
@click.version_option(__version__, prog_name="fitness-tracker")
def main():
    """
    Replay accelerometer sessions and inspect activity reports.

    This tool feeds recorded tri-axial accelerometer samples through the
    real-time motion pipeline (step counting and activity classification)
    and summarizes the batched reports it emits.
    """


@main.command()
@click.argument(
    "samples",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path of the reports CSV (defaults to the configured output dir)",
)
@click.option(
    "--debounce",
    type=click.Choice([mode.value for mode in DebounceMode]),
    help="Classifier commit policy (overrides config)",
)
@click.option(
    "--verbose/--quiet",
    default=False,
    help="Enable verbose output",
)
def replay(
    samples: Path,
    config: Path | None,
    output: Path | None,
    debounce: str | None,
    verbose: bool,
) -> None:
    """
    Replay a recorded session through the motion pipeline.

    SAMPLES is a CSV file with x, y and z columns. Every emitted report is
    written to the reports CSV and a summary is printed.
    """
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
        configure_logging(verbose, settings.log_level)

        # Override settings if provided
        if debounce is not None:
            settings.motion = settings.motion.model_copy(
                update={"debounce_mode": DebounceMode(debounce)}
            )

        loader = SampleLoader(settings)
        samples_df = loader.load(samples)

        source = ReplayAccelerometer(loader.iter_samples(samples_df))
        stream = ActivityStream(source, settings)
        with stream.subscribe() as subscription:
            source.run()
            reports = subscription.drain()

        output_file = output or settings.output_dir / CSVConstants.REPORTS_FILENAME
        output_file.parent.mkdir(parents=True, exist_ok=True)
        reports_to_frame(reports).to_csv(
            output_file, index=False, sep=CSVConstants.DEFAULT_SEPARATOR
        )
        logger.info(f"Wrote {len(reports)} reports to {output_file}")

        echo_summary(SessionSummarizer().summarize(reports))

    except FitnessTrackerError as e:
        logger.error(f"Replay failed: {str(e)}")
        raise click.Abort() from e
    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.argument(
    "reports",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
def summarize(reports: Path) -> None:
    """
    Summarize a reports CSV written by 'replay'.
    """
    logger = logging.getLogger(__name__)

    try:
        reports_df = pd.read_csv(reports, sep=CSVConstants.DEFAULT_SEPARATOR)
        echo_summary(SessionSummarizer().summarize_frame(reports_df))

    except FitnessTrackerError as e:
        logger.error(f"Summary generation failed: {str(e)}")
        raise click.Abort() from e
    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}")
        raise click.Abort() from e


@main.command()
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to configuration file",
)
def info(config: Path | None) -> None:
    """
    Show the version and the effective motion configuration.
    """
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(config)
    except FitnessTrackerError as e:
        logger.error(f"Invalid configuration: {str(e)}")
        raise click.Abort() from e

    click.echo(f"fitness-tracker {__version__}")
    click.echo("\nMotion Configuration")
    click.echo("-" * 30)
    for key, value in settings.motion.model_dump(mode="json").items():
        click.echo(f"{key}: {value}")


if __name__ == "__main__":
    main()
