#!/usr/bin/env python3
"""
Leaderboard report script.

Loads the configured session files, aggregates them and writes a
markdown report with the balance chart.
"""

import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import click

from leaderboard.aggregation import build_leaderboard
from leaderboard.config import load_settings, validate_settings
from leaderboard.loader import SessionLoader
from leaderboard.logging import ErrorCode, LogContext, configure_from_settings, get_logger, log_exception
from leaderboard.paths import get_reports_dir
from leaderboard.report import format_currency, generate_report
from leaderboard.windows import TIME_WINDOWS


@click.command()
@click.option('--data-dir', default=None, type=click.Path(file_okay=False, path_type=Path),
              help='Directory with session CSV files (default: data.sessions_dir from settings)')
@click.option('--source', 'sources', multiple=True,
              help='Session file to load; repeat for several (default: data.sources from settings)')
@click.option('--output', default=None, type=click.Path(file_okay=False, path_type=Path),
              help='Output directory (default: reports/)')
@click.option('--window', default=None, type=click.Choice(list(TIME_WINDOWS)),
              help='Chart time window (default: display.default_window)')
@click.option('--no-chart', is_flag=True, help='Skip rendering the balance chart')
@click.option('--log-level', default=None,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level (default: logging.level from settings)')
def main(data_dir, sources, output, window, no_chart, log_level):
    """
    Generate the poker leaderboard report.

    \b
    Examples:
        # Report from the configured sessions
        python scripts/generate_report.py

        # Last 30 days of the chart, custom data directory
        python scripts/generate_report.py --data-dir data/sessions --window 30d
    """
    try:
        settings = load_settings()
        problems = validate_settings(settings)
        if problems:
            for problem in problems:
                click.echo(f"✗ Invalid setting: {problem}", err=True)
            sys.exit(1)

        configure_from_settings(settings, level=log_level)
        logger = get_logger('report')

        loader = SessionLoader.from_settings(settings)
        if data_dir is not None:
            loader.data_dir = data_dir
        if sources:
            loader.sources = list(sources)

        with LogContext(phase="load"):
            sessions = loader.load_all()

        with LogContext(phase="aggregate"):
            snapshot = build_leaderboard(sessions)

        output_dir = output or get_reports_dir()
        with LogContext(phase="report"):
            report_path = generate_report(
                snapshot,
                output_dir,
                settings=settings,
                window=window,
                now=datetime.now(),
                chart=not no_chart,
            )

        if not snapshot.has_data:
            click.echo("⚠ No poker sessions found. Report contains no standings.")
            click.echo(f"Report: {report_path}")
            return

        currency = settings['display']['currency_symbol']
        click.echo("\n" + "=" * 60)
        click.echo("LEADERBOARD")
        click.echo("=" * 60)
        for rank, total in enumerate(snapshot.totals, start=1):
            click.echo(f"#{rank:<3} {total.name:<20} {format_currency(total.total, currency):>14}"
                       f"  ({total.sessions} sessions)")
        click.echo("=" * 60)
        click.echo(f"Sessions loaded: {len(snapshot.sessions)}, skipped: {len(loader.skipped)}")
        click.echo(f"Report: {report_path}")
        logger.debug(f"Skipped sources: {loader.skipped}")

    except Exception as e:
        log_exception(
            get_logger('report'),
            f"Report generation failed: {e}",
            exc=e,
            error_code=ErrorCode.REPORT_ERROR,
        )
        click.echo(f"✗ Error: {e}", err=True)
        sys.exit(1)


if __name__ == '__main__':
    main()
