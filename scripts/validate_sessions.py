#!/usr/bin/env python3
"""
Session validation script.

Checks session files for problems the leaderboard does not reject on
its own: rounds that do not sum to zero, duplicate player names, empty
sessions. Files that fail to parse are reported as errors.

Usage:
    python scripts/validate_sessions.py
    python scripts/validate_sessions.py --data-dir data/sessions --strict
"""

import json
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import click

from leaderboard.config import load_settings
from leaderboard.loader import SessionLoader
from leaderboard.logging import configure_from_settings, get_logger, log_validation_result
from leaderboard.validation import ValidationConfig, validate_sessions


@click.command()
@click.option('--data-dir', default=None, type=click.Path(file_okay=False, path_type=Path),
              help='Directory with session CSV files (default: data.sessions_dir from settings)')
@click.option('--source', 'sources', multiple=True, help='Session file to check; repeat for several')
@click.option('--tolerance', default=None, type=float,
              help='Zero-sum tolerance (default: validation.zero_sum_tolerance)')
@click.option('--strict', is_flag=True, help='Treat warnings as errors')
@click.option('--json', 'as_json', is_flag=True, help='Print the result as JSON')
def main(data_dir, sources, tolerance, strict, as_json):
    """Validate poker session files."""
    settings = load_settings()
    # console=False since results are printed with click.echo
    configure_from_settings(settings, console=False)
    logger = get_logger('validation')

    loader = SessionLoader.from_settings(settings)
    if data_dir is not None:
        loader.data_dir = data_dir
    if sources:
        loader.sources = list(sources)

    sessions = loader.load_all()

    overrides = {'strict_mode': strict}
    if tolerance is not None:
        overrides['zero_sum_tolerance'] = tolerance
    config = ValidationConfig.from_settings(settings, **overrides)

    result = validate_sessions(sessions, config)
    for source in loader.skipped:
        result.add_error(f"load: {source} could not be loaded")
    if not sessions:
        result.add_warning("No sessions loaded")

    log_validation_result(logger, result)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2, default=str))
    else:
        click.echo(f"Checked {len(sessions)} session(s), {len(loader.skipped)} unreadable")
        click.echo(result.summary())

    sys.exit(0 if result.passed else 1)


if __name__ == '__main__':
    main()
