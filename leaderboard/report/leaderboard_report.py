"""
Leaderboard report generation.

Renders a LeaderboardSnapshot as a markdown report, optionally with the
balance chart saved next to it.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..aggregation.snapshot import LeaderboardSnapshot
from ..logging import ErrorCode, log_exception
from ..utils import ensure_dir
from ..windows import filter_chart_data
from .formatters import DEFAULT_CURRENCY, DEFAULT_DATE_FORMAT, assign_colors
from .sections import NO_DATA_MESSAGE, build_history_section, build_leaderboard_section

logger = logging.getLogger(__name__)


def render_report(
    snapshot: LeaderboardSnapshot,
    currency: str = DEFAULT_CURRENCY,
    date_format: str = DEFAULT_DATE_FORMAT,
    chart_path: Optional[str] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """
    Render the markdown report.

    Args:
        snapshot: Aggregation output
        currency: Currency symbol
        date_format: strftime format for dates
        chart_path: Optional chart image path to embed
        generated_at: Timestamp printed in the header (omitted if None)

    Returns:
        Markdown content
    """
    lines = ["# Poker Leaderboard", ""]
    if generated_at is not None:
        lines.extend([f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M')}", ""])

    if not snapshot.has_data:
        lines.extend([NO_DATA_MESSAGE, ""])
        return "\n".join(lines)

    lines.extend([
        f"Sessions: {len(snapshot.sessions)} | Players: {len(snapshot.totals)}",
        "",
    ])

    if chart_path:
        lines.extend(["## Performance Visualization", "", f"![Balance history]({chart_path})", ""])

    content = "\n".join(lines) + "\n"
    content += build_leaderboard_section(snapshot.totals, currency, date_format)
    content += "\n"
    content += build_history_section(snapshot.summaries, currency, date_format)
    return content


def generate_report(
    snapshot: LeaderboardSnapshot,
    output_dir: Path,
    settings: Optional[Dict[str, Any]] = None,
    window: Optional[str] = None,
    now: Optional[datetime] = None,
    chart: bool = True,
) -> Path:
    """
    Write the report (and chart) to a directory.

    Args:
        snapshot: Aggregation output
        output_dir: Directory for ``leaderboard.md`` and ``balance_history.png``
        settings: Settings dict (loaded from config when None)
        window: Display window for the chart (defaults to settings)
        now: Reference time for the window (defaults to the current time)
        chart: Whether to render the chart

    Returns:
        Path to the generated markdown file

    Raises:
        OSError: If the output directory or report file cannot be written.
            A chart that fails to render is logged and left out instead.
    """
    from ..config import get_display_settings
    from ..plots import plot_balance_history

    display = get_display_settings(settings)
    currency = display['currency_symbol']
    date_format = display['date_format']
    window = window or display['default_window']
    now = now or datetime.now()

    ensure_dir(output_dir)

    chart_name = None
    if chart and snapshot.has_data:
        points = filter_chart_data(snapshot.chart_data, window, now)
        colors = assign_colors(snapshot.totals, display['palette'])
        title = 'Performance Visualization' if window == 'all' else f'Performance Visualization ({window})'
        chart_path = output_dir / 'balance_history.png'
        try:
            drawn = plot_balance_history(
                points,
                save_path=chart_path,
                colors=colors,
                title=title,
                currency=currency,
                date_format=date_format,
            )
        except (OSError, ValueError) as e:
            log_exception(
                logger,
                f"Chart could not be rendered, writing report without it: {e}",
                exc=e,
                error_code=ErrorCode.PLOT_ERROR,
                level=logging.WARNING,
                path=str(chart_path),
            )
            drawn = False
        else:
            if not drawn:
                logger.info(f"No chart points inside window {window}, chart skipped")
        if drawn:
            chart_name = chart_path.name

    content = render_report(
        snapshot,
        currency=currency,
        date_format=date_format,
        chart_path=chart_name,
        generated_at=now,
    )

    report_path = output_dir / 'leaderboard.md'
    try:
        with open(report_path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        log_exception(
            logger,
            f"Could not write report to {report_path}",
            exc=e,
            error_code=ErrorCode.IO_WRITE_ERROR,
            include_traceback=False,
            path=str(report_path),
        )
        raise

    logger.info(f"Report written to {report_path}")
    return report_path
