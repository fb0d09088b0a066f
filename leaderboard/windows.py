"""
Display time windows.

Filters chart points to a recent window ("last 7/30/90 days") for
display. The reference time is always passed in; aggregation output
never depends on the clock.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .records.models import ChartPoint

logger = logging.getLogger(__name__)

# Window name -> number of days (None keeps everything)
TIME_WINDOWS: Dict[str, Optional[int]] = {
    'all': None,
    '90d': 90,
    '30d': 30,
    '7d': 7,
}


def window_cutoff(window: str, now: datetime) -> Optional[pd.Timestamp]:
    """
    Earliest timestamp included in a window.

    Raises:
        ValueError: If window is not one of TIME_WINDOWS
    """
    if window not in TIME_WINDOWS:
        raise ValueError(
            f"Unknown time window '{window}'. Must be one of: {list(TIME_WINDOWS)}"
        )
    days = TIME_WINDOWS[window]
    if days is None:
        return None
    return pd.Timestamp(now) - pd.Timedelta(days=days)


def filter_chart_data(
    chart_data: Sequence[ChartPoint],
    window: str,
    now: datetime,
) -> List[ChartPoint]:
    """
    Keep the chart points whose date falls inside the window.

    Points whose date cannot be parsed are dropped from bounded windows.

    Args:
        chart_data: Points from generate_chart_data
        window: One of 'all', '90d', '30d', '7d'
        now: Reference time for the window

    Returns:
        Filtered list of points, order preserved
    """
    cutoff = window_cutoff(window, now)
    if cutoff is None:
        return list(chart_data)

    if cutoff.tzinfo is not None:
        cutoff = cutoff.tz_convert('UTC').tz_localize(None)

    kept = []
    for point in chart_data:
        timestamp = pd.to_datetime(point.date, errors='coerce')
        if pd.isna(timestamp):
            continue
        if timestamp >= cutoff:
            kept.append(point)

    logger.debug(f"Window {window}: kept {len(kept)} of {len(chart_data)} points")
    return kept
