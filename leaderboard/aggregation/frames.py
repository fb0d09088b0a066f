"""
pandas views of aggregation output.

Used by plotting and reporting; the aggregation engine itself works on
plain value objects.
"""

from typing import List, Sequence

import pandas as pd

from ..records.models import ChartPoint, PlayerTotal

TOTALS_COLUMNS = ['rank', 'name', 'total', 'sessions', 'average_per_session', 'last_session']
POINT_COLUMNS = ['date', 'session_name', 'round']

# Top-level column groups of chart_data_to_frame
POINT_GROUP = 'point'
BALANCE_GROUP = 'balance'


def totals_to_frame(totals: Sequence[PlayerTotal]) -> pd.DataFrame:
    """
    Convert leaderboard totals to a DataFrame.

    Args:
        totals: PlayerTotals in leaderboard order

    Returns:
        DataFrame with one row per player and a 1-based ``rank`` column
    """
    records = [
        {
            'rank': rank,
            'name': total.name,
            'total': total.total,
            'sessions': total.sessions,
            'average_per_session': total.average_per_session,
            'last_session': total.last_session,
        }
        for rank, total in enumerate(totals, start=1)
    ]
    return pd.DataFrame.from_records(records, columns=TOTALS_COLUMNS)


def chart_data_to_frame(chart_data: Sequence[ChartPoint]) -> pd.DataFrame:
    """
    Convert chart points to a wide DataFrame with two column groups.

    ``df['point']`` holds ``date``, ``session_name``, ``round`` and
    ``timestamp`` (``date`` parsed as a datetime, NaT when the identifier
    is not a date). ``df['balance']`` holds one column per player in
    order of first appearance. Player names never collide with
    point metadata, so a player may be called ``round`` or ``date``.
    """
    meta = pd.DataFrame.from_records(
        [(point.date, point.session_name, point.round) for point in chart_data],
        columns=POINT_COLUMNS,
    )
    meta['timestamp'] = pd.to_datetime(meta['date'], errors='coerce', format='%Y-%m-%d')

    players: List[str] = []
    for point in chart_data:
        for player in point.balances:
            if player not in players:
                players.append(player)
    balances = pd.DataFrame([dict(point.balances) for point in chart_data], columns=players, dtype=float)

    return pd.concat([meta, balances], axis=1, keys=[POINT_GROUP, BALANCE_GROUP])
