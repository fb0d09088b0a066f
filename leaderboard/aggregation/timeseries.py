"""
Cumulative balance time series.

Builds the round-by-round running totals used for the balance chart.
"""

import logging
from typing import Dict, List, Sequence

from ..records.models import ChartPoint, Session, player_order

logger = logging.getLogger(__name__)

START_SUFFIX = ' - Start'


def generate_chart_data(sessions: Sequence[Session]) -> List[ChartPoint]:
    """
    Generate running totals after every round of every session.

    The series opens with a round-0 point where everyone is at zero.
    Players who did not take part in a session carry their previous
    running total through it.

    Args:
        sessions: Sessions sorted ascending by identifier

    Returns:
        ChartPoints in chronological order; empty if ``sessions`` is empty
    """
    if not sessions:
        return []

    running_totals: Dict[str, float] = {player: 0.0 for player in player_order(sessions)}

    first = sessions[0]
    chart_data = [
        ChartPoint(
            date=first.date,
            session_name=f"{first.label}{START_SUFFIX}",
            round=0,
            balances=dict(running_totals),
        )
    ]

    for session in sessions:
        for round_index in range(session.round_count):
            for player, deltas in session.results.items():
                running_totals[player] += deltas[round_index]

            chart_data.append(
                ChartPoint(
                    date=session.date,
                    session_name=session.label,
                    round=round_index + 1,
                    balances=dict(running_totals),
                )
            )

    logger.debug(f"Generated {len(chart_data)} chart points for {len(running_totals)} players")
    return chart_data
