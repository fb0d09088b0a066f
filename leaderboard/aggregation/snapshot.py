"""
Leaderboard snapshot.

Bundles every projection of one aggregation pass so callers can render
them together.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from ..records.models import ChartPoint, PlayerTotal, Session, SessionSummary
from .summaries import summarize_sessions
from .timeseries import generate_chart_data
from .totals import calculate_player_totals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeaderboardSnapshot:
    """
    Result of one aggregation pass.

    ``has_data`` is False when no session could be loaded. That is the
    "no data" state, distinct from an error.
    """
    __hash__ = None  # holds lists

    sessions: List[Session] = field(default_factory=list)
    totals: List[PlayerTotal] = field(default_factory=list)
    chart_data: List[ChartPoint] = field(default_factory=list)
    summaries: List[SessionSummary] = field(default_factory=list)

    @property
    def has_data(self) -> bool:
        return len(self.sessions) > 0

    @property
    def players(self) -> List[str]:
        """Player names in leaderboard order."""
        return [total.name for total in self.totals]


def build_leaderboard(sessions: Sequence[Session]) -> LeaderboardSnapshot:
    """
    Run all aggregations over chronologically sorted sessions.

    Args:
        sessions: Sessions sorted ascending by identifier

    Returns:
        LeaderboardSnapshot (empty when ``sessions`` is empty)
    """
    sessions = list(sessions)
    if not sessions:
        logger.info("No sessions to aggregate")
        return LeaderboardSnapshot()

    return LeaderboardSnapshot(
        sessions=sessions,
        totals=calculate_player_totals(sessions),
        chart_data=generate_chart_data(sessions),
        summaries=summarize_sessions(sessions),
    )
