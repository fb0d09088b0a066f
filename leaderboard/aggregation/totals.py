"""
Leaderboard totals.

Aggregates every session into one PlayerTotal per player.
"""

import logging
from typing import Any, Dict, List, Sequence

from ..records.models import PlayerTotal, Session

logger = logging.getLogger(__name__)


def calculate_player_totals(sessions: Sequence[Session]) -> List[PlayerTotal]:
    """
    Compute cumulative standings across sessions.

    Sessions must already be sorted ascending by identifier; they are
    not re-sorted here.

    Args:
        sessions: Sessions in chronological order

    Returns:
        One PlayerTotal per distinct player, sorted by total descending.
        Equal totals keep the order in which players were first seen.
    """
    accumulators: Dict[str, Dict[str, Any]] = {}

    for session in sessions:
        for player, deltas in session.results.items():
            acc = accumulators.get(player)
            if acc is None:
                acc = {'total': 0.0, 'sessions': 0, 'last_session': session.date}
                accumulators[player] = acc

            acc['total'] += sum(deltas)
            acc['sessions'] += 1
            if session.date > acc['last_session']:
                acc['last_session'] = session.date

    totals = [
        PlayerTotal(
            name=player,
            total=acc['total'],
            sessions=acc['sessions'],
            last_session=acc['last_session'],
        )
        for player, acc in accumulators.items()
    ]

    logger.debug(f"Computed totals for {len(totals)} players over {len(sessions)} sessions")
    return sorted(totals, key=lambda t: t.total, reverse=True)
