"""
Aggregation engine.

Turns chronologically sorted sessions into leaderboard totals and a
round-level cumulative balance series.
"""

from .totals import calculate_player_totals
from .timeseries import generate_chart_data
from .summaries import summarize_session, summarize_sessions
from .snapshot import LeaderboardSnapshot, build_leaderboard
from .frames import totals_to_frame, chart_data_to_frame

__all__ = [
    'calculate_player_totals',
    'generate_chart_data',
    'summarize_session',
    'summarize_sessions',
    'LeaderboardSnapshot',
    'build_leaderboard',
    'totals_to_frame',
    'chart_data_to_frame',
]
