"""
Poker Leaderboard - Core Library

Turns per-session CSV records of poker balance changes into leaderboard
standings and a round-by-round running balance series.

Main exports:
- records: CSV parsing and session normalization
- aggregation: leaderboard totals and chart series
- loader: reading configured session files
- report: markdown report and chart output
"""

__version__ = "0.1.0"

from .records import (
    MalformedInputError,
    RawTable,
    Session,
    PlayerTotal,
    ChartPoint,
    SessionSummary,
    parse_csv_content,
    normalize,
    load_session,
    session_name_from_filename,
)

from .aggregation import (
    calculate_player_totals,
    generate_chart_data,
    summarize_sessions,
    LeaderboardSnapshot,
    build_leaderboard,
)

from .loader import SessionLoader, load_all_sessions

from .windows import TIME_WINDOWS, filter_chart_data

__all__ = [
    # Records
    'MalformedInputError',
    'RawTable',
    'Session',
    'PlayerTotal',
    'ChartPoint',
    'SessionSummary',
    'parse_csv_content',
    'normalize',
    'load_session',
    'session_name_from_filename',
    # Aggregation
    'calculate_player_totals',
    'generate_chart_data',
    'summarize_sessions',
    'LeaderboardSnapshot',
    'build_leaderboard',
    # Loading
    'SessionLoader',
    'load_all_sessions',
    # Display windows
    'TIME_WINDOWS',
    'filter_chart_data',
]
