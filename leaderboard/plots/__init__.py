"""
Visualization package for the poker leaderboard.
"""

from .balance import plot_balance_history

__all__ = [
    'plot_balance_history',
]
