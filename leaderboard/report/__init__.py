"""
Report generation package for the poker leaderboard.

Modules:
- leaderboard_report: markdown report rendering and writing
- sections: leaderboard table and session history builders
- formatters: currency, date and colour helpers
"""

from .formatters import format_currency, format_date, assign_colors
from .leaderboard_report import render_report, generate_report

__all__ = [
    'format_currency',
    'format_date',
    'assign_colors',
    'render_report',
    'generate_report',
]
