"""
Balance history visualization.

Plots every player's running total round by round, the leaderboard's
equivalent of an equity curve.
"""

# Standard library imports
from pathlib import Path
from typing import Dict, Optional, Sequence

# Third-party imports
import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter

# Local imports
from ..aggregation.frames import BALANCE_GROUP, POINT_GROUP, chart_data_to_frame
from ..records.models import ChartPoint
from ..report.formatters import DEFAULT_CURRENCY, DEFAULT_DATE_FORMAT, format_currency, format_date


def plot_balance_history(
    chart_data: Sequence[ChartPoint],
    save_path: Optional[Path] = None,
    colors: Optional[Dict[str, str]] = None,
    title: Optional[str] = None,
    currency: str = DEFAULT_CURRENCY,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> bool:
    """
    Plot running balances from chart points.

    The x axis is the sequence of rounds; ticks mark the first round of
    each session. Players drawn with a zero balance throughout are kept
    so colours stay stable across windows.

    Args:
        chart_data: Points from generate_chart_data (optionally filtered)
        save_path: Optional path to save figure
        colors: Optional player -> colour mapping
        title: Optional plot title
        currency: Currency symbol for the y axis
        date_format: strftime format for session ticks

    Returns:
        True if a figure was drawn, False when there were no points
    """
    if not chart_data:
        return False

    df = chart_data_to_frame(chart_data)
    points = df[POINT_GROUP].reset_index(drop=True)
    balances = df[BALANCE_GROUP].reset_index(drop=True)
    colors = colors or {}

    fig, ax = plt.subplots(figsize=(12, 6))
    try:
        for player in balances.columns:
            ax.plot(
                balances.index,
                balances[player].values,
                linewidth=2,
                label=player,
                color=colors.get(player),
            )

        session_starts = points.drop_duplicates('date', keep='first')
        ax.set_xticks(session_starts.index)
        ax.set_xticklabels(
            [format_date(d, date_format) for d in session_starts['date']],
            rotation=45,
            ha='right',
        )

        ax.axhline(0, color='#6b7280', linewidth=0.8, alpha=0.6)
        ax.yaxis.set_major_formatter(FuncFormatter(lambda value, _: format_currency(value, currency)))
        ax.set_xlabel('Session', fontsize=12)
        ax.set_ylabel('Running Total', fontsize=12)
        ax.set_title(title or 'Performance Visualization', fontsize=14, fontweight='bold')
        ax.grid(True, axis='y', alpha=0.3)
        if len(balances.columns):
            ax.legend(loc='upper left', fontsize=9, ncol=2)
        plt.tight_layout()

        if save_path:
            Path(save_path).parent.mkdir(parents=True, exist_ok=True)
            plt.savefig(save_path, dpi=150, bbox_inches='tight')
    finally:
        plt.close(fig)
    return True
