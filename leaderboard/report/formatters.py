"""
Formatting utilities for report generation.

Currency, date and colour helpers shared by the report and the chart.
"""

from datetime import datetime
from typing import Dict, Sequence

from ..records.models import PlayerTotal

DEFAULT_CURRENCY = '€'
DEFAULT_DATE_FORMAT = '%d.%m.%Y'
SESSION_DATE_FORMAT = '%Y-%m-%d'


def format_currency(amount: float, symbol: str = DEFAULT_CURRENCY) -> str:
    """
    Format a balance with an explicit sign.

    Example:
        >>> format_currency(5)
        '+5.00 €'
        >>> format_currency(-12.5)
        '-12.50 €'
        >>> format_currency(-0.001)
        '+0.00 €'
    """
    amount = round(amount, 2)
    sign = '+' if amount >= 0 else '-'
    return f"{sign}{abs(amount):.2f} {symbol}"


def format_date(value: str, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Format a ``YYYY-MM-DD`` session identifier for display.

    Values that are not dates are returned unchanged.
    """
    try:
        parsed = datetime.strptime(value, SESSION_DATE_FORMAT)
    except (TypeError, ValueError):
        return value
    return parsed.strftime(date_format)


def assign_colors(totals: Sequence[PlayerTotal], palette: Sequence[str]) -> Dict[str, str]:
    """
    Map each player to a chart colour in leaderboard order.

    The palette repeats when there are more players than colours.

    Raises:
        ValueError: If palette is empty
    """
    if not palette:
        raise ValueError("Palette must contain at least one colour")
    return {
        total.name: palette[index % len(palette)]
        for index, total in enumerate(totals)
    }
