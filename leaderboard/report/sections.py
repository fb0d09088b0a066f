"""
Report section builders.

Each builder returns a markdown fragment for one part of the leaderboard
report.
"""

from typing import Sequence

from ..records.models import PlayerTotal, SessionSummary
from .formatters import format_currency, format_date

NO_DATA_MESSAGE = "No poker sessions found. Add CSV files to the sessions directory."


def build_leaderboard_section(
    totals: Sequence[PlayerTotal],
    currency: str,
    date_format: str,
) -> str:
    """
    Build the leaderboard table.

    Args:
        totals: PlayerTotals sorted by total descending
        currency: Currency symbol
        date_format: strftime format for the last played column

    Returns:
        Markdown-formatted leaderboard section
    """
    lines = [
        "## Leaderboard",
        "",
        "| Rank | Player | Total | Sessions | Avg per Session | Last Played |",
        "|------|--------|-------|----------|-----------------|-------------|",
    ]
    for rank, total in enumerate(totals, start=1):
        lines.append(
            f"| #{rank} | {total.name} "
            f"| {format_currency(total.total, currency)} "
            f"| {total.sessions} "
            f"| {format_currency(total.average_per_session, currency)} "
            f"| {format_date(total.last_session, date_format)} |"
        )
    return "\n".join(lines) + "\n"


def build_history_section(
    summaries: Sequence[SessionSummary],
    currency: str,
    date_format: str,
) -> str:
    """Build the session history, newest session first."""
    lines = ["## Session History", ""]

    for summary in reversed(summaries):
        lines.append(f"### {format_date(summary.name, date_format)}")
        lines.append("")

        top, bottom = summary.top_player, summary.bottom_player
        if top is not None and bottom is not None:
            lines.append(
                f"Top: **{top[0]}** {format_currency(top[1], currency)} | "
                f"Bottom: **{bottom[0]}** {format_currency(bottom[1], currency)}"
            )
            lines.append("")

        lines.append("| Player | Total |")
        lines.append("|--------|-------|")
        for player, amount in summary.standings:
            lines.append(f"| {player} | {format_currency(amount, currency)} |")
        lines.append("")

    return "\n".join(lines)
