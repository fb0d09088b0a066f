"""
CSV parsing for session records.

Turns the raw text of one session file into a RawTable. The first
non-blank line is the header (one player per column); every following
non-blank line is one round of balance deltas.
"""

import logging
import math
from typing import List, Tuple

from .errors import MalformedInputError
from .models import RawTable

logger = logging.getLogger(__name__)


def _parse_number(text: str, line_number: int) -> float:
    """Parse one trimmed field as a finite float."""
    try:
        value = float(text)
    except ValueError:
        raise MalformedInputError(
            f'Invalid number "{text}" in row {line_number}', line=line_number
        ) from None

    if not math.isfinite(value):
        raise MalformedInputError(
            f'Invalid number "{text}" in row {line_number}', line=line_number
        )
    return value


def _non_blank_lines(content: str) -> List[Tuple[int, str]]:
    """
    Split content on newlines and drop blank lines.

    Returns:
        List of (1-based line number in the unfiltered split, trimmed line)
    """
    return [
        (index + 1, line.strip())
        for index, line in enumerate(content.split('\n'))
        if line.strip()
    ]


def parse_csv_content(content: str) -> RawTable:
    """
    Parse comma-separated session text into a RawTable.

    Row numbers in error messages refer to the line's position in the
    original text, counting blank lines.

    Args:
        content: Raw file content

    Returns:
        RawTable with the header's player names and one row per round

    Raises:
        MalformedInputError: If there is no data row, a row has the wrong
            number of fields, a field is not a finite number, or a header
            name is empty
    """
    lines = _non_blank_lines(content)
    if len(lines) < 2:
        raise MalformedInputError('CSV must have at least a header and one data row')

    header_number, header = lines[0]
    players = tuple(name.strip() for name in header.split(','))
    if any(not name for name in players):
        raise MalformedInputError(
            f"Header in row {header_number} has an empty player name", line=header_number
        )

    rows = []
    for line_number, line in lines[1:]:
        fields = [field.strip() for field in line.split(',')]
        values = tuple(_parse_number(field, line_number) for field in fields)
        if len(values) != len(players):
            raise MalformedInputError(
                f"Row {line_number} has {len(values)} values but expected {len(players)}",
                line=line_number,
            )
        rows.append(values)

    logger.debug(f"Parsed {len(rows)} rounds for {len(players)} players")
    return RawTable(columns=players, rows=tuple(rows))
