"""
Errors raised while reading session records.
"""

from typing import Optional


class MalformedInputError(ValueError):
    """
    Raised when raw session text cannot be turned into a valid table.

    Attributes:
        line: 1-based line number in the raw payload that triggered the
            error, or None when the problem is not tied to one line.
    """

    def __init__(self, message: str, line: Optional[int] = None):
        super().__init__(message)
        self.line = line
