"""
Error codes for structured error tracking.

Categorized codes attached to log records so failures while loading,
validating and reporting sessions can be grouped.
"""

from enum import Enum
from typing import NamedTuple


class ErrorCodeInfo(NamedTuple):
    """Container for error code information."""
    code: str
    category: str
    description: str


class ErrorCode(Enum):
    """
    Enumeration of error codes for structured logging.

    Usage:
        log_exception(
            logger,
            "Failed to parse session file",
            exc=e,
            error_code=ErrorCode.DATA_PARSE_ERROR,
        )
    """

    # Data errors (DATA_xxx)
    DATA_MISSING = ErrorCodeInfo("DATA_002", "data", "No session data available")
    DATA_PARSE_ERROR = ErrorCodeInfo("DATA_004", "data", "Failed to parse session data")

    # Validation errors (VAL_xxx)
    VALIDATION_ERROR = ErrorCodeInfo("VAL_001", "validation", "Validation failed")
    VALIDATION_ZERO_SUM = ErrorCodeInfo("VAL_006", "validation", "Round balances do not sum to zero")

    # Configuration errors (CFG_xxx)
    CONFIG_LOAD_ERROR = ErrorCodeInfo("CFG_001", "config", "Failed to load configuration")
    CONFIG_INVALID = ErrorCodeInfo("CFG_002", "config", "Configuration is invalid")

    # Report errors (REP_xxx)
    REPORT_ERROR = ErrorCodeInfo("REP_001", "report", "Failed to generate report")
    PLOT_ERROR = ErrorCodeInfo("REP_002", "report", "Failed to render chart")

    # File/IO errors (IO_xxx)
    IO_READ_ERROR = ErrorCodeInfo("IO_001", "io", "Failed to read file")
    IO_WRITE_ERROR = ErrorCodeInfo("IO_002", "io", "Failed to write file")

    @property
    def code(self) -> str:
        """Get the error code identifier."""
        return self.value.code

    @property
    def category(self) -> str:
        """Get the error category."""
        return self.value.category

    @property
    def description(self) -> str:
        """Get the error description."""
        return self.value.description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


__all__ = [
    "ErrorCode",
    "ErrorCodeInfo",
]
