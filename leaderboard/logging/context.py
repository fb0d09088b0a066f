"""
Logging context management.

Adds the current pipeline phase and session to every log line emitted
inside a block.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from .formatters import (
    _context,
    _context_lock,
    get_context_value,
    set_context_value,
    clear_context_value,
)


def reset_context() -> None:
    """Clear all context values at once. Useful between test cases."""
    with _context_lock:
        _context.clear()


@contextmanager
def LogContext(
    phase: str,
    session: Optional[str] = None,
    source: Optional[str] = None,
) -> Generator[None, None, None]:
    """
    Context manager adding context to all logs within the block.

    Usage:
        with LogContext(phase="load", source="2025-08-13.csv"):
            loader.load_all()

    Args:
        phase: Pipeline phase (e.g., "load", "aggregate", "report").
        session: Optional session identifier.
        source: Optional source file name.
    """
    context_fields: Dict[str, Any] = {
        'phase': phase,
        'session': session,
        'source': source,
    }

    prev_values: Dict[str, Any] = {}
    with _context_lock:
        for key, value in context_fields.items():
            if value is not None:
                prev_values[key] = get_context_value(key)
                set_context_value(key, value)

    try:
        yield
    finally:
        with _context_lock:
            for key, prev_value in prev_values.items():
                if prev_value is not None:
                    set_context_value(key, prev_value)
                else:
                    clear_context_value(key)


__all__ = [
    "LogContext",
    "reset_context",
]
