"""
Session loading.

Reads the configured session files, turns each into a Session and hands
back the collection sorted by identifier. A file that cannot be read or
parsed is logged and skipped; the rest of the batch still loads.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .logging import ErrorCode, LogContext, log_exception, log_with_context
from .records.errors import MalformedInputError
from .records.models import Session
from .records.normalizer import load_session, session_name_from_filename

logger = logging.getLogger(__name__)


class SessionLoader:
    """
    Loads sessions from CSV files in one directory.

    Args:
        sources: Ordered source file names relative to ``data_dir``. An
            empty sequence loads every ``*.csv`` file in the directory.
        data_dir: Directory holding the session files

    Usage:
        >>> loader = SessionLoader(['2025-07-09.csv', '2025-07-16.csv'], Path('data/sessions'))
        >>> sessions = loader.load_all()
    """

    def __init__(self, sources: Sequence[str], data_dir: Path):
        self.sources = list(sources)
        self.data_dir = Path(data_dir)
        self.skipped: List[str] = []

    @classmethod
    def from_settings(cls, settings: Optional[Dict[str, Any]] = None) -> 'SessionLoader':
        """Build a loader from ``data.sources`` and ``data.sessions_dir``."""
        from .config import get_session_sources, get_sessions_dir

        return cls(get_session_sources(settings), get_sessions_dir(settings))

    def discover_sources(self) -> List[str]:
        """Source file names to load, in configured order."""
        if self.sources:
            return list(self.sources)
        if not self.data_dir.is_dir():
            logger.warning(f"Sessions directory not found: {self.data_dir}")
            return []
        return sorted(path.name for path in self.data_dir.glob('*.csv'))

    def load_source(self, source: str) -> Session:
        """
        Read and normalize one session file.

        Raises:
            OSError: If the file cannot be read
            UnicodeDecodeError: If the file is not UTF-8
            MalformedInputError: If the content is not a valid session table
        """
        path = self.data_dir / source
        content = path.read_text(encoding='utf-8')
        return load_session(content, session_name_from_filename(source))

    def load_all(self) -> List[Session]:
        """
        Load every source, skipping the ones that fail.

        Returns:
            Sessions sorted ascending by identifier; empty when nothing
            could be loaded
        """
        sessions: List[Session] = []
        self.skipped = []

        for source in self.discover_sources():
            with LogContext(phase="load", source=source):
                try:
                    session = self.load_source(source)
                except MalformedInputError as e:
                    log_exception(
                        logger,
                        f"Skipping {source}: {e}",
                        exc=e,
                        error_code=ErrorCode.DATA_PARSE_ERROR,
                        include_traceback=False,
                        source=source,
                        line=e.line,
                    )
                    self.skipped.append(source)
                    continue
                except (OSError, UnicodeDecodeError) as e:
                    log_exception(
                        logger,
                        f"Could not read {source}: {e}",
                        exc=e,
                        error_code=ErrorCode.IO_READ_ERROR,
                        include_traceback=False,
                        level=logging.WARNING,
                        source=source,
                    )
                    self.skipped.append(source)
                    continue

                logger.debug(
                    f"Loaded {session.name}: {len(session.players)} players, "
                    f"{session.round_count} rounds"
                )
                sessions.append(session)

        if not sessions:
            log_with_context(
                logger,
                logging.WARNING,
                "No sessions loaded",
                error_code=ErrorCode.DATA_MISSING,
                data_dir=str(self.data_dir),
                skipped=list(self.skipped),
            )
        else:
            logger.info(f"Loaded {len(sessions)} sessions ({len(self.skipped)} skipped)")

        return sorted(sessions, key=lambda s: s.date)


def load_all_sessions(settings: Optional[Dict[str, Any]] = None) -> List[Session]:
    """Load every configured session using the project settings."""
    return SessionLoader.from_settings(settings).load_all()
