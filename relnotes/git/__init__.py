"""Git history access.

Usage:
    from relnotes.git import GitHistory, NotFoundError

    history = GitHistory(Path("/path/to/repo"))
    result = history.previous_tag("v2.0.0")
"""

from relnotes.git.history import (
    LOG_RECORD_SEPARATOR,
    CommandError,
    GitHistory,
    HistoryError,
    HistorySource,
    NotFoundError,
)

__all__ = [
    "LOG_RECORD_SEPARATOR",
    "CommandError",
    "GitHistory",
    "HistoryError",
    "HistorySource",
    "NotFoundError",
]
