"""Text extraction engine and shared utilities for ClauseGloss."""

from clausegloss.lib.errors import (
    ClauseGlossError,
    ConfigError,
    InputUnavailableError,
    SessionError,
)
from clausegloss.lib.errors import (
    FileNotFoundError as ClauseGlossFileNotFoundError,
)

__all__ = [
    "ClauseGlossError",
    "ClauseGlossFileNotFoundError",
    "ConfigError",
    "InputUnavailableError",
    "SessionError",
]
