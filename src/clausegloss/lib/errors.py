"""Exceptions raised by ClauseGloss.

Every error derives from ClauseGlossError so a host integration can catch
the whole family at its boundary.
"""


class ClauseGlossError(Exception):
    """Root of the ClauseGloss exception hierarchy."""

    pass


class ConfigError(ClauseGlossError):
    """A config file or CLAUSEGLOSS_* variable could not be used.

    Attributes:
        field: Config key (or "yaml_parse" / "glossary_config") at fault
        message: What was wrong with it
    """

    def __init__(self, field: str, message: str) -> None:
        """Create the error for a config key.

        Args:
            field: Offending config key or parsing stage
            message: Explanation shown to the user
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class FileNotFoundError(ClauseGlossError):
    """An explicitly named config file does not exist or cannot be opened.

    Attributes:
        path: The path that was tried
        message: Explanation shown to the user
    """

    def __init__(self, path: str, message: str) -> None:
        """Create the error for a missing file."""
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class InputUnavailableError(ClauseGlossError):
    """A host provider could not return document or selection text.

    The session recovers from it: a failed rebuild keeps the previous
    glossary and a failed selection read shows a status line.

    Attributes:
        source: Provider that failed, "paragraphs" or "selection"
        message: Explanation shown to the user
    """

    def __init__(self, source: str, message: str) -> None:
        """Create an input error with the failing provider name."""
        self.source = source
        self.message = message
        super().__init__(f"Input unavailable from {source}: {message}")


class SessionError(ClauseGlossError):
    """A glossary session was wired up incorrectly."""

    def __init__(self, message: str) -> None:
        """Create a session error."""
        self.message = message
        super().__init__(message)
