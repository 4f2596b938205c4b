"""Host adapters for running ClauseGloss outside a word processor.

These back the CLI: a text file stands in for the document body, stdin
lines stand in for selection events, and the terminal renders results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import click

from clausegloss.config.defaults import EMPTY_PLACEHOLDER
from clausegloss.host.protocols import SelectionHandler
from clausegloss.lib.errors import InputUnavailableError, SessionError
from clausegloss.lib.logging_config import get_logger

logger = get_logger(__name__)


class TextDocument:
    """Paragraph provider reading a UTF-8 text file, one paragraph per line.

    The file is re-read on every call so a rebuild picks up edits.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize with the document path."""
        self.path = Path(path)

    def get_paragraph_texts(self) -> list[str]:
        """Read the document and split it into paragraphs.

        Raises:
            InputUnavailableError: If the file cannot be read or decoded.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise InputUnavailableError(
                "paragraphs", f"Cannot read document {self.path}: {e}"
            ) from e
        paragraphs = text.splitlines()
        logger.debug(f"Read {len(paragraphs)} paragraphs from {self.path}")
        return paragraphs


class StaticSelection:
    """Selection provider holding a settable selection string."""

    def __init__(self, text: str = "") -> None:
        """Initialize with an optional starting selection."""
        self.text = text

    def select(self, text: str) -> None:
        """Replace the current selection."""
        self.text = text

    def get_selected_text(self) -> str:
        """Return the current selection."""
        return self.text


class SelectionEventHub:
    """In-process selection source.

    ``publish()`` plays the role of the host firing a selection-changed
    event; the payload is the newly selected text.
    """

    def __init__(self) -> None:
        """Initialize with no handler registered."""
        self._handler: SelectionHandler | None = None

    @property
    def has_handler(self) -> bool:
        """Return True once a handler is registered."""
        return self._handler is not None

    def on_selection_changed(self, handler: SelectionHandler) -> None:
        """Register the selection handler.

        Raises:
            SessionError: If a handler is already registered.
        """
        if self._handler is not None:
            raise SessionError("A selection handler is already registered")
        self._handler = handler

    def publish(self, text: str | None) -> None:
        """Deliver a selection-changed event to the registered handler."""
        if self._handler is None:
            logger.debug("Selection event dropped: no handler registered")
            return
        self._handler(text)


class ConsoleSink:
    """Result sink printing to the terminal with click."""

    def __init__(self, color: bool | None = None) -> None:
        """Initialize the sink.

        Args:
            color: Force colors on or off; None lets click decide.
        """
        self.color = color

    def display_result(self, term: str, definition: str) -> None:
        """Print a term and its definition."""
        click.secho(term or EMPTY_PLACEHOLDER, bold=True, color=self.color)
        click.echo(f"  {definition or EMPTY_PLACEHOLDER}", color=self.color)

    def display_status(self, message: str) -> None:
        """Print a status line to stderr."""
        click.secho(message, fg="yellow", err=True, color=self.color)


@dataclass
class RecordingSink:
    """Result sink that records everything it is asked to display.

    Attributes:
        results: (term, definition) pairs in display order, with empty
            fields replaced by the placeholder
        statuses: Status messages in display order
    """

    results: list[tuple[str, str]] = field(default_factory=list)
    statuses: list[str] = field(default_factory=list)

    def display_result(self, term: str, definition: str) -> None:
        """Record a result pair."""
        self.results.append(
            (term or EMPTY_PLACEHOLDER, definition or EMPTY_PLACEHOLDER)
        )

    def display_status(self, message: str) -> None:
        """Record a status message."""
        self.statuses.append(message)

    @property
    def last_result(self) -> tuple[str, str] | None:
        """Most recent result pair, if any."""
        return self.results[-1] if self.results else None

    @property
    def last_status(self) -> str | None:
        """Most recent status message, if any."""
        return self.statuses[-1] if self.statuses else None


class StaticDocument:
    """Paragraph provider over an in-memory list."""

    def __init__(self, paragraphs: list[str] | None = None) -> None:
        """Initialize with the document paragraphs."""
        self.paragraphs = paragraphs or []

    def get_paragraph_texts(self) -> list[str]:
        """Return a copy of the paragraphs."""
        return list(self.paragraphs)
