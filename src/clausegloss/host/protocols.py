"""Protocols for the host document environment.

The glossary engine never talks to a word processor directly. A host
integration supplies paragraph text and the current selection, pushes
selection-changed events, and renders results.
"""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

SelectionHandler = Callable[[str | None], object]


@runtime_checkable
class ParagraphProvider(Protocol):
    """Supplies the document body as ordered paragraph strings."""

    def get_paragraph_texts(self) -> Sequence[str]:
        """Return every paragraph's text in document order.

        Raises:
            InputUnavailableError: If the host cannot supply the text.
        """
        ...


@runtime_checkable
class SelectionProvider(Protocol):
    """Supplies the text of the current selection on demand."""

    def get_selected_text(self) -> str:
        """Return the selected text (may be empty).

        Raises:
            InputUnavailableError: If the host cannot supply the text.
        """
        ...


@runtime_checkable
class SelectionSource(Protocol):
    """Pushes selection-changed events to a single registered handler."""

    def on_selection_changed(self, handler: SelectionHandler) -> None:
        """Register the handler called on every selection change."""
        ...


@runtime_checkable
class ResultSink(Protocol):
    """Renders lookup results and status lines."""

    def display_result(self, term: str, definition: str) -> None:
        """Render a resolved (term, definition) pair."""
        ...

    def display_status(self, message: str) -> None:
        """Render an advisory status line."""
        ...
