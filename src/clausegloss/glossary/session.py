"""Glossary session lifecycle.

The session owns the current Glossary snapshot. It is the only writer:
rebuild() builds a complete new snapshot and swaps the reference in one
assignment, so a lookup always sees either the old or the new glossary,
never a half-built one. Lookups only read the snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass

from clausegloss.glossary.resolver import resolve
from clausegloss.host.protocols import (
    ParagraphProvider,
    ResultSink,
    SelectionProvider,
    SelectionSource,
)
from clausegloss.lib.definition_extractor import build_definition_tables
from clausegloss.lib.errors import InputUnavailableError, SessionError
from clausegloss.lib.logging_config import get_logger
from clausegloss.models.config import GlossaryConfig
from clausegloss.models.glossary import Glossary, LookupResult, LookupStatus

logger = get_logger(__name__)


@dataclass(frozen=True)
class SelectionChanged:
    """Selection-changed event.

    Attributes:
        text: The newly selected text, or None when the receiver should
            ask the selection provider for it.
    """

    text: str | None = None


class GlossarySession:
    """Coordinates document scans, lookups and result display.

    Attributes:
        paragraphs: Provider of the document paragraphs
        selection: Provider of the current selection text
        sink: Where results and status lines are displayed
        config: Extraction limits
    """

    def __init__(
        self,
        paragraphs: ParagraphProvider,
        selection: SelectionProvider,
        sink: ResultSink,
        config: GlossaryConfig | None = None,
    ) -> None:
        """Initialize the session with no glossary built.

        Args:
            paragraphs: Provider of the document paragraphs.
            selection: Provider of the current selection text.
            sink: Result sink for lookups and status lines.
            config: Extraction limits; defaults to GlossaryConfig().
        """
        self.paragraphs = paragraphs
        self.selection = selection
        self.sink = sink
        self.config = config or GlossaryConfig()
        self._glossary: Glossary | None = None
        self._connected = False

    @property
    def glossary(self) -> Glossary | None:
        """Current glossary snapshot, or None before the first build."""
        return self._glossary

    @property
    def is_ready(self) -> bool:
        """Return True once a glossary has been built."""
        return self._glossary is not None

    def rebuild(self) -> bool:
        """Scan the document and replace the glossary snapshot.

        On input failure the previous snapshot stays in place and a status
        line is displayed.

        Returns:
            True if a new snapshot was installed, False otherwise.
        """
        try:
            paragraph_texts = list(self.paragraphs.get_paragraph_texts())
        except InputUnavailableError as e:
            logger.warning(f"Glossary rebuild failed: {e}")
            self.sink.display_status(f"Could not read the document: {e.message}")
            return False

        tables = build_definition_tables(paragraph_texts)
        glossary = Glossary.from_tables(tables, paragraph_texts)
        self._glossary = glossary

        logger.info(
            f"Glossary built: {len(glossary.direct)} direct, "
            f"{len(glossary.xref)} cross-referenced, "
            f"{len(glossary.paragraphs)} paragraphs"
        )
        self.sink.display_status(
            f"Glossary built ({glossary.size} terms). Now select a term."
        )
        return True

    def lookup(self, text: str | None = None) -> LookupResult:
        """Resolve a selection and display the outcome.

        Args:
            text: Selected text; when None it is fetched from the selection
                provider.

        Returns:
            The LookupResult that was displayed.
        """
        if text is None:
            try:
                text = self.selection.get_selected_text()
            except InputUnavailableError as e:
                logger.warning(f"Selection lookup failed: {e}")
                message = f"Could not read the selection: {e.message}"
                self.sink.display_status(message)
                return LookupResult(definition=message, status=LookupStatus.NOT_READY)

        result = resolve(self._glossary, text, self.config)

        if result.status in (LookupStatus.NO_TERM, LookupStatus.NOT_READY):
            self.sink.display_status(result.definition)
        else:
            self.sink.display_result(result.term, result.definition)
        return result

    def handle(self, event: SelectionChanged) -> LookupResult:
        """Handle a selection-changed event."""
        return self.lookup(event.text)

    def on_selection_changed(self, text: str | None = None) -> LookupResult:
        """Callback form of handle(), registered with a selection source."""
        return self.handle(SelectionChanged(text))

    def connect(self, source: SelectionSource) -> None:
        """Subscribe this session to a selection source.

        Raises:
            SessionError: If the session is already connected.
        """
        if self._connected:
            raise SessionError("Session is already connected to a selection source")
        source.on_selection_changed(self.on_selection_changed)
        self._connected = True
        logger.debug("Session connected to selection source")
