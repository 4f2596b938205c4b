"""Host integration: document, selection and display boundaries."""

from clausegloss.host.adapters import (
    ConsoleSink,
    RecordingSink,
    SelectionEventHub,
    StaticDocument,
    StaticSelection,
    TextDocument,
)
from clausegloss.host.protocols import (
    ParagraphProvider,
    ResultSink,
    SelectionProvider,
    SelectionSource,
)

__all__ = [
    "ConsoleSink",
    "ParagraphProvider",
    "RecordingSink",
    "ResultSink",
    "SelectionEventHub",
    "SelectionProvider",
    "SelectionSource",
    "StaticDocument",
    "StaticSelection",
    "TextDocument",
]
