"""Tests for the host adapters and protocol conformance."""

from pathlib import Path

import pytest

from clausegloss.config.defaults import EMPTY_PLACEHOLDER
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
from clausegloss.lib.errors import InputUnavailableError, SessionError


class TestProtocols:
    """Adapters satisfy the host protocols."""

    def test_paragraph_providers(self, temp_dir: Path) -> None:
        """Documents provide paragraphs."""
        assert isinstance(TextDocument(temp_dir / "x.txt"), ParagraphProvider)
        assert isinstance(StaticDocument(), ParagraphProvider)

    def test_selection_adapters(self) -> None:
        """Selections and hubs match their protocols."""
        assert isinstance(StaticSelection(), SelectionProvider)
        assert isinstance(SelectionEventHub(), SelectionSource)

    def test_sinks(self) -> None:
        """Both sinks are result sinks."""
        assert isinstance(RecordingSink(), ResultSink)
        assert isinstance(ConsoleSink(), ResultSink)


class TestTextDocument:
    """Tests for TextDocument."""

    def test_reads_lines_as_paragraphs(self, sample_document: Path) -> None:
        """Each line of the file is a paragraph."""
        paragraphs = TextDocument(sample_document).get_paragraph_texts()
        assert len(paragraphs) == 9
        assert paragraphs[0] == "1. DEFINITIONS AND INTERPRETATION"

    def test_rereads_on_each_call(self, temp_dir: Path) -> None:
        """Edits to the file are picked up by the next read."""
        path = temp_dir / "doc.txt"
        path.write_text("first\n", encoding="utf-8")
        document = TextDocument(path)
        assert document.get_paragraph_texts() == ["first"]

        path.write_text("first\nsecond\n", encoding="utf-8")
        assert document.get_paragraph_texts() == ["first", "second"]

    def test_missing_file(self, temp_dir: Path) -> None:
        """A missing file raises InputUnavailableError."""
        with pytest.raises(InputUnavailableError) as exc_info:
            TextDocument(temp_dir / "missing.txt").get_paragraph_texts()
        assert exc_info.value.source == "paragraphs"
        assert "missing.txt" in exc_info.value.message

    def test_undecodable_file(self, temp_dir: Path) -> None:
        """Bytes that are not UTF-8 raise InputUnavailableError."""
        path = temp_dir / "binary.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(InputUnavailableError):
            TextDocument(path).get_paragraph_texts()


class TestSelectionEventHub:
    """Tests for SelectionEventHub."""

    def test_publish_without_handler(self) -> None:
        """Events with no subscriber are dropped."""
        SelectionEventHub().publish("anything")

    def test_publish_delivers_text(self) -> None:
        """The handler receives the published text."""
        received: list[str | None] = []
        hub = SelectionEventHub()
        hub.on_selection_changed(received.append)
        hub.publish("Business Day")
        hub.publish(None)
        assert received == ["Business Day", None]

    def test_single_handler(self) -> None:
        """Only one handler may be registered."""
        hub = SelectionEventHub()
        hub.on_selection_changed(lambda text: None)
        with pytest.raises(SessionError):
            hub.on_selection_changed(lambda text: None)


class TestSinks:
    """Tests for the result sinks."""

    def test_recording_sink_placeholder(self) -> None:
        """Empty fields are shown as the placeholder."""
        sink = RecordingSink()
        sink.display_result("", "")
        assert sink.last_result == (EMPTY_PLACEHOLDER, EMPTY_PLACEHOLDER)

    def test_recording_sink_order(self) -> None:
        """Results and statuses are kept in display order."""
        sink = RecordingSink()
        assert sink.last_result is None
        assert sink.last_status is None
        sink.display_status("one")
        sink.display_status("two")
        sink.display_result("Fee", "the annual fee")
        assert sink.statuses == ["one", "two"]
        assert sink.last_result == ("Fee", "the annual fee")

    def test_console_sink_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Results go to stdout and statuses to stderr."""
        sink = ConsoleSink(color=False)
        sink.display_result("Fee", "the annual fee")
        sink.display_status("Glossary built (1 terms). Now select a term.")
        captured = capsys.readouterr()
        assert captured.out == "Fee\n  the annual fee\n"
        assert "Glossary built" in captured.err

    def test_console_sink_placeholder(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Empty fields print the placeholder."""
        ConsoleSink(color=False).display_result("", "")
        assert capsys.readouterr().out == (
            f"{EMPTY_PLACEHOLDER}\n  {EMPTY_PLACEHOLDER}\n"
        )


class TestStaticAdapters:
    """Tests for the in-memory adapters."""

    def test_static_selection(self) -> None:
        """select() replaces the current selection."""
        selection = StaticSelection("Fee")
        assert selection.get_selected_text() == "Fee"
        selection.select("Fund")
        assert selection.get_selected_text() == "Fund"

    def test_static_document_returns_copy(self) -> None:
        """Callers cannot mutate the stored paragraphs."""
        document = StaticDocument(["a"])
        document.get_paragraph_texts().append("b")
        assert document.get_paragraph_texts() == ["a"]
