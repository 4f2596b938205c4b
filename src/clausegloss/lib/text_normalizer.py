"""Text normalization helpers shared by the extraction engine.

Paragraph text coming out of a word processor carries control characters,
typographic quotes and irregular whitespace. Everything that compares or
matches text goes through clean_text() first, and glossary keys are always
produced by normalize_term().
"""

import re

ELLIPSIS = "…"

# All of C0/C1 is dropped, tabs and line breaks included
_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")
_CURLY_DOUBLE_QUOTE_RE = re.compile(r"[“”]")
_WHITESPACE_RUN_RE = re.compile(r"\s+")

_EDGE_QUOTES_RE = re.compile(r"^[\"'\s]+|[\"'\s]+$")
_EDGE_NON_WORD_RE = re.compile(r"^[^\w]+|[^\w]+$")

_SENTENCE_SPLIT_RE = re.compile(r"(?<=[.?!])\s+")


def clean_text(text: str | None) -> str:
    """Canonicalize whitespace, quotes and control characters.

    Args:
        text: Raw text, possibly None.

    Returns:
        Single-spaced, trimmed text with straight double quotes. Empty input
        gives an empty string.
    """
    if not text:
        return ""
    text = _CONTROL_CHAR_RE.sub("", text)
    text = _CURLY_DOUBLE_QUOTE_RE.sub('"', text)
    text = _WHITESPACE_RUN_RE.sub(" ", text)
    return text.strip()


def normalize_term(text: str | None) -> str:
    """Produce the lowercase lookup key for a term.

    Example:
        >>> normalize_term('  “Clawback Amount”, ')
        'clawback amount'

    Args:
        text: Raw term text as quoted in the document or selected by a user.

    Returns:
        The term key, or an empty string when nothing word-like remains.
    """
    text = clean_text(text)
    text = _EDGE_QUOTES_RE.sub("", text)
    text = _EDGE_NON_WORD_RE.sub("", text)
    return text.lower()


def truncate(text: str, max_length: int = 260) -> str:
    """Shorten text to max_length characters, ending with an ellipsis.

    Args:
        text: Text to shorten.
        max_length: Maximum length of the result, ellipsis included.

    Returns:
        The original text when it already fits, otherwise the first
        ``max_length - 1`` characters (right-trimmed) plus an ellipsis.
    """
    if not text or len(text) <= max_length:
        return text
    return text[: max_length - 1].rstrip() + ELLIPSIS


def last_sentence(text: str) -> str | None:
    """Return the final sentence of text without its terminal punctuation.

    Sentences are split on ``.``, ``?`` or ``!`` followed by whitespace.
    Text that does not split comes back whole (trimmed).
    """
    parts = [part.strip() for part in _SENTENCE_SPLIT_RE.split(clean_text(text))]
    parts = [part for part in parts if part]
    if not parts:
        return None
    sentence = parts[-1].rstrip(".?!").strip()
    return sentence or None
