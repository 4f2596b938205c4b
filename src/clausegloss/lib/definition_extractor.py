"""Definition table extraction from document paragraphs.

Legal documents state defined terms in two paragraph shapes:

- direct definitions: ``"Term" means <definition>.``
- cross-references: ``"Term" has the meaning given in clause 9.2.``

Both patterns are anchored to the whole paragraph and must stay compatible
with existing documents, so they are kept exactly as written below. Each
paragraph contributes to at most one table: the direct pattern is tried
first. When a term is defined more than once the last definition wins.
"""

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum

from clausegloss.lib.text_normalizer import clean_text, normalize_term
from clausegloss.models.glossary import CrossReference, DefinitionTables

logger = logging.getLogger(__name__)

DIRECT_DEFINITION_RE = re.compile(
    r'^"([^"]+)"\s+(means|shall mean|includes|shall include|has the following meaning)'
    r"\s+(.+?)\s*[.;:]?\s*$",
    re.IGNORECASE,
)

CROSS_REFERENCE_RE = re.compile(
    r'^"([^"]+)"\s+has the meaning\s+(given in|set out in|set forth in)\s+clause'
    r"\s+([0-9]+(?:\.[0-9]+)*)\b.*\s*[.;:]?\s*$",
    re.IGNORECASE,
)


class DefinitionKind(str, Enum):
    """How a paragraph defines its term."""

    DIRECT = "direct"
    CROSS_REFERENCE = "cross_reference"


@dataclass
class DefinitionEntry:
    """A definition paragraph recognised in a document.

    Attributes:
        term: The term as quoted in the document (original casing)
        term_normalized: Lowercase lookup key
        kind: Direct definition or cross-reference
        definition_text: The definition for direct entries, the cleaned
            paragraph for cross-references
        paragraph_index: Position of the paragraph in the document
        clause_ref: Referenced clause path (cross-references only)

    Example:
        >>> entry = DefinitionEntry(
        ...     term="Business Day",
        ...     term_normalized="business day",
        ...     kind=DefinitionKind.DIRECT,
        ...     definition_text="a day other than a Saturday or Sunday",
        ...     paragraph_index=4,
        ... )
    """

    term: str
    term_normalized: str
    kind: DefinitionKind
    definition_text: str
    paragraph_index: int
    clause_ref: str | None = None


def classify_paragraph(paragraph: str, index: int = 0) -> DefinitionEntry | None:
    """Classify one paragraph as a direct definition, a cross-reference, or neither.

    Args:
        paragraph: Raw paragraph text.
        index: Paragraph position, recorded on the entry.

    Returns:
        The recognised entry, or None when the paragraph defines nothing
        (or its term normalizes to an empty key).
    """
    text = clean_text(paragraph)
    if not text:
        return None

    match = DIRECT_DEFINITION_RE.match(text)
    if match:
        key = normalize_term(match.group(1))
        if not key:
            return None
        return DefinitionEntry(
            term=match.group(1),
            term_normalized=key,
            kind=DefinitionKind.DIRECT,
            definition_text=match.group(3).strip(),
            paragraph_index=index,
        )

    match = CROSS_REFERENCE_RE.match(text)
    if match:
        key = normalize_term(match.group(1))
        if not key:
            return None
        return DefinitionEntry(
            term=match.group(1),
            term_normalized=key,
            kind=DefinitionKind.CROSS_REFERENCE,
            definition_text=text,
            paragraph_index=index,
            clause_ref=match.group(3),
        )

    return None


def iter_definition_entries(paragraphs: Iterable[str]) -> Iterator[DefinitionEntry]:
    """Yield every definition paragraph in document order."""
    for index, paragraph in enumerate(paragraphs):
        entry = classify_paragraph(paragraph or "", index)
        if entry is not None:
            yield entry


def build_definition_tables(paragraphs: Iterable[str]) -> DefinitionTables:
    """Scan all paragraphs once and build the direct and cross-reference tables.

    Args:
        paragraphs: Paragraph texts in document order.

    Returns:
        DefinitionTables with last-wins semantics for repeated keys.
    """
    direct: dict[str, str] = {}
    xref: dict[str, CrossReference] = {}

    for entry in iter_definition_entries(paragraphs):
        key = entry.term_normalized
        if entry.kind is DefinitionKind.DIRECT:
            if key in direct:
                logger.debug(
                    f"Term '{key}' redefined at paragraph {entry.paragraph_index}"
                )
            direct[key] = entry.definition_text
        else:
            if key in xref:
                logger.debug(
                    f"Cross-reference for '{key}' replaced at paragraph "
                    f"{entry.paragraph_index}"
                )
            xref[key] = CrossReference(
                clause_ref=entry.clause_ref or "",
                raw_paragraph=entry.definition_text,
            )

    logger.info(
        f"Extracted {len(direct)} direct definitions and "
        f"{len(xref)} cross-references"
    )
    return DefinitionTables(direct=direct, xref=xref)
