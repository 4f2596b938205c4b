"""Resolve a selected phrase against a glossary snapshot.

Lookup order for the selected key and then its singular form:
1. direct definitions
2. cross-references, answered by searching the corpus for an embedded
   definition of the referenced term
3. otherwise, no definition
"""

from clausegloss.lib.embedded_extractor import EmbeddedDefinitionExtractor
from clausegloss.lib.logging_config import get_logger
from clausegloss.lib.pluralizer import term_candidates
from clausegloss.lib.text_normalizer import clean_text, normalize_term
from clausegloss.models.config import GlossaryConfig
from clausegloss.models.glossary import Glossary, LookupResult, LookupStatus

logger = get_logger(__name__)

NO_TERM_MESSAGE = "No term selected."
NOT_READY_MESSAGE = "Glossary not built yet. Build it, then select a term."
NOT_FOUND_MESSAGE = "No definition found."


def embedded_not_found_message(clause_ref: str) -> str:
    """Message shown when a cross-referenced term has no embedded definition."""
    return f"No embedded definition found (cross-ref: clause {clause_ref})."


def resolve(
    glossary: Glossary | None,
    raw_selected_text: str | None,
    config: GlossaryConfig | None = None,
) -> LookupResult:
    """Look up the definition of a selected phrase.

    Args:
        glossary: Current glossary snapshot, or None before the first build.
        raw_selected_text: Selected text exactly as the host reported it.
        config: Extraction limits for embedded definitions.

    Returns:
        A LookupResult. The term echoes the cleaned selection; the status
        says which outcome was reached.
    """
    term = clean_text(raw_selected_text)
    selected_key = normalize_term(raw_selected_text)

    if not selected_key:
        return LookupResult(
            term=term, definition=NO_TERM_MESSAGE, status=LookupStatus.NO_TERM
        )

    if glossary is None:
        return LookupResult(
            term=term, definition=NOT_READY_MESSAGE, status=LookupStatus.NOT_READY
        )

    candidates = term_candidates(selected_key)

    for key in candidates:
        if key in glossary.direct:
            logger.debug(f"Direct definition hit for '{key}'")
            return LookupResult(
                term=term,
                definition=glossary.direct[key],
                status=LookupStatus.DIRECT,
                term_key=key,
            )

    for key in candidates:
        reference = glossary.xref.get(key)
        if reference is None:
            continue

        logger.debug(
            f"Cross-reference hit for '{key}' (clause {reference.clause_ref}); "
            "searching for an embedded definition"
        )
        extractor = EmbeddedDefinitionExtractor(config)
        phrase = extractor.find(glossary.paragraphs, key)
        if phrase:
            return LookupResult(
                term=term,
                definition=phrase,
                status=LookupStatus.EMBEDDED,
                term_key=key,
                clause_ref=reference.clause_ref,
            )
        return LookupResult(
            term=term,
            definition=embedded_not_found_message(reference.clause_ref),
            status=LookupStatus.EMBEDDED_NOT_FOUND,
            term_key=key,
            clause_ref=reference.clause_ref,
        )

    logger.debug(f"No definition for '{selected_key}'")
    return LookupResult(
        term=term, definition=NOT_FOUND_MESSAGE, status=LookupStatus.NOT_FOUND
    )
