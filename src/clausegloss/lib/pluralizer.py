"""Heuristic singular forms for glossary keys.

This is deliberately not a dictionary-backed singularizer. Known quirks are
kept as they are because documents are matched against the same rules on
both sides: ``expenses`` becomes ``expens`` and ``series`` becomes ``sery``.
"""


def singularize(term: str) -> str:
    """Return the heuristic singular form of a term key.

    Rules, first match wins:
        - ``...ies`` -> ``...y``
        - ``...ses`` -> drop the trailing ``es``
        - ``...s`` (but not ``...ss``) -> drop the trailing ``s``

    Args:
        term: Term key, normally already lowercased.

    Returns:
        The singular form, or the term unchanged when no rule applies.
    """
    if not term:
        return term
    if term.endswith("ies"):
        return term[:-3] + "y"
    if term.endswith("ses"):
        return term[:-2]
    if term.endswith("s") and not term.endswith("ss"):
        return term[:-1]
    return term


def term_candidates(term_key: str) -> list[str]:
    """Keys to probe for a selected term, most specific first.

    Args:
        term_key: Normalized key of the selected text.

    Returns:
        ``[term_key, singularize(term_key)]`` without empties or duplicates.
    """
    candidates = [term_key, singularize(term_key)]
    return list(dict.fromkeys(c for c in candidates if c))


def term_variants_match(text: str, term_key: str) -> bool:
    """Check whether text mentions the key or its singular form."""
    if not term_key:
        return False
    if term_key in text:
        return True
    singular = singularize(term_key)
    return bool(singular) and singular in text
