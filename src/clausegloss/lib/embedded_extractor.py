"""Embedded definition extraction from parentheticals.

Terms that are only cross-referenced ("has the meaning given in clause 9.2")
are usually introduced inline somewhere else in the document, in legal
drafting style::

    ... the amount by which contributions exceed distributions
    (the "Clawback Amount") ...

The extractor scans the corpus for a parenthetical that mentions the term
and recovers the defining phrase from the parenthetical itself or from the
text immediately preceding it.

Extraction is an ordered chain of rules. Each rule is a pure function of
``(preceding_text, interior, term_key)`` returning a phrase or None, so
each can be tested on its own:

1. ``being_the``: ``(<X> being the "Term")`` -> X
2. ``amount_referent``: ``(any such amounts, the "Term")`` -> the
   "such amounts ..." phrase before the parenthetical
3. ``nearest_phrase``: the clause nearest the parenthetical, cut at a
   strong delimiter or a cue word such as "via" or "as"
4. ``last_sentence``: the last sentence before the parenthetical

The first rule whose result is at least ``min_definition_length``
characters long wins.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from clausegloss.lib.pluralizer import term_variants_match
from clausegloss.lib.text_normalizer import (
    clean_text,
    last_sentence,
    normalize_term,
    truncate,
)
from clausegloss.models.config import GlossaryConfig

logger = logging.getLogger(__name__)

PARENTHETICAL_RE = re.compile(r"\(([^)]+)\)")

BEING_THE_RE = re.compile(
    r'^(?P<phrase>.+?)\s+being\s+the\s+(?:"(?P<quoted>[^"]+)"|(?P<bare>.+))$',
    re.IGNORECASE,
)

AMOUNT_INTERIOR_RE = re.compile(
    r"^(?:any\s+such|such|any)\s+amounts?\b", re.IGNORECASE
)
SUCH_AMOUNT_RE = re.compile(r"such amounts?", re.IGNORECASE)
SUCH_AMOUNT_PREFIX_RE = re.compile(r"^such\s+amounts?\s+(?:as\s+)?", re.IGNORECASE)

# Cue words common in limited partnership agreements
CUE_WORDS: tuple[str, ...] = (
    " via ",
    " as ",
    " in the form of ",
    " through ",
    " using ",
)
STRONG_DELIMITERS: tuple[str, ...] = (".", ";", ":")
LEADING_CUE_RE = re.compile(r"^(?:via|as|through|using)\s+", re.IGNORECASE)
LEADING_FRAGMENT_MAX_COMMA = 40

DEFAULT_MIN_PHRASE_LENGTH = 20

RuleFn = Callable[[str, str, str], str | None]


@dataclass(frozen=True)
class ExtractionRule:
    """A named extraction heuristic.

    Attributes:
        name: Rule identifier used in debug logging
        apply: Pure function ``(preceding_text, interior, term_key)``
            returning the extracted phrase or None
    """

    name: str
    apply: RuleFn


def extract_being_the(preceding: str, interior: str, term_key: str) -> str | None:
    """Extract X from an interior of the form ``X being the "Term"``."""
    match = BEING_THE_RE.match(interior)
    if not match:
        return None
    named = match.group("quoted") or match.group("bare") or ""
    if not term_variants_match(normalize_term(named), term_key):
        return None
    phrase = match.group("phrase").strip()
    return phrase or None


def extract_amount_referent(
    preceding: str, interior: str, term_key: str
) -> str | None:
    """Resolve ``(any such amounts, the "Term")`` to the amounts before it.

    Returns the text from the last "such amount(s)" before the parenthetical
    onward, with the leading "such amount(s) [as]" rewritten to "amounts".
    Without such a referent the last sentence of the preceding text is used.
    """
    if not AMOUNT_INTERIOR_RE.match(interior):
        return None

    last_match = None
    for last_match in SUCH_AMOUNT_RE.finditer(preceding):
        pass

    if last_match is None:
        return last_sentence(preceding)

    phrase = preceding[last_match.start() :].strip()
    phrase = SUCH_AMOUNT_PREFIX_RE.sub("amounts ", phrase, count=1)
    return phrase.strip() or None


def extract_nearest_phrase(
    preceding: str,
    interior: str,
    term_key: str,
    min_length: int = DEFAULT_MIN_PHRASE_LENGTH,
) -> str | None:
    """Take the clause closest to the parenthetical.

    The phrase starts at whichever comes later: just after the last strong
    delimiter, or at the last cue word. A leading cue word is then dropped,
    as is a short leading fragment ending in a comma.
    """
    lowered = preceding.lower()
    cue_pos = max(lowered.rfind(cue) for cue in CUE_WORDS)
    delim_pos = max(preceding.rfind(delim) for delim in STRONG_DELIMITERS)

    start = 0
    if delim_pos != -1:
        start = delim_pos + 1
    if cue_pos != -1:
        start = max(start, cue_pos)

    candidate = preceding[start:].strip()
    candidate = LEADING_CUE_RE.sub("", candidate, count=1)

    first_comma = candidate.find(",")
    if first_comma != -1 and first_comma < LEADING_FRAGMENT_MAX_COMMA:
        candidate = candidate[first_comma + 1 :].strip()

    if len(candidate) >= min_length:
        return candidate
    return None


def extract_last_sentence(preceding: str, interior: str, term_key: str) -> str | None:
    """Fall back to the final sentence before the parenthetical."""
    return last_sentence(preceding)


EXTRACTION_RULES: list[ExtractionRule] = [
    ExtractionRule("being_the", extract_being_the),
    ExtractionRule("amount_referent", extract_amount_referent),
    ExtractionRule("nearest_phrase", extract_nearest_phrase),
    ExtractionRule("last_sentence", extract_last_sentence),
]


class EmbeddedDefinitionExtractor:
    """Finds a term's inline definition anywhere in a paragraph corpus.

    Attributes:
        config: Length limits applied to extracted phrases
        rules: Ordered extraction rules, first acceptable result wins
    """

    def __init__(
        self,
        config: GlossaryConfig | None = None,
        rules: list[ExtractionRule] | None = None,
    ) -> None:
        """Initialize the extractor.

        Args:
            config: Length limits; defaults to GlossaryConfig().
            rules: Rule chain override; defaults to EXTRACTION_RULES with the
                nearest-phrase threshold taken from the config.
        """
        self.config = config or GlossaryConfig()
        self.rules = rules if rules is not None else self._default_rules()

    def _default_rules(self) -> list[ExtractionRule]:
        min_phrase = self.config.min_phrase_length

        def nearest_phrase(preceding: str, interior: str, term_key: str) -> str | None:
            return extract_nearest_phrase(preceding, interior, term_key, min_phrase)

        return [
            ExtractionRule("nearest_phrase", nearest_phrase)
            if rule.name == "nearest_phrase"
            else rule
            for rule in EXTRACTION_RULES
        ]

    def find(self, paragraphs: Iterable[str], term_key: str) -> str | None:
        """Search paragraphs in order for an embedded definition of term_key.

        Args:
            paragraphs: Paragraph corpus in document order.
            term_key: Normalized term key.

        Returns:
            The extracted phrase (truncated to max_definition_length), or
            None when no parenthetical in the corpus yields one.
        """
        if not term_key:
            return None

        for index, raw in enumerate(paragraphs):
            paragraph = clean_text(raw or "")
            if "(" not in paragraph or ")" not in paragraph:
                continue

            phrase = self.extract_from_paragraph(paragraph, term_key)
            if phrase:
                logger.debug(
                    f"Embedded definition for '{term_key}' found in paragraph {index}"
                )
                return truncate(phrase, self.config.max_definition_length)

        logger.debug(f"No embedded definition located for '{term_key}'")
        return None

    def extract_from_paragraph(self, paragraph: str, term_key: str) -> str | None:
        """Try every parenthetical in a cleaned paragraph that mentions the term."""
        for match in PARENTHETICAL_RE.finditer(paragraph):
            interior = clean_text(match.group(1))
            if not term_variants_match(normalize_term(interior), term_key):
                continue

            preceding = paragraph[: match.start()].strip()
            phrase = self.apply_rules(preceding, interior, term_key)
            if phrase:
                return phrase
        return None

    def apply_rules(self, preceding: str, interior: str, term_key: str) -> str | None:
        """Run the rule chain on one matching parenthetical."""
        for rule in self.rules:
            result = rule.apply(preceding, interior, term_key)
            if result:
                result = result.strip()
            if result and len(result) >= self.config.min_definition_length:
                logger.debug(f"Rule '{rule.name}' matched for '{term_key}'")
                return result
        return None


def find_embedded_definition(
    paragraphs: Iterable[str],
    term_key: str,
    config: GlossaryConfig | None = None,
) -> str | None:
    """Locate and extract the inline definition of term_key.

    Convenience wrapper around EmbeddedDefinitionExtractor.find().
    """
    return EmbeddedDefinitionExtractor(config).find(paragraphs, term_key)
