"""ClauseGloss - Resolve defined terms in legal documents.

ClauseGloss builds a glossary from a document's paragraphs and resolves a
selected phrase to its definition.

Main features:
- Direct definitions ("Term" means ...)
- Cross-references ("Term" has the meaning given in clause 9.2)
- Embedded definitions recovered from parentheticals (the "Term")
- Singular/plural tolerant lookup
"""

from clausegloss.glossary.resolver import resolve
from clausegloss.glossary.session import GlossarySession, SelectionChanged
from clausegloss.lib.definition_extractor import build_definition_tables
from clausegloss.lib.embedded_extractor import find_embedded_definition
from clausegloss.lib.errors import ClauseGlossError, ConfigError
from clausegloss.models.glossary import Glossary, LookupResult, LookupStatus

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ClauseGlossError",
    "ConfigError",
    "Glossary",
    "GlossarySession",
    "LookupResult",
    "LookupStatus",
    "SelectionChanged",
    "build_definition_tables",
    "find_embedded_definition",
    "resolve",
]
