"""Pydantic models for glossary snapshots, lookups and configuration."""

from clausegloss.models.config import GlossaryConfig
from clausegloss.models.glossary import (
    CrossReference,
    DefinitionTables,
    Glossary,
    LookupResult,
    LookupStatus,
)

__all__ = [
    "CrossReference",
    "DefinitionTables",
    "Glossary",
    "GlossaryConfig",
    "LookupResult",
    "LookupStatus",
]
