"""Glossary snapshot and lookup result models.

A Glossary is built once per document scan and never mutated afterwards;
a rebuild produces a new instance that replaces the old one wholesale.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class CrossReference(BaseModel):
    """A term whose meaning is given in another clause.

    Attributes:
        clause_ref: Dotted numeric clause path, e.g. "9.2"
        raw_paragraph: The cleaned paragraph that declared the reference
    """

    model_config = ConfigDict(frozen=True)

    clause_ref: str = Field(..., description="Dotted numeric clause path")
    raw_paragraph: str = Field(..., description="Cleaned source paragraph")


class DefinitionTables(BaseModel):
    """Direct and cross-reference tables produced by one document scan."""

    direct: dict[str, str] = Field(default_factory=dict)
    xref: dict[str, CrossReference] = Field(default_factory=dict)


class Glossary(BaseModel):
    """Immutable glossary snapshot for one document.

    Both tables are stored as read-only mappings, so neither the fields nor
    their entries can be changed after construction.

    Attributes:
        direct: Term key -> definition text
        xref: Term key -> cross-reference to the defining clause
        paragraphs: The paragraph corpus the tables were built from, in
            document order. Searched for embedded definitions.
    """

    model_config = ConfigDict(frozen=True)

    direct: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    xref: Mapping[str, CrossReference] = Field(
        default_factory=dict, validate_default=True
    )
    paragraphs: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("direct", "xref", mode="after")
    @classmethod
    def freeze_table(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        """Copy the table into a read-only view."""
        return MappingProxyType(dict(value))

    @field_serializer("direct", "xref")
    def serialize_table(self, value: Mapping[str, Any]) -> dict[str, Any]:
        """Dump read-only tables as plain dicts."""
        return dict(value)

    @classmethod
    def from_tables(
        cls, tables: DefinitionTables, paragraphs: list[str] | tuple[str, ...]
    ) -> "Glossary":
        """Combine builder output with its corpus into a snapshot."""
        return cls(
            direct=dict(tables.direct),
            xref=dict(tables.xref),
            paragraphs=tuple(paragraphs),
        )

    @property
    def size(self) -> int:
        """Total number of terms across both tables."""
        return len(self.direct) + len(self.xref)

    def has_term(self, term_key: str) -> bool:
        """Return True if the key is present in either table."""
        return term_key in self.direct or term_key in self.xref


class LookupStatus(str, Enum):
    """Outcome of resolving a selected phrase."""

    DIRECT = "direct"
    EMBEDDED = "embedded"
    EMBEDDED_NOT_FOUND = "embedded_not_found"
    NOT_FOUND = "not_found"
    NO_TERM = "no_term"
    NOT_READY = "not_ready"


class LookupResult(BaseModel):
    """Result of a glossary lookup, always produced.

    Attributes:
        term: The selected text as displayed (cleaned, not normalized)
        definition: Definition text, or a human-readable miss message
        status: Which outcome was reached
        term_key: The key that produced the hit, if any
        clause_ref: Clause reference for cross-referenced terms
    """

    term: str = ""
    definition: str = ""
    status: LookupStatus
    term_key: str | None = None
    clause_ref: str | None = None

    @property
    def found(self) -> bool:
        """True when a definition text (not a miss message) was resolved."""
        return self.status in (LookupStatus.DIRECT, LookupStatus.EMBEDDED)
