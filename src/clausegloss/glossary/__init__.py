"""Glossary lookup and session management."""

from clausegloss.glossary.resolver import resolve
from clausegloss.glossary.session import GlossarySession, SelectionChanged

__all__ = [
    "GlossarySession",
    "SelectionChanged",
    "resolve",
]
