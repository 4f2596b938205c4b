"""Tests for the heuristic pluralizer."""

import pytest

from clausegloss.lib.pluralizer import (
    singularize,
    term_candidates,
    term_variants_match,
)


class TestSingularize:
    """Tests for singularize()."""

    @pytest.mark.parametrize(
        "term,expected",
        [
            ("liabilities", "liability"),
            ("Liabilities", "Liability"),
            ("commitments", "commitment"),
            ("business days", "business day"),
            ("expenses", "expens"),
            ("losses", "loss"),
            ("business", "business"),
            ("commitment", "commitment"),
        ],
    )
    def test_rules(self, term: str, expected: str) -> None:
        """Suffix rules apply in order ies, ses, s."""
        assert singularize(term) == expected

    def test_series_quirk(self) -> None:
        """The ies rule wins for 'series'; known inaccuracy kept as-is."""
        assert singularize("series") == "sery"

    def test_empty(self) -> None:
        """Empty input is returned unchanged."""
        assert singularize("") == ""


class TestTermCandidates:
    """Tests for term_candidates()."""

    def test_plural_key_adds_singular(self) -> None:
        """A plural key is probed before its singular form."""
        assert term_candidates("commitments") == ["commitments", "commitment"]

    def test_singular_key_not_duplicated(self) -> None:
        """A key with no singular form appears once."""
        assert term_candidates("commitment") == ["commitment"]

    def test_empty_key(self) -> None:
        """An empty key has no candidates."""
        assert term_candidates("") == []


class TestTermVariantsMatch:
    """Tests for term_variants_match()."""

    def test_exact_substring(self) -> None:
        """The key itself inside the text matches."""
        assert term_variants_match('the "clawback amount"', "clawback amount")

    def test_singular_substring(self) -> None:
        """The singular form of a plural key matches."""
        assert term_variants_match("the clawback amount", "clawback amounts")

    def test_no_match(self) -> None:
        """Unrelated text does not match."""
        assert not term_variants_match("the management fee", "clawback amount")

    def test_empty_key_never_matches(self) -> None:
        """An empty key matches nothing."""
        assert not term_variants_match("anything", "")
