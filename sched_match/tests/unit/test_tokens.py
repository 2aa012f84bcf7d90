# Path: sched_match/tests/unit/test_tokens.py
"""
Unit Tests for token extraction helpers
"""

from sched_match.process.matcher.text import (
    distinctive_tokens,
    extract_levels,
    extract_non_level_numbers,
    extract_numbers,
    is_short_code,
    parenthesized,
    raw_tokens,
    strip_levels,
)


class TestLevels:
    """Test level indicator extraction."""

    def test_level_spellings(self):
        """L, N, Level and Nivel all count, with or without a space."""
        assert extract_levels('CH ACME L3') == ['3']
        assert extract_levels('n4 Level 5 Nivel 2') == ['4', '5', '2']

    def test_level_needs_word_boundary(self):
        """Digits glued to other words are not levels."""
        assert extract_levels('CH ACME2 XL3') == []

    def test_strip_levels(self):
        """Levels are removed, other numbers stay."""
        assert extract_non_level_numbers('CH 2 ACME L3') == ['2']
        assert '3' not in strip_levels('CH 2 ACME L3')

    def test_all_numbers(self):
        """extract_numbers includes level digits."""
        assert extract_numbers('CH 2 ACME L3') == ['2', '3']


class TestTokens:
    """Test raw and distinctive tokens."""

    def test_raw_tokens(self):
        """Raw tokens split on any non-alphanumeric run, lowercased."""
        assert raw_tokens('BVP - José_Pérez (ACME)') == ['bvp', 'jose', 'perez', 'acme']

    def test_parenthesized(self):
        """Every parenthesized group is returned."""
        assert parenthesized('Garcia (Maria) (ACME), L3') == ['Maria', 'ACME']

    def test_short_codes(self):
        """Short alphanumeric codes are detected."""
        assert is_short_code('l7')
        assert is_short_code('fr3')
        assert not is_short_code('acme')

    def test_distinctive_tokens(self):
        """Short, numeric, short-code and structural tokens are dropped."""
        tokens = distinctive_tokens('ch acme 12 l3 fr3 de finanzas acme', {'ch'})
        assert tokens == ['acme', 'finanzas']
