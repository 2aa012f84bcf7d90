# Path: sched_match/tests/unit/test_normalizer.py
"""
Unit Tests for Normalizer

Tests string canonicalization:
- Case, diacritics, symbols and whitespace
- Irrelevant-word removal (exact words and patterns)
- Idempotency
"""

import pytest

from sched_match.process.matcher.text import Normalizer, strip_diacritics


class TestNormalizerBasics:
    """Test the normalization pipeline."""

    def test_empty_and_none(self, normalizer):
        """None and empty strings normalize to ''."""
        assert normalizer.normalize(None) == ''
        assert normalizer.normalize('') == ''

    def test_lowercase_and_whitespace(self, normalizer):
        """Text is lowercased and whitespace collapsed."""
        assert normalizer.normalize('  CH   ACME\tL2 ') == 'ch acme l2'

    def test_diacritics_removed(self, normalizer):
        """Combining marks are stripped after decomposition."""
        assert normalizer.normalize('Café Olé') == 'cafe ole'

    def test_symbols_become_spaces(self, normalizer):
        """Punctuation and symbols separate tokens."""
        assert normalizer.normalize('CH (ACME) / L2!') == 'ch acme l2'

    def test_dash_and_underscore_split_tokens(self, normalizer):
        """Dashes and underscores separate tokens before lexicon removal."""
        assert normalizer.normalize('F2F_PER CH-ACME') == 'ch acme'

    def test_quote_variants_unified(self, normalizer):
        """Typographic apostrophes become a plain apostrophe."""
        assert normalizer.normalize('O’Brien') == "o'brien"


class TestIrrelevantWords:
    """Test lexicon removal."""

    def test_exact_words_removed(self, normalizer):
        """Category words are removed."""
        assert normalizer.normalize('TRIO Inglés - ONLINE L3') == 'trio l3'

    def test_patterns_removed(self, normalizer):
        """Pattern entries remove whole matches."""
        assert normalizer.normalize('Look 1 CH ACME TZ5') == 'ch acme'
        assert normalizer.normalize('CH ACME Electivos') == 'ch acme'

    def test_word_boundaries_respected(self, normalizer):
        """Lexicon words inside longer words are kept."""
        assert normalizer.normalize('OnlineAcademy') == 'onlineacademy'

    def test_is_irrelevant(self, normalizer):
        """is_irrelevant covers exact words and patterns."""
        assert normalizer.is_irrelevant('online')
        assert normalizer.is_irrelevant('lecciones')
        assert not normalizer.is_irrelevant('acme')

    def test_no_lexicon(self):
        """Without a lexicon nothing is removed."""
        assert Normalizer().normalize('Online CH') == 'online ch'


class TestIdempotency:
    """normalize(normalize(s)) == normalize(s)."""

    @pytest.mark.parametrize('text', [
        'TRIO Inglés - ONLINE L3',
        'BVP - María José Pérez - Español',
        'Garcia (Maria) (ACME), L3',
        'look look 1 1 CH',
        'Crash-Course__Repaso (PER) ñandú',
        'O’Brien’s — CH 2',
        '',
    ])
    def test_idempotent(self, normalizer, text):
        """A second pass changes nothing."""
        once = normalizer.normalize(text)
        assert normalizer.normalize(once) == once


class TestHelpers:
    """Test canonical(), tokens() and strip_diacritics()."""

    def test_canonical_removes_separators(self, normalizer):
        """canonical() keeps only alphanumerics."""
        assert normalizer.canonical('CH-ACME (L2)') == 'chacmel2'

    def test_tokens(self, normalizer):
        """tokens() splits the normalized text."""
        assert normalizer.tokens('CH ACME Online') == ['ch', 'acme']

    def test_strip_diacritics(self):
        """strip_diacritics keeps case and base letters."""
        assert strip_diacritics('Ñandú') == 'Nandu'
