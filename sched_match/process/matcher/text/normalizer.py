# Path: sched_match/process/matcher/text/normalizer.py
"""
Text Normalizer

Canonicalizes free-text topics, queries and names so they can be
compared: lowercase, no diacritics, no irrelevant words, single spaces.
"""

import re
import unicodedata
from functools import lru_cache
from typing import Optional

from ..models.rule_config import IrrelevantWords


DASH_RUN = re.compile(r"[-_\u2013\u2014]+")
COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")
QUOTE_VARIANTS = re.compile(r"[\u2019\u2018\u02bb\u201a]")
NON_WORD = re.compile(r"[^\w\s']")
WHITESPACE = re.compile(r'\s+')
NON_ALNUM = re.compile(r'[\W_]+')


def strip_diacritics(text: str) -> str:
    """Decompose (NFD) and drop combining diacritical marks."""
    return COMBINING_MARKS.sub('', unicodedata.normalize('NFD', text))


class Normalizer:
    """
    Normalizes strings against an irrelevant-word lexicon.

    Pipeline:
    1. Dash/underscore runs become spaces (so F2F_PER splits first)
    2. Lowercase, NFD, strip combining marks
    3. Quote variants -> apostrophe, other symbols -> space
    4. Irrelevant words removed on word boundaries until none is left,
       whitespace collapsed and trimmed

    Diacritics and symbols are cleared before lexicon removal, and
    removal repeats until stable, so that normalize() is idempotent.

    Example:
        normalizer = Normalizer(config.irrelevant_words)
        normalizer.normalize('TRIO Inglés - ONLINE L3')  # 'trio l3'
    """

    def __init__(self, irrelevant_words: Optional[IrrelevantWords] = None, cache_size: int = 8192):
        """
        Initialize normalizer.

        Args:
            irrelevant_words: Lexicon of removable words (none if omitted)
            cache_size: Distinct inputs memoized
        """
        lexicon = irrelevant_words or IrrelevantWords()
        self._pattern = lexicon.compile()
        self.irrelevant = lexicon.words()
        self._normalize_cached = lru_cache(maxsize=cache_size)(self._normalize)

    def normalize(self, text: Optional[str]) -> str:
        """
        Normalize a string.

        Args:
            text: Any text; None and empty give ''

        Returns:
            Canonical lowercase form
        """
        if not text:
            return ''
        return self._normalize_cached(text)

    def canonical(self, text: Optional[str]) -> str:
        """normalize() with every non-alphanumeric character removed."""
        return NON_ALNUM.sub('', self.normalize(text))

    def tokens(self, text: Optional[str]) -> list[str]:
        """Whitespace tokens of the normalized text."""
        return self.normalize(text).split()

    def is_irrelevant(self, token: str) -> bool:
        """Whether the token is removed by the lexicon."""
        if token in self.irrelevant:
            return True
        return bool(self._pattern and self._pattern.fullmatch(token))

    def _normalize(self, text: str) -> str:
        result = DASH_RUN.sub(' ', text)
        result = strip_diacritics(result.lower())
        result = QUOTE_VARIANTS.sub("'", result)
        result = NON_WORD.sub(' ', result)
        result = WHITESPACE.sub(' ', result).strip()

        if self._pattern is None:
            return result

        # Removing a word can bring a multi-word pattern together
        while True:
            stripped = WHITESPACE.sub(' ', self._pattern.sub(' ', result)).strip()
            if stripped == result:
                return result
            result = stripped


__all__ = ['Normalizer', 'strip_diacritics']
