# Path: sched_match/process/matcher/text/__init__.py
"""
Text Utilities

- Normalizer: lexicon-aware string canonicalization
- EditDistanceCache: LRU-memoized Levenshtein distance
- tokens: level, number and classifier token extraction
"""

from .normalizer import Normalizer, strip_diacritics
from .edit_distance import EditDistanceCache, DEFAULT_CAPACITY
from .tokens import (
    LEVEL_PATTERN,
    raw_tokens,
    extract_levels,
    strip_levels,
    strip_digits,
    extract_numbers,
    extract_non_level_numbers,
    parenthesized,
    is_numeric,
    is_short_code,
    distinctive_tokens,
)

__all__ = [
    'Normalizer',
    'strip_diacritics',
    'EditDistanceCache',
    'DEFAULT_CAPACITY',
    'LEVEL_PATTERN',
    'raw_tokens',
    'extract_levels',
    'strip_levels',
    'strip_digits',
    'extract_numbers',
    'extract_non_level_numbers',
    'parenthesized',
    'is_numeric',
    'is_short_code',
    'distinctive_tokens',
]
