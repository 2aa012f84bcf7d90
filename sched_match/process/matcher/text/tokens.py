# Path: sched_match/process/matcher/text/tokens.py
"""
Token Extraction

Helpers that pull classifier tokens, level indicators and numbers out
of raw (un-normalized) text. Classifier tokens are read from raw text
because some of them (bvp, bvd, bvs) are also irrelevant words that
normalization removes.
"""

import re
from typing import Iterable

from .normalizer import strip_diacritics


LEVEL_PATTERN = re.compile(r'\b(?:l|n|level|nivel)\s*(\d+)\b', re.IGNORECASE)
DIGITS = re.compile(r'\d+')
RAW_SPLIT = re.compile(r'[\W_]+')
SHORT_CODE = re.compile(r'^[a-z]{1,3}\d+$')
PARENTHESIZED = re.compile(r'\(([^)]+)\)')


def raw_tokens(text: str) -> list[str]:
    """Lowercase, diacritic-free tokens split on any non-alphanumeric run."""
    if not text:
        return []
    return [t for t in RAW_SPLIT.split(strip_diacritics(text.lower())) if t]


def extract_levels(text: str) -> list[str]:
    """Level numbers (L3, N4, Level 5, Nivel 2 -> '3', '4', '5', '2')."""
    return LEVEL_PATTERN.findall(text or '')


def strip_levels(text: str) -> str:
    """Text with every level indicator replaced by a space."""
    return LEVEL_PATTERN.sub(' ', text or '')


def strip_digits(text: str) -> str:
    """Text with every digit run removed."""
    return DIGITS.sub('', text or '')


def extract_numbers(text: str) -> list[str]:
    """All digit runs, including those inside level indicators."""
    return DIGITS.findall(text or '')


def extract_non_level_numbers(text: str) -> list[str]:
    """Digit runs that are not part of a level indicator (group numbers)."""
    return DIGITS.findall(strip_levels(text))


def parenthesized(text: str) -> list[str]:
    """Contents of every (...) group."""
    return PARENTHESIZED.findall(text or '')


def is_numeric(token: str) -> bool:
    return bool(DIGITS.fullmatch(token))


def is_short_code(token: str) -> bool:
    """Short alphanumeric codes such as l7, fr3, kb1."""
    return bool(SHORT_CODE.match(token))


def distinctive_tokens(normalized: str, structural: Iterable[str] = ()) -> list[str]:
    """
    Tokens that carry identity for coverage comparison.

    Drops tokens of length <= 2, purely numeric tokens, short codes
    and structural classifier tokens. Order is preserved, duplicates
    removed.

    Args:
        normalized: Normalized text
        structural: Structural tokens to exclude

    Returns:
        Distinctive tokens in order of appearance
    """
    excluded = set(structural)
    seen: dict[str, None] = {}
    for token in normalized.split():
        if len(token) <= 2 or is_numeric(token) or is_short_code(token):
            continue
        if token in excluded:
            continue
        seen.setdefault(token, None)
    return list(seen)


__all__ = [
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
