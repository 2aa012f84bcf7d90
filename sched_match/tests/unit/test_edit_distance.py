# Path: sched_match/tests/unit/test_edit_distance.py
"""
Unit Tests for EditDistanceCache

Tests distance values, symmetry and LRU behaviour.
"""

import itertools

import pytest

from sched_match.process.matcher.text import EditDistanceCache


class TestDistance:
    """Test distance values."""

    def test_identical_is_zero(self):
        """Identical strings are at distance 0 and are not cached."""
        cache = EditDistanceCache()
        assert cache.distance('acme', 'acme') == 0
        assert len(cache) == 0

    def test_known_values(self):
        """Single substitutions, insertions and deletions count once."""
        cache = EditDistanceCache()
        assert cache.distance('garcia', 'garcya') == 1
        assert cache.distance('acme', 'acmes') == 1
        assert cache.distance('kitten', 'sitting') == 3
        assert cache.distance('', 'abc') == 3

    def test_symmetric(self):
        """distance(a, b) == distance(b, a), sharing one entry."""
        cache = EditDistanceCache()
        assert cache.distance('hooli', 'holi') == cache.distance('holi', 'hooli')
        assert len(cache) == 1
        assert cache.hits == 1

    def test_triangle_inequality(self):
        """d(a, c) <= d(a, b) + d(b, c) on sampled triples."""
        cache = EditDistanceCache()
        words = ['acme', 'acne', 'globex', 'global', 'hooli', 'holy', '']
        for a, b, c in itertools.permutations(words, 3):
            assert cache.distance(a, c) <= cache.distance(a, b) + cache.distance(b, c)


class TestLRU:
    """Test bounded LRU behaviour."""

    def test_evicts_least_recently_used(self):
        """Overflow evicts the pair used least recently."""
        cache = EditDistanceCache(capacity=2)
        cache.distance('a1', 'b1')
        cache.distance('a2', 'b2')

        # Refresh the first pair, then overflow
        cache.distance('b1', 'a1')
        cache.distance('a3', 'b3')

        assert ('a1', 'b1') in cache
        assert ('a2', 'b2') not in cache
        assert ('a3', 'b3') in cache
        assert len(cache) == 2

    def test_put_and_get(self):
        """put() memoizes and get() returns the value for either order."""
        cache = EditDistanceCache()
        cache.put('x', 'y', 7)
        assert cache.get('y', 'x') == 7
        assert cache.get('x', 'z') is None

    def test_clear(self):
        """clear() drops entries and counters."""
        cache = EditDistanceCache()
        cache.distance('acme', 'acne')
        cache.clear()
        assert len(cache) == 0
        assert cache.misses == 0

    def test_invalid_capacity(self):
        """Capacity must be positive."""
        with pytest.raises(ValueError):
            EditDistanceCache(capacity=0)
