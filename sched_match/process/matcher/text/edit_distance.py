# Path: sched_match/process/matcher/text/edit_distance.py
"""
Edit-Distance Cache

Bounded LRU memoization of pairwise Levenshtein distances used by
token-coverage scoring. Owned by one matching service; clear it
between batches.
"""

from collections import OrderedDict
from typing import Optional

from rapidfuzz.distance import Levenshtein

from sched_match.core.logger import get_process_logger


DEFAULT_CAPACITY = 5000


class EditDistanceCache:
    """
    LRU cache of symmetric edit distances.

    Keys are unordered pairs, so distance(a, b) and distance(b, a)
    share one entry. A hit refreshes recency; an insertion past
    capacity evicts the least recently used pair.

    Example:
        cache = EditDistanceCache(capacity=5000)
        cache.distance('garcia', 'garcya')  # 1
        cache.clear()
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize cache.

        Args:
            capacity: Maximum number of memoized pairs (> 0)
        """
        if capacity <= 0:
            raise ValueError(f"Cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[tuple[str, str], int] = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.logger = get_process_logger('matcher.edit_distance')

    @staticmethod
    def _key(a: str, b: str) -> tuple[str, str]:
        return (a, b) if a <= b else (b, a)

    def get(self, a: str, b: str) -> Optional[int]:
        """Memoized distance for the pair, or None."""
        key = self._key(a, b)
        value = self._entries.get(key)
        if value is not None:
            self._entries.move_to_end(key)
        return value

    def put(self, a: str, b: str, value: int) -> None:
        """Memoize a distance, evicting the least recently used pair if full."""
        key = self._key(a, b)
        if key in self._entries:
            self._entries.move_to_end(key)
        self._entries[key] = value
        if len(self._entries) > self.capacity:
            self._entries.popitem(last=False)

    def distance(self, a: str, b: str) -> int:
        """
        Levenshtein distance between two strings.

        Args:
            a: First string
            b: Second string

        Returns:
            Minimum number of single-character edits
        """
        if a == b:
            return 0

        cached = self.get(a, b)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        value = Levenshtein.distance(a, b)
        self.put(a, b, value)
        return value

    def clear(self) -> None:
        """Drop every memoized pair."""
        if self._entries:
            self.logger.debug(
                f"Clearing edit-distance cache: {len(self._entries)} entries, "
                f"{self.hits} hits, {self.misses} misses"
            )
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, pair: tuple[str, str]) -> bool:
        return self._key(*pair) in self._entries


__all__ = ['EditDistanceCache', 'DEFAULT_CAPACITY']
