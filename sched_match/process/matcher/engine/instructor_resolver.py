# Path: sched_match/process/matcher/engine/instructor_resolver.py
"""
Instructor Resolver

Resolves a free-text instructor name against the user catalog:
1. Exact normalized full name
2. Exact normalized display name
3. Token subset (most specific qualifier wins)
4. Fuzzy name search with a token-overlap guard
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from rapidfuzz import fuzz, process

from sched_match.core.logger import get_process_logger

from ..models.candidates import UserCandidate
from ..models.rule_config import RuleConfiguration
from ..text.normalizer import Normalizer


@dataclass(frozen=True)
class InstructorMatch:
    """A resolved instructor and the stage that found them."""
    user: UserCandidate
    stage: str


class InstructorResolver:
    """
    Staged matcher over the user catalog.

    Example:
        resolver = InstructorResolver(users, config)
        user = resolver.resolve('Garcia Lopez, Maria')
    """

    MAX_OVERLAP_REQUIRED = 2

    def __init__(
        self,
        users: Sequence[UserCandidate],
        config: RuleConfiguration,
        normalizer: Optional[Normalizer] = None
    ):
        """
        Index the user catalog.

        Args:
            users: User catalog (read-only for the batch)
            config: Rule bundle (instructor fuzzy threshold)
            normalizer: Shared normalizer (built from config if omitted)
        """
        self.logger = get_process_logger('matcher.instructor_resolver')
        self.max_distance = config.thresholds.instructor_fuzzy_max_distance
        self.normalizer = normalizer or Normalizer(config.irrelevant_words)
        self.users = list(users)

        self._names: list[tuple[list[str], list[str]]] = []
        self.by_full_name: dict[str, UserCandidate] = {}
        self.by_display_name: dict[str, UserCandidate] = {}

        # Fuzzy corpus: one entry per non-empty name, mapped back to its user
        self._choices: list[str] = []
        self._owners: list[UserCandidate] = []

        for user in self.users:
            full = self.normalizer.normalize(user.full_name)
            display = self.normalizer.normalize(user.display_name)
            self._names.append((full.split(), display.split()))

            for key, index in ((full, self.by_full_name), (display, self.by_display_name)):
                if key:
                    index.setdefault(key, user)
                    self._choices.append(key)
                    self._owners.append(user)

    def __len__(self) -> int:
        return len(self.users)

    def resolve(self, instructor_text: str) -> Optional[UserCandidate]:
        """
        Resolve an instructor name.

        Args:
            instructor_text: Instructor name as typed

        Returns:
            Matching user, or None when unresolved
        """
        match = self.match(instructor_text)
        return match.user if match else None

    def match(self, instructor_text: str) -> Optional[InstructorMatch]:
        """Resolve an instructor name, reporting the stage that matched."""
        query = self.normalizer.normalize(instructor_text)
        if not query or not self.users:
            return None

        if query in self.by_full_name:
            return InstructorMatch(self.by_full_name[query], 'full_name')
        if query in self.by_display_name:
            return InstructorMatch(self.by_display_name[query], 'display_name')

        query_tokens = query.split()

        user = self._token_subset(set(query_tokens))
        if user is not None:
            return InstructorMatch(user, 'token_subset')

        user = self._fuzzy(query, query_tokens)
        if user is not None:
            return InstructorMatch(user, 'fuzzy')

        self.logger.debug(f"Instructor not resolved: '{instructor_text}'")
        return None

    def _token_subset(self, query_tokens: set[str]) -> Optional[UserCandidate]:
        """
        Users whose full-name or display-name tokens all appear in the query.

        Picks the qualifier with the most tokens; ties keep catalog order.
        """
        best: Optional[UserCandidate] = None
        best_size = 0

        for user, (full_tokens, display_tokens) in zip(self.users, self._names):
            qualifies = any(
                tokens and query_tokens.issuperset(tokens)
                for tokens in (full_tokens, display_tokens)
            )
            if not qualifies:
                continue
            size = max(len(full_tokens), len(display_tokens))
            if size > best_size:
                best, best_size = user, size

        return best

    def _fuzzy(self, query: str, query_tokens: list[str]) -> Optional[UserCandidate]:
        """
        Closest name within max_distance, guarded against shared surnames.

        At least min(len(query_tokens), 2) query tokens must appear in
        the user's names.
        """
        if not self._choices:
            return None

        result = process.extractOne(
            query,
            self._choices,
            scorer=fuzz.token_sort_ratio,
            score_cutoff=(1 - self.max_distance) * 100,
        )
        if result is None:
            return None

        _choice, score, index = result
        user = self._owners[index]
        full_tokens, display_tokens = self._names[self.users.index(user)]
        user_tokens = set(full_tokens) | set(display_tokens)

        overlap = sum(1 for t in query_tokens if t in user_tokens)
        required = min(len(query_tokens), self.MAX_OVERLAP_REQUIRED)

        if overlap < required:
            self.logger.debug(
                f"Fuzzy instructor '{query}' -> '{_choice}' ({score:.0f}) rejected: "
                f"{overlap} shared tokens, {required} required"
            )
            return None
        return user


__all__ = ['InstructorResolver', 'InstructorMatch']
