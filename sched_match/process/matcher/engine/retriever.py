# Path: sched_match/process/matcher/engine/retriever.py
"""
Candidate Retriever

Finds candidate meetings for a query program in three stages:
1. Exact lookup on the normalized topic
2. Fuzzy search over normalized topics (rapidfuzz)
3. Token-overlap fallback

The first stage that yields anything wins.
"""

from typing import Optional, Sequence

from rapidfuzz import fuzz, process

from sched_match.core.logger import get_process_logger

from ..models.candidates import MeetingCandidate
from ..models.rule_config import RuleConfiguration
from ..text.normalizer import Normalizer
from ..text.tokens import is_numeric


class CandidateRetriever:
    """
    Indexes one meeting catalog for the duration of a batch.

    Example:
        retriever = CandidateRetriever(meetings, config)
        candidates = retriever.find_candidates('CH ACME L2')
        print(retriever.last_strategy)  # 'exact', 'fuzzy', 'token_overlap' or 'none'
    """

    def __init__(
        self,
        meetings: Sequence[MeetingCandidate],
        config: RuleConfiguration,
        normalizer: Optional[Normalizer] = None
    ):
        """
        Build the exact index and the fuzzy search corpus.

        Args:
            meetings: Meeting catalog (read-only for the batch)
            config: Rule bundle (thresholds)
            normalizer: Shared normalizer (built from config if omitted)
        """
        self.logger = get_process_logger('matcher.retriever')
        self.thresholds = config.thresholds
        self.normalizer = normalizer or Normalizer(config.irrelevant_words)

        self.meetings = list(meetings)
        self.normalized_topics = [self.normalizer.normalize(m.topic) for m in self.meetings]

        # Lists: several meetings may normalize to one key
        self.exact_index: dict[str, list[MeetingCandidate]] = {}
        for meeting, key in zip(self.meetings, self.normalized_topics):
            if key:
                self.exact_index.setdefault(key, []).append(meeting)

        self.last_strategy = 'none'

        self.logger.info(
            f"Indexed {len(self.meetings)} meetings "
            f"({len(self.exact_index)} distinct normalized topics)"
        )

    def find_candidates(self, program_text: str) -> list[MeetingCandidate]:
        """
        Retrieve candidate meetings for a program.

        Args:
            program_text: Query program text as typed

        Returns:
            Candidate meetings (possibly empty), in retrieval order
        """
        normalized = self.normalizer.normalize(program_text)

        for strategy, search in (
            ('exact', self.exact_matches),
            ('fuzzy', self.fuzzy_matches),
            ('token_overlap', self.token_overlap_matches),
        ):
            candidates = search(normalized)
            if candidates:
                self.last_strategy = strategy
                self.logger.debug(
                    f"'{program_text}' -> {len(candidates)} candidates via {strategy}"
                )
                return candidates

        self.last_strategy = 'none'
        self.logger.debug(f"'{program_text}' -> no candidates")
        return []

    def exact_matches(self, normalized: str) -> list[MeetingCandidate]:
        """Meetings whose normalized topic equals the normalized query."""
        if not normalized:
            return []
        return list(self.exact_index.get(normalized, []))

    def fuzzy_matches(self, normalized: str) -> list[MeetingCandidate]:
        """
        Meetings within fuzzy_max_distance of the query.

        Distance is 1 - token_set_ratio / 100, so 0 is a perfect match.
        Results are ranked by distance; ties keep catalog order.
        """
        if not normalized or not self.meetings:
            return []

        max_distance = self.thresholds.fuzzy_max_distance
        results = process.extract(
            normalized,
            self.normalized_topics,
            scorer=fuzz.token_set_ratio,
            limit=None,
        )

        ranked = sorted(
            (
                (round(1 - score / 100, 6), index)
                for _choice, score, index in results
                if self.normalized_topics[index]
            ),
        )
        return [self.meetings[index] for distance, index in ranked if distance <= max_distance]

    def token_overlap_matches(self, normalized: str) -> list[MeetingCandidate]:
        """
        Meetings sharing enough tokens with the query.

        Accepted when the shared tokens include a meaningful one
        (non-numeric, length > 2), number at least min_matching_tokens,
        and cover at least token_overlap_min_ratio of the query tokens.
        """
        query_tokens = {t for t in normalized.split() if len(t) >= 2}
        if not query_tokens:
            return []

        accepted = []
        for meeting, topic in zip(self.meetings, self.normalized_topics):
            shared = query_tokens.intersection(topic.split())
            if not any(len(t) > 2 and not is_numeric(t) for t in shared):
                continue
            if len(shared) < self.thresholds.min_matching_tokens:
                continue
            if len(shared) / len(query_tokens) < self.thresholds.token_overlap_min_ratio:
                continue
            accepted.append(meeting)

        return accepted


__all__ = ['CandidateRetriever']
