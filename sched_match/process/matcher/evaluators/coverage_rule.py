# Path: sched_match/process/matcher/evaluators/coverage_rule.py
"""
Coverage Rule

Token-coverage comparison between query and topic, tolerant to
typos through edit distance. Produces either the weak-match hard
reject (no distinctive token in common) or a per-token penalty for
query tokens the topic does not cover.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..models.match_result import AppliedPenalty, PenaltyName
from ..text.edit_distance import EditDistanceCache
from ..text.tokens import distinctive_tokens, is_numeric
from .base_evaluator import PenaltyRule, ScoringContext


SHORT_TOKEN_LENGTH = 5


@dataclass(frozen=True)
class TopicCoverage:
    """
    How much of the topic's distinctive vocabulary the query covers.

    Attributes:
        matched: Topic tokens found in the query (exactly or fuzzily)
        total: Distinctive topic tokens
    """
    matched: int
    total: int

    @property
    def is_fully_covered(self) -> bool:
        return self.matched >= self.total

    @property
    def is_specific(self) -> bool:
        return self.total >= 1

    @property
    def ratio(self) -> float:
        return self.matched / self.total if self.total else 0.0


def allowed_distance(token: str) -> int:
    """Typo tolerance: 1 edit for short tokens, 2 otherwise."""
    return 1 if len(token) < SHORT_TOKEN_LENGTH else 2


def has_fuzzy_match(token: str, references: Sequence[str], distances: EditDistanceCache) -> bool:
    """Whether token equals, or is within typo tolerance of, any reference."""
    if token in references:
        return True
    limit = allowed_distance(token)
    return any(
        abs(len(token) - len(ref)) <= limit and distances.distance(token, ref) <= limit
        for ref in references
    )


class WeakMatchRule(PenaltyRule):
    """
    Penalizes query tokens the topic does not cover.

    - No distinctive query token matches: weak-match hard reject
    - Topic fully covered and specific (no formal title), or both
      sides are person names and the topic is covered: missing
      tokens are benign extra info, small per-token penalty
    - Otherwise: per-token penalty, larger for words than numbers

    With ignore_level_mismatch and more than one distinctive query
    token, coverage below relaxed_min_coverage is a weak match, extra
    info is tolerated above it, and noise tokens cost less than names.
    """

    @property
    def rule_name(self) -> str:
        return 'weak_match'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        config = context.config
        penalties = config.penalties
        structural = config.tokens.structural

        query_distinctive = distinctive_tokens(context.normalized_program, structural)
        if not query_distinctive:
            return None

        query_words = [
            t for t in context.normalized_program.split()
            if len(t) > 2 and not is_numeric(t)
        ]
        topic_distinctive = distinctive_tokens(context.normalized_topic, structural)
        coverage = self._coverage(query_words, topic_distinctive, context.distances)

        person = config.person_detection
        has_title = person.has_title(context.raw_program)
        both_people = person.is_person(context.raw_program) and person.is_person(context.raw_topic)

        relaxed = context.options.ignore_level_mismatch and len(query_distinctive) > 1
        min_coverage = config.thresholds.relaxed_min_coverage

        if relaxed and coverage.ratio < min_coverage:
            return self._penalty(
                PenaltyName.WEAK_MATCH,
                penalties.weak_match,
                f"Insufficient coverage ({round(coverage.ratio * 100)}% < "
                f"{round(min_coverage * 100)}%)",
                coverage=coverage.ratio,
                min_coverage=min_coverage,
            )

        missing = [
            t for t in query_distinctive
            if not has_fuzzy_match(t, topic_distinctive, context.distances)
        ]
        if not missing:
            return None

        if len(missing) == len(query_distinctive):
            return self._penalty(
                PenaltyName.WEAK_MATCH,
                penalties.weak_match,
                f"No distinctive token matches: {', '.join(missing)}",
                coverage=0.0,
            )

        allow_extra_info = (
            (coverage.is_fully_covered and coverage.is_specific and not has_title)
            or (both_people and coverage.is_fully_covered)
            or (relaxed and coverage.ratio >= min_coverage)
        )

        if allow_extra_info:
            return self._extra_info_penalty(context, missing, relaxed)

        if has_title:
            mismatch = 'title detected'
        elif not coverage.is_fully_covered:
            mismatch = 'topic not covered'
        else:
            mismatch = 'topic not specific'

        return self._penalty(
            PenaltyName.PARTIAL_MATCH_MISSING_TOKENS,
            penalties.missing_token * len(missing),
            f"Missing tokens ({mismatch}): {', '.join(missing)}",
            coverage=coverage.ratio,
            missing=missing,
        )

    def _extra_info_penalty(
        self,
        context: ScoringContext,
        missing: list[str],
        relaxed: bool
    ) -> AppliedPenalty:
        penalties = context.config.penalties
        noise = context.config.tokens.noise

        points = 0
        details = []
        for token in missing:
            if not relaxed:
                cost = penalties.missing_token_extra_info
            elif token in noise or context.normalizer.is_irrelevant(token):
                cost = penalties.missing_token_relaxed_noise
            else:
                cost = penalties.missing_token_relaxed
            points += cost
            details.append(f"{token}({cost})")

        return self._penalty(
            PenaltyName.PARTIAL_MATCH_MISSING_TOKENS,
            points,
            f"Extra tokens: {', '.join(details)}",
            extra_info=True,
            missing=missing,
        )

    @staticmethod
    def _coverage(
        query_words: list[str],
        topic_tokens: list[str],
        distances: EditDistanceCache
    ) -> TopicCoverage:
        matched = sum(
            1 for token in topic_tokens
            if has_fuzzy_match(token, query_words, distances)
        )
        return TopicCoverage(matched=matched, total=len(topic_tokens))


__all__ = ['WeakMatchRule', 'TopicCoverage', 'allowed_distance', 'has_fuzzy_match']
