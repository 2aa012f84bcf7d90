# Path: sched_match/process/matcher/scoring/aggregator.py
"""
Scoring Engine

Applies every penalty rule to one candidate and sums the penalties
against the base score.
"""

from typing import Optional, Sequence

from sched_match.core.logger import get_process_logger

from ..evaluators import PenaltyRule, ScoringContext, default_rules
from ..models.candidates import MatchOptions, MeetingCandidate
from ..models.match_result import ScoringResult
from ..models.rule_config import RuleConfiguration
from ..text.edit_distance import EditDistanceCache
from ..text.normalizer import Normalizer


class ScoringEngine:
    """
    Scores candidates with a fixed, ordered set of penalty rules.

    Rules never abort scoring: a rule that raises contributes zero
    points and its error is recorded on the result.

    Example:
        engine = ScoringEngine(config)
        result = engine.score('CH ACME', candidate, candidates)
        print(result.final_score, [p.name for p in result.penalties])
    """

    def __init__(
        self,
        config: RuleConfiguration,
        normalizer: Optional[Normalizer] = None,
        distances: Optional[EditDistanceCache] = None,
        rules: Optional[Sequence[PenaltyRule]] = None
    ):
        """
        Initialize scoring engine.

        Args:
            config: Rule bundle
            normalizer: Shared normalizer (built from config if omitted)
            distances: Edit-distance cache (a fresh one if omitted)
            rules: Rules in evaluation order (default_rules() if omitted)
        """
        self.logger = get_process_logger('matcher.scoring')
        self.config = config
        self.normalizer = normalizer or Normalizer(config.irrelevant_words)
        self.distances = distances or EditDistanceCache()
        self.rules = list(rules) if rules is not None else default_rules()

    def add_rule(self, rule: PenaltyRule) -> None:
        """Append a rule after the existing ones."""
        self.rules.append(rule)

    def score(
        self,
        raw_program: str,
        candidate: MeetingCandidate,
        all_candidates: Sequence[MeetingCandidate],
        options: Optional[MatchOptions] = None
    ) -> ScoringResult:
        """
        Score one candidate.

        Args:
            raw_program: Query program text as typed
            candidate: Meeting to score
            all_candidates: Full retrieved set (for sibling rules)
            options: Query relaxations

        Returns:
            ScoringResult with penalties in rule order
        """
        context = ScoringContext(
            raw_program=raw_program,
            candidate=candidate,
            all_candidates=all_candidates,
            options=options or MatchOptions(),
            config=self.config,
            normalizer=self.normalizer,
            distances=self.distances,
        )

        result = ScoringResult(
            candidate=candidate,
            base_score=self.config.base_score,
            raw_score=self.config.base_score,
        )

        for rule in self.rules:
            outcome = rule.apply(context)
            if outcome.failed:
                self.logger.warning(
                    f"Rule {outcome.rule_name} skipped for meeting {candidate.id}: "
                    f"{outcome.error.original!r}"
                )
                result.rule_errors.append(outcome.error)
            elif outcome.fired:
                result.penalties.append(outcome.penalty)
                result.raw_score += outcome.penalty.points

        self.logger.debug(
            f"'{candidate.topic}' scored {result.final_score} "
            f"(raw {result.raw_score}, {len(result.penalties)} penalties)"
        )
        return result

    def score_all(
        self,
        raw_program: str,
        candidates: Sequence[MeetingCandidate],
        options: Optional[MatchOptions] = None
    ) -> list[ScoringResult]:
        """
        Score every candidate and sort by final score, descending.

        The sort is stable: ties keep retrieval order.
        """
        results = [self.score(raw_program, c, candidates, options) for c in candidates]
        results.sort(key=lambda r: r.final_score, reverse=True)
        return results


__all__ = ['ScoringEngine']
