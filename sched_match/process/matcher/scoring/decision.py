# Path: sched_match/process/matcher/scoring/decision.py
"""
Decision Engine

Classifies one query's scored candidates as assigned, ambiguous or
not_found, and explains the outcome.

Order of checks:
1. No valid result: hard reject -> not_found, else ambiguous
2. Best two valid results too close -> ambiguous
3. Best result under-specified (orphan penalty) below high confidence -> ambiguous
4. Confidence tier: low -> ambiguous, otherwise assigned
"""

from typing import Optional, Sequence

from sched_match.core.logger import get_process_logger

from ..models.match_result import (
    AppliedPenalty,
    Confidence,
    Decision,
    MatchDecision,
    ORPHAN_PENALTIES,
    PenaltyName,
    ScoringResult,
)
from ..models.rule_config import RuleConfiguration
from .confidence import ConfidenceCalculator


HARD_REJECT_PENALTIES = frozenset({
    PenaltyName.CRITICAL_TOKEN_MISMATCH,
    PenaltyName.COMPANY_CONFLICT,
})

SHORT_REASONS = {
    PenaltyName.LEVEL_CONFLICT: 'Level mismatch',
    PenaltyName.CRITICAL_TOKEN_MISMATCH: 'Program type mismatch',
    PenaltyName.COMPANY_CONFLICT: 'Company mismatch',
    PenaltyName.GROUP_NUMBER_CONFLICT: 'Group number mismatch',
    PenaltyName.NUMERIC_CONFLICT: 'Number mismatch',
    PenaltyName.PROGRAM_VS_PERSON: 'Program vs person mismatch',
    PenaltyName.STRUCTURAL_TOKEN_MISSING: 'Missing program type',
    PenaltyName.WEAK_MATCH: 'Weak match',
    PenaltyName.PARTIAL_MATCH_MISSING_TOKENS: 'Missing tokens',
    PenaltyName.ORPHAN_NUMBER_WITH_SIBLINGS: 'Unspecified group number',
    PenaltyName.ORPHAN_LEVEL_WITH_SIBLINGS: 'Unspecified level',
    PenaltyName.LEVEL_MISMATCH_IGNORED: 'Level mismatch (Ignored)',
}


def short_reason(penalty: Optional[AppliedPenalty]) -> str:
    """One-label explanation of a penalty."""
    if penalty is None:
        return 'No match found'
    return SHORT_REASONS.get(penalty.name, 'Match conflict')


def detailed_reason(penalties: Sequence[AppliedPenalty]) -> Optional[str]:
    """One 'NAME: reason' line per penalty, in rule order."""
    if not penalties:
        return None
    return '\n'.join(
        f"{p.name.value.upper()}: {p.reason or 'Unknown conflict'}" for p in penalties
    )


def is_hard_reject(result: ScoringResult) -> bool:
    """
    Whether a result carries a penalty that rules out any match.

    Hard rejects: a hard-reject penalty, or a weak match with zero
    topic coverage.
    """
    if result.has_penalty(*HARD_REJECT_PENALTIES):
        return True
    weak = result.penalty(PenaltyName.WEAK_MATCH)
    return weak is not None and weak.metadata.get('coverage') == 0


class DecisionEngine:
    """
    Turns sorted scoring results into a MatchDecision.

    Example:
        engine = DecisionEngine(config)
        decision = engine.decide(scoring_engine.score_all(query, candidates))
        print(decision.decision, decision.confidence, decision.reason)
    """

    def __init__(self, config: RuleConfiguration):
        """
        Initialize decision engine.

        Args:
            config: Rule bundle (thresholds)
        """
        self.logger = get_process_logger('matcher.decision')
        self.thresholds = config.thresholds
        self.confidence_calculator = ConfidenceCalculator(config.thresholds)

    def decide(self, results: Sequence[ScoringResult]) -> MatchDecision:
        """
        Classify scored candidates.

        Args:
            results: Scoring results for one query

        Returns:
            MatchDecision
        """
        # Stable: ties keep retrieval order
        ranked = sorted(results, key=lambda r: r.final_score, reverse=True)
        limit = self.thresholds.ambiguous_candidates_limit

        if not ranked:
            return MatchDecision(
                decision=Decision.NOT_FOUND,
                confidence=Confidence.NONE,
                reason='No match found',
                detailed_reason='No meetings found for this schedule.',
            )

        valid = [
            r for r in ranked
            if not r.is_disqualified and r.final_score >= self.thresholds.minimum_score
        ]

        if not valid:
            return self._decide_rejected(ranked, limit)

        best = valid[0]

        if len(valid) > 1:
            gap = best.final_score - valid[1].final_score
            if gap < self.thresholds.ambiguity_score_diff:
                self.logger.debug(
                    f"Ambiguous: top scores {best.final_score} and "
                    f"{valid[1].final_score} within {self.thresholds.ambiguity_score_diff}"
                )
                return MatchDecision(
                    decision=Decision.AMBIGUOUS,
                    confidence=Confidence.LOW,
                    reason='Multiple matches found',
                    detailed_reason=(
                        'Multiple matches found. Please review the list and '
                        'manually select the best match.'
                    ),
                    best_match=best,
                    ambiguous_candidates=[r.candidate for r in valid],
                    all_results=ranked,
                )

        orphans = [p for p in best.penalties if p.name in ORPHAN_PENALTIES]
        if orphans and best.final_score < self.thresholds.high_confidence_score:
            return MatchDecision(
                decision=Decision.AMBIGUOUS,
                confidence=Confidence.LOW,
                reason=short_reason(orphans[0]),
                detailed_reason=detailed_reason(best.penalties),
                best_match=best,
                ambiguous_candidates=[r.candidate for r in valid[:limit]],
                all_results=ranked,
            )

        confidence = self.confidence_calculator.calculate(best.final_score)

        if confidence == Confidence.LOW:
            return MatchDecision(
                decision=Decision.AMBIGUOUS,
                confidence=Confidence.LOW,
                reason='Low confidence match',
                detailed_reason=(
                    detailed_reason(best.penalties)
                    or f"Low confidence score ({best.final_score}) - requires verification"
                ),
                best_match=best,
                ambiguous_candidates=[r.candidate for r in valid[:limit]],
                all_results=ranked,
            )

        return MatchDecision(
            decision=Decision.ASSIGNED,
            confidence=confidence,
            reason=(
                '-' if confidence == Confidence.HIGH
                else f"Medium confidence (score: {best.final_score})"
            ),
            detailed_reason=detailed_reason(best.penalties),
            best_match=best,
            all_results=ranked,
        )

    def _decide_rejected(self, ranked: list[ScoringResult], limit: int) -> MatchDecision:
        """Decision when every result is disqualified or under the minimum."""
        best = ranked[0]
        main_penalty = best.penalties[0] if best.penalties else None
        reason = short_reason(main_penalty) if main_penalty else 'No valid matches'

        if is_hard_reject(best):
            return MatchDecision(
                decision=Decision.NOT_FOUND,
                confidence=Confidence.NONE,
                reason=reason,
                detailed_reason=(
                    detailed_reason(best.penalties)
                    or 'Match rejected due to critical conflict.'
                ),
                all_results=ranked,
            )

        return MatchDecision(
            decision=Decision.AMBIGUOUS,
            confidence=Confidence.LOW,
            reason=reason,
            detailed_reason=(
                detailed_reason(best.penalties)
                or 'Candidates found but rejected. Review and select manually if appropriate.'
            ),
            best_match=best,
            ambiguous_candidates=[r.candidate for r in ranked[:limit]],
            all_results=ranked,
        )


__all__ = [
    'DecisionEngine',
    'HARD_REJECT_PENALTIES',
    'SHORT_REASONS',
    'short_reason',
    'detailed_reason',
    'is_hard_reject',
]
