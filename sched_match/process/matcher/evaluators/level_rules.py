# Path: sched_match/process/matcher/evaluators/level_rules.py
"""
Level Rules

Rules comparing level indicators (L3, N4, Level 5, Nivel 2).
"""

from typing import Optional

from ..models.match_result import AppliedPenalty, PenaltyName
from ..text.tokens import extract_levels, strip_levels
from .base_evaluator import PenaltyRule, ScoringContext


class LevelConflictRule(PenaltyRule):
    """
    Both sides name a level and no level is shared.

    With ignore_level_mismatch the conflict is still recorded, with
    the milder ignored variant, so it stays visible in the breakdown.
    """

    @property
    def rule_name(self) -> str:
        return 'level_conflict'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        query_levels = extract_levels(context.raw_program)
        topic_levels = extract_levels(context.raw_topic)

        if not query_levels or not topic_levels:
            return None
        if set(query_levels) & set(topic_levels):
            return None

        reason = f"L{'/'.join(query_levels)} vs L{'/'.join(topic_levels)}"
        penalties = context.config.penalties

        if context.options.ignore_level_mismatch:
            return self._penalty(
                PenaltyName.LEVEL_MISMATCH_IGNORED,
                penalties.level_mismatch_ignored,
                f"{reason} (ignored)",
            )
        return self._penalty(PenaltyName.LEVEL_CONFLICT, penalties.level_conflict, reason)


class OrphanLevelRule(PenaltyRule):
    """
    Topic has a level the query never asked for, and another candidate
    with the same level-stripped topic carries a different level.
    """

    @property
    def rule_name(self) -> str:
        return 'orphan_level'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        if extract_levels(context.raw_program):
            return None

        topic_levels = extract_levels(context.raw_topic)
        if not topic_levels:
            return None

        normalize = context.normalizer.normalize
        base = normalize(strip_levels(context.raw_topic))
        own = set(topic_levels)

        for sibling in context.siblings():
            sibling_levels = set(extract_levels(sibling.topic))
            if not sibling_levels - own:
                continue
            if normalize(strip_levels(sibling.topic)) == base:
                return self._penalty(
                    PenaltyName.ORPHAN_LEVEL_WITH_SIBLINGS,
                    context.config.penalties.orphan_level,
                    f'Level "L{topic_levels[0]}" not requested, other levels exist',
                    sibling=sibling.id,
                )

        return None


__all__ = ['LevelConflictRule', 'OrphanLevelRule']
