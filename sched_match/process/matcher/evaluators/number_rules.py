# Path: sched_match/process/matcher/evaluators/number_rules.py
"""
Number Rules

Rules comparing group numbers and other digit runs.
Group numbers are the digit runs left once level indicators are removed.
"""

from typing import Optional

from ..models.match_result import AppliedPenalty, PenaltyName
from ..text.tokens import extract_non_level_numbers, extract_numbers, strip_digits
from .base_evaluator import PenaltyRule, ScoringContext


class GroupNumberConflictRule(PenaltyRule):
    """Both sides carry group numbers and none is shared: 'CH 1' vs 'CH 3'."""

    @property
    def rule_name(self) -> str:
        return 'group_number_conflict'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        # Relaxed mode looks for reassigned groups
        if context.options.ignore_level_mismatch:
            return None

        query_numbers = extract_non_level_numbers(context.raw_program)
        topic_numbers = extract_non_level_numbers(context.raw_topic)

        if not query_numbers or not topic_numbers:
            return None
        if set(query_numbers) & set(topic_numbers):
            return None

        return self._penalty(
            PenaltyName.GROUP_NUMBER_CONFLICT,
            context.config.penalties.group_number_conflict,
            f"Group {'/'.join(query_numbers)} vs {'/'.join(topic_numbers)}",
        )


class NumericConflictRule(PenaltyRule):
    """All digit runs, levels included, are disjoint."""

    @property
    def rule_name(self) -> str:
        return 'numeric_conflict'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        if context.options.ignore_level_mismatch:
            return None

        query_numbers = extract_numbers(context.raw_program)
        topic_numbers = extract_numbers(context.raw_topic)

        if not query_numbers or not topic_numbers:
            return None
        if set(query_numbers) & set(topic_numbers):
            return None

        return self._penalty(
            PenaltyName.NUMERIC_CONFLICT,
            context.config.penalties.numeric_conflict,
            f"Numbers {', '.join(query_numbers)} vs {', '.join(topic_numbers)}",
        )


class OrphanNumberRule(PenaltyRule):
    """
    Topic has a group number the query never asked for, and another
    candidate has the same topic once digits are stripped.
    """

    @property
    def rule_name(self) -> str:
        return 'orphan_number'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        query_numbers = set(extract_non_level_numbers(context.raw_program))
        orphans = [
            n for n in extract_non_level_numbers(context.raw_topic)
            if n not in query_numbers
        ]
        if not orphans:
            return None

        normalize = context.normalizer.normalize
        base = normalize(strip_digits(context.raw_topic))

        for sibling in context.siblings():
            if normalize(strip_digits(sibling.topic)) == base:
                return self._penalty(
                    PenaltyName.ORPHAN_NUMBER_WITH_SIBLINGS,
                    context.config.penalties.orphan_number,
                    f'Number "{orphans[0]}" not requested, other variants exist',
                    sibling=sibling.id,
                )

        return None


__all__ = ['GroupNumberConflictRule', 'NumericConflictRule', 'OrphanNumberRule']
