# Path: sched_match/process/matcher/evaluators/classifier_rules.py
"""
Classifier Rules

Rules driven by the classifier vocabularies of the rule bundle:
- ClassifierConflictRule: query and topic name different exclusive groups
- ProgramVsPersonRule: query names a program, topic names a person
- StructuralTokenMissingRule: query classifier absent from the topic
"""

from typing import Optional

from ..models.match_result import AppliedPenalty, PenaltyName
from .base_evaluator import PenaltyRule, ScoringContext


class ClassifierConflictRule(PenaltyRule):
    """
    Mutually-exclusive classifier conflict (hard reject).

    Fires when both sides carry classifier tokens and no synonym group
    is shared: 'TRIO ACME' vs 'DUO ACME'. Synonyms of one group never
    conflict: 'DUO ACME' vs 'BVD ACME'.
    """

    @property
    def rule_name(self) -> str:
        return 'classifier_conflict'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        tokens = context.config.tokens
        query_groups = tokens.groups_in(context.program_tokens)
        topic_groups = tokens.groups_in(context.topic_tokens)

        if not query_groups or not topic_groups:
            return None
        if query_groups & topic_groups:
            return None

        return self._penalty(
            PenaltyName.CRITICAL_TOKEN_MISMATCH,
            context.config.penalties.critical_token_mismatch,
            f"{'/'.join(sorted(query_groups))} vs {'/'.join(sorted(topic_groups))}",
        )


class ProgramVsPersonRule(PenaltyRule):
    """
    Query asks for a program but the topic is a person's name.

    Suppressed when the topic also carries a program marker, and when
    the query carries a person-class token (one-to-one classes are
    titled with the student's name).
    """

    @property
    def rule_name(self) -> str:
        return 'program_vs_person'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        tokens = context.config.tokens

        if not context.program_tokens & tokens.program_types:
            return None
        if context.program_tokens & tokens.person_class:
            return None
        if not context.config.person_detection.is_person(context.raw_topic):
            return None
        if any(tokens.is_program_marker(t) for t in context.topic_tokens):
            return None

        return self._penalty(
            PenaltyName.PROGRAM_VS_PERSON,
            context.config.penalties.program_vs_person,
            "Query names a program, topic names a person",
        )


class StructuralTokenMissingRule(PenaltyRule):
    """Query carries a classifier whose group is absent from the topic."""

    @property
    def rule_name(self) -> str:
        return 'structural_token_missing'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        if context.options.ignore_level_mismatch:
            return None

        for group in context.config.tokens.synonym_groups:
            query_hits = [t for t in group.tokens if t in context.program_tokens]
            if not query_hits:
                continue
            if any(t in context.topic_tokens for t in group.tokens):
                continue
            return self._penalty(
                PenaltyName.STRUCTURAL_TOKEN_MISSING,
                context.config.penalties.structural_token_missing,
                f'"{query_hits[0].upper()}" is not in the topic',
                group=group.id,
            )

        return None


__all__ = ['ClassifierConflictRule', 'ProgramVsPersonRule', 'StructuralTokenMissingRule']
