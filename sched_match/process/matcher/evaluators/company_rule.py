# Path: sched_match/process/matcher/evaluators/company_rule.py
"""
Company Rule

Detects a client company named in the query that differs from the
company named in parentheses in the topic:
'SCOTIABANK TRIO L3' vs 'TRIO L3 (HAYDUK)'.
"""

from typing import Optional

from ..models.match_result import AppliedPenalty, PenaltyName
from ..text.tokens import PARENTHESIZED, is_numeric, parenthesized, raw_tokens
from .base_evaluator import PenaltyRule, ScoringContext


COMPANY_DISTANCE = 2
NAME_DISTANCE = 1
GROUP_WORDS = frozenset({'group', 'grupo'})


class CompanyConflictRule(PenaltyRule):
    """
    Company conflict (hard reject).

    The query company is the first query token that is not a
    classifier, irrelevant word or number. Topic companies are the
    equivalent tokens inside parentheses. A query company that only
    appears in the topic's name part (outside parentheses) is a
    person's surname, not a company.
    """

    @property
    def rule_name(self) -> str:
        return 'company_conflict'

    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        query_company = next(
            (t for t in raw_tokens(context.raw_program) if self._is_company_token(t, context)),
            None
        )
        if query_company is None:
            return None

        topic_companies = [
            t
            for content in parenthesized(context.raw_topic)
            for t in raw_tokens(content)
            if self._is_company_token(t, context)
        ]
        if not topic_companies:
            return None

        distances = context.distances
        if any(
            t == query_company or distances.distance(t, query_company) <= COMPANY_DISTANCE
            for t in topic_companies
        ):
            return None

        name_tokens = raw_tokens(PARENTHESIZED.sub(' ', context.raw_topic))
        if any(
            t == query_company
            or (len(t) > 3 and distances.distance(t, query_company) <= NAME_DISTANCE)
            for t in name_tokens
        ):
            return None

        return self._penalty(
            PenaltyName.COMPANY_CONFLICT,
            context.config.penalties.company_conflict,
            f"Query company '{query_company.upper()}' vs topic "
            f"'{', '.join(topic_companies).upper()}'",
        )

    @staticmethod
    def _is_company_token(token: str, context: ScoringContext) -> bool:
        if len(token) <= 2 or is_numeric(token):
            return False
        tokens = context.config.tokens
        if tokens.is_program_marker(token) or token in GROUP_WORDS:
            return False
        return not context.normalizer.is_irrelevant(token)


__all__ = ['CompanyConflictRule']
