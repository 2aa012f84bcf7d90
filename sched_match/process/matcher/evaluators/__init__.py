# Path: sched_match/process/matcher/evaluators/__init__.py
"""
Penalty Rules

Each rule inspects one (query, candidate) pair and returns at most
one penalty. default_rules() gives the fixed evaluation order, which
is also the order of lines in a detailed reason.

Rules:
- ClassifierConflictRule: Mutually-exclusive classifier groups
- LevelConflictRule: Disjoint level indicators
- ProgramVsPersonRule: Program query against a person topic
- StructuralTokenMissingRule: Query classifier absent from topic
- WeakMatchRule: Distinctive-token coverage
- GroupNumberConflictRule: Disjoint group numbers
- NumericConflictRule: Disjoint digit runs
- OrphanNumberRule: Unrequested group number with numbered siblings
- OrphanLevelRule: Unrequested level with leveled siblings
- CompanyConflictRule: Different client company in parentheses
"""

from .base_evaluator import PenaltyRule, RuleOutcome, ScoringContext
from .classifier_rules import (
    ClassifierConflictRule,
    ProgramVsPersonRule,
    StructuralTokenMissingRule,
)
from .level_rules import LevelConflictRule, OrphanLevelRule
from .number_rules import GroupNumberConflictRule, NumericConflictRule, OrphanNumberRule
from .coverage_rule import WeakMatchRule, TopicCoverage
from .company_rule import CompanyConflictRule


def default_rules() -> list[PenaltyRule]:
    """Fresh instances of every rule, in evaluation order."""
    return [
        ClassifierConflictRule(),
        LevelConflictRule(),
        ProgramVsPersonRule(),
        StructuralTokenMissingRule(),
        WeakMatchRule(),
        GroupNumberConflictRule(),
        NumericConflictRule(),
        OrphanNumberRule(),
        OrphanLevelRule(),
        CompanyConflictRule(),
    ]


__all__ = [
    'PenaltyRule',
    'RuleOutcome',
    'ScoringContext',
    'ClassifierConflictRule',
    'LevelConflictRule',
    'ProgramVsPersonRule',
    'StructuralTokenMissingRule',
    'WeakMatchRule',
    'TopicCoverage',
    'GroupNumberConflictRule',
    'NumericConflictRule',
    'OrphanNumberRule',
    'OrphanLevelRule',
    'CompanyConflictRule',
    'default_rules',
]
