# Path: sched_match/process/matcher/scoring/__init__.py
"""
Scoring Module

Components for scoring candidates and deciding outcomes:
- ScoringEngine: Applies penalty rules against the base score
- ConfidenceCalculator: Determines confidence tier from score
- DecisionEngine: Classifies a query's results (assigned/ambiguous/not_found)
"""

from .aggregator import ScoringEngine
from .confidence import ConfidenceCalculator
from .decision import (
    DecisionEngine,
    HARD_REJECT_PENALTIES,
    short_reason,
    detailed_reason,
    is_hard_reject,
)

__all__ = [
    'ScoringEngine',
    'ConfidenceCalculator',
    'DecisionEngine',
    'HARD_REJECT_PENALTIES',
    'short_reason',
    'detailed_reason',
    'is_hard_reject',
]
