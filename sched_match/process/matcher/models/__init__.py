# Path: sched_match/process/matcher/models/__init__.py
"""
Matcher Models

Data models for the matching engine:
- RuleConfiguration: Validated rule bundle (pydantic)
- MeetingCandidate / UserCandidate / ScheduleQuery: Inputs
- ScoringResult / MatchDecision / MatchResult: Outputs
"""

from .rule_config import (
    PenaltyWeights,
    Thresholds,
    SynonymGroup,
    TokenSets,
    PersonDetection,
    IrrelevantWords,
    RuleConfiguration,
)
from .candidates import (
    MeetingCandidate,
    UserCandidate,
    MatchOptions,
    ScheduleQuery,
)
from .match_result import (
    PenaltyName,
    ORPHAN_PENALTIES,
    Decision,
    Confidence,
    MatchStatus,
    AppliedPenalty,
    ScoringResult,
    MatchDecision,
    MatchResult,
)

__all__ = [
    # Rule bundle
    'PenaltyWeights',
    'Thresholds',
    'SynonymGroup',
    'TokenSets',
    'PersonDetection',
    'IrrelevantWords',
    'RuleConfiguration',
    # Inputs
    'MeetingCandidate',
    'UserCandidate',
    'MatchOptions',
    'ScheduleQuery',
    # Outputs
    'PenaltyName',
    'ORPHAN_PENALTIES',
    'Decision',
    'Confidence',
    'MatchStatus',
    'AppliedPenalty',
    'ScoringResult',
    'MatchDecision',
    'MatchResult',
]
