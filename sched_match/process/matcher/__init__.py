# Path: sched_match/process/matcher/__init__.py
"""
Matching Engine - Schedule to Meeting Matching

Matches human-typed schedule lines (program text plus instructor name)
against a catalog of registered meetings. Candidates are retrieved
loosely, then scored by subtracting rule penalties from a base score,
and the scored set is classified as assigned, ambiguous or not_found.

Core Components:
    - MatchingService: Main orchestrator
    - Evaluators: Penalty rules (classifiers, levels, numbers, coverage)
    - Scoring: Score aggregation, confidence and decisions
    - Text: Normalization and cached edit distance
    - Models: Rule bundle, catalog records and results

Example:
    from sched_match.process.matcher import MatchingService, ScheduleQuery

    service = MatchingService(meetings, users)
    result = service.find_match(ScheduleQuery('CH ACME L2', 'Maria Garcia'))
"""

from .engine import MatchingService, RulesLoader, CandidateRetriever, InstructorResolver
from .models import (
    RuleConfiguration,
    MeetingCandidate,
    UserCandidate,
    ScheduleQuery,
    MatchOptions,
    MatchResult,
    MatchStatus,
    Decision,
    Confidence,
    PenaltyName,
)

__all__ = [
    'MatchingService',
    'RulesLoader',
    'CandidateRetriever',
    'InstructorResolver',
    'RuleConfiguration',
    'MeetingCandidate',
    'UserCandidate',
    'ScheduleQuery',
    'MatchOptions',
    'MatchResult',
    'MatchStatus',
    'Decision',
    'Confidence',
    'PenaltyName',
]
