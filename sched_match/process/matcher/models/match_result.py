# Path: sched_match/process/matcher/models/match_result.py
"""
Match Result Models

Models representing scoring, decisions and caller-facing results.
"""

from enum import Enum
from typing import Any, Optional
from dataclasses import dataclass, field

from .candidates import MeetingCandidate, ScheduleQuery, UserCandidate


class PenaltyName(str, Enum):
    """Kinds of penalty a rule can apply."""
    CRITICAL_TOKEN_MISMATCH = "critical_token_mismatch"
    LEVEL_CONFLICT = "level_conflict"
    LEVEL_MISMATCH_IGNORED = "level_mismatch_ignored"
    PROGRAM_VS_PERSON = "program_vs_person"
    STRUCTURAL_TOKEN_MISSING = "structural_token_missing"
    WEAK_MATCH = "weak_match"
    PARTIAL_MATCH_MISSING_TOKENS = "partial_match_missing_tokens"
    GROUP_NUMBER_CONFLICT = "group_number_conflict"
    NUMERIC_CONFLICT = "numeric_conflict"
    ORPHAN_NUMBER_WITH_SIBLINGS = "orphan_number_with_siblings"
    ORPHAN_LEVEL_WITH_SIBLINGS = "orphan_level_with_siblings"
    COMPANY_CONFLICT = "company_conflict"


ORPHAN_PENALTIES = frozenset({
    PenaltyName.ORPHAN_NUMBER_WITH_SIBLINGS,
    PenaltyName.ORPHAN_LEVEL_WITH_SIBLINGS,
})


class Decision(str, Enum):
    """Outcome of the decision engine."""
    ASSIGNED = "assigned"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"


class Confidence(str, Enum):
    """Confidence level of a decision."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class MatchStatus(str, Enum):
    """Caller-facing status of a schedule line."""
    ASSIGNED = "assigned"
    TO_UPDATE = "to_update"
    AMBIGUOUS = "ambiguous"
    NOT_FOUND = "not_found"
    MANUAL = "manual"


@dataclass(frozen=True)
class AppliedPenalty:
    """
    A penalty applied by one rule.

    Attributes:
        name: Penalty kind
        points: Points added to the score (<= 0)
        reason: Human-readable explanation
        metadata: Extra structured data (e.g. coverage ratio)
    """
    name: PenaltyName
    points: int
    reason: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        data = {
            'name': self.name.value,
            'points': self.points,
            'reason': self.reason,
        }
        if self.metadata:
            data['metadata'] = dict(self.metadata)
        return data


@dataclass
class ScoringResult:
    """
    Score of one candidate against one query.

    final_score and is_disqualified both derive from the same unfloored
    raw_score: disqualification is decided before flooring.

    Attributes:
        candidate: Meeting that was scored
        base_score: Starting score
        raw_score: base_score plus all penalty points
        penalties: Applied penalties in rule order
        rule_errors: Rules that failed and contributed nothing
    """
    candidate: MeetingCandidate
    base_score: int
    raw_score: int
    penalties: list[AppliedPenalty] = field(default_factory=list)
    rule_errors: list[Exception] = field(default_factory=list)

    @property
    def final_score(self) -> int:
        return max(0, self.raw_score)

    @property
    def is_disqualified(self) -> bool:
        return self.raw_score <= 0

    def has_penalty(self, *names: PenaltyName) -> bool:
        """Whether any penalty with one of the given names was applied."""
        return any(p.name in names for p in self.penalties)

    def penalty(self, name: PenaltyName) -> Optional[AppliedPenalty]:
        """First applied penalty with the given name, if any."""
        return next((p for p in self.penalties if p.name == name), None)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'candidate': self.candidate.to_dict(),
            'base_score': self.base_score,
            'final_score': self.final_score,
            'is_disqualified': self.is_disqualified,
            'penalties': [p.to_dict() for p in self.penalties],
            'rule_errors': [str(e) for e in self.rule_errors],
        }


@dataclass
class MatchDecision:
    """
    Classification of one query's scored candidate set.

    Attributes:
        decision: assigned, ambiguous or not_found
        confidence: Confidence tier
        reason: Short label
        detailed_reason: One 'NAME: reason' line per penalty of the best result
        best_match: Best result, when one is worth showing
        ambiguous_candidates: Candidates offered for manual review
        all_results: Every scoring result, sorted by final score
    """
    decision: Decision
    confidence: Confidence
    reason: str
    detailed_reason: Optional[str] = None
    best_match: Optional[ScoringResult] = None
    ambiguous_candidates: list[MeetingCandidate] = field(default_factory=list)
    all_results: list[ScoringResult] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'decision': self.decision.value,
            'confidence': self.confidence.value,
            'reason': self.reason,
            'detailed_reason': self.detailed_reason,
            'best_match': self.best_match.to_dict() if self.best_match else None,
            'ambiguous_candidates': [c.to_dict() for c in self.ambiguous_candidates],
        }


@dataclass
class MatchResult:
    """
    Caller-facing result for one schedule query.

    Attributes:
        query: The schedule query
        status: assigned, to_update, ambiguous, not_found or manual
        reason: Short label
        detailed_reason: Penalty breakdown
        meeting_id: Assigned meeting, when status is assigned/to_update
        found_instructor: Resolved instructor, if any
        best_match: Best candidate meeting
        candidates: Retrieved candidate meetings
        ambiguous_candidates: Candidates offered for manual review
        score: Final score of the best candidate
    """
    query: ScheduleQuery
    status: MatchStatus = MatchStatus.NOT_FOUND
    reason: str = ''
    detailed_reason: Optional[str] = None
    meeting_id: Optional[str] = None
    found_instructor: Optional[UserCandidate] = None
    best_match: Optional[MeetingCandidate] = None
    candidates: list[MeetingCandidate] = field(default_factory=list)
    ambiguous_candidates: list[MeetingCandidate] = field(default_factory=list)
    score: Optional[int] = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            'query': self.query.to_dict(),
            'status': self.status.value,
            'reason': self.reason,
            'detailed_reason': self.detailed_reason,
            'meeting_id': self.meeting_id,
            'found_instructor': (
                self.found_instructor.to_dict() if self.found_instructor else None
            ),
            'best_match': self.best_match.to_dict() if self.best_match else None,
            'candidates': [c.to_dict() for c in self.candidates],
            'ambiguous_candidates': [c.to_dict() for c in self.ambiguous_candidates],
            'score': self.score,
        }


__all__ = [
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
