# Path: sched_match/process/matcher/evaluators/base_evaluator.py
"""
Base Penalty Rule

Abstract base class for all penalty rules, the scoring context they
read, and the Result-style outcome they return.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Optional, Sequence

from sched_match.core.logger import get_process_logger
from sched_match.exceptions import RuleEvaluationError

from ..models.candidates import MatchOptions, MeetingCandidate
from ..models.match_result import AppliedPenalty, PenaltyName
from ..models.rule_config import RuleConfiguration
from ..text.edit_distance import EditDistanceCache
from ..text.normalizer import Normalizer
from ..text.tokens import raw_tokens


@dataclass
class ScoringContext:
    """
    Everything a rule may read while scoring one candidate.

    Attributes:
        raw_program: Query program text as typed
        candidate: Meeting being scored
        all_candidates: Full retrieved set (for sibling lookups)
        options: Query relaxations
        config: Rule bundle
        normalizer: Shared normalizer
        distances: Edit-distance cache
    """
    raw_program: str
    candidate: MeetingCandidate
    all_candidates: Sequence[MeetingCandidate]
    options: MatchOptions
    config: RuleConfiguration
    normalizer: Normalizer
    distances: EditDistanceCache = field(default_factory=EditDistanceCache)

    @property
    def raw_topic(self) -> str:
        return self.candidate.topic

    @cached_property
    def normalized_program(self) -> str:
        return self.normalizer.normalize(self.raw_program)

    @cached_property
    def normalized_topic(self) -> str:
        return self.normalizer.normalize(self.candidate.topic)

    @cached_property
    def program_tokens(self) -> set[str]:
        """Raw tokens of the query."""
        return set(raw_tokens(self.raw_program))

    @cached_property
    def topic_tokens(self) -> set[str]:
        """Raw tokens of the candidate topic."""
        return set(raw_tokens(self.candidate.topic))

    def siblings(self) -> list[MeetingCandidate]:
        """Every other candidate in the retrieved set."""
        return [c for c in self.all_candidates if c.id != self.candidate.id]


@dataclass(frozen=True)
class RuleOutcome:
    """
    Result of applying one rule: a penalty, an error, or neither.

    Attributes:
        rule_name: Rule that produced the outcome
        penalty: Applied penalty, if the rule fired
        error: Failure, if the rule raised
    """
    rule_name: str
    penalty: Optional[AppliedPenalty] = None
    error: Optional[RuleEvaluationError] = None

    @property
    def fired(self) -> bool:
        return self.penalty is not None

    @property
    def failed(self) -> bool:
        return self.error is not None


class PenaltyRule(ABC):
    """
    Abstract base class for penalty rules.

    Each rule is a pure function of the scoring context that returns
    at most one penalty. Subclasses implement evaluate(); callers use
    apply(), which never raises.

    Example:
        rule = LevelConflictRule()
        outcome = rule.apply(context)
        if outcome.fired:
            print(outcome.penalty.reason)
    """

    def __init__(self):
        """Initialize rule."""
        self.logger = get_process_logger(f'matcher.rules.{self.rule_name}')

    @property
    @abstractmethod
    def rule_name(self) -> str:
        """Return the name of this rule."""
        pass

    @abstractmethod
    def evaluate(self, context: ScoringContext) -> Optional[AppliedPenalty]:
        """
        Evaluate the rule against one candidate.

        Args:
            context: Scoring context

        Returns:
            AppliedPenalty if the rule fires, else None
        """
        pass

    def apply(self, context: ScoringContext) -> RuleOutcome:
        """
        Evaluate the rule, capturing any failure as a RuleEvaluationError.

        Args:
            context: Scoring context

        Returns:
            RuleOutcome with a penalty, an error, or neither
        """
        try:
            penalty = self.evaluate(context)
        except Exception as e:
            return RuleOutcome(self.rule_name, error=RuleEvaluationError(self.rule_name, e))
        return RuleOutcome(self.rule_name, penalty=penalty)

    def _penalty(
        self,
        name: PenaltyName,
        points: int,
        reason: str,
        **metadata: Any
    ) -> AppliedPenalty:
        """Build a penalty and log it."""
        self.logger.debug(f"{name.value}: {points} ({reason})")
        return AppliedPenalty(name=name, points=points, reason=reason, metadata=metadata)


__all__ = ['ScoringContext', 'RuleOutcome', 'PenaltyRule']
