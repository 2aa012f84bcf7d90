# Path: sched_match/process/matcher/engine/coordinator.py
"""
Matching Service

Caller-facing entry point of the matcher. For each schedule query:
1. Resolve the instructor against the user catalog
2. Retrieve candidate meetings
3. Score candidates and decide
4. Validate the meeting host against the resolved instructor

Never raises for a single query: every query yields a MatchResult.
"""

from collections import Counter
from typing import Iterable, Optional, Sequence

from sched_match.core.logger import get_process_logger

from ..models.candidates import MatchOptions, MeetingCandidate, ScheduleQuery, UserCandidate
from ..models.match_result import Confidence, Decision, MatchDecision, MatchResult, MatchStatus
from ..models.rule_config import RuleConfiguration
from ..scoring.aggregator import ScoringEngine
from ..scoring.decision import DecisionEngine
from ..text.edit_distance import EditDistanceCache
from ..text.normalizer import Normalizer
from .instructor_resolver import InstructorResolver
from .retriever import CandidateRetriever
from .rules_loader import RulesLoader


class MatchingService:
    """
    Matches schedule lines to meetings and validates their hosts.

    One service holds one catalog snapshot. Build a new service (or a
    new EditDistanceCache) per batch when batches run in parallel.

    Example:
        service = MatchingService(meetings, users, config=RulesLoader().load())

        result = service.find_match(ScheduleQuery('CH ACME L2', 'Maria Garcia'))
        print(result.status, result.meeting_id, result.reason)

        results = service.match_all(queries)
    """

    def __init__(
        self,
        meetings: Sequence[MeetingCandidate],
        users: Sequence[UserCandidate] = (),
        config: Optional[RuleConfiguration] = None,
        distances: Optional[EditDistanceCache] = None,
        normalizer: Optional[Normalizer] = None
    ):
        """
        Initialize matching service.

        Args:
            meetings: Meeting catalog
            users: User catalog (empty disables host validation)
            config: Rule bundle (packaged default if omitted)
            distances: Edit-distance cache (a fresh one if omitted)
            normalizer: Shared normalizer (built from config if omitted)
        """
        self.logger = get_process_logger('matcher.service')

        self.config = config or RulesLoader().load()
        self.normalizer = normalizer or Normalizer(self.config.irrelevant_words)
        self.distances = distances or EditDistanceCache()

        self.retriever = CandidateRetriever(meetings, self.config, self.normalizer)
        self.instructors = InstructorResolver(users, self.config, self.normalizer)
        self.scoring = ScoringEngine(self.config, self.normalizer, self.distances)
        self.decisions = DecisionEngine(self.config)

        self.logger.info(
            f"Matching service ready: {len(self.retriever.meetings)} meetings, "
            f"{len(self.instructors)} users"
        )

    # ========================================================================
    # PUBLIC API
    # ========================================================================

    def find_match(self, query: ScheduleQuery) -> MatchResult:
        """
        Match one schedule line.

        Args:
            query: Program text, instructor text and options

        Returns:
            MatchResult (never raises for a single query)
        """
        result = MatchResult(query=query)

        instructor = None
        if (query.instructor_text or '').strip():
            instructor = self.instructors.resolve(query.instructor_text)
        result.found_instructor = instructor

        candidates = self.retriever.find_candidates(query.program_text)
        result.candidates = candidates

        if not candidates:
            result.status = MatchStatus.NOT_FOUND
            result.reason = 'Meeting not found'
            return result

        decision = self._evaluate(query.program_text, candidates, query.options)
        if decision.decision != Decision.ASSIGNED:
            return self._apply_unassigned(result, decision)

        meeting = decision.best_match.candidate
        result.meeting_id = meeting.id
        result.best_match = meeting
        result.score = decision.best_match.final_score
        result.detailed_reason = decision.detailed_reason

        if len(self.instructors) == 0:
            result.status = MatchStatus.ASSIGNED
            result.reason = f"Score: {result.score} (No instructor validation)"
            return result

        if instructor is None:
            result.status = MatchStatus.NOT_FOUND
            result.reason = 'Instructor not found'
            return result

        result.status = (
            MatchStatus.ASSIGNED if meeting.host_id == instructor.id
            else MatchStatus.TO_UPDATE
        )
        result.reason = '-' if decision.confidence == Confidence.HIGH else f"Score: {result.score}"
        return result

    def find_match_by_topic(
        self,
        program_text: str,
        options: Optional[MatchOptions] = None
    ) -> MatchResult:
        """
        Match a program against meetings, without instructor validation.

        Args:
            program_text: Program text as typed
            options: Query relaxations

        Returns:
            MatchResult with the retrieved candidates attached
        """
        options = options or MatchOptions()
        result = MatchResult(query=ScheduleQuery(program_text, '', options))

        candidates = self.retriever.find_candidates(program_text)
        result.candidates = candidates

        if not candidates:
            result.reason = 'Not found'
            return result

        decision = self._evaluate(program_text, candidates, options)
        if decision.decision != Decision.ASSIGNED:
            return self._apply_unassigned(result, decision)

        meeting = decision.best_match.candidate
        result.status = MatchStatus.ASSIGNED
        result.meeting_id = meeting.id
        result.best_match = meeting
        result.score = decision.best_match.final_score
        result.reason = f"Score: {result.score}"
        result.detailed_reason = decision.detailed_reason
        return result

    def match_all(self, queries: Iterable[ScheduleQuery]) -> list[MatchResult]:
        """
        Match a batch of schedule lines sequentially.

        Clears the edit-distance cache first to bound its memory.

        Args:
            queries: Schedule queries

        Returns:
            One MatchResult per query, in input order
        """
        self.distances.clear()

        results = []
        for query in queries:
            try:
                results.append(self.find_match(query))
            except Exception as e:
                self.logger.error(f"Matching failed for '{query.program_text}': {e}", exc_info=True)
                results.append(MatchResult(
                    query=query,
                    status=MatchStatus.NOT_FOUND,
                    reason='Matching error',
                ))

        histogram = Counter(r.status.value for r in results)
        summary = ', '.join(f"{status}={count}" for status, count in sorted(histogram.items()))
        self.logger.info(f"Matched {len(results)} queries: {summary or 'none'}")
        self.logger.debug(
            f"Edit-distance cache: {len(self.distances)} entries, "
            f"{self.distances.hits} hits, {self.distances.misses} misses"
        )
        return results

    # ========================================================================
    # INTERNALS
    # ========================================================================

    def _evaluate(
        self,
        program_text: str,
        candidates: Sequence[MeetingCandidate],
        options: MatchOptions
    ) -> MatchDecision:
        """Score candidates and decide."""
        results = self.scoring.score_all(program_text, candidates, options)
        decision = self.decisions.decide(results)
        self.logger.debug(
            f"'{program_text}': {decision.decision.value} "
            f"({decision.confidence.value}) - {decision.reason}"
        )
        return decision

    @staticmethod
    def _apply_unassigned(result: MatchResult, decision: MatchDecision) -> MatchResult:
        """Copy an ambiguous or not_found decision onto the result."""
        result.status = (
            MatchStatus.AMBIGUOUS if decision.decision == Decision.AMBIGUOUS
            else MatchStatus.NOT_FOUND
        )
        result.reason = decision.reason
        result.detailed_reason = decision.detailed_reason
        result.ambiguous_candidates = list(decision.ambiguous_candidates)
        if decision.best_match is not None:
            result.best_match = decision.best_match.candidate
            result.score = decision.best_match.final_score
        return result


__all__ = ['MatchingService']
