# Path: sched_match/tests/unit/test_retriever.py
"""
Unit Tests for CandidateRetriever

Tests the exact, fuzzy and token-overlap stages.
"""

from sched_match.process.matcher.engine import CandidateRetriever
from sched_match.process.matcher.models import MeetingCandidate


def ids(candidates):
    return [c.id for c in candidates]


class TestExactStage:
    """Test exact normalized lookup."""

    def test_exact(self, meetings, rule_config):
        """An identical normalized topic is found exactly."""
        retriever = CandidateRetriever(meetings, rule_config)

        assert ids(retriever.find_candidates('trio  globex L4')) == ['m3']
        assert retriever.last_strategy == 'exact'

    def test_collisions_kept(self, rule_config):
        """Every meeting sharing a normalized topic is returned."""
        retriever = CandidateRetriever([
            MeetingCandidate(id='a', topic='CH - ACME'),
            MeetingCandidate(id='b', topic='ch acme online'),
        ], rule_config)

        assert ids(retriever.find_candidates('CH ACME')) == ['a', 'b']

    def test_completeness(self, meetings, rule_config):
        """Every meeting is retrieved by its own topic."""
        retriever = CandidateRetriever(meetings, rule_config)
        for meeting in meetings:
            assert meeting in retriever.find_candidates(meeting.topic)


class TestFuzzyStage:
    """Test approximate search."""

    def test_fuzzy(self, meetings, rule_config):
        """Near topics are found, ranked, ties in catalog order."""
        retriever = CandidateRetriever(meetings, rule_config)

        assert ids(retriever.find_candidates('CH ACME')) == ['m1', 'm2']
        assert retriever.last_strategy == 'fuzzy'

    def test_fuzzy_near_miss(self, meetings, rule_config):
        """A different level still retrieves the topic."""
        retriever = CandidateRetriever(meetings, rule_config)

        assert ids(retriever.find_candidates('TRIO GLOBEX L3')) == ['m3']


class TestTokenOverlapStage:
    """Test the token-overlap fallback."""

    def test_overlap(self, meetings, rule_config):
        """Shared meaningful tokens covering half the query are accepted."""
        retriever = CandidateRetriever(meetings, rule_config)

        assert ids(retriever.find_candidates('TRIO NOVA')) == ['m3', 'm7']
        assert retriever.last_strategy == 'token_overlap'

    def test_short_tokens_not_meaningful(self, meetings, rule_config):
        """Overlap on short tokens only is rejected."""
        retriever = CandidateRetriever(meetings, rule_config)

        assert retriever.find_candidates('CH ZETA') == []
        assert retriever.last_strategy == 'none'

    def test_empty_query(self, meetings, rule_config):
        """A query that normalizes to nothing finds nothing."""
        retriever = CandidateRetriever(meetings, rule_config)

        assert retriever.find_candidates('') == []
        assert retriever.find_candidates('Online') == []
