# Path: sched_match/tests/unit/test_level_number_rules.py
"""
Unit Tests for level and number rules

- LevelConflictRule / OrphanLevelRule
- GroupNumberConflictRule / NumericConflictRule / OrphanNumberRule
"""

from sched_match.process.matcher.evaluators import (
    GroupNumberConflictRule,
    LevelConflictRule,
    NumericConflictRule,
    OrphanLevelRule,
    OrphanNumberRule,
)
from sched_match.process.matcher.models import PenaltyName


class TestLevelConflictRule:
    """Test disjoint levels."""

    def test_conflict(self, make_context):
        """Different levels conflict."""
        penalty = LevelConflictRule().evaluate(make_context('CH ACME L2', 'CH ACME L3'))

        assert penalty.name == PenaltyName.LEVEL_CONFLICT
        assert penalty.points == -60
        assert penalty.reason == 'L2 vs L3'

    def test_ignored_variant(self, make_context):
        """ignore_level_mismatch keeps a visible mild penalty."""
        context = make_context('CH ACME L2', 'CH ACME L3', ignore_level_mismatch=True)
        penalty = LevelConflictRule().evaluate(context)

        assert penalty.name == PenaltyName.LEVEL_MISMATCH_IGNORED
        assert penalty.points == -5

    def test_shared_level(self, make_context):
        """Any shared level clears the conflict."""
        assert LevelConflictRule().evaluate(make_context('CH ACME L2 N3', 'CH ACME Nivel 3')) is None

    def test_one_side_without_level(self, make_context):
        """No conflict unless both sides name a level."""
        assert LevelConflictRule().evaluate(make_context('CH ACME', 'CH ACME L3')) is None


class TestOrphanLevelRule:
    """Test unrequested levels with leveled siblings."""

    def test_orphan_with_sibling(self, make_context):
        """A sibling at another level makes the level ambiguous."""
        context = make_context('CH ACME', 'CH ACME L2', siblings=['CH ACME L3'])
        penalty = OrphanLevelRule().evaluate(context)

        assert penalty.name == PenaltyName.ORPHAN_LEVEL_WITH_SIBLINGS
        assert penalty.points == -15
        assert penalty.metadata['sibling'] == 'm1'

    def test_sibling_with_same_level(self, make_context):
        """A sibling at the same level is not an alternative."""
        context = make_context('CH ACME', 'CH ACME L2', siblings=['CH ACME L2'])
        assert OrphanLevelRule().evaluate(context) is None

    def test_query_with_level(self, make_context):
        """A query naming a level is never orphaned."""
        context = make_context('CH ACME L2', 'CH ACME L2', siblings=['CH ACME L3'])
        assert OrphanLevelRule().evaluate(context) is None


class TestGroupNumberConflictRule:
    """Test disjoint group numbers."""

    def test_conflict(self, make_context):
        """Different group numbers conflict."""
        penalty = GroupNumberConflictRule().evaluate(make_context('CH 1 ACME', 'CH 3 ACME'))

        assert penalty.name == PenaltyName.GROUP_NUMBER_CONFLICT
        assert penalty.points == -50

    def test_levels_are_not_groups(self, make_context):
        """Level digits are not group numbers."""
        assert GroupNumberConflictRule().evaluate(make_context('CH 1 ACME L3', 'CH ACME L1')) is None

    def test_relaxed_mode_skips(self, make_context):
        """ignore_level_mismatch skips group numbers."""
        context = make_context('CH 1 ACME', 'CH 3 ACME', ignore_level_mismatch=True)
        assert GroupNumberConflictRule().evaluate(context) is None


class TestNumericConflictRule:
    """Test disjoint digit runs."""

    def test_conflict(self, make_context):
        """Disjoint digit runs conflict, levels included."""
        penalty = NumericConflictRule().evaluate(make_context('CH ACME L2', 'CH ACME L3'))

        assert penalty.name == PenaltyName.NUMERIC_CONFLICT
        assert penalty.points == -30

    def test_shared_number(self, make_context):
        """One shared number clears the conflict."""
        assert NumericConflictRule().evaluate(make_context('CH 2 ACME L3', 'CH 5 ACME L3')) is None

    def test_relaxed_mode_skips(self, make_context):
        """ignore_level_mismatch skips numbers."""
        context = make_context('CH ACME L2', 'CH ACME L3', ignore_level_mismatch=True)
        assert NumericConflictRule().evaluate(context) is None


class TestOrphanNumberRule:
    """Test unrequested group numbers with numbered siblings."""

    def test_orphan_with_sibling(self, make_context):
        """A sibling differing only by number makes the number ambiguous."""
        context = make_context('CH ACME', 'CH 1 ACME L2', siblings=['CH 2 ACME L2'])
        penalty = OrphanNumberRule().evaluate(context)

        assert penalty.name == PenaltyName.ORPHAN_NUMBER_WITH_SIBLINGS
        assert penalty.points == -15
        assert '"1"' in penalty.reason

    def test_no_sibling(self, make_context):
        """Without a sibling the number is harmless."""
        assert OrphanNumberRule().evaluate(make_context('CH ACME', 'CH 1 ACME L2')) is None

    def test_unrelated_sibling(self, make_context):
        """Siblings must match once digits are stripped."""
        context = make_context('CH ACME', 'CH 1 ACME L2', siblings=['CH 2 GLOBEX L2'])
        assert OrphanNumberRule().evaluate(context) is None

    def test_requested_number(self, make_context):
        """A number the query asked for is not orphaned."""
        context = make_context('CH 1 ACME', 'CH 1 ACME L2', siblings=['CH 2 ACME L2'])
        assert OrphanNumberRule().evaluate(context) is None
