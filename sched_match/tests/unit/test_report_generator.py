# Path: sched_match/tests/unit/test_report_generator.py
"""
Unit Tests for ReportGenerator
"""

import json

import pytest

from sched_match.output import ReportGenerator
from sched_match.process.matcher.models import (
    MatchResult,
    MatchStatus,
    MeetingCandidate,
    ScheduleQuery,
)


@pytest.fixture
def results():
    """Two results: one assigned, one not found."""
    meeting = MeetingCandidate(id='m3', topic='TRIO GLOBEX L4', host_id='u1')
    return [
        MatchResult(
            query=ScheduleQuery('TRIO GLOBEX L4', 'Maria Garcia'),
            status=MatchStatus.ASSIGNED,
            reason='-',
            meeting_id='m3',
            best_match=meeting,
            candidates=[meeting],
            score=100,
        ),
        MatchResult(
            query=ScheduleQuery('ZZZ'),
            status=MatchStatus.NOT_FOUND,
            reason='Meeting not found',
        ),
    ]


class TestReportGenerator:
    """Test report generation and output."""

    def test_generate(self, mock_env_vars, reset_singletons, results):
        """The report carries a status histogram and every result."""
        report = ReportGenerator().generate(results)

        assert report['summary']['total'] == 2
        assert report['summary']['by_status']['assigned'] == 1
        assert report['summary']['by_status']['not_found'] == 1
        assert report['summary']['by_status']['to_update'] == 0
        assert report['results'][0]['meeting_id'] == 'm3'
        assert report['results'][1]['query']['program'] == 'ZZZ'

    def test_write_explicit_path(self, mock_env_vars, reset_singletons, results, temp_dir):
        """write() creates parent directories and writes JSON."""
        generator = ReportGenerator()
        path = generator.write(generator.generate(results), temp_dir / 'out' / 'report.json')

        data = json.loads(path.read_text(encoding='utf-8'))
        assert data['results'][0]['status'] == 'assigned'

    def test_write_default_path(self, mock_env_vars, reset_singletons, results):
        """Without a path the configured output directory is used."""
        generator = ReportGenerator()
        path = generator.write(generator.generate(results))

        assert str(path).startswith(mock_env_vars['SCHED_MATCH_OUTPUT_DIR'])
        assert path.name == 'match_report.json'

    def test_to_console(self, mock_env_vars, reset_singletons, results):
        """The console summary lists every query and the totals."""
        text = ReportGenerator().to_console(ReportGenerator().generate(results))

        assert 'TRIO GLOBEX L4' in text
        assert 'Meeting not found' in text
        assert 'Total: 2' in text
