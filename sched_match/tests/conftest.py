# Path: sched_match/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for sched_match

Provides common test fixtures used across all test modules.
"""

import json
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from sched_match.process.matcher.engine import RulesLoader
from sched_match.process.matcher.evaluators import ScoringContext
from sched_match.process.matcher.models import MatchOptions, MeetingCandidate, UserCandidate
from sched_match.process.matcher.text import EditDistanceCache, Normalizer


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'SCHED_MATCH_ENVIRONMENT': 'test',
        'SCHED_MATCH_LOG_DIR': str(temp_dir / 'logs'),
        'SCHED_MATCH_LOG_LEVEL': 'DEBUG',
        'SCHED_MATCH_LOG_CONSOLE': 'false',
        'SCHED_MATCH_EDIT_CACHE_SIZE': '250',
        'SCHED_MATCH_OUTPUT_DIR': str(temp_dir / 'output'),
        'SCHED_MATCH_JSON_INDENT': '4',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from sched_match.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False


# ==============================================================================
# RULE BUNDLE FIXTURES
# ==============================================================================

@pytest.fixture(scope='session')
def rule_config():
    """The packaged rule bundle."""
    return RulesLoader().load()


@pytest.fixture
def rules_data():
    """A minimal valid rule bundle as raw data (mutable per test)."""
    return {
        'version': 'test',
        'base_score': 100,
        'penalties': {
            'critical_token_mismatch': -100,
            'level_conflict': -60,
            'level_mismatch_ignored': -5,
            'company_conflict': -100,
            'program_vs_person': -50,
            'structural_token_missing': -30,
            'weak_match': -100,
            'missing_token': -25,
            'missing_numeric_token': -10,
            'missing_token_extra_info': -5,
            'missing_token_relaxed': -15,
            'missing_token_relaxed_noise': -2,
            'group_number_conflict': -50,
            'numeric_conflict': -30,
            'orphan_number': -15,
            'orphan_level': -15,
        },
        'thresholds': {
            'minimum_score': 50,
            'ambiguity_score_diff': 10,
            'high_confidence_score': 85,
            'medium_confidence_score': 70,
            'fuzzy_max_distance': 0.3,
            'token_overlap_min_ratio': 0.5,
        },
        'tokens': {
            'synonym_groups': [
                {'id': 'CH', 'tokens': ['ch']},
                {'id': 'TRIO', 'tokens': ['trio']},
            ],
            'structural': ['ch', 'trio'],
            'program_types': ['ch', 'trio'],
        },
    }


@pytest.fixture
def normalizer(rule_config):
    """Normalizer built from the packaged lexicon."""
    return Normalizer(rule_config.irrelevant_words)


@pytest.fixture
def make_context(rule_config, normalizer):
    """
    Factory for scoring contexts.

    Usage:
        context = make_context('CH ACME', 'CH 1 ACME L2', siblings=['CH 2 ACME L2'])
    """
    def _make(program, topic, siblings=(), ignore_level_mismatch=False):
        candidate = MeetingCandidate(id='m0', topic=topic)
        others = [MeetingCandidate(id=f'm{i}', topic=t) for i, t in enumerate(siblings, 1)]
        return ScoringContext(
            raw_program=program,
            candidate=candidate,
            all_candidates=[candidate, *others],
            options=MatchOptions(ignore_level_mismatch=ignore_level_mismatch),
            config=rule_config,
            normalizer=normalizer,
            distances=EditDistanceCache(),
        )

    return _make


# ==============================================================================
# CATALOG FIXTURES
# ==============================================================================

@pytest.fixture
def meetings():
    """Small meeting catalog."""
    return [
        MeetingCandidate(id='m1', topic='CH 1 ACME L2', host_id='u1'),
        MeetingCandidate(id='m2', topic='CH 2 ACME L2', host_id='u2'),
        MeetingCandidate(id='m3', topic='TRIO GLOBEX L4', host_id='u1'),
        MeetingCandidate(id='m4', topic='DUO INITECH L3', host_id='u2'),
        MeetingCandidate(id='m5', topic='PRIVADO UMBRELLA L1', host_id='u3'),
        MeetingCandidate(id='m6', topic='CH HOOLI FINANZAS L5', host_id='u3'),
        MeetingCandidate(id='m7', topic='TRIO L3 (HAYDUK)', host_id='u2'),
    ]


@pytest.fixture
def users():
    """Small user catalog."""
    return [
        UserCandidate(
            id='u1', email='maria@example.com',
            first_name='Maria', last_name='Garcia', display_name='Maria Garcia',
        ),
        UserCandidate(
            id='u2', email='john@example.com',
            first_name='John', last_name='Smith', display_name='Johnny Smith',
        ),
        UserCandidate(
            id='u3', email='ana@example.com',
            first_name='Ana', last_name='Lopez Torres', display_name='Ana Lopez',
        ),
        UserCandidate(
            id='u4', email='carlos@example.com',
            first_name='Carlos Andres', last_name='Ruiz Diaz', display_name='Carlos Ruiz Diaz',
        ),
    ]


@pytest.fixture
def catalog_files(temp_dir, meetings, users):
    """Meeting, user and query JSON files in provider export shape."""
    meetings_path = temp_dir / 'meetings.json'
    meetings_path.write_text(json.dumps({
        'meetings': [
            {
                'meeting_id': int(m.id[1:]) + 1000,
                'topic': m.topic,
                'host_id': m.host_id,
                'start_time': '2024-03-01T10:00:00Z',
            }
            for m in meetings
        ]
    }), encoding='utf-8')

    users_path = temp_dir / 'users.json'
    users_path.write_text(json.dumps([
        {
            'id': u.id,
            'email': u.email,
            'first_name': u.first_name,
            'last_name': u.last_name,
            'display_name': u.display_name,
        }
        for u in users
    ]), encoding='utf-8')

    queries_path = temp_dir / 'queries.json'
    queries_path.write_text(json.dumps({
        'queries': [
            {'program': 'TRIO GLOBEX L4', 'instructor': 'Maria Garcia'},
            {'program': 'CH ACME', 'instructor': 'John Smith'},
            {'program': 'TRIO GLOBEX L3', 'instructor': 'Maria Garcia',
             'options': {'ignore_level_mismatch': True}},
        ]
    }), encoding='utf-8')

    return {'meetings': meetings_path, 'users': users_path, 'queries': queries_path}
