# Path: sched_match/tests/unit/test_rules_loader.py
"""
Unit Tests for RulesLoader

Tests loading the packaged bundle and rejecting invalid bundles.
"""

import pytest
import yaml

from sched_match.exceptions import ConfigurationError
from sched_match.process.matcher.engine import RulesLoader
from sched_match.process.matcher.models import RuleConfiguration


class TestPackagedBundle:
    """Test the packaged rule bundle."""

    def test_loads(self, rule_config):
        """The packaged bundle validates."""
        assert isinstance(rule_config, RuleConfiguration)
        assert rule_config.base_score == 100

    def test_penalties_are_non_positive(self, rule_config):
        """Every penalty subtracts."""
        assert all(v <= 0 for v in rule_config.penalties.model_dump().values())

    def test_synonyms_share_a_group(self, rule_config):
        """DUO and BVD are one group, PRIVADO and BVP another."""
        tokens = rule_config.tokens
        assert tokens.groups_in(['duo']) == tokens.groups_in(['bvd'])
        assert tokens.groups_in(['privado']) == tokens.groups_in(['bvp'])
        assert tokens.groups_in(['duo']) != tokens.groups_in(['trio'])

    def test_bundle_is_frozen(self, rule_config):
        """The validated bundle cannot be mutated."""
        with pytest.raises(Exception):
            rule_config.base_score = 1

    def test_cache(self):
        """load() reuses the parsed bundle unless asked not to."""
        loader = RulesLoader()
        first = loader.load()
        assert loader.load() is first
        assert loader.load(use_cache=False) is not first


class TestInvalidBundles:
    """Every bundle defect is a ConfigurationError."""

    def test_missing_file(self, temp_dir):
        """A missing file is rejected."""
        with pytest.raises(ConfigurationError):
            RulesLoader(temp_dir / 'missing.yaml').load()

    def test_yaml_syntax_error(self, temp_dir):
        """Malformed YAML is rejected."""
        path = temp_dir / 'bad.yaml'
        path.write_text('base_score: [100\n', encoding='utf-8')
        with pytest.raises(ConfigurationError):
            RulesLoader(path).load()

    def test_empty_file(self, temp_dir):
        """An empty document is rejected."""
        path = temp_dir / 'empty.yaml'
        path.write_text('', encoding='utf-8')
        with pytest.raises(ConfigurationError, match='Empty'):
            RulesLoader(path).load()

    def test_not_a_mapping(self):
        """A list document is rejected."""
        with pytest.raises(ConfigurationError, match='mapping'):
            RulesLoader.from_dict([1, 2, 3])

    def test_positive_penalty(self, rules_data):
        """Penalties must be <= 0."""
        rules_data['penalties']['level_conflict'] = 10
        with pytest.raises(ConfigurationError):
            RulesLoader.from_dict(rules_data)

    def test_ignored_level_not_milder(self, rules_data):
        """level_mismatch_ignored must be milder than level_conflict."""
        rules_data['penalties']['level_mismatch_ignored'] = -80
        with pytest.raises(ConfigurationError, match='milder'):
            RulesLoader.from_dict(rules_data)

    def test_confidence_order(self, rules_data):
        """High confidence cannot sit below medium."""
        rules_data['thresholds']['high_confidence_score'] = 60
        with pytest.raises(ConfigurationError):
            RulesLoader.from_dict(rules_data)

    def test_token_in_two_groups(self, rules_data):
        """Synonym groups are exclusive."""
        rules_data['tokens']['synonym_groups'].append({'id': 'X', 'tokens': ['ch']})
        with pytest.raises(ConfigurationError, match="'ch'"):
            RulesLoader.from_dict(rules_data)

    def test_invalid_regex(self, rules_data):
        """Uncompilable person patterns are rejected."""
        rules_data['person_detection'] = {'patterns': ['([unclosed']}
        with pytest.raises(ConfigurationError):
            RulesLoader.from_dict(rules_data)

    def test_lexicon_must_compile_as_one_pattern(self, rules_data):
        """Patterns valid alone but not inside the combined alternation are rejected."""
        rules_data['irrelevant_words'] = {
            'categories': {'modality': ['online']},
            'patterns': ['(?i)zona'],
        }
        with pytest.raises(ConfigurationError, match='does not compile'):
            RulesLoader.from_dict(rules_data)

    def test_unknown_key(self, rules_data):
        """Unknown keys are typos, not extensions."""
        rules_data['thresholds']['minimum_scroe'] = 50
        with pytest.raises(ConfigurationError):
            RulesLoader.from_dict(rules_data)

    def test_minimal_bundle_from_file(self, temp_dir, rules_data):
        """A minimal bundle round-trips through a file with defaults filled in."""
        path = temp_dir / 'rules.yaml'
        path.write_text(yaml.safe_dump(rules_data), encoding='utf-8')

        config = RulesLoader(path).load()

        assert config.version == 'test'
        assert config.thresholds.ambiguous_candidates_limit == 5
        assert config.irrelevant_words.compile() is None
