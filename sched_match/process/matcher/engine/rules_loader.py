# Path: sched_match/process/matcher/engine/rules_loader.py
"""
Rules Loader

Loads the matching rule bundle from YAML and validates it into a
frozen RuleConfiguration. Any failure is fatal for the batch and is
raised as ConfigurationError before any scoring happens.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from sched_match.constants import DEFAULT_RULES_FILE
from sched_match.core.logger import get_process_logger
from sched_match.exceptions import ConfigurationError

from ..models.rule_config import RuleConfiguration


class RulesLoader:
    """
    Loads a rule bundle from a YAML file.

    Example:
        loader = RulesLoader()
        config = loader.load()

        # Custom bundle
        config = RulesLoader(Path('rules/strict.yaml')).load()

        # In-memory data (tests, overrides)
        config = RulesLoader.from_dict({'base_score': 100, ...})
    """

    def __init__(self, rules_path: Optional[Path] = None):
        """
        Initialize rules loader.

        Args:
            rules_path: Path to the YAML bundle.
                        Defaults to sched_match/dictionary/matching_rules.yaml
        """
        self.logger = get_process_logger('matcher.rules_loader')

        if rules_path is None:
            self.rules_path = Path(__file__).parent.parent.parent.parent / 'dictionary' / DEFAULT_RULES_FILE
        else:
            self.rules_path = Path(rules_path)

        self._cache: Optional[RuleConfiguration] = None

    def load(self, use_cache: bool = True) -> RuleConfiguration:
        """
        Load and validate the rule bundle.

        Args:
            use_cache: Whether to reuse a previously loaded bundle

        Returns:
            Validated RuleConfiguration

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        if use_cache and self._cache is not None:
            return self._cache

        try:
            with open(self.rules_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            self.logger.error(f"Cannot read rule bundle {self.rules_path}: {e}")
            raise ConfigurationError(f"Cannot read rule bundle {self.rules_path}: {e}") from e
        except yaml.YAMLError as e:
            self.logger.error(f"YAML parse error in {self.rules_path}: {e}")
            raise ConfigurationError(f"YAML parse error in {self.rules_path}: {e}") from e

        config = self.from_dict(data, source=str(self.rules_path))
        self.logger.info(
            f"Loaded rule bundle v{config.version} from {self.rules_path}: "
            f"{len(config.tokens.synonym_groups)} synonym groups, "
            f"{len(config.person_detection.patterns)} person patterns, "
            f"{len(config.irrelevant_words.words())} irrelevant words"
        )
        self._cache = config
        return config

    @staticmethod
    def from_dict(data: Any, source: str = '<dict>') -> RuleConfiguration:
        """
        Validate raw bundle data.

        Args:
            data: Parsed YAML mapping
            source: Where the data came from (for error messages)

        Returns:
            Validated RuleConfiguration

        Raises:
            ConfigurationError: If data is empty, not a mapping, or invalid
        """
        if data is None:
            raise ConfigurationError(f"Empty rule bundle: {source}")
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Rule bundle {source} must be a mapping, got {type(data).__name__}"
            )

        try:
            return RuleConfiguration.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid rule bundle {source}:\n{e}") from e


__all__ = ['RulesLoader']
