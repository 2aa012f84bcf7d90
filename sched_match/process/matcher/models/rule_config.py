# Path: sched_match/process/matcher/models/rule_config.py
"""
Rule Configuration Model

Pydantic models for the matching rule bundle loaded from YAML.
The bundle is immutable once validated and is passed explicitly to
every component that needs it (normalizer, rules, decision engine).
"""

import re
from typing import Iterable, Optional

from pydantic import BaseModel, Field, PrivateAttr, field_validator, model_validator


FROZEN = {'frozen': True, 'extra': 'forbid'}


# =============================================================================
# PENALTIES
# =============================================================================

class PenaltyWeights(BaseModel):
    """Points added to the base score when a rule fires. All <= 0."""
    critical_token_mismatch: int = Field(le=0)
    level_conflict: int = Field(le=0)
    level_mismatch_ignored: int = Field(
        lt=0,
        description="Visible but mild variant of level_conflict"
    )
    company_conflict: int = Field(le=0)
    program_vs_person: int = Field(le=0)
    structural_token_missing: int = Field(le=0)
    weak_match: int = Field(le=0)
    missing_token: int = Field(le=0, description="Per missing non-numeric token")
    missing_numeric_token: int = Field(
        default=-10, le=0, description="Reserved: coverage only counts non-numeric tokens"
    )
    missing_token_extra_info: int = Field(le=0, description="Per benign extra token")
    missing_token_relaxed: int = Field(le=0)
    missing_token_relaxed_noise: int = Field(le=0)
    group_number_conflict: int = Field(le=0)
    numeric_conflict: int = Field(le=0)
    orphan_number: int = Field(le=0)
    orphan_level: int = Field(le=0)

    model_config = FROZEN

    @model_validator(mode='after')
    def validate_ignored_level_variant(self) -> 'PenaltyWeights':
        """The ignored level variant must be strictly milder."""
        if self.level_mismatch_ignored <= self.level_conflict:
            raise ValueError(
                f"level_mismatch_ignored ({self.level_mismatch_ignored}) must be "
                f"milder than level_conflict ({self.level_conflict})"
            )
        return self


# =============================================================================
# THRESHOLDS
# =============================================================================

class Thresholds(BaseModel):
    """Decision and retrieval thresholds."""
    minimum_score: int = Field(ge=0)
    ambiguity_score_diff: int = Field(ge=0)
    high_confidence_score: int = Field(ge=0)
    medium_confidence_score: int = Field(ge=0)
    fuzzy_max_distance: float = Field(ge=0.0, le=1.0)
    token_overlap_min_ratio: float = Field(ge=0.0, le=1.0)
    min_matching_tokens: int = Field(default=1, ge=1)
    instructor_fuzzy_max_distance: float = Field(default=0.45, ge=0.0, le=1.0)
    relaxed_min_coverage: float = Field(default=0.4, ge=0.0, le=1.0)
    ambiguous_candidates_limit: int = Field(default=5, ge=1)

    model_config = FROZEN

    @model_validator(mode='after')
    def validate_confidence_order(self) -> 'Thresholds':
        """High confidence cannot sit below medium confidence."""
        if self.high_confidence_score < self.medium_confidence_score:
            raise ValueError(
                f"high_confidence_score ({self.high_confidence_score}) is below "
                f"medium_confidence_score ({self.medium_confidence_score})"
            )
        return self


# =============================================================================
# TOKEN SETS
# =============================================================================

def _lower_tokens(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(str(v).strip().lower() for v in values if str(v).strip())


class SynonymGroup(BaseModel):
    """Interchangeable classifier tokens, exclusive against other groups."""
    id: str = Field(min_length=1)
    tokens: tuple[str, ...] = Field(min_length=1)

    model_config = FROZEN

    @field_validator('tokens', mode='before')
    @classmethod
    def lowercase_tokens(cls, v):
        return _lower_tokens(v)


class TokenSets(BaseModel):
    """Classifier vocabularies."""
    synonym_groups: tuple[SynonymGroup, ...] = ()
    structural: frozenset[str] = frozenset()
    program_types: frozenset[str] = frozenset()
    person_class: frozenset[str] = Field(
        default=frozenset(),
        description="Program tokens for classes titled with a person's name"
    )
    noise: frozenset[str] = frozenset()

    model_config = FROZEN

    @field_validator('structural', 'program_types', 'person_class', 'noise', mode='before')
    @classmethod
    def lowercase_sets(cls, v):
        return frozenset(_lower_tokens(v or ()))

    @model_validator(mode='after')
    def validate_exclusive_groups(self) -> 'TokenSets':
        """A token may belong to one synonym group only."""
        owner: dict[str, str] = {}
        for group in self.synonym_groups:
            for token in group.tokens:
                if token in owner and owner[token] != group.id:
                    raise ValueError(
                        f"Token '{token}' is in synonym groups "
                        f"'{owner[token]}' and '{group.id}'"
                    )
                owner[token] = group.id
        return self

    def groups_in(self, tokens: Iterable[str]) -> set[str]:
        """Ids of the synonym groups represented in tokens."""
        present = set(tokens)
        return {
            group.id for group in self.synonym_groups
            if present.intersection(group.tokens)
        }

    def is_program_marker(self, token: str) -> bool:
        """Whether a token denotes a program rather than a person."""
        return token in self.program_types or token in self.structural


# =============================================================================
# PERSON DETECTION
# =============================================================================

class PersonDetection(BaseModel):
    """Regexes recognizing person-name-shaped strings."""
    patterns: tuple[str, ...] = ()
    title_pattern: str = r'\b(dr|mr|mrs|ms|prof)\b'

    model_config = FROZEN

    _compiled: tuple[re.Pattern, ...] = PrivateAttr(default=())
    _title: Optional[re.Pattern] = PrivateAttr(default=None)

    @field_validator('patterns')
    @classmethod
    def validate_patterns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid person pattern {pattern!r}: {e}") from e
        return v

    @field_validator('title_pattern')
    @classmethod
    def validate_title_pattern(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"Invalid title pattern {v!r}: {e}") from e
        return v

    def model_post_init(self, context) -> None:
        self._compiled = tuple(re.compile(p, re.IGNORECASE) for p in self.patterns)
        self._title = re.compile(self.title_pattern, re.IGNORECASE)

    def is_person(self, text: str) -> bool:
        """Whether text looks like a person's name."""
        return any(p.search(text or '') for p in self._compiled)

    def has_title(self, text: str) -> bool:
        """Whether text carries a formal title (Dr, Mr, ...)."""
        return bool(self._title.search(text or ''))


# =============================================================================
# IRRELEVANT WORDS
# =============================================================================

class IrrelevantWords(BaseModel):
    """
    Lexicon of words removed during normalization.

    Attributes:
        categories: Category name -> exact words
        patterns: Regex fragments matched as whole words
    """
    categories: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    patterns: tuple[str, ...] = ()

    model_config = FROZEN

    @field_validator('categories', mode='before')
    @classmethod
    def lowercase_categories(cls, v):
        return {name: _lower_tokens(words or ()) for name, words in (v or {}).items()}

    @field_validator('patterns')
    @classmethod
    def validate_patterns(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for pattern in v:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid irrelevant-word pattern {pattern!r}: {e}") from e
        return v

    @model_validator(mode='after')
    def validate_alternation(self) -> 'IrrelevantWords':
        try:
            self.compile()
        except re.error as e:
            raise ValueError(f"Irrelevant-word lexicon does not compile: {e}") from e
        return self

    def words(self) -> frozenset[str]:
        """All exact words across categories."""
        return frozenset(w for words in self.categories.values() for w in words)

    def compile(self) -> Optional[re.Pattern]:
        """
        Build one word-boundary alternation for the whole lexicon.

        Returns:
            Compiled case-insensitive pattern, or None if the lexicon is empty
        """
        alternatives = [re.escape(w) for w in sorted(self.words(), key=len, reverse=True)]
        alternatives.extend(self.patterns)
        if not alternatives:
            return None
        return re.compile(r'\b(?:' + '|'.join(alternatives) + r')\b', re.IGNORECASE)


# =============================================================================
# BUNDLE
# =============================================================================

class RuleConfiguration(BaseModel):
    """
    Complete, immutable rule bundle.

    Example:
        config = RulesLoader().load()
        engine = ScoringEngine(config)
        print(config.thresholds.minimum_score)
    """
    version: str = '1'
    base_score: int = Field(gt=0)
    penalties: PenaltyWeights
    thresholds: Thresholds
    tokens: TokenSets = Field(default_factory=TokenSets)
    person_detection: PersonDetection = Field(default_factory=PersonDetection)
    irrelevant_words: IrrelevantWords = Field(default_factory=IrrelevantWords)

    model_config = FROZEN

    @model_validator(mode='after')
    def validate_scores_within_base(self) -> 'RuleConfiguration':
        """Decision thresholds must be reachable from the base score."""
        if self.thresholds.minimum_score > self.base_score:
            raise ValueError(
                f"minimum_score ({self.thresholds.minimum_score}) exceeds "
                f"base_score ({self.base_score})"
            )
        return self


__all__ = [
    'PenaltyWeights',
    'Thresholds',
    'SynonymGroup',
    'TokenSets',
    'PersonDetection',
    'IrrelevantWords',
    'RuleConfiguration',
]
