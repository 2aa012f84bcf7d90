# Path: sched_match/exceptions.py
"""
Exception Hierarchy

Errors raised by sched_match. A missing match is never an exception:
it is a normal decision outcome carried by MatchResult.
"""

from typing import Optional


class SchedMatchError(Exception):
    """Base exception for sched_match errors."""

    pass


class ConfigurationError(SchedMatchError):
    """Raised when the rule bundle is missing, malformed or invalid."""

    pass


class CatalogError(SchedMatchError):
    """Raised when a catalog or query file cannot be read."""

    pass


class RuleEvaluationError(SchedMatchError):
    """
    A penalty rule raised while scoring one candidate.

    Never propagated by the scoring engine: it is returned inside a
    RuleOutcome and recorded on the ScoringResult.
    """

    def __init__(self, rule_name: str, original: Optional[BaseException] = None):
        self.rule_name = rule_name
        self.original = original
        detail = f": {original}" if original is not None else ''
        super().__init__(f"Rule '{rule_name}' failed{detail}")


__all__ = [
    'SchedMatchError',
    'ConfigurationError',
    'CatalogError',
    'RuleEvaluationError',
]
