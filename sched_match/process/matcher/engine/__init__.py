# Path: sched_match/process/matcher/engine/__init__.py
"""
Matching Engine Core

Core components of the matching engine:
- MatchingService: Caller-facing orchestrator
- RulesLoader: Loads the rule bundle from YAML
- CandidateRetriever: Exact, fuzzy and token-overlap meeting lookup
- InstructorResolver: Staged instructor name resolution
"""

from .rules_loader import RulesLoader
from .retriever import CandidateRetriever
from .instructor_resolver import InstructorResolver, InstructorMatch
from .coordinator import MatchingService

__all__ = [
    'RulesLoader',
    'CandidateRetriever',
    'InstructorResolver',
    'InstructorMatch',
    'MatchingService',
]
