# Path: sched_match/process/__init__.py
"""
Process Layer for sched_match

The PROCESS layer holds the matching core:
- matcher/ - Candidate retrieval, penalty scoring and decisions

All components follow the IPO pattern:
- Read from INPUT layer (loaders)
- Process data (matching, scoring)
- Prepare for OUTPUT layer (reports)
"""

from sched_match.process.matcher import MatchingService, RulesLoader

__all__ = [
    'MatchingService',
    'RulesLoader',
]
