# Path: sched_match/__init__.py
"""
sched_match - Schedule to Meeting Matching

Matches free-text schedule lines (program plus instructor) against a
catalog of registered meetings with an explainable, penalty-based score.

Layers (IPO):
    loaders/  - INPUT: catalog and query readers
    process/  - PROCESS: retrieval, scoring, decisions
    output/   - OUTPUT: match reports
"""

__version__ = '0.1.0'
