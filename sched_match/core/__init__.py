# Path: sched_match/core/__init__.py
"""
Core infrastructure for sched_match (logging).
"""
