# Path: sched_match/output/__init__.py
"""
Output Module for sched_match

Generates machine-readable (JSON) and console output from match results.

Usage:
    from sched_match.output import ReportGenerator

    generator = ReportGenerator(config)
    report = generator.generate(results)
    path = generator.write(report)
    print(generator.to_console(report))
"""

from .report_generator import ReportGenerator

__all__ = ['ReportGenerator']
