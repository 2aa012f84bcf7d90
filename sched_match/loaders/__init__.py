# Path: sched_match/loaders/__init__.py
"""
sched_match Loaders Package

INPUT layer readers for the matcher.

Data Sources:
    - meetings: Meeting catalog export (id, topic, host_id, start_time)
    - users: User catalog export (id, email, names)
    - queries: Schedule lines (program, instructor, options)

Example:
    from sched_match.loaders import CatalogReader

    reader = CatalogReader()
    meetings = reader.read_meetings(Path('meetings.json'))
"""

from .catalog_reader import CatalogReader

__all__ = ['CatalogReader']
