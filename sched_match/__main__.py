# Path: sched_match/__main__.py
"""
Module entry point for sched_match.

Allows running the package with:
    python -m sched_match --meetings meetings.json --queries schedule.json
"""

import sys

from .main import main

if __name__ == '__main__':
    sys.exit(main())
