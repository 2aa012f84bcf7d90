# Path: sched_match/core/logger/__init__.py
"""
sched_match Logger Package

IPO-aware logging for the schedule matcher.

Provides separate log streams for:
- INPUT layer (catalog readers, CLI)
- PROCESS layer (retrieval, scoring, decisions)
- OUTPUT layer (match reports)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
