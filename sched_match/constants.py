# Path: sched_match/constants.py
"""
System-Wide Constants for sched_match (Schedule Matching)

Central repository for constant values shared by the CLI, the input
readers and the report writer. Matching thresholds and penalty weights
are NOT here: they live in the rule bundle (dictionary/matching_rules.yaml).

Constants are organized by category:
- File Names
- JSON Keys (catalogs and queries)
- Console Display
- Exit Codes
"""

from typing import Final


# ==============================================================================
# FILE NAMES
# ==============================================================================

DEFAULT_RULES_FILE: Final[str] = 'matching_rules.yaml'
DEFAULT_REPORT_FILE: Final[str] = 'match_report.json'


# ==============================================================================
# JSON KEYS - Meeting Catalog
# ==============================================================================

class MeetingKeys:
    """
    JSON keys for meeting catalog entries.

    Both the canonical key and the provider spelling are accepted.
    """
    ID: Final[str] = 'id'
    ID_ALT: Final[str] = 'meeting_id'
    TOPIC: Final[str] = 'topic'
    HOST_ID: Final[str] = 'host_id'
    START_TIME: Final[str] = 'start_time'


# ==============================================================================
# JSON KEYS - User Catalog
# ==============================================================================

class UserKeys:
    """JSON keys for user catalog entries."""
    ID: Final[str] = 'id'
    EMAIL: Final[str] = 'email'
    FIRST_NAME: Final[str] = 'first_name'
    LAST_NAME: Final[str] = 'last_name'
    DISPLAY_NAME: Final[str] = 'display_name'


# ==============================================================================
# JSON KEYS - Schedule Queries
# ==============================================================================

class QueryKeys:
    """JSON keys for schedule query entries."""
    PROGRAM: Final[str] = 'program'
    INSTRUCTOR: Final[str] = 'instructor'
    OPTIONS: Final[str] = 'options'
    IGNORE_LEVEL_MISMATCH: Final[str] = 'ignore_level_mismatch'


# ==============================================================================
# CONSOLE DISPLAY
# ==============================================================================

MENU_WIDTH: Final[int] = 60
MENU_SEPARATOR: Final[str] = '-' * MENU_WIDTH
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'


# ==============================================================================
# EXIT CODES
# ==============================================================================

EXIT_OK: Final[int] = 0
EXIT_ERROR: Final[int] = 1
EXIT_INTERRUPTED: Final[int] = 130


__all__ = [
    'DEFAULT_RULES_FILE',
    'DEFAULT_REPORT_FILE',
    'MeetingKeys',
    'UserKeys',
    'QueryKeys',
    'MENU_WIDTH',
    'MENU_SEPARATOR',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
    'EXIT_OK',
    'EXIT_ERROR',
    'EXIT_INTERRUPTED',
]
